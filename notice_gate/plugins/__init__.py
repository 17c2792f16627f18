"""Plugin API for host extensions."""

from .base_plugin import Plugin

__all__ = ["Plugin"]
