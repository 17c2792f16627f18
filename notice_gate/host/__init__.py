"""Host services: plugin discovery, disabled list and process lifecycle."""

from .disabled_plugins import DisabledPlugins
from .lifecycle import HostLifecycle, ProcessLifecycle
from .plugin_loader import PluginEntry, create_plugins, scan_plugins

__all__ = [
    "DisabledPlugins",
    "HostLifecycle",
    "ProcessLifecycle",
    "PluginEntry",
    "create_plugins",
    "scan_plugins",
]
