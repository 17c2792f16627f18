"""Notice Gate - plugin host with one-time legal notice acceptance."""

__version__ = "0.1.0"
