"""Startup configuration for the edge device management daemon."""

from edge_daemon.errors import ConfigurationError

__version__ = "0.1.0"

__all__ = ["ConfigurationError", "__version__"]
