"""Python client for the Namabar messaging and verification API."""

from __future__ import annotations

from typing import Any

from .client import Client
from .configuration import Configuration, configure, get_configuration, reset
from .errors import ConfigurationError, Error
from .version import VERSION

__version__ = VERSION


def client(*args: Any, **kwargs: Any) -> Client:
    """Create a Client from the global configuration."""
    return Client(*args, **kwargs)


__all__ = [
    "Client",
    "Configuration",
    "ConfigurationError",
    "Error",
    "VERSION",
    "client",
    "configure",
    "get_configuration",
    "reset",
]
