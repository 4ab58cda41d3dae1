"""API credentials and the process-wide default configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Callable


@dataclass
class Configuration:
    """Credentials for the Namabar API.

    Example::

        config = Configuration(api_key=os.environ.get("NAMABAR_API_KEY"))
    """

    api_key: str | None = None
    service_id: str | None = None

    @classmethod
    def from_env(cls) -> Configuration:
        """Read NAMABAR_API_KEY and NAMABAR_SERVICE_ID from the environment."""
        return cls(
            api_key=os.environ.get("NAMABAR_API_KEY"),
            service_id=os.environ.get("NAMABAR_SERVICE_ID"),
        )


_configuration: Configuration | None = None


def get_configuration() -> Configuration | None:
    """Return the global configuration, or None if configure() was never called."""
    return _configuration


def set_configuration(config: Configuration | None) -> None:
    global _configuration
    _configuration = config


def configure(
    fn: Callable[[Configuration], Any] | None = None,
    **settings: Any,
) -> Configuration:
    """Create (on first use) and update the global configuration.

    Accepts keyword settings, a callback that receives the
    configuration, or both::

        namabar.configure(api_key="...")

        def load_credentials(config):
            config.api_key = os.environ["NAMABAR_API_KEY"]

        namabar.configure(load_credentials)
    """
    global _configuration
    if _configuration is None:
        _configuration = Configuration()

    for key, value in settings.items():
        if not hasattr(_configuration, key):
            raise TypeError(f"Unknown configuration setting: {key}")
        setattr(_configuration, key, value)

    if fn is not None:
        fn(_configuration)
    return _configuration


def reset() -> None:
    """Drop the global configuration."""
    set_configuration(None)
