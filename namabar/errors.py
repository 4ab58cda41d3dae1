"""Exceptions raised by the namabar SDK.

HTTP error statuses are not raised; endpoint methods hand back the
``httpx.Response`` and leave status handling to the caller.
"""

from __future__ import annotations


class Error(Exception):
    """Base class for every namabar error."""


class ConfigurationError(Error):
    """The client was created without a usable configuration."""
