"""Errors raised while reading an OpenAPI document."""

from __future__ import annotations


class SpecError(Exception):
    """The OpenAPI document is unreachable, unparsable, or malformed."""
