"""Load and validate the Namabar OpenAPI spec.

Fetches the document over HTTP (or reads it from disk), checks the
top-level structure, and resolves $ref pointers.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

import httpx

from .errors import SpecError

DEFAULT_SPEC_URL = "https://api.namabar.krd/openapi/v1.json"

REQUIRED_KEYS = ("openapi", "paths", "components")


def default_spec_url() -> str:
    """The spec URL to use when none is given; NAMABAR_SPEC_URL overrides it."""
    return os.environ.get("NAMABAR_SPEC_URL") or DEFAULT_SPEC_URL


def fetch_spec(url: str, timeout: float = 30.0) -> dict[str, Any]:
    """Fetch and parse the OpenAPI spec from a URL."""
    try:
        resp = httpx.get(url, timeout=timeout, follow_redirects=True)
        resp.raise_for_status()
        data = resp.json()
    except (httpx.HTTPError, ValueError) as exc:
        raise SpecError(f"Failed to fetch or parse OpenAPI spec: {exc}") from exc
    return _ensure_object(data)


def load_spec_file(path: str | Path) -> dict[str, Any]:
    """Read the OpenAPI spec from a local JSON file."""
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as exc:
        raise SpecError(f"Failed to fetch or parse OpenAPI spec: {exc}") from exc
    return _ensure_object(data)


def _ensure_object(data: Any) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise SpecError(
            "Failed to fetch or parse OpenAPI spec: document must be a JSON object"
        )
    return data


def validate_spec(spec: dict[str, Any]) -> None:
    """Raise SpecError naming every required top-level key that is absent."""
    missing = [key for key in REQUIRED_KEYS if key not in spec]
    if missing:
        raise SpecError(
            f"Invalid OpenAPI spec: missing required keys: {', '.join(missing)}"
        )
    for key in ("paths", "components"):
        if not isinstance(spec[key], dict):
            raise SpecError(f"Invalid OpenAPI spec: '{key}' must be an object")


def load_spec(source: str | Path | None = None) -> dict[str, Any]:
    """Load the spec from a URL or file path and validate it."""
    source = source or default_spec_url()
    if str(source).startswith(("http://", "https://")):
        spec = fetch_spec(str(source))
    else:
        spec = load_spec_file(source)
    validate_spec(spec)
    return spec


def get_paths(spec: dict[str, Any]) -> dict[str, Any]:
    """Extract paths from the spec."""
    return spec.get("paths", {})


def get_schemas(spec: dict[str, Any]) -> dict[str, Any]:
    """Extract component schemas from the spec."""
    return spec.get("components", {}).get("schemas", {})


def resolve_ref(spec: dict[str, Any], ref: str) -> dict[str, Any]:
    """Resolve a local $ref pointer in the spec.

    '#/components/schemas/X' returns the very dict stored under X.
    """
    if not ref.startswith("#/"):
        raise SpecError(f"Unsupported $ref (only local refs are allowed): {ref}")

    node: Any = spec
    for part in ref[2:].split("/"):
        key = part.replace("~1", "/").replace("~0", "~")
        if not isinstance(node, dict) or key not in node:
            raise SpecError(f"Unresolvable $ref: {ref}")
        node = node[key]

    if not isinstance(node, dict):
        raise SpecError(f"$ref does not point to an object: {ref}")
    return node
