"""Collect typed parameters for each OpenAPI operation.

Handles:
- Path, query and header parameters (including $ref'd parameter objects)
- JSON request body properties, with one level of $ref resolution
- OpenAPI type -> Python type mapping via a fixed lookup table
- Optional parameters annotated as '<type> | None'
"""

from __future__ import annotations

import re
from typing import Any

from .errors import SpecError
from .loader import resolve_ref
from .naming import build_param_name

TYPE_MAP: dict[str, str] = {
    "integer": "int",
    "boolean": "bool",
    "number": "float",
    "array": "list[Any]",
    "object": "dict[str, Any]",
}

DEFAULT_TYPE = "str"

_LOCATIONS = ("path", "query", "header")


def strip_html(text: str) -> str:
    """Strip HTML tags and collapse whitespace."""
    text = re.sub(r"<[^>]+>", "", text)
    return re.sub(r"\s+", " ", text).strip()


def map_openapi_type(openapi_type: str | None) -> str:
    """Map an OpenAPI schema type to a Python type name."""
    return TYPE_MAP.get(openapi_type or "", DEFAULT_TYPE)


def optional_annotation(base: str) -> str:
    return f"{base} | None"


def resolve_request_body_schema(
    spec: dict[str, Any],
    operation: dict[str, Any],
) -> dict[str, Any] | None:
    """Return the application/json request body schema, if any."""
    request_body = operation.get("requestBody") or {}
    if "$ref" in request_body:
        request_body = resolve_ref(spec, request_body["$ref"])
    schema = (
        request_body.get("content", {})
        .get("application/json", {})
        .get("schema")
    )
    if not schema:
        return None
    if "$ref" in schema:
        return resolve_ref(spec, schema["$ref"])
    return schema


def extract_body_parameters(
    spec: dict[str, Any],
    operation: dict[str, Any],
) -> list[dict[str, Any]]:
    """Turn each body-schema property into a raw parameter definition."""
    schema = resolve_request_body_schema(spec, operation)
    if not schema:
        return []

    properties = schema.get("properties") or {}
    if not isinstance(properties, dict):
        raise SpecError("request body schema 'properties' must be an object")

    required = set(schema.get("required") or [])
    return [
        {
            "name": name,
            "in": "body",
            "required": name in required,
            "schema": info or {},
            "description": (info or {}).get("description", ""),
        }
        for name, info in properties.items()
    ]


def _explicit_parameters(
    spec: dict[str, Any],
    operation: dict[str, Any],
) -> list[dict[str, Any]]:
    raw = operation.get("parameters") or []
    if not isinstance(raw, list):
        raise SpecError("'parameters' must be an array")

    params = []
    for index, param in enumerate(raw):
        if isinstance(param, dict) and "$ref" in param:
            param = resolve_ref(spec, param["$ref"])
        if not isinstance(param, dict):
            raise SpecError(f"parameter {index} must be an object")
        if not isinstance(param.get("name"), str) or not param["name"]:
            raise SpecError(f"parameter {index} is missing 'name'")
        if param.get("in", "query") not in _LOCATIONS:
            continue
        params.append(param)
    return params


def _param_type(spec: dict[str, Any], schema: dict[str, Any]) -> str:
    # Only the top level of a $ref'd property schema is inspected.
    if "$ref" in schema:
        schema = resolve_ref(spec, schema["$ref"])
    return map_openapi_type(schema.get("type"))


def parse_parameters(
    spec: dict[str, Any],
    operation: dict[str, Any],
) -> list[dict[str, Any]]:
    """Parse all parameters for an operation.

    Explicit parameters come first, then body properties. When two
    entries share a Python name the later one replaces the earlier, but
    a replaced path parameter keeps its ``path_name`` so the URL
    placeholder is still filled from the surviving argument, and the
    argument stays required.
    """
    raw = _explicit_parameters(spec, operation) + extract_body_parameters(spec, operation)

    params: dict[str, dict[str, Any]] = {}
    for param in raw:
        location = param.get("in", "query")
        py_name = build_param_name(param["name"])
        previous = params.get(py_name)
        path_name = param["name"] if location == "path" else None
        if path_name is None and previous is not None:
            path_name = previous["path_name"]

        # Path parameters are always required in OpenAPI.
        is_required = bool(param.get("required")) or path_name is not None
        base_type = _param_type(spec, param.get("schema") or {})

        params[py_name] = {
            "name": param["name"],
            "py_name": py_name,
            "type": base_type,
            "annotation": base_type if is_required else optional_annotation(base_type),
            "required": is_required,
            "location": location,
            "path_name": path_name,
            "description": strip_html(param.get("description") or ""),
        }

    return list(params.values())
