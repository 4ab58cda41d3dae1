"""Build Jinja2 template context from the parsed OpenAPI spec.

Walks every operation in document order, names it, collects its
parameters, and assembles the context for both endpoint templates.
"""

from __future__ import annotations

from typing import Any

from .errors import SpecError
from .loader import DEFAULT_SPEC_URL, get_paths
from .naming import build_method_name
from .schema_parser import parse_parameters, strip_html

HTTP_METHODS = ("get", "post", "put", "patch", "delete", "head", "options")


def _deduplicate_method_names(operations: list[dict[str, Any]]) -> None:
    """Ensure all method names are unique by appending method suffix if needed."""
    seen: dict[str, int] = {}
    for op in operations:
        name = op["name"]
        if name in seen:
            seen[name] += 1
            op["name"] = f"{name}_{op['method']}"
        else:
            seen[name] = 1

    final_seen: dict[str, int] = {}
    for op in operations:
        name = op["name"]
        if name in final_seen:
            final_seen[name] += 1
            op["name"] = f"{name}_{final_seen[name]}"
        else:
            final_seen[name] = 1


def build_operation(
    spec: dict[str, Any],
    method: str,
    path: str,
    operation: dict[str, Any],
    shared_params: list[dict[str, Any]] | None = None,
) -> dict[str, Any]:
    """Build the template record for a single operation."""
    if not isinstance(operation, dict):
        raise SpecError(f"{method.upper()} {path}: operation must be an object")
    operation_id = operation.get("operationId")
    try:
        if shared_params:
            own_params = operation.get("parameters") or []
            if not isinstance(own_params, list):
                raise SpecError("'parameters' must be an array")
            # Path-item level parameters apply unless the operation overrides them.
            own = {_param_key(p) for p in own_params}
            inherited = [p for p in shared_params if _param_key(p) not in own]
            operation = {**operation, "parameters": inherited + own_params}

        params = parse_parameters(spec, operation)
    except SpecError as exc:
        raise SpecError(f"{method.upper()} {path}: {exc}") from exc

    return {
        "name": build_method_name(method, path, operation_id),
        "method": method,
        "path": path,
        "operation_id": operation_id,
        "title": operation_id or f"{method} {path}",
        "summary": strip_html(operation.get("summary") or ""),
        "description": strip_html(operation.get("description") or ""),
        "params": params,
        "required_params": [p for p in params if p["required"]],
        "optional_params": [p for p in params if not p["required"]],
        "path_params": [p for p in params if p["path_name"]],
        "query_params": [p for p in params if p["location"] == "query"],
        "header_params": [p for p in params if p["location"] == "header"],
        "body_params": [p for p in params if p["location"] == "body"],
    }


def _param_key(param: Any) -> tuple[Any, Any]:
    if not isinstance(param, dict):
        return (None, None)
    return (param.get("name"), param.get("in"))


def build_context(spec: dict[str, Any], spec_url: str = DEFAULT_SPEC_URL) -> dict[str, Any]:
    """Build the full template context from the OpenAPI spec."""
    operations: list[dict[str, Any]] = []

    paths = get_paths(spec)
    if not isinstance(paths, dict):
        raise SpecError("'paths' must be an object")
    for path, path_item in paths.items():
        if not isinstance(path_item, dict):
            raise SpecError(f"path item {path} must be an object")
        shared_params = path_item.get("parameters") or []
        if not isinstance(shared_params, list):
            raise SpecError(f"path item {path}: 'parameters' must be an array")
        for method, operation in path_item.items():
            if method not in HTTP_METHODS:
                continue
            operations.append(build_operation(spec, method, path, operation, shared_params))

    _deduplicate_method_names(operations)

    info = spec.get("info", {})
    return {
        "operations": operations,
        "operation_count": len(operations),
        "api_title": info.get("title", "Namabar API"),
        "api_version": info.get("version", "unknown"),
        "spec_url": spec_url,
    }
