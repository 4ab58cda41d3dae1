"""Derive Python identifiers from OpenAPI operations and parameters.

Method names come from the operationId when there is one, otherwise
from the HTTP verb and path:

  operationId "CreateVerificationCode"  -> createverificationcode
  operationId "send-message"            -> send_message
  GET /messages/{id}/status (no id)     -> get_messages_id_status
  GET / (no id)                         -> get_  (Client.get is taken)

Parameter names are snake_cased wire names:

  externalId   -> external_id
  templateData -> template_data
"""

from __future__ import annotations

import keyword
import re

# Locals and builtins used by the generated method bodies.
_RESERVED = {"self", "url", "opts", "query", "extra_headers", "body_data", "str"}

# Client attributes that a generated method of the same name would shadow.
_CLIENT_MEMBERS = {
    "get", "post", "put", "patch", "delete", "close",
    "default_options", "headers", "config", "base_url", "base_uri",
}


def camel_to_snake(name: str) -> str:
    """Convert camelCase or PascalCase to snake_case."""
    s1 = re.sub(r"([A-Z]+)([A-Z][a-z])", r"\1_\2", name)
    s2 = re.sub(r"([a-z\d])([A-Z])", r"\1_\2", s1)
    return re.sub(r"[.\-\s]+", "_", s2).lower()


def sanitize_identifier(raw: str) -> str:
    """Collapse everything outside [0-9A-Za-z_] into single underscores."""
    name = re.sub(r"[^0-9A-Za-z_]", "_", raw.strip())
    name = re.sub(r"_+", "_", name)
    return name.strip("_").lower()


def build_method_name(method: str, path: str, operation_id: str | None = None) -> str:
    """Build a method name for an operation."""
    base = operation_id or f"{method}_{path}"
    name = sanitize_identifier(base)
    if not name:
        name = sanitize_identifier(f"{method}_{path}")
    if name[:1].isdigit():
        name = f"op_{name}"
    if name in _CLIENT_MEMBERS or keyword.iskeyword(name):
        name += "_"
    return name


def build_param_name(name: str) -> str:
    """Build a keyword-argument name for a parameter wire name."""
    py_name = sanitize_identifier(camel_to_snake(name))
    if not py_name:
        py_name = "value"
    if py_name[:1].isdigit():
        py_name = f"p_{py_name}"
    if keyword.iskeyword(py_name) or py_name in _RESERVED:
        py_name += "_"
    return py_name
