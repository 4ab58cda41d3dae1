"""Render templates and write generated output.

Takes the context from context_builder and produces
namabar/endpoints.py and namabar/endpoints.pyi.
"""

from __future__ import annotations

import json
import textwrap
from pathlib import Path
from typing import Any

import jinja2

TEMPLATE_DIR = Path(__file__).parent / "templates"
OUTPUT_DIR = Path(__file__).parent.parent / "namabar"

_OUTPUTS = {
    "endpoints.py": "endpoints.py.j2",
    "endpoints.pyi": "endpoints.pyi.j2",
}


def _pystr(value: str) -> str:
    """Render a Python string literal."""
    return json.dumps(value)


def _docstring(text: str) -> str:
    return text.replace("\\", "\\\\").replace('"""', '\\"\\"\\"')


def _comment(text: str) -> str:
    return " ".join(text.split())


def _docwrap(text: str, indent: int, width: int = 79) -> str:
    """Wrap text for a docstring body whose first line is already indented."""
    lines = textwrap.wrap(text, width=width - indent) or [""]
    return ("\n" + " " * indent).join(lines)


def _stub_args(operation: dict[str, Any]) -> str:
    args = ["self"]
    if operation["params"]:
        args.append("*")
        args.extend(f"{p['py_name']}: {p['annotation']}" for p in operation["required_params"])
        args.extend(f"{p['py_name']}: {p['annotation']} = ..." for p in operation["optional_params"])
    return ", ".join(args)


def create_environment() -> jinja2.Environment:
    env = jinja2.Environment(
        loader=jinja2.FileSystemLoader(str(TEMPLATE_DIR)),
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=jinja2.StrictUndefined,
    )
    env.filters["pystr"] = _pystr
    env.filters["docstring"] = _docstring
    env.filters["comment"] = _comment
    env.filters["docwrap"] = _docwrap
    env.filters["stub_args"] = _stub_args
    return env


def render(template_name: str, context: dict[str, Any]) -> str:
    return create_environment().get_template(template_name).render(**context)


def render_endpoints(context: dict[str, Any]) -> str:
    """Render the runtime endpoint methods module."""
    return render(_OUTPUTS["endpoints.py"], context)


def render_signatures(context: dict[str, Any]) -> str:
    """Render the type-signature stub for the endpoint methods."""
    return render(_OUTPUTS["endpoints.pyi"], context)


def generate(context: dict[str, Any], output_dir: Path | None = None) -> list[Path]:
    """Render both templates and write them to the output directory.

    Everything is rendered before anything is written, so a template
    error never leaves a half-updated package behind.
    """
    out = output_dir or OUTPUT_DIR
    rendered = {
        "endpoints.py": render_endpoints(context),
        "endpoints.pyi": render_signatures(context),
    }

    out.mkdir(parents=True, exist_ok=True)
    written = []
    for filename, content in rendered.items():
        output_path = out / filename
        output_path.write_text(content, encoding="utf-8")
        print(f"Generated {output_path} ({context['operation_count']} operations)")
        written.append(output_path)
    return written
