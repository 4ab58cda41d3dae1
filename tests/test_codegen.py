"""Tests for the codegen module."""

from __future__ import annotations

import ast
import inspect
from pathlib import Path
from typing import Any

import jinja2
import pytest

from generator.codegen import generate, render_endpoints, render_signatures
from generator.context_builder import build_context

PACKAGE_DIR = Path(__file__).parent.parent / "namabar"


def _strip_docstrings(tree: ast.AST) -> ast.AST:
    """Drop docstrings so two modules compare on code alone."""
    for node in ast.walk(tree):
        if isinstance(node, (ast.Module, ast.ClassDef, ast.FunctionDef)):
            body = node.body
            if (
                body
                and isinstance(body[0], ast.Expr)
                and isinstance(body[0].value, ast.Constant)
                and isinstance(body[0].value.value, str)
            ):
                node.body = body[1:] or [ast.Pass()]
    return tree


def _code_shape(source: str) -> str:
    return ast.dump(_strip_docstrings(ast.parse(source)))


def _load_endpoints_class(source: str) -> type:
    namespace: dict[str, Any] = {}
    exec(compile(source, "<endpoints>", "exec"), namespace)
    return namespace["Endpoints"]


@pytest.fixture
def context(spec) -> dict[str, Any]:
    return build_context(spec)


class TestRenderEndpoints:
    """Runtime method module."""

    def test_compiles(self, context):
        compile(render_endpoints(context), "<endpoints>", "exec")

    def test_matches_checked_in_module(self, context):
        """namabar/endpoints.py is the rendering of spec/openapi.json."""
        checked_in = (PACKAGE_DIR / "endpoints.py").read_text(encoding="utf-8")
        assert _code_shape(render_endpoints(context)) == _code_shape(checked_in)

    def test_one_method_per_operation(self, context):
        cls = _load_endpoints_class(render_endpoints(context))
        for op in context["operations"]:
            assert callable(getattr(cls, op["name"], None)), op["name"]

    def test_keyword_only_signature(self, context):
        cls = _load_endpoints_class(render_endpoints(context))
        sig = inspect.signature(cls.create_verification_code)
        params = list(sig.parameters.values())
        assert params[0].name == "self"
        assert all(p.kind is inspect.Parameter.KEYWORD_ONLY for p in params[1:])
        assert sig.parameters["to"].default is inspect.Parameter.empty
        assert sig.parameters["service_id"].default is inspect.Parameter.empty
        assert sig.parameters["locale"].default is None
        assert sig.parameters["template_data"].default is None

    def test_optional_annotations(self, context):
        source = render_endpoints(context)
        assert "locale: str | None = None," in source
        assert "template_data: dict[str, Any] | None = None," in source
        assert "        to: str,\n" in source

    def test_summary_in_docstring(self, context):
        cls = _load_endpoints_class(render_endpoints(context))
        assert inspect.getdoc(cls.send_message).splitlines()[0] == "Send New Message"

    def test_query_and_header_params(self):
        spec = {
            "paths": {
                "/messages": {
                    "get": {
                        "operationId": "list-messages",
                        "parameters": [
                            {"name": "pageSize", "in": "query", "schema": {"type": "integer"}},
                            {"name": "X-Trace", "in": "header", "schema": {"type": "string"}},
                        ],
                    }
                }
            }
        }
        source = render_endpoints(build_context(spec))
        compile(source, "<endpoints>", "exec")
        assert '"pageSize": page_size,' in source
        assert 'opts["params"] = query' in source
        assert '"X-Trace": x_trace,' in source

    def test_awkward_text_is_escaped(self):
        spec = {
            "paths": {
                "/a": {
                    "get": {
                        "summary": 'Quotes """ and \\ backslash',
                        "description": 'More """ quotes',
                    }
                }
            }
        }
        cls = _load_endpoints_class(render_endpoints(build_context(spec)))
        assert '"""' in inspect.getdoc(cls.get_a)

    def test_no_operations(self):
        cls = _load_endpoints_class(render_endpoints(build_context({"paths": {}})))
        assert cls.__name__ == "Endpoints"


class TestRenderSignatures:
    """Type-signature stub."""

    def test_parses(self, context):
        ast.parse(render_signatures(context))

    def test_matches_checked_in_stub(self, context):
        checked_in = (PACKAGE_DIR / "endpoints.pyi").read_text(encoding="utf-8")
        assert _code_shape(render_signatures(context)) == _code_shape(checked_in)

    def test_signature_lines(self, context):
        stub = render_signatures(context)
        assert "def get_message(self, *, id: str) -> httpx.Response: ..." in stub
        assert "locale: str | None = ..." in stub
        assert "to: str," in stub

    def test_parameterless_operation(self):
        stub = render_signatures(build_context({"paths": {"/ping": {"get": {}}}}))
        assert "def get_ping(self) -> httpx.Response: ..." in stub

    def test_no_operations(self):
        stub = render_signatures(build_context({"paths": {}}))
        ast.parse(stub)
        assert "    pass" in stub


class TestGenerate:

    def test_writes_both_files(self, context, tmp_path, capsys):
        written = generate(context, tmp_path / "out")
        assert [p.name for p in written] == ["endpoints.py", "endpoints.pyi"]
        for path in written:
            assert path.exists()
        assert "6 operations" in capsys.readouterr().out

    def test_no_partial_output(self, tmp_path):
        """A rendering failure must not leave any file behind."""
        with pytest.raises(jinja2.UndefinedError):
            generate({"operations": []}, tmp_path)
        assert list(tmp_path.iterdir()) == []
