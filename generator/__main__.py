"""Entry point: python -m generator

Fetches the Namabar OpenAPI spec, generates namabar/endpoints.py and
namabar/endpoints.pyi.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .codegen import OUTPUT_DIR, generate
from .context_builder import build_context
from .errors import SpecError
from .loader import default_spec_url, load_spec


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="python -m generator",
        description="Generate Namabar endpoint methods from the OpenAPI spec.",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--spec-url", default=None, help="Spec URL (default: $NAMABAR_SPEC_URL or the public Namabar spec)")
    source.add_argument("--spec-file", type=Path, default=None, help="Read the spec from a local JSON file")
    parser.add_argument("-o", "--output-dir", type=Path, default=OUTPUT_DIR, help="Output directory")
    args = parser.parse_args(argv)

    spec_source = args.spec_file or args.spec_url or default_spec_url()

    print("Namabar OpenAPI generator")
    print("=" * 60)
    print(f"Loading spec from {spec_source}...")

    try:
        spec = load_spec(spec_source)
        context = build_context(spec, spec_url=str(spec_source))
        generate(context, args.output_dir)
    except SpecError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print("=" * 60)
    print("Generation complete.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
