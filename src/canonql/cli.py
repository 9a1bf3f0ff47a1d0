"""canonql CLI: canonical ordering, fingerprints and diffs of GraphQL schemas."""

import argparse
import logging
import sys
from importlib.metadata import version as get_version, PackageNotFoundError
from pathlib import Path
from typing import Optional

from graphql import GraphQLError, GraphQLSchema, build_schema


def _load_schema(path: Path) -> GraphQLSchema:
    """Build a schema from an SDL file."""
    return build_schema(path.read_text(encoding="utf-8"))


def _write_output(text: str, output: Optional[Path], quiet: bool) -> None:
    """Write text to output if given, otherwise to stdout."""
    if output is None:
        print(text)
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text + "\n", encoding="utf-8")
    if not quiet:
        print(f"[OK] Canonical schema written: {output}")


def _build_parser() -> argparse.ArgumentParser:
    try:
        canonql_version = get_version("canonql")
    except PackageNotFoundError:
        canonql_version = "dev"

    parser = argparse.ArgumentParser(
        prog="canonql",
        description="canonql: Deterministic canonical ordering for GraphQL schemas"
    )
    parser.add_argument("--version", action="version", version=f"canonql {canonql_version}")
    # Common arguments
    parent_parser = argparse.ArgumentParser(add_help=False)
    parent_parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress all non-error output."
    )
    parent_parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging."
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    sort_parser = subparsers.add_parser(
        "sort",
        help="Print a schema in canonical order",
        parents=[parent_parser]
    )
    sort_parser.add_argument("schema", type=Path, help="Path to schema SDL file")
    sort_parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Write the canonical schema to this file instead of stdout"
    )

    fingerprint_parser = subparsers.add_parser(
        "fingerprint",
        help="Print the order-insensitive fingerprint of a schema",
        parents=[parent_parser]
    )
    fingerprint_parser.add_argument("schema", type=Path, help="Path to schema SDL file")

    diff_parser = subparsers.add_parser(
        "diff",
        help="Diff the canonical forms of two schemas (exit 1 if they differ)",
        parents=[parent_parser]
    )
    diff_parser.add_argument("schema_a", type=Path, help="Path to baseline schema SDL file")
    diff_parser.add_argument("schema_b", type=Path, help="Path to compared schema SDL file")
    diff_parser.add_argument(
        "--context",
        type=int,
        default=3,
        help="Lines of context in the unified diff (default: 3)"
    )

    summary_parser = subparsers.add_parser(
        "summary",
        help="Print a canonical JSON summary of a schema",
        parents=[parent_parser]
    )
    summary_parser.add_argument("schema", type=Path, help="Path to schema SDL file")

    return parser


def main(argv=None):
    """Main CLI entry point for canonql commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        from .api import compare_schemas, summarize_schema
        from ._internal.canonical_json import canonical_dumps
        from .kernel.hash_utils import compute_schema_fingerprint, print_canonical_schema

        if args.command == "sort":
            schema = _load_schema(args.schema)
            _write_output(print_canonical_schema(schema), args.output, args.quiet)
        elif args.command == "fingerprint":
            print(compute_schema_fingerprint(_load_schema(args.schema)))
        elif args.command == "diff":
            result = compare_schemas(
                _load_schema(args.schema_a),
                _load_schema(args.schema_b),
                context=args.context,
            )
            if result.equivalent:
                if not args.quiet:
                    print("[OK] Schemas are equivalent")
                    print(f"  Fingerprint: {result.fingerprint_a}")
                return
            if not args.quiet:
                for line in result.diff:
                    print(line)
                if result.added_types:
                    print(f"  Added types: {', '.join(result.added_types)}")
                if result.removed_types:
                    print(f"  Removed types: {', '.join(result.removed_types)}")
            sys.exit(1)
        elif args.command == "summary":
            print(canonical_dumps(summarize_schema(_load_schema(args.schema))))
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except (GraphQLError, TypeError) as e:
        print(f"Error: invalid schema: {e}", file=sys.stderr)
        sys.exit(1)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        print(f"Unexpected error: {e}", file=sys.stderr)
        import traceback
        traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
