"""canonql: deterministic canonical ordering for GraphQL schemas."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("canonql")
except PackageNotFoundError:
    __version__ = "dev"

# Public API exports
from canonql.api import SchemaComparison, SchemaSummary, compare_schemas, summarize_schema
from canonql.kernel import (
    CanonicalizationError,
    UnclassifiableTypeError,
    UnresolvedReferenceError,
    canonicalize,
    canonicalize_sdl,
    compute_schema_fingerprint,
    print_canonical_schema,
)

__all__ = [
    "__version__",
    "canonicalize",
    "canonicalize_sdl",
    "print_canonical_schema",
    "compute_schema_fingerprint",
    "compare_schemas",
    "summarize_schema",
    "SchemaComparison",
    "SchemaSummary",
    "CanonicalizationError",
    "UnclassifiableTypeError",
    "UnresolvedReferenceError",
]
