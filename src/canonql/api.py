"""Public API for canonql.

High-level functions that return complete, structured results. Clients
should use these (or the re-exports in the package root) instead of reaching
into canonql.kernel.
"""

import difflib
from typing import Dict, List, Optional

from graphql import GraphQLNamedType, GraphQLSchema, print_schema
from pydantic import BaseModel, Field

from canonql.kernel.assembler import canonicalize
from canonql.kernel.classifier import group_types_by_category
from canonql.kernel.comparators import sort_camel_case_by
from canonql.kernel.hash_utils import hash_text, print_canonical_schema


class SchemaComparison(BaseModel):
    """Result of comparing the canonical forms of two schemas."""
    equivalent: bool
    fingerprint_a: str
    fingerprint_b: str
    added_types: List[str] = Field(default_factory=list)  # In b, not in a (camelCase order)
    removed_types: List[str] = Field(default_factory=list)  # In a, not in b (camelCase order)
    diff: List[str] = Field(default_factory=list)  # Unified diff lines of the canonical SDL


class SchemaSummary(BaseModel):
    """Overview of a schema in canonical order."""
    fingerprint: str
    query_type: Optional[str] = None
    mutation_type: Optional[str] = None
    subscription_type: Optional[str] = None
    types: Dict[str, List[str]]  # category -> type names, buckets in canonical order
    directives: List[str]  # plain order


def _root_name(type_: Optional[GraphQLNamedType]) -> Optional[str]:
    return type_.name if type_ is not None else None


def compare_schemas(
    schema_a: GraphQLSchema,
    schema_b: GraphQLSchema,
    context: int = 3,
) -> SchemaComparison:
    """
    Compare two schemas after canonicalizing both.

    Declaration order never produces a difference; only real content changes
    show up in the diff.

    Args:
        schema_a: Baseline schema
        schema_b: Schema to compare against the baseline
        context: Number of context lines in the unified diff

    Returns:
        SchemaComparison
    """
    sdl_a = print_canonical_schema(schema_a)
    sdl_b = print_canonical_schema(schema_b)
    fingerprint_a = hash_text(sdl_a)
    fingerprint_b = hash_text(sdl_b)

    names_a = set(schema_a.type_map)
    names_b = set(schema_b.type_map)

    diff_lines = list(
        difflib.unified_diff(
            sdl_a.splitlines(),
            sdl_b.splitlines(),
            fromfile="a",
            tofile="b",
            lineterm="",
            n=context,
        )
    )

    return SchemaComparison(
        equivalent=fingerprint_a == fingerprint_b,
        fingerprint_a=fingerprint_a,
        fingerprint_b=fingerprint_b,
        added_types=sort_camel_case_by(names_b - names_a, str),
        removed_types=sort_camel_case_by(names_a - names_b, str),
        diff=diff_lines,
    )


def summarize_schema(schema: GraphQLSchema) -> SchemaSummary:
    """Summarize a schema: fingerprint, roots, types by category, directives."""
    canonical = canonicalize(schema)
    buckets = group_types_by_category(canonical.type_map.values())
    return SchemaSummary(
        fingerprint=hash_text(print_schema(canonical)),
        query_type=_root_name(canonical.query_type),
        mutation_type=_root_name(canonical.mutation_type),
        subscription_type=_root_name(canonical.subscription_type),
        types={
            category.value: [type_.name for type_ in members]
            for category, members in buckets.items()
        },
        directives=[directive.name for directive in canonical.directives],
    )
