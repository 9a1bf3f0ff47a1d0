"""Canonical printing and hashing of schemas.

Two schemas that differ only in declaration order print to the same canonical
SDL and therefore hash to the same fingerprint.
"""

import hashlib
from typing import Union

from graphql import GraphQLSchema, build_schema, print_schema

from .assembler import canonicalize


def hash_text(content: Union[str, bytes]) -> str:
    """Compute SHA256 of text content.

    Args:
        content: Content as string (encoded as UTF-8) or bytes

    Returns:
        SHA256 hash as hex string (prefixed with "sha256:")
    """
    if isinstance(content, str):
        content = content.encode("utf-8")
    return f"sha256:{hashlib.sha256(content).hexdigest()}"


def print_canonical_schema(schema: GraphQLSchema) -> str:
    """Print the canonical form of a schema as SDL."""
    return print_schema(canonicalize(schema))


def canonicalize_sdl(source: str) -> str:
    """Build a schema from SDL text and print its canonical form."""
    return print_canonical_schema(build_schema(source))


def compute_schema_fingerprint(schema: GraphQLSchema) -> str:
    """Compute a fingerprint of all the data in a schema.

    The fingerprint is insensitive to type, field, argument, enum value and
    directive order.

    Returns:
        SHA256 of the canonical SDL (prefixed with "sha256:")
    """
    return hash_text(print_canonical_schema(schema))
