"""Canonicalization kernel: pure, in-memory, no I/O."""

from .assembler import canonicalize, rebuild_directive, rebuild_directives
from .classifier import (
    CATEGORY_ORDER,
    TypeCategory,
    classify_type,
    group_and_sort_types,
    group_types_by_category,
)
from .comparators import (
    camel_case_compare,
    locale_compare,
    sort_by,
    sort_camel_case_by,
    split_camel_case,
)
from .errors import CanonicalizationError, UnclassifiableTypeError, UnresolvedReferenceError
from .hash_utils import canonicalize_sdl, compute_schema_fingerprint, print_canonical_schema
from .rebuilder import rebuild_named_type
from .resolver import ReferenceResolver

__all__ = [
    "CATEGORY_ORDER",
    "CanonicalizationError",
    "ReferenceResolver",
    "TypeCategory",
    "UnclassifiableTypeError",
    "UnresolvedReferenceError",
    "camel_case_compare",
    "canonicalize",
    "canonicalize_sdl",
    "classify_type",
    "compute_schema_fingerprint",
    "group_and_sort_types",
    "group_types_by_category",
    "locale_compare",
    "print_canonical_schema",
    "rebuild_directive",
    "rebuild_directives",
    "rebuild_named_type",
    "sort_by",
    "sort_camel_case_by",
    "split_camel_case",
]
