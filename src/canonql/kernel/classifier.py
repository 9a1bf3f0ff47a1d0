"""Partition named types into fixed category buckets."""

from enum import Enum
from typing import Dict, Iterable, List

from graphql import (
    GraphQLNamedType,
    is_enum_type,
    is_input_object_type,
    is_interface_type,
    is_introspection_type,
    is_object_type,
    is_scalar_type,
    is_union_type,
)
from graphql.pyutils import inspect

from .comparators import sort_camel_case_by_name
from .errors import UnclassifiableTypeError


class TypeCategory(str, Enum):
    """Kinds of named type, as far as ordering is concerned."""

    INTROSPECTION = "INTROSPECTION"
    INTERFACE = "INTERFACE"
    UNION = "UNION"
    OBJECT = "OBJECT"
    ENUM = "ENUM"
    INPUT_OBJECT = "INPUT_OBJECT"
    SCALAR = "SCALAR"


# Bucket order of the canonical type list. Follows the grouping used by the
# JS GraphQL IDE plugin, not the category names.
CATEGORY_ORDER = (
    TypeCategory.INTROSPECTION,
    TypeCategory.INTERFACE,
    TypeCategory.UNION,
    TypeCategory.OBJECT,
    TypeCategory.ENUM,
    TypeCategory.INPUT_OBJECT,
    TypeCategory.SCALAR,
)


def classify_type(type_: GraphQLNamedType) -> TypeCategory:
    """Return the category of a named type.

    Introspection types are objects and enums themselves, so they are
    recognized first.

    Raises:
        UnclassifiableTypeError: If the type matches none of the kinds.
    """
    if is_introspection_type(type_):
        return TypeCategory.INTROSPECTION
    if is_scalar_type(type_):
        return TypeCategory.SCALAR
    if is_object_type(type_):
        return TypeCategory.OBJECT
    if is_interface_type(type_):
        return TypeCategory.INTERFACE
    if is_union_type(type_):
        return TypeCategory.UNION
    if is_enum_type(type_):
        return TypeCategory.ENUM
    if is_input_object_type(type_):
        return TypeCategory.INPUT_OBJECT
    raise UnclassifiableTypeError(getattr(type_, "name", None), inspect(type_))


def group_types_by_category(
    types: Iterable[GraphQLNamedType],
) -> Dict[TypeCategory, List[GraphQLNamedType]]:
    """Bucket types by category, each bucket sorted camelCase by name.

    Every category is present in the result, in CATEGORY_ORDER, even when
    its bucket is empty.
    """
    buckets: Dict[TypeCategory, List[GraphQLNamedType]] = {
        category: [] for category in CATEGORY_ORDER
    }
    for type_ in types:
        buckets[classify_type(type_)].append(type_)
    return {
        category: sort_camel_case_by_name(members)
        for category, members in buckets.items()
    }


def group_and_sort_types(types: Iterable[GraphQLNamedType]) -> List[GraphQLNamedType]:
    """Return the canonical type order: buckets concatenated in CATEGORY_ORDER."""
    ordered: List[GraphQLNamedType] = []
    for members in group_types_by_category(types).values():
        ordered.extend(members)
    return ordered
