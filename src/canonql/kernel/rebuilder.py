"""Rebuild named types with canonically ordered bodies.

Each rebuild copies the type's full to_kwargs() snapshot and overrides only
member order and type references. Descriptions, deprecation reasons, default
values, resolvers, extensions and AST nodes pass through untouched.
"""

from typing import Callable, Dict, Iterable, List

from graphql import (
    GraphQLArgument,
    GraphQLEnumType,
    GraphQLField,
    GraphQLInputField,
    GraphQLInputObjectType,
    GraphQLInterfaceType,
    GraphQLNamedType,
    GraphQLObjectType,
    GraphQLUnionType,
)

from .classifier import TypeCategory, classify_type
from .comparators import sort_camel_case_by_name, sort_mapping
from .resolver import ReferenceResolver


def rebuild_args(
    args: Dict[str, GraphQLArgument], resolver: ReferenceResolver
) -> Dict[str, GraphQLArgument]:
    """Sort arguments by name (camelCase) and resolve their types."""
    return sort_mapping(
        args,
        lambda arg: GraphQLArgument(
            **{**arg.to_kwargs(), "type_": resolver.resolve_reference(arg.type)}
        ),
    )


def rebuild_fields(
    fields: Dict[str, GraphQLField], resolver: ReferenceResolver
) -> Dict[str, GraphQLField]:
    """Sort output fields, resolve their types and rebuild their arguments."""
    return sort_mapping(
        fields,
        lambda field: GraphQLField(
            **{
                **field.to_kwargs(),
                "type_": resolver.resolve_reference(field.type),
                "args": rebuild_args(field.args, resolver),
            }
        ),
    )


def rebuild_input_fields(
    fields: Dict[str, GraphQLInputField], resolver: ReferenceResolver
) -> Dict[str, GraphQLInputField]:
    return sort_mapping(
        fields,
        lambda field: GraphQLInputField(
            **{**field.to_kwargs(), "type_": resolver.resolve_reference(field.type)}
        ),
    )


def rebuild_type_list(
    types: Iterable[GraphQLNamedType], resolver: ReferenceResolver
) -> List[GraphQLNamedType]:
    """Sort interface or union member references and resolve each one."""
    return [resolver.resolve_named(type_) for type_ in sort_camel_case_by_name(types)]


def _rebuild_object(type_: GraphQLObjectType, resolver: ReferenceResolver) -> GraphQLObjectType:
    kwargs = type_.to_kwargs()
    return GraphQLObjectType(
        **{
            **kwargs,
            "interfaces": lambda: rebuild_type_list(kwargs["interfaces"], resolver),
            "fields": lambda: rebuild_fields(kwargs["fields"], resolver),
        }
    )


def _rebuild_interface(
    type_: GraphQLInterfaceType, resolver: ReferenceResolver
) -> GraphQLInterfaceType:
    kwargs = type_.to_kwargs()
    return GraphQLInterfaceType(
        **{
            **kwargs,
            "interfaces": lambda: rebuild_type_list(kwargs["interfaces"], resolver),
            "fields": lambda: rebuild_fields(kwargs["fields"], resolver),
        }
    )


def _rebuild_union(type_: GraphQLUnionType, resolver: ReferenceResolver) -> GraphQLUnionType:
    kwargs = type_.to_kwargs()
    return GraphQLUnionType(
        **{**kwargs, "types": lambda: rebuild_type_list(kwargs["types"], resolver)}
    )


def _rebuild_enum(type_: GraphQLEnumType, resolver: ReferenceResolver) -> GraphQLEnumType:
    # Enum values hold no type references; only their order changes.
    kwargs = type_.to_kwargs()
    return GraphQLEnumType(**{**kwargs, "values": sort_mapping(kwargs["values"])})


def _rebuild_input_object(
    type_: GraphQLInputObjectType, resolver: ReferenceResolver
) -> GraphQLInputObjectType:
    kwargs = type_.to_kwargs()
    return GraphQLInputObjectType(
        **{**kwargs, "fields": lambda: rebuild_input_fields(kwargs["fields"], resolver)}
    )


def _unchanged(type_: GraphQLNamedType, resolver: ReferenceResolver) -> GraphQLNamedType:
    return type_


_REBUILDERS: Dict[TypeCategory, Callable[[GraphQLNamedType, ReferenceResolver], GraphQLNamedType]] = {
    TypeCategory.INTROSPECTION: _unchanged,
    TypeCategory.SCALAR: _unchanged,
    TypeCategory.OBJECT: _rebuild_object,
    TypeCategory.INTERFACE: _rebuild_interface,
    TypeCategory.UNION: _rebuild_union,
    TypeCategory.ENUM: _rebuild_enum,
    TypeCategory.INPUT_OBJECT: _rebuild_input_object,
}


def rebuild_named_type(type_: GraphQLNamedType, resolver: ReferenceResolver) -> GraphQLNamedType:
    """Build the canonical instance of a named type.

    Scalars and introspection types are returned as is. Object, interface,
    union and input object bodies are thunks evaluated against the resolver
    once its registry is complete.

    Raises:
        UnclassifiableTypeError: If the type is of an unknown kind.
    """
    return _REBUILDERS[classify_type(type_)](type_, resolver)
