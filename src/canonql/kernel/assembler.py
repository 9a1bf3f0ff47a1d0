"""Top-level schema canonicalization."""

import logging
from typing import List

from graphql import DirectiveLocation, GraphQLDirective, GraphQLSchema

from .classifier import group_and_sort_types
from .comparators import sort_by, sort_by_name
from .rebuilder import rebuild_args, rebuild_named_type
from .resolver import ReferenceResolver

logger = logging.getLogger(__name__)


def _location_name(location: DirectiveLocation) -> str:
    return location.name


def rebuild_directive(directive: GraphQLDirective, resolver: ReferenceResolver) -> GraphQLDirective:
    """Rebuild a directive with sorted locations and arguments.

    Locations use the plain comparator, arguments the camelCase one.
    """
    kwargs = directive.to_kwargs()
    return GraphQLDirective(
        **{
            **kwargs,
            "locations": sort_by(kwargs["locations"], _location_name),
            "args": rebuild_args(kwargs["args"], resolver),
        }
    )


def rebuild_directives(
    directives: List[GraphQLDirective], resolver: ReferenceResolver
) -> List[GraphQLDirective]:
    """Sort directives by name (plain comparator) and rebuild each one."""
    return [rebuild_directive(directive, resolver) for directive in sort_by_name(directives)]


def canonicalize(schema: GraphQLSchema) -> GraphQLSchema:
    """
    Return a canonically ordered copy of a schema.

    Types are grouped into introspection, interface, union, object, enum,
    input object and scalar buckets (in that order), each sorted by the
    camelCase comparator. Fields, arguments, enum values, input fields,
    interfaces and union members are sorted the same way. Directives and
    their locations are sorted by the plain comparator. Every type reference
    in the result points at the single rebuilt instance of its type.

    The input schema is not modified. Absent root operation types stay absent.

    Args:
        schema: Schema to canonicalize.

    Returns:
        New schema with canonical ordering.

    Raises:
        UnclassifiableTypeError: If the schema holds a type of unknown kind.
    """
    config = schema.to_kwargs()

    resolver = ReferenceResolver()
    resolver.populate(group_and_sort_types(config["types"]), rebuild_named_type)
    directives = rebuild_directives(config["directives"], resolver)

    logger.debug(
        "Canonicalized schema: %d types, %d directives",
        len(resolver.registry),
        len(directives),
    )

    # Building the schema evaluates the type body thunks; the registry is
    # complete by now.
    return GraphQLSchema(
        **{
            **config,
            "types": resolver.types(),
            "directives": directives,
            "query": resolver.resolve_optional_reference(config["query"]),
            "mutation": resolver.resolve_optional_reference(config["mutation"]),
            "subscription": resolver.resolve_optional_reference(config["subscription"]),
        }
    )
