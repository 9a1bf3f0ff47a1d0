"""Canonical type registry and type reference resolution."""

from typing import Callable, Dict, Iterable, List, Optional, Union

from graphql import (
    GraphQLList,
    GraphQLNamedType,
    GraphQLNonNull,
    GraphQLType,
    is_list_type,
    is_non_null_type,
)

from .errors import UnresolvedReferenceError


class ReferenceResolver:
    """Maps type names to their canonical, rebuilt instances.

    Resolution is two-phase. populate() stores one rebuilt type per name;
    rebuilt types keep their bodies (fields, interfaces, members) behind
    thunks, so nothing is looked up while the registry is filling. The thunks
    run later, against the complete registry, and every lookup of a name
    returns the same object, including lookups made from inside that type's
    own body. Self- and mutually-recursive types therefore neither recurse
    forever nor get duplicated.
    """

    def __init__(self) -> None:
        self.registry: Dict[str, GraphQLNamedType] = {}

    def populate(
        self,
        types: Iterable[GraphQLNamedType],
        rebuild: Callable[[GraphQLNamedType, "ReferenceResolver"], GraphQLNamedType],
    ) -> Dict[str, GraphQLNamedType]:
        """Fill the registry with rebuild(type_, self) for each type, in order.

        Args:
            types: Named types in canonical order.
            rebuild: Builds the canonical instance of one type. Must not
                resolve references eagerly.

        Returns:
            The registry, keyed by type name in the order given.
        """
        for type_ in types:
            self.registry[type_.name] = rebuild(type_, self)
        return self.registry

    def types(self) -> List[GraphQLNamedType]:
        """Canonical types in registry order."""
        return list(self.registry.values())

    def resolve_named(self, type_: Union[GraphQLNamedType, str]) -> GraphQLNamedType:
        """Look up the canonical instance of a named type (or type name)."""
        name = type_ if isinstance(type_, str) else type_.name
        try:
            return self.registry[name]
        except KeyError:
            raise UnresolvedReferenceError(name) from None

    def resolve_reference(self, type_: GraphQLType) -> GraphQLType:
        """Rebuild a type reference against the registry.

        List and NonNull wrappers are re-applied with the same nesting depth
        and order; the innermost named type is replaced by its canonical
        instance.
        """
        if is_list_type(type_):
            return GraphQLList(self.resolve_reference(type_.of_type))
        if is_non_null_type(type_):
            return GraphQLNonNull(self.resolve_reference(type_.of_type))
        return self.resolve_named(type_)

    def resolve_optional_reference(self, type_: Optional[GraphQLType]) -> Optional[GraphQLType]:
        if type_ is None:
            return None
        return self.resolve_reference(type_)
