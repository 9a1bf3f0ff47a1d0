"""Exceptions raised by the canonicalization kernel."""

from typing import Optional


class CanonicalizationError(Exception):
    """Base exception for canonicalization failures."""
    pass


class UnclassifiableTypeError(CanonicalizationError):
    """Raised when a named type matches none of the recognized type kinds.

    The set of kinds is closed; hitting this means the type-system model
    grew a kind the classifier does not know about.
    """
    def __init__(self, type_name: Optional[str], detail: str):
        self.type_name = type_name
        super().__init__(f"Unexpected type '{type_name}': {detail}")


class UnresolvedReferenceError(CanonicalizationError):
    """Raised when a type reference names a type absent from the registry."""
    def __init__(self, type_name: str):
        self.type_name = type_name
        super().__init__(
            f"Type reference '{type_name}' does not resolve to any type in the schema"
        )
