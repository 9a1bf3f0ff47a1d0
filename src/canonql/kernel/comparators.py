"""Name comparators used to order schema elements.

Two orderings exist and each call site picks one explicitly:

- plain: full-name collation (directive names, directive locations)
- camelCase: names split into words at lowercase->uppercase boundaries,
  compared word by word, then by full name (type names, interface and
  union members, field/argument/enum value/input field keys)

Collation is computed from the string alone so results never depend on the
process locale.
"""

import re
import unicodedata
from functools import cmp_to_key
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Tuple, TypeVar

T = TypeVar("T")
V = TypeVar("V")

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z])(?=[A-Z])")


def _character_class(ch: str) -> int:
    """Rank of a character's class: whitespace < punctuation < symbols < digits < letters."""
    category = unicodedata.category(ch)
    if category.startswith("Z"):
        return 0
    if category.startswith("P"):
        return 1
    if category.startswith("S"):
        return 2
    if category.startswith("N"):
        return 3
    return 4


def collation_key(
    value: str,
) -> Tuple[Tuple[Tuple[int, str], ...], str, Tuple[int, ...], str]:
    """Build a deterministic collation key for a name.

    Levels, most significant first:
    1. base characters, accents stripped and case folded, ranked by class
       first so "_" sorts before digits and digits before letters
    2. accents (case folded)
    3. case, lowercase before uppercase
    4. the raw string, so distinct names never compare equal
    """
    decomposed = unicodedata.normalize("NFD", value)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    primary = tuple((_character_class(ch), ch) for ch in base.casefold())
    case_marks = tuple(1 if ch.isupper() else 0 for ch in base)
    return (primary, decomposed.casefold(), case_marks, value)


def locale_compare(a: str, b: str) -> int:
    """Plain comparison of two full names. Returns -1, 0 or 1."""
    key_a = collation_key(a)
    key_b = collation_key(b)
    return (key_a > key_b) - (key_a < key_b)


def split_camel_case(name: str) -> List[str]:
    """Split a name into words at every lowercase->uppercase boundary.

    No characters are removed or changed: "fooBarBaz" -> ["foo", "Bar", "Baz"],
    "HTTPServer" -> ["HTTPServer"], "__TypeKind" -> ["__Type", "Kind"].
    """
    return _CAMEL_BOUNDARY.split(name)


def camel_case_compare(a: str, b: str) -> int:
    """Compare two names word by word, falling back to the full names.

    When one word sequence is a prefix of the other (or both are equal) the
    full names decide, so "foo" sorts before "fooBar".
    """
    words_a = split_camel_case(a)
    words_b = split_camel_case(b)
    for word_a, word_b in zip(words_a, words_b):
        result = locale_compare(word_a, word_b)
        if result != 0:
            return result
    return locale_compare(a, b)


def _sort_with(items: Iterable[T], key: Callable[[T], str], compare: Callable[[str, str], int]) -> List[T]:
    comparator = cmp_to_key(compare)
    return sorted(items, key=lambda item: comparator(key(item)))


def sort_by(items: Iterable[T], key: Callable[[T], str]) -> List[T]:
    """Return a new list ordered by the plain comparator on key(item)."""
    return _sort_with(items, key, locale_compare)


def sort_camel_case_by(items: Iterable[T], key: Callable[[T], str]) -> List[T]:
    """Return a new list ordered by the camelCase comparator on key(item)."""
    return _sort_with(items, key, camel_case_compare)


def sort_by_name(items: Iterable[Any]) -> List[Any]:
    return sort_by(items, lambda item: item.name)


def sort_camel_case_by_name(items: Iterable[Any]) -> List[Any]:
    return sort_camel_case_by(items, lambda item: item.name)


def sort_mapping(
    mapping: Optional[Mapping[str, V]],
    transform: Optional[Callable[[V], Any]] = None,
) -> Dict[str, Any]:
    """Copy a mapping with its keys in camelCase order.

    Args:
        mapping: Name-keyed mapping (fields, arguments, enum values). None is
            treated as empty.
        transform: Optional function applied to every value.

    Returns:
        New dict; insertion order is the canonical key order.
    """
    if not mapping:
        return {}
    result: Dict[str, Any] = {}
    for key in sort_camel_case_by(mapping.keys(), lambda name: name):
        value = mapping[key]
        result[key] = transform(value) if transform else value
    return result
