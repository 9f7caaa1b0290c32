"""
Collection helpers for Valuekit.

Small pure functions for normalizing key lists and moving between
records and their (key, value) entries. omit() is assembled from these.
"""

from collections.abc import Iterable, Mapping
from typing import Any, Callable

from pydantic import BaseModel

# Collection types unpacked by cast_list; anything else is a single item
_MANY_TYPES = (list, tuple, set, frozenset)


def cast_list(value: Any) -> list:
    """
    Normalize a single item or a collection of items to a list.

    Strings and bytes are treated as single items, never iterated.

    Args:
        value: An item, or a list/tuple/set/frozenset of items.

    Returns:
        A new list containing the item(s).

    Example:
        >>> cast_list("a")
        ['a']
        >>> cast_list(("a", "b"))
        ['a', 'b']
    """
    if isinstance(value, _MANY_TYPES):
        return list(value)
    return [value]


def _is_hashable(value: Any) -> bool:
    # Hashable alone misses tuples holding unhashable items
    try:
        hash(value)
    except TypeError:
        return False
    return True


def object_entries(obj: Any) -> list[tuple[Any, Any]]:
    """
    List the own entries of a record in their natural order.

    Mappings yield their items. Pydantic models yield their fields in
    declaration order followed by any extra fields. Other objects yield
    their instance attributes.

    Args:
        obj: A mapping, a pydantic model, any object with a __dict__, or None.

    Returns:
        A list of (key, value) pairs; empty for None.

    Raises:
        TypeError: If obj has no entries to enumerate.
    """
    if obj is None:
        return []
    if isinstance(obj, Mapping):
        return list(obj.items())
    if isinstance(obj, BaseModel):
        return list(obj)
    try:
        attributes = vars(obj)
    except TypeError:
        raise TypeError(
            f"Cannot enumerate entries of {type(obj).__name__}"
        ) from None
    return list(attributes.items())


def object_from_entries(entries: Iterable[tuple[Any, Any]]) -> dict:
    """
    Build a new dict from (key, value) pairs.

    A repeated key keeps its first position and takes its last value.

    Example:
        >>> object_from_entries([("a", 1), ("b", 2), ("a", 3)])
        {'a': 3, 'b': 2}
    """
    return {key: value for key, value in entries}


def create_known_guard(known: Iterable[Any]) -> Callable[[Any], bool]:
    """
    Create a membership test against a fixed collection of keys.

    Unhashable entries in known can never match a record key and are
    dropped; unhashable candidates are never known.

    Args:
        known: The keys the guard accepts.

    Returns:
        A function returning True for keys in known.

    Example:
        >>> is_known = create_known_guard(["a", "b"])
        >>> is_known("a"), is_known("c")
        (True, False)
    """
    known_keys = frozenset(key for key in known if _is_hashable(key))

    def is_known(candidate: Any) -> bool:
        return _is_hashable(candidate) and candidate in known_keys

    return is_known
