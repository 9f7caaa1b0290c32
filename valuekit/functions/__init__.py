"""Utility functions package for Valuekit."""

from valuekit.functions.records import (
    cast_list,
    create_known_guard,
    object_entries,
    object_from_entries,
)
from valuekit.functions.equality import (
    equal,
    primitive_kind,
    same_value,
    unbox,
)
from valuekit.functions.omit import (
    create_keys_predicate,
    omit,
    resolve_predicate,
)

__all__ = [
    "cast_list",
    "create_keys_predicate",
    "create_known_guard",
    "equal",
    "object_entries",
    "object_from_entries",
    "omit",
    "primitive_kind",
    "resolve_predicate",
    "same_value",
    "unbox",
]
