"""
Derive records without selected entries.

omit() accepts either the keys to leave out or a predicate over each
entry. The input record is never mutated; a new dict is always returned.
"""

import inspect
import logging
from collections.abc import Hashable, Iterable
from typing import Any, Callable, Optional, Union

from valuekit.functions.records import (
    cast_list,
    create_known_guard,
    object_entries,
    object_from_entries,
)
from valuekit.models.schemas import Keys, Predicate

logger = logging.getLogger(__name__)

# Arguments handed to an entry predicate, in order
_PREDICATE_ARGS = 3

EntryPredicate = Callable[[Any, Any, Any], Any]
Selector = Union[Keys, Predicate, EntryPredicate, Hashable, Iterable[Any]]


def _positional_arity(fn: Callable[..., Any]) -> int:
    """
    Count how many of (value, key, obj) a predicate can take.

    Classes such as bool or str and callables without an inspectable
    signature get the value only.
    """
    if inspect.isclass(fn):
        return 1
    try:
        signature = inspect.signature(fn)
    except (TypeError, ValueError):
        return 1

    count = 0
    for parameter in signature.parameters.values():
        if parameter.kind is inspect.Parameter.VAR_POSITIONAL:
            return _PREDICATE_ARGS
        if parameter.kind in (
            inspect.Parameter.POSITIONAL_ONLY,
            inspect.Parameter.POSITIONAL_OR_KEYWORD,
        ):
            count += 1
    return min(count, _PREDICATE_ARGS)


def _adapt_predicate(fn: Callable[..., Any]) -> EntryPredicate:
    arity = _positional_arity(fn)
    if arity == _PREDICATE_ARGS:
        return fn

    def adapted(value: Any, key: Any, obj: Any) -> Any:
        return fn(*(value, key, obj)[:arity])

    return adapted


def create_keys_predicate(keys: Any) -> EntryPredicate:
    """
    Build an entry predicate matching the given keys.

    Args:
        keys: A single key, a collection of keys, or a Keys selector.

    Returns:
        A predicate that is True for entries whose key is listed.
    """
    if isinstance(keys, Keys):
        keys = list(keys.keys)
    is_known_key = create_known_guard(cast_list(keys))
    return lambda _value, key, _obj: is_known_key(key)


def resolve_predicate(selector: Selector) -> EntryPredicate:
    """
    Turn any accepted selector into an entry predicate.

    Predicate selectors and callables are used as predicates; everything
    else is treated as keys.
    """
    if isinstance(selector, Predicate):
        logger.debug("omit: using Predicate selector")
        return _adapt_predicate(selector.fn)
    if isinstance(selector, Keys):
        logger.debug(f"omit: using Keys selector {selector.keys!r}")
        return create_keys_predicate(selector)
    if callable(selector):
        logger.debug("omit: using callable selector")
        return _adapt_predicate(selector)
    logger.debug(f"omit: using key selector {selector!r}")
    return create_keys_predicate(selector)


def omit(obj: Optional[Any], keys_or_predicate: Selector) -> dict:
    """
    Return a new dict with every entry of obj except the selected ones.

    The selector is either the keys to omit (a single key, a collection of
    keys or a Keys model) or a predicate called with (value, key, obj)
    that returns a truthy value for entries to omit. Predicates taking
    fewer positional arguments receive only the leading ones.

    Args:
        obj: The record to copy from. None yields an empty dict.
        keys_or_predicate: Keys to omit, or an entry predicate.

    Returns:
        A new dict of the remaining entries, in their original order.

    Example:
        >>> omit({"a": 1, "b": 2, "c": 3}, ["b"])
        {'a': 1, 'c': 3}
        >>> omit({"a": 1, "b": 2, "c": 3}, lambda v: v > 1)
        {'a': 1}
    """
    if obj is None:
        logger.debug("omit: received None, returning an empty dict")
        return {}

    predicate = resolve_predicate(keys_or_predicate)
    return object_from_entries(
        (key, value)
        for key, value in object_entries(obj)
        if not predicate(value, key, obj)
    )
