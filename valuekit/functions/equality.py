"""
Same-value equality for primitive values.

NaN equals NaN and positive zero differs from negative zero. Values of
different kinds (boolean, number, string) are never equal, so True is
not 1 even though Python's == says otherwise.
"""

import math
from typing import Any, Union

from valuekit.models.schemas import Primitive, PrimitiveKind, PrimitiveWrapper


def unbox(value: Union[PrimitiveWrapper, Primitive]) -> Primitive:
    """
    Get the primitive held by a wrapper.

    Raw primitives are returned unchanged.
    """
    if isinstance(value, PrimitiveWrapper):
        return value.value_of()
    return value


def primitive_kind(value: Union[PrimitiveWrapper, Primitive]) -> PrimitiveKind:
    """
    Get the kind of a wrapped or raw primitive.

    Raises:
        TypeError: If the unboxed value is not a primitive.
    """
    return PrimitiveKind.of(unbox(value))


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_nan(value: Any) -> bool:
    return isinstance(value, float) and math.isnan(value)


def same_value(left: Primitive, right: Primitive) -> bool:
    """
    Compare two raw primitives with same-value semantics.

    Args:
        left: The first primitive.
        right: The second primitive.

    Returns:
        True if both are the same kind and hold the same value.

    Example:
        >>> same_value(float("nan"), float("nan"))
        True
        >>> same_value(0.0, -0.0)
        False
        >>> same_value(1, 1.0)
        True
    """
    if _is_number(left) and _is_number(right):
        if _is_nan(left) or _is_nan(right):
            return _is_nan(left) and _is_nan(right)
        if left == 0 and right == 0:
            # int zero has no sign and counts as positive
            return math.copysign(1.0, left) == math.copysign(1.0, right)
        return left == right
    if _is_number(left) or _is_number(right):
        return False
    if isinstance(left, bool) or isinstance(right, bool):
        return isinstance(left, bool) and isinstance(right, bool) and left == right
    return left == right


def equal(
    a: Union[PrimitiveWrapper, Primitive],
    b: Union[PrimitiveWrapper, Primitive],
) -> bool:
    """
    Check whether two primitive wrappers hold the same value.

    Both arguments are unboxed first, so wrappers and raw primitives can
    be mixed freely.

    Args:
        a: The first wrapper or primitive.
        b: The second wrapper or primitive.

    Returns:
        True if the unboxed values are same-value equal, False otherwise.

    Example:
        >>> equal(PrimitiveWrapper(value=True), PrimitiveWrapper(value=True))
        True
        >>> equal(PrimitiveWrapper(value=0), PrimitiveWrapper(value=-0.0))
        False
    """
    return same_value(unbox(a), unbox(b))
