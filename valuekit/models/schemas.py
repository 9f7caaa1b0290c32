"""
Pydantic data models for Valuekit.

All models are immutable and describe the plain values the functions
package operates on: boxed primitives and the two selector forms accepted
by omit().
"""

from enum import Enum
from typing import Any, Callable, Union

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictFloat, StrictInt, StrictStr

# Raw primitive values understood by the equality helpers
Primitive = Union[bool, int, float, str]


class PrimitiveKind(str, Enum):
    """Kinds of primitive value a wrapper can hold."""

    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"

    @classmethod
    def of(cls, value: Any) -> "PrimitiveKind":
        """
        Classify a raw primitive value.

        bool is checked before the numeric types since it subclasses int.

        Args:
            value: A bool, int, float or str.

        Returns:
            The matching PrimitiveKind.

        Raises:
            TypeError: If the value is not a primitive.
        """
        if isinstance(value, bool):
            return cls.BOOLEAN
        if isinstance(value, (int, float)):
            return cls.NUMBER
        if isinstance(value, str):
            return cls.STRING
        raise TypeError(f"{type(value).__name__} is not a primitive value")


class PrimitiveWrapper(BaseModel):
    """
    Boxed form of a boolean, number or string.

    Validation is strict, so "1" stays a string and True stays a boolean.

    Attributes:
        value: The unboxed primitive value.
    """

    model_config = ConfigDict(frozen=True)

    value: Union[StrictBool, StrictInt, StrictFloat, StrictStr] = Field(
        ...,
        description="Unboxed primitive value",
    )

    def value_of(self) -> Primitive:
        """Return the unboxed value."""
        return self.value

    @property
    def kind(self) -> PrimitiveKind:
        """Get the kind of the wrapped value."""
        return PrimitiveKind.of(self.value)

    def __repr__(self) -> str:
        return f"PrimitiveWrapper({self.value!r})"


class Keys(BaseModel):
    """
    Selector naming the keys to leave out of a record.

    Attributes:
        keys: Keys to omit, in the order given.
    """

    model_config = ConfigDict(frozen=True)

    keys: tuple[Any, ...] = Field(default=(), description="Keys to omit")

    @classmethod
    def of(cls, *keys: Any) -> "Keys":
        """
        Build a Keys selector from positional keys.

        Useful when a key is itself a tuple and would otherwise be
        read as a collection of keys.

        Example:
            >>> Keys.of(("x", 1), "y").keys
            (('x', 1), 'y')
        """
        return cls(keys=keys)


class Predicate(BaseModel):
    """
    Selector omitting every entry the wrapped function accepts.

    Attributes:
        fn: Callable taking (value, key, object) and returning a truthy
            value for entries to omit.
    """

    model_config = ConfigDict(frozen=True)

    fn: Callable[..., Any] = Field(..., description="Entry predicate")
