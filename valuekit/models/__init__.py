"""Data models package for Valuekit."""

from valuekit.models.schemas import (
    Keys,
    Predicate,
    Primitive,
    PrimitiveKind,
    PrimitiveWrapper,
)

__all__ = [
    "Keys",
    "Predicate",
    "Primitive",
    "PrimitiveKind",
    "PrimitiveWrapper",
]
