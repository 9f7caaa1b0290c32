"""Valuekit: same-value equality and record omission helpers."""

from valuekit.functions import equal, omit
from valuekit.models import Keys, Predicate, PrimitiveWrapper

__all__ = [
    "Keys",
    "Predicate",
    "PrimitiveWrapper",
    "equal",
    "omit",
]
