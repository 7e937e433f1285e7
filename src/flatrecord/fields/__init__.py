"""Field kinds for flatrecord records.

This module provides the field descriptor base class and the catalog of
concrete scalar and string kinds.
"""

from __future__ import annotations

from .base import FieldDescriptor, FieldKind
from .scalars import (
    Bool,
    Byte,
    Char,
    Double,
    Float,
    FloatField,
    Int,
    IntegerField,
    Long,
    LongDouble,
    LongLong,
    Null,
    ScalarField,
    Short,
)
from .strings import Str

__all__ = [
    "FieldDescriptor",
    "FieldKind",
    "ScalarField",
    "IntegerField",
    "FloatField",
    "Bool",
    "Char",
    "Byte",
    "Short",
    "Int",
    "Float",
    "Long",
    "Double",
    "LongLong",
    "LongDouble",
    "Null",
    "Str",
]
