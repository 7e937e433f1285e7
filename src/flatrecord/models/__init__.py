"""Record modeling for flatrecord.

This module provides the Record base class, record type construction and the
Pydantic bridge.
"""

from __future__ import annotations

from .base import FieldAccessor, Record, define_record_type, new_instance
from .convert import from_model, model_for, to_model
from .layout import FieldSpec, RecordLayout

__all__ = [
    "Record",
    "FieldAccessor",
    "define_record_type",
    "new_instance",
    "FieldSpec",
    "RecordLayout",
    "model_for",
    "to_model",
    "from_model",
]
