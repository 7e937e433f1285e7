"""flatrecord: C-struct-like flat binary records

A Python library for describing fixed-order records of typed fields and
converting them to and from flat byte buffers with a deterministic layout:
little-endian, no padding, no header.

Key Features:
- Declarative record classes with one plain attribute per field
- Fixed-width integer, float, boolean, character and null fields
- Null-terminated variable-width strings
- Intentional modulo wrap on integer overflow
- Pydantic bridge for JSON snapshots

Quick Start:
    >>> from flatrecord import Char, Int, Record, Str, decode, encode
    >>>
    >>> class SimpleStruct(Record):
    ...     int1 = Int()
    ...     char1 = Char()
    ...     char2 = Char()
    ...     label = Str()
    >>>
    >>> rec = SimpleStruct(int1=1234, char1="a", char2=600, label="hi")
    >>> data = encode(rec)
    >>> list(data)
    [210, 4, 0, 0, 97, 88, 104, 105, 0]
    >>> decode(SimpleStruct, data).char2
    'X'
"""

from __future__ import annotations

from .codec import decode, encode
from .exceptions import (
    DecodeError,
    EncodeError,
    FlatRecordError,
    InvalidValueError,
    SchemaError,
    TrailingBytesError,
    TruncatedBufferError,
    UnterminatedStringError,
)
from .fields import (
    Bool,
    Byte,
    Char,
    Double,
    FieldDescriptor,
    FieldKind,
    Float,
    Int,
    Long,
    LongDouble,
    LongLong,
    Null,
    Short,
    Str,
)
from .models import (
    FieldSpec,
    Record,
    RecordLayout,
    define_record_type,
    from_model,
    model_for,
    new_instance,
    to_model,
)
from .utils import encoded_size, field_offsets, field_sizes

__version__ = "0.1.0"

__all__ = [
    # Core API
    "Record",
    "define_record_type",
    "new_instance",
    "encode",
    "decode",
    # Field kinds
    "FieldDescriptor",
    "FieldKind",
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
    # Layout
    "FieldSpec",
    "RecordLayout",
    # Exceptions
    "FlatRecordError",
    "SchemaError",
    "InvalidValueError",
    "EncodeError",
    "DecodeError",
    "TruncatedBufferError",
    "UnterminatedStringError",
    "TrailingBytesError",
    # Sizing
    "encoded_size",
    "field_sizes",
    "field_offsets",
    # Pydantic
    "model_for",
    "to_model",
    "from_model",
    # Version
    "__version__",
]
