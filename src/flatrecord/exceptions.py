"""Exception hierarchy for flatrecord.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from FlatRecordError for easy catching of any flatrecord-specific error.
"""

from __future__ import annotations


class FlatRecordError(Exception):
    """Base exception for all flatrecord errors."""

    pass


class SchemaError(FlatRecordError):
    """Raised when a record type definition is invalid.

    Examples:
        - Duplicate field names
        - Field name that is not an identifier or starts with an underscore
        - Field kind that is not a FieldDescriptor subclass
        - Record type without a fixed size where one is required
    """

    pass


class InvalidValueError(FlatRecordError, ValueError):
    """Raised when a value is assigned outside a field's accepted domain.

    The field is left unchanged when this is raised.

    Examples:
        - A string assigned to a numeric field
        - A multi-character string assigned to a Char
        - An integer other than 0 or 1 assigned to a Bool
        - A non-finite float assigned to an integer field
    """

    pass


class EncodeError(FlatRecordError):
    """Raised when encoding a record fails.

    Examples:
        - Encoded record exceeds record_max_bytes
    """

    pass


class DecodeError(FlatRecordError):
    """Base class for errors raised while decoding binary data."""

    pass


class TruncatedBufferError(DecodeError):
    """Raised when a fixed-width field is given fewer bytes than its width."""

    pass


class UnterminatedStringError(DecodeError):
    """Raised when a string field finds no 0x00 terminator in the remaining buffer."""

    pass


class TrailingBytesError(DecodeError):
    """Raised by strict decoding when bytes remain after the last field."""

    pass
