"""Record encoder.

This module provides the encode() function that converts a record instance
to its flat binary representation.
"""

from __future__ import annotations

import logging

from ..exceptions import EncodeError
from ..models.base import Record

log = logging.getLogger("flatrecord.codec")


def encode(record: Record) -> bytes:
    """Encode a record to bytes.

    Fields are written in declaration order, each as its current binary
    representation, with no padding, header or length prefix. Descriptors keep
    their bytes in sync with their values on every assignment, so encoding
    only concatenates.

    Args:
        record: Record instance to encode

    Returns:
        Binary representation; its length is the sum of the current field widths

    Raises:
        EncodeError: If the result exceeds the record type's record_max_bytes
        TypeError: If ``record`` is not a Record instance

    Examples:
        ```python
        from flatrecord import Char, Int, Record, encode

        class SimpleStruct(Record):
            int1 = Int()
            char1 = Char()
            char2 = Char()

        rec = SimpleStruct(int1=1234, char1="a", char2=600)
        encode(rec)  # b'\\xd2\\x04\\x00\\x00aX'
        ```
    """
    if not isinstance(record, Record):
        raise TypeError(f"expected a Record instance, got {type(record).__name__}")

    encoded = b"".join(descriptor.encode() for _, descriptor in record.descriptors())

    max_bytes = type(record).record_max_bytes
    if max_bytes is not None and len(encoded) > max_bytes:
        raise EncodeError(
            f"Encoded record size ({len(encoded)} bytes) exceeds record_max_bytes={max_bytes}"
        )

    log.debug("encoded %s into %d bytes", type(record).__name__, len(encoded))
    return encoded
