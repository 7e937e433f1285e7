"""Record decoder.

This module provides the decode() function that rebuilds a record instance
from its flat binary representation.
"""

from __future__ import annotations

import logging
from typing import TypeVar

from ..exceptions import DecodeError, TrailingBytesError
from ..models.base import Record

log = logging.getLogger("flatrecord.codec")

R = TypeVar("R", bound=Record)


def decode(
    record_type: type[R],
    data: bytes | bytearray | memoryview,
    *,
    strict: bool | None = None,
) -> R:
    """Decode binary data into a new instance of ``record_type``.

    Fields are read in declaration order. Each field consumes a prefix of the
    remaining buffer and reports how many bytes it used; the offset then moves
    past them. Decoding is all-or-nothing: the first field that fails aborts
    the whole record.

    Args:
        record_type: Record class to decode to
        data: Binary data to decode
        strict: If True, bytes left after the last field are an error.
            Defaults to the record type's record_strict.

    Returns:
        Decoded record instance

    Raises:
        TruncatedBufferError: If a fixed-width field runs past the end of data
        UnterminatedStringError: If a string field has no terminator
        TrailingBytesError: If strict and data has unused bytes
        TypeError: If ``record_type`` is not a Record subclass

    Examples:
        ```python
        rec = decode(SimpleStruct, b"\\xd2\\x04\\x00\\x00aX")
        rec.int1   # 1234
        rec.char2  # 'X'
        ```
    """
    if not (isinstance(record_type, type) and issubclass(record_type, Record)):
        raise TypeError(f"expected a Record subclass, got {record_type!r}")
    if strict is None:
        strict = record_type.record_strict

    # offsets count bytes, whatever the item size of the caller's buffer
    view = memoryview(data).cast("B")
    record = record_type()
    offset = 0

    for name, descriptor in record.descriptors():
        try:
            _, consumed = descriptor.decode(view[offset:])
        except DecodeError:
            log.debug("decoding %s failed at field %s, offset %d", record_type.__name__, name, offset)
            raise
        offset += consumed

    if strict and offset != len(view):
        raise TrailingBytesError(
            f"{record_type.__name__}: {len(view) - offset} unused bytes after offset {offset}"
        )

    log.debug("decoded %s from %d of %d bytes", record_type.__name__, offset, len(view))
    return record
