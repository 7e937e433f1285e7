"""Null-terminated variable-width string field."""

from __future__ import annotations

from typing import Any

from ..exceptions import UnterminatedStringError
from .base import FieldDescriptor, FieldKind

TERMINATOR = 0


class Str(FieldDescriptor):
    """String stored as one byte per character followed by a 0x00 terminator.

    The width is ``len(value) + 1`` and changes with every assignment. A fresh
    field holds the empty string and encodes as a lone terminator.

    Only characters with code points below 256 can be stored, and the value
    may not contain the terminator itself, since either would make the
    decoded string differ from the assigned one.

    Example:
        >>> field = Str()
        >>> field.assign("hi")
        >>> field.encode()
        b'hi\\x00'
        >>> field.decode(b"ok\\x00rest")
        ('ok', 3)
    """

    kind = FieldKind.STRING
    python_type = str
    variable = True

    def _zero(self) -> bytes:
        return bytes([TERMINATOR])

    def validate(self, candidate: Any) -> bool:
        return isinstance(candidate, str)

    def _encode_value(self, candidate: str) -> bytes:
        if "\x00" in candidate:
            raise self._reject(candidate, "contains the 0x00 terminator")
        try:
            encoded = candidate.encode("latin-1")
        except UnicodeEncodeError as e:
            raise self._reject(candidate, "characters must be single-byte (code point < 256)") from e
        return encoded + bytes([TERMINATOR])

    def _decode_value(self, raw: bytes) -> str:
        return raw[:-1].decode("latin-1")

    def decode(self, data: bytes | bytearray | memoryview) -> tuple[str, int]:
        """Load bytes up to and including the first terminator.

        Raises:
            UnterminatedStringError: If ``data`` contains no 0x00 byte
        """
        buffer = memoryview(data).cast("B").tobytes()
        end = buffer.find(TERMINATOR)
        if end < 0:
            raise UnterminatedStringError(
                f"{self._label()}: no terminator found in remaining {len(buffer)} bytes"
            )
        consumed = end + 1
        return self._load(buffer[:consumed]), consumed
