"""Fixed-width scalar field kinds.

All scalar kinds use little-endian byte order and have no alignment
requirements. Integer kinds wrap modulo ``2 ** (8 * width)`` on assignment and
decode as unsigned values:

    >>> field = Byte()
    >>> field.assign(600)
    >>> field.value
    88

Float kinds store IEEE-754 bit patterns. ``LongDouble`` has no wider host
type to draw on, so it stores a double-precision value in its low 8 bytes and
zero-fills the upper 8.
"""

from __future__ import annotations

import math
import struct
from typing import Any, ClassVar

from ..exceptions import TruncatedBufferError
from .base import FieldDescriptor, FieldKind


class ScalarField(FieldDescriptor):
    """Base class for fields with a fixed, predeclared width."""

    def decode(self, data: bytes | bytearray | memoryview) -> tuple[Any, int]:
        """Load the first ``width`` bytes of ``data``.

        Raises:
            TruncatedBufferError: If ``data`` is shorter than ``width``
        """
        view = memoryview(data).cast("B")
        if len(view) < self.width:
            raise TruncatedBufferError(
                f"{self._label()}: need {self.width} bytes, only {len(view)} available"
            )
        return self._load(view[: self.width].tobytes()), self.width


class IntegerField(ScalarField):
    """Unsigned little-endian integer of ``width`` bytes."""

    kind = FieldKind.NUMBER
    python_type = int

    def validate(self, candidate: Any) -> bool:
        return isinstance(candidate, (int, float)) and not isinstance(candidate, bool)

    def _encode_value(self, candidate: int | float) -> bytes:
        if isinstance(candidate, float):
            if not math.isfinite(candidate):
                raise self._reject(candidate, "not a finite number")
            candidate = int(candidate)
        return (candidate % (1 << (8 * self.width))).to_bytes(self.width, "little")

    def _decode_value(self, raw: bytes) -> int:
        return int.from_bytes(raw, "little")


class FloatField(ScalarField):
    """IEEE-754 floating point number.

    Attributes:
        struct_format: ``struct`` format used for the stored bit pattern. When
            it is narrower than ``width`` the remaining high bytes are zero.
    """

    kind = FieldKind.NUMBER
    python_type = float
    struct_format: ClassVar[str]

    def validate(self, candidate: Any) -> bool:
        return isinstance(candidate, (int, float)) and not isinstance(candidate, bool)

    def _encode_value(self, candidate: int | float) -> bytes:
        try:
            packed = struct.pack(self.struct_format, float(candidate))
        except OverflowError as e:
            raise self._reject(candidate, f"out of range for {self.width}-byte float") from e
        return packed.ljust(self.width, b"\x00")

    def _decode_value(self, raw: bytes) -> float:
        return struct.unpack_from(self.struct_format, raw)[0]


class Bool(ScalarField):
    """Boolean stored as a single 0/1 byte."""

    width = 1
    kind = FieldKind.BOOLEAN
    python_type = bool

    def validate(self, candidate: Any) -> bool:
        # bool is a subclass of int, so this also accepts True/False
        return isinstance(candidate, int) and candidate in (0, 1)

    def _encode_value(self, candidate: bool | int) -> bytes:
        return b"\x01" if candidate else b"\x00"

    def _decode_value(self, raw: bytes) -> bool:
        return raw[0] == 1


class Char(ScalarField):
    """Single character stored as one byte (code point modulo 256)."""

    width = 1
    kind = FieldKind.STRING
    python_type = str

    def validate(self, candidate: Any) -> bool:
        if isinstance(candidate, str):
            return len(candidate) == 1
        return isinstance(candidate, int) and not isinstance(candidate, bool)

    def _encode_value(self, candidate: str | int) -> bytes:
        code = ord(candidate) if isinstance(candidate, str) else candidate
        return bytes([code % 256])

    def _decode_value(self, raw: bytes) -> str:
        return chr(raw[0])


class Null(ScalarField):
    """Placeholder byte that always holds zero and decodes to None."""

    width = 1
    kind = FieldKind.NULL
    python_type = type(None)

    def validate(self, candidate: Any) -> bool:
        return candidate is None

    def _encode_value(self, candidate: None) -> bytes:
        return b"\x00"

    def _decode_value(self, raw: bytes) -> None:
        return None


class Byte(IntegerField):
    width = 1


class Short(IntegerField):
    width = 2


class Int(IntegerField):
    width = 4


class Long(IntegerField):
    width = 8


class LongLong(IntegerField):
    width = 16


class Float(FloatField):
    width = 4
    struct_format = "<f"


class Double(FloatField):
    width = 8
    struct_format = "<d"


class LongDouble(FloatField):
    width = 16
    struct_format = "<d"
