"""Field descriptor base class.

A field descriptor owns the byte buffer and the decoded value of one field of
one record instance. Concrete kinds (see ``scalars`` and ``strings``) define
how values are validated, turned into bytes and read back.
"""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from typing import Any, ClassVar

from ..exceptions import InvalidValueError


class FieldKind(str, enum.Enum):
    """How the bytes of a field decode back into a value."""

    NUMBER = "number"
    STRING = "string"
    BOOLEAN = "boolean"
    NULL = "null"


class FieldDescriptor(ABC):
    """Base class for all field kinds.

    Subclasses set the ``width``, ``kind`` and ``python_type`` class attributes
    and implement :meth:`validate`, :meth:`_encode_value`, :meth:`_decode_value`
    and :meth:`decode`.

    After any successful :meth:`assign` or :meth:`decode` the descriptor holds
    exactly ``byte_width`` bytes and ``value`` is the decoding of those bytes.
    A rejected assignment or a failed decode leaves both untouched.

    Attributes:
        width: Declared width in bytes (0 for variable-width kinds)
        kind: Decode kind of the field
        python_type: Python type of decoded values
        variable: True if the width depends on the current value
        name: Field name within the owning record (None when standalone)
    """

    width: ClassVar[int] = 0
    kind: ClassVar[FieldKind]
    python_type: ClassVar[type]
    variable: ClassVar[bool] = False

    def __init__(self, name: str | None = None) -> None:
        self.name = name
        self._raw = bytearray(self._zero())
        self._value = self._decode_value(bytes(self._raw))

    def _zero(self) -> bytes:
        """Binary representation of a freshly constructed field."""
        return bytes(self.width)

    @property
    def value(self) -> Any:
        """Current decoded value."""
        return self._value

    @value.setter
    def value(self, candidate: Any) -> None:
        self.assign(candidate)

    @property
    def byte_width(self) -> int:
        """Current width of the binary representation in bytes."""
        return len(self._raw)

    @abstractmethod
    def validate(self, candidate: Any) -> bool:
        """Return True if ``candidate`` is in this kind's accepted domain."""

    @abstractmethod
    def _encode_value(self, candidate: Any) -> bytes:
        """Build the binary representation of an already validated value.

        Raises:
            InvalidValueError: If the value passes the type check but still
                cannot be represented (e.g. a non-finite float in an integer field)
        """

    @abstractmethod
    def _decode_value(self, raw: bytes) -> Any:
        """Decode a complete binary representation into a value."""

    @abstractmethod
    def decode(self, data: bytes | bytearray | memoryview) -> tuple[Any, int]:
        """Consume a prefix of ``data`` and load it into this field.

        Args:
            data: Remaining input buffer, starting at this field

        Returns:
            Tuple of (decoded value, bytes consumed)

        Raises:
            DecodeError: If ``data`` does not hold a complete field
        """

    def assign(self, candidate: Any) -> None:
        """Validate ``candidate`` and store it.

        The stored value is the decoding of the new binary representation, so
        narrowing rules (integer wrap, float precision) are visible on read.

        Raises:
            InvalidValueError: If ``candidate`` is outside the accepted domain
        """
        if not self.validate(candidate):
            raise InvalidValueError(
                f"{self._label()}: cannot assign {type(candidate).__name__} value {candidate!r}"
            )
        raw = self._encode_value(candidate)
        value = self._decode_value(raw)
        self._raw = bytearray(raw)
        self._value = value

    def encode(self) -> bytes:
        """Return the current binary representation."""
        return bytes(self._raw)

    def _load(self, raw: bytes) -> Any:
        value = self._decode_value(raw)
        self._raw = bytearray(raw)
        self._value = value
        return value

    def _label(self) -> str:
        if self.name is None:
            return type(self).__name__
        return f"Field {self.name} ({type(self).__name__})"

    def _reject(self, candidate: Any, reason: str) -> InvalidValueError:
        return InvalidValueError(f"{self._label()}: cannot assign {candidate!r}: {reason}")

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"

    def __str__(self) -> str:
        return str(self._value)
