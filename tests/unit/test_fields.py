"""Unit tests for scalar field kinds."""

from __future__ import annotations

import array
import math
import struct

import pytest

from flatrecord import (
    Bool,
    Byte,
    Char,
    Double,
    FieldKind,
    Float,
    Int,
    InvalidValueError,
    Long,
    LongDouble,
    LongLong,
    Null,
    Short,
    TruncatedBufferError,
)


class TestCatalog:
    """Test widths, kinds and default values of every scalar kind."""

    @pytest.mark.parametrize(
        ("kind", "width", "decode_kind"),
        [
            (Bool, 1, FieldKind.BOOLEAN),
            (Char, 1, FieldKind.STRING),
            (Byte, 1, FieldKind.NUMBER),
            (Short, 2, FieldKind.NUMBER),
            (Int, 4, FieldKind.NUMBER),
            (Float, 4, FieldKind.NUMBER),
            (Long, 8, FieldKind.NUMBER),
            (Double, 8, FieldKind.NUMBER),
            (LongLong, 16, FieldKind.NUMBER),
            (LongDouble, 16, FieldKind.NUMBER),
            (Null, 1, FieldKind.NULL),
        ],
    )
    def test_width_and_kind(self, kind: type, width: int, decode_kind: FieldKind) -> None:
        """Test declared width, decode kind and zero-filled buffer."""
        field = kind()
        assert kind.width == width
        assert field.byte_width == width
        assert field.kind is decode_kind
        assert field.encode() == bytes(width)

    def test_default_values(self) -> None:
        """Test zero values of fresh fields."""
        assert Int().value == 0
        assert Double().value == 0.0
        assert Char().value == "\x00"
        assert Bool().value is False
        assert Null().value is None


class TestIntegerFields:
    """Test integer encoding and modulo wrap."""

    def test_little_endian(self) -> None:
        """Test 1234 encodes as d2 04 00 00."""
        field = Int()
        field.assign(1234)
        assert field.encode() == bytes([210, 4, 0, 0])
        assert field.value == 1234

    def test_byte_overflow_wraps(self) -> None:
        """Test 600 in one byte stores 600 mod 256."""
        field = Byte()
        field.assign(600)
        assert field.value == 88
        assert field.encode() == bytes([88])

    def test_short_overflow_wraps(self) -> None:
        """Test wrap applies to wider fields too."""
        field = Short()
        field.assign(70000)
        assert field.value == 70000 % 65536
        assert field.byte_width == 2

    def test_negative_wraps_to_unsigned(self) -> None:
        """Test -1 reads back as all ones."""
        field = Int()
        field.assign(-1)
        assert field.encode() == b"\xff\xff\xff\xff"
        assert field.value == 0xFFFFFFFF

    def test_long_long_uses_all_sixteen_bytes(self) -> None:
        """Test 128-bit values are stored exactly."""
        field = LongLong()
        value = (1 << 127) + 5
        field.assign(value)
        assert field.value == value
        assert field.encode() == value.to_bytes(16, "little")

        field.assign((1 << 128) + 7)
        assert field.value == 7

    def test_long_width(self) -> None:
        """Test 8-byte integers."""
        field = Long()
        field.assign(2**40 + 1)
        assert field.encode() == (2**40 + 1).to_bytes(8, "little")

    def test_float_is_truncated(self) -> None:
        """Test float values are truncated toward zero."""
        field = Int()
        field.assign(3.9)
        assert field.value == 3
        field.assign(-2.5)
        assert field.value == (-2) % (1 << 32)

    @pytest.mark.parametrize("bad", [math.nan, math.inf, -math.inf])
    def test_non_finite_rejected(self, bad: float) -> None:
        """Test NaN and infinities cannot be stored in an integer field."""
        field = Int()
        field.assign(7)
        with pytest.raises(InvalidValueError):
            field.assign(bad)
        assert field.value == 7
        assert field.encode() == bytes([7, 0, 0, 0])

    @pytest.mark.parametrize("bad", ["12", None, True, b"\x01", [1]])
    def test_wrong_type_rejected(self, bad: object) -> None:
        """Test non-numeric values are rejected without mutation."""
        field = Short()
        field.assign(5)
        assert field.validate(bad) is False
        with pytest.raises(InvalidValueError):
            field.assign(bad)
        assert field.value == 5

    def test_decode(self) -> None:
        """Test decode consumes exactly the field width."""
        field = Int()
        value, consumed = field.decode(bytes([210, 4, 0, 0, 99, 99]))
        assert value == 1234
        assert consumed == 4
        assert field.value == 1234
        assert field.encode() == bytes([210, 4, 0, 0])

    def test_decode_truncated(self) -> None:
        """Test a short buffer raises and leaves the field untouched."""
        field = Int()
        field.assign(42)
        with pytest.raises(TruncatedBufferError, match="need 4 bytes"):
            field.decode(b"\x01\x02")
        assert field.value == 42

    def test_decode_wide_memoryview(self) -> None:
        """Test the width is measured in bytes, not memoryview items."""
        words = array.array("I")
        words.frombytes(b"\x2a\x00\x00\x00\x07\x00\x00\x00")
        field = Int()
        assert field.decode(memoryview(words)) == (42, 4)
        assert field.encode() == b"\x2a\x00\x00\x00"

    def test_value_property_assigns(self) -> None:
        """Test the value setter validates like assign."""
        field = Byte()
        field.value = 300
        assert field.value == 44
        with pytest.raises(InvalidValueError):
            field.value = "x"


class TestFloatFields:
    """Test IEEE-754 float fields."""

    def test_single_precision_bits(self) -> None:
        """Test Float writes a 4-byte single-precision pattern."""
        field = Float()
        field.assign(0.5)
        assert field.encode() == struct.pack("<f", 0.5)
        assert field.value == 0.5

    def test_single_precision_rounding(self) -> None:
        """Test the stored value is the single-precision rounding."""
        field = Float()
        field.assign(0.1)
        assert field.value == struct.unpack("<f", struct.pack("<f", 0.1))[0]
        assert field.value != 0.1

    def test_single_precision_overflow(self) -> None:
        """Test values outside single-precision range are rejected."""
        field = Float()
        with pytest.raises(InvalidValueError):
            field.assign(1e39)
        assert field.value == 0.0

    def test_double_exact(self) -> None:
        """Test Double keeps full double precision."""
        field = Double()
        field.assign(1 / 3)
        assert field.value == 1 / 3
        assert field.encode() == struct.pack("<d", 1 / 3)

    def test_int_accepted(self) -> None:
        """Test integers are stored as floats."""
        field = Double()
        field.assign(2)
        assert field.value == 2.0
        assert isinstance(field.value, float)

    def test_huge_int_rejected(self) -> None:
        """Test an int too large for a double is rejected."""
        with pytest.raises(InvalidValueError):
            Double().assign(10**400)

    def test_long_double_layout(self) -> None:
        """Test LongDouble stores a double in the low 8 bytes."""
        field = LongDouble()
        field.assign(1.5)
        raw = field.encode()
        assert len(raw) == 16
        assert raw[:8] == struct.pack("<d", 1.5)
        assert raw[8:] == bytes(8)
        assert field.value == 1.5

    def test_long_double_decode_keeps_high_bytes(self) -> None:
        """Test high bytes are kept in the buffer but ignored for the value."""
        data = struct.pack("<d", -2.25) + b"\x01" * 8
        field = LongDouble()
        value, consumed = field.decode(data)
        assert value == -2.25
        assert consumed == 16
        assert field.encode() == data

    def test_nan_round_trip(self) -> None:
        """Test NaN is a valid float value."""
        field = Double()
        field.assign(math.nan)
        assert math.isnan(field.value)

    def test_bool_rejected(self) -> None:
        """Test booleans are not numbers."""
        with pytest.raises(InvalidValueError):
            Float().assign(True)


class TestBoolField:
    """Test boolean fields."""

    def test_true_false(self) -> None:
        """Test booleans encode as 1 and 0."""
        field = Bool()
        field.assign(True)
        assert field.encode() == b"\x01"
        assert field.value is True
        field.assign(False)
        assert field.encode() == b"\x00"
        assert field.value is False

    def test_zero_one_integers(self) -> None:
        """Test 0 and 1 are accepted and read back as bool."""
        field = Bool()
        field.assign(1)
        assert field.value is True
        field.assign(0)
        assert field.value is False

    @pytest.mark.parametrize("bad", [2, -1, "yes", None, 1.0])
    def test_other_values_rejected(self, bad: object) -> None:
        """Test values other than bool/0/1 are rejected."""
        with pytest.raises(InvalidValueError):
            Bool().assign(bad)

    def test_decode_only_one_is_true(self) -> None:
        """Test decoding compares byte 0 with 1."""
        field = Bool()
        assert field.decode(b"\x01") == (True, 1)
        assert field.decode(b"\x02") == (False, 1)
        assert field.decode(b"\x00\x01") == (False, 1)


class TestCharField:
    """Test single-character fields."""

    def test_string(self) -> None:
        """Test a one-character string stores its code."""
        field = Char()
        field.assign("a")
        assert field.encode() == b"a"
        assert field.value == "a"

    def test_code_point(self) -> None:
        """Test integers are taken as code points."""
        field = Char()
        field.assign(97)
        assert field.value == "a"

    def test_overflow_wraps(self) -> None:
        """Test 600 wraps to 88 ('X')."""
        field = Char()
        field.assign(600)
        assert field.encode() == bytes([88])
        assert field.value == "X"

    def test_wide_character_wraps(self) -> None:
        """Test code points above 255 keep their low byte."""
        field = Char()
        field.assign("€")
        assert field.encode() == bytes([0x20AC % 256])

    def test_latin1_character(self) -> None:
        """Test code points below 256 round trip."""
        field = Char()
        field.assign("é")
        assert field.value == "é"

    @pytest.mark.parametrize("bad", ["ab", "", True, 1.5, None])
    def test_rejected(self, bad: object) -> None:
        """Test multi-character strings and non-characters are rejected."""
        field = Char()
        field.assign("z")
        with pytest.raises(InvalidValueError):
            field.assign(bad)
        assert field.value == "z"

    def test_decode(self) -> None:
        """Test decode reads one byte."""
        field = Char()
        assert field.decode(b"hello") == ("h", 1)

    def test_decode_empty(self) -> None:
        """Test decoding an empty buffer raises."""
        with pytest.raises(TruncatedBufferError):
            Char().decode(b"")


class TestNullField:
    """Test null placeholder fields."""

    def test_none_only(self) -> None:
        """Test only None is accepted."""
        field = Null()
        field.assign(None)
        assert field.encode() == b"\x00"
        with pytest.raises(InvalidValueError):
            field.assign(0)

    def test_decode_any_byte(self) -> None:
        """Test decode always yields None and consumes one byte."""
        field = Null()
        assert field.decode(b"\x07\x08") == (None, 1)
        assert field.encode() == b"\x07"


class TestDescriptorState:
    """Test per-instance buffer ownership and error messages."""

    def test_buffers_not_shared(self) -> None:
        """Test two descriptors of the same kind are independent."""
        first = Int()
        second = Int()
        first.assign(1)
        assert second.value == 0
        assert second.encode() == bytes(4)

    def test_encode_returns_copy(self) -> None:
        """Test callers cannot mutate the descriptor through encode()."""
        field = Int()
        raw = field.encode()
        assert isinstance(raw, bytes)

    def test_error_names_field(self) -> None:
        """Test errors mention the field name when known."""
        field = Int("count")
        with pytest.raises(InvalidValueError, match="count"):
            field.assign("x")

    def test_repr(self) -> None:
        """Test repr shows kind and value."""
        field = Short()
        field.assign(3)
        assert repr(field) == "Short(3)"
        assert str(field) == "3"
