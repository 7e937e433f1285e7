#!/usr/bin/env python3
"""Basic usage example for flatrecord.

This example demonstrates:
1. Declaring record types
2. Encoding to a flat byte buffer
3. Decoding back to a record
4. Inspecting field sizes and offsets
"""

from __future__ import annotations

from flatrecord import (
    Bool,
    Char,
    Float,
    Int,
    Record,
    Short,
    Str,
    decode,
    encode,
    field_offsets,
    field_sizes,
    to_model,
)


class SimpleStruct(Record):
    """An int followed by two single-byte characters."""

    int1 = Int()
    char1 = Char()
    char2 = Char()


class SensorReading(Record):
    """A sensor reading with a variable-length label."""

    sensor_id = Short()
    temperature = Float()
    valid = Bool()
    label = Str()
    sequence = Int()


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("flatrecord Basic Usage Example")
    print("=" * 60)
    print()

    print("1. Encoding a simple struct...")
    simple = SimpleStruct(int1=1234, char1="a")
    simple.char2 = 600  # wraps to 600 % 256 == 88 ('X')
    data = encode(simple)
    print(f"   Record: {simple}")
    print(f"   Bytes:  {list(data)}")
    print()

    print("2. Decoding it back...")
    decoded = decode(SimpleStruct, data)
    print(f"   Record: {decoded}")
    print(f"   int1 + 100 = {decoded.int1 + 100}")
    print()

    print("3. A record with a string field...")
    reading = SensorReading(sensor_id=7, temperature=21.5, valid=True, label="hull", sequence=42)
    data = encode(reading)
    print(f"   Encoded size: {len(data)} bytes")
    print(f"   Field sizes:   {field_sizes(reading)}")
    print(f"   Field offsets: {field_offsets(reading)}")
    print(f"   Hex: {data.hex(' ')}")
    print()

    print("4. JSON snapshot...")
    print(f"   {to_model(decode(SensorReading, data)).model_dump_json()}")
    print()


if __name__ == "__main__":
    main()
