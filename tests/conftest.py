"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from flatrecord import Char, Int, Record


class SimpleStruct(Record):
    """Int followed by two chars, the canonical 6-byte layout."""

    int1 = Int()
    char1 = Char()
    char2 = Char()


@pytest.fixture
def simple_struct_type() -> type[SimpleStruct]:
    """Record type with fields [Int, Char, Char]."""
    return SimpleStruct


@pytest.fixture
def simple_struct_bytes() -> bytes:
    """Encoding of SimpleStruct(int1=1234, char1='a', char2=600)."""
    return bytes([210, 4, 0, 0, 97, 88])
