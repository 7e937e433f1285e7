"""Flat binary codec for flatrecord.

This module provides encoding and decoding of record instances to and from
contiguous little-endian byte buffers.
"""

from __future__ import annotations

from .decoder import decode
from .encoder import encode

__all__ = [
    "encode",
    "decode",
]
