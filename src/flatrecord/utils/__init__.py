"""Utility functions for flatrecord.

This module provides size and layout calculation helpers.
"""

from __future__ import annotations

from .sizing import encoded_size, field_offsets, field_sizes

__all__ = [
    "encoded_size",
    "field_sizes",
    "field_offsets",
]
