"""Record size calculation utilities.

This module provides functions to calculate the encoded size and layout of
records without actually encoding them.
"""

from __future__ import annotations

from ..exceptions import SchemaError
from ..models.base import Record


def encoded_size(record_or_type: Record | type[Record]) -> int:
    """Calculate the encoded size of a record in bytes.

    For an instance this is the exact length ``encode`` would return. For a
    record type it is the fixed size of the layout, which only exists when
    the layout has no variable-width fields.

    Args:
        record_or_type: Record instance or record type

    Returns:
        Size in bytes

    Raises:
        SchemaError: If given a record type with variable-width fields

    Example:
        >>> class Status(Record):
        ...     vehicle_id = Byte()
        ...     depth = Int()
        >>> encoded_size(Status)
        5
    """
    if isinstance(record_or_type, Record):
        return sum(descriptor.byte_width for _, descriptor in record_or_type.descriptors())

    size = record_or_type.__layout__.fixed_size()
    if size is None:
        raise SchemaError(
            f"{record_or_type.__name__} has variable-width fields; "
            f"pass an instance to get its current size"
        )
    return size


def field_sizes(record_or_type: Record | type[Record]) -> dict[str, int | None]:
    """Get the width in bytes of each field.

    Args:
        record_or_type: Record instance or record type

    Returns:
        Dictionary mapping field names to widths. For a record type,
        variable-width fields map to None.

    Example:
        >>> field_sizes(Status)
        {'vehicle_id': 1, 'depth': 4}
    """
    if isinstance(record_or_type, Record):
        return {name: descriptor.byte_width for name, descriptor in record_or_type.descriptors()}
    return {spec.name: spec.width for spec in record_or_type.__layout__.entries}


def field_offsets(record_or_type: Record | type[Record]) -> dict[str, int | None]:
    """Get the byte offset of each field within the encoded record.

    Args:
        record_or_type: Record instance or record type

    Returns:
        Dictionary mapping field names to offsets. For a record type, fields
        placed after a variable-width field map to None.
    """
    if isinstance(record_or_type, Record):
        offsets: dict[str, int | None] = {}
        offset = 0
        for name, descriptor in record_or_type.descriptors():
            offsets[name] = offset
            offset += descriptor.byte_width
        return offsets
    return record_or_type.__layout__.offsets()
