"""Record layout analysis CLI command."""

from __future__ import annotations

import importlib.util
import inspect
import sys
from pathlib import Path

from ..models.base import Record
from ..utils.sizing import field_offsets, field_sizes

LINE_WIDTH = 54


def analyze_file(file_path: Path) -> None:
    """Analyze all Record subclasses in a Python file.

    Args:
        file_path: Path to Python file containing record definitions
    """
    # Load the Python module
    spec = importlib.util.spec_from_file_location("user_module", file_path)
    if spec is None or spec.loader is None:
        raise ValueError(f"Could not load module from {file_path}")

    module = importlib.util.module_from_spec(spec)
    sys.modules["user_module"] = module
    spec.loader.exec_module(module)

    # Only include classes defined in this file (not imported)
    record_types = [
        obj
        for _name, obj in inspect.getmembers(module, inspect.isclass)
        if obj is not Record and issubclass(obj, Record) and obj.__module__ == "user_module"
    ]

    if not record_types:
        print(f"No Record classes found in {file_path}")
        return

    print("|" * 7, "flatrecord: C-struct-like flat binary records", "|" * 7)
    print(f"{len(record_types)} record type{'s' if len(record_types) != 1 else ''} loaded.")
    print("Offsets and sizes are in bytes.")
    print()

    for record_type in record_types:
        analyze_record_type(record_type)


def analyze_record_type(record_type: type[Record]) -> None:
    """Print the layout of a single record type.

    Args:
        record_type: Record class to analyze
    """
    layout = record_type.__layout__
    sizes = field_sizes(record_type)
    offsets = field_offsets(record_type)

    print(f"{'=' * 19} {record_type.__name__} {'=' * 19}")

    fixed_size = layout.fixed_size()
    if fixed_size is not None:
        print(f"Fixed size of record: {fixed_size} bytes")
    else:
        print(f"Variable size of record: at least {layout.min_size()} bytes")
    if record_type.record_max_bytes is not None:
        print(f"Allowed maximum size of record: {record_type.record_max_bytes} bytes")
    print()

    print(f"{'-' * 24} Fields {'-' * 24}")
    for i, entry in enumerate(layout.entries, 1):
        offset = offsets[entry.name]
        size = sizes[entry.name]
        field_desc = f"{i}. {entry.name} ({entry.kind.__name__})"
        size_desc = "variable" if size is None else f"{size} bytes"
        offset_desc = "@?" if offset is None else f"@{offset}"
        info = f"{offset_desc} {size_desc}"

        dots = "." * max(1, LINE_WIDTH - len(field_desc) - len(info))
        print(f"        {field_desc}{dots}{info}")

    print()
