"""Record layout: the ordered field list that defines a record's binary shape.

Layouts are validated pydantic models. They are built once per record type
and shared, read-only, by all of its instances.
"""

from __future__ import annotations

import inspect

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from ..fields.base import FieldDescriptor

# Attributes of Record that a field may not shadow
RESERVED_NAMES = frozenset(
    {
        "descriptor",
        "descriptors",
        "to_dict",
        "record_max_bytes",
        "record_strict",
        "Config",
    }
)


class FieldSpec(BaseModel):
    """One named entry of a record layout.

    Attributes:
        name: Attribute name of the field on record instances
        kind: Field descriptor class instantiated for every record instance
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str
    kind: type[FieldDescriptor]

    @field_validator("name")
    @classmethod
    def _check_name(cls, name: str) -> str:
        if not name.isidentifier():
            raise ValueError(f"field name {name!r} is not a valid identifier")
        if name.startswith("_"):
            raise ValueError(f"field name {name!r} may not start with an underscore")
        if name in RESERVED_NAMES:
            raise ValueError(f"field name {name!r} is reserved")
        return name

    @field_validator("kind")
    @classmethod
    def _check_kind(cls, kind: type[FieldDescriptor]) -> type[FieldDescriptor]:
        # shared bases such as IntegerField have no width of their own
        if inspect.isabstract(kind):
            raise ValueError(f"{kind.__name__} is not a concrete field kind")
        if not kind.variable and kind.width <= 0:
            raise ValueError(f"{kind.__name__} has no fixed width")
        return kind

    @property
    def width(self) -> int | None:
        """Declared width in bytes, or None for variable-width kinds."""
        return None if self.kind.variable else self.kind.width


class RecordLayout(BaseModel):
    """Ordered, immutable sequence of field specs.

    Declaration order is binary layout order. There is no padding between
    fields.

    Example:
        >>> layout = RecordLayout(entries=(FieldSpec(name="a", kind=Int),))
        >>> layout.fixed_size()
        4
    """

    model_config = ConfigDict(frozen=True)

    entries: tuple[FieldSpec, ...] = ()

    @model_validator(mode="after")
    def _check_unique(self) -> RecordLayout:
        seen: set[str] = set()
        for spec in self.entries:
            if spec.name in seen:
                raise ValueError(f"duplicate field name {spec.name!r}")
            seen.add(spec.name)
        return self

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(spec.name for spec in self.entries)

    @property
    def is_fixed(self) -> bool:
        """True if no field has a variable width."""
        return all(spec.width is not None for spec in self.entries)

    def fixed_size(self) -> int | None:
        """Total width in bytes, or None if the layout has variable fields."""
        if not self.is_fixed:
            return None
        return sum(spec.kind.width for spec in self.entries)

    def min_size(self) -> int:
        """Smallest possible encoded size (variable strings count their terminator)."""
        return sum(1 if spec.width is None else spec.width for spec in self.entries)

    def offsets(self) -> dict[str, int | None]:
        """Byte offset of each field; None once a variable field precedes it."""
        result: dict[str, int | None] = {}
        offset: int | None = 0
        for spec in self.entries:
            result[spec.name] = offset
            if offset is not None and spec.width is not None:
                offset += spec.width
            else:
                offset = None
        return result
