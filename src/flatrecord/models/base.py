"""Base record class and record type construction.

Record types are declared as subclasses of :class:`Record` whose class
attributes are field kinds, or built at runtime with
:func:`define_record_type`. Both produce the same thing: a class with a frozen
:class:`RecordLayout` and one plain attribute per field.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from typing import Any, ClassVar, TypeVar

from pydantic import ValidationError

from ..exceptions import SchemaError
from ..fields.base import FieldDescriptor
from .layout import FieldSpec, RecordLayout

log = logging.getLogger("flatrecord.models")

R = TypeVar("R", bound="Record")


def _kind_of(value: Any) -> type[FieldDescriptor] | None:
    """Return the field kind declared by a class attribute, if it declares one."""
    if isinstance(value, FieldDescriptor):
        return type(value)
    if isinstance(value, type) and issubclass(value, FieldDescriptor):
        return value
    return None


class FieldAccessor:
    """Class-level attribute exposing one field of a record instance.

    Reading returns the field's decoded value; writing goes through the
    field's ``assign``.
    """

    def __init__(self, name: str, kind: type[FieldDescriptor]) -> None:
        self.name = name
        self.kind = kind

    def __get__(self, instance: Record | None, owner: type | None = None) -> Any:
        if instance is None:
            return self
        return instance._descriptors[self.name].value

    def __set__(self, instance: Record, value: Any) -> None:
        instance._descriptors[self.name].assign(value)

    def __repr__(self) -> str:
        return f"<field {self.name}: {self.kind.__name__}>"


class Record:
    """Base class for all record types.

    Fields are declared as class attributes holding a field kind, either the
    class or an instance of it. Declaration order is the binary layout order;
    fields of a subclass follow the fields it inherits.

    Per-type options can be configured as ClassVar attributes or on a nested
    ``Config`` class:

    Example:
        >>> class SimpleStruct(Record):
        ...     int1 = Int()
        ...     char1 = Char()
        ...     name = Str()
        ...
        ...     record_max_bytes: ClassVar[Optional[int]] = 64
        >>> rec = SimpleStruct(int1=1234)
        >>> rec.char1 = "a"
        >>> rec.int1
        1234

    Attributes:
        record_max_bytes: Maximum encoded size in bytes (optional, checked by encode)
        record_strict: Default for ``decode(strict=...)``; rejects trailing bytes
    """

    __layout__: ClassVar[RecordLayout]

    record_max_bytes: ClassVar[int | None] = None
    record_strict: ClassVar[bool] = False

    _descriptors: dict[str, FieldDescriptor]

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)

        entries = list(cls.__layout__.entries)
        inherited = set(cls.__layout__.names)
        for attr, value in list(vars(cls).items()):
            kind = _kind_of(value)
            if kind is None:
                if attr in inherited:
                    raise SchemaError(
                        f"{cls.__name__}.{attr}: {value!r} shadows an inherited field"
                    )
                continue
            try:
                entries.append(FieldSpec(name=attr, kind=kind))
            except ValidationError as e:
                raise SchemaError(f"{cls.__name__}.{attr}: {_first_error(e)}") from e
            setattr(cls, attr, FieldAccessor(attr, kind))

        try:
            cls.__layout__ = RecordLayout(entries=tuple(entries))
        except ValidationError as e:
            raise SchemaError(f"{cls.__name__}: {_first_error(e)}") from e

        config = vars(cls).get("Config")
        if config is not None:
            if hasattr(config, "record_max_bytes"):
                cls.record_max_bytes = config.record_max_bytes
            if hasattr(config, "record_strict"):
                cls.record_strict = config.record_strict

        max_bytes = cls.record_max_bytes
        if max_bytes is not None and (
            not isinstance(max_bytes, int) or isinstance(max_bytes, bool) or max_bytes < 0
        ):
            raise SchemaError(
                f"{cls.__name__}: record_max_bytes must be a non-negative integer, got {max_bytes!r}"
            )

        log.debug("defined record type %s with fields %s", cls.__name__, cls.__layout__.names)

    def __init__(self, **values: Any) -> None:
        self._descriptors = {
            spec.name: spec.kind(spec.name) for spec in self.__layout__.entries
        }
        for name, value in values.items():
            if name not in self._descriptors:
                raise TypeError(f"{type(self).__name__} has no field {name!r}")
            setattr(self, name, value)

    def __setattr__(self, name: str, value: Any) -> None:
        if not name.startswith("_") and name not in self._descriptors:
            raise AttributeError(f"{type(self).__name__} has no field {name!r}")
        super().__setattr__(name, value)

    def descriptor(self, name: str) -> FieldDescriptor:
        """Return the field descriptor backing field ``name``.

        Raises:
            KeyError: If the record has no such field
        """
        try:
            return self._descriptors[name]
        except KeyError:
            raise KeyError(f"{type(self).__name__} has no field {name!r}") from None

    def descriptors(self) -> Iterator[tuple[str, FieldDescriptor]]:
        """Iterate over (name, descriptor) pairs in layout order."""
        return iter(self._descriptors.items())

    def to_dict(self) -> dict[str, Any]:
        """Return the current field values in layout order."""
        return {name: descriptor.value for name, descriptor in self._descriptors.items()}

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        fields = ", ".join(f"{name}={value!r}" for name, value in self.to_dict().items())
        return f"{type(self).__name__}({fields})"


Record.__layout__ = RecordLayout()


def _first_error(error: ValidationError) -> str:
    return str(error.errors()[0]["msg"])


def define_record_type(
    name: str,
    fields: Iterable[tuple[str, Any]] | Mapping[str, Any],
    *,
    max_bytes: int | None = None,
    strict: bool = False,
) -> type[Record]:
    """Create a record type from an ordered list of (field name, field kind) pairs.

    Args:
        name: Class name of the new record type
        fields: Ordered (name, kind) pairs, or a mapping in insertion order.
            A kind is a FieldDescriptor subclass or an instance of one.
        max_bytes: Value for ``record_max_bytes``
        strict: Value for ``record_strict``

    Returns:
        New Record subclass

    Raises:
        SchemaError: If a name is repeated or invalid, or a kind is not a field kind

    Example:
        >>> Point = define_record_type("Point", [("x", Int), ("y", Int)])
        >>> encode(Point(x=1, y=2))
        b'\\x01\\x00\\x00\\x00\\x02\\x00\\x00\\x00'
    """
    pairs = list(fields.items()) if isinstance(fields, Mapping) else list(fields)

    namespace: dict[str, Any] = {}
    for field_name, kind in pairs:
        if field_name in namespace:
            raise SchemaError(f"{name}: duplicate field name {field_name!r}")
        field_kind = _kind_of(kind)
        if field_kind is None:
            raise SchemaError(f"{name}.{field_name}: {kind!r} is not a field kind")
        try:
            FieldSpec(name=field_name, kind=field_kind)
        except ValidationError as e:
            raise SchemaError(f"{name}.{field_name}: {_first_error(e)}") from e
        namespace[field_name] = kind

    namespace["record_max_bytes"] = max_bytes
    namespace["record_strict"] = strict
    return type(name, (Record,), namespace)


def new_instance(record_type: type[R], **values: Any) -> R:
    """Create a zero-initialised instance of ``record_type``, then assign ``values``.

    Raises:
        InvalidValueError: If a value is outside its field's domain
        TypeError: If a value names an unknown field
    """
    return record_type(**values)
