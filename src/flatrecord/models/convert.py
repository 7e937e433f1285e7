"""Conversion between records and Pydantic models.

Records keep their values inside field descriptors, which makes them awkward
to serialize as JSON or to validate against other schemas. This module
mirrors a record layout as a Pydantic model so a record can be snapshotted
(``to_model``) and rebuilt (``from_model``).
"""

from __future__ import annotations

from collections.abc import Mapping
from functools import lru_cache
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, create_model

from .base import Record

R = TypeVar("R", bound=Record)


@lru_cache(maxsize=None)
def model_for(record_type: type[Record]) -> type[BaseModel]:
    """Return a Pydantic model class mirroring the layout of ``record_type``.

    Field annotations follow the decoded value types: ``int`` for integer
    kinds, ``float`` for float kinds, ``str`` for Char and Str, ``bool`` for
    Bool and ``None`` for Null. The model class is cached per record type.

    Example:
        >>> Model = model_for(SimpleStruct)
        >>> Model.model_fields.keys()
        dict_keys(['int1', 'char1', 'char2'])
    """
    definitions: dict[str, Any] = {
        spec.name: (spec.kind.python_type, ...) for spec in record_type.__layout__.entries
    }
    return create_model(
        f"{record_type.__name__}Model",
        __config__=ConfigDict(extra="forbid", frozen=True, protected_namespaces=()),
        **definitions,
    )


def to_model(record: Record) -> BaseModel:
    """Snapshot the current values of ``record`` as a Pydantic model instance.

    Example:
        >>> to_model(rec).model_dump_json()
        '{"int1":1234,"char1":"a","char2":"X"}'
    """
    return model_for(type(record))(**record.to_dict())


def from_model(record_type: type[R], source: BaseModel | Mapping[str, Any]) -> R:
    """Build a record of ``record_type`` from a model instance or a mapping.

    Values are assigned through the field descriptors, so the usual
    validation and narrowing rules apply.

    Raises:
        InvalidValueError: If a value is outside its field's domain
        TypeError: If ``source`` names a field the record does not have
    """
    values = source.model_dump() if isinstance(source, BaseModel) else dict(source)
    return record_type(**values)
