from __future__ import annotations

from enum import Enum
from typing import Any, Mapping, Type, TypeVar

from ..core.exceptions import SerializationError

T = TypeVar("T", bound=Enum)


def enum_field(record: Mapping[str, Any], field: str, enum_cls: Type[T]) -> T:
    """Read a closed-variant field, rejecting values outside the enum."""
    value = record.get(field)
    try:
        return enum_cls(value)
    except ValueError as e:
        raise SerializationError(f"Invalid {field} {value!r} in stored record") from e


def without_none(record: dict[str, Any]) -> dict[str, Any]:
    return {k: v for k, v in record.items() if v is not None}
