"""Value shapes understood by the encoder."""

from __future__ import annotations

import dataclasses
import weakref
from collections.abc import Mapping, Sequence, Set
from enum import StrEnum
from typing import Protocol, cast, runtime_checkable


class RawString(str):
    """Text rendered as one literal cell; its content is never re-tokenized."""

    __slots__ = ()


@runtime_checkable
class Convertible(Protocol):
    """Records that render tagged fields through their own conversion."""

    def convert(self, value: object, kind: str) -> str: ...


class ValueShape(StrEnum):
    OPTIONAL = "optional"
    TEXT = "text"
    RAW_TEXT = "raw_text"
    SEQUENCE = "sequence"
    MAPPING = "mapping"
    RECORD = "record"
    CALLABLE = "callable"
    SCALAR = "scalar"


_BINARY_TYPES: tuple[type, ...] = (bytes, bytearray, memoryview)


def is_record(value: object) -> bool:
    """True for dataclass instances and namedtuples."""

    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return True
    return isinstance(value, tuple) and hasattr(type(value), "_fields")


def shape_of(value: object) -> ValueShape:
    """Classify one value for encoder dispatch."""

    if value is None or isinstance(value, weakref.ReferenceType):
        return ValueShape.OPTIONAL
    if isinstance(value, RawString):
        return ValueShape.RAW_TEXT
    if isinstance(value, str):
        return ValueShape.TEXT
    if is_record(value):
        return ValueShape.RECORD
    if isinstance(value, Mapping):
        return ValueShape.MAPPING
    if isinstance(value, _BINARY_TYPES):
        return ValueShape.SCALAR
    if isinstance(value, (Sequence, Set)):
        return ValueShape.SEQUENCE
    if callable(value):
        return ValueShape.CALLABLE
    return ValueShape.SCALAR


def deref(value: object) -> object:
    """Unwrap one level of indirection; ``None`` and dead references give ``None``."""

    if isinstance(value, weakref.ReferenceType):
        return cast("weakref.ReferenceType[object]", value)()
    return None
