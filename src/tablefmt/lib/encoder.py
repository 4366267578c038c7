"""Value encoder: any Python value -> intermediate row/column text.

Rows end with ``row_separator`` and fields are joined by ``column_separator`` (a
single space when either is empty), so the output can be fed straight to
``tablefmt.lib.layout.build_grid``.
"""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, cast

from tablefmt.lib.options import resolve_options
from tablefmt.lib.tags import TAG_KEY, TagSpec, parse_tag
from tablefmt.lib.types import Convertible, RawString, ValueShape, deref, shape_of

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Mapping

    from tablefmt.lib.options import TableOptions

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class RecordFields:
    """Display names and values of one record, split by inclusion."""

    detail_keys: list[str] = field(default_factory=list)
    detail_values: list[str] = field(default_factory=list)
    list_keys: list[str] = field(default_factory=list)
    list_values: list[str] = field(default_factory=list)


class _Encoder:
    def __init__(self, options: TableOptions) -> None:
        self.options = options

    # -- row helpers --------------------------------------------------------

    def join(self, fields: Iterable[str]) -> str:
        sep = self.options.column_separator or " "
        row_sep = self.options.row_separator
        parts: list[str] = []
        for value in fields:
            if row_sep:
                value = value.removesuffix(row_sep)
            # An empty field would vanish on re-tokenizing and shift its row.
            parts.append(value or self.options.placeholder)
        return sep.join(parts)

    def row(self, *fields: str) -> str:
        return self.join(fields) + (self.options.row_separator or " ")

    def empty_header(self, column_count: int) -> str:
        return self.row(*([self.options.placeholder] * column_count))

    def text(self, value: object) -> str:
        if value is None:
            return self.options.placeholder
        return str(value)

    # -- dispatch -----------------------------------------------------------

    def encode(self, value: object) -> str:
        shape = shape_of(value)
        if shape is ValueShape.OPTIONAL:
            return self.encode_optional(value)
        if shape is ValueShape.RAW_TEXT:
            return self.empty_header(1) + self.row(str(value))
        if shape is ValueShape.TEXT:
            return self.row(cast("str", value))
        if shape is ValueShape.SEQUENCE:
            return self.encode_sequence(cast("Iterable[object]", value))
        if shape is ValueShape.MAPPING:
            return self.encode_mapping(cast("Mapping[object, object]", value))
        if shape is ValueShape.RECORD:
            return self.encode_record(value)
        if shape is ValueShape.CALLABLE:
            return self.empty_header(1) + self.row(callable_name(value))
        return self.row(self.text(value))

    def encode_optional(self, value: object) -> str:
        if value is None:
            return self.row(self.options.placeholder)
        return self.encode(deref(value))

    def encode_plain(self, value: object) -> tuple[str, str]:
        """Return ``(key, text)`` for a value nested in a list or mapping."""

        shape = shape_of(value)
        if shape is ValueShape.OPTIONAL:
            if value is None:
                return self.options.placeholder, self.options.placeholder
            return self.encode_plain(deref(value))
        if shape is ValueShape.RECORD:
            return self.encode_plain_record(value)
        if shape is ValueShape.CALLABLE:
            return self.options.placeholder, callable_name(value)
        return self.options.placeholder, self.text(value)

    def encode_sequence(self, items: Iterable[object]) -> str:
        rows: list[str] = []
        for index, item in enumerate(items, start=1):
            key, text = self.encode_plain(item)
            if index == 1:
                rows.append(self.row(self.options.placeholder, key))
            rows.append(self.row(str(index), text))
        return "".join(rows)

    def encode_mapping(self, mapping: Mapping[object, object]) -> str:
        rows: list[str] = []
        for position, (key, item) in enumerate(mapping.items()):
            key_header, key_text = self.encode_plain(key)
            value_header, value_text = self.encode_plain(item)
            if position == 0:
                rows.append(self.row(key_header, value_header))
            rows.append(self.row(key_text, value_text))
        return "".join(rows)

    def encode_record(self, record: object) -> str:
        fields = self.record_fields(record)
        if not fields.detail_keys:
            return self.row(self.text(record))
        if self.options.transpose_record:
            pairs = zip(fields.detail_keys, fields.detail_values, strict=True)
            return self.empty_header(2) + "".join(self.row(key, text) for key, text in pairs)
        return self.row(*fields.detail_keys) + self.row(*fields.detail_values)

    def encode_plain_record(self, record: object) -> tuple[str, str]:
        fields = self.record_fields(record)
        if not fields.list_keys:
            return self.options.placeholder, self.text(record)
        return self.join(fields.list_keys), self.join(fields.list_values)

    def record_fields(self, record: object) -> RecordFields:
        fields = RecordFields()
        converter = record if isinstance(record, Convertible) else None
        for name, raw, tag in iter_record_members(record):
            if tag.excluded:
                continue
            key = tag.display_name(name)
            value: Any = raw
            if converter is not None and tag.kind:
                value = converter.convert(raw, tag.kind)
            text = self.text(value)
            fields.detail_keys.append(key)
            fields.detail_values.append(text)
            if tag.listed:
                fields.list_keys.append(key)
                fields.list_values.append(text)
        return fields


def iter_record_members(record: object) -> Iterator[tuple[str, object, TagSpec]]:
    """Yield ``(name, value, tag)`` for each record member in declared order."""

    if dataclasses.is_dataclass(record) and not isinstance(record, type):
        for member in dataclasses.fields(record):
            directive = member.metadata.get(TAG_KEY, "")
            yield member.name, getattr(record, member.name), parse_tag(directive)
        return
    for name in cast("tuple[str, ...]", getattr(type(record), "_fields", ())):
        yield name, getattr(record, name), TagSpec()


def callable_name(value: object) -> str:
    qualname = getattr(value, "__qualname__", None) or type(value).__qualname__
    module = getattr(value, "__module__", None) or type(value).__module__
    return f"{module}.{qualname}" if module else qualname


def record_fields(record: object, options: TableOptions | None = None) -> RecordFields:
    """Collect the detail and list field sets of one record."""

    return _Encoder(resolve_options(options)).record_fields(record)


def encode_plain(value: object, options: TableOptions | None = None) -> tuple[str, str]:
    """Return the ``(header, row)`` pair used for ``value`` inside a list or mapping."""

    return _Encoder(resolve_options(options)).encode_plain(value)


def try_encode(value: object, options: TableOptions | None = None) -> str | RawString:
    """Encode ``value``, or return the failure description as a ``RawString``.

    A successful encoding is always a plain ``str``, so callers can tell the
    two apart with ``isinstance``.
    """

    try:
        return _Encoder(resolve_options(options)).encode(value)
    except Exception as exc:
        logger.debug("Encoding %s failed.", type(value).__name__, exc_info=True)
        return RawString(describe_error(exc))


def encode(value: object, options: TableOptions | None = None) -> str:
    """Encode any value; a failure becomes a one-cell table with its message."""

    resolved = resolve_options(options)
    encoded = try_encode(value, resolved)
    if isinstance(encoded, RawString):
        encoder = _Encoder(resolved)
        return encoder.empty_header(1) + encoder.row(str(encoded))
    return encoded


def describe_error(exc: BaseException) -> str:
    return str(exc) or type(exc).__name__
