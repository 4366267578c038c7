"""Table options and the scoped override helpers.

The current options live in a context variable so that a temporary change
made with ``override()`` is always restored, and each thread or async task
sees its own value.
"""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator


@dataclass(frozen=True, slots=True)
class TableOptions:
    """Knobs read by the encoder, the layout engine and the renderer."""

    row_separator: str = "\n"  # empty = any whitespace run; encoded rows end in " "
    column_separator: str = ""  # empty = any whitespace run
    placeholder: str = "_"
    blank_filling: str = ""
    blank_filling_for_header: str = ""
    discard_overflow: bool = False
    use_border: bool = True
    space_alt: str = " "
    overflow_separator: str = " "
    center_filling: str = " "
    ignore_empty_header: bool = True
    transpose_record: bool = False

    def __post_init__(self) -> None:
        for name in ("space_alt", "center_filling"):
            value = getattr(self, name)
            if not isinstance(value, str) or len(value) != 1:
                raise ValueError(
                    f"Invalid value for '{name}': expected a single character, got {value!r}."
                )


DEFAULT_OPTIONS = TableOptions()

_OPTIONS: ContextVar[TableOptions] = ContextVar("_TABLE_OPTIONS", default=DEFAULT_OPTIONS)


def get_options() -> TableOptions:
    """Return the options in effect for the current context."""

    return _OPTIONS.get()


def resolve_options(options: TableOptions | None) -> TableOptions:
    return get_options() if options is None else options


def configure(**changes: object) -> TableOptions:
    """Replace the current options with a copy carrying ``changes``."""

    updated = replace(_OPTIONS.get(), **changes)
    _OPTIONS.set(updated)
    return updated


def reset() -> None:
    """Restore the default options."""

    _OPTIONS.set(DEFAULT_OPTIONS)


@contextmanager
def override(**changes: object) -> Iterator[TableOptions]:
    """Apply ``changes`` for the duration of a ``with`` block.

    >>> with override(use_border=False):
    ...     get_options().use_border
    False
    """

    token = _OPTIONS.set(replace(_OPTIONS.get(), **changes))
    try:
        yield _OPTIONS.get()
    finally:
        _OPTIONS.reset(token)
