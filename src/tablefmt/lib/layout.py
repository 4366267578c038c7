"""Grid tokenizer and layout engine.

Turns an intermediate text block (or any whitespace-tabulated text) into a
rectangular grid of centered cells.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from tablefmt.lib.options import resolve_options
from tablefmt.lib.width import center, display_width

if TYPE_CHECKING:
    from collections.abc import Sequence

    from tablefmt.lib.options import TableOptions

logger = logging.getLogger(__name__)

COLUMN_MARGIN = 2


@dataclass(frozen=True, slots=True)
class Grid:
    """Finished table: raw cells, centered rows and column widths."""

    cells: tuple[tuple[str, ...], ...]
    rows: tuple[tuple[str, ...], ...]
    widths: tuple[int, ...]

    @property
    def row_count(self) -> int:
        return len(self.rows)

    @property
    def column_count(self) -> int:
        return len(self.widths)

    @classmethod
    def empty(cls, options: TableOptions | None = None) -> Grid:
        """The one-cell sentinel used when there is nothing to show."""

        resolved = resolve_options(options)
        fill = resolved.center_filling
        cell = f"{fill}{resolved.blank_filling_for_header}{fill}"
        return cls(
            cells=((resolved.blank_filling_for_header,),),
            rows=((cell,),),
            widths=(display_width(cell),),
        )


def split_lines(text: str, options: TableOptions) -> list[str]:
    if options.row_separator:
        lines = text.split(options.row_separator)
    else:
        lines = text.split()
    return [line for line in lines if line]


def split_fields(line: str, options: TableOptions) -> list[str]:
    if options.column_separator:
        fields = line.split(options.column_separator)
    else:
        fields = line.split()
    return [field for field in fields if field]


def normalize_space(text: str, options: TableOptions) -> str:
    """Rewrite every whitespace character except the plain space."""

    return "".join(
        options.space_alt if char.isspace() and char != " " else char for char in text
    )


def tokenize(text: str, options: TableOptions | None = None) -> list[list[str]]:
    """Split text into non-empty rows of fields."""

    resolved = resolve_options(options)
    rows: list[list[str]] = []
    for line in split_lines(text, resolved):
        fields = split_fields(line, resolved)
        if fields:
            rows.append(fields)
    return rows


def _fill_row(
    fields: Sequence[str],
    column_count: int,
    filling: str,
    options: TableOptions,
) -> list[str]:
    row = [filling] * column_count
    for col, value in enumerate(fields):
        if value == options.placeholder:
            value = filling
        if col >= column_count:
            if options.discard_overflow:
                logger.debug("Discarding %d overflow field(s).", len(fields) - column_count)
                break
            col = column_count - 1
            value = f"{row[col]}{options.overflow_separator}{value}"
        row[col] = normalize_space(value, options)
    return row


def grid_from_rows(
    raw_rows: Sequence[Sequence[str]],
    options: TableOptions | None = None,
) -> Grid:
    """Lay out already split rows; the first row fixes the column count."""

    resolved = resolve_options(options)
    rows = [list(row) for row in raw_rows if row]
    if not rows:
        return Grid.empty(resolved)

    column_count = len(rows[0])
    if resolved.ignore_empty_header and all(
        field == resolved.placeholder for field in rows[0]
    ):
        rows = rows[1:]
        if not rows:
            return Grid.empty(resolved)

    cells: list[list[str]] = []
    for index, fields in enumerate(rows):
        filling = resolved.blank_filling_for_header if index == 0 else resolved.blank_filling
        cells.append(_fill_row(fields, column_count, filling, resolved))

    widths = tuple(
        max(display_width(row[col]) for row in cells) + COLUMN_MARGIN
        for col in range(column_count)
    )
    padded = tuple(
        tuple(
            center(value, widths[col], resolved.center_filling) for col, value in enumerate(row)
        )
        for row in cells
    )
    return Grid(
        cells=tuple(tuple(row) for row in cells),
        rows=padded,
        widths=widths,
    )


def build_grid(text: str, options: TableOptions | None = None) -> Grid:
    """Tokenize an intermediate text block and lay it out."""

    resolved = resolve_options(options)
    return grid_from_rows(tokenize(text, resolved), resolved)
