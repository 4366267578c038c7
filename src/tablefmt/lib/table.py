"""Formatting pipeline: value -> encoder -> grid -> rendered text."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

from tablefmt.lib.encoder import describe_error, try_encode
from tablefmt.lib.layout import Grid, build_grid, grid_from_rows
from tablefmt.lib.options import resolve_options
from tablefmt.lib.render import render
from tablefmt.lib.types import RawString

if TYPE_CHECKING:
    from typing import TextIO

    from tablefmt.lib.options import TableOptions

logger = logging.getLogger(__name__)


def _raw_grid(text: RawString, options: TableOptions) -> Grid:
    # Raw text skips tokenizing: one header placeholder, one literal cell.
    return grid_from_rows([[options.placeholder], [str(text) or options.placeholder]], options)


def build_table_grid(value: object, options: TableOptions | None = None) -> Grid:
    """Encode ``value`` and lay it out into a grid of centered cells.

    An encoding failure becomes one literal cell holding its description.
    """

    resolved = resolve_options(options)
    if isinstance(value, RawString):
        return _raw_grid(value, resolved)
    encoded = try_encode(value, resolved)
    if isinstance(encoded, RawString):
        return _raw_grid(encoded, resolved)
    return build_grid(encoded, resolved)


def _error_grid(exc: Exception, options: TableOptions) -> Grid:
    logger.warning("Table layout failed; rendering the error instead.", exc_info=True)
    return _raw_grid(RawString(describe_error(exc)), options)


def safe_table_grid(value: object, options: TableOptions | None = None) -> Grid:
    """Like ``build_table_grid`` but a layout failure also degrades to one cell."""

    resolved = resolve_options(options)
    try:
        return build_table_grid(value, resolved)
    except Exception as exc:
        return _error_grid(exc, resolved)


def format_table(value: object, options: TableOptions | None = None) -> str:
    """Render ``value`` as a table. Never raises for any input value."""

    resolved = resolve_options(options)
    grid = safe_table_grid(value, resolved)
    try:
        return render(grid, resolved)
    except Exception as exc:
        return render(_error_grid(exc, resolved), resolved)


def print_table(
    value: object,
    options: TableOptions | None = None,
    *,
    file: TextIO | None = None,
) -> None:
    print(format_table(value, options), end="", file=file or sys.stdout)
