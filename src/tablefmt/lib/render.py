"""Grid renderers: borderless and box-drawn."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tablefmt.lib.options import resolve_options

if TYPE_CHECKING:
    from collections.abc import Sequence

    from tablefmt.lib.layout import Grid
    from tablefmt.lib.options import TableOptions

HR_LINE = "─"
VT_LINE = "│"

TOP_LEFT = "┌"
TOP_CENTER = "┬"
TOP_RIGHT = "┐"

MIDDLE_LEFT = "├"
MIDDLE_CENTER = "┼"
MIDDLE_RIGHT = "┤"

BOTTOM_LEFT = "└"
BOTTOM_CENTER = "┴"
BOTTOM_RIGHT = "┘"


def _line(left: str, center: str, right: str, parts: Sequence[str]) -> str:
    return f"{left}{center.join(parts)}{right}"


def render_simple(grid: Grid) -> str:
    return "".join("".join(row) + "\n" for row in grid.rows)


def render_bordered(grid: Grid) -> str:
    """Draw the grid inside box glyphs sized to each column width.

    A rule goes above the first row, between every pair of rows and below
    the last one.
    """

    fill = [HR_LINE * width for width in grid.widths]
    top = _line(TOP_LEFT, TOP_CENTER, TOP_RIGHT, fill)
    middle = _line(MIDDLE_LEFT, MIDDLE_CENTER, MIDDLE_RIGHT, fill)
    bottom = _line(BOTTOM_LEFT, BOTTOM_CENTER, BOTTOM_RIGHT, fill)

    lines = [top]
    for index, row in enumerate(grid.rows):
        if index:
            lines.append(middle)
        lines.append(_line(VT_LINE, VT_LINE, VT_LINE, row))
    lines.append(bottom)
    return "".join(f"{line}\n" for line in lines)


def render(grid: Grid, options: TableOptions | None = None) -> str:
    if resolve_options(options).use_border:
        return render_bordered(grid)
    return render_simple(grid)
