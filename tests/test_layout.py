"""Grid tokenizer and layout engine."""

from __future__ import annotations

from dataclasses import replace

import pytest

from tablefmt.lib.layout import (
    Grid,
    build_grid,
    grid_from_rows,
    normalize_space,
    split_fields,
    split_lines,
    tokenize,
)
from tablefmt.lib.options import TableOptions
from tablefmt.lib.width import display_width

DEFAULTS = TableOptions()

SAMPLE = " ID _ Num Digit\n\t1 2 3你好\n\t4 _ 5 \n\t7 8 9 10 11"


def test_split_lines_drops_empty_lines() -> None:
    assert split_lines("a b\n\nc d\n", DEFAULTS) == ["a b", "c d"]
    assert split_lines("a//b////c", replace(DEFAULTS, row_separator="//")) == ["a", "b", "c"]


def test_split_lines_without_separator_uses_whitespace() -> None:
    options = replace(DEFAULTS, row_separator="")
    assert split_lines("a b\nc", options) == ["a", "b", "c"]


def test_split_fields() -> None:
    assert split_fields("a  b\tc ", DEFAULTS) == ["a", "b", "c"]
    assert split_fields("a**b*c", replace(DEFAULTS, column_separator="*")) == ["a", "b", "c"]
    assert split_fields("a b*c", replace(DEFAULTS, column_separator="*")) == ["a b", "c"]


def test_normalize_space_keeps_plain_spaces() -> None:
    assert normalize_space("a\tb\vc d", DEFAULTS) == "a b c d"
    assert normalize_space("a\tb c", replace(DEFAULTS, space_alt="~")) == "a~b c"


def test_tokenize_skips_blank_lines() -> None:
    assert tokenize("a b\n   \nc", DEFAULTS) == [["a", "b"], ["c"]]


@pytest.mark.parametrize("text", ["", "\n\n", "   \n  "])
def test_empty_input_yields_sentinel(text: str) -> None:
    grid = build_grid(text, DEFAULTS)
    assert grid == Grid.empty(DEFAULTS)
    assert grid.rows == (("  ",),)
    assert grid.widths == (2,)


def test_sentinel_uses_header_filling_and_center_fill() -> None:
    options = replace(DEFAULTS, blank_filling_for_header="empty", center_filling=".")
    grid = Grid.empty(options)
    assert grid.rows == ((".empty.",),)
    assert grid.widths == (7,)


def test_build_grid_fills_pads_and_joins_overflow() -> None:
    grid = build_grid(SAMPLE, DEFAULTS)

    assert grid.cells == (
        ("ID", "", "Num", "Digit"),
        ("1", "2", "3你好", ""),
        ("4", "", "5", ""),
        ("7", "8", "9", "10 11"),
    )
    assert grid.widths == (4, 3, 7, 7)
    assert grid.rows[0] == (" ID ", "   ", "  Num  ", " Digit ")
    assert grid.rows[1][2] == " 3你好 "
    for row in grid.rows:
        assert tuple(display_width(cell) for cell in row) == grid.widths


def test_overflow_join_uses_separator_in_order() -> None:
    options = replace(DEFAULTS, overflow_separator="+")
    grid = build_grid("a b\n1 2 3 4", options)
    assert grid.cells[1] == ("1", "2+3+4")


def test_overflow_discard() -> None:
    options = replace(DEFAULTS, discard_overflow=True)
    grid = build_grid("a b\n1 2 3 4", options)
    assert grid.cells == (("a", "b"), ("1", "2"))


def test_short_rows_use_blank_filling() -> None:
    options = replace(DEFAULTS, blank_filling="-", blank_filling_for_header="?")
    grid = build_grid("a _ c\n1\n_ 2 3", options)
    assert grid.cells == (("a", "?", "c"), ("1", "-", "-"), ("-", "2", "3"))


def test_placeholder_header_is_dropped() -> None:
    grid = build_grid("_ _\n1 2\n3 4", DEFAULTS)
    assert grid.cells == (("1", "2"), ("3", "4"))


def test_placeholder_header_kept_when_not_ignored() -> None:
    options = replace(DEFAULTS, ignore_empty_header=False)
    grid = build_grid("_ _\n1 2", options)
    assert grid.cells == (("", ""), ("1", "2"))


def test_only_placeholder_header_yields_sentinel() -> None:
    assert build_grid("_ _ _", DEFAULTS) == Grid.empty(DEFAULTS)


def test_custom_separators() -> None:
    options = replace(DEFAULTS, row_separator="//", column_separator="*")
    grid = build_grid("_*_//1*one two//2*three", options)
    assert grid.cells == (("1", "one two"), ("2", "three"))


def test_grid_from_rows_normalizes_whitespace_without_splitting() -> None:
    grid = grid_from_rows([["_"], ["a b\tc\nd"]], DEFAULTS)
    assert grid.cells == (("a b c d",),)
    assert grid.column_count == 1
    assert grid.row_count == 1
