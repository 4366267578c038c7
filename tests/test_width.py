"""Display width and centering."""

from __future__ import annotations

import pytest

from tablefmt.lib.width import center, display_width


@pytest.mark.parametrize(
    "text,expected",
    [
        pytest.param("", 0, id="empty"),
        pytest.param("abc", 3, id="ascii"),
        pytest.param("你好", 4, id="cjk"),
        pytest.param("3你好", 5, id="mixed"),
        pytest.param("é", 2, id="latin-multibyte"),
        pytest.param("a b", 3, id="space"),
    ],
)
def test_display_width(text: str, expected: int) -> None:
    assert display_width(text) == expected


def test_center_puts_the_odd_column_on_the_right() -> None:
    assert center("ab", 6) == "  ab  "
    assert center("abc", 6) == " abc  "
    assert center("", 3) == "   "
    assert center("x", 4, "*") == "*x**"
    assert center("你", 5) == " 你  "


def test_center_never_truncates() -> None:
    assert center("abcdef", 3) == "abcdef"


@pytest.mark.parametrize("text", ["a", "ab", "你好", "x你", "hello world"])
@pytest.mark.parametrize("width", [12, 13])
def test_center_padding_adds_up(text: str, width: int) -> None:
    padded = center(text, width, "*")
    left = len(padded) - len(padded.lstrip("*"))
    right = len(padded) - len(padded.rstrip("*"))
    assert left + right == width - display_width(text)
    assert right - left in {0, 1}
    assert display_width(padded) == width
