"""Display width helpers."""

from __future__ import annotations

_WIDE_THRESHOLD = 0x80


def char_width(char: str) -> int:
    # Any code point that needs more than one UTF-8 byte takes two columns.
    return 2 if ord(char) >= _WIDE_THRESHOLD else 1


def display_width(text: str) -> int:
    """Return the on-screen width of ``text``.

    >>> display_width("ab")
    2
    >>> display_width("你好")
    4
    """

    return sum(char_width(char) for char in text)


def center(text: str, width: int, fill: str = " ") -> str:
    """Pad ``text`` to ``width`` columns; the right side takes the odd column."""

    gap = max(width - display_width(text), 0)
    left = gap // 2
    return f"{fill * left}{text}{fill * (gap - left)}"
