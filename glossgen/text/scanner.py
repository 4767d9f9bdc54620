"""Word / separator run scanner.

定義文を「区切り文字の連続」と「それ以外の文字の連続」に分割する。
各 run は開始位置の文字だけで種類が決まり、種類の異なる文字を含まない。
"""
from __future__ import annotations

from typing import Iterator

from .separators import is_separator


def next_run(text: str, position: int) -> str:
    """Return the maximal same-class run of ``text`` starting at ``position``.

    The run is all separators if ``text[position]`` is a separator, otherwise
    all non-separators. It stops at the first character of the other class or
    at the end of ``text``.

    Raises:
        ValueError: if ``position`` is outside ``0 <= position < len(text)``.
    """
    if not 0 <= position < len(text):
        raise ValueError(f"position out of range: {position} (len={len(text)})")

    separator_run = is_separator(text[position])
    end = position + 1
    while end < len(text) and is_separator(text[end]) == separator_run:
        end += 1
    return text[position:end]


def iter_runs(text: str) -> Iterator[str]:
    """Yield consecutive runs covering ``text`` from start to end."""
    position = 0
    while position < len(text):
        run = next_run(text, position)
        yield run
        position += len(run)


__all__ = ["iter_runs", "next_run"]
