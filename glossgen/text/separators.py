"""Separator characters used to split definition text into runs."""
from __future__ import annotations

from typing import FrozenSet

SEPARATORS: FrozenSet[str] = frozenset(" \t,")


def is_separator(ch: str) -> bool:
    return ch in SEPARATORS


__all__ = ["SEPARATORS", "is_separator"]
