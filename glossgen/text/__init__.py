"""Text scanning helpers for definition linking."""
from .scanner import iter_runs, next_run
from .separators import SEPARATORS, is_separator

__all__ = ["SEPARATORS", "is_separator", "iter_runs", "next_run"]
