"""Glossary data model and error types."""
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import List, Mapping, Tuple


class GlossaryError(RuntimeError):
    """Base error for glossary loading and output."""


@dataclass(slots=True, frozen=True)
class LoadIssue:
    line_number: int
    text: str
    reason: str

    def describe(self) -> str:
        return f"line {self.line_number}: {self.reason}: {self.text!r}"


class GlossaryFormatError(GlossaryError):
    """入力ファイルの形式に問題があった場合に送出 (strict モード)。"""

    def __init__(self, issue: LoadIssue) -> None:
        self.issue = issue
        super().__init__(issue.describe())


class GlossaryConsistencyError(GlossaryError):
    """Raised when the term list and the definition mapping disagree."""


class GlossaryOutputError(GlossaryError):
    """Raised when a term cannot be written as its own page."""


@dataclass(slots=True, frozen=True)
class Glossary:
    terms: Tuple[str, ...]
    definitions: Mapping[str, str]
    issues: Tuple[LoadIssue, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        # frozen なので object.__setattr__ で読み取り専用ビューに差し替える
        object.__setattr__(self, "definitions", MappingProxyType(dict(self.definitions)))
        if len(set(self.terms)) != len(self.terms):
            raise GlossaryConsistencyError("term list contains duplicates")
        if set(self.terms) != set(self.definitions):
            missing = sorted(set(self.terms) ^ set(self.definitions))
            raise GlossaryConsistencyError(f"terms and definitions out of sync: {missing}")

    def __len__(self) -> int:
        return len(self.terms)

    def __contains__(self, term: object) -> bool:
        return term in self.definitions

    def sorted_terms(self) -> List[str]:
        """Terms in code-point order."""
        return sorted(self.terms)

    def definition_of(self, term: str) -> str:
        try:
            return self.definitions[term]
        except KeyError as exc:
            raise GlossaryConsistencyError(f"no definition for term: {term!r}") from exc


__all__ = [
    "Glossary",
    "GlossaryConsistencyError",
    "GlossaryError",
    "GlossaryFormatError",
    "GlossaryOutputError",
    "LoadIssue",
]
