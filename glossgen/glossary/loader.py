"""Parse a term/definition text file into a :class:`Glossary`.

Input format::

    term
    definition line 1
    definition line 2

    next-term
    ...

A term line is non-empty and contains no whitespace. The lines after it, up to a
blank line or the end of input, are joined with single spaces to form its
definition.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterable, List

from .models import Glossary, GlossaryFormatError, LoadIssue

logger = logging.getLogger(__name__)


def is_term_line(line: str) -> bool:
    return bool(line) and not any(ch.isspace() for ch in line)


def _report(issue: LoadIssue, issues: List[LoadIssue], *, strict: bool) -> None:
    if strict:
        raise GlossaryFormatError(issue)
    logger.warning("入力をスキップしました: %s", issue.describe())
    issues.append(issue)


def load_lines(lines: Iterable[str], *, strict: bool = False) -> Glossary:
    """Build a glossary from input lines in a single pass.

    Duplicate terms keep their first position in the term list and take the
    last definition. Lines outside any entry that are not term lines are
    skipped; both cases are recorded in ``Glossary.issues``. With
    ``strict=True`` they raise :class:`GlossaryFormatError` instead.
    """
    terms: List[str] = []
    definitions: Dict[str, str] = {}
    issues: List[LoadIssue] = []

    current: str | None = None
    parts: List[str] = []

    for line_number, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")
        if current is not None:
            if line:
                parts.append(line)
                continue
            definitions[current] = " ".join(parts)
            current = None
            continue

        if not line:
            continue
        if not is_term_line(line):
            _report(LoadIssue(line_number, line, "not a term line"), issues, strict=strict)
            continue
        if line in definitions:
            _report(LoadIssue(line_number, line, "duplicate term"), issues, strict=strict)
        else:
            terms.append(line)
            # 仮登録: 定義が閉じる前でも terms と definitions を同期させる
            definitions[line] = ""
        current = line
        parts = []

    if current is not None:
        definitions[current] = " ".join(parts)

    logger.debug("glossary loaded: %d terms, %d issues", len(terms), len(issues))
    return Glossary(terms=tuple(terms), definitions=definitions, issues=tuple(issues))


def load_glossary(path: Path, *, encoding: str = "utf-8", strict: bool = False) -> Glossary:
    """Read ``path`` and parse it with :func:`load_lines`.

    Errors opening or decoding the file propagate unchanged.
    """
    text = Path(path).read_text(encoding=encoding)
    logger.info("用語ファイルを読み込みました: %s", path)
    return load_lines(text.splitlines(), strict=strict)


__all__ = ["is_term_line", "load_glossary", "load_lines"]
