"""Definition text → HTML fragments with links to other glossary terms."""
from __future__ import annotations

from typing import AbstractSet, Iterable, List

from glossgen.text import is_separator, iter_runs


def term_link(term: str) -> str:
    return f'<a href="{term}.html">{term}</a>'


def link_fragments(text: str, terms: Iterable[str]) -> List[str]:
    """Split ``text`` into runs, wrapping runs that equal a term in a link.

    Matching is exact and case-sensitive over the whole run. Separator runs
    and unmatched word runs are returned verbatim, so joining the result with
    no terms gives back ``text``.
    """
    known: AbstractSet[str] = terms if isinstance(terms, (set, frozenset)) else frozenset(terms)
    fragments: List[str] = []
    for run in iter_runs(text):
        if not is_separator(run[0]) and run in known:
            fragments.append(term_link(run))
        else:
            fragments.append(run)
    return fragments


def render_definition(text: str, terms: Iterable[str]) -> str:
    return "".join(link_fragments(text, terms))


__all__ = ["link_fragments", "render_definition", "term_link"]
