"""HTML page templates for term pages and the index page."""
from __future__ import annotations

from typing import Iterable, List, Sequence

from .linker import render_definition, term_link

DEFAULT_INDEX_TITLE = "Glossary"


def _document(lines: Sequence[str]) -> str:
    return "\n".join(lines) + "\n"


def render_term_page(term: str, definition: str, terms: Iterable[str]) -> str:
    """Render the page for one term.

    The definition is linked against the full term set, so a definition that
    mentions its own term links back to this page.
    """
    lines: List[str] = [
        "<html>",
        "<head>",
        f"<title>{term}</title>",
        "</head>",
        "<body>",
        "<h2>",
        "<b>",
        "<i>",
        f'<font color="red">{term}</font>',
        "</i>",
        "</b>",
        "</h2>",
        "<blockquote>",
        render_definition(definition, terms),
        "</blockquote>",
        "<hr>",
        "<p>",
        "Return to",
        '<a href="index.html">index</a>.',
        "</p>",
        "</body>",
        "</html>",
    ]
    return _document(lines)


def render_index_page(sorted_terms: Sequence[str], *, title: str = DEFAULT_INDEX_TITLE) -> str:
    """Render the index listing ``sorted_terms`` in the given order."""
    lines: List[str] = [
        "<html>",
        "<head>",
        f"<title>{title}</title>",
        "</head>",
        "<body>",
        f"<h2>{title}</h2>",
        "<hr>",
        "<h3>Index</h3>",
        "<ul>",
    ]
    for term in sorted_terms:
        lines.append(f"<li>{term_link(term)}</li>")
    lines.extend(["</ul>", "</body>", "</html>"])
    return _document(lines)


__all__ = ["DEFAULT_INDEX_TITLE", "render_index_page", "render_term_page"]
