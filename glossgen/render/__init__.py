"""HTML rendering for glossary pages."""
from .linker import link_fragments, render_definition, term_link
from .pages import DEFAULT_INDEX_TITLE, render_index_page, render_term_page

__all__ = [
    "DEFAULT_INDEX_TITLE",
    "link_fragments",
    "render_definition",
    "render_index_page",
    "render_term_page",
    "term_link",
]
