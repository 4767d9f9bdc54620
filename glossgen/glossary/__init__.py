"""Glossary loading and model types."""
from .loader import is_term_line, load_glossary, load_lines
from .models import (
    Glossary,
    GlossaryConsistencyError,
    GlossaryError,
    GlossaryFormatError,
    GlossaryOutputError,
    LoadIssue,
)

__all__ = [
    "Glossary",
    "GlossaryConsistencyError",
    "GlossaryError",
    "GlossaryFormatError",
    "GlossaryOutputError",
    "LoadIssue",
    "is_term_line",
    "load_glossary",
    "load_lines",
]
