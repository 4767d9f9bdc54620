"""Pipeline utilities for glossgen."""
from .build import (
    BuildOptions,
    BuildResult,
    build_glossary_site,
    ensure_input_file,
    write_site,
)

__all__ = [
    "BuildOptions",
    "BuildResult",
    "build_glossary_site",
    "ensure_input_file",
    "write_site",
]
