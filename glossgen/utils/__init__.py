"""Utility modules for glossgen."""
from .paths import INDEX_FILENAME, index_path, page_filename, page_path

__all__ = [
    'INDEX_FILENAME',
    'index_path',
    'page_filename',
    'page_path',
]
