"""Static HTML glossary generator."""

__version__ = "0.1.0"
