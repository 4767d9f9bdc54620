"""Command line interface for glossgen."""
