"""Command-line interface for STRINGEXT."""
