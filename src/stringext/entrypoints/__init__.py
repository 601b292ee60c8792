"""Entrypoints (inbound adapters) for STRINGEXT.

Expose the string helpers to the outside world through the command line.
Parse and validate inputs, call ``stringext.utils`` and present results.
"""
