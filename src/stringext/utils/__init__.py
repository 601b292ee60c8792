"""Stateless string helpers.

Scope:
- Small, pure functions over strings and sequences: joining, splitting,
  sanitizing and encoding.
- One stateful type, ``SecureString``, which is owned entirely by the caller
  that receives it.
- No I/O and no configuration beyond the defaults in ``stringext.config``.

Organization:
- ``delimited.py``: delimited-string builder.
- ``sanitize.py``: CSV splitting, special character stripping, page-name
  normalization and HTML encoding.
- ``secure.py``: ``SecureString`` and ``to_secure_string``.
"""

from .delimited import DEFAULT_DELIMITER, DelimitedStringOptions, to_delimited_string
from .sanitize import (
    html_encode,
    normalize_page_name,
    split_csv,
    strip_special_characters,
)
from .secure import SecureString, to_secure_string

__all__ = [
    "DEFAULT_DELIMITER",
    "DelimitedStringOptions",
    "SecureString",
    "html_encode",
    "normalize_page_name",
    "split_csv",
    "strip_special_characters",
    "to_delimited_string",
    "to_secure_string",
]
