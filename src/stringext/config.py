"""Configuration constants for STRINGEXT.

This module centralizes the defaults shared by the string helpers and the
names of environment variables read by the CLI.
"""

DEFAULT_DELIMITER = ", "  # pragma: no mutate
CSV_SEPARATOR = ","  # pragma: no mutate

# Fixed list of characters removed by ``normalize_page_name``.
PAGE_NAME_SPECIAL_CHARACTERS = '!@#€¥$£%^&* ()+=-[]\\;/{}|":<>?'  # pragma: no mutate

DELIMITER_ENVVAR = "STRINGEXT_DELIMITER"  # pragma: no mutate
