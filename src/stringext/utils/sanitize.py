"""Regex- and table-based string sanitizers.

This module provides helpers that split comma-separated values, remove or
replace runs of non-word characters, strip a fixed set of special characters
from page names, and HTML-encode text either minimally (``<`` and ``>`` only)
or fully via :func:`html.escape`.

All helpers treat ``None`` as an empty string and never raise.
"""

import html
import re

from stringext.config import CSV_SEPARATOR, PAGE_NAME_SPECIAL_CHARACTERS

NON_WORD_PATTERN = re.compile(r"\W+")
PAGE_NAME_TRANSLATION = str.maketrans("", "", PAGE_NAME_SPECIAL_CHARACTERS)
TAG_CHARACTER_ENTITIES = (("<", "&lt;"), (">", "&gt;"))


def split_csv(value: str | None) -> list[str]:
    """Split a comma-separated string, dropping empty fields.

    Args:
        value: The string to split.

    Returns:
        list[str]: The non-empty fields in order; ``[]`` for ``None`` or ``""``.
    """
    if not value:
        return []
    return [field for field in value.split(CSV_SEPARATOR) if field]


def _replace_non_word_runs(value: str | None, replacement: str) -> str:
    if not value:
        return ""
    # callable replacement so backslashes in ``replacement`` stay literal
    return NON_WORD_PATTERN.sub(lambda _match: replacement, value)


def strip_special_characters(value: str | None, replacement: str = "") -> str:
    """Remove, or replace, every run of non-word characters.

    A non-word character is anything other than a letter, digit or underscore.
    Each maximal run is replaced once, so ``"a--b"`` with ``"_"`` becomes
    ``"a_b"``.

    Args:
        value: Input string.
        replacement: Text inserted in place of each run (default: delete).

    Returns:
        str: The sanitized string.
    """
    return _replace_non_word_runs(value, replacement or "")


def normalize_page_name(page_name: str | None) -> str:
    """Delete a fixed list of special characters from a page name.

    Only the characters in ``PAGE_NAME_SPECIAL_CHARACTERS`` are removed; other
    punctuation and non-ASCII symbols are kept. This is deliberately not the
    same as :func:`strip_special_characters`.

    Args:
        page_name: The page name to normalize.

    Returns:
        str: The page name without the listed characters.
    """
    if not page_name:
        return ""
    return page_name.translate(PAGE_NAME_TRANSLATION)


def html_encode(value: str | None, tag_characters_only: bool = True) -> str:
    """HTML-encode a string.

    Args:
        value: Text to encode.
        tag_characters_only: When True (default) only ``<`` and ``>`` are
            replaced by ``&lt;`` and ``&gt;``. When False the whole string is
            escaped with :func:`html.escape`, quotes included.

    Returns:
        str: The encoded text.
    """
    if not value:
        return ""
    if not tag_characters_only:
        return html.escape(value, quote=True)
    encoded = value
    for character, entity in TAG_CHARACTER_ENTITIES:
        encoded = encoded.replace(character, entity)
    return encoded
