"""Hypothesis property tests for the string helpers.

- **Join/split**: joining with a delimiter made of characters no item uses and
  splitting on it recovers the items, with no trailing delimiter.
- **Idempotence**: stripping special characters (or page-name characters)
  twice equals doing it once.
- **Secure round trip**: ``to_secure_string(x).reveal() == x``.
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from stringext.utils import (
    normalize_page_name,
    split_csv,
    strip_special_characters,
    to_delimited_string,
    to_secure_string,
)

pytestmark = [pytest.mark.property]

# items and delimiters draw from disjoint alphabets
items_lists = st.lists(st.text(alphabet="abcxyz 01"), min_size=1)
delimiters = st.text(alphabet="|;,-", min_size=1, max_size=3)


@given(items=items_lists, delimiter=delimiters)
def test_join_then_split_recovers_items(items, delimiter):
    joined = to_delimited_string(items, delimiter=delimiter)
    assert joined.split(delimiter) == items


@given(items=items_lists, delimiter=delimiters)
def test_join_has_no_trailing_delimiter(items, delimiter):
    joined = to_delimited_string(items, delimiter=delimiter)
    assert len(joined) == sum(map(len, items)) + len(delimiter) * (len(items) - 1)
    if items[-1]:
        assert not joined.endswith(delimiter)


@given(st.text())
def test_strip_special_characters_is_idempotent(value):
    once = strip_special_characters(value)
    assert strip_special_characters(once) == once


@given(st.text())
def test_normalize_page_name_is_idempotent(value):
    once = normalize_page_name(value)
    assert normalize_page_name(once) == once


@given(st.lists(st.text(alphabet=st.characters(exclude_characters=","), min_size=1)))
def test_split_csv_inverts_comma_join(fields):
    assert split_csv(",".join(fields)) == fields


@given(st.text(min_size=1))
def test_secure_string_round_trip(value):
    assert to_secure_string(value).reveal() == value
