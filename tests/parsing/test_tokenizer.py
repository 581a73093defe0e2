"""
Tests for prefix tokenization and the duplicate-prefix guard.
"""

import pytest

from cerebro.exceptions import DuplicatePrefixError
from cerebro.parsing.syntax import (
    ALL_FIELD_PREFIXES,
    PREFIX_ADDRESS,
    PREFIX_EMAIL,
    PREFIX_NAME,
    PREFIX_PHONE,
    PREFIX_STATUS,
    PREFIX_TAG,
    SINGLE_VALUED_PREFIXES,
)
from cerebro.parsing.tokenizer import tokenize


class TestTokenize:
    """Tests for tokenize."""

    def test_preamble_and_values(self):
        """Test the preamble precedes the first prefix and values are trimmed."""
        arg_map = tokenize("  1,3  n/ Google Inc  t/a t/b ", ALL_FIELD_PREFIXES)
        assert arg_map.preamble == "1,3"
        assert arg_map.get_value(PREFIX_NAME) == "Google Inc"
        assert arg_map.get_all_values(PREFIX_TAG) == ["a", "b"]

    def test_no_prefixes(self):
        """Test input without prefixes is all preamble."""
        arg_map = tokenize(" 1 2 3 ", ALL_FIELD_PREFIXES)
        assert arg_map.preamble == "1 2 3"
        assert arg_map.present_prefixes() == []
        assert arg_map.get_value(PREFIX_NAME) is None
        assert arg_map.get_all_values(PREFIX_TAG) == []

    def test_prefix_only_after_whitespace(self):
        """Test a prefix glued to a previous word stays inside the value."""
        arg_map = tokenize(" a/12 Main St/n/x n/Acme", ALL_FIELD_PREFIXES)
        assert arg_map.get_value(PREFIX_ADDRESS) == "12 Main St/n/x"
        assert arg_map.get_value(PREFIX_NAME) == "Acme"

    def test_unrecognised_prefixes_are_plain_text(self):
        """Test prefixes not requested for this command are not split out."""
        arg_map = tokenize(" 1 s/applied n/Acme", [PREFIX_STATUS])
        assert arg_map.get_value(PREFIX_STATUS) == "applied n/Acme"
        assert not arg_map.is_present(PREFIX_NAME)

    def test_empty_value_is_present(self):
        """Test a prefix with no text is present with an empty value."""
        arg_map = tokenize(" 1 p/ t/", ALL_FIELD_PREFIXES)
        assert arg_map.is_present(PREFIX_PHONE)
        assert arg_map.get_value(PREFIX_PHONE) == ""
        assert arg_map.get_all_values(PREFIX_TAG) == [""]

    def test_last_value_wins(self):
        """Test get_value returns the last of repeated values."""
        arg_map = tokenize(" t/a t/b", ALL_FIELD_PREFIXES)
        assert arg_map.get_value(PREFIX_TAG) == "b"

    def test_present_prefixes_in_first_occurrence_order(self):
        """Test present prefixes are ordered by where they first appear."""
        arg_map = tokenize(" e/x@y.com n/A e/z@y.com p/911", ALL_FIELD_PREFIXES)
        assert arg_map.present_prefixes() == [PREFIX_EMAIL, PREFIX_NAME, PREFIX_PHONE]


class TestDuplicatePrefixGuard:
    """Tests for verify_no_duplicate_prefixes_for."""

    def test_repeated_tags_allowed(self):
        """Test multi-valued prefixes may repeat."""
        arg_map = tokenize(" n/A t/a t/b t/c", ALL_FIELD_PREFIXES)
        arg_map.verify_no_duplicate_prefixes_for(*SINGLE_VALUED_PREFIXES)

    def test_single_duplicate_named(self):
        """Test one duplicated prefix is named in the error."""
        arg_map = tokenize(" n/A n/B", ALL_FIELD_PREFIXES)
        with pytest.raises(DuplicatePrefixError) as exc_info:
            arg_map.verify_no_duplicate_prefixes_for(*SINGLE_VALUED_PREFIXES)
        assert exc_info.value.prefixes == ["n/"]

    def test_all_duplicates_named(self):
        """Test every duplicated prefix is named, not just the first."""
        arg_map = tokenize(" p/911 n/A n/B p/912", ALL_FIELD_PREFIXES)
        with pytest.raises(DuplicatePrefixError) as exc_info:
            arg_map.verify_no_duplicate_prefixes_for(*SINGLE_VALUED_PREFIXES)
        assert exc_info.value.prefixes == ["p/", "n/"]
        assert "p/ n/" in str(exc_info.value)
