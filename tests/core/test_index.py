"""
Tests for Index and the UNSET marker.
"""

import pytest
from attrs.exceptions import FrozenInstanceError

from cerebro.core import UNSET, Index


class TestIndex:
    """Tests for the 1-based Index value."""

    def test_one_and_zero_based_are_bijective(self):
        """Test converting between 1-based and 0-based positions."""
        for zero_based in range(5):
            index = Index.from_zero_based(zero_based)
            assert index.one_based == zero_based + 1
            assert index.zero_based == zero_based
            assert Index.from_one_based(index.one_based) == index

    def test_non_positive_rejected(self):
        """Test that 0 and negative positions cannot be represented."""
        for value in (0, -1, -100):
            with pytest.raises(ValueError):
                Index.from_one_based(value)
        with pytest.raises(ValueError):
            Index.from_zero_based(-1)

    def test_ordering_and_str(self):
        """Test indices order by position and print 1-based."""
        assert sorted([Index(3), Index(1), Index(2)]) == [Index(1), Index(2), Index(3)]
        assert str(Index(7)) == "7"

    def test_immutable(self):
        """Test that an Index cannot be reassigned."""
        index = Index(1)
        with pytest.raises(FrozenInstanceError):
            index.one_based = 2


class TestUnset:
    """Tests for the UNSET marker."""

    def test_unset_is_falsy_singleton(self):
        """Test UNSET is a falsy singleton with a readable repr."""
        assert not UNSET
        assert UNSET is UNSET
        assert repr(UNSET) == "UNSET"
