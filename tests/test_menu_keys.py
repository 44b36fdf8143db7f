"""Tests for menu key generation."""

import pytest

from treemenu.exceptions import KeyRangeError, StructuralError
from treemenu.menu.keys import MAX_LETTER_ORDINAL, ordinal_to_letters


class TestOrdinalToLetters:
    """Test bijective base 26 letter keys."""

    @pytest.mark.parametrize(
        "ordinal, expected",
        [
            (1, "A"),
            (2, "B"),
            (26, "Z"),
            (27, "AA"),
            (28, "AB"),
            (52, "AZ"),
            (53, "BA"),
            (701, "ZY"),
            (702, "ZZ"),
        ],
    )
    def test_known_values(self, ordinal, expected):
        assert ordinal_to_letters(ordinal) == expected

    @pytest.mark.parametrize("ordinal", [0, -1, 703, 10_000])
    def test_out_of_range_raises(self, ordinal):
        with pytest.raises(KeyRangeError) as excinfo:
            ordinal_to_letters(ordinal)
        assert excinfo.value.ordinal == ordinal
        assert "702" in str(excinfo.value)

    def test_range_error_is_structural_and_value_error(self):
        """Test that a key overflow fails a build and reads as a bad value."""
        with pytest.raises(StructuralError):
            ordinal_to_letters(0)
        with pytest.raises(ValueError):
            ordinal_to_letters(0)

    def test_all_keys_unique(self):
        keys = [ordinal_to_letters(n) for n in range(1, MAX_LETTER_ORDINAL + 1)]
        assert len(set(keys)) == MAX_LETTER_ORDINAL
        assert MAX_LETTER_ORDINAL == 702
