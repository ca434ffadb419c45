"""Tests for the code point view of text."""

import pytest

from reliable_txt.character.codepoints import (
    MAX_CODE_POINT,
    from_code_points,
    is_scalar_value,
    to_code_points,
)
from reliable_txt.shared.errors import InvalidCodePointError, ReliableTxtError


class TestToCodePoints:
    """Test decomposition of text into code points."""

    def test_ascii_text(self):
        """Test that ASCII characters map to their ordinals."""
        assert to_code_points("AB") == [0x41, 0x42]

    def test_empty_text(self):
        """Test that the empty text has no code points."""
        assert to_code_points("") == []

    def test_supplementary_character_is_single_entry(self):
        """Test that a supplementary-plane character is not split."""
        result = to_code_points("\U0001D538")

        assert result == [0x1D538]

    def test_mixed_planes_keep_order(self):
        """Test code points from several planes in document order."""
        assert to_code_points("aä東\U0001F600") == [
            0x61, 0xE4, 0x6771, 0x1F600
        ]


class TestFromCodePoints:
    """Test reconstruction of text from code points."""

    def test_basic_reconstruction(self):
        """Test that code points are concatenated in order."""
        assert from_code_points([0x48, 0x69]) == "Hi"

    def test_empty_sequence(self):
        """Test that no code points give the empty text."""
        assert from_code_points([]) == ""

    def test_accepts_any_iterable(self):
        """Test that generators are accepted as input."""
        assert from_code_points(cp for cp in (0x61, 0x62)) == "ab"

    def test_round_trip_supplementary(self):
        """Test the round trip through code points for a supplementary character."""
        text = "\U0001D538"

        assert from_code_points(to_code_points(text)) == text

    def test_boundary_values(self):
        """Test the smallest and largest scalar values."""
        assert from_code_points([0, MAX_CODE_POINT]) == "\x00\U0010FFFF"

    @pytest.mark.parametrize("value", [0xD800, 0xDBFF, 0xDC00, 0xDFFF])
    def test_surrogates_rejected(self, value):
        """Test that surrogate values raise InvalidCodePointError."""
        with pytest.raises(InvalidCodePointError, match="Invalid code point"):
            from_code_points([0x41, value])

    @pytest.mark.parametrize("value", [-1, 0x110000, 0xFFFFFFFF])
    def test_out_of_range_rejected(self, value):
        """Test that values outside 0..0x10FFFF are rejected."""
        with pytest.raises(InvalidCodePointError):
            from_code_points([value])

    def test_error_carries_value_and_index(self):
        """Test the attributes of InvalidCodePointError."""
        with pytest.raises(InvalidCodePointError) as exc_info:
            from_code_points([0x41, 0x42, 0x110000])

        assert exc_info.value.value == 0x110000
        assert exc_info.value.index == 2
        assert "0x110000" in str(exc_info.value)
        assert isinstance(exc_info.value, ReliableTxtError)

    @pytest.mark.parametrize("value", ["A", 65.0, None, True])
    def test_non_integers_rejected(self, value):
        """Test that non-integer values are rejected."""
        with pytest.raises(InvalidCodePointError):
            from_code_points([value])


class TestIsScalarValue:
    """Test the scalar value predicate."""

    def test_valid_values(self):
        """Test values inside the scalar range."""
        assert is_scalar_value(0)
        assert is_scalar_value(0xD7FF)
        assert is_scalar_value(0xE000)
        assert is_scalar_value(0xFEFF)
        assert is_scalar_value(MAX_CODE_POINT)

    def test_invalid_values(self):
        """Test values outside the scalar range."""
        assert not is_scalar_value(-1)
        assert not is_scalar_value(0xD800)
        assert not is_scalar_value(MAX_CODE_POINT + 1)
        assert not is_scalar_value(False)
