"""
Unit tests for padding and block conversion.
"""

import numpy as np
import pytest

from hill.core.blocks import PADDING_CHAR, blocks_to_text, pad_to_block_size, text_to_blocks
from hill.errors import InvalidCharacter, InvalidCode, InvalidDimension


class TestPadding:
    """Padding plaintext to whole blocks."""

    def test_aligned_text_unchanged(self):
        assert pad_to_block_size("HELP", 2) == "HELP"
        assert pad_to_block_size("ACT", 3) == "ACT"

    @pytest.mark.parametrize("length", range(0, 12))
    @pytest.mark.parametrize("dimension", [1, 2, 3, 5])
    def test_padding_length(self, length, dimension):
        """Appended length is exactly n - len % n, or zero when aligned."""
        text = "A" * length
        padded = pad_to_block_size(text, dimension)
        assert padded.startswith(text)
        assert len(padded) % dimension == 0
        extra = padded[length:]
        expected = 0 if length % dimension == 0 else dimension - length % dimension
        assert extra == PADDING_CHAR * expected

    def test_padding_char_is_x(self):
        assert pad_to_block_size("HELLO", 3) == "HELLOX"

    def test_bad_dimension(self):
        with pytest.raises(InvalidDimension):
            pad_to_block_size("HELLO", 0)


class TestTextToBlocks:
    """Splitting text into integer vectors."""

    def test_split(self):
        blocks = text_to_blocks("HELP", 2)
        assert [b.tolist() for b in blocks] == [[7, 4], [11, 15]]

    def test_blocks_are_int_vectors(self):
        (block,) = text_to_blocks("ACT", 3)
        assert block.dtype == np.int64
        assert block.shape == (3,)

    def test_empty(self):
        assert text_to_blocks("", 2) == []

    def test_trailing_partial_block_dropped(self):
        """len // n blocks; the remainder is ignored, not an error."""
        blocks = text_to_blocks("HELPX", 2)
        assert len(blocks) == 2

    def test_invalid_character_position(self):
        with pytest.raises(InvalidCharacter) as info:
            text_to_blocks("HE1P", 2)
        assert info.value.character == "1"
        assert info.value.position == 2

    def test_lowercase_rejected(self):
        with pytest.raises(InvalidCharacter):
            text_to_blocks("help", 2)


class TestBlocksToText:
    """Joining vectors back into letters."""

    def test_join(self):
        assert blocks_to_text([[3, 17], [15, 0]]) == "DRPA"

    def test_rounds_components(self):
        assert blocks_to_text([np.array([2.9999999, 17.0000001])]) == "DR"

    def test_out_of_range(self):
        with pytest.raises(InvalidCode) as info:
            blocks_to_text([[3, 26]])
        assert info.value.code == 26

    def test_negative(self):
        with pytest.raises(InvalidCode):
            blocks_to_text([[-1, 0]])

    def test_empty(self):
        assert blocks_to_text([]) == ""
