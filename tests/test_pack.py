"""
Unit tests for byte/word conversion and the block splitter.
"""

import pytest
from dynsha256.types import field
from dynsha256.stdlib.EMBED import to_int
from dynsha256.stdlib.utils.pack.u32.pack import (
    is_byte, bytes_to_word, bytes_to_words, word_to_bytes, words_to_bytes,
    to_message_blocks, split_into_message_blocks,
)


def as_field(values):
    return [field(v) for v in values]


class TestBytesToWords:
    """Tests for packing bytes into 32-bit words."""

    def test_big_endian(self):
        assert bytes_to_word(as_field([0x12, 0x34, 0x56, 0x78])) == field(0x12345678)

    def test_is_byte(self):
        assert is_byte(field(0))
        assert is_byte(field(255))
        assert not is_byte(field(256))

    def test_byte_out_of_range(self):
        with pytest.raises(AssertionError, match="Byte out of range at index 2"):
            bytes_to_word(as_field([0, 0, 256, 0]))

    def test_byte_out_of_range_reports_absolute_index(self):
        with pytest.raises(AssertionError, match="Byte out of range at index 5"):
            bytes_to_words(as_field([0, 0, 0, 0, 0, 300, 0, 0]))

    def test_several_words(self):
        words = bytes_to_words(as_field(b"abcdefgh"))
        assert words == as_field([0x61626364, 0x65666768])

    def test_length_not_multiple_of_4(self):
        with pytest.raises(AssertionError, match="multiple of 4"):
            bytes_to_words(as_field([1, 2, 3]))


class TestWordToBytes:
    """Tests for decomposing words into bytes."""

    def test_decomposition(self):
        assert word_to_bytes(field(0xdeadbeef)) == as_field([0xde, 0xad, 0xbe, 0xef])

    def test_zero(self):
        assert word_to_bytes(field(0)) == as_field([0, 0, 0, 0])

    def test_word_too_large(self):
        with pytest.raises(AssertionError, match="Word does not fit in 32 bits"):
            word_to_bytes(field(2**32))

    def test_words_to_bytes(self):
        out = words_to_bytes(as_field([0x01020304, 0xa0b0c0d0]))
        assert bytes(to_int(b) for b in out) == bytes.fromhex("01020304a0b0c0d0")


class TestBlockSplitter:
    """Tests for splitting padded buffers into 512-bit blocks."""

    def test_two_blocks(self):
        blocks = split_into_message_blocks(as_field(range(128)))
        assert len(blocks) == 2
        assert all(len(block) == 16 for block in blocks)
        assert blocks[0][0] == field(0x00010203)
        assert blocks[1][15] == field(0x7c7d7e7f)

    def test_length_not_multiple_of_64(self):
        with pytest.raises(AssertionError, match="Array length must be a multiple of 64"):
            split_into_message_blocks(as_field([0] * 100))

    def test_word_count_not_multiple_of_16(self):
        with pytest.raises(AssertionError, match="Array length must be a multiple of 16"):
            to_message_blocks(as_field([0] * 15))

    def test_empty_buffer(self):
        assert split_into_message_blocks([]) == []
