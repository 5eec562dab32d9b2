from dynsha256.types import Array, field # zk_ignore
from typing import Any #zk_ignore
from dynsha256.stdlib.EMBED import sum, to_int
from dynsha256.stdlib.utils.multiplexer.wordAtIndex import words_at_index


# First message word after the padded content claimed by `digest_index`.
# The digest index counts words of hash values (8 per block) and the
# message has 16 words per block, hence the factor 2.
def padding_start(digest_index: field) -> field:
    return (digest_index + field(8)) * field(2)


# Every message word from the padding start onwards must be zero.
# The comparison is evaluated for every position; nothing is skipped.
def assert_zero_padded(words: Array[field, Any], digest_index: field) -> None:
    start: int = to_int(padding_start(digest_index))
    for i in range(0, len(words)):
        is_padding: bool = i >= start
        assert not is_padding or words[i] == field(0), f"Padding error at index {i}: expected zero."


# The 16 words just before the padding start form the last content block.
# Standard padding always leaves a non-zero word there (the 0x80 marker or
# the length field), so an all-zero block means the digest index points
# past the real content.
def assert_final_block(words: Array[field, Any], digest_index: field) -> None:
    block: Array[field, 16] = words_at_index(words, padding_start(digest_index) - field(16), 16)
    non_zero: field = sum([field(int(block[k] != field(0))) for k in range(16)])
    assert non_zero != field(0), "Invalid digest index: final message block is all zero."


# The digest index must be the first word of one of the N hash values
def assert_block_aligned(digest_index: field, N: int) -> None:
    matches: field = sum([field(int(digest_index == field(8 * k))) for k in range(N)])
    assert matches == field(1), "Invalid digest index: expected exactly one hash value boundary"
