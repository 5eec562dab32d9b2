from dynsha256.types import Array, field # zk_ignore
from typing import Any #zk_ignore
from dynsha256.stdlib.EMBED import unpack, int_from_bits


# Check that `b` decomposes into 8 bits, i.e. it is a byte
def is_byte(b: field) -> bool:
    bits: Array[bool, 8] = unpack(b, 8)
    return field(int_from_bits(bits)) == b


# Pack 4 bytes into one 32-bit word, most significant byte first.
# The bytes are not range checked here.
def pack_word(b: Array[field, 4]) -> field:
    return b[0] * field(2**24) + b[1] * field(2**16) + b[2] * field(2**8) + b[3]


def bytes_to_word(b: Array[field, 4]) -> field:
    for k in range(0, 4):
        assert is_byte(b[k]), f"Byte out of range at index {k}"
    return pack_word(b)


def bytes_to_words(b: Array[field, Any]) -> Array[field, Any]:
    assert len(b) % 4 == 0, "Array length must be a multiple of 4"
    words: Array[field, Any] = [field(0) for _ in range(len(b) // 4)]
    for i in range(0, len(b) // 4):
        for k in range(0, 4):
            assert is_byte(b[4*i + k]), f"Byte out of range at index {4*i + k}"
        words[i] = pack_word(b[4*i:4*i + 4])
    return words


# Decompose a word into 4 bytes, most significant byte first.
# The decomposition is a witness: it is only trusted after recomposing it.
def word_to_bytes(w: field) -> Array[field, 4]:
    bits: Array[bool, 32] = unpack(w, 32)
    out: Array[field, 4] = [field(int_from_bits(bits[8*k:8*k + 8])) for k in range(4)]
    assert pack_word(out) == w, "Word does not fit in 32 bits"
    return out


def words_to_bytes(w: Array[field, Any]) -> Array[field, Any]:
    out: Array[field, Any] = []
    for i in range(0, len(w)):
        out = [*out, *word_to_bytes(w[i])]
    return out


def to_message_blocks(words: Array[field, Any]) -> Array[Array[field, 16], Any]:
    assert len(words) % 16 == 0, "Array length must be a multiple of 16"
    return [words[16*i:16*i + 16] for i in range(len(words) // 16)]


# Split a padded byte buffer into 512-bit message blocks of 16 words each
def split_into_message_blocks(padded: Array[field, Any]) -> Array[Array[field, 16], Any]:
    assert len(padded) % 64 == 0, "Array length must be a multiple of 64"
    return to_message_blocks(bytes_to_words(padded))
