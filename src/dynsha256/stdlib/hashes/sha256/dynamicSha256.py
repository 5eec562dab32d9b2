from dynsha256.types import Array, field # zk_ignore
from typing import Any, Callable #zk_ignore
from dynsha256.stdlib.hashes.sha256.sha256 import IV, sha256_states, flatten
from dynsha256.stdlib.hashes.sha256.shaRound import shaRound
from dynsha256.stdlib.hashes.sha256.padding import assert_zero_padded, assert_final_block, assert_block_aligned
from dynsha256.stdlib.utils.multiplexer.wordAtIndex import words_at_index
from dynsha256.stdlib.utils.pack.u32.pack import split_into_message_blocks, bytes_to_words, words_to_bytes


# Interpret a 32-byte precomputed hash as 8 big-endian words.
# Nothing checks that it is the hash of a real prefix.
def to_hash_state(precomputed_hash: Array[field, 32]) -> Array[field, 8]:
    assert len(precomputed_hash) == 32, "Precomputed hash must be 32 bytes"
    return bytes_to_words(precomputed_hash)


# SHA256 of a message padded up to a maximum length.
#
# `padded_preimage` holds the message, its standard SHA256 padding and zero
# filler up to the declared capacity. Every block is compressed; the digest
# is then selected among the intermediate hash values at `digest_index`,
# the word offset of the final hash value (8 words per block, the seed row
# is not addressable). The zero filler and the index are checked so that
# the selected hash value cannot be moved away from the real content.
def dynamic_sha256(
    padded_preimage: Array[field, Any],
    digest_index: field,
    initial_hash_value: Array[field, 8] = IV,
    compress: Callable = shaRound,
) -> Array[field, 32]:
    message_blocks: Array[Array[field, 16], Any] = split_into_message_blocks(padded_preimage)
    message_words: Array[field, Any] = flatten(message_blocks)

    hash_values: Array[Array[field, 8], Any] = sha256_states(message_blocks, initial_hash_value, compress)
    flattened_hash_values: Array[field, Any] = flatten(hash_values[1:])

    assert_zero_padded(message_words, digest_index)
    assert_final_block(message_words, digest_index)
    assert_block_aligned(digest_index, len(message_blocks))

    digest_words: Array[field, 8] = words_at_index(flattened_hash_values, digest_index, 8)
    return words_to_bytes(digest_words)


# SHA256 resumed from a hash value computed outside of the circuit over a
# prefix of the message. `remaining_message_blocks` holds the rest of the
# message padded the same way as for `dynamic_sha256`; its length field
# counts the prefix as well.
def partial_sha256(
    precomputed_hash: Array[field, 32],
    remaining_message_blocks: Array[field, Any],
    digest_index: field,
) -> Array[field, 32]:
    precomputed_hash_words: Array[field, 8] = to_hash_state(precomputed_hash)
    return dynamic_sha256(remaining_message_blocks, digest_index, precomputed_hash_words)
