from dynsha256.types import Private, Array, field # zk_ignore
from dynsha256.stdlib.hashes.sha256.dynamicSha256 import dynamic_sha256, partial_sha256

# Entry functions at fixed capacities. The capacity is part of the
# signature: one circuit accepts any message whose padding fits in it.

def dynamic_sha256_1024(padded_preimage: Private[Array[field, 1024]], digest_index: Private[field]) -> Array[field, 32]:
    return dynamic_sha256(padded_preimage, digest_index)

def dynamic_sha256_1536(padded_preimage: Private[Array[field, 1536]], digest_index: Private[field]) -> Array[field, 32]:
    return dynamic_sha256(padded_preimage, digest_index)

def dynamic_sha256_2048(padded_preimage: Private[Array[field, 2048]], digest_index: Private[field]) -> Array[field, 32]:
    return dynamic_sha256(padded_preimage, digest_index)

def partial_sha256_1024(precomputed_hash: Private[Array[field, 32]], remaining_message_blocks: Private[Array[field, 1024]], digest_index: Private[field]) -> Array[field, 32]:
    return partial_sha256(precomputed_hash, remaining_message_blocks, digest_index)

def partial_sha256_1536(precomputed_hash: Private[Array[field, 32]], remaining_message_blocks: Private[Array[field, 1536]], digest_index: Private[field]) -> Array[field, 32]:
    return partial_sha256(precomputed_hash, remaining_message_blocks, digest_index)

def partial_sha256_2048(precomputed_hash: Private[Array[field, 32]], remaining_message_blocks: Private[Array[field, 2048]], digest_index: Private[field]) -> Array[field, 32]:
    return partial_sha256(precomputed_hash, remaining_message_blocks, digest_index)
