from dynsha256.types import Array, field # zk_ignore
from typing import Any, Callable #zk_ignore
from dynsha256.stdlib.hashes.sha256.shaRound import shaRound

# Initial values, FIPS 180-4, section 5.3.3
# https://nvlpubs.nist.gov/nistpubs/FIPS/NIST.FIPS.180-4.pdf
IV: Array[field, 8] = [
    field(0x6a09e667), field(0xbb67ae85), field(0x3c6ef372), field(0xa54ff53a),
    field(0x510e527f), field(0x9b05688c), field(0x1f83d9ab), field(0x5be0cd19)
]

# A function that takes N u32[16] arrays as inputs, concatenates them,
# and returns their sha256 compression as a u32[8].
# Note: no padding is applied
def sha256(a: Array[Array[field, 16], Any], N: int) -> Array[field, 8]:
    current: Array[field, 8] = IV

    for i in range(0, N):
        current = shaRound(a[i], current)

    return current


# Compress every block, starting from `seed`, and keep every intermediate hash value.
# Row 0 is the seed and row i + 1 is the hash value after block i.
# All blocks are compressed whatever the length of the real content is.
def sha256_states(
    blocks: Array[Array[field, 16], Any],
    seed: Array[field, 8] = IV,
    compress: Callable = shaRound,
) -> Array[Array[field, 8], Any]:
    states: Array[Array[field, 8], Any] = [[*seed] for _ in range(len(blocks) + 1)]

    for i in range(0, len(blocks)):
        states[i + 1] = compress(blocks[i], states[i])

    return states


def flatten(rows: Array[Array[field, Any], Any]) -> Array[field, Any]:
    return [x for row in rows for x in row]
