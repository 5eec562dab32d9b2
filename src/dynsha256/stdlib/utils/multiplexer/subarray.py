from dynsha256.types import Array, field # zk_ignore
from typing import Any #zk_ignore
from math import ceil, log2 #zk_ignore
from dynsha256.stdlib.EMBED import unpack, int_from_bits, sum


# Select the N words starting at `start` out of `sequence`.
#
# Instead of one selection per output word, the whole sequence is rotated
# left by `start` with one conditional rotation per bit of `start`: the
# pass for bit j blends every position i with position (i + 2^j) mod L.
# After all passes, position i holds sequence[(i + start) mod L] and the
# first N positions are the result.
#
# Position 0 is reserved and is never a valid start. The selected words
# come from a region that never holds the zero marker, so a zero word in
# the result means the start is wrong.
def select_subarray(sequence: Array[field, Any], start: field, N: int) -> Array[field, Any]:
    L: int = len(sequence)
    assert N <= L, "Subarray length must not exceed the array length"

    # start must name exactly one position in [1, L)
    matches: field = sum([field(int(start == field(i))) for i in range(1, L)])
    assert matches == field(1), f"Invalid start index: expected exactly one match in [1, {L})"

    bit_count: int = max(1, ceil(log2(L)))
    bits: Array[bool, Any] = unpack(start, bit_count)
    assert field(int_from_bits(bits)) == start, "Invalid start index: bit decomposition mismatch"

    current: Array[field, Any] = [*sequence]
    for j in range(0, bit_count):
        # unpack is big-endian
        b: field = field(int(bits[bit_count - 1 - j]))
        shift: int = 2**j % L
        current = [current[i] + b * (current[(i + shift) % L] - current[i]) for i in range(L)]

    out: Array[field, Any] = current[0:N]
    for i in range(0, N):
        assert out[i] != field(0), f"Null byte in selection at index {i}"
    return out
