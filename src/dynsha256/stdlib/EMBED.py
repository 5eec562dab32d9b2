from dynsha256.types import Array, field # zk_ignore
from typing import Union, Any #zk_ignore

# These functions are not run by the circuit compiler as they are handled internally.
# They do however need to be defined for the python runtime.

def int_from_bits(bits: Array[bool, Any]) -> int:
    result = 0
    for bit in bits: # type: ignore
        result = (result << 1) | bit
    return result


def to_int(i: field) -> int:
    return field.modulus + int(i) if int(i) < 0 else int(i) # type: ignore


def unpack(i: field, N: int) -> Array[bool, Any]:
    bits = [bool(int(digit)) for digit in bin(to_int(i))[2:]]
    length = len(bits)
    if length < N:
        return [False for _ in range(N - length)] + bits # type: ignore
    elif length == N:
        return bits # type: ignore
    else:
        return bits[-N:] # type: ignore


sum_ = sum # zk_ignore
def sum(x: Array[Union[int, field], Any]) -> Union[int, field]:
    return sum_(x) # type: ignore
