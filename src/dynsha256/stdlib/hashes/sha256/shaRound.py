from dynsha256.types import Array, field # zk_ignore
from dynsha256.stdlib.EMBED import to_int

# FIPS 180-4, section 4.2.2
# https://nvlpubs.nist.gov/nistpubs/FIPS/NIST.FIPS.180-4.pdf
K: Array[int, 64] = [
    0x428a2f98, 0x71374491, 0xb5c0fbcf, 0xe9b5dba5, 0x3956c25b, 0x59f111f1, 0x923f82a4, 0xab1c5ed5,
    0xd807aa98, 0x12835b01, 0x243185be, 0x550c7dc3, 0x72be5d74, 0x80deb1fe, 0x9bdc06a7, 0xc19bf174,
    0xe49b69c1, 0xefbe4786, 0x0fc19dc6, 0x240ca1cc, 0x2de92c6f, 0x4a7484aa, 0x5cb0a9dc, 0x76f988da,
    0x983e5152, 0xa831c66d, 0xb00327c8, 0xbf597fc7, 0xc6e00bf3, 0xd5a79147, 0x06ca6351, 0x14292967,
    0x27b70a85, 0x2e1b2138, 0x4d2c6dfc, 0x53380d13, 0x650a7354, 0x766a0abb, 0x81c2c92e, 0x92722c85,
    0xa2bfe8a1, 0xa81a664b, 0xc24b8b70, 0xc76c51a3, 0xd192e819, 0xd6990624, 0xf40e3585, 0x106aa070,
    0x19a4c116, 0x1e376c08, 0x2748774c, 0x34b0bcb5, 0x391c0cb3, 0x4ed8aa4a, 0x5b9cca4f, 0x682e6ff3,
    0x748f82ee, 0x78a5636f, 0x84c87814, 0x8cc70208, 0x90befffa, 0xa4506ceb, 0xbef9a3f7, 0xc67178f2
]

def rotr32(x: int, N: int) -> int:
    return (x >> N) | (x << (32 - N)) & 0xffffffff

def extend(w: Array[int, 64], i: int) -> int:
    s0: int = rotr32(w[i-15], 7) ^ rotr32(w[i-15], 18) ^ (w[i-15] >> 3) & 0xffffffff
    s1: int = rotr32(w[i-2], 17) ^ rotr32(w[i-2], 19) ^ (w[i-2] >> 10) & 0xffffffff
    return w[i-16] + s0 + w[i-7] + s1 & 0xffffffff

def temp1(e: int, f: int, g: int, h: int, k: int, w: int) -> int:
    # ch := (e and f) xor ((not e) and g)
    ch: int = (e & f) ^ ((~e & 0xffffffff) & g)

    # S1 := (e rightrotate 6) xor (e rightrotate 11) xor (e rightrotate 25)
    S1: int = rotr32(e, 6) ^ rotr32(e, 11) ^ rotr32(e, 25)

    # temp1 := h + S1 + ch + k + w
    return (h + S1 + ch + k + w) & 0xffffffff

def temp2(a: int, b: int, c: int) -> int:
    # maj := (a and b) xor (a and c) xor (b and c)
    maj: int = (a & b) ^ (a & c) ^ (b & c)

    # S0 := (a rightrotate 2) xor (a rightrotate 13) xor (a rightrotate 22)
    S0: int = rotr32(a, 2) ^ rotr32(a, 13) ^ rotr32(a, 22)

    return (S0 + maj) & 0xffffffff

# Expand the 16 words of a message block into the 64 words of the message schedule
def createMessageSchedule(input: Array[field, 16]) -> Array[int, 64]:
    w: Array[int, 64] = [*[to_int(x) & 0xffffffff for x in input], *[0 for _ in range(48)]]

    for i in range(16, 64):
        w[i] = extend(w, i)

    return w

# 64 rounds of the compression function over the current hash value
def compression(current: Array[field, 8], w: Array[int, 64]) -> Array[field, 8]:
    h: Array[int, 8] = [to_int(x) & 0xffffffff for x in current]

    a: int = h[0]
    b: int = h[1]
    c: int = h[2]
    d: int = h[3]
    e: int = h[4]
    f: int = h[5]
    g: int = h[6]
    hh: int = h[7]

    for i in range(0, 64):
        t1: int = temp1(e, f, g, hh, K[i], w[i])
        t2: int = temp2(a, b, c)

        hh = g
        g = f
        f = e
        e = d + t1 & 0xffffffff
        d = c
        c = b
        b = a
        a = t1 + t2 & 0xffffffff

    return [
        field(h[0] + a & 0xffffffff),
        field(h[1] + b & 0xffffffff),
        field(h[2] + c & 0xffffffff),
        field(h[3] + d & 0xffffffff),
        field(h[4] + e & 0xffffffff),
        field(h[5] + f & 0xffffffff),
        field(h[6] + g & 0xffffffff),
        field(h[7] + hh & 0xffffffff),
    ]

# One application of the SHA256 compression function given a message block and the current value of the hash.
# This is the trusted primitive used by the pipelines; words are reduced to 32 bits on the way in.
def shaRound(input: Array[field, 16], current: Array[field, 8]) -> Array[field, 8]:
    return compression(current, createMessageSchedule(input))
