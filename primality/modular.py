# The product of two 64-bit operands needs up to 128 bits before reduction.
# Python ints are arbitrary precision, so the wide product is exact and the
# reduced result always fits back into 64 bits.
def mulmod(a: int, b: int, m: int) -> int:
    return a * b % m


# https://en.wikipedia.org/wiki/Exponentiation_by_squaring
def powmod(a: int, p: int, m: int) -> int:
    y = 1
    while p > 0:
        if p & 1:
            y = mulmod(y, a, m)

        a = mulmod(a, a, m)
        p >>= 1
    return y
