import random

from ..modular import mulmod, powmod
from ..primes import U64_MAX


# schoolbook multiplication on 32-bit halves, reduced after every partial product
def split_mulmod(a: int, b: int, m: int) -> int:
    a_hi, a_lo = a >> 32, a & 0xFFFFFFFF
    res = a_hi * b % m
    for _ in range(32):
        res = res * 2 % m
    return (res + a_lo * b) % m


def test_mulmod_small() -> None:
    assert mulmod(3, 4, 5) == 2
    assert mulmod(0, 12345, 7) == 0
    assert mulmod(6, 7, 1) == 0


def test_mulmod_wide_product() -> None:
    m = U64_MAX - 58  # 2^64 - 59
    # 2^64 - 1 = 58 (mod m)
    assert mulmod(U64_MAX, U64_MAX, m) == 58 * 58
    assert mulmod(U64_MAX, U64_MAX, U64_MAX) == 0
    assert mulmod(U64_MAX - 1, U64_MAX - 1, U64_MAX) == 1

    product = mulmod(1 << 63, 1 << 63, U64_MAX)  # 2^126 = 2^62 (mod 2^64 - 1)
    assert product == 1 << 62


def test_mulmod_random() -> None:
    rng = random.Random(1337)
    for _ in range(2000):
        m = rng.randint(1, U64_MAX)
        a = rng.randrange(m)
        b = rng.randrange(m)
        res = mulmod(a, b, m)
        assert 0 <= res < m
        assert res == split_mulmod(a, b, m)


def test_powmod_small() -> None:
    assert powmod(2, 10, 1000) == 24
    assert powmod(5, 0, 13) == 1
    assert powmod(0, 5, 13) == 0
    assert powmod(3, 4, 1) == 0


def test_powmod_repeated_multiplication() -> None:
    rng = random.Random(42)
    for _ in range(200):
        m = rng.randint(2, U64_MAX)
        a = rng.randrange(m)
        expected = 1
        for p in range(40):
            assert powmod(a, p, m) == expected
            expected = expected * a % m


def test_powmod_random() -> None:
    rng = random.Random(7)
    for _ in range(500):
        m = rng.randint(2, U64_MAX)
        a = rng.randrange(m)
        p = rng.randint(0, U64_MAX)
        assert powmod(a, p, m) == pow(a, p, m)
