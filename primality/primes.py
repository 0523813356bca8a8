import logging

from .modular import mulmod, powmod

logger = logging.getLogger(__name__)

U64_MAX = (1 << 64) - 1
SMALL_PRIMES = (2, 3, 5, 7)

# https://miller-rabin.appspot.com/
# (upper bound, witnesses): the witnesses decide primality exactly for every n below the bound.
# Tiers are in ascending bound order, the first bound greater than n is used.
WITNESS_TABLE: tuple[tuple[int, tuple[int, ...]], ...] = (
    (341531, (9345883071009581737,)),
    (1050535501, (336781006125, 9639812373923155)),
    (350269456337, (4230279247111683200, 14694767155120705706, 16641139526367750375)),
    (55245642489451, (2, 141889084524735, 1199124725622454117, 11096072698276303650)),
    (7999252175582851, (2, 4130806001517, 149795463772692060, 186635894390467037, 3967304179347715805)),
    (
        585226005592931977,
        (2, 123635709730000, 9233062284813009, 43835965440333360, 761179012939631437, 1263739024124850375),
    ),
    (U64_MAX + 1, (2, 325, 9375, 28178, 450775, 9780504, 1795265022)),
)


# n - 1 = d * 2^s, d is odd
def decompose(n: int) -> tuple[int, int]:
    m = n - 1
    s = (m & -m).bit_length() - 1  # trailing zeros
    return m >> s, s


# https://en.wikipedia.org/wiki/Miller%E2%80%93Rabin_primality_test#Strong_probable_primes
def improved_felmat_test(n: int, a: int) -> bool:
    """
    Strong probable-prime test of odd n > 3 to the base a, 0 <= a < n.
    Returns False only if a proves that n is composite.
    """
    # a reduced to zero says nothing about n
    if a == 0:
        return True

    d, s = decompose(n)
    ap = powmod(a, d, n)
    if ap == 1:
        return True

    for _ in range(s):
        if ap == n - 1:
            return True
        ap = mulmod(ap, ap, n)

    return False


def select_witnesses(n: int) -> tuple[int, ...]:
    for bound, witnesses in WITNESS_TABLE:
        if n < bound:
            return witnesses

    msg = f'No witness set covers {n}'
    raise ValueError(msg)


def miller_rabin_primality_test(n: int) -> bool:
    for a in select_witnesses(n):
        if not improved_felmat_test(n, a % n):
            logger.debug('%d is composite, witness %d', n, a)
            return False
    return True


def is_prime_u64(n: int) -> bool:
    if not isinstance(n, int) or isinstance(n, bool):
        msg = f'Expected int, but got: {type(n)}'
        raise TypeError(msg)
    if not 0 <= n <= U64_MAX:
        msg = f'{n} is out of the unsigned 64-bit range'
        raise ValueError(msg)

    # small cases
    if n in SMALL_PRIMES:
        return True
    if n < 11 or any(n % p == 0 for p in SMALL_PRIMES):  # noqa: PLR2004
        return False
    if n < 11 * 11:
        return True

    return miller_rabin_primality_test(n)
