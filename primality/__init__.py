from .modular import mulmod, powmod
from .primes import U64_MAX, WITNESS_TABLE, is_prime_u64
from .primitive_int import I8, I16, I32, I64, U8, U16, U32, U64, IsPrime, PrimitiveInt, is_prime

__all__ = [
    'I8',
    'I16',
    'I32',
    'I64',
    'U8',
    'U16',
    'U32',
    'U64',
    'U64_MAX',
    'WITNESS_TABLE',
    'IsPrime',
    'PrimitiveInt',
    'is_prime',
    'is_prime_u64',
    'mulmod',
    'powmod',
]
