import sys
from dataclasses import dataclass
from typing import ClassVar

if sys.version_info >= (3, 12):
    from typing import override
else:
    from typing_extensions import override

from .primes import is_prime_u64


class IsPrime:
    def is_prime(self) -> bool:
        raise NotImplementedError


@dataclass(frozen=True)
class PrimitiveInt(IsPrime):
    """Integer of a fixed machine width, checked on construction."""

    bits: ClassVar[int] = 64
    signed: ClassVar[bool] = False

    value: int

    def __post_init__(self) -> None:
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            msg = f'Expected int, but got: {type(self.value)}'
            raise TypeError(msg)
        if not self.min_value() <= self.value <= self.max_value():
            msg = f'{self.value} does not fit into {type(self).__name__}'
            raise ValueError(msg)

    @classmethod
    def min_value(cls) -> int:
        return -(1 << (cls.bits - 1)) if cls.signed else 0

    @classmethod
    def max_value(cls) -> int:
        return (1 << (cls.bits - 1)) - 1 if cls.signed else (1 << cls.bits) - 1

    @override
    def is_prime(self) -> bool:
        # every supported width fits into u64 once negatives are ruled out
        if self.value < 0:
            return False
        return is_prime_u64(self.value)


class U8(PrimitiveInt):
    bits = 8


class U16(PrimitiveInt):
    bits = 16


class U32(PrimitiveInt):
    bits = 32


class U64(PrimitiveInt):
    bits = 64


class I8(PrimitiveInt):
    bits = 8
    signed = True


class I16(PrimitiveInt):
    bits = 16
    signed = True


class I32(PrimitiveInt):
    bits = 32
    signed = True


class I64(PrimitiveInt):
    bits = 64
    signed = True


def is_prime(n: IsPrime | int) -> bool:
    if isinstance(n, IsPrime):
        return n.is_prime()
    # plain ints are treated like a signed value, anything above u64 is rejected by the core
    if isinstance(n, int) and not isinstance(n, bool) and n < 0:
        return False
    return is_prime_u64(n)
