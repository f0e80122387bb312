"""A minimal field element type backed by a signed 32-bit integer."""

from __future__ import annotations

from dataclasses import dataclass
from functools import reduce
from typing import ClassVar, Iterable, Union

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1


def _check_i32(value: int) -> int:
    if not _I32_MIN <= value <= _I32_MAX:
        raise OverflowError(f"value {value} does not fit in a signed 32-bit integer")
    return value


@dataclass(frozen=True)
class F:
    """Field element holding a signed 32-bit value; arithmetic overflow raises."""

    value: int = 0

    ZERO: ClassVar["F"]
    ONE: ClassVar["F"]

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"field value must be an int, got {type(self.value).__name__}")
        _check_i32(self.value)

    @classmethod
    def zero(cls) -> "F":
        return cls(0)

    @classmethod
    def from_i32(cls, value: int) -> "F":
        return cls(value)

    @staticmethod
    def _coerce(other: Union["F", int]) -> "F":
        if isinstance(other, F):
            return other
        if isinstance(other, int) and not isinstance(other, bool):
            return F(other)
        return NotImplemented  # type: ignore[return-value]

    def __add__(self, other: Union["F", int]) -> "F":
        rhs = self._coerce(other)
        if rhs is NotImplemented:
            return NotImplemented
        return F(_check_i32(self.value + rhs.value))

    __radd__ = __add__

    def __sub__(self, other: Union["F", int]) -> "F":
        rhs = self._coerce(other)
        if rhs is NotImplemented:
            return NotImplemented
        return F(_check_i32(self.value - rhs.value))

    def __rsub__(self, other: Union["F", int]) -> "F":
        lhs = self._coerce(other)
        if lhs is NotImplemented:
            return NotImplemented
        return lhs - self

    def __mul__(self, other: Union["F", int]) -> "F":
        rhs = self._coerce(other)
        if rhs is NotImplemented:
            return NotImplemented
        return F(_check_i32(self.value * rhs.value))

    __rmul__ = __mul__

    def __neg__(self) -> "F":
        return F(_check_i32(-self.value))


F.ZERO = F(0)
F.ONE = F(1)


def field_sum(values: Iterable[F]) -> F:
    """Sum of field elements, starting from zero."""
    return reduce(lambda acc, item: acc + item, values, F.ZERO)


def field_product(values: Iterable[F]) -> F:
    """Product of field elements, starting from one."""
    return reduce(lambda acc, item: acc * item, values, F.ONE)