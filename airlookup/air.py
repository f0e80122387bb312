"""Constraint builder interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from .field import F


class AirBuilder(ABC):
    """Collects polynomial constraints; subclasses decide what a zero assertion does."""

    ONE: Any = F.ONE
    ZERO: Any = F.ZERO

    def _expr(self, x: Any) -> Any:
        if isinstance(x, int) and not isinstance(x, bool):
            return F.from_i32(x)
        return x

    @abstractmethod
    def assert_zero(self, x: Any) -> None:
        """Constrain `x` to equal zero."""

    def assert_one(self, x: Any) -> None:
        self.assert_zero(self._expr(x) - self.ONE)

    def assert_eq(self, x: Any, y: Any) -> None:
        self.assert_zero(self._expr(x) - self._expr(y))

    def assert_bool(self, x: Any) -> None:
        """Assert that `x` is either 0 or 1."""
        x = self._expr(x)
        self.assert_zero(x * (x - self.ONE))