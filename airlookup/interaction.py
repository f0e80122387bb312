"""Bus interactions and lookup buses."""

from __future__ import annotations

from abc import abstractmethod
from dataclasses import dataclass, field
from typing import Any, Iterable

from .air import AirBuilder

_U32_MAX = 2**32 - 1


@dataclass(frozen=True)
class Interaction:
    """A message sent over a bus with a multiplicity.

    For each bus index and trace, ``count_weight`` values are summed and
    multiplied by the trace height; the verifier keeps the total below the
    field characteristic.
    """

    message: tuple
    count: Any
    bus_index: int
    count_weight: int


def _check_bus_index(bus_index: int) -> int:
    if bus_index < 0:
        raise ValueError(f"bus index must be non-negative, got {bus_index}")
    return bus_index


class InteractionBuilder(AirBuilder):
    """A constraint builder that can also record bus interactions."""

    @abstractmethod
    def push_interaction(
        self, bus_index: int, fields: Iterable[Any], count: Any, count_weight: int
    ) -> None:
        """Store a new interaction in the builder."""


@dataclass
class RecordingBuilder(InteractionBuilder):
    """Builder that keeps every constraint and interaction in lists."""

    constraints: list = field(default_factory=list)
    interactions: list = field(default_factory=list)

    def assert_zero(self, x: Any) -> None:
        self.constraints.append(self._expr(x))

    def push_interaction(
        self, bus_index: int, fields: Iterable[Any], count: Any, count_weight: int
    ) -> None:
        if not 0 <= count_weight <= _U32_MAX:
            raise ValueError(f"count weight must fit in an unsigned 32-bit integer, got {count_weight}")
        self.interactions.append(
            Interaction(
                message=tuple(self._expr(f) for f in fields),
                count=self._expr(count),
                bus_index=_check_bus_index(bus_index),
                count_weight=count_weight,
            )
        )


@dataclass(frozen=True)
class LookupBus:
    """A bus on which keys are added to a table and looked up."""

    index: int

    def __post_init__(self) -> None:
        _check_bus_index(self.index)

    def lookup_key(self, builder: InteractionBuilder, query: Iterable[Any], enabled: Any) -> None:
        """Assert that `query` is in the table when `enabled` is one.

        The caller must constrain `enabled` to be boolean.
        """
        builder.push_interaction(self.index, query, enabled, 1)

    def add_key_with_lookups(
        self, builder: InteractionBuilder, key: Iterable[Any], num_lookups: Any
    ) -> None:
        """Add `key` to the table, balancing `num_lookups` enabled lookups."""
        builder.push_interaction(self.index, key, -builder._expr(num_lookups), 0)