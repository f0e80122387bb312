"""Lookup bus for bitwise range and XOR operations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .field import F
from .interaction import InteractionBuilder, LookupBus


def _as_field(x: Any) -> Any:
    if isinstance(x, int) and not isinstance(x, bool):
        return F.from_i32(x)
    return x


@dataclass(frozen=True)
class BitwiseOperationLookupBusInteraction:
    """A pending (x, y, z, op) message on a bitwise lookup bus."""

    x: Any
    y: Any
    z: Any
    op: Any
    bus: LookupBus
    is_lookup: bool

    def eval(self, builder: InteractionBuilder, count: Any) -> None:
        key = (self.x, self.y, self.z, self.op)
        if self.is_lookup:
            self.bus.lookup_key(builder, key, count)
        else:
            self.bus.add_key_with_lookups(builder, key, count)


class BitwiseOperationLookupBus:
    """Bus carrying range-check and XOR lookups."""

    def __init__(self, index: int) -> None:
        self.inner = LookupBus(index)

    def __repr__(self) -> str:
        return f"BitwiseOperationLookupBus(index={self.inner.index})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BitwiseOperationLookupBus):
            return NotImplemented
        return self.inner == other.inner

    def __hash__(self) -> int:
        return hash(self.inner)

    def send_range(self, x: Any, y: Any) -> BitwiseOperationLookupBusInteraction:
        return self.push(x, y, F.ZERO, F.ZERO, True)

    def send_xor(self, x: Any, y: Any, z: Any) -> BitwiseOperationLookupBusInteraction:
        return self.push(x, y, z, F.ONE, True)

    def receive(self, x: Any, y: Any, z: Any, op: Any) -> BitwiseOperationLookupBusInteraction:
        return self.push(x, y, z, op, False)

    def push(
        self, x: Any, y: Any, z: Any, op: Any, is_lookup: bool
    ) -> BitwiseOperationLookupBusInteraction:
        return BitwiseOperationLookupBusInteraction(
            x=_as_field(x),
            y=_as_field(y),
            z=_as_field(z),
            op=_as_field(op),
            bus=self.inner,
            is_lookup=is_lookup,
        )