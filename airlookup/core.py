"""AUIPC core air: boolean validity and limb range checks."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import islice
from typing import Any, Sequence

from .bus import BitwiseOperationLookupBus
from .interaction import InteractionBuilder

RV32_REGISTER_NUM_LIMBS = 4


@dataclass(frozen=True)
class Rv32AuipcCoreCols:
    """Columns of the AUIPC core.

    ``imm_limbs`` omits the least significant limb (always zero);
    ``pc_limbs`` omits the most and least significant limbs.
    """

    is_valid: Any
    imm_limbs: tuple
    pc_limbs: tuple
    rd_data: tuple


def trusted_borrow(x: Sequence[Any]) -> Rv32AuipcCoreCols:
    """Build columns from a row, repeating each of its first four cells."""
    return Rv32AuipcCoreCols(
        is_valid=x[0],
        imm_limbs=(x[1],) * (RV32_REGISTER_NUM_LIMBS - 1),
        pc_limbs=(x[2],) * (RV32_REGISTER_NUM_LIMBS - 1),
        rd_data=(x[3],) * RV32_REGISTER_NUM_LIMBS,
    )


@dataclass(frozen=True)
class Rv32AuipcCoreAir:
    bus: BitwiseOperationLookupBus

    def eval(self, builder: InteractionBuilder, local_core: Sequence[Any], from_pc: Any) -> None:
        cols = trusted_borrow(local_core)
        builder.assert_bool(cols.is_valid)
        limbs = cols.imm_limbs + cols.pc_limbs
        pairs = zip(limbs[0::2], limbs[1::2])
        for low, high in islice(pairs, RV32_REGISTER_NUM_LIMBS - 2):
            self.bus.send_range(low, high).eval(builder, cols.is_valid)