# airlookup

A small toolkit for writing AIR-style algebraic constraints and the
lookup-bus interactions that go with them. Constraints and interactions are
recorded in a builder, so they can be inspected and checked.

## Modules

- `airlookup.field` – `F`, a frozen dataclass holding a signed 32-bit integer
  `value`. It supports `+`, `-`, `*` and unary `-`, with plain `int` operands
  on either side. A result outside the signed 32-bit range raises
  `OverflowError`; a non-integer value raises `TypeError`. `F.ZERO`, `F.ONE`,
  `F.zero()` and `F.from_i32(value)` build elements. `field_sum(values)` and
  `field_product(values)` fold an iterable starting from zero and one.
- `airlookup.air` – `AirBuilder`, an abstract base class. A subclass provides
  `assert_zero(x)`; the base class builds `assert_one(x)` (`x - 1`),
  `assert_eq(x, y)` (`x - y`) and `assert_bool(x)` (`x * (x - 1)`) on top of
  it. Plain integers are turned into `F` first.
- `airlookup.interaction`:
  - `Interaction` – a frozen record of `message` (a tuple), `count`,
    `bus_index` and `count_weight`.
  - `InteractionBuilder` – an abstract `AirBuilder` that also has
    `push_interaction(bus_index, fields, count, count_weight)`.
  - `RecordingBuilder` – a concrete builder that appends every asserted
    expression to `constraints` and every interaction to `interactions`.
    It raises `ValueError` for a negative bus index or a `count_weight`
    outside the unsigned 32-bit range.
  - `LookupBus(index)` – `lookup_key(builder, query, enabled)` pushes the
    query with count `enabled` and weight 1; `add_key_with_lookups(builder,
    key, num_lookups)` pushes the key with count `-num_lookups` and weight 0.
    A negative index raises `ValueError`.
- `airlookup.bus` – `BitwiseOperationLookupBus(index)` wraps a `LookupBus`
  (its `inner`) and builds `BitwiseOperationLookupBusInteraction` values of
  the form `(x, y, z, op)`:
  - `send_range(x, y)` – a lookup of `(x, y, 0, 0)`;
  - `send_xor(x, y, z)` – a lookup of `(x, y, z, 1)`;
  - `receive(x, y, z, op)` – a table entry;
  - `push(x, y, z, op, is_lookup)` – the general form.

  `interaction.eval(builder, count)` sends a lookup through `lookup_key`, and
  a table entry through `add_key_with_lookups`.
- `airlookup.core` – `RV32_REGISTER_NUM_LIMBS` (4), `Rv32AuipcCoreCols`,
  `trusted_borrow(row)` and `Rv32AuipcCoreAir(bus)`.
  - `trusted_borrow` reads the first four cells of a row: `is_valid` from
    cell 0, and `imm_limbs` (3 copies of cell 1), `pc_limbs` (3 copies of
    cell 2) and `rd_data` (4 copies of cell 3).
  - `Rv32AuipcCoreAir.eval(builder, local_core, from_pc)` asserts that
    `is_valid` is boolean, joins `imm_limbs` and `pc_limbs`, and sends the
    first two consecutive limb pairs to the bus with `send_range`, each with
    count `is_valid`. `from_pc` is accepted but not used.

## Installation

```
pip install .
```

With the test tools:

```
pip install ".[test]"
```

## Example

```python
from airlookup.bus import BitwiseOperationLookupBus
from airlookup.core import Rv32AuipcCoreAir
from airlookup.field import F
from airlookup.interaction import RecordingBuilder

builder = RecordingBuilder()
air = Rv32AuipcCoreAir(bus=BitwiseOperationLookupBus(3))

row = [F(1), F(5), F(7), F(9)]
air.eval(builder, row, F(0))

builder.constraints
# [F(value=0)]  -- is_valid * (is_valid - 1)

[i.message for i in builder.interactions]
# [(F(value=5), F(value=5), F(value=0), F(value=0)),
#  (F(value=5), F(value=7), F(value=0), F(value=0))]
# each on bus 3 with count F(value=1) and count_weight 1
```

## What it does not do

- `F` is ordinary signed 32-bit integer arithmetic, not arithmetic modulo a
  prime; there is no division or inversion.
- There are no trace matrices, no proving and no verifying. Builders only
  record expressions; `RecordingBuilder` does not check that constraints are
  zero or that lookups are balanced.
- There is no command-line program.

## Running the tests

```
pytest
```