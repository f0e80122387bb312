from airlookup.bus import BitwiseOperationLookupBus
from airlookup.field import F
from airlookup.interaction import Interaction, LookupBus, RecordingBuilder


def test_send_range_zero_op():
    bus = BitwiseOperationLookupBus(5)
    inter = bus.send_range(F(3), F(4))
    assert (inter.x, inter.y, inter.z, inter.op) == (F(3), F(4), F.ZERO, F.ZERO)
    assert inter.is_lookup is True
    assert inter.bus == LookupBus(5)


def test_send_xor_op_one():
    inter = BitwiseOperationLookupBus(5).send_xor(F(3), F(4), F(7))
    assert inter.op == F.ONE
    assert inter.z == F(7)
    assert inter.is_lookup is True


def test_receive_is_not_lookup():
    inter = BitwiseOperationLookupBus(2).receive(1, 2, 3, 0)
    assert inter.is_lookup is False
    assert (inter.x, inter.y, inter.z, inter.op) == (F(1), F(2), F(3), F(0))


def test_eval_lookup_pushes_interaction():
    builder = RecordingBuilder()
    bus = BitwiseOperationLookupBus(5)
    bus.send_range(F(3), F(4)).eval(builder, F.ONE)
    assert builder.interactions == [
        Interaction(
            message=(F(3), F(4), F.ZERO, F.ZERO),
            count=F.ONE,
            bus_index=5,
            count_weight=1,
        )
    ]


def test_eval_receive_negates_count():
    builder = RecordingBuilder()
    bus = BitwiseOperationLookupBus(5)
    bus.receive(F(3), F(4), F(7), F.ONE).eval(builder, F(2))
    (inter,) = builder.interactions
    assert inter.count == -F(2)
    assert inter.count_weight == 0


def test_push_matches_helpers():
    bus = BitwiseOperationLookupBus(1)
    assert bus.push(F(1), F(2), F.ZERO, F.ZERO, True) == bus.send_range(F(1), F(2))
    assert bus.push(F(1), F(2), F(3), F.ONE, True) == bus.send_xor(F(1), F(2), F(3))


def test_bus_equality():
    assert BitwiseOperationLookupBus(4) == BitwiseOperationLookupBus(4)
    assert BitwiseOperationLookupBus(4).inner.index == 4