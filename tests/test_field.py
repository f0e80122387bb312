import pytest
from hypothesis import given
from hypothesis import strategies as st

from airlookup.field import F, field_product, field_sum

small = st.integers(min_value=-1000, max_value=1000)


def test_zero_and_constants():
    assert F.zero() == F.ZERO
    assert F() == F.ZERO
    assert F.from_i32(1) == F.ONE
    assert F.ONE.value == 1


@given(small, small)
def test_addition_commutes(a, b):
    assert F(a) + F(b) == F(b) + F(a)


@given(small)
def test_additive_inverse(a):
    x = F(a)
    assert x - x == F.ZERO
    assert x + (-x) == F.ZERO
    assert -(-x) == x


@given(small, small, small)
def test_distributive(a, b, c):
    x, y, z = F(a), F(b), F(c)
    assert x * (y + z) == x * y + x * z


@given(small)
def test_identities(a):
    x = F(a)
    assert x + F.ZERO == x
    assert x * F.ONE == x
    assert x * F.ZERO == F.ZERO


def test_int_operands_are_coerced():
    x = F(4)
    assert x + 0 == x
    assert 1 * x == x
    assert x - 4 == F.ZERO


def test_overflow_raises():
    with pytest.raises(OverflowError):
        F(2**31 - 1) + F.ONE
    with pytest.raises(OverflowError):
        F(2**31)
    with pytest.raises(OverflowError):
        -F(-(2**31))


def test_non_int_rejected():
    with pytest.raises(TypeError):
        F("1")


def test_empty_sum_and_product():
    assert field_sum([]) == F.ZERO
    assert field_product([]) == F.ONE


@given(st.lists(small, max_size=10))
def test_sum_matches_repeated_addition(values):
    items = [F(v) for v in values]
    total = F.ZERO
    for item in items:
        total = total + item
    assert field_sum(items) == total
    assert field_sum(reversed(items)) == total


@given(st.lists(st.integers(min_value=-5, max_value=5), max_size=6))
def test_product_order_independent(values):
    items = [F(v) for v in values]
    assert field_product(items) == field_product(reversed(items))