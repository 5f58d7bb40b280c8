"""
Tests for GF(2^8) arithmetic.
"""

import pytest
from hypothesis import given, strategies as st

from secretshard import gf256
from secretshard.errors import DomainError

elements = st.integers(min_value=0, max_value=255)
nonzero = st.integers(min_value=1, max_value=255)


def test_add():
    assert gf256.add(16, 16) == 0
    assert gf256.add(3, 4) == 7
    assert gf256.sub(7, 4) == 3


def test_mul():
    assert gf256.mul(3, 7) == 9
    assert gf256.mul(3, 0) == 0
    assert gf256.mul(0, 3) == 0
    # FIPS-197 section 4.2 worked examples
    assert gf256.mul(0x57, 0x83) == 0xC1
    assert gf256.mul(0x57, 0x13) == 0xFE


def test_div():
    assert gf256.div(0, 7) == 0
    assert gf256.div(3, 3) == 1
    assert gf256.div(6, 3) == 2


def test_inverse_every_nonzero_element():
    """Every nonzero element has an inverse that multiplies back to 1."""
    for a in range(1, 256):
        inv = gf256.inverse(a)
        assert 0 < inv < 256
        assert gf256.mul(a, inv) == 1, f"inverse({a}) = {inv} is wrong"

    # Known AES S-box input/inverse pair
    assert gf256.inverse(0x53) == 0xCA


def test_zero_has_no_inverse():
    with pytest.raises(DomainError):
        gf256.inverse(0)
    with pytest.raises(DomainError):
        gf256.div(5, 0)


def test_multiplicative_group_order():
    for a in range(1, 256):
        assert gf256.power(a, 255) == 1
        assert gf256.power(a, 0) == 1
        assert gf256.power(a, 1) == a


def test_is_element():
    assert gf256.is_element(0)
    assert gf256.is_element(255)
    assert not gf256.is_element(256)
    assert not gf256.is_element(-1)
    assert not gf256.is_element(True)
    assert not gf256.is_element("a")


@given(elements, elements)
def test_add_mul_commutative(a, b):
    assert gf256.add(a, b) == gf256.add(b, a)
    assert gf256.mul(a, b) == gf256.mul(b, a)


@given(elements, elements, elements)
def test_add_mul_associative(a, b, c):
    assert gf256.add(gf256.add(a, b), c) == gf256.add(a, gf256.add(b, c))
    assert gf256.mul(gf256.mul(a, b), c) == gf256.mul(a, gf256.mul(b, c))


@given(elements, elements, elements)
def test_mul_distributes_over_add(a, b, c):
    assert gf256.mul(a, gf256.add(b, c)) == gf256.add(gf256.mul(a, b), gf256.mul(a, c))


@given(elements)
def test_identities(a):
    assert gf256.add(a, 0) == a
    assert gf256.add(a, a) == 0
    assert gf256.mul(a, 1) == a
    assert gf256.mul(a, 0) == 0
    assert 0 <= gf256.mul(a, 0xFF) < 256


@given(elements, nonzero)
def test_div_undoes_mul(a, b):
    assert gf256.div(gf256.mul(a, b), b) == a


def test_table_mul_matches_peasant_mul():
    """The log/exp tables agree with direct carry-less multiplication."""
    for a in range(256):
        for b in range(256):
            assert gf256.mul(a, b) == gf256._mul_slow(a, b), f"mul({a}, {b})"


def test_power_matches_repeated_mul():
    for a in (0, 1, 2, 3, 0x53, 0xFF):
        expected = 1
        for n in range(0, 600):
            assert gf256.power(a, n) == expected, f"power({a}, {n})"
            expected = gf256.mul(expected, a)
