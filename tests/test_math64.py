import random

import pytest
from hypothesis import given
from hypothesis import strategies as st

from optarith import math64 as m64

S64 = st.integers(min_value=-(2**63), max_value=2**63 - 1)
U64 = st.integers(min_value=0, max_value=2**64 - 1)
S32 = st.integers(min_value=-(2**31), max_value=2**31 - 1)


def test_rand_u64_range_and_reproducible():
    a = m64.rand_u64(random.Random(7))
    b = m64.rand_u64(random.Random(7))
    assert a == b
    assert 0 <= a <= m64.MASK64


def test_sub_with_mask_u64():
    assert m64.sub_with_mask_u64(1, 2) == (-1, m64.MASK64)
    assert m64.sub_with_mask_u64(5, 2) == (3, 0)


@given(S64, S64)
def test_sub_with_mask_s64_mask(a, b):
    _, mask = m64.sub_with_mask_s64(a, b)
    assert mask == (m64.MASK64 if a < b else 0)


def test_cond_swaps():
    assert m64.cond_swap_s64(1, 5) == (5, 1)
    assert m64.cond_swap_s64(5, 1) == (5, 1)
    assert m64.cond_swap2_s64(10, 1, 20, 5) == (20, 5, 10, 1)
    assert m64.cond_swap2_s64(10, 9, 20, 5) == (10, 9, 20, 5)
    assert m64.cond_swap3_s64(1, 2, 3, 4, 5, 6) == (4, 5, 6, 1, 2, 3, m64.MASK64)
    assert m64.cond_swap3_s64(1, 2, 9, 4, 5, 6) == (1, 2, 9, 4, 5, 6, 0)


def test_negate_using_mask():
    assert m64.negate_using_mask_s64(-1, 7) == -7
    assert m64.negate_using_mask_s64(0, 7) == 7
    with pytest.raises(ValueError):
        m64.negate_using_mask_s64(3, 7)


def test_abs_and_cond_negate():
    assert m64.abs_s64(-(2**63)) == 2**63
    assert m64.abs_s64(-12) == 12
    assert m64.cond_negate_s64(-1, 9) == -9
    assert m64.cond_negate_s64(1, 9) == 9


def test_s64_is_s32_bounds():
    assert m64.s64_is_s32(-(2**31))
    assert m64.s64_is_s32(2**31 - 1)
    assert not m64.s64_is_s32(2**31)
    assert not m64.s64_is_s32(-(2**31) - 1)


def test_bit_scans():
    assert m64.msb_u64(0) == -1
    assert m64.lsb_u64(0) == -1
    assert m64.msb_u64(2**63) == 63
    assert m64.lsb_u64(2**63) == 63
    assert m64.lsb_s64(-(2**40)) == 40
    assert m64.numbits_s64(-(2**63)) == 64


@given(U64.filter(lambda x: x > 0))
def test_msb_lsb_bracket(x):
    assert 2 ** m64.msb_u64(x) <= x < 2 ** (m64.msb_u64(x) + 1)
    assert x % (2 ** m64.lsb_u64(x)) == 0
    assert (x >> m64.lsb_u64(x)) & 1 == 1


@given(U64, st.integers(min_value=1, max_value=2**32 - 1))
def test_mod_u32_u64_u32(n, m):
    r = m64.mod_u32_u64_u32(n, m)
    assert 0 <= r < m
    assert (n - r) % m == 0


@given(S64, st.integers(min_value=1, max_value=2**31 - 1))
def test_mod_s32_s64_u32_closest(n, m):
    r = m64.mod_s32_s64_u32(n, m)
    assert (n - r) % m == 0
    assert abs(r) <= m // 2 + (m & 1)
    assert 2 * abs(r) <= m


def test_mod_s32_s64_u32_tie_and_zero():
    assert m64.mod_s32_s64_u32(5, 10) == -5
    with pytest.raises(ZeroDivisionError):
        m64.mod_s32_s64_u32(5, 0)


@given(S64, S64, st.integers(min_value=1, max_value=2**63 - 1))
def test_addmod_submod(s1, s2, m):
    r = m64.addmod_s64(s1, s2, m)
    assert (s1 + s2 - r) % m == 0
    assert abs(r) < m
    assert r == 0 or (r > 0) == (s1 + s2 > 0)
    d = m64.submod_s64(s1, s2, m)
    assert (s1 - s2 - d) % m == 0
    assert abs(d) < m


def test_addmod_requires_positive_modulus():
    with pytest.raises(ValueError):
        m64.addmod_s64(1, 2, 0)
    with pytest.raises(ZeroDivisionError):
        m64.submod_s64(1, 2, 0)


@given(U64, U64.filter(lambda d: d > 0))
def test_divrem_u64(n, d):
    q, r = m64.divrem_u64(n, d)
    assert q * d + r == n
    assert 0 <= r < d


@given(S64, S64.filter(lambda d: d != 0))
def test_divrem_s64(n, d):
    q, r = m64.divrem_s64(n, d)
    if not (n == -(2**63) and d == -1):
        assert q * d + r == n
        assert abs(r) < abs(d)
        assert r == 0 or (r < 0) == (n < 0)


def test_divrem_by_zero():
    with pytest.raises(ZeroDivisionError):
        m64.divrem_u64(1, 0)
    with pytest.raises(ZeroDivisionError):
        m64.divrem_s64(1, 0)


@given(U64, U64, U64.filter(lambda m: m > 0))
def test_mulmod_u64(x, y, m):
    r = m64.mulmod_u64(x, y, m)
    assert 0 <= r < m
    assert (x * y - r) % m == 0


@given(
    st.integers(min_value=-(2**63) + 1, max_value=2**63 - 1),
    st.integers(min_value=-(2**63) + 1, max_value=2**63 - 1),
    st.integers(min_value=1, max_value=2**62),
)
def test_mulmod_s64_closest_to_zero(x, y, m):
    r = m64.mulmod_s64(x, y, m)
    assert (x * y - r) % m == 0
    assert 2 * abs(r) <= m + 1


@given(S32, S32, S32, S32)
def test_muladdmul_exact_when_in_range(f1, f2, f3, f4):
    exact = f1 * f2 + f3 * f4
    result = m64.muladdmul_s64_4s32(f1, f2, f3, f4)
    if -(2**63) <= exact < 2**63:
        assert result == exact


def test_muladdmul_wraps():
    low = -(2**31)
    assert m64.muladdmul_s64_4s32(low, low, low, low) == -(2**63)


@given(S32, S32, S32, S32, S32.filter(lambda d: d != 0))
def test_muladdmuldiv(f1, f2, f3, f4, d):
    q = m64.muladdmuldiv_s64(f1, f2, f3, f4, d)
    total = f1 * f2 + f3 * f4
    assert abs(total - q * d) < abs(d)
    assert abs(q * d) <= abs(total)


def test_muladdmuldiv_zero_divisor():
    with pytest.raises(ZeroDivisionError):
        m64.muladdmuldiv_s64(1, 2, 3, 4, 0)


@given(U64)
def test_sqrt_u64(x):
    s = m64.sqrt_u64(x)
    assert s * s <= x < (s + 1) * (s + 1)


@given(U64, st.integers(min_value=1, max_value=2**64 - 1), U64.filter(lambda m: m > 0))
def test_expmod_matches_pow(a, e, m):
    assert m64.expmod_u64(a, e, m) == pow(a, e, m)


def test_expmod_zero_exponent_and_zero_modulus():
    assert m64.expmod_u64(5, 0, 1) == 1
    with pytest.raises(ZeroDivisionError):
        m64.expmod_u64(5, 3, 0)