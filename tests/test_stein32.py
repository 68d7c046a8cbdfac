import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from optarith.gcd.stein32 import (
    gcd_stein_s32,
    xgcd_blockstein2_s32,
    xgcd_blockstein3_s32,
    xgcd_blockstein4_s32,
    xgcd_blockstein5_s32,
    xgcd_blockstein_s32,
    xgcd_stein_s32,
)

s32 = st.integers(min_value=-(2**31) + 1, max_value=2**31 - 1)


def _all_results(u, v):
    return [
        xgcd_stein_s32(u, v),
        xgcd_blockstein2_s32(u, v),
        xgcd_blockstein3_s32(u, v),
        xgcd_blockstein4_s32(u, v),
        xgcd_blockstein5_s32(u, v),
    ]


@given(s32, s32)
def test_gcd_matches_math_gcd(u, v):
    assert gcd_stein_s32(u, v) == math.gcd(u, v)


def test_gcd_zero_returns_other():
    assert gcd_stein_s32(0, -12) == 12
    assert gcd_stein_s32(9, 0) == 9
    assert gcd_stein_s32(0, 0) == 0


def test_gcd_powers_of_two():
    assert gcd_stein_s32(1 << 20, 3 << 12) == 1 << 12


@given(u=s32, v=s32)
def test_xgcd_bezout_identity(u, v):
    results = [
        xgcd_stein_s32(u, v),
        xgcd_blockstein2_s32(u, v),
        xgcd_blockstein3_s32(u, v),
        xgcd_blockstein4_s32(u, v),
        xgcd_blockstein5_s32(u, v),
    ]
    for g, s, t in results:
        assert g == math.gcd(u, v)
        assert s * u + t * v == g


@given(
    u=s32.filter(lambda x: x != 0),
    v=s32.filter(lambda x: x != 0),
)
def test_xgcd_coefficients_are_small(u, v):
    bound = max(abs(u), abs(v))
    results = [
        xgcd_stein_s32(u, v),
        xgcd_blockstein2_s32(u, v),
        xgcd_blockstein3_s32(u, v),
        xgcd_blockstein4_s32(u, v),
        xgcd_blockstein5_s32(u, v),
    ]
    for _, s, t in results:
        assert abs(s) <= bound
        assert abs(t) <= bound


@given(s32, s32)
def test_windowed_variants_agree(u, v):
    expected = xgcd_stein_s32(u, v)
    for window in (2, 3, 4, 5):
        assert xgcd_blockstein_s32(u, v, window) == expected


@pytest.mark.parametrize(
    "u,v,expected",
    [
        (0, 5, (5, 0, 1)),
        (0, -5, (5, 0, -1)),
        (-7, 0, (7, -1, 0)),
        (0, 0, (0, 0, 1)),
    ],
)
def test_xgcd_zero_inputs(u, v, expected):
    assert xgcd_stein_s32(u, v) == expected
    assert xgcd_blockstein2_s32(u, v) == expected
    assert xgcd_blockstein3_s32(u, v) == expected
    assert xgcd_blockstein4_s32(u, v) == expected
    assert xgcd_blockstein5_s32(u, v) == expected


def test_xgcd_signs_of_coefficients():
    for u, v in [(240, 46), (-240, 46), (240, -46), (-240, -46)]:
        for g, s, t in _all_results(u, v):
            assert g == math.gcd(u, v)
            assert s * u + t * v == g
    for window in (2, 3, 4, 5):
        g_pos, s_pos, t_pos = xgcd_blockstein_s32(240, 46, window)
        g_neg, s_neg, t_neg = xgcd_blockstein_s32(-240, -46, window)
        assert g_pos == g_neg
        assert (s_neg, t_neg) == (-s_pos, -t_pos)
    g_pos, s_pos, t_pos = xgcd_stein_s32(240, 46)
    g_neg, s_neg, t_neg = xgcd_stein_s32(-240, -46)
    assert g_pos == g_neg
    assert (s_neg, t_neg) == (-s_pos, -t_pos)


@pytest.mark.parametrize("window", [0, 1, 6])
def test_blockstein_rejects_bad_window(window):
    with pytest.raises(ValueError):
        xgcd_blockstein_s32(12, 18, window)


@pytest.mark.parametrize("value", [2**31, -(2**31), 2**40])
def test_out_of_range_inputs_raise(value):
    with pytest.raises(OverflowError):
        gcd_stein_s32(value, 3)
    with pytest.raises(OverflowError):
        xgcd_stein_s32(3, value)
    with pytest.raises(OverflowError):
        xgcd_blockstein4_s32(value, 3)


def test_extreme_values():
    top = 2**31 - 1
    g, s, t = xgcd_blockstein5_s32(top, top - 1)
    assert g == 1
    assert s * top + t * (top - 1) == 1
    assert gcd_stein_s32(-top, top) == top