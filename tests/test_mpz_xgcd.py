import math

from hypothesis import given, settings
from hypothesis import strategies as st

from optarith.mpz_xgcd import PartialXgcd, xgcd_partial

BIG = st.integers(min_value=1, max_value=2**400)


def test_no_steps_when_r1_is_zero():
    assert xgcd_partial(10, 0, 0) == PartialXgcd(r2=10, r1=0, c2=0, c1=-1)


def test_no_steps_when_r1_within_bound():
    result = xgcd_partial(1000, 7, 7)
    assert (result.r2, result.r1, result.c2, result.c1) == (1000, 7, 0, -1)


@settings(max_examples=200)
@given(BIG, st.data())
def test_full_run_gives_gcd(a, data):
    b = data.draw(st.integers(min_value=0, max_value=a))
    result = xgcd_partial(a, b, 0)
    g = math.gcd(a, b)
    assert result.r1 == 0
    assert result.r2 == g
    assert abs(result.c1) == a // g
    assert (result.r2 + result.c2 * b) % a == 0


@settings(max_examples=200)
@given(BIG, st.data())
def test_partial_run_invariants(a, data):
    b = data.draw(st.integers(min_value=0, max_value=a))
    bound = data.draw(st.integers(min_value=0, max_value=a))
    result = xgcd_partial(a, b, bound)
    assert result.r1 == 0 or result.r1 <= bound
    assert result.r2 >= 0 and result.r1 >= 0
    assert math.gcd(result.r2, result.r1) == math.gcd(a, b)
    assert (result.r1 + result.c1 * b) % a == 0
    assert (result.r2 + result.c2 * b) % a == 0
    assert abs(result.r2 * result.c1 - result.r1 * result.c2) == a


@given(st.integers(min_value=2**70, max_value=2**300))
def test_coprime_consecutive_values(a):
    result = xgcd_partial(a + 1, a, 0)
    assert result.r2 == 1
    assert result.r1 == 0
    assert abs(result.c1) == a + 1