"""Windowed extended binary GCD on non-negative 128-bit integers.

Each step removes up to ``window`` factors of two at once, using small
precomputed tables of multiples of the odd input. Only one coefficient is
tracked through the loop; the other is recovered by exact division at the
end, with no reduction of either coefficient.
"""

from __future__ import annotations

from optarith.gcd.stein32 import _build_tables
from optarith.gcd.stein64 import _lsb

_S128_LIMIT = 1 << 127
_WINDOWS = (2, 3, 4, 5)


def _check(x: int) -> int:
    if x < 0:
        raise ValueError("inputs must be non-negative")
    if x >= _S128_LIMIT:
        raise OverflowError(f"{x} does not fit in a signed 128-bit integer")
    return x


def _xgcd(a: int, b: int, window: int) -> tuple[int, int, int]:
    a = _check(a)
    b = _check(b)

    if a == 0:
        return b, 0, 1
    if b == 0:
        return a, 1, 0

    shift = _lsb(a | b)
    a >>= shift
    b >>= shift

    swapped = not a & 1
    if swapped:
        a, b = b, a

    tables = _build_tables(a, window)
    full_mask = (1 << window) - 1
    full_table = tables[window]

    u2, v2 = 0, 1
    u3, v3 = a, b

    while v3 > 0:
        k = _lsb(v3)
        v3 >>= k

        # Divide v2 by the same power of two, keeping it congruent mod a.
        while k >= window:
            v2 = (v2 >> window) - full_table[v2 & full_mask]
            k -= window
        if k:
            v2 = (v2 >> k) - tables[k][v2 & ((1 << k) - 1)]

        if u3 > v3:
            u3, v3 = v3, u3 - v3
            u2, v2 = v2, u2 - v2
        else:
            v3 -= u3
            v2 -= u2

    # The division is exact: u3 == u1*a + u2*b.
    u1 = (u3 - u2 * b) // a

    s, t = (u2, u1) if swapped else (u1, u2)
    return u3 << shift, s, t


def xgcd_blockstein_s128(a: int, b: int, window: int) -> tuple[int, int, int]:
    """Return (g, s, t) with s*a + t*b == g, removing up to ``window`` bits a step.

    ``window`` is one of 2 to 5; the inputs must be non-negative.
    """
    if window not in _WINDOWS:
        raise ValueError(f"window must be one of {_WINDOWS}")
    return _xgcd(a, b, window)


def xgcd_blockstein2_s128(a: int, b: int) -> tuple[int, int, int]:
    """Extended binary GCD with a 2-bit window."""
    return _xgcd(a, b, 2)


def xgcd_blockstein3_s128(a: int, b: int) -> tuple[int, int, int]:
    """Extended binary GCD with a 3-bit window."""
    return _xgcd(a, b, 3)


def xgcd_blockstein4_s128(a: int, b: int) -> tuple[int, int, int]:
    """Extended binary GCD with a 4-bit window."""
    return _xgcd(a, b, 4)


def xgcd_blockstein5_s128(a: int, b: int) -> tuple[int, int, int]:
    """Extended binary GCD with a 5-bit window."""
    return _xgcd(a, b, 5)