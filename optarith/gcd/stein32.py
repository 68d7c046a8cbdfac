"""Binary (Stein) GCD and extended GCD on signed 32-bit integers.

The extended variants return ``(g, s, t)`` with ``s*u + t*v == g``. The
coefficient that the binary loop tracks directly is reduced to the
representative closest to zero, and the other one is derived from it.
The windowed variants remove up to ``window`` factors of two at a time
using small precomputed tables of multiples of the odd input; they give
the same results as the plain binary method.
"""

from __future__ import annotations

from optarith.math32 import _tdivrem, lsb_s32

_S32_LIMIT = 1 << 31
_WINDOWS = (2, 3, 4, 5)


def _check(x: int) -> int:
    if not -_S32_LIMIT < x < _S32_LIMIT:
        raise OverflowError(f"{x} does not fit in a signed 32-bit integer")
    return x


def gcd_stein_s32(u: int, v: int) -> int:
    """Greatest common divisor of u and v by Stein's binary method."""
    u = abs(_check(u))
    v = abs(_check(v))
    if u == 0:
        return v
    if v == 0:
        return u

    shift = lsb_s32(u | v)
    u >>= shift
    v >>= shift
    u >>= lsb_s32(u)

    # u stays odd from here on.
    while v != 0:
        v >>= lsb_s32(v)
        if u < v:
            v -= u
        else:
            u, v = v, u - v
    return u << shift


def _build_tables(u: int, window: int) -> dict[int, list[int]]:
    """For each k up to ``window``, map (m*u) mod 2^k to (m*u) >> k."""
    tables = {}
    for k in range(1, window + 1):
        size = 1 << k
        table = [0] * size
        for m in range(size):
            product = m * u
            table[product & (size - 1)] = product >> k
        tables[k] = table
    return tables


def _xgcd(in_u: int, in_v: int, window: int) -> tuple[int, int, int]:
    in_u = _check(in_u)
    in_v = _check(in_v)
    su = -1 if in_u < 0 else 1
    sv = -1 if in_v < 0 else 1
    u = abs(in_u)
    v = abs(in_v)

    if u == 0:
        return v, 0, sv
    if v == 0:
        return u, su, 0

    shift = lsb_s32(u | v)
    u >>= shift
    v >>= shift

    swapped = not u & 1
    if swapped:
        u, v = v, u

    tables = _build_tables(u, window)
    full_mask = (1 << window) - 1
    full_table = tables[window]

    u2, v2 = 0, 1
    u3, v3 = u, v

    while v3 > 0:
        b = lsb_s32(v3)
        v3 >>= b

        # Make v2 track v3 by dividing out the same power of two.
        while b >= window:
            v2 = (v2 >> window) - full_table[v2 & full_mask]
            b -= window
        if b:
            v2 = (v2 >> b) - tables[b][v2 & ((1 << b) - 1)]

        if u3 > v3:
            u3, v3 = v3, u3 - v3
            u2, v2 = v2, u2 - v2
        else:
            v3 -= u3
            v2 -= u2

    # Reduce u2 to the representative closest to zero modulo u/u3.
    modulus = u // u3
    u2 = _tdivrem(u2, modulus)[1]
    half = modulus >> 1
    if u2 > half:
        u2 -= modulus
    if u2 < -half:
        u2 += modulus

    u1 = _tdivrem(u3 - u2 * v, u)[0]

    s, t = (u2, u1) if swapped else (u1, u2)
    return u3 << shift, s * su, t * sv


def xgcd_stein_s32(u: int, v: int) -> tuple[int, int, int]:
    """Extended binary GCD: return (g, s, t) with s*u + t*v == g."""
    return _xgcd(u, v, 1)


def xgcd_blockstein_s32(u: int, v: int, window: int) -> tuple[int, int, int]:
    """Extended binary GCD removing up to ``window`` (2 to 5) bits per step."""
    if window not in _WINDOWS:
        raise ValueError(f"window must be one of {_WINDOWS}")
    return _xgcd(u, v, window)


def xgcd_blockstein2_s32(u: int, v: int) -> tuple[int, int, int]:
    """Extended binary GCD with a 2-bit window."""
    return _xgcd(u, v, 2)


def xgcd_blockstein3_s32(u: int, v: int) -> tuple[int, int, int]:
    """Extended binary GCD with a 3-bit window."""
    return _xgcd(u, v, 3)


def xgcd_blockstein4_s32(u: int, v: int) -> tuple[int, int, int]:
    """Extended binary GCD with a 4-bit window."""
    return _xgcd(u, v, 4)


def xgcd_blockstein5_s32(u: int, v: int) -> tuple[int, int, int]:
    """Extended binary GCD with a 5-bit window."""
    return _xgcd(u, v, 5)