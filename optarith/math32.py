"""Fixed-width 32-bit integer helpers.

Every function reproduces unsigned or two's complement 32-bit semantics on
Python integers. Results that a fixed-width register would hold are wrapped
into range. Values that would be written through pointers are returned as
tuples.
"""

from __future__ import annotations

import math
import random

MASK32 = 0xFFFFFFFF
_SIGN32 = 0x80000000


def _u32(x: int) -> int:
    return x & MASK32


def _s32(x: int) -> int:
    x &= MASK32
    return x - (1 << 32) if x & _SIGN32 else x


def _tdivrem(n: int, d: int) -> tuple[int, int]:
    """Division truncated toward zero, remainder taking the sign of n."""
    q = abs(n) // abs(d)
    if (n < 0) != (d < 0):
        q = -q
    return q, n - q * d


def _source(rng: random.Random | None):
    return rng if rng is not None else random


def rand_u8(rng: random.Random | None = None) -> int:
    """Random value in [0, 255]."""
    return _source(rng).getrandbits(8)


def rand_u16(rng: random.Random | None = None) -> int:
    """Random value in [0, 65535]."""
    return _source(rng).getrandbits(16)


def rand_u32(rng: random.Random | None = None) -> int:
    """Random value in [0, 2**32 - 1], built from two 16-bit draws."""
    high = rand_u16(rng)
    low = rand_u16(rng)
    return (high << 16) | low


def ceil_pow2_u32(x: int) -> int:
    """Round up to the nearest power of two (0 maps to 0)."""
    x = _u32(_u32(x) - 1)
    for shift in (1, 2, 4, 8, 16):
        x |= x >> shift
    return _u32(x + 1)


def sub_with_mask_u32(a: int, b: int) -> tuple[int, int]:
    """Return (a - b, mask) where mask is all ones if a < b, else 0."""
    a, b = _u32(a), _u32(b)
    return _u32(a - b), MASK32 if a < b else 0


def sub_with_mask_s32(a: int, b: int) -> tuple[int, int]:
    """Signed a - b with a mask that is all ones if a < b, else 0."""
    a, b = _s32(a), _s32(b)
    return _s32(a - b), MASK32 if a < b else 0


def cond_swap_s32(u: int, v: int) -> tuple[int, int]:
    """Swap u with v if u < v."""
    u, v = _s32(u), _s32(v)
    return (v, u) if u < v else (u, v)


def cond_swap2_s32(u1: int, u2: int, v1: int, v2: int) -> tuple[int, int, int, int]:
    """Swap the pair (u1, u2) with (v1, v2) if u2 < v2."""
    u1, u2, v1, v2 = (_s32(n) for n in (u1, u2, v1, v2))
    if u2 < v2:
        return v1, v2, u1, u2
    return u1, u2, v1, v2


def cond_swap3_s32(
    u1: int, u2: int, u3: int, v1: int, v2: int, v3: int
) -> tuple[int, int, int, int, int, int, int]:
    """Swap (u1, u2, u3) with (v1, v2, v3) if u3 < v3.

    Returns the six values followed by the mask: all ones if swapped, else 0.
    """
    u1, u2, u3, v1, v2, v3 = (_s32(n) for n in (u1, u2, u3, v1, v2, v3))
    if u3 < v3:
        return v1, v2, v3, u1, u2, u3, MASK32
    return u1, u2, u3, v1, v2, v3, 0


def negate_using_mask_s32(m: int, x: int) -> int:
    """Negate x when m is all ones; m must be 0 or all ones (-1)."""
    m = _u32(m)
    if m not in (0, MASK32):
        raise ValueError("mask must be 0 or -1")
    return _s32(-x) if m else _s32(x)


def cond_negate_s32(c: int, x: int) -> int:
    """Negate x when c < 0."""
    return negate_using_mask_s32(MASK32 if _s32(c) < 0 else 0, x)


def abs_s32(x: int) -> int:
    """Absolute value as an unsigned 32-bit integer."""
    return _u32(cond_negate_s32(x, x))


def msb_u32(x: int) -> int:
    """Index of the most significant set bit, or -1 for 0."""
    return _u32(x).bit_length() - 1


def lsb_u32(x: int) -> int:
    """Index of the least significant set bit, or -1 for 0."""
    x = _u32(x)
    return (x & -x).bit_length() - 1


def lsb_s32(x: int) -> int:
    """Index of the least significant set bit of a signed value, or -1 for 0."""
    return lsb_u32(x)


def setbit_u32(x: int, i: int) -> int:
    """Set the i-th bit."""
    return _u32(x | (1 << i))


def clrbit_u32(x: int, i: int) -> int:
    """Clear the i-th bit."""
    return _u32(x & ~(1 << i))


def numbits_u32(x: int) -> int:
    """Smallest k such that 2**k > x."""
    return msb_u32(x) + 1


def numbits_s32(x: int) -> int:
    """Smallest k such that 2**k > |x|."""
    return msb_u32(abs_s32(x)) + 1


def addmod_s32(s1: int, s2: int, m: int) -> int:
    """(s1 + s2) mod m with the remainder taking the sign of the sum."""
    if m <= 0:
        raise ValueError("modulus must be positive")
    return _tdivrem(_s32(s1) + _s32(s2), m)[1]


def submod_s32(s1: int, s2: int, m: int) -> int:
    """(s1 - s2) mod m with the remainder taking the sign of the difference."""
    return addmod_s32(s1, _s32(-_s32(s2)), m)


def divrem_u32(n: int, d: int) -> tuple[int, int]:
    """Return (q, r) with n = q*d + r for unsigned operands."""
    n, d = _u32(n), _u32(d)
    if d == 0:
        raise ZeroDivisionError("division by zero")
    return divmod(n, d)


def divrem_s32(n: int, d: int) -> tuple[int, int]:
    """Return (q, r) with n = q*d + r, quotient truncated toward zero."""
    n, d = _s32(n), _s32(d)
    if d == 0:
        raise ZeroDivisionError("division by zero")
    q, r = _tdivrem(n, d)
    return _s32(q), _s32(r)


def mulmod_u32(x: int, y: int, m: int) -> int:
    """(x * y) % m for unsigned operands."""
    m = _u32(m)
    if m == 0:
        raise ZeroDivisionError("modulus is zero")
    return (_u32(x) * _u32(y)) % m


def mulmod_s32(x: int, y: int, m: int) -> int:
    """x * y (mod m), returning the remainder closest to zero."""
    m2 = _s32(abs_s32(m))
    x, y = _s32(x), _s32(y)
    negative = (x < 0) != (y < 0)
    r = _s32(mulmod_u32(abs_s32(x), abs_s32(y), m2))
    if (m2 >> 1) < r:
        r = _s32(r - m2)
    return _s32(-r) if negative else r


def sqrt_u32(x: int) -> int:
    """Largest s such that s*s <= x."""
    return math.isqrt(_u32(x))