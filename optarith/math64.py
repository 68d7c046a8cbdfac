"""Fixed-width 64-bit integer helpers.

Every function reproduces unsigned or two's complement 64-bit semantics on
Python integers. Results that a fixed-width register would hold are wrapped
into range. Values that would be written through pointers are returned as
tuples.
"""

from __future__ import annotations

import math
import random

from optarith.math32 import _s32, _tdivrem, _u32, rand_u32

MASK64 = (1 << 64) - 1
_SIGN64 = 1 << 63
_S32_MIN = -(1 << 31)
_S32_MAX = (1 << 31) - 1


def _u64(x: int) -> int:
    return x & MASK64


def _s64(x: int) -> int:
    x &= MASK64
    return x - (1 << 64) if x & _SIGN64 else x


def rand_u64(rng: random.Random | None = None) -> int:
    """Random value in [0, 2**64 - 1], built from two 32-bit draws."""
    high = rand_u32(rng)
    low = rand_u32(rng)
    return (high << 32) | low


def sub_with_mask_u64(a: int, b: int) -> tuple[int, int]:
    """Unsigned a - b as a signed 64-bit value, with a mask of all ones if a < b."""
    a, b = _u64(a), _u64(b)
    return _s64(a - b), MASK64 if a < b else 0


def sub_with_mask_s64(a: int, b: int) -> tuple[int, int]:
    """Signed a - b with a mask that is all ones if a < b, else 0."""
    a, b = _s64(a), _s64(b)
    return _s64(a - b), MASK64 if a < b else 0


def cond_swap_s64(u: int, v: int) -> tuple[int, int]:
    """Swap u with v if u < v."""
    u, v = _s64(u), _s64(v)
    return (v, u) if u < v else (u, v)


def cond_swap2_s64(u1: int, u2: int, v1: int, v2: int) -> tuple[int, int, int, int]:
    """Swap the pair (u1, u2) with (v1, v2) if u2 < v2."""
    u1, u2, v1, v2 = (_s64(n) for n in (u1, u2, v1, v2))
    if u2 < v2:
        return v1, v2, u1, u2
    return u1, u2, v1, v2


def cond_swap3_s64(
    u1: int, u2: int, u3: int, v1: int, v2: int, v3: int
) -> tuple[int, int, int, int, int, int, int]:
    """Swap (u1, u2, u3) with (v1, v2, v3) if u3 < v3.

    Returns the six values followed by the mask: all ones if swapped, else 0.
    """
    u1, u2, u3, v1, v2, v3 = (_s64(n) for n in (u1, u2, u3, v1, v2, v3))
    if u3 < v3:
        return v1, v2, v3, u1, u2, u3, MASK64
    return u1, u2, u3, v1, v2, v3, 0


def negate_using_mask_s64(m: int, x: int) -> int:
    """Negate x when m is all ones; m must be 0 or all ones (-1)."""
    m = _u64(m)
    if m not in (0, MASK64):
        raise ValueError("mask must be 0 or -1")
    return _s64(-x) if m else _s64(x)


def cond_negate_s64(c: int, x: int) -> int:
    """Negate x when c < 0."""
    return negate_using_mask_s64(MASK64 if _s64(c) < 0 else 0, x)


def abs_s64(x: int) -> int:
    """Absolute value as an unsigned 64-bit integer."""
    return _u64(cond_negate_s64(x, x))


def s64_is_s32(x: int) -> bool:
    """True if x fits in a signed 32-bit integer."""
    return _S32_MIN <= _s64(x) <= _S32_MAX


def msb_u64(x: int) -> int:
    """Index of the most significant set bit, or -1 for 0."""
    return _u64(x).bit_length() - 1


def lsb_u64(x: int) -> int:
    """Index of the least significant set bit, or -1 for 0."""
    x = _u64(x)
    return (x & -x).bit_length() - 1


def lsb_s64(x: int) -> int:
    """Index of the least significant set bit of a signed value, or -1 for 0."""
    return lsb_u64(x)


def numbits_s64(x: int) -> int:
    """Smallest k such that 2**k > |x|."""
    return msb_u64(abs_s64(x)) + 1


def mod_u32_u64_u32(n: int, m: int) -> int:
    """n % m for an unsigned 64-bit n and an unsigned 32-bit m."""
    m = _u32(m)
    if m == 0:
        raise ZeroDivisionError("modulus is zero")
    return _u64(n) % m


def mod_s32_s64_u32(n: int, m: int) -> int:
    """The signed remainder of n modulo m that is closest to zero.

    On a tie the remainder of the opposite sign to n is chosen.
    """
    n, m = _s64(n), _u32(m)
    if m == 0:
        raise ZeroDivisionError("modulus is zero")
    negative = n < 0
    a1 = mod_u32_u64_u32(abs_s64(n), m)
    r1 = _s32(-a1 if negative else a1)
    r2 = _s32(r1 - _s32(-m if negative else m))
    a2 = _u32(r2 if negative else -r2)
    return r1 if a1 < a2 else r2


def addmod_s64(s1: int, s2: int, m: int) -> int:
    """(s1 + s2) mod m with the remainder taking the sign of the sum."""
    if m <= 0:
        raise ValueError("modulus must be positive")
    return _tdivrem(_s64(s1) + _s64(s2), m)[1]


def submod_s64(s1: int, s2: int, m: int) -> int:
    """(s1 - s2) mod m with the remainder taking the sign of the difference."""
    m = _s64(m)
    if m == 0:
        raise ZeroDivisionError("modulus is zero")
    return _tdivrem(_s64(s1) - _s64(s2), m)[1]


def divrem_u64(n: int, d: int) -> tuple[int, int]:
    """Return (q, r) with n = q*d + r for unsigned operands."""
    n, d = _u64(n), _u64(d)
    if d == 0:
        raise ZeroDivisionError("division by zero")
    return divmod(n, d)


def divrem_s64(n: int, d: int) -> tuple[int, int]:
    """Return (q, r) with n = q*d + r, quotient truncated toward zero."""
    n, d = _s64(n), _s64(d)
    if d == 0:
        raise ZeroDivisionError("division by zero")
    q, r = _tdivrem(n, d)
    return _s64(q), _s64(r)


def mulmod_u64(x: int, y: int, m: int) -> int:
    """(x * y) % m for unsigned operands, using a full 128-bit product."""
    m = _u64(m)
    if m == 0:
        raise ZeroDivisionError("modulus is zero")
    return (_u64(x) * _u64(y)) % m


def mulmod_s64(x: int, y: int, m: int) -> int:
    """x * y (mod m), returning the remainder closest to zero."""
    m2 = _s64(abs_s64(m))
    x, y = _s64(x), _s64(y)
    negative = (x < 0) != (y < 0)
    r = _s64(mulmod_u64(abs_s64(x), abs_s64(y), m2))
    if (m2 >> 1) < r:
        r = _s64(r - m2)
    return _s64(-r) if negative else r


def muladdmul_s64_4s32(f1: int, f2: int, f3: int, f4: int) -> int:
    """f1*f2 + f3*f4 for signed 32-bit factors, as a signed 64-bit value."""
    f1, f2, f3, f4 = (_s32(f) for f in (f1, f2, f3, f4))
    return _s64(f1 * f2 + f3 * f4)


def muladdmuldiv_s64(f1: int, f2: int, f3: int, f4: int, d: int) -> int:
    """(f1*f2 + f3*f4) / d with a 128-bit intermediate, truncated toward zero."""
    f1, f2, f3, f4, d = (_s64(f) for f in (f1, f2, f3, f4, d))
    if d == 0:
        raise ZeroDivisionError("division by zero")
    return _s64(_tdivrem(f1 * f2 + f3 * f4, d)[0])


def sqrt_u64(x: int) -> int:
    """Largest s such that s*s <= x."""
    return math.isqrt(_u64(x))


def is_square_u64(x: int) -> bool:
    """True if some integer s has s*s == x."""
    x = _u64(x)
    s = sqrt_u64(x)
    return s * s == x


def is_square_s64(x: int) -> bool:
    """True if |x| is a perfect square."""
    return is_square_u64(abs_s64(x))


def expmod_u64(a: int, e: int, m: int) -> int:
    """a**e mod m by binary exponentiation; an exponent of 0 gives 1."""
    a, e, m = _u64(a), _u64(e), _u64(m)
    if m == 0:
        raise ZeroDivisionError("modulus is zero")
    if e == 0:
        return 1
    return pow(a, e, m)