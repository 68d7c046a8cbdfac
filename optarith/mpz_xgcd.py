"""Lehmer's partial extended Euclidean algorithm on arbitrary-size integers.

This is the reduction step used by the NUCOMP, NUDUPL and NUCUBE algorithms:
it runs the remainder sequence of a pair of integers until the remainder
drops to a bound, tracking one cofactor sequence alongside.
"""

from __future__ import annotations

from dataclasses import dataclass

_WORD_BITS = 64


@dataclass(frozen=True)
class PartialXgcd:
    """Two consecutive remainders and their cofactors.

    ``r2`` and ``r1`` are R_{i-1} and R_i; ``c2`` and ``c1`` are C_{i-1}
    and C_i, where R_i = R_{i-2} - q_i R_{i-1} and C_i = C_{i-2} - q_i C_{i-1}
    with C_{-1} = 0 and C_0 = -1.
    """

    r2: int
    r1: int
    c2: int
    c1: int


def _bits(x: int) -> int:
    return max(abs(x).bit_length(), 1)


def _shift_trunc(x: int, t: int) -> int:
    return -((-x) >> t) if x < 0 else x >> t


def _quot_trunc(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return -q if (a < 0) != (b < 0) else q


def xgcd_partial(r2: int, r1: int, bound: int) -> PartialXgcd:
    """Run the remainder sequence from R_{-1}=r2, R_0=r1 until R_i <= bound.

    On return R_i is 0 or R_i <= bound.
    """
    c2, c1 = 0, -1

    while r1 != 0 and r1 > bound:
        shift = max(_bits(r2) - (_WORD_BITS - 1), _bits(r1) - (_WORD_BITS - 1), 0)
        rr2 = _shift_trunc(r2, shift)
        rr1 = _shift_trunc(r1, shift)
        bb = _shift_trunc(bound, shift)

        a2, a1 = 0, 1
        b2, b1 = 1, 0
        steps = 0

        # Single-precision Euclidean steps on the leading bits.
        while rr1 != 0 and rr1 > bb:
            qq = _quot_trunc(rr2, rr1)
            rr2, rr1 = rr1, rr2 - qq * rr1
            a2, a1 = a1, a2 - qq * a1
            b2, b1 = b1, b2 - qq * b1
            if steps & 1:
                if rr1 < -b1 or rr2 - rr1 < a1 - a2:
                    break
            elif rr1 < -a1 or rr2 - rr1 < b1 - b2:
                break
            steps += 1

        if steps == 0:
            q, r = divmod(r2, r1)
            r2, r1 = r1, r
            c2, c1 = c1, c2 - q * c1
        else:
            r2, r1 = r2 * b2 + r1 * a2, r2 * b1 + r1 * a1
            c2, c1 = c2 * b2 + c1 * a2, c2 * b1 + c1 * a1
            if r1 < 0:
                r1, c1 = -r1, -c1
            if r2 < 0:
                r2, c2 = -r2, -c2

    if r2 < 0:
        r2, c1, c2 = -r2, -c1, -c2

    return PartialXgcd(r2=r2, r1=r1, c2=c2, c1=c1)