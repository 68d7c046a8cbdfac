"""Helpers for arbitrary-size integers.

Word extraction with fixed-width wrapping, modular arithmetic with floored
remainders, product trees, probable primes, random semiprimes and a plain
text format holding one integer per line.
"""

from __future__ import annotations

import random
import time
from pathlib import Path
from typing import Iterable

from optarith.math32 import MASK32
from optarith.math64 import MASK64, _s64

_SMALL_PRIMES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41)
# The bases above make Miller-Rabin exact below this bound.
_DETERMINISTIC_LIMIT = 3_317_044_064_679_887_385_961_981
_EXTRA_ROUNDS = 20


def get_u32(x: int) -> int:
    """Low 32 bits of |x|."""
    return abs(x) & MASK32


def get_u64(x: int) -> int:
    """Low 64 bits of |x|."""
    return abs(x) & MASK64


def get_s64(x: int) -> int:
    """Low 64 bits of |x| as a signed value, negated when x is negative."""
    value = _s64(abs(x))
    return _s64(-value) if x < 0 else value


def mulm(a: int, b: int, m: int) -> int:
    """(a * b) mod m, with the remainder taking the sign of m."""
    return (a * b) % m


def addm(a: int, b: int, m: int) -> int:
    """(a + b) mod m, with the remainder taking the sign of m."""
    return (a + b) % m


def subm(a: int, b: int, m: int) -> int:
    """(a - b) mod m, with the remainder taking the sign of m."""
    return (a - b) % m


def product_list_u32(xs: Iterable[int]) -> int:
    """Product of a sequence of unsigned 32-bit values; 1 when empty."""
    result = 1
    for x in xs:
        result *= x & MASK32
    return result


def _tree_product(values: list[int]) -> int:
    level = list(values)
    while len(level) > 1:
        paired = [a * b for a, b in zip(level[0::2], level[1::2])]
        if len(level) % 2:
            paired.append(level[-1])
        level = paired
    return level[0]


def product_tree(values: Iterable[int]) -> int:
    """Product of the values by pairwise merging; 0 when there are none."""
    return product_tree_mul(1, values)


def product_tree_mul(o: int, values: Iterable[int]) -> int:
    """o times the product of the values; 0 when there are none."""
    items = list(values)
    if not items:
        return 0
    return o * _tree_product(items)


def to_string(n: int) -> str:
    """Decimal digits of n.

    A negative n yields the single digit n mod 10, as the digit loop stops
    before producing more.
    """
    if n < 0:
        return str(n % 10)
    return str(n)


def _miller_rabin_round(n: int, d: int, s: int, base: int) -> bool:
    x = pow(base, d, n)
    if x in (1, n - 1):
        return True
    for _ in range(s - 1):
        x = x * x % n
        if x == n - 1:
            return True
    return False


def is_probable_prime(n: int) -> bool:
    """Miller-Rabin test; exact below about 3.3e24, probabilistic above."""
    if n < 2:
        return False
    for p in _SMALL_PRIMES:
        if n % p == 0:
            return n == p
    d, s = n - 1, 0
    while d % 2 == 0:
        d //= 2
        s += 1
    if not all(_miller_rabin_round(n, d, s, base) for base in _SMALL_PRIMES):
        return False
    if n < _DETERMINISTIC_LIMIT:
        return True
    rng = random.Random(n)
    return all(
        _miller_rabin_round(n, d, s, rng.randrange(2, n - 1))
        for _ in range(_EXTRA_ROUNDS)
    )


def next_prime(n: int) -> int:
    """Smallest probable prime strictly greater than n."""
    if n < 2:
        return 2
    candidate = n + 1 if n % 2 == 0 else n + 2
    while not is_probable_prime(candidate):
        candidate += 2
    return candidate


def random_prime(rng: random.Random, bits: int) -> int:
    """A random probable prime of exactly ``bits`` bits."""
    if bits < 2:
        raise ValueError("a prime needs at least 2 bits")
    while True:
        p = next_prime(rng.getrandbits(bits - 1) | (1 << (bits - 1)))
        if p.bit_length() == bits:
            return p


def _split_bits(nbits: int) -> tuple[int, int]:
    pbits = nbits >> 1
    return pbits, nbits - pbits


def random_semiprime(rng: random.Random, nbits: int) -> int:
    """Product of two random primes of nbits//2 and nbits - nbits//2 bits."""
    pbits, qbits = _split_bits(nbits)
    p = random_prime(rng, pbits)
    q = random_prime(rng, qbits)
    return p * q


def random_semiprime_discriminant(rng: random.Random, nbits: int) -> int:
    """A negative discriminant -p*q with p*q = 3 (mod 4) of exactly nbits bits."""
    pbits, qbits = _split_bits(nbits)
    while True:
        d = random_prime(rng, pbits) * random_prime(rng, qbits)
        if d & 3 == 3 and d.bit_length() == nbits:
            return -d


def semiprime_list(count: int, bits: int, rand_seed: int = 0) -> list[int]:
    """``count`` non-square semiprimes p*q with distinct primes.

    A seed of 0 seeds the generator from the current time.
    """
    pbits, qbits = _split_bits(bits)
    rng = random.Random(rand_seed if rand_seed else int(time.time()))
    result = []
    for _ in range(count):
        while True:
            p = random_prime(rng, pbits)
            q = random_prime(rng, qbits)
            if p != q:
                break
        result.append(p * q)
    return result


def save_array(values: Iterable[int], filename: str | Path) -> None:
    """Write the integers in decimal, one per line."""
    with open(filename, "w", encoding="ascii") as f:
        for value in values:
            f.write(f"{value}\n")


def load_array(filename: str | Path) -> list[int]:
    """Read decimal integers until the end, a negative value or a bad token."""
    result = []
    with open(filename, encoding="ascii") as f:
        for token in f.read().split():
            try:
                value = int(token, 10)
            except ValueError:
                break
            if value < 0:
                break
            result.append(value)
    return result


def mod3(n: int) -> int:
    """n mod 3 in [0, 2]."""
    return n % 3


def mod9(n: int) -> int:
    """n mod 9 in [0, 8]."""
    return n % 9


def get_bit_window(n: int, i: int, s: int) -> int:
    """The ``s`` bits of |n| starting at bit ``i``, for 0 <= s <= 32."""
    if i < 0:
        raise ValueError("bit index must be non-negative")
    if not 0 <= s <= 32:
        raise ValueError("window size must be between 0 and 32")
    return (abs(n) >> i) & ((1 << s) - 1)