# optarith

Integer arithmetic building blocks for number-theoretic work.

## Modules

- `optarith.math32` and `optarith.math64`: 32- and 64-bit integer helpers
  with fixed-width, two's-complement semantics. Bit scans (`msb_u32`,
  `lsb_u32`, `msb_u64`, `lsb_u64`, `numbits_s64`, ...), masked subtraction
  (`sub_with_mask_u32`, `sub_with_mask_s64`) and conditional swaps
  (`cond_swap3_s64`, ...), modular arithmetic (`addmod_s64`, `submod_s64`,
  `mulmod_u64`, `mulmod_s64`, `mod_s32_s64_u32`), truncating division
  (`divrem_s64`, `muladdmuldiv_s64`), floor square roots (`sqrt_u32`,
  `sqrt_u64`), `is_square_u64`, `expmod_u64` and random values
  (`rand_u32`, `rand_u64`, taking an optional `random.Random`).
  Values that would be written back through several outputs are returned
  as tuples.
- `optarith.math_mpz`: helpers for arbitrary-size integers. Word
  extraction (`get_u32`, `get_u64`, `get_s64`), floored modular
  `mulm`/`addm`/`subm`, product trees (`product_tree`,
  `product_tree_mul`, `product_list_u32`), `get_bit_window`, `mod3`,
  `mod9`, Miller–Rabin `is_probable_prime` and `next_prime`, random
  primes, semiprimes and negative semiprime discriminants, `semiprime_list`,
  and `save_array`/`load_array` for files holding one decimal integer per
  line.
- `optarith.mpz_xgcd`: `xgcd_partial(r2, r1, bound)`, a Lehmer-style
  partial extended Euclidean algorithm returning a `PartialXgcd` with the
  last two remainders (`r2`, `r1`) and cofactors (`c2`, `c1`).
- `optarith.gcd.stein32` and `optarith.gcd.stein64`: binary (Stein) GCD
  (`gcd_stein_s32`, `gcd_stein_s64`) and extended GCD returning
  `(g, s, t)` with `s*u + t*v == g` (`xgcd_stein_s32`, `xgcd_stein_s64`),
  plus windowed variants removing 2 to 5 factors of two per step
  (`xgcd_blockstein2_s64` ... `xgcd_blockstein5_s64`, or
  `xgcd_blockstein_s64(u, v, window)`). Inputs outside the signed width
  raise `OverflowError`. `stein64` also has `xgcd_stein_s128` for
  non-negative 128-bit inputs.
- `optarith.gcd.stein_windowed`: windowed extended binary GCD for
  non-negative 128-bit inputs (`xgcd_blockstein2_s128` ...
  `xgcd_blockstein5_s128`, `xgcd_blockstein_s128(a, b, window)`).
- `optarith.group`: an abstract `Group` base class (`identity`,
  `inverse`, `compose`, with default `square`, `cube`, `is_id`, `equal`
  and `hash32`), and `GroupCost` with `UNIT_COSTS` and
  `COMPOSE_ONLY_COSTS`.
- `optarith.heap`: `MaxHeap`, a priority queue driven by a three-way
  comparison function, with `add`, `get_max`, `remove_max`, `empty` and a
  bounded insert `add_bounded`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
from optarith.gcd.stein64 import xgcd_stein_s64

g, s, t = xgcd_stein_s64(240, 46)
assert g == 2 and 240 * s + 46 * t == g
```

```python
from optarith.math64 import sqrt_u64, expmod_u64

assert sqrt_u64(10**12 + 5) == 10**6
assert expmod_u64(3, 200, 1000003) == pow(3, 200, 1000003)
```

```python
from optarith.heap import MaxHeap

heap = MaxHeap(lambda a, b: (a > b) - (a < b))
for x in (5, 1, 9, 3):
    heap.add(x)
assert heap.remove_max() == 9
```

Where an operation has no defined result (a zero divisor or modulus, an
invalid mask, an empty heap), a Python exception is raised.

## What it does not do

`Group` only describes a group's operations and their relative costs; the
package has no routines for raising group elements to a power (binary,
non-adjacent-form or 2,3-based exponentiation). Those have to be written on
top of `Group` by the user.