#!/usr/bin/env python3

# Copyright (C) 2023-2024 The ecelgamal developers
#
# This file is part of ecelgamal. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecelgamal including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Number theory and modular arithmetic functions.

* modular inverse: extended Euclidean algorithm
* modular exponentiation: binary square and multiply
* modular square root: direct formulas for p = 3 mod 4 and p = 5 mod 8,
  Tonelli-Shanks for the other odd primes

These functions work on plain int values:
ecelgamal.mod_num.ModNum wraps them into modular integers.
"""

from typing import Tuple

from ecelgamal.exceptions import ElGamalValueError, NoInverseError, NoSquareRootError
from ecelgamal.utils import hex_or_int


def xgcd(a: int, b: int) -> Tuple[int, int, int]:
    "Return (g, x, y) such that a*x + b*y = g = gcd(a, b)."

    x0, x1, y0, y1 = 0, 1, 1, 0
    while a != 0:
        q, b, a = b // a, a, b % a
        y0, y1 = y1, y0 - q * y1
        x0, x1 = x1, x0 - q * x1
    return b, x0, y0


def mod_inv(a: int, m: int) -> int:
    """Return the inverse of a (mod m).

    m does not have to be a prime:
    NoInverseError is raised if gcd(a, m) != 1.
    """

    a %= m
    g, x, _ = xgcd(a, m)
    if g == 1:
        return x % m
    raise NoInverseError(f"No inverse for {hex_or_int(a)} mod {hex_or_int(m)}")


def mod_pow(a: int, e: int, m: int) -> int:
    """Return a^e (mod m).

    Binary 'square & multiply', right-to-left decomposition of e:
    the number of multiplications is logarithmic in e.
    """

    if e < 0:
        raise ElGamalValueError(f"negative exponent: {hex_or_int(-e)}")

    result = 1 % m
    a %= m
    while e > 0:
        if e & 1:
            result = result * a % m
        a = a * a % m
        e >>= 1
    return result


def legendre_symbol(a: int, p: int) -> int:
    """Compute the Legendre symbol a|p using Euler's criterion.

    p is a prime, a is relatively prime to p (if p divides a,
    then a|p = 0).
    It returns 1 if a has a square root modulo p, -1 otherwise.
    """

    ls = mod_pow(a, p >> 1, p)
    return -1 if ls == p - 1 else ls


def mod_sqrt(a: int, p: int) -> int:
    """Return a quadratic residue (mod p) of a; p must be a prime.

    Solve the equation:
        x^2 = a mod p

    and return x. Note that p - x is also a root.

    If a simple solution is not available for p,
    then the Tonelli-Shanks algorithm is used.
    """

    a %= p

    if p % 4 == 3:  # NIST P-256, P-384, and P-521 case
        # root candidate is pow(a, (p + 1) // 4, p)
        r = mod_pow(a, (p >> 2) + 1, p)
    elif p % 8 == 5:
        # root candidate is pow(a, (p + 3) // 8, p)
        r = mod_pow(a, (p >> 3) + 1, p)
        if r * r % p == a:
            return r
        # another root candidate
        r = r * mod_pow(2, p >> 2, p) % p
    else:
        return tonelli(a, p)

    if r * r % p != a:
        raise NoSquareRootError(f"no root for {hex_or_int(a)} mod {hex_or_int(p)}")
    return r


def tonelli(a: int, p: int) -> int:
    """Return a quadratic residue (mod p) of a; p must be a prime.

    The Tonelli-Shanks algorithm is used.
    """

    a %= p
    if a == 0 or p == 2:
        return a

    # Check solution existence for an odd prime p
    if legendre_symbol(a, p) != 1:
        raise NoSquareRootError(f"no root for {hex_or_int(a)} mod {hex_or_int(p)}")

    # Factor p-1 on the form q * 2^s (with q odd)
    q, s = p - 1, 0
    while q & 1 == 0:
        s += 1
        q >>= 1
    if s == 1:
        return mod_pow(a, (p + 1) // 4, p)

    # Select a z which is a quadratic non residue modulo p
    z = 1
    while legendre_symbol(z, p) != -1:
        z += 1
    c = mod_pow(z, q, p)
    r = mod_pow(a, (q + 1) // 2, p)
    t = mod_pow(a, q, p)
    while t != 1:
        # Find the lowest i such that t^(2^i) = 1
        t2i = t
        for i in range(1, s):
            t2i = t2i * t2i % p
            if t2i == 1:
                # Update next value to iterate
                b = mod_pow(c, 1 << (s - i - 1), p)
                r = (r * b) % p
                c = (b * b) % p
                t = (t * c) % p
                s = i
                break

    return r
