#!/usr/bin/env python3

# Copyright (C) 2023-2024 The ecelgamal developers
#
# This file is part of ecelgamal. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecelgamal including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic CurveGroup class and functions.

Curve points are a closed union of two variants:

* Affine(x, y), with x and y being ModNum in the curve field
* the point at infinity INF, the only Infinity instance

An Affine point is verified against the curve equation
when it is created: an off-curve Affine point cannot exist.

Note that CurveGroup does not have to be a cyclic subgroup.
For the cyclic subgroup of prime order with a generator,
see the ecelgamal.curve module.
"""

from math import ceil
from typing import Any, Dict, Union

from ecelgamal.alias import Integer
from ecelgamal.exceptions import (
    ElGamalTypeError,
    ElGamalValueError,
    InvalidPointError,
    ModulusMismatchError,
    NoSquareRootError,
)
from ecelgamal.mod_num import ModNum
from ecelgamal.number_theory import mod_pow
from ecelgamal.utils import hex_or_int, hex_string, int_from_integer


class Infinity:
    "The point at infinity, identity element of the curve group."

    __slots__ = ()
    _instance = None

    def __new__(cls) -> "Infinity":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __copy__(self) -> "Infinity":
        return self

    def __deepcopy__(self, memo: Dict[int, Any]) -> "Infinity":
        return self

    def __reduce__(self) -> str:
        return "INF"

    def __repr__(self) -> str:
        return "INF"


INF = Infinity()


class Affine:
    """Affine curve point (x, y).

    The coordinates must satisfy the Weierstrass equation of ec,
    otherwise InvalidPointError is raised.
    """

    __slots__ = ("_x", "_y", "_ec")

    def __init__(
        self, x: Union[ModNum, Integer], y: Union[ModNum, Integer], ec: "CurveGroup"
    ) -> None:
        x = ec.field_element(x)
        y = ec.field_element(y)
        if y * y != ec.y2(x):
            err_msg = f"point not on curve: ({hex_or_int(x.value)}, "
            err_msg += f"{hex_or_int(y.value)})"
            raise InvalidPointError(err_msg)
        self._x = x
        self._y = y
        self._ec = ec

    @property
    def x(self) -> ModNum:
        return self._x

    @property
    def y(self) -> ModNum:
        return self._y

    @property
    def ec(self) -> "CurveGroup":
        return self._ec

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Affine):
            return NotImplemented
        return self._x == other._x and self._y == other._y and self._ec == other._ec

    def __hash__(self) -> int:
        return hash((self._x, self._y, self._ec))

    def __repr__(self) -> str:
        return f"Affine({hex(self._x.value)}, {hex(self._y.value)})"


Point = Union[Affine, Infinity]


class CurveGroup:
    """Finite group of the points of an elliptic curve over Fp.

    The elliptic curve is the set of points (x, y)
    that are solutions to a Weierstrass equation y^2 = x^3 + a*x + b,
    with x, y, a, and b in Fp (p being a prime),
    together with a point at infinity INF.
    The constants a, b must satisfy the relationship
    4 a^3 + 27 b^2 ≠ 0.

    The group is defined by the point addition group law.
    """

    def __init__(self, p: Integer, a: Integer, b: Integer) -> None:
        # Parameters are checked according to SEC 1 v.2 3.1.1.2.1

        p = int_from_integer(p)
        a = int_from_integer(a)
        b = int_from_integer(b)

        # 1) check that p is an odd prime
        # base-2 Fermat test: probabilistic only,
        # pseudoprimes such as 341 = 11 * 31 and 561 = 3 * 11 * 17 pass it
        if p < 3 or p % 2 == 0 or mod_pow(2, p - 1, p) != 1:
            raise ElGamalValueError(f"p is not prime: {hex_or_int(p)}")

        plen = p.bit_length()
        # byte-length
        self.p_size = ceil(plen / 8)
        # modular square roots are computed directly if True
        self.p_is_3_mod_4 = p % 4 == 3
        self.p = p

        # 2. check that a and b are integers in the interval [0, p−1]
        if a < 0:
            raise ElGamalValueError(f"negative a: {a}")
        if p <= a:
            raise ElGamalValueError(f"p <= a: {hex_or_int(p)} <= {hex_or_int(a)}")
        if b < 0:
            raise ElGamalValueError(f"negative b: {b}")
        if p <= b:
            raise ElGamalValueError(f"p <= b: {hex_or_int(p)} <= {hex_or_int(b)}")

        # 3. Check that 4*a^3 + 27*b^2 ≠ 0 (mod p)
        d = 4 * a * a * a + 27 * b * b
        if d % p == 0:
            raise ElGamalValueError("zero discriminant")
        self.a = ModNum(a, p)
        self.b = ModNum(b, p)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CurveGroup):
            return NotImplemented
        return self.p == other.p and self.a == other.a and self.b == other.b

    def __hash__(self) -> int:
        return hash((self.p, self.a.value, self.b.value))

    def __str__(self) -> str:
        result = "Curve"
        if self.p > 0xFFFFFFFF:
            result += f"\n p   = {hex_string(self.p)}"
        else:
            result += f"\n p   = {self.p}"

        a, b = self.a.value, self.b.value
        if a > 0xFFFFFFFF or b > 0xFFFFFFFF:
            result += f"\n a   = {hex_string(a)}"
            result += f"\n b   = {hex_string(b)}"
        else:
            result += f"\n a   = {a}"
            result += f"\n b   = {b}"

        return result

    def __repr__(self) -> str:
        result = "Curve("
        result += hex_or_int(self.p)
        result += f", {hex_or_int(self.a.value)}, {hex_or_int(self.b.value)}"
        result += ")"
        return result

    # methods using p

    def field_element(self, v: Union[ModNum, Integer]) -> ModNum:
        "Return v as element of the curve field Fp."
        if isinstance(v, ModNum):
            if v.modulus != self.p:
                err_msg = "modulus mismatch: "
                err_msg += f"{hex_or_int(v.modulus)} instead of {hex_or_int(self.p)}"
                raise ModulusMismatchError(err_msg)
            return v
        return ModNum(v, self.p)

    def group_inverse(self, Q: Point) -> Point:
        "Return the opposite point."
        self.require_on_curve(Q)
        if isinstance(Q, Infinity):
            return INF
        return Affine(Q.x, Q.y.additive_inverse(), self)

    # methods using a, b, p

    def y2(self, x: ModNum) -> ModNum:
        "Return x^3 + a*x + b."
        # skipping a crucial check here:
        # if sqrt(y*y) does not exist, then x is not valid.
        return (x * x + self.a) * x + self.b

    def point(self, x: Union[ModNum, Integer], y: Union[ModNum, Integer]) -> Affine:
        "Return the affine point (x, y), which must be on the curve."
        return Affine(x, y, self)

    def y(self, x: Integer) -> int:
        """Return the y coordinate from x, as in (x, y).

        The other root is p - y.
        """
        x = int_from_integer(x)
        if not 0 <= x < self.p:
            raise ElGamalValueError(f"x-coordinate not in 0..p-1: {hex_or_int(x)}")
        y2 = self.y2(ModNum(x, self.p))
        try:
            return y2.sqrt().value
        except NoSquareRootError as e:
            err_msg = f"invalid x-coordinate: {hex_or_int(x)}"
            raise NoSquareRootError(err_msg) from e

    def is_on_curve(self, Q: Point) -> bool:
        "Return True if the point is on the curve."
        if isinstance(Q, Infinity):
            return True
        if not isinstance(Q, Affine):
            raise ElGamalTypeError("not a point")
        # the curve equation has been verified when Q was created
        return Q.ec is self or Q.ec == self

    def require_on_curve(self, Q: Point) -> None:
        """Require the input curve Point to be on the curve.

        An Error is raised if not.
        """
        if not self.is_on_curve(Q):
            raise InvalidPointError("point not on curve")

    def group_op(self, Q: Point, R: Point) -> Point:
        """Return the sum of two points.

        The input points must be on the curve.
        """

        self.require_on_curve(Q)
        self.require_on_curve(R)

        if isinstance(R, Infinity):
            return Q
        if isinstance(Q, Infinity):
            return R

        if R.x == Q.x:
            # opposite points, also covering the doubling of y=0 points
            if R.y == Q.y.additive_inverse():
                return INF
            return self.double(Q)

        lam = (R.y - Q.y) * (R.x - Q.x).multiplicative_inverse()
        x = lam * lam - Q.x - R.x
        y = lam * (Q.x - x) - Q.y
        return Affine(x, y, self)

    def double(self, Q: Point) -> Point:
        "Return the sum of the point with itself."

        self.require_on_curve(Q)
        if isinstance(Q, Infinity):
            return INF
        # y=0 points are their own opposite
        if Q.y.is_zero():
            return INF

        lam = (Q.x * Q.x * 3 + self.a) * (Q.y * 2).multiplicative_inverse()
        x = lam * lam - Q.x - Q.x
        y = lam * (Q.x - x) - Q.y
        return Affine(x, y, self)

    def pow(self, Q: Point, m: int) -> Point:
        """Return the scalar multiplication m*Q.

        The operation is named pow by analogy with
        the exponentiation of the multiplicative group.
        """
        self.require_on_curve(Q)
        return mult_aff(m, Q, self)


def mult_aff(m: int, Q: Point, ec: CurveGroup) -> Point:
    """Scalar multiplication of a curve point in affine coordinates.

    This implementation uses
    'double & add' algorithm,
    'right-to-left' binary decomposition of the m coefficient,
    affine coordinates.
    It is not constant-time.

    The input point is assumed to be on curve,
    m is not reduced mod n.
    """

    if m < 0:
        raise ElGamalValueError(f"negative m: {hex(m)}")

    R: Point = INF  # initialize as infinity point
    while m > 0:  # use binary representation of m
        if m & 1:  # if least significant bit is 1
            R = ec.group_op(R, Q)  # then add current Q
        m >>= 1  # remove the bit just accounted for
        if m > 0:
            Q = ec.double(Q)  # double Q for next step
    return R
