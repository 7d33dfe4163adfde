#!/usr/bin/env python3

# Copyright (C) 2023-2024 The ecelgamal developers
#
# This file is part of ecelgamal. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecelgamal including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Modular integers.

A ModNum is an arbitrary-precision integer value
reduced modulo a fixed modulus m, i.e. 0 <= value < m.

ModNum is an immutable value type:
every operation returns a new ModNum, no receiver is ever mutated.
Two ModNum can only be combined if they share the same modulus,
otherwise ModulusMismatchError is raised.
"""

from typing import Union

from ecelgamal.alias import Integer
from ecelgamal.exceptions import (
    ElGamalTypeError,
    ElGamalValueError,
    ModulusMismatchError,
)
from ecelgamal.number_theory import mod_inv, mod_pow, mod_sqrt
from ecelgamal.utils import hex_or_int, int_from_integer


class ModNum:
    "Integer value reduced modulo a fixed modulus."

    __slots__ = ("_value", "_modulus")

    def __init__(self, value: Integer, modulus: Integer) -> None:
        modulus = int_from_integer(modulus)
        if modulus < 2:
            raise ElGamalValueError(f"invalid modulus: {modulus}")
        self._modulus = modulus
        # negative values are reduced too
        self._value = int_from_integer(value) % modulus

    @property
    def value(self) -> int:
        return self._value

    @property
    def modulus(self) -> int:
        return self._modulus

    def _lift(self, other: Union["ModNum", int]) -> "ModNum":
        "Return other as ModNum, requiring the same modulus."
        if isinstance(other, int):
            return ModNum(other, self._modulus)
        if not isinstance(other, ModNum):
            raise ElGamalTypeError(f"not a modular integer: {type(other).__name__}")
        if other._modulus != self._modulus:
            err_msg = "modulus mismatch: "
            err_msg += f"{hex_or_int(self._modulus)} vs {hex_or_int(other._modulus)}"
            raise ModulusMismatchError(err_msg)
        return other

    def add(self, other: Union["ModNum", int]) -> "ModNum":
        other = self._lift(other)
        return ModNum(self._value + other._value, self._modulus)

    def additive_inverse(self) -> "ModNum":
        # the identity is self-inverse
        if self._value == 0:
            return self
        return ModNum(self._modulus - self._value, self._modulus)

    def sub(self, other: Union["ModNum", int]) -> "ModNum":
        return self.add(self._lift(other).additive_inverse())

    def mul(self, other: Union["ModNum", int]) -> "ModNum":
        other = self._lift(other)
        return ModNum(self._value * other._value, self._modulus)

    def multiplicative_inverse(self) -> "ModNum":
        """Return the multiplicative inverse.

        The extended Euclidean algorithm is used,
        the modulus does not have to be a prime.
        NoInverseError is raised if gcd(value, modulus) != 1,
        e.g. for the zero value.
        """
        return ModNum(mod_inv(self._value, self._modulus), self._modulus)

    def pow(self, exponent: int) -> "ModNum":
        """Return value^exponent.

        Binary 'square & multiply' exponentiation,
        with exponent being a non-negative integer.
        A zero exponent returns the multiplicative identity.
        """
        return ModNum(mod_pow(self._value, exponent, self._modulus), self._modulus)

    def sqrt(self) -> "ModNum":
        """Return a modular square root; the modulus must be a prime.

        For moduli equal to 3 mod 4 the root is computed directly
        as value^((m+1)/4), otherwise Tonelli-Shanks is used.
        The root is verified by squaring:
        NoSquareRootError is raised for quadratic non-residues.
        """
        return ModNum(mod_sqrt(self._value, self._modulus), self._modulus)

    def is_zero(self) -> bool:
        return self._value == 0

    def __add__(self, other: Union["ModNum", int]) -> "ModNum":
        return self.add(other)

    def __radd__(self, other: int) -> "ModNum":
        return self.add(other)

    def __sub__(self, other: Union["ModNum", int]) -> "ModNum":
        return self.sub(other)

    def __rsub__(self, other: int) -> "ModNum":
        return self._lift(other).sub(self)

    def __mul__(self, other: Union["ModNum", int]) -> "ModNum":
        return self.mul(other)

    def __rmul__(self, other: int) -> "ModNum":
        return self.mul(other)

    def __neg__(self) -> "ModNum":
        return self.additive_inverse()

    def __pow__(self, exponent: int) -> "ModNum":
        return self.pow(exponent)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ModNum):
            return NotImplemented
        return self._value == other._value and self._modulus == other._modulus

    def __hash__(self) -> int:
        return hash((self._value, self._modulus))

    def __int__(self) -> int:
        return self._value

    def __str__(self) -> str:
        return f"{hex_or_int(self._value)} mod {hex_or_int(self._modulus)}"

    def __repr__(self) -> str:
        return f"ModNum({hex(self._value)}, {hex(self._modulus)})"
