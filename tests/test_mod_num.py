#!/usr/bin/env python3

# Copyright (C) 2023-2024 The ecelgamal developers
#
# This file is part of ecelgamal. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecelgamal including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `ecelgamal.mod_num` module."

import pytest

from ecelgamal.curve import secp256r1
from ecelgamal.exceptions import (
    ElGamalTypeError,
    ElGamalValueError,
    ModulusMismatchError,
    NoInverseError,
    NoSquareRootError,
)
from ecelgamal.mod_num import ModNum


def test_reduction() -> None:
    assert ModNum(10, 7).value == 3
    assert ModNum(-1, 7).value == 6
    assert ModNum(7, 7).value == 0
    assert ModNum("0x0a", 7) == ModNum(3, 7)
    assert ModNum(3, 7).modulus == 7

    for modulus in (1, 0, -7):
        with pytest.raises(ElGamalValueError, match="invalid modulus: "):
            ModNum(3, modulus)


def test_arithmetic() -> None:
    a = ModNum(5, 7)
    b = ModNum(4, 7)

    assert a + b == ModNum(2, 7)
    assert a.add(b) == a + b
    assert a - b == ModNum(1, 7)
    assert b - a == ModNum(6, 7)
    assert a.sub(b) == a - b
    assert a * b == ModNum(6, 7)
    assert a.mul(b) == a * b

    # plain int operands are lifted to the same modulus
    assert a + 3 == ModNum(1, 7)
    assert 3 + a == ModNum(1, 7)
    assert a - 6 == ModNum(6, 7)
    assert 6 - a == ModNum(1, 7)
    assert a * 3 == ModNum(1, 7)
    assert 3 * a == ModNum(1, 7)

    # operands are never mutated
    assert a == ModNum(5, 7)
    assert b == ModNum(4, 7)


def test_additive_inverse() -> None:
    for i in range(11):
        a = ModNum(i, 11)
        assert (a + a.additive_inverse()).is_zero()
        assert -a == a.additive_inverse()
    assert ModNum(0, 11).additive_inverse() == ModNum(0, 11)
    assert ModNum(1, 11).additive_inverse() == ModNum(10, 11)


def test_multiplicative_inverse() -> None:
    for i in range(1, 11):
        a = ModNum(i, 11)
        assert a * a.multiplicative_inverse() == ModNum(1, 11)

    # non-prime modulus
    assert ModNum(3, 10).multiplicative_inverse() == ModNum(7, 10)
    with pytest.raises(NoInverseError, match="No inverse for "):
        ModNum(4, 10).multiplicative_inverse()
    with pytest.raises(NoInverseError, match="No inverse for "):
        ModNum(0, 11).multiplicative_inverse()


def test_pow() -> None:
    a = ModNum(3, 7)
    assert a.pow(0) == ModNum(1, 7)
    assert a**1 == a
    assert a**2 == ModNum(2, 7)
    assert a**6 == ModNum(1, 7)
    assert ModNum(0, 7).pow(0) == ModNum(1, 7)

    p = secp256r1.p
    g = ModNum(secp256r1.G.x.value, p)
    assert g ** (p - 1) == ModNum(1, p)
    assert g.pow(p - 2) == g.multiplicative_inverse()

    with pytest.raises(ElGamalValueError, match="negative exponent: "):
        a.pow(-1)


def test_sqrt() -> None:
    # 7 is 3 mod 4, 13 is 5 mod 8, 17 is 1 mod 8 (Tonelli-Shanks)
    for p in (7, 13, 17):
        squares = {i * i % p for i in range(p)}
        for i in range(p):
            a = ModNum(i, p)
            if i in squares:
                r = a.sqrt()
                assert r * r == a
                assert (-r) * (-r) == a
            else:
                with pytest.raises(NoSquareRootError, match="no root for "):
                    a.sqrt()


def test_modulus_mismatch() -> None:
    a = ModNum(3, 7)
    b = ModNum(3, 11)
    with pytest.raises(ModulusMismatchError, match="modulus mismatch: "):
        a + b  # pylint: disable=pointless-statement
    with pytest.raises(ModulusMismatchError, match="modulus mismatch: "):
        a - b  # pylint: disable=pointless-statement
    with pytest.raises(ModulusMismatchError, match="modulus mismatch: "):
        a.mul(b)
    # ModulusMismatchError is a ValueError
    with pytest.raises(ValueError, match="modulus mismatch: "):
        b * a  # pylint: disable=pointless-statement



def test_invalid_operand() -> None:
    a = ModNum(3, 7)
    for other in (1.5, "3", b"\x03", None):
        with pytest.raises(ElGamalTypeError, match="not a modular integer: "):
            a + other  # type: ignore[operator]  # pylint: disable=pointless-statement
        with pytest.raises(ElGamalTypeError, match="not a modular integer: "):
            other + a  # type: ignore[operator]  # pylint: disable=pointless-statement
        with pytest.raises(ElGamalTypeError, match="not a modular integer: "):
            a - other  # type: ignore[operator]  # pylint: disable=pointless-statement
        with pytest.raises(ElGamalTypeError, match="not a modular integer: "):
            a.mul(other)  # type: ignore[arg-type]
    # ElGamalTypeError is a TypeError
    with pytest.raises(TypeError, match="not a modular integer: float"):
        a * 2.0  # type: ignore[operator]  # pylint: disable=pointless-statement


def test_equality_and_hash() -> None:
    assert ModNum(3, 7) == ModNum(10, 7)
    assert ModNum(3, 7) != ModNum(3, 11)
    assert ModNum(3, 7) != 3
    assert len({ModNum(3, 7), ModNum(10, 7), ModNum(3, 11)}) == 2
    assert int(ModNum(10, 7)) == 3


def test_representation() -> None:
    assert str(ModNum(3, 7)) == "3 mod 7"
    assert repr(ModNum(3, 7)) == "ModNum(0x3, 0x7)"
    p = secp256r1.p
    assert str(ModNum(1, p)).startswith("1 mod 'FFFFFFFF 00000001")
