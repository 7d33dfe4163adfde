#!/usr/bin/env python3

# Copyright (C) 2023-2024 The ecelgamal developers
#
# This file is part of ecelgamal. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecelgamal including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Exception classes.

These are only meant to discriminate between Exceptions being raised
by ecelgamal from those raised by other codebase.

Users are usually better off just dealing with the regular
ValueError, TypeError, and RuntimeError
from which the ecelgamal versions are derived.
"""


class ElGamalValueError(ValueError):
    pass


class ElGamalTypeError(TypeError):
    pass


class ElGamalRuntimeError(RuntimeError):
    pass


class ModulusMismatchError(ElGamalValueError):
    "Two modular integers with different moduli have been combined."


class NoInverseError(ElGamalValueError):
    "The value shares a nontrivial factor with the modulus."


class NoSquareRootError(ElGamalValueError):
    "The value is a quadratic non-residue."


class InvalidPointError(ElGamalValueError):
    "The affine coordinates do not satisfy the curve equation."


class InvalidCiphertextError(ElGamalValueError):
    "The ciphertext does not belong to the expected curve."
