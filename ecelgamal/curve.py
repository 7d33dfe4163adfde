#!/usr/bin/env python3

# Copyright (C) 2023-2024 The ecelgamal developers
#
# This file is part of ecelgamal. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecelgamal including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic curve class and the supported key-size tiers.

* SEC 2 v.2 curves
  http://www.secg.org/sec2-v2.pdf
* Federal Information Processing Standards Publication 186-4
  (NIST) curves
  https://oag.ca.gov/sites/all/files/agweb/pdfs/erds1/fips_pub_07_2013.pdf

Curve parameters are loaded from the json files in the data folder.
"""

import json
import logging
from enum import Enum
from math import sqrt
from os import path
from typing import Dict, Optional, Sequence, Union

from ecelgamal.alias import Integer
from ecelgamal.curve_group import INF, Affine, CurveGroup, Infinity, mult_aff
from ecelgamal.exceptions import ElGamalValueError, InvalidPointError
from ecelgamal.number_theory import mod_pow
from ecelgamal.utils import hex_or_int, hex_string, int_from_integer

logger = logging.getLogger(__name__)


class Curve(CurveGroup):
    "Prime order subgroup of the points of an elliptic curve over Fp."

    def __init__(
        self,
        p: Integer,
        a: Integer,
        b: Integer,
        G: Union[Sequence[Integer], Affine, Infinity],
        n: Integer,
        h: int,
        weakness_check: bool = True,
        name: Optional[str] = None,
    ) -> None:

        super().__init__(p, a, b)

        # 2. check that xG and yG are integers in the interval [0, p−1]
        # 4. Check that yG^2 = xG^3 + a*xG + b (mod p)
        if isinstance(G, Infinity):
            raise ElGamalValueError("INF point cannot be a generator")
        if not isinstance(G, Affine):
            if len(G) != 2:
                raise ElGamalValueError("Generator must a be a sequence[int, int]")
            G = int_from_integer(G[0]), int_from_integer(G[1])
            if not (0 <= G[0] < self.p and 0 <= G[1] < self.p):
                raise ElGamalValueError("Generator coordinates not in 0..p-1")
            try:
                G = Affine(G[0], G[1], self)
            except InvalidPointError as e:
                raise ElGamalValueError("Generator is not on the curve") from e
        elif G.ec != self:
            raise ElGamalValueError("Generator is not on the curve")
        self.G = Affine(G.x.value, G.y.value, self)

        n = int_from_integer(n)

        # Security level is expressed in bits, where n-bit security
        # means that the attacker would have to perform 2^n operations
        # to break it. Security bits are half the key size for asymmetric
        # elliptic curve cryptography, i.e. half of the number of bits
        # required to express the group order n or, holding Hasse theorem,
        # to express the field prime p
        self.n = n
        self.nlen = n.bit_length()
        self.nsize = (self.nlen + 7) // 8

        # 5. Check that n is prime.
        # same probabilistic base-2 Fermat test used for p
        if n < 2 or n % 2 == 0 or mod_pow(2, n - 1, n) != 1:
            raise ElGamalValueError(f"n is not prime: {hex_or_int(n)}")
        delta = int(2 * sqrt(self.p))
        # also check n with Hasse Theorem
        if h < 2 and not self.p + 1 - delta <= n <= self.p + 1 + delta:
            raise ElGamalValueError(f"n not in p+1-delta..p+1+delta: {hex_or_int(n)}")

        # 7. Check that nG = INF
        if mult_aff(n, self.G, self) != INF:
            raise ElGamalValueError(f"n is not the group order: {hex_or_int(n)}")

        # 6. Check cofactor
        exp_h = int(1 / n + delta / n + self.p / n)
        if h != exp_h:
            raise ElGamalValueError(f"invalid cofactor: {h}, expected {exp_h}")
        self.h = h

        # 8. Check that n ≠ p
        if n == self.p:
            raise ElGamalValueError(f"n=p weak curve: {hex_or_int(n)}")

        if weakness_check:
            # 8. Check that p^i % n ≠ 1 for all 1≤i<100
            for i in range(1, 100):
                if mod_pow(self.p, i, n) == 1:
                    raise UserWarning("weak curve")

        self.name = name

    def __str__(self) -> str:
        result = super().__str__()
        x_G, y_G = self.G.x.value, self.G.y.value
        if self.p > 0xFFFFFFFF:
            result += f"\n x_G = {hex_string(x_G)}"
            result += f"\n y_G = {hex_string(y_G)}"
        else:
            result += f"\n x_G = {x_G}"
            result += f"\n y_G = {y_G}"
        if self.n > 0xFFFFFFFF:
            result += f"\n n   = {hex_string(self.n)}"
        else:
            result += f"\n n   = {self.n}"
        result += f"\n h = {self.h}"
        return result

    def __repr__(self) -> str:
        result = super().__repr__()[:-1]
        result += f", ({hex_or_int(self.G.x.value)}, {hex_or_int(self.G.y.value)})"
        result += f", {hex_or_int(self.n)}"
        result += f", {self.h}"
        result += ")"
        return result


datadir = path.join(path.dirname(__file__), "data")

# FIPS PUB 186-4
# FEDERAL INFORMATION PROCESSING STANDARDS PUBLICATION
# Digital Signature Standard (DSS)
# https://oag.ca.gov/sites/all/files/agweb/pdfs/erds1/fips_pub_07_2013.pdf
#
# named as in SEC 2 v.2
# http://www.secg.org/sec2-v2.pdf
filename = path.join(datadir, "ec_NIST.json")
with open(filename, "r", encoding="ascii") as file_:
    NIST_params = json.load(file_)
CURVES: Dict[str, Curve] = {}
for ec_name, ec_params in NIST_params.items():
    CURVES[ec_name] = Curve(*ec_params, name=ec_name)
logger.debug("loaded curves: %s", ", ".join(CURVES))

secp256r1 = CURVES["secp256r1"]
secp384r1 = CURVES["secp384r1"]
secp521r1 = CURVES["secp521r1"]


class Tier(Enum):
    "Supported key-size tiers, in bits."

    TWO_FIVE_SIX = 256
    THREE_EIGHT_FOUR = 384
    FIVE_TWO_ONE = 521


_TIER_CURVES = {
    Tier.TWO_FIVE_SIX: secp256r1,
    Tier.THREE_EIGHT_FOUR: secp384r1,
    Tier.FIVE_TWO_ONE: secp521r1,
}


def curve_from_tier(tier: Union[Tier, int]) -> Curve:
    "Return the curve of the tier, also accepting the tier bit size."
    try:
        tier = Tier(tier)
    except ValueError as e:
        raise ElGamalValueError(f"invalid tier: {tier}") from e
    return _TIER_CURVES[tier]
