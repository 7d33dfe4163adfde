#!/usr/bin/env python3

# Copyright (C) 2023-2024 The ecelgamal developers
#
# This file is part of ecelgamal. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecelgamal including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""ElGamal encryption over elliptic curves.

Key generation:

* the private key d is a random integer in [1, n)
* the public key is the curve point Q = d*G

Encryption of the curve point M:

* a fresh ephemeral scalar k is drawn in [1, n)
* the ciphertext is the pair of points C1 = k*G and C2 = M + k*Q

Decryption:

* M = C2 - d*C1

The ephemeral scalar k must never be reused:
given two ciphertexts under the same public key and the same k,
the difference of the C2 components leaks
the difference of the plaintext points.

Messages must be curve points:
see the ecelgamal.encoding module for byte messages.
"""

import logging
from dataclasses import InitVar, dataclass, field
from typing import Iterable, List, Optional, Sequence, Tuple, Union

from dataclasses_json import DataClassJsonMixin, config

from ecelgamal.alias import RandomSource, String
from ecelgamal.curve import CURVES, Curve, Tier, curve_from_tier, secp256r1
from ecelgamal.curve_group import INF, Affine, Infinity, Point
from ecelgamal.encoding import decode_message, encode_message
from ecelgamal.exceptions import (
    ElGamalRuntimeError,
    ElGamalValueError,
    InvalidCiphertextError,
)
from ecelgamal.random_source import uniform_random
from ecelgamal.utils import hex_or_int, int_from_integer

logger = logging.getLogger(__name__)


def _serialize_point(Q: Point) -> List[str]:
    # INF has no coordinates
    if isinstance(Q, Infinity):
        return []
    return [hex(Q.x.value), hex(Q.y.value)]


def _deserialize_point(coords: Sequence[str]) -> Union[Point, Tuple[int, ...]]:
    # coordinates are lifted to curve points in Ciphertext.__post_init__
    # as the curve is not known here
    if not isinstance(coords, (list, tuple)):
        raise InvalidCiphertextError(f"invalid point coordinates: {coords!r}")
    if len(coords) == 0:
        return INF
    try:
        return tuple(int_from_integer(c) for c in coords)
    except (TypeError, ValueError) as e:
        raise InvalidCiphertextError(f"invalid point coordinates: {coords!r}") from e


def _serialize_curve(ec: Curve) -> str:
    # unnamed curves cannot be decoded
    return ec.name or repr(ec)


def _deserialize_curve(name: str) -> Curve:
    try:
        return CURVES[name]
    except KeyError as e:
        raise InvalidCiphertextError(f"unknown curve: {name}") from e


@dataclass(frozen=True)
class Ciphertext(DataClassJsonMixin):
    "ElGamal ciphertext: the (C1, C2) pair of curve points."

    c1: Point = field(
        metadata=config(encoder=_serialize_point, decoder=_deserialize_point)
    )
    c2: Point = field(
        metadata=config(encoder=_serialize_point, decoder=_deserialize_point)
    )
    ec: Curve = field(
        default=secp256r1,
        metadata=config(encoder=_serialize_curve, decoder=_deserialize_curve),
    )
    check_validity: InitVar[bool] = True

    def __post_init__(self, check_validity: bool) -> None:
        for name in ("c1", "c2"):
            coords = getattr(self, name)
            if isinstance(coords, (tuple, list)):
                if len(coords) != 2:
                    raise InvalidCiphertextError(f"invalid {name} coordinates")
                # no reduction mod p: non-canonical coordinates are rejected
                if not all(isinstance(c, int) and 0 <= c < self.ec.p for c in coords):
                    err_msg = f"{name} coordinates not in 0..p-1"
                    raise InvalidCiphertextError(err_msg)
                try:
                    Q = Affine(coords[0], coords[1], self.ec)
                except ElGamalValueError as e:
                    raise InvalidCiphertextError(f"{name} not on curve") from e
                # frozen dataclass
                object.__setattr__(self, name, Q)
        if check_validity:
            self.assert_valid()

    def assert_valid(self) -> None:
        for name in ("c1", "c2"):
            Q = getattr(self, name)
            if not isinstance(Q, (Affine, Infinity)):
                raise InvalidCiphertextError(f"{name} is not a point")
            if not self.ec.is_on_curve(Q):
                raise InvalidCiphertextError(f"{name} not on curve")
        # C1 = k*G with 0 < k < n
        if isinstance(self.c1, Infinity):
            raise InvalidCiphertextError("c1 cannot be INF")


CiphertextPair = Union[Ciphertext, Tuple[Point, Point]]


def _random_scalar(ec: Curve, rng: RandomSource) -> int:
    "Return a random scalar in [1, n)."
    q = rng(1, ec.n)
    if not 0 < q < ec.n:
        raise ElGamalValueError(f"random scalar not in 1..n-1: {hex_or_int(q)}")
    return q


def generate_keypair(
    ec: Curve = secp256r1, rng: RandomSource = uniform_random
) -> Tuple[int, Affine]:
    "Return a (private key, public key) pair."

    d = _random_scalar(ec, rng)
    Q = ec.pow(ec.G, d)
    # edge case that cannot be reproduced in the test suite
    if not isinstance(Q, Affine):
        raise ElGamalRuntimeError("invalid (INF) public key")  # pragma: no cover
    logger.debug("key pair generated on %s", ec.name)
    return d, Q


def encrypt(
    Q: Point, M: Point, ec: Curve = secp256r1, rng: RandomSource = uniform_random
) -> Ciphertext:
    """Encrypt the curve point M with the public key Q.

    A fresh ephemeral scalar is drawn from rng at each call.
    """

    if isinstance(Q, Infinity):
        raise ElGamalValueError("INF is not a valid public key")
    ec.require_on_curve(Q)
    ec.require_on_curve(M)

    k = _random_scalar(ec, rng)
    C1 = ec.pow(ec.G, k)
    C2 = ec.group_op(M, ec.pow(Q, k))
    return Ciphertext(C1, C2, ec)


def decrypt(d: int, C: CiphertextPair, ec: Curve = secp256r1) -> Point:
    """Decrypt the ciphertext with the private key d.

    InvalidCiphertextError is raised if the ciphertext
    does not belong to the ec curve.
    """

    if not 0 < d < ec.n:
        raise ElGamalValueError(f"private key not in 1..n-1: {hex_or_int(d)}")

    if not isinstance(C, Ciphertext):
        if len(C) != 2:
            raise InvalidCiphertextError("ciphertext must be a pair of points")
        C = Ciphertext(C[0], C[1], ec)
    elif C.ec != ec:
        raise InvalidCiphertextError(f"ciphertext not on {ec.name or 'the curve'}")
    C.assert_valid()

    S = ec.pow(C.c1, d)
    return ec.group_op(C.c2, ec.group_inverse(S))


def encrypt_message(
    Q: Point, msg: String, ec: Curve = secp256r1, rng: RandomSource = uniform_random
) -> List[Ciphertext]:
    """Encrypt a byte (or UTF-8 text) message with the public key Q.

    The message is encoded as a sequence of curve points,
    each one encrypted with its own ephemeral scalar.
    """

    points = encode_message(msg, ec)
    logger.debug("encrypting %d point(s) on %s", len(points), ec.name)
    return [encrypt(Q, M, ec, rng) for M in points]


def decrypt_message(
    d: int, ciphertexts: Iterable[CiphertextPair], ec: Curve = secp256r1
) -> bytes:
    "Decrypt a message encrypted with encrypt_message."

    points = [decrypt(d, C, ec) for C in ciphertexts]
    logger.debug("decrypted %d point(s) on %s", len(points), ec.name)
    return decode_message(points)


class ElGamal:
    """ElGamal cryptosystem handle.

    The key pair is generated once, when the handle is created,
    and it is never regenerated.
    """

    def __init__(
        self,
        tier: Union[Tier, int] = Tier.TWO_FIVE_SIX,
        rng: RandomSource = uniform_random,
        ec: Optional[Curve] = None,
    ) -> None:
        self._curve = curve_from_tier(tier) if ec is None else ec
        self._rng = rng
        self._private_key, self._public_key = generate_keypair(self._curve, rng)

    @classmethod
    def from_curve(cls, ec: Curve, rng: RandomSource = uniform_random) -> "ElGamal":
        "Return a handle on a custom curve."
        return cls(rng=rng, ec=ec)

    @property
    def curve(self) -> Curve:
        return self._curve

    @property
    def public_key(self) -> Affine:
        return self._public_key

    @property
    def private_key(self) -> int:
        return self._private_key

    def encrypt(self, M: Point) -> Ciphertext:
        return encrypt(self._public_key, M, self._curve, self._rng)

    def decrypt(self, C: CiphertextPair) -> Point:
        return decrypt(self._private_key, C, self._curve)

    def encrypt_message(self, msg: String) -> List[Ciphertext]:
        return encrypt_message(self._public_key, msg, self._curve, self._rng)

    def decrypt_message(self, ciphertexts: Iterable[CiphertextPair]) -> bytes:
        return decrypt_message(self._private_key, ciphertexts, self._curve)

    def __repr__(self) -> str:
        # the private key is never shown
        return f"ElGamal({self._curve.name or repr(self._curve)})"
