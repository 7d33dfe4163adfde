#!/usr/bin/env python3

# Copyright (C) 2023-2024 The ecelgamal developers
#
# This file is part of ecelgamal. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecelgamal including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Encoding of messages as curve points.

ElGamal encrypts curve points: a byte message is split in chunks,
each chunk being mapped to a curve point as follows.

The chunk integer m is mapped to x = W*m + j,
j being the first value in 0..W-1 such that
x^3 + a*x + b is a quadratic residue, i.e. (x, y) is a curve point.
Roughly half of the x values are valid x-coordinates:
the probability that none of the W candidates is valid is about 2^-W.

The chunk integer is then recovered as x // W.

A 0x01 sentinel byte is prepended to each chunk
before converting it to integer, so that leading zero bytes survive.
"""

import logging
from typing import Iterable, List

from ecelgamal.alias import String
from ecelgamal.curve_group import Affine, CurveGroup, Infinity, Point
from ecelgamal.exceptions import (
    ElGamalRuntimeError,
    ElGamalTypeError,
    ElGamalValueError,
    NoSquareRootError,
)
from ecelgamal.utils import hex_or_int

logger = logging.getLogger(__name__)

# number of x-coordinate candidates for each chunk integer
W = 2**8

_SENTINEL = b"\x01"


def chunk_size(ec: CurveGroup) -> int:
    "Return the number of message bytes encoded in a single curve point."
    return (ec.p // W).bit_length() // 8 - 1


def point_from_int(m: int, ec: CurveGroup) -> Affine:
    "Return the curve point encoding the non-negative integer m."

    if m < 0:
        raise ElGamalValueError(f"negative m: {hex(m)}")
    if W * m + W > ec.p:
        raise ElGamalValueError(f"m too large for the curve field: {hex_or_int(m)}")

    for j in range(W):
        x = W * m + j
        try:
            y = ec.y(x)
        except NoSquareRootError:
            continue
        logger.debug("curve point found at candidate %d", j + 1)
        return Affine(x, y, ec)

    raise ElGamalRuntimeError(f"no curve point encoding {hex_or_int(m)}")


def int_from_point(Q: Point) -> int:
    "Return the integer encoded by the curve point."

    if isinstance(Q, Infinity):
        raise ElGamalValueError("INF does not encode any integer")
    if not isinstance(Q, Affine):
        raise ElGamalTypeError("not a point")
    return Q.x.value // W


def encode_message(msg: String, ec: CurveGroup) -> List[Affine]:
    """Return the curve points encoding the message.

    A text string message is UTF-8 encoded.
    An empty message is encoded as an empty list.
    """

    if isinstance(msg, str):
        msg = msg.encode()

    size = chunk_size(ec)
    if size < 1:
        err_msg = f"field too small to encode messages: {hex_or_int(ec.p)}"
        raise ElGamalValueError(err_msg)

    points = []
    for i in range(0, len(msg), size):
        chunk = _SENTINEL + msg[i : i + size]
        m = int.from_bytes(chunk, byteorder="big", signed=False)
        points.append(point_from_int(m, ec))
    logger.debug("%d byte message encoded in %d point(s)", len(msg), len(points))
    return points


def decode_message(points: Iterable[Point]) -> bytes:
    "Return the message encoded by the curve points."

    chunks = []
    for Q in points:
        m = int_from_point(Q)
        chunk = m.to_bytes((m.bit_length() + 7) // 8, byteorder="big", signed=False)
        if chunk[:1] != _SENTINEL:
            raise ElGamalValueError(f"invalid message point: {Q!r}")
        chunks.append(chunk[1:])
    return b"".join(chunks)
