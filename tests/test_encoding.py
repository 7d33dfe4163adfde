#!/usr/bin/env python3

# Copyright (C) 2023-2024 The ecelgamal developers
#
# This file is part of ecelgamal. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecelgamal including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `ecelgamal.encoding` module."

import secrets

import pytest

from ecelgamal.curve import CURVES, secp256r1, secp384r1, secp521r1
from ecelgamal.curve_group import INF, CurveGroup
from ecelgamal.encoding import (
    W,
    chunk_size,
    decode_message,
    encode_message,
    int_from_point,
    point_from_int,
)
from ecelgamal.exceptions import ElGamalTypeError, ElGamalValueError

# 2^32 - 5, 3 mod 4
ec_p32 = CurveGroup(4294967291, 2, 3)
# 3 * 2^30 + 1, 1 mod 8: square roots by Tonelli-Shanks
ec_p32_tonelli = CurveGroup(3221225473, 2, 3)


def test_chunk_size() -> None:
    assert chunk_size(secp256r1) == 30
    assert chunk_size(secp384r1) == 46
    assert chunk_size(secp521r1) == 63
    assert chunk_size(ec_p32) == 2
    assert chunk_size(ec_p32_tonelli) == 2
    assert chunk_size(CurveGroup(65537, 2, 3)) == 0


def test_point_from_int() -> None:
    for ec in (ec_p32, ec_p32_tonelli, *CURVES.values()):
        for m in (0, 1, 2, 255, 256, 0x01FFFF):
            Q = point_from_int(m, ec)
            assert ec.is_on_curve(Q)
            assert int_from_point(Q) == m
            # the first W candidates only
            assert W * m <= Q.x.value < W * m + W

        m = ec.p // W - 1
        assert int_from_point(point_from_int(m, ec)) == m

        with pytest.raises(ElGamalValueError, match="negative m: "):
            point_from_int(-1, ec)

        err_msg = "m too large for the curve field: "
        with pytest.raises(ElGamalValueError, match=err_msg):
            point_from_int(ec.p // W, ec)


def test_int_from_point() -> None:
    with pytest.raises(ElGamalValueError, match="INF does not encode any integer"):
        int_from_point(INF)
    with pytest.raises(ElGamalTypeError, match="not a point"):
        int_from_point((1, 2))  # type: ignore[arg-type]

    Q = secp256r1.G
    assert int_from_point(Q) == Q.x.value // W


def test_message() -> None:
    for ec in CURVES.values():
        size = chunk_size(ec)
        for msg_len in (1, size - 1, size, size + 1, 2 * size, 3 * size + 7):
            msg = secrets.token_bytes(msg_len)
            points = encode_message(msg, ec)
            assert len(points) == (msg_len + size - 1) // size
            for Q in points:
                assert ec.is_on_curve(Q)
            assert decode_message(points) == msg


def test_text_message() -> None:
    msg = "Hello, ElGamal!"
    points = encode_message(msg, secp256r1)
    assert len(points) == 1
    assert decode_message(points) == msg.encode()

    msg = "àèìòù " * 10
    for ec in CURVES.values():
        assert decode_message(encode_message(msg, ec)).decode() == msg


def test_leading_zero_bytes() -> None:
    for msg in (b"\x00", b"\x00\x00\x00abc", b"\x00" * 31, b"\xff" * 30):
        assert decode_message(encode_message(msg, secp256r1)) == msg
    # zero bytes at the start of each chunk survive too
    msg = (b"\x00" + b"\x01" * 29) * 3
    assert decode_message(encode_message(msg, secp256r1)) == msg


def test_empty_message() -> None:
    for ec in CURVES.values():
        assert encode_message(b"", ec) == []
        assert encode_message("", ec) == []
    assert decode_message([]) == b""


def test_small_fields() -> None:
    msg = b"hello world"
    for ec in (ec_p32, ec_p32_tonelli):
        points = encode_message(msg, ec)
        assert len(points) == 6
        assert decode_message(points) == msg

    ec = CurveGroup(65537, 2, 3)
    with pytest.raises(ElGamalValueError, match="field too small to encode messages"):
        encode_message(msg, ec)


def test_invalid_message_point() -> None:
    # the x-coordinate of G does not carry the sentinel byte
    with pytest.raises(ElGamalValueError, match="invalid message point: "):
        decode_message([secp256r1.G])

    points = encode_message(b"abc", secp256r1)
    with pytest.raises(ElGamalValueError, match="INF does not encode any integer"):
        decode_message(points + [INF])
