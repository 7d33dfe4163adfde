#!/usr/bin/env python3

# Copyright (C) 2023-2024 The ecelgamal developers
#
# This file is part of ecelgamal. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecelgamal including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Aliases

mypy aliases, documenting also coding input conventions.
"""

from typing import Callable, Union

# hex-string or bytes representation of an int
#
# e.g.:
# 3735928559
# "0xdeadbeef"
# "deadbeef"
# b'\xde\xad\xbe\xef'
#
# use ecelgamal.utils.int_from_integer to convert Integer to int
Integer = Union[bytes, str, int]

# bytes or text string (not hex-string)
#
# this is for messages to be encrypted:
#    if isinstance(msg, str):
#        msg = msg.encode()
String = Union[bytes, str]

# Source of uniformly random integers:
# rng(lower, upper) returns an int in [lower, upper).
# It must be cryptographically uniform, unless used for testing only.
RandomSource = Callable[[int, int], int]
