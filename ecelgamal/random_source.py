#!/usr/bin/env python3

# Copyright (C) 2023-2024 The ecelgamal developers
#
# This file is part of ecelgamal. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecelgamal including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Sources of uniformly random integers.

A random source is any callable rng(lower, upper)
returning an int uniformly distributed in [lower, upper).

Private keys and ephemeral scalars must be drawn from
a cryptographically secure source: uniform_random is the default one.
seeded_random provides deterministic sources for testing only.
"""

import random
import secrets

from ecelgamal.alias import RandomSource
from ecelgamal.exceptions import ElGamalValueError
from ecelgamal.utils import hex_or_int


def _require_range(lower: int, upper: int) -> None:
    if lower >= upper:
        err_msg = f"empty range: {hex_or_int(lower)}..{hex_or_int(upper)}"
        raise ElGamalValueError(err_msg)


def uniform_random(lower: int, upper: int) -> int:
    """Return a cryptographically secure random int in [lower, upper).

    The operating system CSPRNG is used by means of the secrets module.
    """
    _require_range(lower, upper)
    return lower + secrets.randbelow(upper - lower)


def seeded_random(seed: int) -> RandomSource:
    """Return a deterministic random source.

    It is NOT cryptographically secure:
    it is meant for testing and reproducible examples only.
    """

    prng = random.Random(seed)

    def rng(lower: int, upper: int) -> int:
        _require_range(lower, upper)
        return prng.randrange(lower, upper)

    return rng
