#!/usr/bin/env python3

# Copyright (C) 2024-2026 The ecarith developers
#
# This file is part of ecarith. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecarith including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Modular arithmetic functions.

The modular inverse is based on the Extended Euclidean Algorithm, see
https://en.wikibooks.org/wiki/Algorithm_Implementation/Mathematics/Extended_Euclidean_algorithm
"""

from ecarith.exceptions import NoInverseExists
from ecarith.utils import int_repr


def mod_inv(a: int, m: int) -> int:
    """Return the inverse of a (mod m). m does not have to be a prime.

    Only the Bézout coefficient of a is tracked,
    while iterating the remainders of (m, a).
    """

    a %= m
    t, new_t = 0, 1
    r, new_r = m, a
    while new_r != 0:
        q = r // new_r
        t, new_t = new_t, t - q * new_t
        r, new_r = new_r, r - q * new_r
    # r is now gcd(m, a)
    if r == 1:
        return t % m
    raise NoInverseExists(f"No inverse for {int_repr(a)} mod {int_repr(m)}")
