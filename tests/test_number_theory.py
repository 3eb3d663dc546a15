#!/usr/bin/env python3

# Copyright (C) 2024-2026 The ecarith developers
#
# This file is part of ecarith. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecarith including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `ecarith.number_theory` module."

import pytest

from ecarith.exceptions import NoInverseExists
from ecarith.number_theory import mod_inv

primes = [
    2,
    3,
    5,
    7,
    11,
    13,
    17,
    19,
    23,
    29,
    31,
    37,
    41,
    43,
    47,
    53,
    59,
    61,
    67,
    71,
    73,
    79,
    83,
    89,
    97,
    101,
    103,
    107,
    109,
    113,
    2 ** 160 - 2 ** 31 - 1,
    2 ** 192 - 2 ** 64 - 1,
    2 ** 224 - 2 ** 96 + 1,
    2 ** 256 - 2 ** 32 - 977,
    2 ** 256 - 2 ** 224 + 2 ** 192 + 2 ** 96 - 1,
    2 ** 521 - 1,
]


def test_mod_inv_prime() -> None:
    for p in primes:
        with pytest.raises(NoInverseExists, match="No inverse for 0 mod"):
            mod_inv(0, p)
        with pytest.raises(NoInverseExists, match="No inverse for 0 mod"):
            mod_inv(p, p)
        for a in range(1, min(p, 500)):  # exhausted only for small p
            inv = mod_inv(a, p)
            assert 0 <= inv < p
            assert a * inv % p == 1
            inv = mod_inv(a + p, p)
            assert a * inv % p == 1
            inv = mod_inv(-a, p)
            assert 0 <= inv < p
            assert -a * inv % p == 1


def test_mod_inv_known_values() -> None:
    assert mod_inv(12, 97) == 89
    assert mod_inv(20, 97) == 34
    assert mod_inv(77, 97) == 63
    assert mod_inv(-1, 97) == 96
    assert mod_inv(1, 97) == 1


def test_mod_inv() -> None:
    max_m = 100
    for m in range(2, max_m):
        nums = list(range(m))
        for a in nums:
            mult = [a * i % m for i in nums]
            if 1 in mult:
                inv = mod_inv(a, m)
                assert a * inv % m == 1
                inv = mod_inv(a + m, m)
                assert a * inv % m == 1
            else:
                err_msg = "No inverse for "
                with pytest.raises(NoInverseExists, match=err_msg):
                    mod_inv(a, m)


def test_mod_inv_error_message() -> None:
    with pytest.raises(NoInverseExists, match="No inverse for 6 mod 9"):
        mod_inv(6, 9)
    p = 2 ** 256 - 2 ** 32 - 977
    with pytest.raises(NoInverseExists, match="No inverse for 0 mod 'FFFFFFFF "):
        mod_inv(0, p)
    # library errors are still ValueErrors
    with pytest.raises(ValueError):
        mod_inv(0, 97)
