#!/usr/bin/env python3

# Copyright (C) 2024-2026 The ecarith developers
#
# This file is part of ecarith. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecarith including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Exception classes.

These are only meant to discriminate between Exceptions being raised
by ecarith from those raised by other codebase.

Users are usually better off just dealing with the regular
ValueError and TypeError
from which the ecarith versions are derived.
"""


class ECArithValueError(ValueError):
    pass


class ECArithTypeError(TypeError):
    pass


class InvalidCurveParameters(ECArithValueError):
    "The curve parameters do not define a usable (non-singular) curve."


class NoInverseExists(ECArithValueError):
    "The value shares a nontrivial factor with the modulus."


class PointNotOnCurve(ECArithValueError):
    pass
