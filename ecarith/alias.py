#!/usr/bin/env python3

# Copyright (C) 2024-2026 The ecarith developers
#
# This file is part of ecarith. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecarith including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Aliases

mypy aliases, documenting also coding input conventions.
"""

from typing import Union

# hex-string or bytes representation of an int
# e.g. 97, "0x61", "61", b"\x61"
#
# use ecarith.utils.int_from_integer to convert Integer to int
Integer = Union[bytes, str, int]
