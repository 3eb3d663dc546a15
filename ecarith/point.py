#!/usr/bin/env python3

# Copyright (C) 2024-2026 The ecarith developers
#
# This file is part of ecarith. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecarith including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic curve point in affine coordinates.

A Point is a plain coordinate/flag carrier:
it is not checked to be on any curve.
Membership is the business of ecarith.curve_group.EllipticCurve.

The infinity point, i.e. the group identity element,
is flagged by is_infinity; its coordinates are not meaningful
and any two infinity points compare equal.
"""

from dataclasses import dataclass


@dataclass(frozen=True, eq=False)
class Point:
    """Affine point (x, y) or the point at infinity."""

    x: int = 0
    y: int = 0
    is_infinity: bool = False

    @classmethod
    def infinity(cls) -> "Point":
        "Return the canonical infinity point."
        return cls(0, 0, True)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        if self.is_infinity or other.is_infinity:
            return self.is_infinity and other.is_infinity
        return self.x == other.x and self.y == other.y

    def __hash__(self) -> int:
        if self.is_infinity:
            return hash((True,))
        return hash((self.x, self.y))

    def __str__(self) -> str:
        if self.is_infinity:
            return "INF"
        return f"({self.x}, {self.y})"

    def __repr__(self) -> str:
        if self.is_infinity:
            return "Point.infinity()"
        return f"Point({self.x}, {self.y})"


INF = Point.infinity()
