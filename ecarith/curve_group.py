#!/usr/bin/env python3

# Copyright (C) 2024-2026 The ecarith developers
#
# This file is part of ecarith. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecarith including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic curve group over a prime field Fp.

The elliptic curve is the set of points (x, y)
that are solutions to a Weierstrass equation y^2 = x^3 + a*x + b,
with x, y, a, and b in Fp (p being a prime),
together with a point at infinity INF.

Arithmetic uses python arbitrary precision integers,
so there is no upper bound on the field size.
"""

from typing import Dict, Iterator, List

from ecarith.alias import Integer
from ecarith.exceptions import (
    ECArithTypeError,
    ECArithValueError,
    InvalidCurveParameters,
    PointNotOnCurve,
)
from ecarith.number_theory import mod_inv
from ecarith.point import INF, Point
from ecarith.utils import int_from_integer, int_repr

# largest p for which points() enumerates the curve
MAX_ENUM_P = 0xFFFF


class EllipticCurve:
    """Finite group of the points of an elliptic curve over Fp.

    The constants a, b must satisfy the relationship
    4 a^3 + 27 b^2 ≠ 0 (mod p).
    p is assumed to be prime: it is not checked,
    and the group law is meaningless otherwise.

    The group is defined by the point addition group law.
    Points are never checked to be on the curve by the group law:
    use is_on_curve or require_on_curve if needed.
    """

    def __init__(self, a: Integer, b: Integer, p: Integer) -> None:

        a = int_from_integer(a)
        b = int_from_integer(b)
        p = int_from_integer(p)

        if p < 2:
            raise InvalidCurveParameters(f"invalid modulus: {p}")

        # the whole sum is reduced, not just its last term
        d = 4 * a * a * a + 27 * b * b
        if d % p == 0:
            raise InvalidCurveParameters("zero discriminant")

        self._a = a
        self._b = b
        self._p = p

    @property
    def a(self) -> int:
        return self._a

    @property
    def b(self) -> int:
        return self._b

    @property
    def p(self) -> int:
        return self._p

    def __str__(self) -> str:
        result = "EllipticCurve"
        result += f"\n p   = {int_repr(self._p)}"
        result += f"\n a   = {int_repr(self._a)}"
        result += f"\n b   = {int_repr(self._b)}"
        return result

    def __repr__(self) -> str:
        return (
            f"EllipticCurve({int_repr(self._a)}, "
            f"{int_repr(self._b)}, {int_repr(self._p)})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EllipticCurve):
            return NotImplemented
        return (self._a, self._b, self._p) == (other._a, other._b, other._p)

    def __hash__(self) -> int:
        return hash((self._a, self._b, self._p))

    # methods using p

    def mod_inv(self, n: int) -> int:
        "Return the inverse of n (mod p), in [0, p-1]."
        return mod_inv(n, self._p)

    def negate(self, Q: Point) -> Point:
        """Return the opposite point.

        The input point is not checked to be on the curve.
        """
        if not isinstance(Q, Point):
            raise ECArithTypeError("not a point")
        if Q.is_infinity:
            return INF
        return Point(Q.x, (self._p - Q.y) % self._p)

    # methods using a, b, p

    def add(self, P: Point, Q: Point) -> Point:
        """Return the sum of two points.

        Points are assumed to be on curve.
        NoInverseExists is raised when doubling a point having y = 0
        (i.e. a point of order two): no tangent slope is available.
        """

        if P.is_infinity:
            return Q
        if Q.is_infinity:
            return P

        # opposite points, it must be checked before doubling
        if P.x == Q.x and P.y != Q.y:
            return INF

        if P == Q:  # point doubling
            lam = (3 * P.x * P.x + self._a) * self.mod_inv(2 * P.y) % self._p
        else:
            lam = (Q.y - P.y) * self.mod_inv(Q.x - P.x) % self._p

        x = (lam * lam - P.x - Q.x) % self._p
        y = (lam * (P.x - x) - P.y) % self._p
        return Point(x, y)

    def double(self, Q: Point) -> Point:
        return self.add(Q, Q)

    def multiply(self, Q: Point, n: Integer) -> Point:
        """Return n * Q, i.e. Q added to itself n times.

        A negative n multiplies the opposite point by -n.
        """

        n = int_from_integer(n)
        if n < 0:
            return mult_aff(-n, self.negate(Q), self)
        return mult_aff(n, Q, self)

    def _y2(self, x: int) -> int:
        return ((x * x + self._a) * x + self._b) % self._p

    def is_on_curve(self, Q: Point) -> bool:
        """Return True if the point is on the curve.

        Coordinates must be reduced, i.e. in 0..p-1.
        """
        if not isinstance(Q, Point):
            raise ECArithTypeError("not a point")
        if Q.is_infinity:
            return True
        if not (0 <= Q.x < self._p and 0 <= Q.y < self._p):
            return False
        return self._y2(Q.x) == Q.y * Q.y % self._p

    def require_on_curve(self, Q: Point) -> None:
        """Require the input curve Point to be on the curve.

        An Error is raised if not.
        """
        if not self.is_on_curve(Q):
            raise PointNotOnCurve("point not on curve")

    def points(self) -> Iterator[Point]:
        """Iterate over all the finite points of the curve.

        Points are sorted by x first, then by y.
        This is a brute force enumeration: use it only for small p.
        """
        if self._p > MAX_ENUM_P:
            raise ECArithValueError(f"field too large: {int_repr(self._p)}")

        # square -> increasing list of its roots
        roots: Dict[int, List[int]] = {}
        for y in range(self._p):
            roots.setdefault(y * y % self._p, []).append(y)

        for x in range(self._p):
            for y in roots.get(self._y2(x), []):
                yield Point(x, y)


def mult_aff(m: int, Q: Point, ec: EllipticCurve) -> Point:
    """Scalar multiplication of a curve point in affine coordinates.

    This implementation uses
    'double & add' algorithm,
    'right-to-left' binary decomposition of the m coefficient,
    affine coordinates.

    It is not constant-time.
    The input point is assumed to be on curve.
    """

    if m < 0:
        raise ECArithValueError(f"negative m: {hex(m)}")

    # R is the running result, Q is doubled at each step
    R = INF
    while m > 0:
        # if least significant bit of m is 1, then add Q to R
        if m & 1:
            R = ec.add(R, Q)
        # remove the bit just accounted for
        m >>= 1
        # the doubling part of 'double & add', not needed after the last bit
        if m:
            Q = ec.add(Q, Q)
    return R


def mult_recursive_aff(m: int, Q: Point, ec: EllipticCurve) -> Point:
    """Scalar multiplication of a curve point in affine coordinates.

    This implementation uses
    a recursive version of 'double & add',
    affine coordinates.

    The input point is assumed to be on curve.
    """

    if m < 0:
        raise ECArithValueError(f"negative m: {hex(m)}")

    if m == 0:
        return INF

    if m % 2 == 1:
        return ec.add(Q, mult_recursive_aff((m - 1), Q, ec))

    return mult_recursive_aff((m // 2), ec.double(Q), ec)
