#!/usr/bin/env python3

# Copyright (C) 2024-2026 The ecarith developers
#
# This file is part of ecarith. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecarith including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `ecarith.point` module."

import dataclasses

import pytest

from ecarith.point import INF, Point


def test_infinity() -> None:
    assert INF.is_infinity
    assert Point.infinity() == INF
    assert Point.infinity() is not INF
    assert (INF.x, INF.y) == (0, 0)

    # coordinates of the infinity point are not meaningful
    assert Point(5, 7, True) == INF
    assert INF == Point(5, 7, True)
    assert Point(0, 0) != INF
    assert INF != Point(0, 0)


def test_equality() -> None:
    P = Point(3, 6)
    assert P == Point(3, 6)
    assert P != Point(3, 91)
    assert P != Point(80, 6)
    assert not P != Point(3, 6)

    # not a Point
    assert P != (3, 6)
    assert INF != (0, 0)

    # reflexive, symmetric, transitive
    points = [Point(3, 6), Point(3, 6), Point(1, 2), INF, Point(1, 1, True)]
    for A in points:
        assert A == A
        for B in points:
            assert (A == B) == (B == A)
            for C in points:
                if A == B and B == C:
                    assert A == C


def test_hash() -> None:
    assert hash(Point(3, 6)) == hash(Point(3, 6))
    assert hash(INF) == hash(Point(5, 7, True))
    assert len({INF, Point.infinity(), Point(1, 2, True)}) == 1
    assert len({Point(3, 6), Point(3, 6), Point(3, 91), INF}) == 3


def test_immutable() -> None:
    P = Point(3, 6)
    with pytest.raises(dataclasses.FrozenInstanceError):
        P.x = 4  # type: ignore
    with pytest.raises(dataclasses.FrozenInstanceError):
        INF.is_infinity = False  # type: ignore


def test_str_repr() -> None:
    P = Point(3, 6)
    assert str(P) == "(3, 6)"
    assert repr(P) == "Point(3, 6)"
    assert str(INF) == "INF"
    assert repr(INF) == "Point.infinity()"
