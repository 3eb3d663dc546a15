#!/usr/bin/env python3

# Copyright (C) 2024-2026 The ecarith developers
#
# This file is part of ecarith. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecarith including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Scalar multiplication demo.

Build the curve y^2 = x^3 + a*x + b over Fp,
multiply the point (x, y) by k, and print

    k * (x, y) = (rx, ry)

When the result is the point at infinity it is printed as INF,
e.g. 5 * (3, 6) = INF, not as a (0, 0) coordinate pair.

The default values multiply (3, 6) by 2 on y^2 = x^3 + 2x + 3 over F_97.
"""

import argparse
from typing import List, Optional

from ecarith.curve_group import EllipticCurve
from ecarith.point import Point


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(
        prog="ecarith", description="Elliptic curve scalar multiplication demo"
    )
    parser.add_argument("-a", type=int, default=2, help="(default: 2)")
    parser.add_argument("-b", type=int, default=3, help="(default: 3)")
    parser.add_argument(
        "-p", type=int, default=97, help="field prime (default: 97)"
    )
    parser.add_argument("-x", type=int, default=3, help="(default: 3)")
    parser.add_argument("-y", type=int, default=6, help="(default: 6)")
    parser.add_argument(
        "-k", type=int, default=2, help="scalar (default: 2)"
    )
    args = parser.parse_args(argv)

    ec = EllipticCurve(args.a, args.b, args.p)
    P = Point(args.x, args.y)
    R = ec.multiply(P, args.k)
    print(f"{args.k} * {P} = {R}")


if __name__ == "__main__":
    main()
