"""Print every Vector2d operation for a pair of input vectors."""

from __future__ import annotations

import argparse

from planar import config
from planar.math.vector2d import Vector2d


def run(a: Vector2d, b: Vector2d, angle: float, scalar: float) -> None:
    print("a=%s b=%s angle=%r scalar=%r" % (a, b, angle, scalar))
    print("add        %s" % a.add(b))
    print("sub        %s" % a.sub(b))
    print("dot        %r" % a.dot(b))
    print("cross      %r" % a.cross(b))
    print("scale      %s" % a.scale(scalar))
    print("add_scalar %s" % a.add_scalar(scalar))
    print("sub_scalar %s" % a.sub_scalar(scalar))
    print("rsub       %s" % a.sub_scalar_reversed(scalar))
    print("divide     %s" % a.divide(scalar))
    print("magnitude  %r" % a.magnitude())
    print("unit       %s" % a.unit())
    print("rotate     %s" % a.rotate(angle))
    print("angle      %r" % a.angle())
    print("max        %r" % a.max_component())
    print("min        %r" % a.min_component())
    print("abs        %s" % a.abs())
    print("negate     %s" % a.negate())
    print("project    %s" % a.project(b))


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Vector2d operation walkthrough")
    parser.add_argument("--a", type=float, nargs=2, default=config.DEFAULT_DEMO_A, metavar=("X", "Y"))
    parser.add_argument("--b", type=float, nargs=2, default=config.DEFAULT_DEMO_B, metavar=("X", "Y"))
    parser.add_argument("--angle", type=float, default=config.DEFAULT_DEMO_ANGLE, help="rotation in radians")
    parser.add_argument("--scalar", type=float, default=2.0)
    args = parser.parse_args(argv)

    run(Vector2d.from_tuple(args.a), Vector2d.from_tuple(args.b), args.angle, args.scalar)


if __name__ == "__main__":
    main()
