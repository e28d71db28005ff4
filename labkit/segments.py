"""Points, segments and a test for whether two segments intersect."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """A point on the plane."""

    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True)
class Segment:
    """A closed segment between two points."""

    p1: Point
    p2: Point


def segments_intersect(s1: Segment, s2: Segment) -> bool:
    """Return True if the two segments share at least one point."""
    a, b = s1.p1, s1.p2
    c, d = s2.p1, s2.p2
    t1 = (c.x - d.x) * (a.y - c.y) - (a.x - c.x) * (c.y - d.y)
    t2 = (a.x - b.x) * (a.y - c.y) - (a.x - c.x) * (a.y - b.y)
    z = (c.x - d.x) * (a.y - b.y) - (a.x - b.x) * (c.y - d.y)

    if z > 0:
        return 0 <= t1 <= z and 0 <= t2 <= z
    if z < 0:
        return z <= t1 <= 0 and z <= t2 <= 0
    return t1 == 0 and t2 == 0 and b.x >= c.x