#!/usr/bin/env python3
"""
sim/geometry.py
===============
Stateless 2D geometry helpers used by :mod:`sim.sensor` and
:mod:`sim.vehicle`.

Provides the value types (:class:`Point`, :class:`Segment`,
:class:`Intersection`) and three pure functions:

* :func:`lerp` — linear interpolation (extrapolates outside ``[0, 1]``).
* :func:`intersect` — parametric segment/segment intersection.
* :func:`polygons_intersect` — edge-crossing test between two closed polygons.

Keeping these in a separate module avoids circular imports and makes unit
testing straightforward.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Sequence, Tuple


@dataclass(frozen=True)
class Point:
    """Immutable 2D point in world units."""

    x: float
    y: float


@dataclass(frozen=True)
class Segment:
    """Directed line segment from *a* to *b*.

    Zero-length segments are rejected: they have no direction and would
    make every intersection test degenerate.
    """

    a: Point
    b: Point

    def __post_init__(self) -> None:
        if self.a == self.b:
            raise ValueError(f"degenerate segment: both endpoints at {self.a}")

    @property
    def length(self) -> float:
        return ((self.b.x - self.a.x) ** 2 + (self.b.y - self.a.y) ** 2) ** 0.5

    def point_at(self, t: float) -> Point:
        """Point at parameter *t* along the segment (0 → *a*, 1 → *b*)."""
        return Point(lerp(self.a.x, self.b.x, t), lerp(self.a.y, self.b.y, t))


@dataclass(frozen=True)
class Intersection:
    """Crossing point of two segments.

    Attributes
    ----------
    x, y : float
        World-space crossing point.
    offset : float
        Parametric position in ``[0, 1]`` along the *first* segment passed
        to :func:`intersect`.
    """

    x: float
    y: float
    offset: float

    @property
    def point(self) -> Point:
        return Point(self.x, self.y)


Polygon = Tuple[Point, ...]


def make_polygon(points: Iterable[Point]) -> Polygon:
    """Freeze *points* into a :data:`Polygon`, requiring at least 3 vertices."""
    poly = tuple(points)
    if len(poly) < 3:
        raise ValueError(f"polygon needs at least 3 points, got {len(poly)}")
    return poly


# ── Pure functions ────────────────────────────────────────────────────────────

def lerp(a: float, b: float, t: float) -> float:
    """Linear interpolation from *a* to *b*; *t* is not clamped."""
    return a + (b - a) * t


def intersect(a: Point, b: Point, c: Point, d: Point) -> Optional[Intersection]:
    """Intersection of segment *ab* with segment *cd*.

    Returns ``None`` for parallel or collinear segments (overlap is not
    detected) and when the crossing lies outside either segment.  The
    returned ``offset`` is measured along *ab*.
    """
    t_top = (d.x - c.x) * (a.y - c.y) - (d.y - c.y) * (a.x - c.x)
    u_top = (c.y - a.y) * (a.x - b.x) - (c.x - a.x) * (a.y - b.y)
    bottom = (d.y - c.y) * (b.x - a.x) - (d.x - c.x) * (b.y - a.y)

    if bottom == 0:
        return None

    t = t_top / bottom
    u = u_top / bottom
    if 0.0 <= t <= 1.0 and 0.0 <= u <= 1.0:
        return Intersection(
            x=lerp(a.x, b.x, t),
            y=lerp(a.y, b.y, t),
            offset=t,
        )
    return None


def segment_intersection(first: Segment, second: Segment) -> Optional[Intersection]:
    """:func:`intersect` for :class:`Segment` arguments."""
    return intersect(first.a, first.b, second.a, second.b)


def _edges(poly: Sequence[Point]):
    n = len(poly)
    for i in range(n):
        yield poly[i], poly[(i + 1) % n]


def polygons_intersect(poly1: Sequence[Point], poly2: Sequence[Point]) -> bool:
    """True if any edge of *poly1* crosses any edge of *poly2*.

    Both polygons are treated as closed cycles.  A polygon lying entirely
    inside the other without touching an edge is *not* reported.
    """
    for p1, p2 in _edges(poly1):
        for q1, q2 in _edges(poly2):
            if intersect(p1, p2, q1, q2) is not None:
                return True
    return False


def polygon_touches_segments(poly: Sequence[Point], segments: Iterable[Segment]) -> bool:
    """True if any edge of the closed polygon *poly* crosses any of *segments*."""
    for seg in segments:
        for p1, p2 in _edges(poly):
            if intersect(p1, p2, seg.a, seg.b) is not None:
                return True
    return False
