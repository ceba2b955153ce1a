"""
sim/road.py
===========
Straight vertical road: two border segments and evenly sized lanes.

The vehicle core never owns the borders; a :class:`Road` just builds
them once so callers can pass the same sequence every tick.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple

from sim.geometry import Point, Segment

# Borders reach this far up and down from y = 0 (effectively endless).
ROAD_HALF_LENGTH = 1_000_000.0


@dataclass(frozen=True)
class Road:
    """
    Parameters
    ----------
    center_x : float
        X coordinate of the road axis.
    width : float
        Distance between the left and right borders.
    lane_count : int
        Number of equal-width lanes.
    half_length : float
        Borders span ``[-half_length, +half_length]`` along y.
    """

    center_x: float
    width: float
    lane_count: int = 3
    half_length: float = ROAD_HALF_LENGTH
    borders: Tuple[Segment, ...] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.width <= 0:
            raise ValueError(f"road width must be positive, got {self.width!r}")
        if int(self.lane_count) != self.lane_count or self.lane_count < 1:
            raise ValueError(f"lane_count must be a positive integer, got {self.lane_count!r}")
        if self.half_length <= 0:
            raise ValueError(f"half_length must be positive, got {self.half_length!r}")

        top, bottom = -self.half_length, self.half_length
        object.__setattr__(self, "borders", (
            Segment(Point(self.left, top), Point(self.left, bottom)),
            Segment(Point(self.right, top), Point(self.right, bottom)),
        ))

    @property
    def left(self) -> float:
        return self.center_x - self.width / 2

    @property
    def right(self) -> float:
        return self.center_x + self.width / 2

    @property
    def lane_width(self) -> float:
        return self.width / self.lane_count

    def lane_center(self, lane_index: int) -> float:
        """X of the centre of *lane_index*; indices past the last lane clamp to it."""
        if lane_index < 0:
            raise ValueError(f"lane_index must be non-negative, got {lane_index!r}")
        idx = min(lane_index, self.lane_count - 1)
        return self.left + self.lane_width / 2 + idx * self.lane_width
