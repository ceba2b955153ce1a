"""
sim/sensor.py
=============
Ray-fan perception sensor.  A :class:`Sensor` is owned by exactly one
vehicle and each tick:
  - casts ``ray_count`` rays from the vehicle's position, spread evenly
    around its heading
  - reports, per ray, the closest road-border crossing (or ``None``)
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, List, Optional, Sequence, Tuple

import numpy as np

from sim.geometry import Intersection, Point, Segment, intersect, lerp

if TYPE_CHECKING:
    from sim.vehicle import Vehicle

log = logging.getLogger("sensor")

DEFAULT_RAY_COUNT = 5
DEFAULT_RAY_LENGTH = 150.0
DEFAULT_RAY_SPREAD = math.pi / 2


def heading_offset(angle: float, length: float) -> Tuple[float, float]:
    """(dx, dy) of a displacement of *length* along *angle*.

    Angle 0 points "up" (negative y).  Shared by ray casting and vehicle
    movement so rays always line up with the direction of travel.
    """
    return -math.sin(angle) * length, -math.cos(angle) * length


class Sensor:
    """
    Fan of distance rays attached to a vehicle.

    Parameters
    ----------
    vehicle : Vehicle
        Owner; the sensor reads its ``x``, ``y`` and ``angle`` every tick.
    ray_count : int
        Number of rays (at least 1).
    ray_length : float
        Reach of every ray in world units.
    ray_spread : float
        Total angle covered by the fan, in radians.
    """

    def __init__(
        self,
        vehicle: "Vehicle",
        ray_count: int = DEFAULT_RAY_COUNT,
        ray_length: float = DEFAULT_RAY_LENGTH,
        ray_spread: float = DEFAULT_RAY_SPREAD,
    ) -> None:
        if int(ray_count) != ray_count or ray_count < 1:
            raise ValueError(f"ray_count must be a positive integer, got {ray_count!r}")
        if ray_length <= 0:
            raise ValueError(f"ray_length must be positive, got {ray_length!r}")
        if ray_spread < 0:
            raise ValueError(f"ray_spread must be non-negative, got {ray_spread!r}")

        self.vehicle = vehicle
        self.ray_count = int(ray_count)
        self.ray_length = float(ray_length)
        self.ray_spread = float(ray_spread)

        self.rays: List[Segment] = []
        self.readings: List[Optional[Intersection]] = []

    # ── Ray casting ───────────────────────────────────────────────────────────

    def ray_angles(self) -> List[float]:
        """Absolute angle of every ray, leftmost first."""
        half = self.ray_spread / 2
        angles = []
        for i in range(self.ray_count):
            t = 0.5 if self.ray_count == 1 else i / (self.ray_count - 1)
            angles.append(lerp(half, -half, t) + self.vehicle.angle)
        return angles

    def cast_rays(self) -> List[Segment]:
        """Rebuild :attr:`rays` from the vehicle's current pose."""
        start = Point(self.vehicle.x, self.vehicle.y)
        rays = []
        for angle in self.ray_angles():
            dx, dy = heading_offset(angle, self.ray_length)
            rays.append(Segment(start, Point(start.x + dx, start.y + dy)))
        self.rays = rays
        return rays

    # ── Sensing ───────────────────────────────────────────────────────────────

    @staticmethod
    def _nearest(ray: Segment, borders: Sequence[Segment]) -> Optional[Intersection]:
        nearest: Optional[Intersection] = None
        for border in borders:
            touch = intersect(ray.a, ray.b, border.a, border.b)
            if touch is not None and (nearest is None or touch.offset < nearest.offset):
                nearest = touch
        return nearest

    def sense(self, borders: Sequence[Segment]) -> List[Optional[Intersection]]:
        """Recast the rays and record the closest border hit for each one."""
        self.cast_rays()
        self.readings = [self._nearest(ray, borders) for ray in self.rays]
        if log.isEnabledFor(logging.DEBUG):
            log.debug("readings: %s",
                      ["-" if r is None else f"{r.offset:.2f}" for r in self.readings])
        return self.readings

    # ── Views for collaborators ───────────────────────────────────────────────

    def offsets(self) -> np.ndarray:
        """Proximity per ray: ``1 - offset`` when something is hit, else 0."""
        return np.array(
            [0.0 if r is None else 1.0 - r.offset for r in self.readings],
            dtype=float,
        )

    def visible_segments(self) -> List[Tuple[Point, Point]]:
        """(start, end) of each ray cut short at its reading, as a renderer draws it."""
        visible = []
        for i, ray in enumerate(self.rays):
            reading = self.readings[i] if i < len(self.readings) else None
            end = ray.b if reading is None else reading.point
            visible.append((ray.a, end))
        return visible
