#!/usr/bin/env python3
"""
sim/vehicle.py
==============
Kinematic vehicle with a rectangular footprint and an attached
:class:`~sim.sensor.Sensor`.

Each :meth:`Vehicle.tick` runs one atomic pass:

1. integrate speed / heading / position from a :class:`ControlState`
2. rebuild the footprint polygon
3. test the polygon against the road borders (→ ``damaged``)
4. let the sensor sense the same borders

``damaged`` is terminal: steps 1–3 are skipped from then on, but the
sensor keeps reporting.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, Dict, Optional, Sequence

from sim.controls import ControlState
from sim.geometry import Point, Polygon, Segment, make_polygon, polygon_touches_segments
from sim.sensor import (
    DEFAULT_RAY_COUNT,
    DEFAULT_RAY_LENGTH,
    DEFAULT_RAY_SPREAD,
    Sensor,
    heading_offset,
)

log = logging.getLogger("vehicle")


@dataclass(frozen=True)
class VehicleParams:
    """Immutable bag of kinematic constants, all per tick."""

    acceleration: float = 0.1
    """Speed gained (or lost, in reverse) per tick while a pedal is held."""

    max_speed: float = 3.0
    """Forward speed cap.  Reverse is capped at half of it."""

    friction: float = 0.05
    """Decay toward zero applied every tick; smaller speeds snap to 0."""

    turn_rate: float = 0.03
    """Heading change in radians per tick while steering."""

    def __post_init__(self) -> None:
        for name in ("acceleration", "max_speed", "friction"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)!r}")
        if self.turn_rate < 0:
            raise ValueError(f"turn_rate must be non-negative, got {self.turn_rate!r}")

    @property
    def max_reverse_speed(self) -> float:
        return self.max_speed / 2


class Vehicle:
    """
    Single simulated car.

    Parameters
    ----------
    x, y : float
        Starting centre position in world units.
    width, height : float
        Footprint rectangle; *height* runs along the heading.
    params : VehicleParams, optional
        Kinematic constants (defaults when omitted).
    vehicle_id : str
        Identifier used in logs and snapshots.
    ray_count, ray_length, ray_spread
        Forwarded to the owned :class:`Sensor`.
    """

    def __init__(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        params: Optional[VehicleParams] = None,
        vehicle_id: str = "CAR_0",
        angle: float = 0.0,
        ray_count: int = DEFAULT_RAY_COUNT,
        ray_length: float = DEFAULT_RAY_LENGTH,
        ray_spread: float = DEFAULT_RAY_SPREAD,
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"vehicle size must be positive, got {width!r} x {height!r}")

        self.id = vehicle_id.upper()
        self.x = float(x)
        self.y = float(y)
        self.width = float(width)
        self.height = float(height)
        self.angle = float(angle)
        self.speed = 0.0
        self.params = params or VehicleParams()

        self._damaged = False
        self._polygon = self._build_polygon()
        self._sensor = Sensor(self, ray_count, ray_length, ray_spread)

    # ── Public accessors ──────────────────────────────────────────────────────

    @property
    def damaged(self) -> bool:
        return self._damaged

    @property
    def polygon(self) -> Polygon:
        """Footprint corners as of the last kinematic update."""
        return self._polygon

    @property
    def sensor(self) -> Sensor:
        return self._sensor

    @property
    def pose(self) -> Dict[str, Any]:
        return {"x": self.x, "y": self.y, "angle": self.angle, "damaged": self._damaged}

    # ── Tick ──────────────────────────────────────────────────────────────────

    def tick(self, controls: ControlState, borders: Sequence[Segment]) -> None:
        """Advance one simulation step against *borders* (read only)."""
        if not self._damaged:
            self._move(controls)
            self._polygon = self._build_polygon()
            if polygon_touches_segments(self._polygon, borders):
                self._damaged = True
                log.warning("%s damaged at (%.1f, %.1f) angle=%.3f",
                            self.id, self.x, self.y, self.angle)
        self._sensor.sense(borders)

    def _move(self, controls: ControlState) -> None:
        p = self.params

        if controls.forward:
            self.speed += p.acceleration
        if controls.reverse:
            self.speed -= p.acceleration

        if self.speed > p.max_speed:
            self.speed = p.max_speed
        if self.speed < -p.max_reverse_speed:
            self.speed = -p.max_reverse_speed

        if self.speed > 0:
            self.speed -= p.friction
        elif self.speed < 0:
            self.speed += p.friction
        if abs(self.speed) < p.friction:
            self.speed = 0.0

        # steering is relative to the direction of travel
        if self.speed != 0:
            flip = 1 if self.speed > 0 else -1
            if controls.left:
                self.angle += p.turn_rate * flip
            if controls.right:
                self.angle -= p.turn_rate * flip

        dx, dy = heading_offset(self.angle, self.speed)
        self.x += dx
        self.y += dy

    def _build_polygon(self) -> Polygon:
        """Rotated rectangle corners, without a rotation matrix."""
        rad = math.hypot(self.width, self.height) / 2
        alpha = math.atan2(self.width, self.height)
        corners = []
        for a in (
            self.angle - alpha,
            self.angle + alpha,
            math.pi + self.angle - alpha,
            math.pi + self.angle + alpha,
        ):
            dx, dy = heading_offset(a, rad)
            corners.append(Point(self.x + dx, self.y + dy))
        return make_polygon(corners)

    # ── Serialisation ─────────────────────────────────────────────────────────

    def as_dict(self) -> Dict[str, Any]:
        """Render-ready mapping: pose, footprint, rays and readings."""
        return {
            "id":       self.id,
            "x":        self.x,
            "y":        self.y,
            "angle":    self.angle,
            "speed":    self.speed,
            "damaged":  self._damaged,
            "polygon":  [(p.x, p.y) for p in self._polygon],
            "rays":     [((r.a.x, r.a.y), (r.b.x, r.b.y)) for r in self._sensor.rays],
            "readings": [
                None if r is None else {"x": r.x, "y": r.y, "offset": r.offset}
                for r in self._sensor.readings
            ],
        }
