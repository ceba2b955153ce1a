#!/usr/bin/env python3
"""
Tests for ray casting and nearest-border sensing.
"""

from __future__ import annotations

import math
import unittest

from sim.geometry import Point, Segment
from sim.sensor import Sensor
from sim.vehicle import Vehicle


def _ray_angle(ray: Segment) -> float:
    """Inverse of the heading convention dx = -sin(a)·L, dy = -cos(a)·L."""
    dx = ray.b.x - ray.a.x
    dy = ray.b.y - ray.a.y
    return math.atan2(-dx, -dy)


def _horizontal(y: float, half_width: float = 20.0) -> Segment:
    return Segment(Point(-half_width, y), Point(half_width, y))


class CastRaysTests(unittest.TestCase):
    def test_five_rays_evenly_spread_around_heading(self) -> None:
        car = Vehicle(0.0, 0.0, 30, 50)
        rays = car.sensor.cast_rays()
        self.assertEqual(len(rays), 5)

        expected = [math.pi / 4, math.pi / 8, 0.0, -math.pi / 8, -math.pi / 4]
        for ray, angle in zip(rays, expected):
            self.assertAlmostEqual(_ray_angle(ray), angle)
            self.assertEqual(ray.a, Point(0.0, 0.0))
            self.assertAlmostEqual(ray.length, 150.0)

    def test_rays_follow_heading(self) -> None:
        car = Vehicle(5.0, 5.0, 30, 50, angle=0.4)
        angles = [_ray_angle(r) for r in car.sensor.cast_rays()]
        self.assertAlmostEqual(angles[0], 0.4 + math.pi / 4)
        self.assertAlmostEqual(angles[-1], 0.4 - math.pi / 4)

    def test_single_ray_is_centred(self) -> None:
        car = Vehicle(0.0, 0.0, 30, 50, angle=0.3, ray_count=1)
        rays = car.sensor.cast_rays()
        self.assertEqual(len(rays), 1)
        self.assertAlmostEqual(_ray_angle(rays[0]), 0.3)

    def test_forward_ray_points_up(self) -> None:
        car = Vehicle(0.0, 0.0, 30, 50, ray_count=1, ray_length=10)
        ray = car.sensor.cast_rays()[0]
        self.assertAlmostEqual(ray.b.x, 0.0)
        self.assertAlmostEqual(ray.b.y, -10.0)


class SenseTests(unittest.TestCase):
    def test_nearest_border_wins(self) -> None:
        car = Vehicle(0.0, 0.0, 30, 50, ray_count=1)
        # listed far-first so order cannot explain the result
        borders = [_horizontal(-105.0), _horizontal(-45.0)]
        readings = car.sensor.sense(borders)
        self.assertEqual(len(readings), 1)
        self.assertAlmostEqual(readings[0].offset, 0.3)
        self.assertAlmostEqual(readings[0].y, -45.0)

    def test_misses_are_none_and_order_matches_rays(self) -> None:
        car = Vehicle(0.0, 0.0, 30, 50)
        # only the leftmost ray (pointing up-left) reaches this wall
        wall = Segment(Point(-100.0, -60.0), Point(-100.0, -140.0))
        readings = car.sensor.sense([wall])
        self.assertEqual(len(readings), 5)
        self.assertIsNotNone(readings[0])
        self.assertTrue(all(r is None for r in readings[1:]))

    def test_no_borders(self) -> None:
        car = Vehicle(0.0, 0.0, 30, 50)
        readings = car.sensor.sense([])
        self.assertEqual(readings, [None] * 5)
        self.assertEqual(car.sensor.offsets().tolist(), [0.0] * 5)

    def test_offsets_are_proximity(self) -> None:
        car = Vehicle(0.0, 0.0, 30, 50, ray_count=1)
        car.sensor.sense([_horizontal(-45.0)])
        prox = car.sensor.offsets()
        self.assertEqual(prox.shape, (1,))
        self.assertAlmostEqual(float(prox[0]), 0.7)

    def test_visible_segments_stop_at_reading(self) -> None:
        car = Vehicle(0.0, 0.0, 30, 50, ray_count=1)
        car.sensor.sense([_horizontal(-45.0)])
        start, end = car.sensor.visible_segments()[0]
        self.assertEqual(start, Point(0.0, 0.0))
        self.assertAlmostEqual(end.y, -45.0)

        car.sensor.sense([])
        _, end = car.sensor.visible_segments()[0]
        self.assertAlmostEqual(end.y, -150.0)


class SensorValidationTests(unittest.TestCase):
    def test_rejects_bad_parameters(self) -> None:
        car = Vehicle(0.0, 0.0, 30, 50)
        with self.assertRaises(ValueError):
            Sensor(car, ray_count=0)
        with self.assertRaises(ValueError):
            Sensor(car, ray_count=2.5)
        with self.assertRaises(ValueError):
            Sensor(car, ray_length=0)
        with self.assertRaises(ValueError):
            Sensor(car, ray_spread=-0.1)


if __name__ == "__main__":
    unittest.main()
