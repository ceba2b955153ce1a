#!/usr/bin/env python3
"""
main.py
=======
Headless runner: one car on a three-lane road, driven by a scripted
control schedule until it leaves the road or the tick budget runs out.

Environment overrides::

    ROADSENSE_TICKS=300 ROADSENSE_LOG_LEVEL=DEBUG python main.py
"""

import logging
import os

import config
from logging_setup import setup_logging
from sim.controls import ControlState
from sim.road import Road
from sim.vehicle import Vehicle
from sim.world import World


def scripted_controls(tick: int) -> ControlState:
    """Accelerate straight, then hold a gentle left until the border."""
    if tick < 120:
        return ControlState(forward=True)
    return ControlState(forward=True, left=True)


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def build_world(ray_count: int = config.RAY_COUNT) -> World:
    road = Road(config.ROAD_CENTER_X, config.ROAD_WIDTH, config.ROAD_LANE_COUNT)
    car = Vehicle(
        road.lane_center(config.START_LANE),
        config.CAR_START_Y,
        config.CAR_WIDTH,
        config.CAR_HEIGHT,
        ray_count=ray_count,
        ray_length=config.RAY_LENGTH,
        ray_spread=config.RAY_SPREAD,
    )
    return World(road, [car])


def main() -> None:
    level_name = os.environ.get(config.ENV_LOG_LEVEL, config.DEFAULT_LOG_LEVEL).upper()
    setup_logging(getattr(logging, level_name, logging.INFO))
    log = logging.getLogger("main")

    ticks = _env_int(config.ENV_TICKS, config.DEFAULT_TICKS)
    world = build_world(_env_int(config.ENV_RAY_COUNT, config.RAY_COUNT))
    car = world.vehicles[0]
    log.info("Running %d ticks with %d rays", ticks, car.sensor.ray_count)

    for tick in range(ticks):
        world.step({car.id: scripted_controls(tick)})

        if tick % config.REPORT_EVERY_TICKS == 0:
            log.info("tick %d pose=(%.1f, %.1f, %.3f) speed=%.2f proximity=%s",
                     tick, car.x, car.y, car.angle, car.speed,
                     car.sensor.offsets().round(2).tolist())

        if world.all_damaged():
            log.info("All vehicles damaged after %d ticks; last readings %s",
                     world.tick_count, car.sensor.offsets().round(2).tolist())
            break
    else:
        log.info("Tick budget exhausted; %s still on the road", car.id)


if __name__ == "__main__":
    main()
