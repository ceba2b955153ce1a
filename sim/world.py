#!/usr/bin/env python3
"""
sim/world.py
============
Tick orchestrator for one road and its vehicles.

Every vehicle is an independent unit: it shares only the read-only road
borders with the others, so :meth:`World.step` simply ticks them in
order.  :meth:`World.snapshot` returns render-ready dicts for whoever
paints the scene.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional, Sequence

from sim.controls import ControlState
from sim.geometry import Segment
from sim.road import Road
from sim.vehicle import Vehicle

log = logging.getLogger("world")


class World:
    """
    Parameters
    ----------
    road : Road
        Supplies the border segments every vehicle senses and collides with.
    vehicles : sequence of Vehicle
        Vehicles to tick; ids must be unique.
    extra_borders : sequence of Segment, optional
        Additional obstacles appended after the road borders.
    """

    def __init__(
        self,
        road: Road,
        vehicles: Sequence[Vehicle],
        extra_borders: Optional[Sequence[Segment]] = None,
    ) -> None:
        ids = [v.id for v in vehicles]
        if len(ids) != len(set(ids)):
            raise ValueError(f"duplicate vehicle ids: {ids}")

        self.road = road
        self.vehicles: List[Vehicle] = list(vehicles)
        self.borders: tuple = tuple(road.borders) + tuple(extra_borders or ())
        self.tick_count = 0

    def vehicle(self, vehicle_id: str) -> Vehicle:
        """Look up a vehicle by id (case-insensitive)."""
        wanted = vehicle_id.upper()
        for v in self.vehicles:
            if v.id == wanted:
                return v
        raise KeyError(vehicle_id)

    def step(self, controls: Optional[Mapping[str, ControlState]] = None) -> None:
        """Tick every vehicle once.  Vehicles without an entry get idle controls."""
        controls = {k.upper(): v for k, v in (controls or {}).items()}
        idle = ControlState.idle()
        for v in self.vehicles:
            was_damaged = v.damaged
            v.tick(controls.get(v.id, idle), self.borders)
            if v.damaged and not was_damaged:
                log.info("tick %d: %s left the road", self.tick_count, v.id)
        self.tick_count += 1
        log.debug("tick %d done", self.tick_count)

    def all_damaged(self) -> bool:
        return all(v.damaged for v in self.vehicles)

    def snapshot(self) -> List[Dict[str, Any]]:
        """Render-ready state of every vehicle (see :meth:`Vehicle.as_dict`)."""
        return [v.as_dict() for v in self.vehicles]
