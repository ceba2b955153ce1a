"""
sim — Simulation core
=====================

Modules
-------
geometry
    :class:`Point`, :class:`Segment`, :class:`Intersection` and the
    intersection / polygon helpers.
sensor
    :class:`Sensor` ray-fan perception.
vehicle
    :class:`Vehicle` kinematics, footprint and collision state.
controls
    :class:`ControlState` per-tick input snapshot.
road
    :class:`Road` border and lane builder.
world
    :class:`World` tick orchestrator.
"""
