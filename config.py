#!/usr/bin/env python3
"""
config.py
=========
Application-wide configuration constants.

Values can be overridden via environment variables (see :mod:`main`).
This module is a thin, import-safe leaf — it never imports from
other project packages.
"""

import math

# ── Road defaults ────────────────────────────────────────────────────────────
ROAD_CENTER_X: float = 100.0
ROAD_WIDTH: float = 180.0
ROAD_LANE_COUNT: int = 3
START_LANE: int = 1

# ── Vehicle defaults ─────────────────────────────────────────────────────────
CAR_WIDTH: float = 30.0
CAR_HEIGHT: float = 50.0
CAR_START_Y: float = 100.0

# ── Sensor defaults ──────────────────────────────────────────────────────────
RAY_COUNT: int = 5
RAY_LENGTH: float = 150.0
RAY_SPREAD: float = math.pi / 2

# ── Runner defaults ──────────────────────────────────────────────────────────
DEFAULT_TICKS: int = 600
DEFAULT_LOG_LEVEL: str = "INFO"
REPORT_EVERY_TICKS: int = 50

# ── Environment variable names ───────────────────────────────────────────────
ENV_TICKS: str = "ROADSENSE_TICKS"
ENV_LOG_LEVEL: str = "ROADSENSE_LOG_LEVEL"
ENV_RAY_COUNT: str = "ROADSENSE_RAY_COUNT"
