"""
sim/controls.py
===============
Per-tick control snapshot fed into :meth:`sim.vehicle.Vehicle.tick`.

The snapshot is plain data: whoever captures input (keyboard, a script,
a learner) builds a fresh :class:`ControlState` every tick.  Nothing is
queued or buffered — the booleans mean "currently held".
"""

from __future__ import annotations

from typing import Iterable

from pydantic import BaseModel, ConfigDict, StrictBool

# key name → ControlState field
KEY_BINDINGS = {
    "ArrowUp":    "forward",
    "ArrowDown":  "reverse",
    "ArrowLeft":  "left",
    "ArrowRight": "right",
}


class ControlState(BaseModel):
    """Four independent "held" flags sampled for one tick."""

    model_config = ConfigDict(frozen=True)

    forward: StrictBool = False
    reverse: StrictBool = False
    left: StrictBool = False
    right: StrictBool = False

    @classmethod
    def idle(cls) -> "ControlState":
        """All controls released."""
        return cls()

    @classmethod
    def from_keys(cls, pressed: Iterable[str]) -> "ControlState":
        """Build a snapshot from the names of the keys currently held.

        Unbound key names are ignored.
        """
        fields = {KEY_BINDINGS[k]: True for k in pressed if k in KEY_BINDINGS}
        return cls(**fields)
