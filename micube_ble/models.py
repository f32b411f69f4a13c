"""Snapshot of what a connected cube last reported."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List

from .cube_model import CubeState


@dataclass
class CubeData:
    """Latest decoded state, moves and battery level."""

    battery_level: int | None = None
    state: CubeState | None = None
    frame: List[int] | None = None
    is_solved: bool = False
    face_states: Dict[str, bool] = field(default_factory=dict)
    state_string: str | None = None
    last_move: str | None = None
    previous_move: str | None = None
    last_update: float | None = None
