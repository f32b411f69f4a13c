"""Helpers for copying a decoded cube state into the data snapshot."""

from __future__ import annotations

import time

from ..cube_model import CubeState
from ..models import CubeData


def update_cube_state(data: CubeData, state: CubeState) -> None:
    """Update data fields from a decoded state."""
    data.state = state
    data.state_string = state.facelets()
    data.face_states = state.face_states()
    data.is_solved = state.is_solved()
    move = state.move
    if move is not None:
        data.last_move = move.notation
    last_move = state.last_move
    data.previous_move = last_move.notation if last_move is not None else None
    data.last_update = time.time()
