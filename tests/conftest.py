"""Shared frames for the Mi Smart Cube tests."""

from __future__ import annotations

import pytest

from micube_ble import SOLVED_FRAME

# Top layer turned clockwise once (seen from above).
U_TURN_FRAME = (
    2, 3, 4, 1, 5, 6, 7, 8,
    3, 3, 3, 3, 3, 3, 3, 3,
    2, 3, 4, 1, 5, 6, 7, 8, 9, 10, 11, 12,
    0, 0, 0, 0,
    6, 1, 5, 1,
)

# Front-layer cycle of corners and edges with four twisted corners and the
# front flip pattern. The permutation is that of one F turn and the state
# validates, but the corner stickers follow the (piece + slot) parity rule,
# which does not reproduce a physical F turn for corners that change layer.
F_TURN_FRAME = (
    1, 6, 2, 4, 5, 7, 3, 8,
    3, 2, 1, 3, 3, 1, 2, 3,
    1, 2, 6, 4, 5, 11, 3, 8, 9, 10, 7, 12,
    2, 6, 2, 0,
    4, 1, 6, 1,
)


@pytest.fixture
def solved_frame():
    return list(SOLVED_FRAME)


@pytest.fixture
def u_turn_frame():
    return list(U_TURN_FRAME)


@pytest.fixture
def f_turn_frame():
    return list(F_TURN_FRAME)
