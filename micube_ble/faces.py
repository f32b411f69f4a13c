"""Projection of cubie colors onto the 3x3 sticker grid of each face.

Rows and columns start at the top-left sticker of a face seen from outside,
with UP seen with BACK at the top, DOWN seen with FRONT at the top and the
four side faces seen with UP at the top.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, Tuple, Union

from . import colors
from .const import Color, Corner, Edge, Face

if TYPE_CHECKING:
    from .cube_model import CubeState

Sticker = Tuple[Union[Edge, Corner], int]

# Every non-center cell as (slot, color index) in row-major order, center skipped.
FACE_STICKERS: Dict[Face, Tuple[Sticker, ...]] = {
    Face.UP: (
        (Corner.ULB, 0), (Edge.UB, 0), (Corner.URB, 0),
        (Edge.UL, 0), (Edge.UR, 0),
        (Corner.ULF, 0), (Edge.UF, 0), (Corner.URF, 0),
    ),
    Face.LEFT: (
        (Corner.ULB, 1), (Edge.UL, 1), (Corner.ULF, 1),
        (Edge.BL, 1), (Edge.FL, 1),
        (Corner.DLB, 1), (Edge.DL, 1), (Corner.DLF, 1),
    ),
    Face.FRONT: (
        (Corner.ULF, 2), (Edge.UF, 1), (Corner.URF, 2),
        (Edge.FL, 0), (Edge.FR, 0),
        (Corner.DLF, 2), (Edge.DF, 1), (Corner.DRF, 2),
    ),
    Face.RIGHT: (
        (Corner.URF, 1), (Edge.UR, 1), (Corner.URB, 1),
        (Edge.FR, 1), (Edge.BR, 1),
        (Corner.DRF, 1), (Edge.DR, 1), (Corner.DRB, 1),
    ),
    Face.BACK: (
        (Corner.URB, 2), (Edge.UB, 1), (Corner.ULB, 2),
        (Edge.BR, 0), (Edge.BL, 0),
        (Corner.DRB, 2), (Edge.DB, 1), (Corner.DLB, 2),
    ),
    Face.DOWN: (
        (Corner.DLF, 0), (Edge.DF, 0), (Corner.DRF, 0),
        (Edge.DL, 0), (Edge.DR, 0),
        (Corner.DLB, 0), (Edge.DB, 0), (Corner.DRB, 0),
    ),
}

# Face order of the 54-character facelet string.
FACELET_ORDER = (Face.UP, Face.RIGHT, Face.FRONT, Face.DOWN, Face.LEFT, Face.BACK)


def color(state: CubeState, face: Face, row: int, col: int) -> Color:
    """Return the color of one sticker."""
    if not (0 <= row < 3 and 0 <= col < 3):
        raise ValueError(f"Sticker ({row}, {col}) is outside the 3x3 grid")
    if row == 1 and col == 1:
        return state.center(face)

    cell = row * 3 + col
    slot, index = FACE_STICKERS[face][cell if cell < 4 else cell - 1]
    if isinstance(slot, Corner):
        return colors.corner_colors(state, slot)[index]
    return colors.edge_colors(state, slot)[index]


def face_colors(state: CubeState, face: Face) -> Tuple[Tuple[Color, ...], ...]:
    """Return the 3x3 grid of a face."""
    return tuple(
        tuple(color(state, face, row, col) for col in range(3)) for row in range(3)
    )


def facelets(state: CubeState) -> str:
    """Return the 54-character facelet string in URFDLB order.

    Each sticker is written as the letter of the face whose center has its
    color, so a solved cube reads ``UUUUUUUUURRRRRRRRR...``.
    """
    letters = {state.center(face): face.letter for face in Face}
    return "".join(
        letters[sticker]
        for face in FACELET_ORDER
        for row in face_colors(state, face)
        for sticker in row
    )


def face_states(state: CubeState) -> Dict[str, bool]:
    """Return whether each color's face is uniform, keyed by color name."""
    result: Dict[str, bool] = {}
    for face in Face:
        center = state.center(face)
        result[center.name.capitalize()] = all(
            sticker == center for row in face_colors(state, face) for sticker in row
        )
    return result
