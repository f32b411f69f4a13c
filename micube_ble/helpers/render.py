"""Plain-text rendering of a cube state as an unfolded net."""

from __future__ import annotations

from typing import List, Sequence

from ..const import Color, Face
from ..cube_model import CubeState

BAND_FACES = (Face.LEFT, Face.FRONT, Face.RIGHT, Face.BACK)
INDENT = " " * 6


def _row(stickers: Sequence[Color]) -> str:
    return "".join(f"{sticker.letter} " for sticker in stickers)


def render_net(state: CubeState) -> str:
    """Return the net with UP above and DOWN below the L F R B band.

          G G G
          G G G
          G G G
    R R R W W W O O O Y Y Y
    ...
    """
    lines: List[str] = []
    for row in state.face_colors(Face.UP):
        lines.append(INDENT + _row(row))
    bands = [state.face_colors(face) for face in BAND_FACES]
    for row in range(3):
        lines.append("".join(_row(grid[row]) for grid in bands))
    for row in state.face_colors(Face.DOWN):
        lines.append(INDENT + _row(row))
    return "\n".join(line.rstrip() for line in lines)


def format_frame(frame: Sequence[int]) -> str:
    """Return a frame as hex nibbles grouped by field, one group per line."""
    groups = (frame[0:8], frame[8:16], frame[16:28], frame[28:32], frame[32:36])
    return "\n".join(" ".join(f"{value:X}" for value in group) for group in groups)
