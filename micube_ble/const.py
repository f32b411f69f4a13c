"""Enumerations and fixed tables shared by the cube model."""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import Dict, Tuple


class Face(IntEnum):
    """Faces of the cube as held by the device (green up, white front)."""

    UP = 0
    LEFT = 1
    FRONT = 2
    RIGHT = 3
    BACK = 4
    DOWN = 5

    @property
    def letter(self) -> str:
        """Return the single letter used in move notation."""
        return self.name[0]


class Color(IntEnum):
    """Sticker colors."""

    BLUE = 0
    YELLOW = 1
    ORANGE = 2
    WHITE = 3
    RED = 4
    GREEN = 5

    @property
    def letter(self) -> str:
        return self.name[0]


class Edge(IntEnum):
    """Edge slots and the identities of the edge cubies solved in them."""

    UB = 0
    UL = 1
    UF = 2
    UR = 3
    BL = 4
    FL = 5
    FR = 6
    BR = 7
    DB = 8
    DL = 9
    DF = 10
    DR = 11


class Corner(IntEnum):
    """Corner slots and the identities of the corner cubies solved in them."""

    ULB = 0
    ULF = 1
    URF = 2
    URB = 3
    DLB = 4
    DLF = 5
    DRF = 6
    DRB = 7


class EdgeOrientation(Enum):
    """Orientation of an edge cubie in its slot."""

    ORIENTED = 0
    FLIPPED = 1


class CornerOrientation(IntEnum):
    """Orientation of a corner cubie, valued by the device's raw tag."""

    ORIENTED = 3
    ROTATED = 2
    ROTATED_TWICE = 1

    @property
    def twist(self) -> int:
        """Return the twist as an element of the 3-cycle (0, 1 or 2)."""
        return (3 - self.value) % 3


class Direction(Enum):
    """Turn direction of a face."""

    CLOCKWISE = 0
    COUNTER_CLOCKWISE = 1


SOLVED_CENTERS: Tuple[Color, ...] = (
    Color.GREEN,  # UP
    Color.RED,  # LEFT
    Color.WHITE,  # FRONT
    Color.ORANGE,  # RIGHT
    Color.YELLOW,  # BACK
    Color.BLUE,  # DOWN
)

# Move face codes reported by the device name the face by its center color.
DEVICE_FACE_CODES: Dict[int, Face] = {
    1: Face.DOWN,  # blue
    2: Face.BACK,  # yellow
    3: Face.RIGHT,  # orange
    4: Face.FRONT,  # white
    5: Face.LEFT,  # red
    6: Face.UP,  # green
}

EDGE_COUNT = len(Edge)
CORNER_COUNT = len(Corner)
