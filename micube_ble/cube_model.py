"""Cubie-level model of a 3x3x3 cube.

The cube is held with green up, white front, red left, orange right, yellow
back and blue down. Each of the 12 edge and 8 corner slots stores the identity
of the cubie sitting in it together with that cubie's orientation. Centers
never move.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple, Union

from . import colors, faces, validation
from .const import (
    CORNER_COUNT,
    EDGE_COUNT,
    SOLVED_CENTERS,
    Color,
    Corner,
    CornerOrientation,
    Direction,
    Edge,
    EdgeOrientation,
    Face,
)
from .exceptions import Invariant


@dataclass(frozen=True)
class Cubie:
    """A slot's occupant and its orientation."""

    index: int
    orientation: Union[EdgeOrientation, CornerOrientation]


@dataclass(frozen=True)
class Move:
    """A face turn reported by the cube."""

    face: Face
    direction: Direction

    @property
    def notation(self) -> str:
        """Return the move in Singmaster notation, e.g. ``R'``."""
        if self.direction is Direction.COUNTER_CLOCKWISE:
            return f"{self.face.letter}'"
        return self.face.letter


def _solved_edges() -> Tuple[Cubie, ...]:
    return tuple(Cubie(i, EdgeOrientation.ORIENTED) for i in range(EDGE_COUNT))


def _solved_corners() -> Tuple[Cubie, ...]:
    return tuple(Cubie(i, CornerOrientation.ORIENTED) for i in range(CORNER_COUNT))


@dataclass(frozen=True)
class CubeState:
    """Immutable cube state plus metadata about the move that produced it.

    Two states are equal when their edge slots, corner slots and centers
    match; the move metadata is not compared.
    """

    edges: Tuple[Cubie, ...] = field(default_factory=_solved_edges)
    corners: Tuple[Cubie, ...] = field(default_factory=_solved_corners)
    centers: Tuple[Color, ...] = SOLVED_CENTERS
    turned_face: Optional[Face] = field(default=None, compare=False)
    turned_direction: Optional[Direction] = field(default=None, compare=False)
    last_turned_face: Optional[Face] = field(default=None, compare=False)
    last_turned_direction: Optional[Direction] = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if len(self.edges) != EDGE_COUNT:
            raise ValueError(f"Expected {EDGE_COUNT} edge slots, got {len(self.edges)}")
        if len(self.corners) != CORNER_COUNT:
            raise ValueError(
                f"Expected {CORNER_COUNT} corner slots, got {len(self.corners)}"
            )
        if len(self.centers) != len(Face):
            raise ValueError(f"Expected {len(Face)} centers, got {len(self.centers)}")
        # Accept lists from callers but store tuples so the state stays hashable.
        object.__setattr__(self, "edges", tuple(self.edges))
        object.__setattr__(self, "corners", tuple(self.corners))
        object.__setattr__(self, "centers", tuple(self.centers))

    @classmethod
    def solved(cls) -> "CubeState":
        """Return the canonical solved state."""
        return cls()

    def edge(self, slot: Edge) -> Cubie:
        """Return the cubie sitting in an edge slot."""
        return self.edges[slot]

    def corner(self, slot: Corner) -> Cubie:
        """Return the cubie sitting in a corner slot."""
        return self.corners[slot]

    def center(self, face: Face) -> Color:
        """Return the center color of a face."""
        return self.centers[face]

    def is_solved(self) -> bool:
        """Return True if every cubie is home and oriented."""
        for slot, cubie in enumerate(self.edges):
            if cubie.index != slot or cubie.orientation is not EdgeOrientation.ORIENTED:
                return False
        for slot, cubie in enumerate(self.corners):
            if (
                cubie.index != slot
                or cubie.orientation is not CornerOrientation.ORIENTED
            ):
                return False
        return True

    @property
    def move(self) -> Optional[Move]:
        """Return the move reported with this state, if any."""
        if self.turned_face is None or self.turned_direction is None:
            return None
        return Move(self.turned_face, self.turned_direction)

    @property
    def last_move(self) -> Optional[Move]:
        """Return the move reported before the current one, if any."""
        if self.last_turned_face is None or self.last_turned_direction is None:
            return None
        return Move(self.last_turned_face, self.last_turned_direction)

    def edge_colors(self, slot: Edge) -> Tuple[Color, Color]:
        return colors.edge_colors(self, slot)

    def corner_colors(self, slot: Corner) -> Tuple[Color, Color, Color]:
        return colors.corner_colors(self, slot)

    def color(self, face: Face, row: int, col: int) -> Color:
        return faces.color(self, face, row, col)

    def face_colors(self, face: Face) -> Tuple[Tuple[Color, ...], ...]:
        return faces.face_colors(self, face)

    def facelets(self) -> str:
        return faces.facelets(self)

    def face_states(self) -> Dict[str, bool]:
        return faces.face_states(self)

    def check(self) -> list[Invariant]:
        """Return every physical invariant this state breaks."""
        return validation.check_state(self)

    def validate(self) -> None:
        """Raise StateInvariantViolation if the state is not reachable."""
        validation.validate_state(self)
