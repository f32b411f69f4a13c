"""Exceptions raised by the Mi Smart Cube library."""

from __future__ import annotations

from enum import Enum


class MiCubeError(Exception):
    """Base class for Mi Smart Cube errors."""


class DecodeError(MiCubeError, ValueError):
    """Raised when a sensor frame cannot be decoded into a cube state."""


class InvalidFrameLength(DecodeError):
    """Raised when a frame does not hold exactly 36 values."""

    def __init__(self, length: int) -> None:
        super().__init__(f"Frame must hold 36 values, got {length}")
        self.length = length


class InvalidPieceIndex(DecodeError):
    """Raised when a frame names a cubie outside its valid range."""

    def __init__(self, offset: int, value: int) -> None:
        super().__init__(f"Invalid piece identity {value!r} at offset {offset}")
        self.offset = offset
        self.value = value


class InvalidOrientation(DecodeError):
    """Raised when a corner orientation tag is not one of 1, 2 or 3."""

    def __init__(self, offset: int, value: int) -> None:
        super().__init__(f"Invalid corner orientation {value!r} at offset {offset}")
        self.offset = offset
        self.value = value


class InvalidFlipPattern(DecodeError):
    """Raised when the edge flip triple matches no known pattern."""

    def __init__(self, triple: tuple[int, ...]) -> None:
        super().__init__(f"Unknown edge flip pattern {triple!r}")
        self.triple = triple


class InvalidMoveFace(DecodeError):
    """Raised when a move face code is outside 0..6."""

    def __init__(self, offset: int, value: int) -> None:
        super().__init__(f"Invalid move face code {value!r} at offset {offset}")
        self.offset = offset
        self.value = value


class Invariant(Enum):
    """Physical invariants a reachable cube state satisfies."""

    EDGE_PERMUTATION = "edge indices are not a permutation of 0..11"
    CORNER_PERMUTATION = "corner indices are not a permutation of 0..7"
    EDGE_FLIP_PARITY = "odd number of flipped edges"
    CORNER_TWIST_PARITY = "corner twist sum is not a multiple of 3"
    PERMUTATION_PARITY = "edge and corner permutation parities differ"


class StateInvariantViolation(MiCubeError):
    """Raised by explicit validation when a state is not physically reachable."""

    def __init__(self, invariant: Invariant) -> None:
        super().__init__(invariant.value)
        self.invariant = invariant
