"""Xiaomi Mi Smart Cube state model and Bluetooth library."""

from __future__ import annotations

from .const import (
    Color,
    Corner,
    CornerOrientation,
    Direction,
    Edge,
    EdgeOrientation,
    Face,
)
from .cube_model import Cubie, CubeState, Move
from .exceptions import (
    DecodeError,
    InvalidFlipPattern,
    InvalidFrameLength,
    InvalidMoveFace,
    InvalidOrientation,
    InvalidPieceIndex,
    Invariant,
    MiCubeError,
    StateInvariantViolation,
)
from .models import CubeData
from .protocol import SOLVED_FRAME, decode_frame, encode_frame
from .connection import MiCubeConnection
from .discovery import match_advertisement

__all__ = [
    "Color",
    "Corner",
    "CornerOrientation",
    "CubeData",
    "CubeState",
    "Cubie",
    "DecodeError",
    "Direction",
    "Edge",
    "EdgeOrientation",
    "Face",
    "InvalidFlipPattern",
    "InvalidFrameLength",
    "InvalidMoveFace",
    "InvalidOrientation",
    "InvalidPieceIndex",
    "Invariant",
    "MiCubeError",
    "Move",
    "SOLVED_FRAME",
    "StateInvariantViolation",
    "MiCubeConnection",
    "decode_frame",
    "encode_frame",
    "match_advertisement",
]
