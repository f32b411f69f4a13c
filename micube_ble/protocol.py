"""Decoder for the Mi Smart Cube 36-nibble state frame.

Frame layout (one value per nibble, already de-obfuscated):

=======  ============================================================
Offset   Meaning
=======  ============================================================
0-7      Corner occupant per slot ULB ULF URF URB DLB DLF DRF DRB (1-8)
8-15     Corner orientation tag per slot (3 oriented, 2, 1)
16-27    Edge occupant per slot UB UL UF UR BL FL FR BR DB DL DF DR (1-12)
28-30    Edge flip pattern
31       Reserved, 0
32-33    Face code and direction of the current move
34-35    Face code and direction of the previous move
=======  ============================================================
"""

from __future__ import annotations

import logging
import operator
from typing import Dict, FrozenSet, List, Optional, Sequence, Tuple

from .const import (
    CORNER_COUNT,
    DEVICE_FACE_CODES,
    EDGE_COUNT,
    CornerOrientation,
    Direction,
    Edge,
    EdgeOrientation,
    Face,
)
from .cube_model import Cubie, CubeState
from .exceptions import (
    InvalidFlipPattern,
    InvalidFrameLength,
    InvalidMoveFace,
    InvalidOrientation,
    InvalidPieceIndex,
)

_LOGGER = logging.getLogger(__name__)

FRAME_LENGTH = 36

CORNER_OFFSET = 0
CORNER_ORIENTATION_OFFSET = 8
EDGE_OFFSET = 16
FLIP_OFFSET = 28
RESERVED_OFFSET = 31
MOVE_OFFSET = 32
LAST_MOVE_OFFSET = 34

# Direction code 1 is stored as clockwise; every other code as counter-clockwise.
CLOCKWISE_CODE = 1
COUNTER_CLOCKWISE_CODE = 3

BACK_FLIP_EDGES: FrozenSet[Edge] = frozenset({Edge.UB, Edge.BL, Edge.BR, Edge.DB})
FRONT_FLIP_EDGES: FrozenSet[Edge] = frozenset({Edge.UF, Edge.FL, Edge.FR, Edge.DF})

FLIP_PATTERNS: Dict[Tuple[int, int, int], FrozenSet[Edge]] = {
    (0x00, 0x00, 0x00): frozenset(),
    (0x08, 0x09, 0x08): BACK_FLIP_EDGES,
    (0x02, 0x06, 0x02): FRONT_FLIP_EDGES,
    (0x0A, 0x0F, 0x0A): BACK_FLIP_EDGES | FRONT_FLIP_EDGES,
}

SOLVED_FRAME: Tuple[int, ...] = (
    1, 2, 3, 4, 5, 6, 7, 8,
    3, 3, 3, 3, 3, 3, 3, 3,
    1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12,
    0, 0, 0, 0,
    5, 3, 5, 1,
)


def _integer(frame: Sequence[int], offset: int) -> Optional[int]:
    """Return the value at offset as a plain int, or None if it is not integral.

    Anything implementing ``__index__`` is accepted; booleans are not.
    """
    value = frame[offset]
    if isinstance(value, bool):
        return None
    try:
        return operator.index(value)
    except TypeError:
        return None


def _piece(frame: Sequence[int], offset: int, count: int) -> int:
    value = _integer(frame, offset)
    if value is None or not 1 <= value <= count:
        raise InvalidPieceIndex(offset, frame[offset])
    return value - 1


def _corner_orientation(frame: Sequence[int], offset: int) -> CornerOrientation:
    value = _integer(frame, offset)
    try:
        return CornerOrientation(value)
    except ValueError:
        raise InvalidOrientation(offset, frame[offset]) from None


def _move(
    frame: Sequence[int], offset: int
) -> Tuple[Optional[Face], Optional[Direction]]:
    code = _integer(frame, offset)
    if code == 0:
        return None, None
    face = DEVICE_FACE_CODES.get(code)
    if face is None:
        raise InvalidMoveFace(offset, frame[offset])
    if _integer(frame, offset + 1) == CLOCKWISE_CODE:
        return face, Direction.CLOCKWISE
    return face, Direction.COUNTER_CLOCKWISE


def decode_frame(frame: Sequence[int]) -> CubeState:
    """Decode a 36-value frame into a cube state.

    Raises a DecodeError subclass when the frame is malformed. Permutation
    and parity invariants are not checked here; call ``validate`` on the
    result for that.
    """
    if len(frame) != FRAME_LENGTH:
        raise InvalidFrameLength(len(frame))

    corners = tuple(
        Cubie(
            _piece(frame, CORNER_OFFSET + slot, CORNER_COUNT),
            _corner_orientation(frame, CORNER_ORIENTATION_OFFSET + slot),
        )
        for slot in range(CORNER_COUNT)
    )

    flipped = FLIP_PATTERNS.get(
        tuple(_integer(frame, FLIP_OFFSET + i) for i in range(3))
    )
    if flipped is None:
        raise InvalidFlipPattern(tuple(frame[FLIP_OFFSET:FLIP_OFFSET + 3]))

    edges = tuple(
        Cubie(
            _piece(frame, EDGE_OFFSET + slot, EDGE_COUNT),
            EdgeOrientation.FLIPPED if slot in flipped else EdgeOrientation.ORIENTED,
        )
        for slot in Edge
    )

    if _integer(frame, RESERVED_OFFSET) != 0:
        _LOGGER.debug(
            "Reserved frame value is %s, expected 0", frame[RESERVED_OFFSET]
        )

    turned_face, turned_direction = _move(frame, MOVE_OFFSET)
    last_turned_face, last_turned_direction = _move(frame, LAST_MOVE_OFFSET)

    return CubeState(
        edges=edges,
        corners=corners,
        turned_face=turned_face,
        turned_direction=turned_direction,
        last_turned_face=last_turned_face,
        last_turned_direction=last_turned_direction,
    )


def _encode_move(face: Optional[Face], direction: Optional[Direction]) -> List[int]:
    if face is None:
        return [0, 0]
    code = next(code for code, value in DEVICE_FACE_CODES.items() if value is face)
    if direction is Direction.CLOCKWISE:
        return [code, CLOCKWISE_CODE]
    return [code, COUNTER_CLOCKWISE_CODE]


def encode_frame(state: CubeState) -> List[int]:
    """Encode a cube state back into a 36-value frame.

    Raises ValueError when the flipped edges form a set the device cannot
    express.
    """
    flipped = frozenset(
        Edge(slot)
        for slot, cubie in enumerate(state.edges)
        if cubie.orientation is EdgeOrientation.FLIPPED
    )
    triple = next(
        (pattern for pattern, edges in FLIP_PATTERNS.items() if edges == flipped),
        None,
    )
    if triple is None:
        raise ValueError(
            "Flipped edges {} have no frame encoding".format(
                sorted(edge.name for edge in flipped)
            )
        )

    frame = [cubie.index + 1 for cubie in state.corners]
    frame.extend(int(cubie.orientation) for cubie in state.corners)
    frame.extend(cubie.index + 1 for cubie in state.edges)
    frame.extend(triple)
    frame.append(0)
    frame.extend(_encode_move(state.turned_face, state.turned_direction))
    frame.extend(_encode_move(state.last_turned_face, state.last_turned_direction))
    return frame
