"""Opt-in checks that a cube state is physically reachable."""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Sequence

from .const import CORNER_COUNT, EDGE_COUNT, EdgeOrientation
from .exceptions import Invariant, StateInvariantViolation

if TYPE_CHECKING:
    from .cube_model import CubeState


def permutation_parity(indices: Sequence[int]) -> int:
    """Return 0 for an even permutation and 1 for an odd one."""
    seen = [False] * len(indices)
    parity = 0
    for start in range(len(indices)):
        if seen[start]:
            continue
        length = 0
        position = start
        while not seen[position]:
            seen[position] = True
            position = indices[position]
            length += 1
        parity ^= (length - 1) & 1
    return parity


def check_state(state: CubeState) -> List[Invariant]:
    """Return the invariants broken by a state, in a fixed order."""
    violations: List[Invariant] = []
    edge_indices = [cubie.index for cubie in state.edges]
    corner_indices = [cubie.index for cubie in state.corners]

    edges_permuted = sorted(edge_indices) == list(range(EDGE_COUNT))
    corners_permuted = sorted(corner_indices) == list(range(CORNER_COUNT))
    if not edges_permuted:
        violations.append(Invariant.EDGE_PERMUTATION)
    if not corners_permuted:
        violations.append(Invariant.CORNER_PERMUTATION)

    flipped = sum(
        1 for cubie in state.edges if cubie.orientation is EdgeOrientation.FLIPPED
    )
    if flipped % 2:
        violations.append(Invariant.EDGE_FLIP_PARITY)

    twist = sum(cubie.orientation.twist for cubie in state.corners)
    if twist % 3:
        violations.append(Invariant.CORNER_TWIST_PARITY)

    # Parity is meaningless unless both index lists are permutations.
    if edges_permuted and corners_permuted:
        if permutation_parity(edge_indices) != permutation_parity(corner_indices):
            violations.append(Invariant.PERMUTATION_PARITY)
    return violations


def validate_state(state: CubeState) -> None:
    """Raise StateInvariantViolation for the first invariant a state breaks."""
    violations = check_state(state)
    if violations:
        raise StateInvariantViolation(violations[0])
