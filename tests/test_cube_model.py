"""Tests for the cubie model."""

import dataclasses

import pytest

from micube_ble import (
    Color,
    Corner,
    CornerOrientation,
    CubeState,
    Cubie,
    Direction,
    Edge,
    EdgeOrientation,
    Face,
    Move,
    decode_frame,
)


def _replace_edge(state, slot, cubie):
    edges = list(state.edges)
    edges[slot] = cubie
    return dataclasses.replace(state, edges=tuple(edges))


def _replace_corner(state, slot, cubie):
    corners = list(state.corners)
    corners[slot] = cubie
    return dataclasses.replace(state, corners=tuple(corners))


def test_default_state_is_solved():
    state = CubeState()
    assert state.is_solved()
    assert all(state.edge(slot) == Cubie(slot, EdgeOrientation.ORIENTED) for slot in Edge)
    assert all(
        state.corner(slot) == Cubie(slot, CornerOrientation.ORIENTED) for slot in Corner
    )
    assert state.move is None
    assert state.last_move is None


def test_solved_centers():
    state = CubeState.solved()
    assert state.center(Face.UP) is Color.GREEN
    assert state.center(Face.LEFT) is Color.RED
    assert state.center(Face.FRONT) is Color.WHITE
    assert state.center(Face.RIGHT) is Color.ORANGE
    assert state.center(Face.BACK) is Color.YELLOW
    assert state.center(Face.DOWN) is Color.BLUE


def test_state_is_immutable():
    state = CubeState()
    with pytest.raises(dataclasses.FrozenInstanceError):
        state.edges = ()


def test_lists_are_stored_as_tuples():
    state = CubeState(edges=list(CubeState().edges))
    assert isinstance(state.edges, tuple)
    assert hash(state) == hash(CubeState())


def test_wrong_slot_counts_are_rejected():
    with pytest.raises(ValueError):
        CubeState(edges=CubeState().edges[:11])
    with pytest.raises(ValueError):
        CubeState(corners=CubeState().corners + CubeState().corners[:1])


def test_flipped_edge_is_not_solved():
    state = _replace_edge(CubeState(), Edge.DR, Cubie(Edge.DR, EdgeOrientation.FLIPPED))
    assert not state.is_solved()


def test_moved_edge_is_not_solved():
    state = _replace_edge(CubeState(), Edge.UB, Cubie(Edge.UL, EdgeOrientation.ORIENTED))
    assert not state.is_solved()


@pytest.mark.parametrize("slot", list(Corner))
def test_twisted_corner_is_not_solved(slot):
    state = _replace_corner(CubeState(), slot, Cubie(slot, CornerOrientation.ROTATED))
    assert not state.is_solved()


def test_last_two_corners_are_checked():
    state = _replace_corner(
        CubeState(), Corner.DRB, Cubie(Corner.DRF, CornerOrientation.ORIENTED)
    )
    assert not state.is_solved()


def test_equality_ignores_move_metadata(solved_frame):
    decoded = decode_frame(solved_frame)
    assert decoded.move is not None
    assert decoded == CubeState()
    assert hash(decoded) == hash(CubeState())


def test_equality_over_identical_frames(u_turn_frame):
    first = decode_frame(u_turn_frame)
    second = decode_frame(list(u_turn_frame))
    third = decode_frame(bytes(u_turn_frame))
    assert first == first
    assert first == second and second == first
    assert second == third and first == third


def test_states_from_different_frames_differ(solved_frame, u_turn_frame, f_turn_frame):
    solved = decode_frame(solved_frame)
    u_turn = decode_frame(u_turn_frame)
    f_turn = decode_frame(f_turn_frame)
    assert solved != u_turn
    assert u_turn != f_turn
    assert solved != f_turn


def test_single_orientation_difference_is_unequal(solved_frame):
    solved_frame[28:31] = [8, 9, 8]
    assert decode_frame(solved_frame) != CubeState()


def test_move_notation():
    assert Move(Face.RIGHT, Direction.CLOCKWISE).notation == "R"
    assert Move(Face.BACK, Direction.COUNTER_CLOCKWISE).notation == "B'"


def test_corner_twist_values():
    assert CornerOrientation.ORIENTED.twist == 0
    assert CornerOrientation.ROTATED.twist == 1
    assert CornerOrientation.ROTATED_TWICE.twist == 2
