"""Tests for edge and corner sticker colors."""

import dataclasses

import pytest

from micube_ble import Color, Corner, CornerOrientation, CubeState, Cubie, Edge, EdgeOrientation
from micube_ble.colors import CORNER_COLORS, EDGE_COLORS, corner_color_order

B, Y, O, W, R, G = (
    Color.BLUE,
    Color.YELLOW,
    Color.ORANGE,
    Color.WHITE,
    Color.RED,
    Color.GREEN,
)

ORIENTED = CornerOrientation.ORIENTED
ROTATED = CornerOrientation.ROTATED
ROTATED_TWICE = CornerOrientation.ROTATED_TWICE

# Colors shown by each corner in its home slot, in Z, Y, X order.
HOME_SLOT_CORNERS = [
    (Corner.ULB, ORIENTED, (G, R, Y)),
    (Corner.ULB, ROTATED, (R, Y, G)),
    (Corner.ULB, ROTATED_TWICE, (Y, R, G)),
    (Corner.ULF, ORIENTED, (G, R, W)),
    (Corner.ULF, ROTATED, (R, W, G)),
    (Corner.ULF, ROTATED_TWICE, (W, R, G)),
    (Corner.URF, ORIENTED, (G, O, W)),
    (Corner.URF, ROTATED, (O, W, G)),
    (Corner.URF, ROTATED_TWICE, (W, O, G)),
    (Corner.URB, ORIENTED, (G, O, Y)),
    (Corner.URB, ROTATED, (O, Y, G)),
    (Corner.URB, ROTATED_TWICE, (Y, O, G)),
    (Corner.DLB, ORIENTED, (B, R, Y)),
    (Corner.DLB, ROTATED, (R, Y, B)),
    (Corner.DLB, ROTATED_TWICE, (Y, R, B)),
    (Corner.DLF, ORIENTED, (B, R, W)),
    (Corner.DLF, ROTATED, (R, W, B)),
    (Corner.DLF, ROTATED_TWICE, (W, R, B)),
    (Corner.DRF, ORIENTED, (B, O, W)),
    (Corner.DRF, ROTATED, (O, W, B)),
    (Corner.DRF, ROTATED_TWICE, (W, O, B)),
    (Corner.DRB, ORIENTED, (B, O, Y)),
    (Corner.DRB, ROTATED, (O, Y, B)),
    (Corner.DRB, ROTATED_TWICE, (Y, O, B)),
]


def _with_corner(slot, piece, orientation):
    corners = list(CubeState().corners)
    corners[slot] = Cubie(piece, orientation)
    return CubeState(corners=tuple(corners))


@pytest.mark.parametrize(("corner", "orientation", "expected"), HOME_SLOT_CORNERS)
def test_corner_colors_in_home_slot(corner, orientation, expected):
    state = _with_corner(corner, corner, orientation)
    assert state.corner_colors(corner) == expected


@pytest.mark.parametrize("corner", list(Corner))
def test_corner_colors_in_neighbouring_slot(corner):
    # Slot and piece differ by one, so the parity term is odd.
    slot = Corner(corner ^ 1)
    c0, c1, c2 = CORNER_COLORS[corner]
    assert _with_corner(slot, corner, ORIENTED).corner_colors(slot) == (c0, c2, c1)
    assert _with_corner(slot, corner, ROTATED).corner_colors(slot) == (c1, c0, c2)
    assert _with_corner(slot, corner, ROTATED_TWICE).corner_colors(slot) == (c2, c1, c0)


def test_parity_follows_piece_plus_slot():
    # URB (3) in ULF (1) is even parity, so no swap.
    state = _with_corner(Corner.ULF, Corner.URB, ORIENTED)
    assert state.corner_colors(Corner.ULF) == (G, O, Y)


@pytest.mark.parametrize(
    ("orientation", "odd", "expected"),
    [
        (ORIENTED, False, (0, 1, 2)),
        (ORIENTED, True, (0, 2, 1)),
        (ROTATED, False, (2, 0, 1)),
        (ROTATED, True, (1, 0, 2)),
        (ROTATED_TWICE, True, (2, 1, 0)),
    ],
)
def test_corner_color_order(orientation, odd, expected):
    slot = 1 if odd else 0
    assert corner_color_order(orientation, 0, slot, solved=False) == expected
    assert corner_color_order(orientation, 0, slot, solved=True) == expected


def test_twice_rotated_even_parity_depends_on_solved_flag():
    assert corner_color_order(ROTATED_TWICE, 2, 0, solved=True) == (1, 2, 0)
    assert corner_color_order(ROTATED_TWICE, 2, 0, solved=False) == (2, 1, 0)


def test_solved_corners_show_home_colors():
    state = CubeState()
    for corner in Corner:
        assert state.corner_colors(corner) == CORNER_COLORS[corner]


def test_edge_pairs():
    state = CubeState()
    assert state.edge_colors(Edge.UB) == (G, Y)
    assert state.edge_colors(Edge.BR) == (Y, O)
    assert state.edge_colors(Edge.DF) == (B, W)
    for edge in Edge:
        assert state.edge_colors(edge) == EDGE_COLORS[edge]


@pytest.mark.parametrize("edge", list(Edge))
def test_flipped_edge_reverses_pair(edge):
    oriented = CubeState()
    edges = list(oriented.edges)
    edges[edge] = Cubie(edge, EdgeOrientation.FLIPPED)
    flipped = dataclasses.replace(oriented, edges=tuple(edges))
    first, second = oriented.edge_colors(edge)
    assert flipped.edge_colors(edge) == (second, first)


def test_edge_colors_follow_the_occupying_piece():
    edges = list(CubeState().edges)
    edges[Edge.UB] = Cubie(Edge.DR, EdgeOrientation.ORIENTED)
    state = CubeState(edges=tuple(edges))
    assert state.edge_colors(Edge.UB) == (B, O)
