"""Tests for the text renderings."""

from micube_ble import SOLVED_FRAME, CubeState, decode_frame
from micube_ble.helpers.render import format_frame, render_net


def test_render_solved_net():
    expected = "\n".join(
        ["      G G G"] * 3
        + ["R R R W W W O O O Y Y Y"] * 3
        + ["      B B B"] * 3
    )
    assert render_net(CubeState()) == expected


def test_render_u_turn_net(u_turn_frame):
    lines = render_net(decode_frame(u_turn_frame)).splitlines()
    assert len(lines) == 9
    assert lines[3] == "W W W O O O Y Y Y R R R"
    assert lines[4] == "R R R W W W O O O Y Y Y"


def test_format_frame():
    assert format_frame(SOLVED_FRAME) == (
        "1 2 3 4 5 6 7 8\n"
        "3 3 3 3 3 3 3 3\n"
        "1 2 3 4 5 6 7 8 9 A B C\n"
        "0 0 0 0\n"
        "5 3 5 1"
    )
