"""Tests for the connection callbacks and advertisement matching."""

from unittest.mock import MagicMock

from micube_ble import (
    SOLVED_FRAME,
    Direction,
    Face,
    MiCubeConnection,
    Move,
    match_advertisement,
)
from micube_ble.discovery import ADVERTISED_SERVICE_UUIDS, LOCAL_NAME_PREFIX
from micube_ble.helpers.crypto import obfuscate, pack_frame


def test_notification_fires_movement_and_state_callbacks():
    connection = MiCubeConnection()
    on_move = MagicMock()
    on_state = MagicMock()
    connection.add_movement_callback(on_move)
    connection.register_callback(on_state)

    connection._cube_notification_handler(
        None, bytearray(obfuscate(pack_frame(SOLVED_FRAME), 1, 2))
    )

    on_move.assert_called_once_with(Move(Face.LEFT, Direction.COUNTER_CLOCKWISE))
    on_state.assert_called_once_with()
    assert connection.data.is_solved
    assert connection.data.last_move == "L'"


def test_undecodable_notification_skips_movement(solved_frame):
    connection = MiCubeConnection()
    on_move = MagicMock()
    on_state = MagicMock()
    connection.add_movement_callback(on_move)
    connection.register_callback(on_state)
    solved_frame[28:31] = [1, 1, 1]

    connection._cube_notification_handler(None, bytearray(pack_frame(solved_frame)))

    on_move.assert_not_called()
    on_state.assert_called_once_with()


def test_unsubscribe_and_remove_callbacks():
    connection = MiCubeConnection()
    on_move = MagicMock()
    on_state = MagicMock()
    unsubscribe = connection.register_callback(on_state)
    connection.add_movement_callback(on_move)
    unsubscribe()
    connection.remove_movement_callback(on_move)

    connection._cube_notification_handler(None, bytearray(pack_frame(SOLVED_FRAME)))

    on_move.assert_not_called()
    on_state.assert_not_called()


def test_system_notification_sets_battery():
    connection = MiCubeConnection()
    connection._system_notification_handler(None, bytearray([0xB5, 64]))
    assert connection.data.battery_level == 64


def test_disconnect_marks_unavailable():
    connection = MiCubeConnection()
    connection._is_connected = True
    connection._handle_disconnect(MagicMock())
    assert not connection.is_connected
    assert not connection.available


def test_match_by_name():
    assert match_advertisement("GiS123", None)
    assert match_advertisement("GiC4567", [])


def test_match_by_service_uuid():
    uuids = ["0000AADB-0000-1000-8000-00805F9B34FB"]
    assert match_advertisement(None, uuids)


def test_no_match():
    assert not match_advertisement("GAN356", ["0000fff0-0000-1000-8000-00805f9b34fb"])
    assert not match_advertisement(None, None)


def test_new_connection_is_idle():
    connection = MiCubeConnection()
    assert not connection.is_connected
    assert not connection.available
    assert not connection.connecting
    assert connection.data.state is None


def test_any_gi_name_matches():
    assert LOCAL_NAME_PREFIX == "Gi"
    assert match_advertisement("Gi2_A1B2", None)
    assert not match_advertisement("gis123", None)


def test_match_by_system_service_uuid():
    assert "0000aaaa-0000-1000-8000-00805f9b34fb" in ADVERTISED_SERVICE_UUIDS
    assert match_advertisement("", ["0000aaaa-0000-1000-8000-00805f9b34fb"])
