"""Notification parser for the Mi Smart Cube."""

from __future__ import annotations

import logging

from .cube_model import CubeState
from .exceptions import DecodeError
from .helpers.crypto import deobfuscate, unpack_frame
from .helpers.state import update_cube_state
from .models import CubeData
from .protocol import FRAME_LENGTH, decode_frame

_LOGGER = logging.getLogger(__name__)


class MiCubeDataParser:
    """Turn raw notifications into cube states and keep the latest snapshot."""

    def __init__(self, data: CubeData | None = None) -> None:
        """Initialize the parser."""
        self.data = data or CubeData()

    def parse_cube_value(self, raw: bytes) -> CubeState | None:
        """Parse a data notification and return the decoded state.

        Frames that fail to decode are logged and dropped; the previous
        snapshot is kept.
        """
        if not raw:
            return None

        if len(raw) * 2 < FRAME_LENGTH:
            _LOGGER.debug("Dropping short notification: %s", bytes(raw).hex())
            return None

        frame = unpack_frame(deobfuscate(raw), FRAME_LENGTH)
        try:
            state = decode_frame(frame)
        except DecodeError as err:
            _LOGGER.debug("Dropping undecodable frame %s: %s", frame, err)
            return None

        self.data.frame = frame
        update_cube_state(self.data, state)
        return state

    def parse_battery_value(self, raw: bytes) -> None:
        """Parse battery value from the system service notification."""
        if len(raw) < 2:
            return
        self.data.battery_level = raw[1]
