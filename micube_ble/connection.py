"""Connection management for the Mi Smart Cube."""

from __future__ import annotations

import asyncio
import logging
from typing import Callable, Optional, Set

from bleak import BleakClient
from bleak.backends.device import BLEDevice
from bleak.exc import BleakError
from bleak_retry_connector import establish_connection

from .cube_model import Move
from .models import CubeData
from .parser import MiCubeDataParser

_LOGGER = logging.getLogger(__name__)

CONNECT_TIMEOUT = 10.0
BATTERY_TIMEOUT = 2.0

DATA_SERVICE_UUID = "0000aadb-0000-1000-8000-00805f9b34fb"
DATA_CHARACTERISTIC_UUID = "0000aadc-0000-1000-8000-00805f9b34fb"

SYSTEM_SERVICE_UUID = "0000aaaa-0000-1000-8000-00805f9b34fb"
SYSTEM_READ_UUID = "0000aaab-0000-1000-8000-00805f9b34fb"
SYSTEM_WRITE_UUID = "0000aaac-0000-1000-8000-00805f9b34fb"

BATTERY_REQUEST = bytes([0xB5])


class MiCubeConnection:
    """Manager for a Mi Smart Cube Bluetooth connection.

    State callbacks take no arguments and run after every notification and
    connection change. Movement callbacks receive the decoded ``Move``.
    """

    manufacturer = "Xiaomi"
    model = "Mi Smart Cube"

    def __init__(self) -> None:
        """Initialize the connection manager."""
        self._state_callbacks: Set[Callable[[], None]] = set()
        self._movement_callbacks: Set[Callable[[Move], None]] = set()
        self._is_connected = False
        self._connection_lock = asyncio.Lock()
        self._client: Optional[BleakClient] = None
        self._data_parser = MiCubeDataParser()
        self._battery_event: asyncio.Event | None = None

    @property
    def data(self) -> CubeData:
        """Return the latest parsed data."""
        return self._data_parser.data

    @property
    def is_connected(self) -> bool:
        """Return whether the cube is connected."""
        return self._is_connected

    @property
    def available(self) -> bool:
        """Return whether the connection is available."""
        return (
            self._is_connected
            and self._client is not None
            and self._client.is_connected
        )

    @property
    def connecting(self) -> bool:
        """Return whether a connect or cleanup is in progress."""
        return self._connection_lock.locked()

    def register_callback(self, callback: Callable[[], None]) -> Callable[[], None]:
        """Register a state callback and return a function that removes it."""

        def unsubscribe() -> None:
            self._state_callbacks.discard(callback)

        self._state_callbacks.add(callback)
        return unsubscribe

    def add_movement_callback(self, callback: Callable[[Move], None]) -> None:
        """Add a callback for movement events."""
        self._movement_callbacks.add(callback)

    def remove_movement_callback(self, callback: Callable[[Move], None]) -> None:
        """Remove a callback for movement events."""
        self._movement_callbacks.discard(callback)

    def _notify_state_change(self) -> None:
        for callback in list(self._state_callbacks):
            callback()

    def _notify_movement(self, movement: Move) -> None:
        for callback in list(self._movement_callbacks):
            callback(movement)

    async def connect(self, address: str, device: BLEDevice | None = None) -> None:
        """Connect to the cube and subscribe to state notifications."""
        async with self._connection_lock:
            await self._cleanup_connection()
            if device is None or device.address.lower() != address.lower():
                raise BleakError(f"Mi Smart Cube {address} not available")
            _LOGGER.info("Attempting to connect to Mi Smart Cube %s", address)
            try:
                self._client = await establish_connection(
                    BleakClient,
                    device,
                    self.model,
                    disconnected_callback=self._handle_disconnect,
                    timeout=CONNECT_TIMEOUT,
                )
            except Exception as err:
                _LOGGER.warning("Mi Smart Cube establish_connection failed: %s", err)
                raise
            self._is_connected = True
            await self._client.start_notify(
                DATA_CHARACTERISTIC_UUID,
                self._cube_notification_handler,
            )

            try:
                await self._client.start_notify(
                    SYSTEM_READ_UUID,
                    self._system_notification_handler,
                )
            except (BleakError, asyncio.TimeoutError) as err:
                _LOGGER.debug("System notifications not enabled: %s", err)

            try:
                raw_state = await self._client.read_gatt_char(DATA_CHARACTERISTIC_UUID)
                self._data_parser.parse_cube_value(bytes(raw_state))
            except (BleakError, asyncio.TimeoutError) as err:
                _LOGGER.debug("Failed to read initial state: %s", err)

            self._notify_state_change()

    async def disconnect(self) -> None:
        """Disconnect from the cube."""
        async with self._connection_lock:
            await self._cleanup_connection()

    async def _cleanup_connection(self) -> None:
        """Clean up any existing connection."""
        if self._client is None:
            return
        client = self._client
        try:
            for uuid in (DATA_CHARACTERISTIC_UUID, SYSTEM_READ_UUID):
                try:
                    await client.stop_notify(uuid)
                except (BleakError, KeyError, ValueError) as err:
                    _LOGGER.debug("Could not stop notifications on %s: %s", uuid, err)
            await client.disconnect()
        except (BleakError, asyncio.TimeoutError) as err:
            _LOGGER.debug("Error during connection cleanup: %s", err)
        finally:
            self._client = None
            self._is_connected = False
            self._notify_state_change()

    async def request_battery(self) -> Optional[int]:
        """Request battery level from the cube."""
        if not self._client or not self._client.is_connected:
            return None
        self._battery_event = asyncio.Event()
        try:
            await self._client.write_gatt_char(SYSTEM_WRITE_UUID, BATTERY_REQUEST)
        except BleakError as err:
            _LOGGER.debug("Failed to request battery: %s", err)
            return None

        try:
            await asyncio.wait_for(self._battery_event.wait(), timeout=BATTERY_TIMEOUT)
        except asyncio.TimeoutError:
            _LOGGER.debug("Battery request timed out")
            return None
        return self._data_parser.data.battery_level

    def _cube_notification_handler(self, sender: object, data: bytearray) -> None:
        """Handle notifications from the cube data characteristic."""
        try:
            state = self._data_parser.parse_cube_value(bytes(data))
            if state is not None and state.move is not None:
                self._notify_movement(state.move)
            self._notify_state_change()
        except Exception as err:
            _LOGGER.error("Error handling cube notification: %s", err)

    def _system_notification_handler(self, sender: object, data: bytearray) -> None:
        """Handle notifications from the system read characteristic."""
        try:
            self._data_parser.parse_battery_value(bytes(data))
            if self._battery_event is not None:
                self._battery_event.set()
            self._notify_state_change()
        except Exception as err:
            _LOGGER.debug("Error handling system notification: %s", err)

    def _handle_disconnect(self, client: BleakClient) -> None:
        """Handle disconnection event."""
        self._is_connected = False
        self._notify_state_change()
        _LOGGER.debug("Mi Smart Cube disconnected")
