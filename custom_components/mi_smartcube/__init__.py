"""The Mi Smart Cube integration."""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Any

from bleak.backends.device import BLEDevice
from homeassistant.components import bluetooth
from homeassistant.components.bluetooth import (
    BluetoothCallbackMatcher,
    BluetoothChange,
    BluetoothScanningMode,
    BluetoothServiceInfoBleak,
)
from homeassistant.config_entries import ConfigEntry
from homeassistant.const import CONF_ADDRESS
from homeassistant.core import HomeAssistant, callback
from homeassistant.exceptions import HomeAssistantError

from micube_ble import MiCubeConnection

DOMAIN = "mi_smartcube"

_LOGGER = logging.getLogger(__name__)

PLATFORMS: list[str] = ["binary_sensor", "sensor", "event"]

RECONNECT_RETRY_SECONDS = 2.5
RECONNECT_RETRY_WINDOW = 15.0


class MiSmartCubeError(HomeAssistantError):
    """Base class for Mi Smart Cube errors."""


class MiSmartCubeConnectionError(MiSmartCubeError):
    """Raised when the cube cannot be reached."""


class CubeConnector:
    """Keep a cube connected while it advertises."""

    def __init__(
        self, hass: HomeAssistant, address: str, connection: MiCubeConnection
    ) -> None:
        self.hass = hass
        self.address = address
        self.connection = connection
        self._in_progress = False
        self._retry_task: asyncio.Task | None = None
        self._last_advertisement: float | None = None
        self._was_available = connection.available

    def _ble_device(self, device: BLEDevice | None) -> BLEDevice:
        if device is not None and device.address.lower() == self.address.lower():
            return device
        found = bluetooth.async_ble_device_from_address(
            self.hass, self.address, connectable=True
        )
        if found is None:
            raise MiSmartCubeConnectionError(
                f"No connectable Bluetooth device for {self.address}"
            )
        return found

    async def async_connect(self, reason: str, device: BLEDevice | None = None) -> None:
        """Connect unless a connection is already up or being made."""
        if self._in_progress or self.connection.available:
            return
        self._in_progress = True
        try:
            await self.connection.connect(self.address, device=self._ble_device(device))
            await self.connection.request_battery()
        except Exception as err:
            _LOGGER.warning("Cube connect failed (%s): %s", reason, err)
            _LOGGER.debug("Cube connect exception", exc_info=err)
            self._schedule_retry()
        finally:
            self._in_progress = False

    def _schedule_retry(self) -> None:
        if self._retry_task is not None or self._last_advertisement is None:
            return

        async def _retry() -> None:
            await asyncio.sleep(RECONNECT_RETRY_SECONDS)
            self._retry_task = None
            if self._last_advertisement is None:
                return
            if time.monotonic() - self._last_advertisement > RECONNECT_RETRY_WINDOW:
                return
            await self.async_connect("retry")

        self._retry_task = self.hass.async_create_task(_retry())

    @callback
    def handle_advertisement(
        self, service_info: BluetoothServiceInfoBleak, change: BluetoothChange
    ) -> None:
        """Connect when the cube advertises."""
        self._last_advertisement = time.monotonic()
        if self.connection.available or self.connection.connecting or self._in_progress:
            return
        self.hass.async_create_task(
            self.async_connect("advertisement", device=service_info.device)
        )

    @callback
    def handle_state_change(self) -> None:
        """Reconnect after the cube drops the connection."""
        available = self.connection.available
        dropped = self._was_available and not available
        self._was_available = available
        if dropped:
            self.hass.async_create_task(self.async_connect("disconnect"))

    def cancel(self) -> None:
        if self._retry_task is not None:
            self._retry_task.cancel()
            self._retry_task = None


async def async_setup_entry(hass: HomeAssistant, entry: ConfigEntry) -> bool:
    """Set up a Mi Smart Cube from a config entry."""
    address: str = entry.data[CONF_ADDRESS]
    connection = MiCubeConnection()
    connector = CubeConnector(hass, address, connection)

    entry_data: dict[str, Any] = {
        "connection": connection,
        "connector": connector,
        "unsub_ble": bluetooth.async_register_callback(
            hass,
            connector.handle_advertisement,
            BluetoothCallbackMatcher(address=address),
            BluetoothScanningMode.ACTIVE,
        ),
        "unsub_state": connection.register_callback(connector.handle_state_change),
    }
    hass.data.setdefault(DOMAIN, {})[entry.entry_id] = entry_data

    await connector.async_connect("startup")
    if not connection.available:
        _LOGGER.debug("Cube not available at startup (will retry on advertisements)")

    await hass.config_entries.async_forward_entry_setups(entry, PLATFORMS)
    return True


async def async_unload_entry(hass: HomeAssistant, entry: ConfigEntry) -> bool:
    """Unload a config entry."""
    if unload_ok := await hass.config_entries.async_unload_platforms(entry, PLATFORMS):
        entry_data = hass.data[DOMAIN].pop(entry.entry_id)
        entry_data["unsub_ble"]()
        entry_data["unsub_state"]()
        entry_data["connector"].cancel()
        try:
            await entry_data["connection"].disconnect()
        except Exception as err:
            _LOGGER.error("Error disconnecting from cube: %s", err)
    return unload_ok
