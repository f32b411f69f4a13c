"""Config flow for the Mi Smart Cube integration."""

from __future__ import annotations

import logging
from typing import Any

import voluptuous as vol
from homeassistant.components.bluetooth import (
    BluetoothServiceInfoBleak,
    async_discovered_service_info,
    async_scanner_count,
)
from homeassistant.config_entries import ConfigFlow, ConfigFlowResult
from homeassistant.const import CONF_ADDRESS

from micube_ble import match_advertisement

DOMAIN = "mi_smartcube"

_LOGGER = logging.getLogger(__name__)


def _is_supported(discovery_info: BluetoothServiceInfoBleak) -> bool:
    name = discovery_info.name or discovery_info.advertisement.local_name or ""
    return match_advertisement(name, discovery_info.service_uuids)


def _title(discovery_info: BluetoothServiceInfoBleak) -> str:
    return discovery_info.name or discovery_info.address


class MiSmartCubeConfigFlow(ConfigFlow, domain=DOMAIN):
    """Handle a config flow for the Mi Smart Cube."""

    VERSION = 1

    def __init__(self) -> None:
        """Initialize the config flow."""
        self._discovery_info: BluetoothServiceInfoBleak | None = None
        self._discovered_devices: dict[str, BluetoothServiceInfoBleak] = {}

    def _create_entry(self, discovery_info: BluetoothServiceInfoBleak) -> ConfigFlowResult:
        return self.async_create_entry(
            title=_title(discovery_info),
            data={CONF_ADDRESS: discovery_info.address},
        )

    async def async_step_bluetooth(
        self, discovery_info: BluetoothServiceInfoBleak
    ) -> ConfigFlowResult:
        """Handle the bluetooth discovery step."""
        _LOGGER.debug(
            "Discovered bluetooth device: %s %s",
            discovery_info.name,
            discovery_info.address,
        )
        if not _is_supported(discovery_info):
            return self.async_abort(reason="not_supported_device")

        await self.async_set_unique_id(discovery_info.address)
        self._abort_if_unique_id_configured()

        self._discovery_info = discovery_info
        return await self.async_step_bluetooth_confirm()

    async def async_step_bluetooth_confirm(
        self, user_input: dict[str, Any] | None = None
    ) -> ConfigFlowResult:
        """Confirm discovery."""
        assert self._discovery_info is not None
        if user_input is not None:
            return self._create_entry(self._discovery_info)

        self._set_confirm_only()
        return self.async_show_form(
            step_id="bluetooth_confirm",
            description_placeholders={
                "name": _title(self._discovery_info),
                "address": self._discovery_info.address,
            },
        )

    async def async_step_user(
        self, user_input: dict[str, Any] | None = None
    ) -> ConfigFlowResult:
        """Let the user pick one of the cubes in range."""
        if user_input is not None:
            address = user_input[CONF_ADDRESS]
            await self.async_set_unique_id(address, raise_on_progress=False)
            self._abort_if_unique_id_configured()
            return self._create_entry(self._discovered_devices[address])

        if async_scanner_count(self.hass) == 0:
            _LOGGER.warning("No bluetooth scanners available")
            return self.async_abort(reason="bluetooth_not_available")

        current_addresses = self._async_current_ids()
        self._discovered_devices = {
            info.address: info
            for info in async_discovered_service_info(self.hass)
            if info.address not in current_addresses and _is_supported(info)
        }
        _LOGGER.debug("Found %s Mi Smart Cube devices", len(self._discovered_devices))

        if not self._discovered_devices:
            return self.async_abort(reason="no_devices_found")

        schema = vol.Schema(
            {
                vol.Required(CONF_ADDRESS): vol.In(
                    {
                        address: f"{_title(info)} ({address})"
                        for address, info in self._discovered_devices.items()
                    }
                )
            }
        )
        return self.async_show_form(step_id="user", data_schema=schema)
