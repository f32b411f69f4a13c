"""Support for Mi Smart Cube sensors."""

from __future__ import annotations

from homeassistant.components.sensor import (
    SensorDeviceClass,
    SensorEntity,
    SensorEntityDescription,
)
from homeassistant.config_entries import ConfigEntry
from homeassistant.const import PERCENTAGE, EntityCategory
from homeassistant.core import HomeAssistant
from homeassistant.helpers.entity_platform import AddEntitiesCallback

from micube_ble import MiCubeConnection
from micube_ble.helpers.render import format_frame

DOMAIN = "mi_smartcube"

SENSOR_TYPES: dict[str, SensorEntityDescription] = {
    "battery": SensorEntityDescription(
        key="battery",
        name="Battery",
        device_class=SensorDeviceClass.BATTERY,
        native_unit_of_measurement=PERCENTAGE,
        entity_category=EntityCategory.DIAGNOSTIC,
    ),
    "connection_state": SensorEntityDescription(
        key="connection_state",
        name="Connection State",
        entity_category=EntityCategory.DIAGNOSTIC,
    ),
    "solved_faces": SensorEntityDescription(
        key="solved_faces",
        name="Solved Faces",
        native_unit_of_measurement="faces",
    ),
    "last_move": SensorEntityDescription(
        key="last_move",
        name="Last Move",
    ),
    "previous_move": SensorEntityDescription(
        key="previous_move",
        name="Previous Move",
    ),
    "state_string": SensorEntityDescription(
        key="state_string",
        name="State String",
        entity_category=EntityCategory.DIAGNOSTIC,
    ),
}


async def async_setup_entry(
    hass: HomeAssistant,
    entry: ConfigEntry,
    async_add_entities: AddEntitiesCallback,
) -> None:
    """Set up Mi Smart Cube sensors."""
    connection = hass.data[DOMAIN][entry.entry_id]["connection"]
    async_add_entities(
        MiSmartCubeSensor(connection, entry, description)
        for description in SENSOR_TYPES.values()
    )


class MiSmartCubeSensor(SensorEntity):
    """Representation of a cube sensor."""

    _attr_has_entity_name = True
    _attr_should_poll = False

    def __init__(
        self,
        connection: MiCubeConnection,
        entry: ConfigEntry,
        description: SensorEntityDescription,
    ) -> None:
        """Initialize the sensor."""
        self.connection = connection
        self.entity_description = description
        self._attr_unique_id = f"{entry.data['address']}_{description.key}"
        self._attr_device_info = {
            "identifiers": {(DOMAIN, entry.data["address"])},
            "name": entry.title,
            "model": connection.model,
            "manufacturer": connection.manufacturer,
        }

    async def async_added_to_hass(self) -> None:
        """Subscribe to cube updates."""
        self.async_on_remove(
            self.connection.register_callback(self.async_write_ha_state)
        )

    @property
    def native_value(self) -> str | int | None:
        """Return the native value."""
        data = self.connection.data
        key = self.entity_description.key
        if key == "battery":
            return data.battery_level
        if key == "connection_state":
            return "connected" if self.connection.available else "disconnected"
        if key == "solved_faces":
            return sum(1 for solved in data.face_states.values() if solved)
        if key == "last_move":
            return data.last_move
        if key == "previous_move":
            return data.previous_move
        if key == "state_string":
            return data.state_string
        return None

    @property
    def extra_state_attributes(self) -> dict[str, object] | None:
        """Expose the raw frame behind the state string."""
        if self.entity_description.key != "state_string":
            return None
        data = self.connection.data
        return {
            "frame": format_frame(data.frame) if data.frame else None,
            "last_update": data.last_update,
        }
