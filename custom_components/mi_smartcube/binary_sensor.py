"""Support for Mi Smart Cube binary sensors."""

from __future__ import annotations

from homeassistant.components.binary_sensor import (
    BinarySensorEntity,
    BinarySensorEntityDescription,
)
from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant
from homeassistant.helpers.entity_platform import AddEntitiesCallback

from micube_ble import Color, MiCubeConnection

DOMAIN = "mi_smartcube"

SOLVED_DESCRIPTION = BinarySensorEntityDescription(key="cube_solved", name="Solved")

FACE_DESCRIPTIONS = tuple(
    BinarySensorEntityDescription(
        key=f"{color.name.lower()}_face",
        name=f"{color.name.capitalize()} Face",
    )
    for color in Color
)


async def async_setup_entry(
    hass: HomeAssistant,
    entry: ConfigEntry,
    async_add_entities: AddEntitiesCallback,
) -> None:
    """Set up Mi Smart Cube binary sensors."""
    connection = hass.data[DOMAIN][entry.entry_id]["connection"]
    async_add_entities(
        MiSmartCubeBinarySensor(connection, entry, description)
        for description in (SOLVED_DESCRIPTION, *FACE_DESCRIPTIONS)
    )


class MiSmartCubeBinarySensor(BinarySensorEntity):
    """Solved flag of the whole cube or of one face."""

    _attr_has_entity_name = True
    _attr_should_poll = False

    def __init__(
        self,
        connection: MiCubeConnection,
        entry: ConfigEntry,
        description: BinarySensorEntityDescription,
    ) -> None:
        """Initialize the binary sensor."""
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
    def available(self) -> bool:
        """Return True once the cube has reported a state."""
        return self.connection.data.state is not None

    @property
    def is_on(self) -> bool:
        """Return if the cube or face is solved."""
        data = self.connection.data
        if self.entity_description.key == SOLVED_DESCRIPTION.key:
            return data.is_solved
        color = self.entity_description.key.split("_")[0].capitalize()
        return data.face_states.get(color, False)
