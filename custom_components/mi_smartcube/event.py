"""Support for Mi Smart Cube move events."""

from __future__ import annotations

from homeassistant.components.event import (
    EventDeviceClass,
    EventEntity,
)
from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant, callback
from homeassistant.helpers.entity_platform import AddEntitiesCallback

from micube_ble import Direction, Face, MiCubeConnection, Move

DOMAIN = "mi_smartcube"

EVENT_TYPES = [
    Move(face, direction).notation for face in Face for direction in Direction
]


async def async_setup_entry(
    hass: HomeAssistant,
    entry: ConfigEntry,
    async_add_entities: AddEntitiesCallback,
) -> None:
    """Set up the Mi Smart Cube move event."""
    connection = hass.data[DOMAIN][entry.entry_id]["connection"]
    async_add_entities([MiSmartCubeMoveEvent(connection, entry)])


class MiSmartCubeMoveEvent(EventEntity):
    """Fires once per face turn."""

    _attr_has_entity_name = True
    _attr_name = "Move"
    _attr_device_class = EventDeviceClass.MOTION
    _attr_event_types = EVENT_TYPES

    def __init__(self, connection: MiCubeConnection, entry: ConfigEntry) -> None:
        """Initialize the event entity."""
        self.connection = connection
        self._attr_unique_id = f"{entry.data['address']}_move"
        self._attr_device_info = {
            "identifiers": {(DOMAIN, entry.data["address"])},
            "name": entry.title,
            "model": connection.model,
            "manufacturer": connection.manufacturer,
        }

    async def async_added_to_hass(self) -> None:
        """Register callbacks."""
        self.connection.add_movement_callback(self._handle_movement)

    @callback
    def _handle_movement(self, movement: Move) -> None:
        """Fire the event for a move reported by the cube."""
        self._trigger_event(
            movement.notation,
            {"face": movement.face.name.lower(), "direction": movement.direction.name.lower()},
        )
        self.async_write_ha_state()

    async def async_will_remove_from_hass(self) -> None:
        """Unregister callbacks."""
        self.connection.remove_movement_callback(self._handle_movement)
