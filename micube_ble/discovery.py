"""Advertisement matching for the Mi Smart Cube."""

from __future__ import annotations

from typing import Iterable

from .connection import DATA_SERVICE_UUID, SYSTEM_SERVICE_UUID

# Local names seen so far: GiC..., GiS..., Gi....
LOCAL_NAME_PREFIX = "Gi"
ADVERTISED_SERVICE_UUIDS = frozenset({DATA_SERVICE_UUID, SYSTEM_SERVICE_UUID})


def match_advertisement(
    name: str | None,
    service_uuids: Iterable[str] | None,
) -> bool:
    """Return True if a BLE advertisement looks like a Mi Smart Cube."""
    if (name or "").startswith(LOCAL_NAME_PREFIX):
        return True
    advertised = {uuid.lower() for uuid in service_uuids or ()}
    return not advertised.isdisjoint(ADVERTISED_SERVICE_UUIDS)
