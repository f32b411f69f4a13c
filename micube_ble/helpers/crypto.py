"""Payload helpers for the Mi Smart Cube data characteristic."""

from __future__ import annotations

from typing import Iterable, List

PAYLOAD_LENGTH = 20
FRAME_BYTES = 18

# Byte 18 carries this marker when the first 20 bytes are obfuscated.
OBFUSCATION_MARKER = 0xA7

KEY = bytes(
    [
        176, 81, 104, 224, 86, 137, 237, 119, 38, 26, 193, 161,
        210, 126, 150, 81, 93, 13, 236, 249, 89, 235, 88, 24,
        113, 81, 214, 131, 130, 199, 2, 169, 39, 165, 171, 41,
    ]
)


def get_nibble(data: bytes | bytearray, index: int) -> int:
    """Return the nibble at index, high nibble of each byte first."""
    byte_val = data[index // 2]
    if index % 2 == 1:
        return byte_val & 0x0F
    return (byte_val >> 4) & 0x0F


def is_obfuscated(data: bytes | bytearray) -> bool:
    """Return True if the payload carries the obfuscation marker."""
    return len(data) >= PAYLOAD_LENGTH and data[18] == OBFUSCATION_MARKER


def _key_offsets(data: bytes | bytearray) -> tuple[int, int]:
    return get_nibble(data, 38), get_nibble(data, 39)


def deobfuscate(data: bytes | bytearray) -> bytes:
    """Return the payload with the additive key transform removed.

    Payloads without the marker are returned unchanged.
    """
    if not is_obfuscated(data):
        return bytes(data)

    offset1, offset2 = _key_offsets(data)
    result = bytearray(data)
    for i in range(PAYLOAD_LENGTH):
        result[i] = (data[i] + KEY[offset1 + i] + KEY[offset2 + i]) & 0xFF
    return bytes(result)


def obfuscate(data: bytes | bytearray, offset1: int, offset2: int) -> bytes:
    """Apply the inverse transform to the frame bytes, as the cube does.

    Byte 18 receives the marker and byte 19 the two key offsets. Only the
    first 18 bytes survive a round trip through ``deobfuscate``.
    """
    if not (0 <= offset1 <= 0x0F and 0 <= offset2 <= 0x0F):
        raise ValueError("Key offsets must be nibbles")
    result = bytearray(bytes(data[:FRAME_BYTES]).ljust(PAYLOAD_LENGTH, b"\x00"))
    for i in range(FRAME_BYTES):
        result[i] = (result[i] - KEY[offset1 + i] - KEY[offset2 + i]) & 0xFF
    result[18] = OBFUSCATION_MARKER
    result[19] = (offset1 << 4) | offset2
    return bytes(result)


def pack_frame(frame: Iterable[int]) -> bytes:
    """Pack nibble values into bytes, high nibble first."""
    values = list(frame)
    if len(values) % 2:
        values.append(0)
    return bytes(
        ((values[i] & 0x0F) << 4) | (values[i + 1] & 0x0F)
        for i in range(0, len(values), 2)
    )


def unpack_frame(data: Iterable[int], length: int = 36) -> List[int]:
    """Split a payload into its first ``length`` nibbles."""
    payload = bytes(data)
    if len(payload) * 2 < length:
        raise ValueError(
            f"Payload of {len(payload)} bytes holds fewer than {length} nibbles"
        )
    return [get_nibble(payload, i) for i in range(length)]
