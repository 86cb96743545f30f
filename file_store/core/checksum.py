"""CRC-32 checksum computation."""

from __future__ import annotations

import zlib

CRC32_MASK = 0xFFFFFFFF


def calculate_crc32(data: bytes) -> int:
    """Compute the standard CRC-32 (zlib/PNG variant) of a byte sequence.

    Returns an unsigned value in the range [0, 2**32). Empty input yields 0.
    """
    return zlib.crc32(data) & CRC32_MASK


def format_crc32(value: int) -> str:
    """Render a CRC-32 value as 8 lowercase hex digits."""
    if value < 0 or value > CRC32_MASK:
        msg = "CRC-32 value must be between 0 and 0xFFFFFFFF"
        raise ValueError(msg)
    return f"{value:08x}"

