"""File store core -- pure functions for character units and CRC-32 checksums."""

from __future__ import annotations

from file_store.core.checksum import calculate_crc32, format_crc32
from file_store.core.content import (
    LOW_BYTE_MASK,
    MAX_UNIT_VALUE,
    normalize_units,
    to_low_bytes,
)

__all__ = [
    # checksum
    "calculate_crc32",
    "format_crc32",
    # content
    "LOW_BYTE_MASK",
    "MAX_UNIT_VALUE",
    "normalize_units",
    "to_low_bytes",
]
