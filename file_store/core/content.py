"""Character unit validation and byte projection.

File content is a sequence of 16-bit character units, each held as a
one-character ``str``. Checksums are computed over the low byte of every unit.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

MAX_UNIT_VALUE = 0xFFFF
LOW_BYTE_MASK = 0xFF


def normalize_units(content: Sequence[str]) -> list[str]:
    """Validate a sequence of character units and return it as a list.

    A plain ``str`` is accepted as a sequence of units. The whole input is
    checked before returning, so callers can mutate only on success.
    """
    if not isinstance(content, Sequence):
        msg = f"content must be a sequence of characters, got {type(content).__name__}"
        raise ValueError(msg)

    units = list(content)
    for index, unit in enumerate(units):
        if not isinstance(unit, str) or len(unit) != 1:
            msg = f"content[{index}] must be a single character, got {unit!r}"
            raise ValueError(msg)
        if ord(unit) > MAX_UNIT_VALUE:
            msg = f"content[{index}] exceeds 16-bit range: U+{ord(unit):X}"
            raise ValueError(msg)
    return units


def to_low_bytes(units: Iterable[str]) -> bytes:
    """Project character units onto bytes, keeping only the low-order 8 bits.

    High-order bits are discarded unconditionally: U+0141 becomes 0x41.
    """
    return bytes(ord(unit) & LOW_BYTE_MASK for unit in units)
