"""Bluetooth Low Energy UUIDs, stored little-endian as on the wire."""

from __future__ import annotations

import re
import struct

_HEX = re.compile(r"(?:[0-9a-fA-F]{2})*")


def reverse(data: bytes) -> bytes:
    """Return a reversed copy of ``data``."""
    return bytes(reversed(bytes(data)))


class UUID:
    """A BLE UUID held as immutable little-endian bytes."""

    __slots__ = ("_data",)

    def __init__(self, data: bytes) -> None:
        self._data = bytes(data)

    @property
    def data(self) -> bytes:
        """The little-endian bytes of the UUID."""
        return self._data

    def __len__(self) -> int:
        return len(self._data)

    def __str__(self) -> str:
        return reverse(self._data).hex()

    def __repr__(self) -> str:
        return f"UUID({str(self)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UUID):
            return NotImplemented
        return self._data == other._data

    def __hash__(self) -> int:
        return hash(self._data)


def uuid16(value: int) -> UUID:
    """Build a 16-bit UUID such as 0x1800."""
    try:
        return UUID(struct.pack("<H", value))
    except struct.error as exc:
        raise ValueError(f"16-bit UUID out of range: {value!r}") from exc


def parse_uuid(text: str) -> UUID:
    """Parse a UUID such as "1800" or "34DA3AD1-7110-41A1-B1EF-4430F509CDE7"."""
    digits = text.replace("-", "")
    if not _HEX.fullmatch(digits):
        raise ValueError(f"invalid hex in UUID: {text!r}")
    raw = bytes.fromhex(digits)
    if len(raw) not in (2, 16):
        raise ValueError(f"UUIDs must have length 2 or 16, got {len(raw)}")
    return UUID(reverse(raw))