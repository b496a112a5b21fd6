"""Bluetooth Low Energy UUIDs (16-bit and 128-bit)."""

from __future__ import annotations

from collections.abc import Iterable

_VALID_LENGTHS = (2, 16)


def reverse_bytes(data: bytes) -> bytes:
    """Return a reversed copy of ``data``."""
    return bytes(data)[::-1]


def _check_length(length: int) -> None:
    if length not in _VALID_LENGTHS:
        raise ValueError(f"UUIDs must have length 2 or 16, got {length}")


class UUID:
    """A BLE UUID, stored in its over-the-air (little-endian) byte order."""

    __slots__ = ("_data",)

    def __init__(self, data: bytes) -> None:
        raw = bytes(data)
        _check_length(len(raw))
        self._data = raw

    def __len__(self) -> int:
        return len(self._data)

    def __str__(self) -> str:
        return reverse_bytes(self._data).hex()

    def __repr__(self) -> str:
        return f"UUID('{self}')"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UUID):
            return NotImplemented
        return self._data == other._data

    def __hash__(self) -> int:
        return hash(self._data)

    def to_bytes(self) -> bytes:
        """Return the UUID in little-endian wire order."""
        return self._data


def uuid16(value: int) -> UUID:
    """Build a 16-bit UUID such as 0x1800."""
    if not 0 <= value <= 0xFFFF:
        raise ValueError(f"16-bit UUID out of range: {value:#x}")
    return UUID(value.to_bytes(2, "little"))


def parse_uuid(text: str) -> UUID:
    """Parse a UUID such as "1800" or "34DA3AD1-7110-41A1-B1EF-4430F509CDE7"."""
    raw = bytes.fromhex(text.replace("-", ""))
    _check_length(len(raw))
    return UUID(reverse_bytes(raw))


def uuid_contains(uuids: Iterable[UUID] | None, uuid: UUID) -> bool:
    """Report whether ``uuid`` is in ``uuids``; ``None`` matches everything."""
    if uuids is None:
        return True
    return any(candidate == uuid for candidate in uuids)