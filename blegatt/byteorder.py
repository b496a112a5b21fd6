"""Little-endian field readers and Bluetooth address byte-order helpers."""

from __future__ import annotations

import struct

MAC_LENGTH = 6


def _require(data: bytes, size: int, what: str) -> None:
    if len(data) < size:
        raise ValueError(f"need {size} bytes for {what}, got {len(data)}")


def read_int8(data: bytes) -> int:
    """Read a signed byte from the start of ``data``."""
    _require(data, 1, "int8")
    return struct.unpack_from("<b", data)[0]


def read_uint8(data: bytes) -> int:
    """Read an unsigned byte from the start of ``data``."""
    _require(data, 1, "uint8")
    return data[0]


def read_uint16(data: bytes) -> int:
    """Read a little-endian unsigned 16-bit value from the start of ``data``."""
    _require(data, 2, "uint16")
    return struct.unpack_from("<H", data)[0]


def read_uint64(data: bytes) -> int:
    """Read a little-endian unsigned 64-bit value from the start of ``data``."""
    _require(data, 8, "uint64")
    return struct.unpack_from("<Q", data)[0]


def read_mac(data: bytes) -> bytes:
    """Read a 6-byte device address sent least significant byte first.

    The result is in display order (most significant byte first).
    """
    _require(data, MAC_LENGTH, "address")
    return bytes(data[:MAC_LENGTH])[::-1]


def pack_mac(mac: bytes) -> bytes:
    """Encode a display-order 6-byte device address for the wire."""
    raw = bytes(mac)
    if len(raw) != MAC_LENGTH:
        raise ValueError(f"address must be {MAC_LENGTH} bytes, got {len(raw)}")
    return raw[::-1]