"""HCI ACL data packets and L2CAP fragmentation/reassembly."""

from __future__ import annotations

import logging
import struct
from dataclasses import dataclass

log = logging.getLogger(__name__)

PACKET_TYPE_ACL = 0x02
ATT_CID = 0x0004
SIGNALING_CID = 0x0005
CONTINUATION_FLAG = 0x1
MAX_L2CAP_FRAME = 512


class AclError(ValueError):
    """Raised for malformed ACL packets or broken L2CAP reassembly."""


@dataclass(frozen=True)
class AclData:
    """One HCI ACL data packet (without the HCI packet-type byte)."""

    handle: int
    flags: int
    length: int
    payload: bytes

    @classmethod
    def parse(cls, data: bytes) -> "AclData":
        if len(data) < 4:
            raise AclError("malformed acl packet")
        handle = data[0] | ((data[1] & 0x0F) << 8)
        flags = data[1] >> 4
        (length,) = struct.unpack_from("<H", data, 2)
        if len(data) != 4 + length:
            raise AclError("malformed acl packet")
        return cls(handle=handle, flags=flags, length=length, payload=bytes(data[4:]))


class L2capReassembler:
    """Rebuilds L2CAP frames from a sequence of ACL packets on one connection."""

    def __init__(self) -> None:
        self._pending: bytearray | None = None
        self._total = 0

    def _complete(self) -> bytes | None:
        assert self._pending is not None
        if len(self._pending) < self._total:
            return None
        frame = bytes(self._pending)
        self._pending = None
        if len(frame) != self._total:
            raise AclError(f"l2cap frame overran its length: {len(frame)} > {self._total}")
        return frame

    def feed(self, acl: AclData) -> bytes | None:
        """Feed one packet; return a complete frame payload when one is ready.

        Signalling-channel packets are ignored and yield ``None``.
        """
        if self._pending is not None:
            if not acl.flags & CONTINUATION_FLAG:
                self._pending = None
                raise AclError("expected a continuation fragment")
            room = MAX_L2CAP_FRAME - len(self._pending)
            self._pending += acl.payload[:room]
            return self._complete()

        body = acl.payload
        if len(body) < 4:
            raise AclError("short/corrupt l2cap packet")
        total, cid = struct.unpack_from("<HH", body, 0)
        if cid == SIGNALING_CID:
            log.debug("ignore l2cap signal: %s", body.hex(" "))
            return None
        self._total = total
        self._pending = bytearray(body[4 : 4 + MAX_L2CAP_FRAME])
        return self._complete()


def fragment_l2cap(handle: int, cid: int, payload: bytes, buffer_size: int) -> list[bytes]:
    """Split an L2CAP payload into HCI ACL packets of at most ``buffer_size`` data bytes."""
    if buffer_size <= 0:
        raise ValueError("buffer_size must be positive")
    frame = struct.pack("<HH", len(payload) & 0xFFFF, cid & 0xFFFF) + bytes(payload)
    packets = []
    for offset in range(0, len(frame), buffer_size):
        segment = frame[offset : offset + buffer_size]
        flag = 0x10 if offset else 0x00
        header = bytes(
            [
                PACKET_TYPE_ACL,
                handle & 0xFF,
                ((handle >> 8) & 0xFF) | flag,
            ]
        ) + struct.pack("<H", len(segment))
        packets.append(header + segment)
    return packets


def connection_parameter_update_request() -> bytes:
    """Signalling payload requesting a connection parameter update."""
    return bytes(
        [
            0x12,        # Code (Connection Param Update)
            0x02,        # ID
            0x08, 0x00,  # DataLength
            0x08, 0x00,  # IntervalMin
            0x18, 0x00,  # IntervalMax
            0x00, 0x00,  # SlaveLatency
            0xC8, 0x00,  # TimeoutMultiplier
        ]
    )