"""HCI event codes, event parameter parsing and event dispatch."""

from __future__ import annotations

import logging
import struct
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Callable

from .byteorder import read_int8, read_mac, read_uint8, read_uint16

log = logging.getLogger(__name__)

EventHandler = Callable[[bytes], Any]

_ADDRESS_LENGTH = 6


class EventError(ValueError):
    """Raised when an HCI event or its parameters are malformed."""


class EventCode(IntEnum):
    """HCI event codes."""

    INQUIRY_COMPLETE = 0x01
    INQUIRY_RESULT = 0x02
    CONNECTION_COMPLETE = 0x03
    CONNECTION_REQUEST = 0x04
    DISCONNECTION_COMPLETE = 0x05
    AUTHENTICATION_COMPLETE = 0x06
    REMOTE_NAME_REQ_COMPLETE = 0x07
    ENCRYPTION_CHANGE = 0x08
    CHANGE_CONNECTION_LINK_KEY_COMPLETE = 0x09
    MASTER_LINK_KEY_COMPLETE = 0x0A
    READ_REMOTE_SUPPORTED_FEATURES_COMPLETE = 0x0B
    READ_REMOTE_VERSION_INFORMATION_COMPLETE = 0x0C
    QOS_SETUP_COMPLETE = 0x0D
    COMMAND_COMPLETE = 0x0E
    COMMAND_STATUS = 0x0F
    HARDWARE_ERROR = 0x10
    FLUSH_OCCURRED = 0x11
    ROLE_CHANGE = 0x12
    NUMBER_OF_COMPLETED_PKTS = 0x13
    MODE_CHANGE = 0x14
    RETURN_LINK_KEYS = 0x15
    PIN_CODE_REQUEST = 0x16
    LINK_KEY_REQUEST = 0x17
    LINK_KEY_NOTIFICATION = 0x18
    LOOPBACK_COMMAND = 0x19
    DATA_BUFFER_OVERFLOW = 0x1A
    MAX_SLOTS_CHANGE = 0x1B
    READ_CLOCK_OFFSET_COMPLETE = 0x1C
    CONNECTION_PTYPE_CHANGED = 0x1D
    QOS_VIOLATION = 0x1E
    PAGE_SCAN_REPETITION_MODE_CHANGE = 0x20
    FLOW_SPECIFICATION_COMPLETE = 0x21
    INQUIRY_RESULT_WITH_RSSI = 0x22
    READ_REMOTE_EXTENDED_FEATURES_COMPLETE = 0x23
    SYNC_CONNECTION_COMPLETE = 0x2C
    SYNC_CONNECTION_CHANGED = 0x2D
    SNIFF_SUBRATING = 0x2E
    EXTENDED_INQUIRY_RESULT = 0x2F
    ENCRYPTION_KEY_REFRESH_COMPLETE = 0x30
    IO_CAPABILITY_REQUEST = 0x31
    IO_CAPABILITY_RESPONSE = 0x32
    USER_CONFIRMATION_REQUEST = 0x33
    USER_PASSKEY_REQUEST = 0x34
    REMOTE_OOB_DATA_REQUEST = 0x35
    SIMPLE_PAIRING_COMPLETE = 0x36
    LINK_SUPERVISION_TIMEOUT_CHANGED = 0x38
    ENHANCED_FLUSH_COMPLETE = 0x39
    USER_PASSKEY_NOTIFY = 0x3B
    KEYPRESS_NOTIFY = 0x3C
    REMOTE_HOST_FEATURES_NOTIFY = 0x3D
    LE_META = 0x3E
    PHYSICAL_LINK_COMPLETE = 0x40
    CHANNEL_SELECTED = 0x41
    DISCONNECTION_PHYSICAL_LINK_COMPLETE = 0x42
    PHYSICAL_LINK_LOSS_EARLY_WARNING = 0x43
    PHYSICAL_LINK_RECOVERY = 0x44
    LOGICAL_LINK_COMPLETE = 0x45
    DISCONNECTION_LOGICAL_LINK_COMPLETE = 0x46
    FLOW_SPEC_MODIFY_COMPLETE = 0x47
    NUMBER_OF_COMPLETED_BLOCKS = 0x48
    AMP_START_TEST = 0x49
    AMP_TEST_END = 0x4A
    AMP_RECEIVER_REPORT = 0x4B
    AMP_STATUS_CHANGE = 0x4D
    TRIGGERED_CLOCK_CAPTURE = 0x4E
    SYNCHRONIZATION_TRAIN_COMPLETE = 0x4F
    SYNCHRONIZATION_TRAIN_RECEIVED = 0x50
    CONNECTIONLESS_SLAVE_BROADCAST_RECEIVE = 0x51
    CONNECTIONLESS_SLAVE_BROADCAST_TIMEOUT = 0x52
    TRUNCATED_PAGE_COMPLETE = 0x53
    SLAVE_PAGE_RESPONSE_TIMEOUT = 0x54
    CONNECTIONLESS_SLAVE_BROADCAST_CHANNEL_MAP_CHANGE = 0x55
    INQUIRY_RESPONSE_NOTIFICATION = 0x56
    AUTHENTICATED_PAYLOAD_TIMEOUT_EXPIRED = 0x57


class LEEventCode(IntEnum):
    """Subevent codes carried by the LE Meta event."""

    CONNECTION_COMPLETE = 0x01
    ADVERTISING_REPORT = 0x02
    CONNECTION_UPDATE_COMPLETE = 0x03
    READ_REMOTE_USED_FEATURES_COMPLETE = 0x04
    LTK_REQUEST = 0x05
    REMOTE_CONNECTION_PARAMETER_REQUEST = 0x06


def _unpack(fmt: str, data: bytes, what: str) -> tuple[int, ...]:
    size = struct.calcsize("<" + fmt)
    if len(data) < size:
        raise EventError(f"{what}: expected at least {size} bytes, got {len(data)}")
    return struct.unpack_from("<" + fmt, data)


@dataclass(frozen=True)
class EventHeader:
    """Event code and parameter length of an HCI event packet."""

    code: int
    plen: int

    @classmethod
    def parse(cls, data: bytes) -> "EventHeader":
        if len(data) < 2:
            raise EventError("malformed header")
        header = cls(code=data[0], plen=data[1])
        if len(data) != 2 + header.plen:
            raise EventError("wrong length")
        return header


@dataclass(frozen=True)
class DisconnectionComplete:
    status: int
    connection_handle: int
    reason: int

    @classmethod
    def parse(cls, data: bytes) -> "DisconnectionComplete":
        status, handle, reason = _unpack("BHB", data, "disconnection complete")
        return cls(status=status, connection_handle=handle, reason=reason)


@dataclass(frozen=True)
class CommandComplete:
    num_hci_command_packets: int
    command_opcode: int
    return_parameters: bytes

    @classmethod
    def parse(cls, data: bytes) -> "CommandComplete":
        count, op = _unpack("BH", data, "command complete")
        return cls(
            num_hci_command_packets=count,
            command_opcode=op,
            return_parameters=bytes(data[3:]),
        )


@dataclass(frozen=True)
class CommandStatus:
    status: int
    num_hci_command_packets: int
    command_opcode: int

    @classmethod
    def parse(cls, data: bytes) -> "CommandStatus":
        status, count, op = _unpack("BBH", data, "command status")
        return cls(status=status, num_hci_command_packets=count, command_opcode=op)


@dataclass(frozen=True)
class CompletedPackets:
    connection_handle: int
    num_completed_packets: int


@dataclass(frozen=True)
class NumberOfCompletedPackets:
    number_of_handles: int
    packets: tuple[CompletedPackets, ...]

    @classmethod
    def parse(cls, data: bytes) -> "NumberOfCompletedPackets":
        if not data:
            raise EventError("number of completed packets: empty event")
        count = data[0]
        body = data[1:]
        if len(body) < 4 * count:
            raise EventError(
                f"number of completed packets: expected {4 * count} bytes, got {len(body)}"
            )
        packets = tuple(
            CompletedPackets(connection_handle=handle & 0xFFF, num_completed_packets=done)
            for handle, done in struct.iter_unpack("<HH", body[: 4 * count])
        )
        return cls(number_of_handles=count, packets=packets)


@dataclass(frozen=True)
class LEConnectionComplete:
    subevent_code: int
    status: int
    connection_handle: int
    role: int
    peer_address_type: int
    peer_address: bytes
    conn_interval: int
    conn_latency: int
    supervision_timeout: int
    master_clock_accuracy: int

    @classmethod
    def parse(cls, data: bytes) -> "LEConnectionComplete":
        if len(data) < 18:
            raise EventError(f"expected at least 18 bytes, got {len(data)}")
        return cls(
            subevent_code=read_uint8(data[0:]),
            status=read_uint8(data[1:]),
            connection_handle=read_uint16(data[2:]),
            role=read_uint8(data[4:]),
            peer_address_type=read_uint8(data[5:]),
            peer_address=read_mac(data[6:]),
            conn_interval=read_uint16(data[12:]),
            conn_latency=read_uint16(data[14:]),
            supervision_timeout=read_uint16(data[16:]),
            master_clock_accuracy=read_uint8(data[17:]),
        )


@dataclass(frozen=True)
class AdvertisingReport:
    """One report of an LE Advertising Report event."""

    event_type: int
    address_type: int
    address: bytes
    data: bytes
    rssi: int


@dataclass(frozen=True)
class LEAdvertisingReport:
    subevent_code: int
    reports: tuple[AdvertisingReport, ...]

    @property
    def num_reports(self) -> int:
        return len(self.reports)

    @classmethod
    def parse(cls, data: bytes) -> "LEAdvertisingReport":
        if len(data) < 2:
            raise EventError("expected at least 2 bytes")
        subevent, n = data[0], data[1]
        rest = memoryview(bytes(data[2:]))
        fixed = (1 + 1 + _ADDRESS_LENGTH + 1) * n
        if len(rest) < fixed:
            raise EventError(f"expected {fixed} more bytes, got {len(rest)}")

        event_types = list(rest[:n])
        rest = rest[n:]
        address_types = list(rest[:n])
        rest = rest[n:]
        addresses = [
            read_mac(rest[i * _ADDRESS_LENGTH : (i + 1) * _ADDRESS_LENGTH]) for i in range(n)
        ]
        rest = rest[n * _ADDRESS_LENGTH :]
        lengths = list(rest[:n])
        rest = rest[n:]

        needed = sum(lengths) + n
        if len(rest) < needed:
            raise EventError(f"expected {needed} more bytes, got {len(rest)}")

        payloads = []
        for length in lengths:
            payloads.append(bytes(rest[:length]))
            rest = rest[length:]
        rssis = [read_int8(rest[i : i + 1]) for i in range(n)]

        reports = tuple(
            AdvertisingReport(
                event_type=event_type,
                address_type=address_type,
                address=address,
                data=payload,
                rssi=rssi,
            )
            for event_type, address_type, address, payload, rssi in zip(
                event_types, address_types, addresses, payloads, rssis
            )
        )
        return cls(subevent_code=subevent, reports=reports)


@dataclass(frozen=True)
class LEConnectionUpdateComplete:
    subevent_code: int
    status: int
    connection_handle: int
    conn_interval: int
    conn_latency: int
    supervision_timeout: int

    @classmethod
    def parse(cls, data: bytes) -> "LEConnectionUpdateComplete":
        return cls(*_unpack("BBHHHH", data, "LE connection update complete"))


@dataclass(frozen=True)
class LEReadRemoteUsedFeaturesComplete:
    subevent_code: int
    status: int
    connection_handle: int
    le_features: int

    @classmethod
    def parse(cls, data: bytes) -> "LEReadRemoteUsedFeaturesComplete":
        return cls(*_unpack("BBHQ", data, "LE read remote used features complete"))


@dataclass(frozen=True)
class LELTKRequest:
    subevent_code: int
    connection_handle: int
    random_number: int
    encryption_diversifier: int

    @classmethod
    def parse(cls, data: bytes) -> "LELTKRequest":
        return cls(*_unpack("BHQH", data, "LE LTK request"))


@dataclass(frozen=True)
class LERemoteConnectionParameterRequest:
    subevent_code: int
    connection_handle: int
    interval_min: int
    interval_max: int
    latency: int
    timeout: int

    @classmethod
    def parse(cls, data: bytes) -> "LERemoteConnectionParameterRequest":
        return cls(*_unpack("BHHHHH", data, "LE remote connection parameter request"))


class EventDispatcher:
    """Routes HCI event packets to handlers registered by event code."""

    def __init__(self) -> None:
        self._handlers: dict[int, EventHandler] = {}

    def register(self, code: int, handler: EventHandler) -> None:
        """Set ``handler`` for events with ``code``, replacing any previous one."""
        self._handlers[int(code)] = handler

    def dispatch(self, data: bytes) -> Any:
        """Parse the event header and pass the parameters to the matching handler.

        Returns the handler's result, or ``None`` when no handler is registered.
        """
        header = EventHeader.parse(data)
        params = bytes(data[2:])
        handler = self._handlers.get(header.code)
        if handler is None:
            log.debug("HCI event: no handler for 0x%02X", header.code)
            return None
        log.debug(
            "HCI event 0x%02X plen %d: [%s]", header.code, header.plen, params.hex(" ")
        )
        return handler(params)