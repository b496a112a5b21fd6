import struct

import pytest

from blegatt.byteorder import pack_mac
from blegatt.hci_events import (
    CommandComplete,
    CommandStatus,
    DisconnectionComplete,
    EventCode,
    EventDispatcher,
    EventError,
    EventHeader,
    LEAdvertisingReport,
    LEConnectionComplete,
    LEConnectionUpdateComplete,
    LEEventCode,
    LELTKRequest,
    LEReadRemoteUsedFeaturesComplete,
    LERemoteConnectionParameterRequest,
    NumberOfCompletedPackets,
)
from blegatt.hci_opcodes import OP_LE_SET_SCAN_ENABLE, OP_RESET

ADDR_A = bytes([0x02, 0x00, 0x00, 0x00, 0x00, 0x01])
ADDR_B = bytes([0x02, 0x00, 0x00, 0x00, 0x00, 0x02])


def test_header_parse():
    header = EventHeader.parse(bytes([0x0E, 2, 0xAA, 0xBB]))
    assert header.code == EventCode.COMMAND_COMPLETE
    assert header.plen == 2


@pytest.mark.parametrize("data", [b"", b"\x0e", bytes([0x0E, 3, 1]), bytes([0x0E, 0, 1])])
def test_header_rejects_bad_lengths(data):
    with pytest.raises(EventError):
        EventHeader.parse(data)


def test_disconnection_complete():
    ev = DisconnectionComplete.parse(bytes([0x00, 0x40, 0x00, 0x13]))
    assert (ev.status, ev.connection_handle, ev.reason) == (0x00, 0x0040, 0x13)


def test_disconnection_complete_short():
    with pytest.raises(EventError):
        DisconnectionComplete.parse(bytes([0x00, 0x40, 0x00]))


def test_command_complete():
    data = bytes([1]) + struct.pack("<H", OP_RESET) + b"\x00\x05"
    ev = CommandComplete.parse(data)
    assert ev.num_hci_command_packets == 1
    assert ev.command_opcode == OP_RESET
    assert ev.return_parameters == b"\x00\x05"


def test_command_complete_short():
    with pytest.raises(EventError):
        CommandComplete.parse(b"\x01\x03")


def test_command_status():
    data = bytes([0x00, 1]) + struct.pack("<H", OP_LE_SET_SCAN_ENABLE)
    ev = CommandStatus.parse(data)
    assert ev.status == 0
    assert ev.num_hci_command_packets == 1
    assert ev.command_opcode == OP_LE_SET_SCAN_ENABLE


def test_number_of_completed_packets_masks_flags():
    data = bytes([2]) + struct.pack("<HHHH", 0x3040, 2, 0x0041, 1)
    ev = NumberOfCompletedPackets.parse(data)
    assert ev.number_of_handles == 2
    assert ev.packets[0].connection_handle == 0x040
    assert ev.packets[0].num_completed_packets == 2
    assert ev.packets[1].connection_handle == 0x0041
    assert ev.packets[1].num_completed_packets == 1


def test_number_of_completed_packets_short():
    with pytest.raises(EventError):
        NumberOfCompletedPackets.parse(bytes([2]) + struct.pack("<HH", 1, 1))


def test_le_connection_complete_short():
    with pytest.raises(EventError):
        LEConnectionComplete.parse(bytes(17))


def _adv_report(entries):
    n = len(entries)
    out = bytes([LEEventCode.ADVERTISING_REPORT, n])
    out += bytes(e[0] for e in entries)
    out += bytes(e[1] for e in entries)
    out += b"".join(pack_mac(e[2]) for e in entries)
    out += bytes(len(e[3]) for e in entries)
    out += b"".join(e[3] for e in entries)
    out += b"".join(struct.pack("<b", e[4]) for e in entries)
    return out


def test_le_advertising_report_round_trip():
    entries = [
        (0x00, 0x00, ADDR_A, b"\x02\x01\x06", -60),
        (0x04, 0x01, ADDR_B, b"", -90),
    ]
    ev = LEAdvertisingReport.parse(_adv_report(entries))
    assert ev.subevent_code == LEEventCode.ADVERTISING_REPORT
    assert ev.num_reports == 2
    got = [(r.event_type, r.address_type, r.address, r.data, r.rssi) for r in ev.reports]
    assert got == entries


def test_le_advertising_report_truncated_data():
    data = _adv_report([(0x00, 0x00, ADDR_A, b"\x02\x01\x06", -60)])
    with pytest.raises(EventError):
        LEAdvertisingReport.parse(data[:-2])


def test_le_advertising_report_truncated_header():
    with pytest.raises(EventError):
        LEAdvertisingReport.parse(bytes([LEEventCode.ADVERTISING_REPORT, 1, 0, 0]))
    with pytest.raises(EventError):
        LEAdvertisingReport.parse(b"\x02")


def test_le_connection_update_complete():
    data = struct.pack("<BBHHHH", 3, 0, 0x40, 0x18, 0, 0x48)
    ev = LEConnectionUpdateComplete.parse(data)
    assert (ev.connection_handle, ev.conn_interval, ev.supervision_timeout) == (0x40, 0x18, 0x48)


def test_le_read_remote_used_features_complete():
    data = struct.pack("<BBHQ", 4, 0, 0x40, 0x1F)
    ev = LEReadRemoteUsedFeaturesComplete.parse(data)
    assert ev.le_features == 0x1F
    assert ev.connection_handle == 0x40


def test_le_ltk_request():
    data = struct.pack("<BHQH", 5, 0x40, 0x0102030405060708, 0x1234)
    ev = LELTKRequest.parse(data)
    assert ev.connection_handle == 0x40
    assert ev.random_number == 0x0102030405060708
    assert ev.encryption_diversifier == 0x1234


def test_le_ltk_request_short():
    with pytest.raises(EventError):
        LELTKRequest.parse(bytes(12))


def test_le_remote_connection_parameter_request():
    data = struct.pack("<BHHHHH", 6, 0x40, 6, 24, 0, 200)
    ev = LERemoteConnectionParameterRequest.parse(data)
    assert (ev.interval_min, ev.interval_max, ev.latency, ev.timeout) == (6, 24, 0, 200)


def test_dispatcher_routes_parameters():
    seen = []
    dispatcher = EventDispatcher()
    dispatcher.register(EventCode.COMMAND_COMPLETE, lambda b: seen.append(b) or "done")
    result = dispatcher.dispatch(bytes([0x0E, 3, 1, 3, 0x0C]))
    assert result == "done"
    assert seen == [b"\x01\x03\x0c"]


def test_dispatcher_without_handler():
    seen = []
    dispatcher = EventDispatcher()
    dispatcher.register(EventCode.LE_META, seen.append)
    assert dispatcher.dispatch(bytes([0x05, 1, 0])) is None
    assert seen == []


def test_dispatcher_rejects_malformed():
    dispatcher = EventDispatcher()
    with pytest.raises(EventError):
        dispatcher.dispatch(bytes([0x0E, 5, 1]))