import pytest

from blegatt.acl import (
    AclData,
    AclError,
    L2capReassembler,
    connection_parameter_update_request,
    fragment_l2cap,
)


def _parse_all(packets):
    return [AclData.parse(p[1:]) for p in packets]


def test_parse_short_packet():
    with pytest.raises(AclError):
        AclData.parse(b"\x01\x00")


def test_parse_length_mismatch():
    with pytest.raises(AclError):
        AclData.parse(bytes([1, 0, 5, 0, 1]))


def test_fragments_start_with_acl_type_and_respect_size():
    packets = fragment_l2cap(0x40, 4, bytes(range(60)), 27)
    assert len(packets) > 1
    assert all(p[0] == 0x02 for p in packets)
    assert all(len(p) <= 5 + 27 for p in packets)


def test_fragment_flags_and_handle():
    parsed = _parse_all(fragment_l2cap(0x40, 4, bytes(range(60)), 27))
    assert parsed[0].flags == 0
    assert all(a.flags == 1 for a in parsed[1:])
    assert all(a.handle == 0x40 for a in parsed)


def test_round_trip_reassembly():
    payload = bytes(range(60))
    reassembler = L2capReassembler()
    results = [reassembler.feed(a) for a in _parse_all(fragment_l2cap(0x40, 4, payload, 27))]
    assert results[-1] == payload
    assert all(r is None for r in results[:-1])


def test_single_fragment_round_trip():
    payload = b"\x0a\x03\x00"
    (acl,) = _parse_all(fragment_l2cap(1, 4, payload, 27))
    assert L2capReassembler().feed(acl) == payload


def test_signal_channel_ignored():
    packets = fragment_l2cap(1, 5, connection_parameter_update_request(), 27)
    reassembler = L2capReassembler()
    assert [reassembler.feed(a) for a in _parse_all(packets)] == [None]


def test_connection_parameter_update_request_bytes():
    assert connection_parameter_update_request() == bytes(
        [0x12, 0x02, 0x08, 0x00, 0x08, 0x00, 0x18, 0x00, 0x00, 0x00, 0xC8, 0x00]
    )


def test_missing_continuation_raises():
    first = _parse_all(fragment_l2cap(1, 4, bytes(60), 27))[0]
    other = _parse_all(fragment_l2cap(1, 4, bytes(60), 27))[0]
    reassembler = L2capReassembler()
    assert reassembler.feed(first) is None
    with pytest.raises(AclError):
        reassembler.feed(other)


def test_short_l2cap_packet_raises():
    acl = AclData.parse(bytes([1, 0, 2, 0, 0, 0]))
    with pytest.raises(AclError):
        L2capReassembler().feed(acl)


def test_bad_buffer_size():
    with pytest.raises(ValueError):
        fragment_l2cap(1, 4, b"x", 0)