import pytest

from blegatt.uuid import UUID, parse_uuid, reverse_bytes, uuid16, uuid_contains


def test_uuid16():
    assert uuid16(0x1800) == UUID(bytes([0x00, 0x18]))


@pytest.mark.parametrize(
    "fwd, back",
    [
        (bytes([0, 1]), bytes([1, 0])),
        (bytes([0, 1, 2]), bytes([2, 1, 0])),
        (bytes([0, 1, 2, 3]), bytes([3, 2, 1, 0])),
        (bytes(range(16)), bytes(range(15, -1, -1))),
    ],
)
def test_reverse(fwd, back):
    assert reverse_bytes(fwd) == back


@pytest.mark.parametrize("fwd", [bytes([0, 1]), bytes(range(16))])
def test_reverse_uuid_bytes(fwd):
    assert reverse_bytes(UUID(fwd).to_bytes()) == fwd[::-1]


def test_parse_short_uuid():
    u = parse_uuid("1800")
    assert str(u) == "1800"
    assert u == uuid16(0x1800)
    assert len(u) == 2


def test_parse_long_uuid_with_dashes():
    u = parse_uuid("34DA3AD1-7110-41A1-B1EF-4430F509CDE7")
    assert str(u) == "34da3ad1711041a1b1ef4430f509cde7"
    assert len(u) == 16


def test_parse_round_trip():
    u = parse_uuid("d0611e78bbb44591a5f8487910ae4366")
    assert parse_uuid(str(u)) == u


def test_parse_rejects_bad_length():
    with pytest.raises(ValueError):
        parse_uuid("180011")


def test_parse_rejects_non_hex():
    with pytest.raises(ValueError):
        parse_uuid("zz00")


def test_constructor_rejects_bad_length():
    with pytest.raises(ValueError):
        UUID(bytes([1, 2, 3]))


def test_hash_matches_equality():
    assert {uuid16(0x2902), parse_uuid("2902")} == {uuid16(0x2902)}


def test_uuid_contains():
    items = [uuid16(0x1800), uuid16(0x1801)]
    assert uuid_contains(items, uuid16(0x1801)) is True
    assert uuid_contains(items, uuid16(0x180A)) is False
    assert uuid_contains([], uuid16(0x1800)) is False
    assert uuid_contains(None, uuid16(0x1800)) is True