# blegatt

Pure-Python building blocks for Bluetooth Low Energy work: BLE UUIDs, HCI
command opcodes, HCI event decoding and dispatch, ACL/L2CAP fragmentation
and reassembly, an MTU-bounded writer for ATT responses, a registry of
notification callbacks and a reusable buffer pool. It has no dependencies
outside the standard library.

## Installation

```
pip install blegatt
```

## UUIDs

```python
from blegatt.uuid import parse_uuid, uuid16, uuid_contains

battery = uuid16(0x180F)
assert str(battery) == "180f"
assert parse_uuid("180F") == battery
assert battery.to_bytes() == b"\x0f\x18"   # little-endian wire form
assert uuid_contains(None, battery)        # None means "any UUID"
```

A `UUID` is built from 2 or 16 bytes in wire order; any other length raises
`ValueError`. `parse_uuid` accepts dashed or undashed hex and raises
`ValueError` for bad hex or a bad length. UUIDs compare by value and can be
used as dictionary keys. `reverse_bytes` returns a reversed copy of a byte
string.

## HCI opcodes

```python
from blegatt.hci_opcodes import OP_LE_SET_SCAN_ENABLE, OpcodeGroup, ocf_of, ogf_of, opcode

assert opcode(OpcodeGroup.LE_CTL, 0x000C) == OP_LE_SET_SCAN_ENABLE == 0x200C
assert ogf_of(0x200C) == OpcodeGroup.LE_CTL
assert ocf_of(0x200C) == 0x000C
```

`blegatt.hci_opcodes` defines `OP_*` constants for the link control, link
policy, host controller, informational and LE controller command groups.

## HCI events

```python
from blegatt.hci_events import DisconnectionComplete, EventCode, EventDispatcher

dispatcher = EventDispatcher()
dispatcher.register(EventCode.DISCONNECTION_COMPLETE, DisconnectionComplete.parse)
event = dispatcher.dispatch(bytes([0x05, 0x04, 0x00, 0x40, 0x00, 0x13]))
assert event.connection_handle == 0x0040 and event.reason == 0x13
```

`dispatch` checks the event header, passes the parameters to the handler
registered for the event code and returns its result (`None` when no
handler is registered). Parsers are provided for Disconnection Complete,
Command Complete, Command Status, Number Of Completed Packets and the LE
meta sub-events: connection complete, advertising report, connection
update complete, read remote used features complete, LTK request and
remote connection parameter request. `EventCode` and `LEEventCode` name
the codes. Malformed input raises `EventError`.

## ACL and L2CAP

```python
from blegatt.acl import AclData, L2capReassembler, fragment_l2cap

packets = fragment_l2cap(handle=0x0040, cid=0x0004, payload=bytes(60), buffer_size=27)
reassembler = L2capReassembler()
frames = [reassembler.feed(AclData.parse(p[1:])) for p in packets]
assert frames[-1] == bytes(60)
```

`fragment_l2cap` prepends the L2CAP header and splits the frame into HCI
ACL packets (packet-type byte included) of at most `buffer_size` data
bytes, marking every packet after the first as a continuation.
`AclData.parse` reads one packet without its packet-type byte.
`L2capReassembler.feed` returns a complete frame payload once all
fragments have arrived and `None` otherwise; packets on the signalling
channel are ignored. Both raise `AclError` on malformed input.
`connection_parameter_update_request()` returns the signalling payload
that asks the peer for a connection parameter update.

## ATT responses

```python
from blegatt.l2cap_writer import L2capWriter

w = L2capWriter(5)
w.write_uint16_fit(0x0102)
w.chunk()
w.write_fit(b"abcd")
assert w.commit() is False          # 2 + 4 bytes would exceed the MTU
assert w.getvalue() == b"\x02\x01"
```

`L2capWriter` never grows past its MTU. Plain writes (`write_fit`,
`write_byte_fit`, `write_uint16_fit`, `write_uuid_fit`) truncate and report
whether everything fit. A chunk, started with `chunk()`, is kept whole by
`commit()` or truncated by `commit_fit()`; `chunk_seek` drops bytes from
its start, and `writeable` tells how much would fit. Using chunk operations
out of order raises `WriterStateError`.

## Other helpers

- `blegatt.subscriber.Subscriber` is a thread-safe map from attribute
  handles to notification callbacks (`subscribe`, `unsubscribe`, `get`).
- `blegatt.byteorder` reads little-endian integers (`read_int8`,
  `read_uint8`, `read_uint16`, `read_uint64`) and converts device
  addresses between wire and display order (`read_mac`, `pack_mac`).
- `blegatt.pool.BytePool` hands out byte buffers of a fixed width and keeps
  up to a given number of returned ones; after `close()` it drains what it
  holds and then `get()` returns `None`.

## What it does not do

The package works on bytes only. It does not open Bluetooth sockets or talk
to a controller, it has no classes that encode HCI command parameters or
send commands and wait for their results, it does not compute ioctl request
numbers, and it carries no table of names for well-known service,
characteristic or descriptor UUIDs. There is no central or peripheral
connection logic and no command-line program.

## Running the tests

```
pip install blegatt[test]
pytest
```