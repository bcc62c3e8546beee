# blerelay

`blerelay` passes Bluetooth Low Energy UUIDs between cooperating nodes on a
local network. Every node announces itself by UDP broadcast, keeps track of
which peers are online, and broadcasts each UUID it is handed.

It uses only the standard library and needs Python 3.10 or later.

## Modules

- `blerelay.config`: the node count `N_NODES` and the records `Message`,
  `AcknowledgeMessage` and `PeerStatusUpdate`.
- `blerelay.uuid`: BLE UUIDs (`UUID`, `uuid16`, `parse_uuid`, `reverse`).
- `blerelay.subscriber`: `Subscriber`, a thread-safe table of notification
  callbacks keyed by attribute handle, and `InvalidLengthError`.
- `blerelay.hci_socket`: HCI socket addresses (`SockaddrHCI`), filters
  (`HCIFilter`), and `open_socket`, `bind` and `set_filter`.
- `blerelay.hci_opcodes`: `OGF`, `Opcode` and `opcode(ogf, ocf)`.
- `blerelay.hci_commands`: `CommandParam`, the link control, link policy and
  host controller command parameters, `command_packet` and `check_status`.
- `blerelay.le_commands`: the LE controller command parameters.
- `blerelay.conn`, `blerelay.localip`, `blerelay.bcast`, `blerelay.peers`,
  `blerelay.network`, `blerelay.uuidhandler`: broadcast networking and the
  relay logic.

## UUIDs

A `UUID` holds its bytes little-endian, the order the radio sends them;
`str()` gives the usual big-endian hex.

```python
from blerelay.uuid import parse_uuid, reverse, uuid16

short = parse_uuid("1800")
assert short == uuid16(0x1800)
assert len(short) == 2
assert str(short) == "1800"
assert short.data == b"\x00\x18"

long_form = parse_uuid("34DA3AD1-7110-41A1-B1EF-4430F509CDE7")
assert len(long_form) == 16

assert reverse(b"\x00\x01\x02") == b"\x02\x01\x00"
```

`parse_uuid` ignores dashes. A string that is not hexadecimal, or that
decodes to anything other than 2 or 16 bytes, raises `ValueError`; so does
`uuid16` for a value outside 0..0xFFFF.

## HCI commands

Each parameter class is a frozen dataclass that knows its `opcode` and
`length`; `marshal()` returns exactly `length` bytes, padding with zeros.
Fields out of range, and byte fields of the wrong size, raise `ValueError`.
Device addresses (`direct_address`, `peer_address`, `address`,
`random_address`) are given as six bytes and written reversed, in wire order.

```python
from blerelay.hci_commands import Reset, check_status, command_packet
from blerelay.hci_opcodes import OGF, Opcode, opcode
from blerelay.le_commands import LESetAdvertisingData

assert opcode(OGF.HOST_CTL, 0x0003) == Opcode.RESET
assert command_packet(Reset()) == b"\x01\x03\x0c\x00"

adv = LESetAdvertisingData(
    advertising_data_length=6,
    advertising_data=bytes([0x02, 0x01, 0x06, 0x03, 0x01, 0xFE]),
)
assert len(adv.marshal()) == 32

assert check_status(Reset(), b"\x00", b"\x00") == 0
```

`command_packet(param)` prefixes the parameters with the command packet type
byte, the little-endian opcode and the parameter length.
`check_status(param, response, expected)` returns the status byte (or `None`
for an empty response when `expected` is empty) and raises `HCICommandError`
when the status is missing or not among the expected bytes.

## HCI sockets

`open_socket(domain, kind, proto)` and `bind(sock, address)` retry up to five
times, a second apart, while the device reports `EBUSY`, then raise
`SocketOpenError` or `SocketBindTimeout`. Other errors are raised at once.
`SockaddrHCI.pack()` and `HCIFilter.pack()` return the raw structures;
`set_filter` installs a filter with `setsockopt`. `AF_BLUETOOTH` is taken
from the `socket` module and is 0 where the platform lacks it.

## Peers

`PeerTracker.observe(peer_id, now)` records a heartbeat (an empty `peer_id`
records none) and returns a `PeerUpdate` when a peer first appears or has
been silent for longer than the timeout (0.999 s by default), else `None`.

```python
from blerelay.peers import PeerTracker

tracker = PeerTracker()
update = tracker.observe("10.0.0.5", 0.0)
assert update.new == "10.0.0.5" and update.peers == ["10.0.0.5"]
assert tracker.observe("10.0.0.5", 0.5) is None
update = tracker.observe("", 2.0)
assert update.lost == ["10.0.0.5"] and update.peers == []
```

`peers.transmitter` broadcasts the node's identifier to `255.255.255.255`
every 50 ms while enabled; `peers.receiver` feeds received identifiers to a
tracker and puts each update on a queue.

## Broadcasting values

`bcast.encode_tagged(tag, value)` gives the tag followed by compact JSON
(dataclasses are turned into dicts); `bcast.decode_tagged(data, tags)`
returns a `(tag, value)` pair for each tag the data starts with.
`bcast.transmit` sends every value put on its queues to a host
(`192.168.1.2` by default) and `bcast.receive` puts received values on the
queue of their tag. Tags must be distinct, non-empty strings.

## Relaying

`network.sync(events, online_status, local_ip, stop)` starts the peer
transmitter and receiver on port 20004 and a broadcast transmitter on port
15647, turns peer updates into `PeerStatusUpdate` records on
`online_status`, and broadcasts each string taken from `events` under the
tag `"string"`.

`UUIDHandler` keeps a table of `N_NODES` entries, entry 0 being this node.
Its `run(events, stop)` loop reads one queue carrying both
`PeerStatusUpdate` records, which set the online flag of the other entries
with the same address, and UUID strings, which it puts on its outgoing
queue. Anything else raises `TypeError`.

```python
import queue
import threading

from blerelay.localip import local_ip
from blerelay.network import sync
from blerelay.uuidhandler import UUIDHandler

stop = threading.Event()
ip = local_ip()
events = queue.Queue()
outgoing = queue.Queue()
handler = UUIDHandler(ip, outgoing)

threading.Thread(target=handler.run, args=(events, stop), daemon=True).start()
threading.Thread(target=sync, args=(outgoing, events, ip, stop), daemon=True).start()

events.put("1800")  # a UUID seen by this node
```

`local_ip()` opens a TCP connection towards 8.8.8.8 port 53, returns the
local address of that connection and caches it; failures raise `OSError`.
All loops stop once their `stop` event is set.

## What the package does not do

It does not scan for Bluetooth devices: UUIDs have to be put on the
handler's queue by the caller. It has no GATT client or server, does not
send HCI commands to a controller or read its events, and has no
command-line program; the pieces above are started from your own code.