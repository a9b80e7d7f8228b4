# ethwords

Small, dependency-free building blocks for modelling an Ethernet/IPv4/UDP
byte-stream pipeline bit for bit:

- `ethwords.addresses.Addresses`: a frozen dataclass holding a MAC address
  (48 bits), an IPv4 address (32 bits) and a UDP port (16 bits), all as
  unsigned ints. Values that do not fit their width raise `ValueError`, and
  values that are not ints raise `TypeError`.
- `ethwords.protocols`: `EtherType` (`ARP`, `IPV4`, `IPV6`) and `IpProtocol`
  (`ICMP`, `TCP`, `UDP`), both `IntEnum`s.
- `ethwords.checksum.Checksum`: the 16-bit ones' complement Internet checksum
  used by IPv4, UDP and TCP. You feed it 16-bit words or single bytes, and it
  keeps them in a 27-bit accumulator.
- `ethwords.crc32.CRC32`: the Ethernet frame check sequence, computed one byte
  at a time. `crc32_preview(next_byte, prev_crc, add_count)` returns the next
  register state without changing any state.

## Installation

```
pip install .
```

## Examples

Addresses:

```python
from ethwords.addresses import Addresses

addr = Addresses(mac_addr=0x020000000001, ip_addr=0xC0A80001, udp_port=5000)
print(addr)   # {0x20000000001|0xc0a80001|0x1388}
```

Internet checksum of an IPv4 header, added one byte at a time:

```python
from ethwords.checksum import Checksum

header = bytes.fromhex("450000280000000080110000c0a80001c0a80002")
checksum = Checksum()
for byte in header:
    checksum.add_half(byte)
print(hex(checksum.value))
```

Three things to know about `Checksum`:

- `add_half` alternates between the high half and the low half of a word. It starts with the high half.
- `add` takes either a 16-bit word or another `Checksum`. When given another `Checksum`, it adds that object's accumulator.
- `reset` clears the sum and starts again with a high half.

Ethernet frame check sequence:

```python
from ethwords.crc32 import CRC32

crc = CRC32()
crc.update(frame_bytes)          # destination MAC through the end of the padding
fcs_bytes = crc.value.to_bytes(4, "big")
```

The most significant byte of `CRC32.value` is the first FCS byte sent on the
wire. The raw register is available as `CRC32.accumulator`.
`ethwords.crc32.CRC32_RESIDUE` is the value you get after feeding a correct
frame with its FCS appended. `CRC32_RESIDUE_INV_BREV` is the same residue as it
appears in the raw accumulator.

Both `Checksum` and `CRC32` share a few behaviours:

- `value` and `accumulator` are read-only properties.
- `bits(high, low)` returns a bit range of the current value, inclusive at both ends.
- Each object compares equal to an integer holding the same value.
- Two objects of the same class compare equal when their internal state matches.

## What this package does not do

The package does not model a stream word, meaning a data byte together with its `last` flag and a side-band field carrying `Addresses`.

It also does not build or parse whole Ethernet, IPv4 or UDP packets. It gives you only the pieces listed above.

## Running the tests

```
pip install .[test]
pytest
```