# netlab

A few small networking tools. They use only Python's standard library.

- **Go-Back-N over UDP**: a sender sends the alphabet as 13 packets of two
  letters each, with a window of 3. A receiver acknowledges them. Every packet
  carries a CRC-16/CCITT-FALSE checksum. The sender can flip bits at random to
  mimic a noisy link.
- **Lossy UDP forwarder**: receives datagrams on one address and passes them
  on to another. It drops a set share of them along the way.
- **Remote uptime**: a TCP server on port 3490 replies with the first line of
  `uptime` output. A client asks it for that line.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Go-Back-N

Start the receiver on a port:

```
netlab-gbn-receiver 5000
```

Send the alphabet to it. The arguments are an IPv4 address, a port and the
bit error rate. The bit error rate is the chance that any single bit of a
packet is flipped before it is sent.

```
netlab-gbn-sender 127.0.0.1 5000 0.01
```

A packet is six bytes:

| Byte | Field                 |
|------|-----------------------|
| 0    | type                  |
| 1    | sequence number       |
| 2–3  | data                  |
| 4–5  | CRC, big-endian       |

The packet types are `DATA` (1), `ACK` (2) and `NAK` (3).

How the receiver replies:

- A packet whose CRC does not match gets a `NAK`.
- Every valid packet gets an `ACK` that carries the next sequence number the
  receiver expects. This holds whether the packet came in order or not.
- After all 13 packets have arrived, the receiver starts again from sequence
  number 0.

How the sender reacts:

- An `ACK` moves the window up to the sequence number it carries.
- A `NAK` makes the sender resend from the start of the window.
- The sender stops once every packet is acknowledged, or when a socket error
  occurs.

The packet and CRC helpers can be used directly:

```python
from netlab.crc import crc_calculate
from netlab.packet import Packet, PacketType, introduce_bit_error

crc_calculate(b"123456789")          # 0x29B1
pkt = Packet.build(PacketType.DATA, b"AB", 0)
wire = pkt.to_bytes()
Packet.from_bytes(wire).is_valid()   # True
print(pkt)                           # [DAT|0|AB|...]
noisy = introduce_bit_error(wire, 0.05)
```

The receiver's logic lives in `netlab.gbn_receiver.GoBackNReceiver`. Its
`handle(raw)` method takes one datagram and returns the reply packet, with no
socket involved.

## UDP forwarder

```
netlab-udp-forwarder <SERVER_IP> <SERVER_PORT> <DESTINATION_IP> <DESTINATION_PORT> <LOSS_RATE>
```

- Both addresses must be IPv4 addresses.
- Both ports must be between 1024 and 65535.
- The loss rate is how many packets out of 1000 are dropped, from 0 to 1000.

## Remote uptime

Start the server:

```
netlab-ruptime-server
```

Ask it for its uptime:

```
netlab-ruptime-client 127.0.0.1
```

The server listens on port 3490. It runs `uptime` once for each connection
and sends back the first line of its output. The client prints the host it
was given, then that line.

## Limitations

- The Go-Back-N sender has no retransmission timer. It waits for a reply
  before it does anything else, so if a packet or reply is lost and nothing
  comes back, the sender stays blocked.
- The uptime server serves one client at a time.
- The uptime server and client both use port 3490; they offer no option to
  change it.