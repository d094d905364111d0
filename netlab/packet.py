"""Six-byte Go-Back-N packets: type, sequence number, two data bytes, CRC."""

from __future__ import annotations

import random
import struct
from dataclasses import dataclass
from enum import IntEnum

from netlab.crc import crc_calculate

PACKET_SIZE = 6
DATA_SIZE = 2
_HEADER = struct.Struct("!BB2s")
_WIRE = struct.Struct("!BB2sH")


class PacketType(IntEnum):
    """Kinds of packet exchanged by sender and receiver."""

    DATA = 1
    ACK = 2
    NAK = 3


_LABELS = {PacketType.DATA: "DAT", PacketType.ACK: "ACK", PacketType.NAK: "NAK"}


def _check_byte(name: str, value: int) -> int:
    if not 0 <= int(value) <= 0xFF:
        raise ValueError(f"{name} must fit in one byte, got {value}")
    return int(value)


@dataclass(frozen=True)
class Packet:
    """A packet with its CRC held as a plain integer; the wire form is big-endian."""

    kind: int
    sequence_number: int
    data: bytes
    crc_sum: int

    @classmethod
    def build(cls, kind: int, data: bytes | str, sequence_number: int) -> Packet:
        """Build a packet of ``kind`` carrying ``data`` with a freshly computed CRC."""
        payload = data.encode("latin-1") if isinstance(data, str) else bytes(data)
        if len(payload) != DATA_SIZE:
            raise ValueError(f"packet data must be {DATA_SIZE} bytes, got {len(payload)}")
        kind = _check_byte("packet type", kind)
        sequence_number = _check_byte("sequence number", sequence_number)
        crc = crc_calculate(_HEADER.pack(kind, sequence_number, payload))
        return cls(kind, sequence_number, payload, crc)

    @classmethod
    def from_bytes(cls, raw: bytes | bytearray | memoryview) -> Packet:
        """Parse a packet from its six wire bytes."""
        raw = bytes(raw)
        if len(raw) != PACKET_SIZE:
            raise ValueError(f"a packet is {PACKET_SIZE} bytes, got {len(raw)}")
        kind, sequence_number, payload, crc = _WIRE.unpack(raw)
        return cls(kind, sequence_number, payload, crc)

    def _header(self) -> bytes:
        return _HEADER.pack(self.kind, self.sequence_number, self.data)

    def to_bytes(self) -> bytes:
        """Return the six wire bytes, CRC in network byte order."""
        return self._header() + self.crc_sum.to_bytes(2, "big")

    def expected_crc(self) -> int:
        """CRC computed over the type, sequence number and data."""
        return crc_calculate(self._header())

    def is_valid(self) -> bool:
        """True when the carried CRC matches the packet contents."""
        return self.crc_sum == self.expected_crc()

    def describe(self) -> str:
        """One-line summary such as ``[DAT|0|AB|1a2b]``."""
        try:
            label = _LABELS[PacketType(self.kind)]
        except ValueError:
            label = "???"
        text = "".join(" " if b == 0 else chr(b) for b in self.data)
        return f"[{label}|{self.sequence_number}|{text}|{self.crc_sum:x}]"

    def __str__(self) -> str:
        return self.describe()


def introduce_bit_error(
    data: bytes | bytearray | memoryview,
    p: float,
    rng: random.Random | None = None,
) -> bytes:
    """Return a copy of ``data`` in which each bit is flipped with probability ``p``."""
    rng = rng if rng is not None else random.Random()
    result = bytearray(data)
    for index, byte in enumerate(result):
        for bit in range(8):
            if rng.random() <= p:
                byte ^= 1 << bit
        result[index] = byte
    return bytes(result)