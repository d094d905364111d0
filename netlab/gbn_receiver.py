"""Go-Back-N receiver: acknowledges in-order packets and NAKs corrupted ones."""

from __future__ import annotations

import socket
import sys

from netlab.packet import PACKET_SIZE, Packet, PacketType

NUM_EXPECTED_PACKETS = 13
_EMPTY = b"\0\0"


class GoBackNReceiver:
    """State of a Go-Back-N receiver; answers each incoming packet with a reply."""

    def __init__(self, expected_packets: int = NUM_EXPECTED_PACKETS) -> None:
        self.expected_packets = expected_packets
        self.expected = 0

    def handle(self, raw: bytes) -> Packet:
        """Process one received datagram and return the reply packet.

        Raises ValueError when ``raw`` is not a whole packet.
        """
        packet = Packet.from_bytes(raw)
        print(packet.describe())

        if not packet.is_valid():
            print(
                f"\t-> Expected CRC: {packet.expected_crc():x}, "
                f"Received CRC: {packet.crc_sum:x}"
            )
            response = Packet.build(PacketType.NAK, _EMPTY, self.expected)
        elif packet.sequence_number == self.expected:
            self.expected += 1
            response = Packet.build(PacketType.ACK, _EMPTY, self.expected)
        else:
            print(f"\t-> Out of order, expected {self.expected}")
            response = Packet.build(PacketType.ACK, _EMPTY, self.expected)

        if self.expected >= self.expected_packets:
            print("\n---------Restarting subroutine---------")
            self.expected = 0
        return response


def gbn_receive(sock: socket.socket) -> None:
    """Serve Go-Back-N transfers on ``sock`` forever."""
    receiver = GoBackNReceiver()
    print("\n---------Beginning subroutine---------")
    while True:
        try:
            raw, addr = sock.recvfrom(PACKET_SIZE)
        except OSError as exc:
            print(f"recv failed: {exc}", file=sys.stderr)
            continue
        try:
            response = receiver.handle(raw)
        except ValueError as exc:
            print(f"recv failed: {exc}", file=sys.stderr)
            continue
        print(f"\t-> Sending: {response}")
        try:
            sock.sendto(response.to_bytes(), addr)
        except OSError as exc:
            print(f"Send failed: {exc}", file=sys.stderr)