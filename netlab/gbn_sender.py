"""Go-Back-N sender that transmits the alphabet two letters per packet."""

from __future__ import annotations

import random
import socket
import string
import sys

from netlab.packet import PACKET_SIZE, Packet, PacketType, introduce_bit_error

WINDOW = 3
PACKETS = 13
ALPHABET = string.ascii_uppercase


def build_alphabet_packets() -> list[Packet]:
    """Return the DATA packets carrying the alphabet, numbered from zero."""
    pairs = (ALPHABET[i : i + 2] for i in range(0, len(ALPHABET), 2))
    return [
        Packet.build(PacketType.DATA, pair, number)
        for number, pair in enumerate(pairs)
    ]


def gbn_send_alphabet_to(
    sock: socket.socket,
    dest: tuple[str, int],
    ber: float,
    rng: random.Random | None = None,
) -> bool:
    """Send the alphabet to ``dest`` with Go-Back-N, flipping bits at rate ``ber``.

    Returns True once every packet is acknowledged and False on a socket error.
    """
    rng = rng if rng is not None else random.Random()
    packets = build_alphabet_packets()
    for packet in packets:
        print(f"Built packet: {packet}")

    print("\n---------Beginning Go-Back-N Transmission---------")

    send_base = 0
    next_pkt = 0
    while send_base < PACKETS:
        while next_pkt < min(send_base + WINDOW, PACKETS):
            wire = introduce_bit_error(packets[next_pkt].to_bytes(), ber, rng)
            print(f"Sending packet {next_pkt} {Packet.from_bytes(wire)}")
            try:
                sock.sendto(wire, dest)
            except OSError as exc:
                print(f"Send failed: {exc}", file=sys.stderr)
                return False
            print(f"Packet {next_pkt} transmitted")
            next_pkt += 1

        try:
            raw, _ = sock.recvfrom(PACKET_SIZE)
        except OSError as exc:
            print(f"Receive failed: {exc}", file=sys.stderr)
            return False

        try:
            response = Packet.from_bytes(raw)
        except ValueError:
            continue

        if response.kind == PacketType.ACK:
            print(
                f"Response of ACK received for packet {response.sequence_number - 1}"
            )
            send_base = response.sequence_number
            next_pkt = send_base
        elif response.kind == PacketType.NAK:
            print(
                f"Response of NAK received for packet {response.sequence_number - 1}, "
                f"retransmitting from {send_base}"
            )
            next_pkt = send_base

    print("Transmitted all packets!")
    return True