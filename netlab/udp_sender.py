"""Command that sends the alphabet to a Go-Back-N receiver over UDP."""

from __future__ import annotations

import ipaddress
import random
import socket
import sys
from collections.abc import Sequence
from dataclasses import dataclass

from netlab.gbn_sender import gbn_send_alphabet_to

USAGE = "Usage: udp_sender <ip> <dest_port> <ber>"


@dataclass(frozen=True)
class SenderArgs:
    """Destination address and bit error rate for the sender."""

    ip: str
    dest_port: int
    ber: float


def parse_args(argv: Sequence[str]) -> SenderArgs:
    """Parse ``<ip> <dest_port> <ber>``; raise ValueError on bad input."""
    if len(argv) != 3:
        raise ValueError(USAGE)
    ip, port_text, ber_text = argv
    try:
        address = str(ipaddress.IPv4Address(ip))
        port = int(port_text)
        ber = float(ber_text)
    except ValueError as exc:
        raise ValueError(f"{USAGE}\n{exc}") from exc
    if not 0 <= port <= 65535:
        raise ValueError(f"{USAGE}\nport out of range: {port}")
    return SenderArgs(address, port, ber)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the sender; returns the process exit status."""
    argv = sys.argv[1:] if argv is None else argv
    try:
        args = parse_args(argv)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    try:
        sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    except OSError as exc:
        print(f"Error creating socket: {exc}", file=sys.stderr)
        return 1
    with sock:
        gbn_send_alphabet_to(sock, (args.ip, args.dest_port), args.ber, random.Random())
    return 0


if __name__ == "__main__":
    sys.exit(main())