"""Command that runs a Go-Back-N receiver on a UDP port."""

from __future__ import annotations

import socket
import sys
from collections.abc import Sequence
from dataclasses import dataclass

from netlab.gbn_receiver import gbn_receive

USAGE = "Usage: udp_receiver <port>"


@dataclass(frozen=True)
class ReceiverArgs:
    """Port the receiver listens on."""

    port: int


def parse_args(argv: Sequence[str]) -> ReceiverArgs:
    """Parse ``<port>``; raise ValueError on bad input."""
    if len(argv) != 1:
        raise ValueError(USAGE)
    try:
        port = int(argv[0])
    except ValueError as exc:
        raise ValueError(f"{USAGE}\n{exc}") from exc
    if not 0 <= port <= 65535:
        raise ValueError(f"{USAGE}\nport out of range: {port}")
    return ReceiverArgs(port)


def main(argv: Sequence[str] | None = None) -> int:
    """Bind the port and serve forever; returns 1 on a setup failure."""
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
        try:
            sock.bind(("", args.port))
        except OSError as exc:
            print(f"Error binding socket: {exc}", file=sys.stderr)
            return 1
        gbn_receive(sock)
    return 0


if __name__ == "__main__":
    sys.exit(main())