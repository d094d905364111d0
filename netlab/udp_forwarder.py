"""UDP forwarder that relays datagrams to a destination, dropping some on purpose."""

from __future__ import annotations

import ipaddress
import random
import socket
import sys
from collections.abc import Sequence
from dataclasses import dataclass

BUFFER_SIZE = 2048
MIN_PORT = 1024
MAX_PORT = 65535
MAX_LOSS = 1000
USAGE = (
    "Usage: udp_forwarder <SERVER_IP> <SERVER_PORT> "
    "<DESTINATION_IP> <DESTINATION_PORT> <LOSS_RATE>"
)


@dataclass(frozen=True)
class ForwarderConfig:
    """Where to listen, where to forward, and how many packets in 1000 to drop."""

    server_ip: str
    server_port: int
    dest_ip: str
    dest_port: int
    loss_rate: int


def _port(text: str) -> int:
    try:
        port = int(text)
    except ValueError:
        port = 0
    if not MIN_PORT <= port <= MAX_PORT:
        raise ValueError(f"Port must be within {MIN_PORT} and {MAX_PORT}")
    return port


def _address(text: str) -> str:
    try:
        return str(ipaddress.IPv4Address(text))
    except ValueError as exc:
        raise ValueError(f"invalid IPv4 address: {text}") from exc


def parse_args(argv: Sequence[str]) -> ForwarderConfig:
    """Parse the five command arguments; raise ValueError on bad input."""
    if len(argv) != 5:
        raise ValueError(USAGE)
    server_ip, server_port, dest_ip, dest_port, loss_text = argv
    server_port_num = _port(server_port)
    dest_port_num = _port(dest_port)
    try:
        loss_rate = int(loss_text)
    except ValueError as exc:
        raise ValueError(f"Loss rate must be between 0 and {MAX_LOSS}") from exc
    if not 0 <= loss_rate <= MAX_LOSS:
        raise ValueError(f"Loss rate must be between 0 and {MAX_LOSS}")
    return ForwarderConfig(
        _address(server_ip), server_port_num, _address(dest_ip), dest_port_num, loss_rate
    )


def should_forward(loss_rate: int, rng: random.Random | None = None) -> bool:
    """Decide whether one packet survives a loss of ``loss_rate`` in 1000."""
    rng = rng if rng is not None else random.Random()
    return rng.randrange(MAX_LOSS) >= loss_rate


def forward(
    recv_sock: socket.socket,
    send_sock: socket.socket,
    dest: tuple[str, int],
    loss_rate: int,
    rng: random.Random | None = None,
) -> None:
    """Relay datagrams from ``recv_sock`` to ``dest`` forever; socket errors are raised."""
    rng = rng if rng is not None else random.Random()
    while True:
        data, _ = recv_sock.recvfrom(BUFFER_SIZE)
        if should_forward(loss_rate, rng):
            send_sock.sendto(data, dest)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the forwarder; returns 1 on bad arguments or a socket failure."""
    argv = sys.argv[1:] if argv is None else argv
    try:
        config = parse_args(argv)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    try:
        with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as recv_sock, socket.socket(
            socket.AF_INET, socket.SOCK_DGRAM
        ) as send_sock:
            recv_sock.bind((config.server_ip, config.server_port))
            forward(
                recv_sock,
                send_sock,
                (config.dest_ip, config.dest_port),
                config.loss_rate,
                random.Random(),
            )
    except OSError as exc:
        print(f"forwarder failed: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())