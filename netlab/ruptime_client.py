"""TCP client that asks a remote host for its uptime line."""

from __future__ import annotations

import socket
import sys
from collections.abc import Sequence

PORT = 3490
BUFFER_SIZE = 1024


def fetch_uptime(host: str, port: int = PORT) -> str:
    """Connect to ``host`` and return the uptime text it sends.

    Raises OSError when the connection or read fails.
    """
    with socket.create_connection((host, port)) as conn:
        data = conn.recv(BUFFER_SIZE)
    return data.split(b"\0", 1)[0].decode("utf-8", errors="replace")


def main(argv: Sequence[str] | None = None) -> int:
    """Print ``<IP>: <uptime>`` for the host given; returns the exit status."""
    argv = sys.argv[1:] if argv is None else argv
    if len(argv) != 1:
        print("Need to include the ip to connect to: ruptime_client <IP>", file=sys.stderr)
        return 1
    host = argv[0]
    try:
        text = fetch_uptime(host, PORT)
    except OSError as exc:
        print(f"connect failed: {exc}", file=sys.stderr)
        return 1
    print(f"{host}: {text}", end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())