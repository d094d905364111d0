"""TCP server that answers every connection with one line of ``uptime`` output."""

from __future__ import annotations

import socket
import subprocess
import sys
from collections.abc import Sequence

PORT = 3490
BACKLOG = 10
BUFFER_SIZE = 1024
UPTIME_COMMAND = "uptime"


def read_uptime(command: str = UPTIME_COMMAND) -> str:
    """Run ``command`` through the shell and return the first line it prints.

    The line keeps its newline and is cut to fit a reply buffer.
    Raises OSError when the command cannot be started.
    """
    result = subprocess.run(command, shell=True, stdout=subprocess.PIPE, check=False)
    first = result.stdout.splitlines(keepends=True)[:1]
    line = first[0] if first else b""
    return line[: BUFFER_SIZE - 1].decode("utf-8", errors="replace")


def _reply(text: str) -> bytes:
    payload = text.encode("utf-8")[: BUFFER_SIZE - 1]
    return payload.ljust(BUFFER_SIZE, b"\0")


def handle_client(conn: socket.socket, command: str = UPTIME_COMMAND) -> bool:
    """Send one uptime reply over ``conn`` and close it; True when it was sent."""
    with conn:
        try:
            text = read_uptime(command)
        except OSError as exc:
            print(f"popen failed: {exc}", file=sys.stderr)
            return False
        try:
            conn.sendall(_reply(text))
        except OSError as exc:
            print(f"write failed: {exc}", file=sys.stderr)
            return False
    return True


def serve(sock: socket.socket, command: str = UPTIME_COMMAND) -> None:
    """Accept clients on a listening ``sock`` forever.

    An error from accept is raised to the caller.
    """
    while True:
        conn, _ = sock.accept()
        handle_client(conn, command)


def main(argv: Sequence[str] | None = None) -> int:
    """Listen on the uptime port and serve; returns 1 on a setup failure."""
    try:
        sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    except OSError as exc:
        print(f"socket failed: {exc}", file=sys.stderr)
        return 1
    with sock:
        try:
            sock.bind(("", PORT))
        except OSError as exc:
            print(f"bind failed: {exc}", file=sys.stderr)
            return 1
        try:
            sock.listen(BACKLOG)
        except OSError as exc:
            print(f"listen failed: {exc}", file=sys.stderr)
            return 1
        print(f"Server listening on port {PORT}")
        try:
            serve(sock, UPTIME_COMMAND)
        except OSError as exc:
            print(f"client socket: {exc}", file=sys.stderr)
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())