import socket
import threading

import pytest

from netlab.ruptime_client import BUFFER_SIZE, fetch_uptime, main


def _one_shot_server(payload):
    listener = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    listener.bind(("127.0.0.1", 0))
    listener.listen(1)
    listener.settimeout(5)

    def run():
        with listener:
            conn, _ = listener.accept()
            with conn:
                conn.sendall(payload)

    thread = threading.Thread(target=run, daemon=True)
    thread.start()
    return listener.getsockname()[1], thread


def test_fetch_uptime_strips_padding():
    text = "up 1 day\n"
    port, thread = _one_shot_server(text.encode().ljust(BUFFER_SIZE, b"\0"))
    assert fetch_uptime("127.0.0.1", port) == text
    thread.join(5)


def test_fetch_uptime_without_padding():
    port, thread = _one_shot_server(b"load average")
    assert fetch_uptime("127.0.0.1", port) == "load average"
    thread.join(5)


def test_fetch_uptime_refused():
    probe = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    probe.bind(("127.0.0.1", 0))
    port = probe.getsockname()[1]
    probe.close()
    with pytest.raises(OSError):
        fetch_uptime("127.0.0.1", port)


@pytest.mark.parametrize("argv", [[], ["127.0.0.1", "extra"]])
def test_main_requires_one_argument(argv, capsys):
    assert main(argv) == 1
    assert "Need to include the ip" in capsys.readouterr().err


def test_main_reports_connect_failure(capsys):
    assert main(["256.1.1.1"]) == 1
    assert "connect failed" in capsys.readouterr().err