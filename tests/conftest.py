"""
Pytest fixtures for VLC RC client tests.

Provides free ports, a bare listening socket, a threaded fake RC
interface and a stand-in VLC executable.
"""

import os
import socket
import socketserver
import sys
import threading
from pathlib import Path

import pytest

HOST = "127.0.0.1"

GREETING = (
    b"VLC media player 3.0.18 Vetinari\n"
    b"Command Line Interface initialized. Type `help' for help.\n"
    b"> "
)

FAKE_VLC = Path(__file__).parent / "fake_vlc.py"


class FakeRCHandler(socketserver.StreamRequestHandler):
    """Greets like VLC, then echoes every line followed by a prompt."""

    def handle(self):
        try:
            self.wfile.write(GREETING)
            for raw in self.rfile:
                line = raw.decode().strip()
                self.server.received.append(line)
                if line == "quit":
                    break
                if line == "silent":
                    continue
                self.wfile.write(f"{line}\n> ".encode())
        except OSError:
            pass


class FakeRCServer(socketserver.ThreadingTCPServer):
    allow_reuse_address = True
    daemon_threads = True

    def __init__(self):
        super().__init__((HOST, 0), FakeRCHandler)
        self.received = []

    @property
    def port(self) -> int:
        return self.server_address[1]


class HangUpHandler(socketserver.BaseRequestHandler):
    """Accepts a connection and closes it without a word."""

    def handle(self):
        pass


@pytest.fixture
def hang_up_server():
    """Run a server that accepts connections and closes them at once."""
    server = socketserver.ThreadingTCPServer((HOST, 0), HangUpHandler)
    server.daemon_threads = True
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    yield server
    server.shutdown()
    server.server_close()


@pytest.fixture
def free_port():
    """Return a port with no listener on it."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind((HOST, 0))
        return sock.getsockname()[1]


@pytest.fixture
def listening_socket():
    """Bind and listen on an ephemeral port; yield (host, port)."""
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.bind((HOST, 0))
    sock.listen(5)
    yield HOST, sock.getsockname()[1]
    sock.close()


@pytest.fixture
def rc_server():
    """Run a fake VLC RC interface in a background thread."""
    server = FakeRCServer()
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    yield server
    server.shutdown()
    server.server_close()


@pytest.fixture
def fake_vlc(tmp_path):
    """Create an executable that behaves like VLC with the RC interface."""
    script = tmp_path / "vlc"
    script.write_text(f'#!/bin/sh\nexec "{sys.executable}" "{FAKE_VLC}" "$@"\n')
    os.chmod(script, 0o755)
    return str(script)
