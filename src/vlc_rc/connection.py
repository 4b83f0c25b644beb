"""
TCP connection to the VLC RC interface.

Owns a single socket and tracks whether it is connected. Commands are
opaque to this module: it moves raw bytes and, for convenience, single
newline-terminated lines.
"""

import socket
import time
from enum import Enum
from typing import Optional

from vlc_rc.errors import BrokenConnection, ConnectionRefused, NotConnected, ReadTimeout
from vlc_rc.logger import setup_logger

logger = setup_logger(__name__)

# Timeouts
CONNECT_TIMEOUT = 2.0   # seconds
GREETING_TIMEOUT = 0.1  # VLC prints a banner and a prompt on connect
READ_TIMEOUT = 2.0      # seconds

PROMPT = "> "


class ConnectionState(Enum):
    """Represents the state of the RC connection."""
    DISCONNECTED = "disconnected"
    CONNECTED = "connected"


class Connection:
    """
    Connection to a VLC RC interface.

    Valid transitions:
    - DISCONNECTED -> CONNECTED (successful connect)
    - CONNECTED -> DISCONNECTED (disconnect, or peer dropped the socket)

    connect() on a live connection is a no-op; the socket is never replaced.
    """

    def __init__(self, host: str, port: int, timeout: float = CONNECT_TIMEOUT):
        """
        Args:
            host: Host of the RC interface
            port: Port of the RC interface
            timeout: Connect timeout in seconds
        """
        self.host = host
        self.port = port
        self.timeout = timeout

        self._socket: Optional[socket.socket] = None
        self._buffer = b""

    @property
    def state(self) -> ConnectionState:
        """Get the current connection state."""
        if self._socket is None:
            return ConnectionState.DISCONNECTED
        return ConnectionState.CONNECTED

    @property
    def is_connected(self) -> bool:
        """Check if a connection to the RC interface is held."""
        return self._socket is not None

    def connect(self) -> None:
        """
        Open the connection to host:port.

        Raises:
            ConnectionRefused: If the connection cannot be established
        """
        if self._socket is not None:
            logger.debug("Already connected to %s:%d", self.host, self.port)
            return

        try:
            sock = socket.create_connection((self.host, self.port), timeout=self.timeout)
        except OSError as e:
            raise ConnectionRefused(
                f"Connection to {self.host}:{self.port} refused: {e}"
            ) from e

        try:
            self._drain_greeting(sock)
        except OSError as e:
            sock.close()
            raise ConnectionRefused(
                f"Connection to {self.host}:{self.port} dropped on connect: {e}"
            ) from e

        self._socket = sock
        self._buffer = b""
        logger.info("Connected to VLC RC on %s:%d", self.host, self.port)

    def disconnect(self) -> None:
        """Close the connection. Does nothing if already disconnected."""
        if self._socket is None:
            return

        sock = self._socket
        self._socket = None
        self._buffer = b""
        try:
            sock.close()
        except OSError as e:
            logger.warning("Error closing RC socket: %s", e)
        logger.info("Disconnected from VLC RC on %s:%d", self.host, self.port)

    def _drain_greeting(self, sock: socket.socket) -> None:
        """
        Discard the banner VLC sends right after accepting a connection.

        Raises:
            ConnectionResetError: If the peer closed the connection
            OSError: If the socket failed while draining
        """
        sock.settimeout(GREETING_TIMEOUT)
        deadline = time.monotonic() + GREETING_TIMEOUT
        try:
            while time.monotonic() < deadline:
                if not sock.recv(4096):
                    raise ConnectionResetError("closed by peer")
        except socket.timeout:
            pass
        sock.settimeout(READ_TIMEOUT)

    def _require_socket(self) -> socket.socket:
        if self._socket is None:
            raise NotConnected(f"Not connected to {self.host}:{self.port}")
        return self._socket

    def send(self, data: bytes) -> None:
        """
        Send raw bytes to the RC interface.

        Raises:
            NotConnected: If there is no connection
            BrokenConnection: If the peer closed or reset the connection
        """
        sock = self._require_socket()
        try:
            sock.sendall(data)
        except OSError as e:
            self.disconnect()
            raise BrokenConnection(f"Connection to {self.host}:{self.port} lost: {e}") from e

    def receive(self, bufsize: int = 4096, timeout: Optional[float] = None) -> bytes:
        """
        Receive raw bytes from the RC interface.

        Buffered bytes left over from read_line() are returned first.

        Args:
            bufsize: Maximum number of bytes to read
            timeout: Read timeout in seconds (default: READ_TIMEOUT)

        Returns:
            The bytes read

        Raises:
            NotConnected: If there is no connection
            ReadTimeout: If nothing arrives before the timeout
            BrokenConnection: If the peer closed or reset the connection
        """
        self._require_socket()
        if self._buffer:
            data, self._buffer = self._buffer[:bufsize], self._buffer[bufsize:]
            return data
        return self._recv(bufsize, timeout)

    def _recv(self, bufsize: int, timeout: Optional[float]) -> bytes:
        sock = self._require_socket()
        sock.settimeout(READ_TIMEOUT if timeout is None else timeout)
        try:
            data = sock.recv(bufsize)
        except socket.timeout as e:
            raise ReadTimeout(f"No data from {self.host}:{self.port}") from e
        except OSError as e:
            self.disconnect()
            raise BrokenConnection(f"Connection to {self.host}:{self.port} lost: {e}") from e

        if not data:
            self.disconnect()
            raise BrokenConnection(f"Connection to {self.host}:{self.port} closed by peer")
        return data

    def read_line(self, timeout: Optional[float] = None) -> str:
        """
        Read one line from the RC interface.

        Returns:
            The line without trailing newline and leading RC prompts

        Raises:
            NotConnected: If there is no connection
            ReadTimeout: If no complete line arrives before the timeout
            BrokenConnection: If the peer closed or reset the connection
        """
        self._require_socket()
        while b"\n" not in self._buffer:
            self._buffer += self._recv(4096, timeout)

        raw, self._buffer = self._buffer.split(b"\n", 1)
        return self._clean_line(raw.decode("utf-8", errors="replace"))

    @staticmethod
    def _clean_line(line: str) -> str:
        # Prompts pile up in front of the next reply line
        line = line.strip()
        while line.startswith(PROMPT):
            line = line[len(PROMPT):].lstrip()
        if line == PROMPT.strip():
            return ""
        return line

    def write(self, command: str, fetch_reply: bool = True) -> Optional[str]:
        """
        Send a single command line.

        Args:
            command: Command text, without newline
            fetch_reply: Read and return the first reply line

        Returns:
            The reply line, or None if fetch_reply is False
        """
        self.send(f"{command}\n".encode("utf-8"))
        if fetch_reply:
            return self.read_line()
        return None

    def __repr__(self) -> str:
        return f"Connection(target={self.host}:{self.port}, state={self.state.name})"
