"""
VLC RC client.

Composes the instance lifecycle (InstanceManager) and the RC connection
(Connection) behind one object. With auto_start, constructing a Client
launches VLC if needed and connects, retrying while VLC boots.
"""

import time
from typing import Any, Dict, Optional

from vlc_rc.config import ClientConfig
from vlc_rc.connection import Connection
from vlc_rc.errors import ConnectionRefused, ProcessError
from vlc_rc.logger import setup_logger
from vlc_rc.server import InstanceManager

logger = setup_logger(__name__)

# Connection attempts made while a managed instance boots
CONNECT_ATTEMPTS = 3
RETRY_DELAY = 1.0  # seconds between attempts


class Client:
    """
    Client for the VLC RC interface.

    Usage:
        vlc = Client()                       # starts VLC and connects
        vlc.connection.write("add movie.mp4")
        vlc.stop()

        vlc = Client(port=4212, auto_start=False)
        vlc.connect()

    Construction either returns a usable client or raises
    ConnectionRefused; with auto_start the client is connected, otherwise
    it is disconnected and ready for connect().
    """

    def __init__(self, config: Optional[ClientConfig] = None, **options: Any):
        """
        Args:
            config: Client settings. If None, built from options
            **options: host, port, auto_start, headless, executable.
                Unknown options are ignored.

        Raises:
            ConnectionRefused: If auto_start is set and every connection
                attempt failed
        """
        self._config = config if config is not None else ClientConfig.from_options(options)

        self._server = InstanceManager(
            self._config.host,
            self._config.port,
            headless=self._config.headless,
            executable=self._config.executable,
        )
        self._connection = Connection(self._config.host, self._config.port)

        if self._config.auto_start:
            spawned_pid = self._server.start()
            try:
                self._connect_with_retry()
            except ConnectionRefused:
                if spawned_pid is not None:
                    self._stop_spawned()
                raise

    def _stop_spawned(self) -> None:
        """Stop the instance started by a failed construction."""
        try:
            self._server.stop()
        except ProcessError as e:
            logger.error("Failed to stop VLC after connection failure: %s", e)

    def _connect_with_retry(self) -> None:
        """Connect, retrying on ConnectionRefused up to CONNECT_ATTEMPTS times."""
        attempt = 0
        while True:
            attempt += 1
            try:
                self._connection.connect()
                return
            except ConnectionRefused as e:
                if attempt >= CONNECT_ATTEMPTS:
                    logger.error(
                        "Giving up on %s after %d attempts",
                        self._config.target, attempt,
                    )
                    raise
                logger.warning(
                    "Connect attempt %d/%d to %s failed: %s",
                    attempt, CONNECT_ATTEMPTS, self._config.target, e,
                )
                time.sleep(RETRY_DELAY)

    # Settings

    @property
    def config(self) -> ClientConfig:
        """Get the client settings."""
        return self._config

    @property
    def host(self) -> str:
        return self._config.host

    @property
    def port(self) -> int:
        return self._config.port

    @property
    def auto_start(self) -> bool:
        return self._config.auto_start

    @property
    def headless(self) -> bool:
        """Whether the self-managed instance runs without GUI."""
        return self._config.headless

    @property
    def connection(self) -> Connection:
        """Get the RC connection, for sending commands."""
        return self._connection

    # Instance lifecycle

    def is_running(self) -> bool:
        """Check if a VLC RC interface is reachable on host:port."""
        return self._server.is_running()

    is_started = is_running

    def start(self) -> Optional[int]:
        """
        Start a VLC instance in a subprocess.

        Returns:
            PID of the subprocess, or None if VLC is already running
        """
        return self._server.start()

    def stop(self) -> Optional[int]:
        """
        Disconnect and terminate the self-managed VLC instance.

        Returns:
            PID of the terminated subprocess, or None if no instance is
            managed by this client
        """
        self.disconnect()
        return self._server.stop()

    # Connection

    def connect(self) -> None:
        """
        Connect to the RC interface on host:port.

        Raises:
            ConnectionRefused: If the connection fails
        """
        self._connection.connect()

    def disconnect(self) -> None:
        """Disconnect from the RC interface."""
        self._connection.disconnect()

    @property
    def is_connected(self) -> bool:
        """Check if there is a connection to the RC interface."""
        return self._connection.is_connected

    def get_status(self) -> Dict[str, Any]:
        """Get client status for diagnostics."""
        handle = self._server.handle
        return {
            "target": str(self._config.target),
            "connection": self._connection.state.value,
            "pid": handle.pid if handle else None,
            "headless": self._config.headless,
            "auto_start": self._config.auto_start,
        }

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.stop()

    def __repr__(self) -> str:
        return f"Client(target={self._config.target}, connected={self.is_connected})"
