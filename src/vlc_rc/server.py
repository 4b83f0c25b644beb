"""
Lifecycle of a self-managed VLC instance.

The InstanceManager checks whether an RC interface is reachable, spawns a
VLC subprocess with the RC interface bound to the configured host/port and
terminates the subprocess it spawned.
"""

import subprocess
from dataclasses import dataclass
from typing import List, Optional

from vlc_rc.config import DEFAULT_EXECUTABLE
from vlc_rc.errors import ProcessError
from vlc_rc.logger import setup_logger
from vlc_rc.probe import PROBE_TIMEOUT, is_reachable

logger = setup_logger(__name__)

# How long stop() waits for the player to exit before killing it
STOP_TIMEOUT = 5.0  # seconds


@dataclass(frozen=True)
class InstanceHandle:
    """A VLC process spawned by an InstanceManager."""

    pid: int
    headless: bool


class InstanceManager:
    """
    Starts and stops a dedicated VLC instance.

    Usage:
        manager = InstanceManager("localhost", 9595, headless=True)
        pid = manager.start()   # None if an instance is already reachable
        ...
        manager.stop()          # None if this manager never spawned one
    """

    def __init__(
        self,
        host: str,
        port: int,
        headless: bool = True,
        executable: str = DEFAULT_EXECUTABLE,
    ):
        """
        Args:
            host: Host the RC interface binds to
            port: Port the RC interface binds to
            headless: Launch VLC without its GUI
            executable: VLC binary to launch
        """
        self.host = host
        self.port = port
        self.executable = executable
        self._headless = headless

        self._handle: Optional[InstanceHandle] = None
        self._process: Optional[subprocess.Popen] = None

    @property
    def headless(self) -> bool:
        """Whether the managed instance is launched without GUI."""
        return self._headless

    @property
    def handle(self) -> Optional[InstanceHandle]:
        """Get the handle of the spawned instance, or None."""
        return self._handle

    def is_running(self) -> bool:
        """Check if a VLC RC interface is reachable on host:port."""
        return is_reachable(self.host, self.port, timeout=PROBE_TIMEOUT)

    def build_command(self) -> List[str]:
        """Get the argument vector used to launch VLC."""
        command = [self.executable]
        if self._headless:
            command += ["--intf", "dummy"]
        command += ["--extraintf", "rc", "--rc-host", f"{self.host}:{self.port}"]
        return command

    def start(self) -> Optional[int]:
        """
        Start a VLC instance in a subprocess.

        Does not wait for the instance to accept connections.

        Returns:
            PID of the spawned process, or None if an instance is already
            running

        Raises:
            ProcessError: If the process cannot be spawned
        """
        if self.is_running():
            logger.debug("VLC already reachable on %s:%d, not starting", self.host, self.port)
            return None

        if self._process is not None and self._process.poll() is None:
            logger.debug("VLC (pid %d) still starting up", self._process.pid)
            return None

        command = self.build_command()
        try:
            process = subprocess.Popen(
                command,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                start_new_session=True,
            )
        except OSError as e:
            raise ProcessError(f"Failed to start {self.executable}: {e}") from e

        self._process = process
        self._handle = InstanceHandle(pid=process.pid, headless=self._headless)
        logger.info("Started VLC (pid %d) with RC on %s:%d", process.pid, self.host, self.port)
        return process.pid

    def stop(self) -> Optional[int]:
        """
        Terminate the VLC instance this manager started.

        Returns:
            PID of the terminated process, or None if no instance is managed

        Raises:
            ProcessError: If the process cannot be signalled or reaped
        """
        if self._process is None:
            return None

        process = self._process
        try:
            process.terminate()
            try:
                process.wait(timeout=STOP_TIMEOUT)
            except subprocess.TimeoutExpired:
                logger.warning("VLC (pid %d) ignored SIGTERM, killing", process.pid)
                process.kill()
                process.wait()
        except OSError as e:
            raise ProcessError(f"Failed to stop VLC (pid {process.pid}): {e}") from e

        self._process = None
        self._handle = None
        logger.info("Stopped VLC (pid %d)", process.pid)
        return process.pid

    def __repr__(self) -> str:
        pid = self._handle.pid if self._handle else None
        return f"InstanceManager(target={self.host}:{self.port}, pid={pid})"
