"""
Reachability probe for the VLC RC interface.

A probe is a plain TCP connect that is closed right away. It answers
"is something listening on host:port" and never sends protocol data.
"""

import socket

from vlc_rc.logger import setup_logger

logger = setup_logger(__name__)

# Must stay well below typical VLC startup time
PROBE_TIMEOUT = 0.5  # seconds


def is_reachable(host: str, port: int, timeout: float = PROBE_TIMEOUT) -> bool:
    """
    Check whether a TCP listener accepts connections on host:port.

    Args:
        host: Host to probe
        port: Port to probe
        timeout: Connect timeout in seconds

    Returns:
        True if the connection was accepted, False on any connection failure
    """
    try:
        sock = socket.create_connection((host, port), timeout=timeout)
    except OSError as e:
        logger.debug("Probe %s:%d failed: %s", host, port, e)
        return False

    sock.close()
    return True
