"""
vlc-rc-client: manage a VLC media player instance and talk to it over
the remote-control (RC) interface.
"""

from vlc_rc.client import Client
from vlc_rc.config import ClientConfig, Target, load_config
from vlc_rc.connection import Connection, ConnectionState
from vlc_rc.errors import (
    BrokenConnection,
    ConnectionRefused,
    NotConnected,
    ProcessError,
    ProtocolError,
    ReadTimeout,
    VLCError,
)
from vlc_rc.server import InstanceHandle, InstanceManager

__version__ = "0.1.0"

__all__ = [
    "BrokenConnection",
    "Client",
    "ClientConfig",
    "Connection",
    "ConnectionRefused",
    "ConnectionState",
    "InstanceHandle",
    "InstanceManager",
    "NotConnected",
    "ProcessError",
    "ProtocolError",
    "ReadTimeout",
    "Target",
    "VLCError",
    "load_config",
]
