"""Exception types raised by the VLC RC client."""


class VLCError(Exception):
    """Base class for all vlc_rc errors."""
    pass


class ConnectionRefused(VLCError):
    """Raised when the TCP connection to the RC interface cannot be opened."""
    pass


class NotConnected(VLCError):
    """Raised on I/O while no connection to the RC interface is held."""
    pass


class ProtocolError(VLCError):
    """Protocol level errors on an open connection."""
    pass


class ReadTimeout(ProtocolError):
    """No data arrived from the RC interface before the read timeout."""
    pass


class BrokenConnection(ProtocolError):
    """The RC interface closed or reset the connection during I/O."""
    pass


class ProcessError(VLCError):
    """Spawning, signalling or reaping the player process failed."""
    pass
