"""Tests for the reachability probe and logger setup."""

import logging
import socket
from unittest.mock import patch

from vlc_rc.logger import PACKAGE_LOGGER, setup_logger
from vlc_rc.probe import is_reachable


class TestIsReachable:
    """Tests for is_reachable."""

    def test_reachable_when_listening(self, listening_socket):
        """Test that a bound listener is reported as reachable."""
        host, port = listening_socket
        assert is_reachable(host, port) is True

    def test_unreachable_without_listener(self, free_port):
        """Test that a port with no listener is unreachable."""
        assert is_reachable("127.0.0.1", free_port) is False

    def test_timeout_is_unreachable(self):
        """Test that a connect timeout yields False instead of raising."""
        with patch("vlc_rc.probe.socket.create_connection", side_effect=socket.timeout):
            assert is_reachable("10.255.255.1", 9595) is False

    def test_probe_closes_socket(self):
        """Test that the probe socket is closed right away."""
        with patch("vlc_rc.probe.socket.create_connection") as mock_connect:
            assert is_reachable("localhost", 9595, timeout=0.2) is True
        mock_connect.assert_called_once_with(("localhost", 9595), timeout=0.2)
        mock_connect.return_value.close.assert_called_once()


class TestSetupLogger:
    """Tests for setup_logger."""

    def test_returns_named_logger(self):
        """Test that the module logger has the requested name."""
        logger = setup_logger("vlc_rc.something")
        assert logger.name == "vlc_rc.something"

    def test_package_handler_added_once(self):
        """Test that repeated setup does not stack handlers."""
        setup_logger("vlc_rc.a")
        setup_logger("vlc_rc.b")
        assert len(logging.getLogger(PACKAGE_LOGGER).handlers) == 1
