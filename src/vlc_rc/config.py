"""
Configuration for the VLC RC client.
Builds immutable client settings from keyword options or YAML files.
"""

import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

DEFAULT_HOST = "localhost"
DEFAULT_PORT = 9595
DEFAULT_EXECUTABLE = "vlc"


@dataclass(frozen=True)
class Target:
    """Where a controllable VLC instance should be reachable."""

    host: str
    port: int

    def __str__(self) -> str:
        return f"{self.host}:{self.port}"


@dataclass(frozen=True)
class ClientConfig:
    """
    Settings for a Client, fixed at construction.

    Attributes:
        host: Host of the VLC RC interface
        port: Port of the VLC RC interface
        auto_start: Manage a dedicated VLC instance and connect on construction
        headless: Launch the managed instance without its GUI
        executable: VLC binary used to launch the managed instance
    """

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    auto_start: bool = True
    headless: bool = True
    executable: str = DEFAULT_EXECUTABLE

    def __post_init__(self) -> None:
        if not self.host:
            raise ValueError("host must not be empty")
        if isinstance(self.port, bool) or not isinstance(self.port, int):
            raise ValueError(f"port must be an integer, got {self.port!r}")
        if not 0 < self.port < 65536:
            raise ValueError(f"port out of range: {self.port}")

    @classmethod
    def from_options(cls, options: Optional[Mapping[str, Any]] = None) -> "ClientConfig":
        """
        Build a config from caller options.

        Unrecognized keys are ignored, missing keys take the defaults.

        Args:
            options: Mapping of option name to value

        Returns:
            ClientConfig instance
        """
        known = {f.name for f in fields(cls)}
        values = {k: v for k, v in (options or {}).items() if k in known}
        return cls(**values)

    @property
    def target(self) -> Target:
        """Get the host/port pair of the RC interface."""
        return Target(self.host, self.port)


def _apply_env_overrides(options: Dict[str, Any]) -> None:
    """Override config values from environment variables."""
    if 'VLC_RC_HOST' in os.environ:
        options['host'] = os.environ['VLC_RC_HOST']

    if 'VLC_RC_PORT' in os.environ:
        options['port'] = int(os.environ['VLC_RC_PORT'])

    if 'VLC_RC_EXECUTABLE' in os.environ:
        options['executable'] = os.environ['VLC_RC_EXECUTABLE']


def load_config(config_path: str) -> ClientConfig:
    """
    Load client settings from a YAML file.

    Settings may sit at the top level or under a ``vlc`` section.
    VLC_RC_HOST, VLC_RC_PORT and VLC_RC_EXECUTABLE override the file.

    Args:
        config_path: Path to the YAML file

    Returns:
        ClientConfig instance

    Example:
        >>> config = load_config('vlc.yaml')
        >>> config.port
        9595
    """
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path, 'r') as f:
        data = yaml.safe_load(f) or {}

    options = dict(data.get('vlc') or data)
    _apply_env_overrides(options)

    return ClientConfig.from_options(options)
