"""Environment-based configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()  # take environment variables from .env


def env_get(key: str, default: str | None = None) -> str | None:
    """Get environment variable or return default."""
    return os.getenv(key, default)


@dataclass(frozen=True)
class Settings:
    """
    Runtime settings for the command line and web entry points.

    Parameters
    ----------
    log_level : str
        Logging level name (``BUUP_LOG_LEVEL``).
    server_name : str
        Interface the web UI binds to (``BUUP_SERVER_NAME``).
    server_port : int
        Port the web UI listens on (``BUUP_SERVER_PORT``).
    """

    log_level: str = "WARNING"
    server_name: str = "127.0.0.1"
    server_port: int = 7860


def load_settings() -> Settings:
    """
    Read settings from the environment.

    Returns
    -------
    Settings
        Settings with defaults for unset variables.

    Raises
    ------
    ValueError
        If ``BUUP_SERVER_PORT`` is not an integer.
    """
    defaults = Settings()
    port = env_get("BUUP_SERVER_PORT") or str(defaults.server_port)
    try:
        server_port = int(port)
    except ValueError as e:
        raise ValueError(f"BUUP_SERVER_PORT must be an integer, got '{port}'") from e
    return Settings(
        log_level=(env_get("BUUP_LOG_LEVEL") or defaults.log_level).upper(),
        server_name=env_get("BUUP_SERVER_NAME") or defaults.server_name,
        server_port=server_port,
    )
