"""Utility functions used across the project."""

from __future__ import annotations

from buup.utils.env import Settings, load_settings
from buup.utils.logging import setup_logging
from buup.utils.time import ensure_tz, ensure_utc, parse_timestamp

__all__ = ["Settings", "load_settings", "setup_logging", "ensure_tz", "ensure_utc", "parse_timestamp"]
