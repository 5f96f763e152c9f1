"""
Configuration for the Pinout Diagram server.

Defaults can be overridden through environment variables:
    PINOUT_ALIGN_DATA   - "1"/"true"/"yes" to align data columns (default on)
    PINOUT_FONT_SIZE    - diagram font size (default 12)
    PINOUT_CHIP_FILE    - JSON file with chip definitions to use instead of
                          the built-in chip data
    PINOUT_LOG_LEVEL    - logging level name (default WARNING)
"""

import os


def _env_flag(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _env_int(name: str, default: int) -> int:
    value = os.environ.get(name)
    if value is None or not value.strip():
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {value!r}")


DEFAULT_ALIGN_DATA = _env_flag("PINOUT_ALIGN_DATA", True)
DEFAULT_FONT_SIZE = _env_int("PINOUT_FONT_SIZE", 12)

CHIP_FILE = os.environ.get("PINOUT_CHIP_FILE") or None

LOG_LEVEL = os.environ.get("PINOUT_LOG_LEVEL", "WARNING").upper()

SERVER_NAME = "Pinout Diagram"
