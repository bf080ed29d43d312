"""
Settings and configuration for josuushi.

Only the command line interface reads these; the reading tables are
compiled in and not configurable.
"""

import logging
import os

# Debug mode
DEBUG = os.environ.get("JOSUUSHI_DEBUG", "").lower() in ("1", "true", "yes")


def parse_log_level(name: str, default: str = "WARNING") -> str:
    """Get a logging level name, or the default when the name is not a known level."""
    name = name.strip().upper()
    if isinstance(logging.getLevelName(name), int):
        return name
    return default


# Log level used by the CLI
LOG_LEVEL = parse_log_level(os.environ.get("JOSUUSHI_LOG_LEVEL", "DEBUG" if DEBUG else "WARNING"))

# Default output script for the CLI: "hiragana" or "katakana"
KANA_SCRIPT = os.environ.get("JOSUUSHI_KANA", "hiragana").lower()
