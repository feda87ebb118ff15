"""Defaults for loading translations, overridable from the environment."""

import logging
import os
from dataclasses import dataclass


# =============================================================================
# Configuration
# =============================================================================

DEFAULT_INDEX_URL = os.getenv(
    "BIBLE_INDEX_URL",
    "http://pennstatehousing.s3-website.us-east-2.amazonaws.com/bibles/bibles.txt",
)
DEFAULT_TIMEOUT = float(os.getenv("BIBLE_REQUEST_TIMEOUT", "60"))
DEFAULT_RETRIES = int(os.getenv("BIBLE_REQUEST_RETRIES", "0"))
DEFAULT_LOG_LEVEL = os.getenv("BIBLE_LOG_LEVEL", "WARNING").upper()

HEADER_LINES = 2  # Metadata lines at the top of every translation text


@dataclass(frozen=True)
class Settings:
    """Resolved settings passed to the loaders."""

    index_url: str = DEFAULT_INDEX_URL
    timeout: float = DEFAULT_TIMEOUT  # Seconds per HTTP request
    retries: int = DEFAULT_RETRIES  # Extra attempts on connection errors / 5xx
    skip_bad_lines: bool = False


def log_level_for(verbosity: int, default: str = DEFAULT_LOG_LEVEL) -> int:
    """Map -v / -vv counts to a logging level."""
    if verbosity >= 2:
        return logging.DEBUG
    if verbosity == 1:
        return logging.INFO
    level = logging.getLevelName(default)
    return level if isinstance(level, int) else logging.WARNING
