"""
Helper utility functions for the YouTube clipper application.
"""

import re
import math
import secrets
import time
from datetime import datetime, timezone
from typing import Optional


def format_time(seconds: float) -> str:
    """
    Format a number of seconds as ``M:SS``.

    Args:
        seconds: Non-negative offset in seconds

    Returns:
        Minutes (unpadded) and zero-padded whole seconds, e.g. ``1:05``
    """
    mins = math.floor(seconds / 60)
    secs = math.floor(seconds % 60)
    return f"{mins}:{secs:02d}"


def sanitize_clip_name(name: Optional[str], max_length: int = 50) -> str:
    """
    Sanitize a user supplied clip name to be used as a filename stem.

    Args:
        name: Requested clip name, may be empty
        max_length: Maximum length of the result

    Returns:
        Name restricted to letters, digits, hyphens and underscores
    """
    sanitized = re.sub(r"[^a-zA-Z0-9_-]", "_", name or "clip")
    return sanitized[:max_length]


def unique_suffix() -> str:
    """Millisecond timestamp plus a short random tag, unique across concurrent requests."""
    return f"{int(time.time() * 1000)}-{secrets.token_hex(3)}"


def format_size_mb(size: int) -> str:
    return f"{size / 1024 / 1024:.2f} MB"


def utc_timestamp() -> str:
    """
    Get the current UTC time as an ISO 8601 string.

    Returns:
        Timestamp with millisecond precision and a ``Z`` suffix
    """
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def seconds_arg(value: float) -> str:
    """Render a seconds value for a command line, dropping a redundant ``.0``."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)
