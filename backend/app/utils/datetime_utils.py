"""
Datetime utilities
"""
from datetime import datetime, timezone


def utc_now() -> datetime:
    """Current UTC time, timezone-aware"""
    return datetime.now(timezone.utc)


def utc_now_iso() -> str:
    """
    Get current UTC time as ISO format string

    Example:
        >>> utc_now_iso()
        '2026-10-16T10:00:00.123456+00:00'
    """
    return utc_now().isoformat()
