"""
Counsel Connect - Timestamp Utilities

All timestamps stored in the database are naive UTC.
"""

from datetime import datetime, timezone


def now_utc() -> datetime:
    """Return the current time as naive UTC (compatible with database datetimes)."""
    return datetime.now(timezone.utc).replace(tzinfo=None)
