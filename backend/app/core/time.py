"""Time utilities for timezone-aware UTC datetimes and local calendar dates."""

from datetime import UTC, date, datetime
from zoneinfo import ZoneInfo

from backend.app.core.settings import get_settings


def utc_now() -> datetime:
    """Return a timezone-aware UTC datetime for defaults and onupdate hooks."""
    return datetime.now(UTC)


def local_today() -> date:
    """Return today's calendar date in the configured business timezone."""
    return datetime.now(ZoneInfo(get_settings().timezone)).date()
