"""Utility functions for timestamp generation and formatting."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone

# Fixed English abbreviations so output does not depend on the process locale.
MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


@dataclass(frozen=True)
class RunTimestamps:
    """Timestamps identifying one CLI run.

    Attributes:
        iso_stamp: Filename-safe timestamp (e.g., "20250912T143012Z")
        unix: Unix timestamp in seconds since epoch (UTC)
        iso_utc: ISO 8601 UTC timestamp (e.g., "YYYY-MM-DDTHH:MM:SSZ")
    """
    iso_stamp: str          # e.g. "20250912T143012Z" used in filenames
    unix: float             # seconds since epoch (UTC)
    iso_utc: str            # "YYYY-MM-DDTHH:MM:SSZ"


def make_run_timestamps(now_utc: datetime | None = None) -> RunTimestamps:
    """Generate timestamps for the current time in the formats used by exports.

    Args:
        now_utc: Optional fixed instant; defaults to the current UTC time
    """
    if now_utc is None:
        now_utc = datetime.now(timezone.utc)
    elif now_utc.tzinfo is None:
        now_utc = now_utc.replace(tzinfo=timezone.utc)

    return RunTimestamps(
        iso_stamp=now_utc.strftime("%Y%m%dT%H%M%SZ"),
        unix=now_utc.timestamp(),
        iso_utc=now_utc.replace(microsecond=0).isoformat().replace("+00:00", "Z"),
    )


def format_calendar_date(unix_seconds: int) -> str:
    """Format a unix timestamp as a UTC calendar date like 'Mar  7 2018'.

    The day is right-aligned to two characters; time of day is dropped.
    """
    moment = datetime.fromtimestamp(unix_seconds, tz=timezone.utc)
    return f"{MONTH_ABBREVIATIONS[moment.month - 1]} {moment.day:>2} {moment.year}"
