"""Human-readable formatting of sizes, durations and rates, and time parsing."""

from __future__ import annotations

import math
from datetime import datetime, timedelta
from typing import Sequence

_TIME_FORMATS = (
    "%Y-%m-%d",
    "%Y-%m-%d %H:%M",
    "%Y-%m-%d %H:%M:%S",
    "%Y-%m-%d %H:%M:%S %z",
    "%Y-%m-%d %H:%M:%S %Z",
    "%d.%m.%Y",
    "%d.%m.%Y %H:%M",
    "%d.%m.%Y %H:%M:%S",
    "%d.%m.%Y %H:%M:%S %z",
    "%d.%m.%Y %H:%M:%S %Z",
    "%a %b %d %H:%M:%S %z %Z %Y",
)


def format_bytes(count: int) -> str:
    """Format a byte count with a binary unit."""
    for shift, unit in ((40, "TiB"), (30, "GiB"), (20, "MiB"), (10, "KiB")):
        if count > 1 << shift:
            return f"{count / (1 << shift):.3f} {unit}"
    return f"{count}B"


def format_seconds(seconds: int) -> str:
    """Format seconds as M:SS, or H:MM:SS when there are hours."""
    hours, rest = divmod(int(seconds), 3600)
    minutes, secs = divmod(rest, 60)
    if hours > 0:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    return f"{minutes}:{secs:02d}"


def format_percent(numerator: int, denominator: int) -> str:
    """Format a ratio as a percentage capped at 100; empty if denominator is 0."""
    if denominator == 0:
        return ""
    percent = min(100.0 * numerator / denominator, 100.0)
    return f"{percent:3.2f}%"


def format_rate(count: int, duration: timedelta) -> str:
    """Format bytes per duration as MiB/s."""
    seconds = duration.total_seconds()
    if seconds == 0:
        rate = math.inf if count > 0 else math.nan
    else:
        rate = count / seconds / (1 << 20)
    if math.isnan(rate):
        return "NaNMiB/s"
    if math.isinf(rate):
        return "+InfMiB/s"
    return f"{rate:.2f}MiB/s"


def format_duration(duration: timedelta) -> str:
    """Format a duration, truncated to whole seconds."""
    return format_seconds(int(duration.total_seconds()))


def same_paths(expected: Sequence[str] | None, actual: Sequence[str] | None) -> bool:
    """Return True if both path lists are equal, or if either is None."""
    if expected is None or actual is None:
        return True
    return list(expected) == list(actual)


def parse_time(text: str) -> datetime:
    """Parse a date/time in one of the accepted formats, as local time unless an offset is given."""
    for fmt in _TIME_FORMATS:
        try:
            parsed = datetime.strptime(text, fmt)
        except ValueError:
            continue
        if parsed.tzinfo is None:
            parsed = parsed.astimezone()
        return parsed
    raise ValueError(f'unable to parse time: "{text}"')