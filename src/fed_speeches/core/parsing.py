"""Field decoders for raw feed values."""

from __future__ import annotations

from datetime import datetime

import pytz

EASTERN = pytz.timezone("America/New_York")
ET_FORMAT = "%m/%d/%Y %I:%M:%S %p"
DATE_ONLY_FALLBACK_TIME = "12:00:00 AM"


def _parse_eastern_naive(value: str) -> datetime:
    try:
        return datetime.strptime(value, ET_FORMAT)
    except ValueError:
        pass
    try:
        return datetime.strptime(f"{value} {DATE_ONLY_FALLBACK_TIME}", ET_FORMAT)
    except ValueError as exc:
        raise ValueError(
            f"Unsupported date {value!r}: expected 'MM/DD/YYYY hh:mm:ss AM|PM' or 'MM/DD/YYYY'"
        ) from exc


def eastern_to_utc(value: str) -> datetime:
    """Convert an Eastern wall-clock string to an aware UTC datetime.

    Bare dates are read as midnight. Local times that fall inside a DST
    transition are rejected instead of being resolved to either side.
    """
    if not isinstance(value, str):
        raise ValueError(f"Date must be a string, got {type(value).__name__}")

    naive = _parse_eastern_naive(value)
    try:
        local = EASTERN.localize(naive, is_dst=None)
    except pytz.exceptions.AmbiguousTimeError as exc:
        raise ValueError(f"Eastern time {value!r} is ambiguous across a DST transition") from exc
    except pytz.exceptions.NonExistentTimeError as exc:
        raise ValueError(f"Eastern time {value!r} does not exist (DST gap)") from exc
    return local.astimezone(pytz.utc)


def parse_video_flag(value: str) -> bool:
    """Decode a case-insensitive yes/no flag."""
    if not isinstance(value, str):
        raise ValueError(f"Video flag must be a string, got {type(value).__name__}")
    flag = value.lower()
    if flag == "yes":
        return True
    if flag == "no":
        return False
    raise ValueError(f"Video flag is ambiguous: {value!r}")
