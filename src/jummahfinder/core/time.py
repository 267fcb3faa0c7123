"""
Schedule time conversion.

Shift times are stored and displayed in 12-hour form (`"1:30 PM"`), while form
inputs speak 24-hour `HH:MM`. Both converters treat an empty string as "unset"
and hand it back unchanged so callers can round-trip blank fields.

Malformed non-empty input raises `InvalidTimeFormat` instead of producing garbage.
"""

from __future__ import annotations

import re

_TIME_12H_RE = re.compile(r"^\s*(\d{1,2}):(\d{2})\s*([AaPp][Mm])\s*$")
_TIME_24H_RE = re.compile(r"^\s*(\d{1,2}):(\d{2})\s*$")


class InvalidTimeFormat(ValueError):
    """Raised when a time string does not have the expected shape."""


def to_24h(time12h: str) -> str:
    """Convert `"H:MM AM|PM"` into zero-padded `"HH:MM"`.

    12 AM maps to hour 00, 12 PM stays 12, and PM hours 1-11 add 12.
    """
    if not time12h:
        return ""
    match = _TIME_12H_RE.match(time12h)
    if not match:
        raise InvalidTimeFormat(f"expected 'H:MM AM|PM', got {time12h!r}")
    hours = int(match.group(1))
    minutes = match.group(2)
    modifier = match.group(3).upper()
    if not 1 <= hours <= 12 or int(minutes) > 59:
        raise InvalidTimeFormat(f"time out of range: {time12h!r}")

    if hours == 12:
        hours = 0
    if modifier == "PM":
        hours += 12
    return f"{hours:02d}:{minutes}"


def to_12h(time24h: str) -> str:
    """Convert `"HH:MM"` into `"H:MM AM|PM"` (00 and 12 both display as 12)."""
    if not time24h:
        return ""
    match = _TIME_24H_RE.match(time24h)
    if not match:
        raise InvalidTimeFormat(f"expected 'HH:MM', got {time24h!r}")
    hours = int(match.group(1))
    minutes = match.group(2)
    if hours > 23 or int(minutes) > 59:
        raise InvalidTimeFormat(f"time out of range: {time24h!r}")

    suffix = "AM" if hours < 12 else "PM"
    display_hour = hours % 12 or 12
    return f"{display_hour}:{minutes} {suffix}"
