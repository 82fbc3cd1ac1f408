"""RFC 3339 timestamp parsing and formatting.

Parsing is strict: only ``YYYY-MM-DDTHH:MM:SS[.fraction](Z|+HH:MM|-HH:MM)`` is
accepted. ``datetime`` stops at microseconds, so the digits past the sixth are
returned separately as a nanosecond remainder (0-999).

Formatting always converts to UTC, ends in ``Z`` and uses 0, 3, 6 or 9
fractional digits: the fewest that represent the instant exactly, but never
fewer than the requested minimum.
"""

from __future__ import annotations

import re
from datetime import datetime, timezone
from typing import Any

from dateutil import parser as dt_parser

from SearchFields.errors import ParseError

FRACTION_DIGITS = (0, 3, 6, 9)

_RFC3339_RE = re.compile(
    r"^(?P<date>\d{4}-\d{2}-\d{2})[Tt](?P<time>(?:[01]\d|2[0-3]):[0-5]\d:(?:[0-5]\d|60))"
    r"(?:\.(?P<fraction>\d+))?(?P<offset>[Zz]|[+-]\d{2}:\d{2})$"
)


def parse_rfc3339(text: Any) -> tuple[datetime, int]:
    """Parse an RFC 3339 timestamp.

    Args:
        text: Timestamp string, e.g. ``2024-01-01T00:00:00.000Z``.

    Returns:
        Tuple of (UTC datetime, nanoseconds past the microsecond).

    Raises:
        ParseError: If the text is not a valid RFC 3339 timestamp, or the
            instant falls outside the range ``datetime`` can hold in UTC.
    """
    if not isinstance(text, str):
        raise ParseError(f"Invalid RFC3339 timestamp: {text!r}")
    match = _RFC3339_RE.match(text)
    if match is None:
        raise ParseError(f"Invalid RFC3339 timestamp: {text!r}")

    offset = match["offset"]
    if offset in ("Z", "z"):
        offset = "+00:00"
    try:
        parsed = dt_parser.isoparse(f"{match['date']}T{match['time']}{offset}").astimezone(timezone.utc)
    except (ValueError, OverflowError) as e:
        raise ParseError(f"Invalid RFC3339 timestamp: {text!r}") from e

    # Digits beyond nanoseconds are truncated.
    digits = (match["fraction"] or "").ljust(9, "0")[:9]
    return parsed.replace(microsecond=int(digits[:6])), int(digits[6:])


def format_rfc3339(value: datetime, nanosecond: int = 0, *, min_fraction_digits: int = 3) -> str:
    """Format a datetime as a Z-normalized RFC 3339 string.

    Naive datetimes are taken to be UTC.
    """
    if min_fraction_digits not in FRACTION_DIGITS:
        raise ValueError(f"min_fraction_digits must be one of {FRACTION_DIGITS}")

    if value.tzinfo is None:
        utc = value.replace(tzinfo=timezone.utc)
    else:
        utc = value.astimezone(timezone.utc)

    nanos = utc.microsecond * 1000 + nanosecond
    digits = next(d for d in FRACTION_DIGITS if d >= min_fraction_digits and nanos % 10 ** (9 - d) == 0)
    fraction = f".{nanos:09d}"[: digits + 1] if digits else ""
    return (
        f"{utc.year:04d}-{utc.month:02d}-{utc.day:02d}"
        f"T{utc.hour:02d}:{utc.minute:02d}:{utc.second:02d}{fraction}Z"
    )
