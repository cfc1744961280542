from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone
from typing import Optional

from dateutil import parser as dateparser

from ..utils.logging import get_logger

_int_re = re.compile(r"\d+")

# (keywords, unit, default amount); first matching row wins
_RELATIVE_UNITS = (
    (("hour", "hr"), "hours", 1),
    (("minute", "min"), "minutes", 30),
    (("day",), "days", 1),
)

_logger = get_logger("newsscraper.processors.normalize")


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def to_iso(value: datetime) -> str:
    """Format ``value`` as UTC ISO 8601 with millisecond precision and a ``Z`` suffix."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%S") + f".{value.microsecond // 1000:03d}Z"


def parse_relative_time(text: str, *, now: Optional[datetime] = None) -> Optional[datetime]:
    """Resolve phrases like ``"2 hours ago"`` or ``"45 min"`` against ``now``.

    Only the first integer in the text is used; when none is present the
    unit's default amount applies.
    """
    lowered = text.lower()
    for keywords, unit, default in _RELATIVE_UNITS:
        if any(k in lowered for k in keywords):
            m = _int_re.search(lowered)
            amount = int(m.group(0)) if m else default
            try:
                return (now or utc_now()) - timedelta(**{unit: amount})
            except OverflowError:
                _logger.debug("Relative time out of range: %r", text)
                return None
    return None


def parse_date_to_iso(value: str | datetime | None, *, now: Optional[datetime] = None) -> Optional[str]:
    """Parse an absolute date/time into ISO form; ``None`` if it cannot be parsed.

    Naive values are taken to be UTC. Date parts missing from the text
    (``"10:30 AM"``) are filled from ``now``, so a bare time means today.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return to_iso(value)
    text = value.strip()
    if not text:
        return None
    today = now or utc_now()
    if today.tzinfo is not None:
        today = today.astimezone(timezone.utc)
    default = today.replace(hour=0, minute=0, second=0, microsecond=0, tzinfo=None)
    try:
        return to_iso(dateparser.parse(text, default=default))
    except (ValueError, OverflowError) as exc:
        # out-of-range offsets only fail once converted to UTC
        _logger.debug("Unparseable date %r: %s", text, exc)
        return None


def normalize_time(text: Optional[str], *, now: Optional[datetime] = None) -> Optional[str]:
    """Convert free-form time text into an absolute ISO timestamp.

    Returns ``None`` for empty input or text that is neither relative nor a
    parseable date; callers default to the current time.
    """
    if not text or not text.strip():
        return None
    relative = parse_relative_time(text, now=now)
    if relative is not None:
        return to_iso(relative)
    return parse_date_to_iso(text, now=now)
