"""
ICAO NOTAM date/time codec.

Items B and C carry a 10-digit ``YYMMDDHHMM`` UTC timestamp. Item C may
instead say ``PERM`` (or ``PERMANENT``), which is modelled as a far-future
expiry plus a flag.
"""

import re
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from dateutil.relativedelta import relativedelta

from notam_briefing.config import ParserSettings, resolve_settings

ICAO_DATETIME_PATTERN = re.compile(r'^(\d{2})(\d{2})(\d{2})(\d{2})(\d{2})$')

PERMANENT_MARKERS = frozenset({'PERM', 'PERMANENT'})


@dataclass(frozen=True)
class IcaoDateTime:
    """Decoded item B/C value."""
    date: Optional[datetime]
    is_permanent: bool = False

    @property
    def is_valid(self) -> bool:
        return self.date is not None


INVALID = IcaoDateTime(date=None, is_permanent=False)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def ensure_utc(value: datetime) -> datetime:
    """Treat naive datetimes as UTC and convert aware ones to UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def parse_icao_datetime(
    value: str,
    is_end_date: bool = False,
    now: Optional[datetime] = None,
    settings: Optional[ParserSettings] = None,
) -> IcaoDateTime:
    """
    Parse an ICAO item B or C value.

    The two-digit year is placed in the century of ``now``; when that lands
    further than the century window away from ``now`` it is moved one century
    back or forward.

    Args:
        value: Raw field content (e.g., "2501151200" or "PERM")
        is_end_date: True for item C, where PERM is allowed
        now: Reference time, defaults to the current UTC time
        settings: Thresholds (century window, PERM validity)

    Returns:
        IcaoDateTime; ``date`` is None when the value cannot be parsed
    """
    settings = resolve_settings(settings)
    now = ensure_utc(now) if now is not None else utc_now()
    text = (value or '').strip().upper()

    if is_end_date and text in PERMANENT_MARKERS:
        return IcaoDateTime(
            date=now + relativedelta(years=settings.permanent_validity_years),
            is_permanent=True,
        )

    match = ICAO_DATETIME_PATTERN.match(text)
    if not match:
        return INVALID

    yy, month, day, hour, minute = (int(g) for g in match.groups())

    century = (now.year // 100) * 100
    year = century + yy
    years_diff = year - now.year
    if years_diff > settings.century_window_years:
        year -= 100
    elif years_diff < -settings.century_window_years:
        year += 100

    try:
        return IcaoDateTime(date=datetime(year, month, day, hour, minute, tzinfo=timezone.utc))
    except ValueError:
        return INVALID
