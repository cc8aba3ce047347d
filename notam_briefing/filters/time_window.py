"""
Time window filtering of parsed NOTAMs.

A NOTAM is relevant to a look-ahead window ``[now, now + hours)`` when its
validity overlaps the window: ``valid_from < window_end`` and
``valid_to > now``. Permanent NOTAMs only need to start before the window
ends. Cancellation NOTAMs are always dropped.
"""

import logging
from datetime import datetime
from typing import Iterable, List, Optional, Union

from notam_briefing.models.notam import ParsedNotam
from notam_briefing.models.visibility import FilteredNotamResult, TimeWindow, VisibilityState
from notam_briefing.parsers.datetime_codec import ensure_utc, utc_now

logger = logging.getLogger(__name__)

WindowSelector = Union[str, TimeWindow]


def _utc(value: Optional[datetime]) -> Optional[datetime]:
    return ensure_utc(value) if value is not None else None


def _resolve_now(now: Optional[datetime]) -> datetime:
    return ensure_utc(now) if now is not None else utc_now()


def window_end(window: WindowSelector, now: Optional[datetime] = None) -> Optional[datetime]:
    """
    End of the look-ahead window.

    Args:
        window: Window selector
        now: Reference time, defaults to the current UTC time

    Returns:
        ``now`` plus the window length, or None for ``All``

    Raises:
        UnknownTimeWindowError: If the selector is not recognised
    """
    window = TimeWindow.parse(window)
    if not window.is_bounded:
        return None
    return _resolve_now(now) + window.duration


def compute_visibility_state(
    notam: ParsedNotam,
    window: WindowSelector,
    now: Optional[datetime] = None,
) -> VisibilityState:
    """
    Classify a NOTAM relative to now and the selected window.

    Args:
        notam: Parsed NOTAM
        window: Window selector ("6h", "12h", "24h", "All")
        now: Reference time, defaults to the current UTC time

    Returns:
        VisibilityState

    Raises:
        UnknownTimeWindowError: If the selector is not recognised
    """
    window = TimeWindow.parse(window)
    now = _resolve_now(now)
    valid_from = _utc(notam.valid_from)
    valid_to = _utc(notam.valid_to)

    if valid_from is None or valid_to is None:
        return VisibilityState.EXPIRED
    if valid_to <= now:
        return VisibilityState.EXPIRED
    if valid_from <= now:
        return VisibilityState.ACTIVE_NOW
    if not window.is_bounded:
        return VisibilityState.FUTURE_IN_WINDOW
    if valid_from < now + window.duration:
        return VisibilityState.FUTURE_IN_WINDOW
    return VisibilityState.FUTURE_OUTSIDE_WINDOW


def overlaps_window(notam: ParsedNotam, now: datetime, end: datetime) -> bool:
    """
    Interval overlap test against ``[now, end)``.

    A NOTAM starting exactly at ``end`` or ending exactly at ``now`` does
    not overlap.
    """
    valid_from = _utc(notam.valid_from)
    if notam.is_permanent:
        return valid_from is not None and valid_from < end

    valid_to = _utc(notam.valid_to)
    if valid_from is None or valid_to is None:
        return False
    return valid_from < end and valid_to > now


def is_expired(notam: ParsedNotam, now: datetime) -> bool:
    valid_to = _utc(notam.valid_to)
    return valid_to is not None and valid_to <= now


def exclude_cancellations(notams: Iterable[ParsedNotam]) -> List[ParsedNotam]:
    """Drop cancellation NOTAMs (raw text containing "CNL NOTAM")."""
    return [notam for notam in notams if not notam.is_cancellation]


def _retained(notams: List[ParsedNotam], window: TimeWindow, now: datetime,
              include_expired: bool) -> List[ParsedNotam]:
    end = now + window.duration
    retained = [notam for notam in notams if overlaps_window(notam, now, end)]
    if include_expired:
        kept = {id(notam) for notam in retained}
        retained.extend(n for n in notams if id(n) not in kept and is_expired(n, now))
    return retained


def filter_notams_by_time_window(
    notams: Iterable[ParsedNotam],
    window: WindowSelector,
    now: Optional[datetime] = None,
    include_expired: Optional[bool] = None,
) -> List[FilteredNotamResult]:
    """
    Filter NOTAMs by time window and attach visibility states.

    Args:
        notams: Parsed NOTAMs
        window: Window selector ("6h", "12h", "24h", "All")
        now: Reference time, defaults to the current UTC time
        include_expired: Keep expired NOTAMs. Defaults to True for ``All``
            and False for bounded windows.

    Returns:
        Retained NOTAMs with their visibility state, in input order
        (expired NOTAMs added back by ``include_expired`` come last)

    Raises:
        UnknownTimeWindowError: If the selector is not recognised
    """
    window = TimeWindow.parse(window)
    now = _resolve_now(now)
    if include_expired is None:
        include_expired = not window.is_bounded

    candidates = exclude_cancellations(notams)

    if window.is_bounded:
        retained = _retained(candidates, window, now, include_expired)
        results = [
            FilteredNotamResult(notam, compute_visibility_state(notam, window, now))
            for notam in retained
        ]
    else:
        results = [
            FilteredNotamResult(notam, compute_visibility_state(notam, window, now))
            for notam in candidates
        ]
        if not include_expired:
            results = [r for r in results if r.visibility_state is not VisibilityState.EXPIRED]

    logger.debug(f"Time window {window.value}: kept {len(results)} of {len(candidates)} NOTAMs")
    return results


def filter_notams(
    notams: Iterable[ParsedNotam],
    window: WindowSelector,
    include_expired: bool = False,
    now: Optional[datetime] = None,
) -> List[ParsedNotam]:
    """
    Filter NOTAMs by time window, returning the NOTAMs only.

    For ``All`` every NOTAM that has not expired is kept (all of them with
    ``include_expired``). Bounded windows use the overlap rule.

    Args:
        notams: Parsed NOTAMs
        window: Window selector ("6h", "12h", "24h", "All")
        include_expired: Add expired NOTAMs back
        now: Reference time, defaults to the current UTC time

    Returns:
        Retained NOTAMs

    Raises:
        UnknownTimeWindowError: If the selector is not recognised
    """
    window = TimeWindow.parse(window)
    now = _resolve_now(now)
    candidates = exclude_cancellations(notams)

    if window.is_bounded:
        return _retained(candidates, window, now, include_expired)

    if include_expired:
        return candidates
    return [notam for notam in candidates if notam.valid_to is not None and _utc(notam.valid_to) > now]
