"""Queryable collection for parsed NOTAMs."""

import re
from datetime import datetime, timezone
from typing import Dict, List, Optional, Union

import pandas as pd

from notam_briefing.collections.queryable_collection import QueryableCollection
from notam_briefing.filters.time_window import filter_notams, filter_notams_by_time_window
from notam_briefing.models.notam import NotamGroup, ParsedNotam
from notam_briefing.models.visibility import FilteredNotamResult, TimeWindow
from notam_briefing.parsers.datetime_codec import ensure_utc, utc_now

DATAFRAME_COLUMNS = [
    'notam_id', 'location', 'group', 'group_label', 'q_code',
    'valid_from', 'valid_to', 'is_permanent', 'field_e', 'warning_count',
]


EARLIEST = datetime.min.replace(tzinfo=timezone.utc)


def _valid_from_key(notam: ParsedNotam) -> datetime:
    # NOTAMs without a start sort first
    return ensure_utc(notam.valid_from) if notam.valid_from else EARLIEST


class NotamCollection(QueryableCollection[ParsedNotam]):
    """
    Queryable collection for NOTAM filtering and grouping.

    Extends QueryableCollection with filters for:
    - Location (item A)
    - Operational group
    - Time (active at, time window, permanent/temporary)
    - Content (text search, regex matching)

    Example:
        result = parse_briefing(pdf_text)
        notams = NotamCollection(result.notams)

        runway_closures = (
            notams
            .for_location("YSSY")
            .by_group(NotamGroup.RUNWAYS)
            .in_window("24h")
            .all()
        )

        grouped = notams.group_by_location_and_category()
    """

    def _new_collection(self, items: List[ParsedNotam]) -> 'NotamCollection':
        return NotamCollection(items)

    # --- Location filters ---

    def for_location(self, location: str) -> 'NotamCollection':
        """
        Filter NOTAMs whose item A names a location.

        Item A may list several locations separated by spaces.

        Args:
            location: ICAO location code
        """
        location_upper = location.upper()
        return self.filter(lambda n: location_upper in n.location.upper().split())

    def for_locations(self, locations: List[str]) -> 'NotamCollection':
        wanted = {loc.upper() for loc in locations}
        return self.filter(lambda n: bool(wanted & set(n.location.upper().split())))

    # --- Group filters ---

    def by_group(self, group: Union[NotamGroup, str]) -> 'NotamCollection':
        """
        Filter NOTAMs in an operational group.

        Args:
            group: NotamGroup or its serialized value (e.g., "runways")
        """
        if not isinstance(group, NotamGroup):
            group = NotamGroup(group)
        return self.filter(lambda n: n.group is group)

    def fir_notams(self) -> 'NotamCollection':
        return self.filter(lambda n: n.group.is_fir)

    def airport_notams(self) -> 'NotamCollection':
        return self.filter(lambda n: not n.group.is_fir)

    # --- Time filters ---

    def active_at(self, dt: datetime) -> 'NotamCollection':
        """
        Filter NOTAMs active at a specific time.

        Args:
            dt: Time to check
        """
        dt = ensure_utc(dt)
        return self.filter(
            lambda n: n.valid_from is not None and n.valid_to is not None
            and ensure_utc(n.valid_from) <= dt < ensure_utc(n.valid_to)
        )

    def active_now(self) -> 'NotamCollection':
        return self.active_at(utc_now())

    def in_window(self, window: Union[str, TimeWindow], include_expired: bool = False,
                  now: Optional[datetime] = None) -> 'NotamCollection':
        """
        Filter NOTAMs relevant to a look-ahead window.

        Cancellation NOTAMs are dropped.

        Args:
            window: Window selector ("6h", "12h", "24h", "All")
            include_expired: Keep expired NOTAMs
            now: Reference time, defaults to the current UTC time
        """
        return self._new_collection(filter_notams(self._items, window, include_expired=include_expired, now=now))

    def with_visibility(self, window: Union[str, TimeWindow],
                        now: Optional[datetime] = None) -> List[FilteredNotamResult]:
        """Retained NOTAMs paired with their visibility state."""
        return filter_notams_by_time_window(self._items, window, now=now)

    def permanent(self) -> 'NotamCollection':
        return self.filter(lambda n: n.is_permanent)

    def temporary(self) -> 'NotamCollection':
        return self.filter(lambda n: not n.is_permanent)

    # --- Quality filters ---

    def with_warnings(self) -> 'NotamCollection':
        """NOTAMs that could not be fully parsed."""
        return self.filter(lambda n: bool(n.warnings))

    def well_formed(self) -> 'NotamCollection':
        return self.filter(lambda n: not n.warnings)

    # --- Content filters ---

    def containing(self, text: str) -> 'NotamCollection':
        """
        Filter NOTAMs containing specific text (case-insensitive).

        Args:
            text: Text to search for
        """
        text_upper = text.upper()
        return self.filter(lambda n: text_upper in n.raw_text.upper())

    def matching(self, pattern: str) -> 'NotamCollection':
        """
        Filter NOTAMs matching a regex pattern (case-insensitive).

        Args:
            pattern: Regular expression pattern
        """
        regex = re.compile(pattern, re.IGNORECASE)
        return self.filter(lambda n: bool(regex.search(n.raw_text)))

    # --- Grouping ---

    def group_by_location(self) -> Dict[str, 'NotamCollection']:
        groups = self.group_by(lambda n: n.location)
        return {k: self._new_collection(v) for k, v in groups.items()}

    def group_by_group(self) -> Dict[NotamGroup, 'NotamCollection']:
        """Group NOTAMs by operational group, in display order."""
        groups = self.group_by(lambda n: n.group)
        return {g: self._new_collection(groups[g]) for g in NotamGroup.display_order() if g in groups}

    def group_by_location_and_category(self) -> Dict[str, Dict[NotamGroup, List[ParsedNotam]]]:
        """
        Group NOTAMs by location, then by operational group.

        Locations keep first-seen order, groups follow display order, and
        NOTAMs within a group are sorted by start of validity.

        Returns:
            Mapping location -> group -> NOTAMs
        """
        grouped: Dict[str, Dict[NotamGroup, List[ParsedNotam]]] = {}
        for location, notams in self.group_by(lambda n: n.location).items():
            by_group = NotamCollection(notams).group_by(lambda n: n.group)
            grouped[location] = {
                group: sorted(by_group[group], key=_valid_from_key)
                for group in NotamGroup.display_order()
                if group in by_group
            }
        return grouped

    # --- Export ---

    def to_dataframe(self) -> pd.DataFrame:
        """
        Convert to a pandas DataFrame, one row per NOTAM.

        Returns:
            DataFrame with the columns in ``DATAFRAME_COLUMNS``
        """
        rows = [
            {
                'notam_id': n.notam_id,
                'location': n.location,
                'group': n.group.value,
                'group_label': n.group.label,
                'q_code': n.q_code,
                'valid_from': n.valid_from,
                'valid_to': n.valid_to,
                'is_permanent': n.is_permanent,
                'field_e': n.field_e,
                'warning_count': len(n.warnings),
            }
            for n in self._items
        ]
        return pd.DataFrame(rows, columns=DATAFRAME_COLUMNS)

    def to_dicts(self) -> List[dict]:
        return [n.to_dict() for n in self._items]
