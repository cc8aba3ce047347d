"""Time window and visibility types."""

from dataclasses import dataclass
from datetime import timedelta
from enum import Enum
from typing import Any, Dict, Optional, Union

from notam_briefing.exceptions import UnknownTimeWindowError
from notam_briefing.models.notam import ParsedNotam


class TimeWindow(Enum):
    """Look-ahead window selected by the pilot."""
    SIX_HOURS = "6h"
    TWELVE_HOURS = "12h"
    TWENTY_FOUR_HOURS = "24h"
    ALL = "All"

    @property
    def hours(self) -> Optional[int]:
        """Window length in hours, None for ``ALL``."""
        return _WINDOW_HOURS[self]

    @property
    def duration(self) -> Optional[timedelta]:
        hours = self.hours
        return timedelta(hours=hours) if hours is not None else None

    @property
    def is_bounded(self) -> bool:
        return self is not TimeWindow.ALL

    @classmethod
    def parse(cls, value: Union[str, 'TimeWindow']) -> 'TimeWindow':
        """
        Resolve a window selector.

        Args:
            value: TimeWindow member or one of "6h", "12h", "24h", "All"

        Returns:
            TimeWindow member

        Raises:
            UnknownTimeWindowError: If the selector is not recognised
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise UnknownTimeWindowError(value) from None


_WINDOW_HOURS: Dict[TimeWindow, Optional[int]] = {
    TimeWindow.SIX_HOURS: 6,
    TimeWindow.TWELVE_HOURS: 12,
    TimeWindow.TWENTY_FOUR_HOURS: 24,
    TimeWindow.ALL: None,
}


class VisibilityState(Enum):
    """Relevance of a NOTAM relative to now and the selected window."""
    ACTIVE_NOW = "active_now"
    FUTURE_IN_WINDOW = "future_in_window"
    FUTURE_OUTSIDE_WINDOW = "future_outside_window"
    EXPIRED = "expired"


@dataclass(frozen=True)
class FilteredNotamResult:
    """A NOTAM retained by the time filter together with its visibility."""
    notam: ParsedNotam
    visibility_state: VisibilityState

    def to_dict(self) -> Dict[str, Any]:
        return {
            'notam': self.notam.to_dict(),
            'visibility_state': self.visibility_state.value,
        }
