"""Time window filtering."""

from notam_briefing.filters.time_window import (
    compute_visibility_state,
    filter_notams_by_time_window,
    filter_notams,
    overlaps_window,
    window_end,
)

__all__ = [
    'compute_visibility_state',
    'filter_notams_by_time_window',
    'filter_notams',
    'overlaps_window',
    'window_end',
]
