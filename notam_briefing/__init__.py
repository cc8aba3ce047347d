"""
NOTAM briefing core: extract, validate, classify and time-filter NOTAMs.

This package provides tools for:
- Locating the NOTAM sections of briefing documents (PDF text or pasted text)
- Splitting NOTAM text into blocks and rejecting non-NOTAM noise
- Parsing ICAO items A) to G) and validity dates, with warnings instead of errors
- Assigning operational groups (runways, taxiways, FIR airspace, ...)
- Filtering by look-ahead time window

Example usage:
    from notam_briefing import parse_briefing, NotamCollection, filter_notams_by_time_window

    result = parse_briefing(pdf_text)
    print(result.validation_stats.to_dict())

    for item in filter_notams_by_time_window(result.notams, "24h"):
        print(item.visibility_state.value, item.notam.notam_id, item.notam.group.label)

    grouped = NotamCollection(result.notams).group_by_location_and_category()
"""

from notam_briefing.config import ParserSettings, DEFAULT_SETTINGS
from notam_briefing.exceptions import NotamBriefingError, UnknownTimeWindowError, ConfigurationError
from notam_briefing.models import (
    ParsedNotam,
    NotamGroup,
    TimeWindow,
    VisibilityState,
    FilteredNotamResult,
    ValidationResult,
    ValidationStats,
    SectionBoundary,
    DetectionResult,
    ParseResult,
)
from notam_briefing.parsers import (
    NotamParser,
    parse_notam,
    parse_notams,
    parse_briefing,
    detect_notam_sections,
    extract_notam_sections,
    split_notam_blocks,
    extract_q_code,
    extract_notam_id,
    parse_icao_datetime,
)
from notam_briefing.validation import BlockValidator, validate_notam_block, validate_blocks
from notam_briefing.categorization import assign_group, Categorizer
from notam_briefing.filters import compute_visibility_state, filter_notams_by_time_window, filter_notams
from notam_briefing.collections import NotamCollection

__version__ = "0.1.0"

__all__ = [
    # Configuration
    'ParserSettings',
    'DEFAULT_SETTINGS',
    # Errors
    'NotamBriefingError',
    'UnknownTimeWindowError',
    'ConfigurationError',
    # Models
    'ParsedNotam',
    'NotamGroup',
    'TimeWindow',
    'VisibilityState',
    'FilteredNotamResult',
    'ValidationResult',
    'ValidationStats',
    'SectionBoundary',
    'DetectionResult',
    'ParseResult',
    # Parsing
    'NotamParser',
    'parse_notam',
    'parse_notams',
    'parse_briefing',
    'detect_notam_sections',
    'extract_notam_sections',
    'split_notam_blocks',
    'extract_q_code',
    'extract_notam_id',
    'parse_icao_datetime',
    # Validation
    'BlockValidator',
    'validate_notam_block',
    'validate_blocks',
    # Categorization
    'assign_group',
    'Categorizer',
    # Filtering
    'compute_visibility_state',
    'filter_notams_by_time_window',
    'filter_notams',
    # Collections
    'NotamCollection',
]
