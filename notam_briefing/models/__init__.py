"""Data models for the NOTAM briefing core."""

from notam_briefing.models.notam import ParsedNotam, NotamGroup
from notam_briefing.models.visibility import TimeWindow, VisibilityState, FilteredNotamResult
from notam_briefing.models.results import (
    ValidationResult,
    ValidationStats,
    RejectedBlock,
    BlockValidationReport,
    SectionKind,
    SectionBoundary,
    DetectionResult,
    ParseResult,
)

__all__ = [
    'ParsedNotam',
    'NotamGroup',
    'TimeWindow',
    'VisibilityState',
    'FilteredNotamResult',
    'ValidationResult',
    'ValidationStats',
    'RejectedBlock',
    'BlockValidationReport',
    'SectionKind',
    'SectionBoundary',
    'DetectionResult',
    'ParseResult',
]
