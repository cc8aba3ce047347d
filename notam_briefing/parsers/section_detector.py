"""
Locate NOTAM sections inside whole briefing documents.

Flight briefings (ForeFlight, Garmin Pilot and similar) mix flight plans,
weather, fuel tables and NOTAMs in one text dump. The detector finds the
NOTAM headings, cuts each section at the next NOTAM heading or known
non-NOTAM heading, and concatenates the section bodies. When no heading is
found the whole document is returned unchanged.
"""

import logging
import re
from typing import List, Optional, Tuple

from notam_briefing.config import ParserSettings, resolve_settings
from notam_briefing.models.results import DetectionResult, SectionBoundary, SectionKind

logger = logging.getLogger(__name__)


NOTAM_HEADING_PATTERNS = (
    re.compile(r'^NOTAMs?$', re.IGNORECASE),
    re.compile(r'^NOTICES?\s+TO\s+(?:AIR)?MEN$', re.IGNORECASE),
    re.compile(r'^NOTAM\s+INFORMATION$', re.IGNORECASE),
    re.compile(r'-+\s*NOTAMs?\s*-+', re.IGNORECASE),
)

SECTION_END_PATTERNS = (
    re.compile(r'^FLIGHT\s+PLAN$', re.IGNORECASE),
    re.compile(r'^WEATHER$', re.IGNORECASE),
    re.compile(r'^METEOROLOGICAL\s+INFORMATION$', re.IGNORECASE),
    re.compile(r'^WINDS?\s+ALOFT$', re.IGNORECASE),
    re.compile(r'^FUEL\s+PLANNING$', re.IGNORECASE),
    re.compile(r'^FUEL$', re.IGNORECASE),
    re.compile(r'^WEIGHT\s+AND\s+BALANCE$', re.IGNORECASE),
    re.compile(r'^NAVIGATION\s+LOG$', re.IGNORECASE),
    re.compile(r'^ROUTE\s+(?:OF\s+)?FLIGHT$', re.IGNORECASE),
)

# Lines that can never be headings even if a heading pattern would match
NOTAM_ID_LINE = re.compile(r'[A-Z]+\d+/\d+')
Q_CODE_LINE = re.compile(r'Q\)\s*[A-Z]{4}/Q[A-Z]{4}')
FIELD_MARKER_LINE = re.compile(r'^[A-G]\)\s')
PAGE_COUNTER = re.compile(r'\d+\s+of\s+\d+', re.IGNORECASE)

DECORATIVE_LINE = re.compile(r'^[-=*]{3,}$')


def _is_heading_candidate(line: str, settings: ParserSettings) -> bool:
    """Check the exclusions that apply before any heading pattern."""
    if not line or len(line) > settings.heading_max_length:
        return False
    if NOTAM_ID_LINE.search(line):
        return False
    if Q_CODE_LINE.search(line):
        return False
    if FIELD_MARKER_LINE.match(line):
        return False
    if PAGE_COUNTER.search(line):
        return False
    return True


def match_notam_heading(line: str, settings: Optional[ParserSettings] = None) -> Optional[str]:
    """
    Match a line against the NOTAM section heading patterns.

    Args:
        line: One line of the document
        settings: Thresholds (maximum heading length)

    Returns:
        Matched heading text, or None
    """
    trimmed = line.strip()
    if not _is_heading_candidate(trimmed, resolve_settings(settings)):
        return None
    for pattern in NOTAM_HEADING_PATTERNS:
        match = pattern.search(trimmed)
        if match:
            return match.group(0)
    return None


def is_section_end_marker(line: str, settings: Optional[ParserSettings] = None) -> bool:
    """Check whether a line is a known non-NOTAM section heading."""
    trimmed = line.strip()
    if not _is_heading_candidate(trimmed, resolve_settings(settings)):
        return False
    return any(pattern.match(trimmed) for pattern in SECTION_END_PATTERNS)


class SectionDetector:
    """
    Find NOTAM section boundaries in briefing text.

    Example:
        result = SectionDetector().detect(pdf_text)
        print(result.stats['notam_sections'], result.extracted_text[:200])
    """

    def __init__(self, settings: Optional[ParserSettings] = None):
        self.settings = resolve_settings(settings)

    def detect(self, text: str) -> DetectionResult:
        """
        Detect NOTAM sections in a document.

        Args:
            text: Whole-document text

        Returns:
            DetectionResult with section boundaries and extracted text
        """
        text = text or ''
        if not text.strip():
            return DetectionResult(sections=[], extracted_text='', full_text_length=len(text))

        lines = text.split('\n')
        # offsets[i] is the character offset of line i; the extra entry is len(text)
        offsets = [0]
        for line in lines:
            offsets.append(offsets[-1] + len(line) + 1)
        offsets[-1] = len(text)

        sections: List[SectionBoundary] = []
        index = 0
        while index < len(lines):
            start, heading = self._find_start(lines, index)
            if start is None:
                break
            content_start = self._skip_decorations(lines, start + 1)
            end = self._find_end(lines, content_start)
            boundary = SectionBoundary(
                start_offset=min(offsets[content_start], len(text)),
                end_offset=min(offsets[end], len(text)),
                kind=SectionKind.NOTAMS,
                heading=heading,
            )
            logger.debug(f"NOTAM section '{heading}' at lines {start}-{end}")
            sections.append(boundary)
            index = end

        if not sections:
            logger.debug("No NOTAM section heading found, using full text")
            return DetectionResult(sections=[], extracted_text=text, full_text_length=len(text))

        bodies = [section.slice(text).strip() for section in sections]
        extracted = '\n\n'.join(body for body in bodies if body).strip()
        return DetectionResult(sections=sections, extracted_text=extracted, full_text_length=len(text))

    def _find_start(self, lines: List[str], start_from: int) -> Tuple[Optional[int], Optional[str]]:
        for i in range(start_from, len(lines)):
            heading = match_notam_heading(lines[i], self.settings)
            if heading:
                return i, heading
        return None, None

    @staticmethod
    def _skip_decorations(lines: List[str], index: int) -> int:
        while index < len(lines) and DECORATIVE_LINE.match(lines[index].strip()):
            index += 1
        return index

    def _find_end(self, lines: List[str], start_from: int) -> int:
        for i in range(start_from, len(lines)):
            if match_notam_heading(lines[i], self.settings) or is_section_end_marker(lines[i], self.settings):
                return i
        return len(lines)


def detect_notam_sections(text: str, settings: Optional[ParserSettings] = None) -> DetectionResult:
    """Detect NOTAM sections using a default detector."""
    return SectionDetector(settings).detect(text)


def extract_notam_sections(text: str, settings: Optional[ParserSettings] = None) -> str:
    """Return only the NOTAM text of a document (the whole text if no heading is found)."""
    return detect_notam_sections(text, settings).extracted_text
