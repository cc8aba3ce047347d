"""
Parser for ICAO NOTAM text.

Runs the text pipeline: section detection (for whole briefing documents),
block splitting, block validation, field extraction and categorization.
Parsing is strict-first: whatever can be parsed is returned and everything
that cannot is reported as a warning, never as an exception.
"""

import logging
from datetime import datetime
from typing import Optional, List

from notam_briefing.categorization.pipeline import assign_group
from notam_briefing.config import ParserSettings, resolve_settings
from notam_briefing.models.notam import ParsedNotam
from notam_briefing.models.results import ParseResult, ValidationStats
from notam_briefing.parsers.block_splitter import BlockSplitter
from notam_briefing.parsers.datetime_codec import ensure_utc, parse_icao_datetime, utc_now
from notam_briefing.parsers.field_extractor import (
    extract_icao_fields,
    extract_notam_id,
    extract_q_code,
)
from notam_briefing.parsers.section_detector import SectionDetector
from notam_briefing.validation.block_validator import BlockValidator

logger = logging.getLogger(__name__)

NO_CONTENT_WARNING = "No NOTAM content found in input"
NOTAM_WARNING_PREFIX = "NOTAM parsing: "
BLOCK_FAILURE_PREFIX = "Failed to parse NOTAM block: "


class NotamParser:
    """
    Parser for NOTAM text and briefing documents.

    Example:
        parser = NotamParser()
        result = parser.parse_notams('''
            A1234/24 NOTAMN
            Q) LFFF/QMRLC/IV/NBO/A/000/999/4901N00225E005
            A) LFPG B) 2401150800 C) 2401152000
            E) RWY 09L/27R CLSD DUE TO MAINTENANCE
        ''')
        for notam in result.notams:
            print(notam.notam_id, notam.group.label)
    """

    def __init__(self, settings: Optional[ParserSettings] = None):
        self.settings = resolve_settings(settings)
        self.detector = SectionDetector(self.settings)
        self.splitter = BlockSplitter(self.settings)
        self.validator = BlockValidator(self.settings)

    def parse_notam(self, text: str, now: Optional[datetime] = None) -> ParsedNotam:
        """
        Parse a single NOTAM block.

        Args:
            text: Raw NOTAM text
            now: Reference time for two-digit years and PERM

        Returns:
            ParsedNotam; problems are listed in ``warnings``
        """
        raw = (text or '').strip()
        now = ensure_utc(now) if now is not None else utc_now()
        warnings: List[str] = []

        fields = extract_icao_fields(raw)

        if not fields.field_a:
            warnings.append("Field A (location) missing")

        valid_from = None
        if fields.field_b:
            start = parse_icao_datetime(fields.field_b, is_end_date=False, now=now, settings=self.settings)
            if start.date is not None:
                valid_from = start.date
            else:
                warnings.append(f'Could not parse Field B (start date/time): "{fields.field_b}"')
        else:
            warnings.append("Field B (start date/time) missing")

        valid_to = None
        is_permanent = False
        if fields.field_c:
            end = parse_icao_datetime(fields.field_c, is_end_date=True, now=now, settings=self.settings)
            if end.date is not None:
                valid_to = end.date
                is_permanent = end.is_permanent
            else:
                warnings.append(f'Could not parse Field C (end date/time): "{fields.field_c}"')
        else:
            warnings.append("Field C (end date/time) missing")

        if not fields.field_e:
            warnings.append("Field E (NOTAM body) missing")

        q_code = extract_q_code(raw)
        notam_id = extract_notam_id(raw)
        group = assign_group(q_code, notam_id, fields.field_e, raw)

        if warnings:
            logger.debug(f"{notam_id}: {len(warnings)} field warnings")

        return ParsedNotam(
            raw_text=raw,
            notam_id=notam_id,
            q_code=q_code,
            field_a=fields.field_a,
            field_b=fields.field_b,
            field_c=fields.field_c,
            field_d=fields.field_d,
            field_e=fields.field_e,
            field_f=fields.field_f,
            field_g=fields.field_g,
            valid_from=valid_from,
            valid_to=valid_to,
            is_permanent=is_permanent,
            warnings=tuple(warnings),
            group=group,
        )

    def parse_notams(self, text: str, now: Optional[datetime] = None) -> ParseResult:
        """
        Parse NOTAM text that is already isolated (e.g., pasted NOTAMs).

        Args:
            text: NOTAM text
            now: Reference time for two-digit years and PERM

        Returns:
            ParseResult with NOTAMs, global warnings and validation stats
        """
        now = ensure_utc(now) if now is not None else utc_now()
        blocks = self.splitter.split(text)

        if not blocks:
            return ParseResult(notams=[], warnings=[NO_CONTENT_WARNING], validation_stats=ValidationStats())

        result = ParseResult()
        for block in blocks:
            validation = self.validator.validate(block)
            result.validation_stats.record(validation)
            if not validation.is_valid:
                logger.debug(f"Rejected block ({validation.reason})")
                continue

            try:
                notam = self.parse_notam(block, now=now)
            except Exception as e:
                logger.warning(f"Failed to parse NOTAM block: {e}")
                result.warnings.append(f"{BLOCK_FAILURE_PREFIX}{e}")
                continue

            result.notams.append(notam)
            result.warnings.extend(f"{NOTAM_WARNING_PREFIX}{w}" for w in notam.warnings)

        stats = result.validation_stats
        logger.info(
            f"Parsed {len(result.notams)} NOTAMs from {stats.total_blocks} blocks "
            f"({stats.accepted_blocks} accepted, {stats.rejected_blocks} rejected)"
        )
        return result

    def parse_briefing(self, text: str, now: Optional[datetime] = None) -> ParseResult:
        """
        Parse a whole briefing document.

        Only the NOTAM sections are parsed; a document without a NOTAM
        heading is parsed in full.

        Args:
            text: Whole-document text (e.g., extracted from a PDF)
            now: Reference time for two-digit years and PERM

        Returns:
            ParseResult including the section detection result
        """
        detection = self.detector.detect(text)
        result = self.parse_notams(detection.extracted_text, now=now)
        result.detection = detection
        return result


def parse_notam(text: str, now: Optional[datetime] = None) -> ParsedNotam:
    """Parse a single NOTAM block with default settings."""
    return NotamParser().parse_notam(text, now=now)


def parse_notams(text: str, now: Optional[datetime] = None) -> ParseResult:
    """Parse isolated NOTAM text with default settings."""
    return NotamParser().parse_notams(text, now=now)


def parse_briefing(text: str, now: Optional[datetime] = None) -> ParseResult:
    """Parse a whole briefing document with default settings."""
    return NotamParser().parse_briefing(text, now=now)
