"""Text parsing stages: sections, blocks, ICAO fields and dates."""

from notam_briefing.parsers.datetime_codec import IcaoDateTime, parse_icao_datetime
from notam_briefing.parsers.section_detector import (
    SectionDetector,
    detect_notam_sections,
    extract_notam_sections,
)
from notam_briefing.parsers.block_splitter import BlockSplitter, split_notam_blocks, is_page_footer
from notam_briefing.parsers.field_extractor import (
    IcaoFields,
    extract_icao_fields,
    extract_q_code,
    extract_notam_id,
)
from notam_briefing.parsers.notam_parser import (
    NotamParser,
    parse_notam,
    parse_notams,
    parse_briefing,
)

__all__ = [
    'IcaoDateTime',
    'parse_icao_datetime',
    'SectionDetector',
    'detect_notam_sections',
    'extract_notam_sections',
    'BlockSplitter',
    'split_notam_blocks',
    'is_page_footer',
    'IcaoFields',
    'extract_icao_fields',
    'extract_q_code',
    'extract_notam_id',
    'NotamParser',
    'parse_notam',
    'parse_notams',
    'parse_briefing',
]
