"""
Split NOTAM section text into per-NOTAM candidate blocks.

The primary strategy starts a block at every line that is a standalone
NOTAM identifier plus type marker (``C4621/25 NOTAMN``). Page footers are
dropped. ForeFlight style type headings (``RUNWAY``, ``OBSTACLE``, ...)
placed above a NOTAM are carried into that NOTAM's block as a
``[TYPE: <heading>]`` marker line for the categorizer.

Text without any identifier lines is split on blank lines instead.
"""

import logging
import re
from typing import List, Optional

from notam_briefing.config import ParserSettings, resolve_settings
from notam_briefing.markers import TYPE_MARKER_PATTERN, format_type_marker

logger = logging.getLogger(__name__)


NOTAM_START_PATTERN = re.compile(r'^[A-Z!]+\d+/\d+\s+NOTAM[NRC]?\b', re.IGNORECASE)

PAGE_FOOTER_PATTERNS = (
    re.compile(r'^NOTAMs?\s+\d+\s+of\s+\d+$', re.IGNORECASE),
    re.compile(r'^--\s*\d+\s+of\s+\d+\s*--$', re.IGNORECASE),
)
PAGE_NUMBER_PATTERN = re.compile(r'^\d{1,3}$')

TYPE_HEADING_PATTERN = re.compile(r'^[A-Z\s]+$')

PARAGRAPH_SEPARATOR = re.compile(r'\n\s*\n')


def is_page_footer(line: str) -> bool:
    """
    Check whether a line is a page footer or page number.

    Matches "NOTAMs 7 of 9", "-- 22 of 24 --" and bare numbers of up to
    three digits.
    """
    trimmed = line.strip()
    if PAGE_NUMBER_PATTERN.match(trimmed):
        return True
    return any(pattern.match(trimmed) for pattern in PAGE_FOOTER_PATTERNS)


def is_notam_start(line: str) -> bool:
    """Check whether a line is a standalone NOTAM identifier line."""
    return bool(NOTAM_START_PATTERN.match(line.strip()))


class BlockSplitter:
    """
    Split NOTAM text into candidate blocks.

    Example:
        blocks = BlockSplitter().split(section_text)
    """

    def __init__(self, settings: Optional[ParserSettings] = None):
        self.settings = resolve_settings(settings)

    def split(self, text: str) -> List[str]:
        """
        Split text into candidate NOTAM blocks.

        Args:
            text: NOTAM section text

        Returns:
            Trimmed, non-empty blocks in source order
        """
        if not text or not text.strip():
            return []

        lines = text.split('\n')
        if not any(is_notam_start(line) for line in lines):
            logger.debug("No NOTAM identifier lines found, splitting on blank lines")
            return self._split_paragraphs(text)

        return self._split_on_identifiers(lines)

    def _split_on_identifiers(self, lines: List[str]) -> List[str]:
        blocks: List[str] = []
        current: List[str] = []
        pending_heading: Optional[str] = None
        after_break = True

        def close_block():
            block = '\n'.join(current).strip()
            if block:
                blocks.append(block)
            current.clear()

        for index, line in enumerate(lines):
            trimmed = line.strip()

            if trimmed and is_page_footer(trimmed):
                after_break = True
                continue

            marker = TYPE_MARKER_PATTERN.match(trimmed)
            if marker:
                pending_heading = marker.group(1).strip()
                continue

            if is_notam_start(trimmed):
                close_block()
                if pending_heading:
                    current.append(format_type_marker(pending_heading))
                    pending_heading = None
                current.append(line)
            elif self._is_type_heading(trimmed, lines, index, bool(current), after_break):
                pending_heading = trimmed
            elif trimmed or current:
                current.append(line)

            after_break = not trimmed

        close_block()
        logger.debug(f"Split text into {len(blocks)} blocks on NOTAM identifiers")
        return blocks

    def _looks_like_heading(self, trimmed: str) -> bool:
        return (
            0 < len(trimmed) < self.settings.heading_max_length
            and bool(TYPE_HEADING_PATTERN.match(trimmed))
        )

    def _is_type_heading(self, trimmed: str, lines: List[str], index: int,
                         in_block: bool, after_break: bool) -> bool:
        """
        A type heading is a short upper-case line that sits before the first
        NOTAM or after a blank line/footer, and is followed by a NOTAM
        identifier line (possibly through further heading lines).
        """
        if not self._looks_like_heading(trimmed):
            return False
        if in_block and not after_break:
            return False
        for following in lines[index + 1:]:
            candidate = following.strip()
            if not candidate or is_page_footer(candidate) or self._looks_like_heading(candidate):
                continue
            return is_notam_start(candidate)
        return False

    @staticmethod
    def _split_paragraphs(text: str) -> List[str]:
        blocks = []
        for paragraph in PARAGRAPH_SEPARATOR.split(text):
            kept = [line for line in paragraph.split('\n') if not (line.strip() and is_page_footer(line))]
            block = '\n'.join(kept).strip()
            if block:
                blocks.append(block)
        return blocks


def split_notam_blocks(text: str, settings: Optional[ParserSettings] = None) -> List[str]:
    """Split text into candidate NOTAM blocks using a default splitter."""
    return BlockSplitter(settings).split(text)
