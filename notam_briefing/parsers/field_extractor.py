"""
Extraction of ICAO NOTAM items A) to G) from a text block.

Each item runs from its marker to the next marker of a letter that may
follow it, or to the end of the block, so item E may span several lines.
A marker is only recognised at the start of the block or after whitespace,
which keeps parenthesised references such as ``TWY (F)`` inside item E from
opening a new field. Items are located in order A to G, and a marker found
after the marker of a later item belongs to that item's text.
"""

import re
from dataclasses import dataclass, fields
from typing import Dict, Optional

Q_CODE_PATTERN = re.compile(r'\bQ[A-Z]{4}\b')

NOTAM_ID_AT_START = re.compile(r'^([A-Z]+\d+/\d+)', re.IGNORECASE)
NOTAM_ID_ANYWHERE = re.compile(r'\b([A-Z]+\d+/\d+)\b', re.IGNORECASE)

ITEM_MARKER = re.compile(r'(?:^|(?<=\s))([A-G])\)')

UNKNOWN_ID = "UNKNOWN"


def _field_pattern(letter: str, followers: str) -> re.Pattern:
    return re.compile(
        rf'(?:^|(?<=\s)){letter}\)(.*?)(?=\s[{followers}]\)|\Z)',
        re.DOTALL,
    )


# Letters that terminate each item
FIELD_PATTERNS: Dict[str, re.Pattern] = {
    'a': _field_pattern('A', 'B-Z'),
    'b': _field_pattern('B', 'C-Z'),
    'c': _field_pattern('C', 'D-Z'),
    'd': _field_pattern('D', 'E-Z'),
    'e': _field_pattern('E', 'FG'),
    'f': _field_pattern('F', 'G'),
    'g': _field_pattern('G', 'A-Z'),
}


@dataclass(frozen=True)
class IcaoFields:
    """Raw contents of ICAO items A) to G); empty string when absent."""
    field_a: str = ""
    field_b: str = ""
    field_c: str = ""
    field_d: str = ""
    field_e: str = ""
    field_f: str = ""
    field_g: str = ""

    def to_dict(self) -> Dict[str, str]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


def _later_item_between(text: str, key: str, start: int, end: int) -> bool:
    return any(m.group(1).lower() > key for m in ITEM_MARKER.finditer(text, start, end))


def _locate_fields(text: str) -> Dict[str, str]:
    found: Dict[str, str] = {}
    pos = 0
    for key, pattern in FIELD_PATTERNS.items():
        match = pattern.search(text, pos)
        if match is None or _later_item_between(text, key, pos, match.start()):
            continue
        found[key] = match.group(1).strip()
        pos = match.start(1)
    return found


def extract_icao_fields(text: str) -> IcaoFields:
    """
    Extract ICAO items A) to G) from a NOTAM block.

    Args:
        text: NOTAM block text

    Returns:
        IcaoFields with trimmed item contents
    """
    located = _locate_fields(text or "")
    return IcaoFields(**{f"field_{key}": value for key, value in located.items()})


def extract_q_code(text: str) -> Optional[str]:
    """
    Extract the first Q-code from text.

    Matching is case-insensitive and the result is upper case.

    Args:
        text: NOTAM text

    Returns:
        5-letter Q-code (e.g., "QMRLC") or None
    """
    match = Q_CODE_PATTERN.search((text or "").upper())
    return match.group(0) if match else None


def extract_notam_id(text: str) -> str:
    """
    Extract the NOTAM identifier from a block.

    Tries an identifier at the very start of the block, then anywhere in the
    block, then the first word of item A. Falls back to "UNKNOWN".
    """
    text = text or ""
    match = NOTAM_ID_AT_START.match(text) or NOTAM_ID_ANYWHERE.search(text)
    if match:
        return match.group(1)

    location = _locate_fields(text).get('a', '')
    if location:
        return location.split()[0]

    return UNKNOWN_ID
