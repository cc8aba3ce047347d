"""
Type heading markers carried inside NOTAM blocks.

The block splitter prefixes a block with ``[TYPE: <heading>]`` when the
briefing placed a type heading (``RUNWAY``, ``OBSTACLE``, ...) above the
NOTAM. The categorizer reads the marker back.
"""

import re
from typing import Optional

TYPE_MARKER_PATTERN = re.compile(r'^\[TYPE:\s*([^\]]+)\]')


def format_type_marker(heading: str) -> str:
    return f"[TYPE: {heading}]"


def extract_type_marker(text: str) -> Optional[str]:
    """
    Return the type heading carried by a block, if any.

    Args:
        text: Block text, possibly starting with a ``[TYPE: ...]`` line

    Returns:
        Heading text or None
    """
    match = TYPE_MARKER_PATTERN.match((text or '').strip())
    return match.group(1).strip() if match else None
