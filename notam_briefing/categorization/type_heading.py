"""Groups implied by briefing type headings (``[TYPE: RUNWAY]`` markers)."""

from typing import Optional, Tuple

from notam_briefing.models.notam import NotamGroup
from notam_briefing.markers import extract_type_marker

# Checked in order, first substring hit wins
HEADING_RULES: Tuple[Tuple[Tuple[str, ...], NotamGroup], ...] = (
    (('RUNWAY', 'RWY'), NotamGroup.RUNWAYS),
    (('TAXIWAY', 'TWY'), NotamGroup.TAXIWAYS),
    (('LIGHTING', 'LIGHTS'), NotamGroup.LIGHTING),
    (('OBSTACLE',), NotamGroup.HAZARDS),
    (('AERIAL', 'SURVEY'), NotamGroup.HAZARDS),
    (('UNMANNED', 'DRONE', 'UA '), NotamGroup.HAZARDS),
    (('PROCEDURE',), NotamGroup.INSTRUMENT_PROCEDURES),
    (('AIRSPACE',), NotamGroup.INSTRUMENT_PROCEDURES),
    (('NAVIGATION', 'NAV'), NotamGroup.INSTRUMENT_PROCEDURES),
    (('AERODROME',), NotamGroup.AIRPORT_SERVICES),
    (('APRON',), NotamGroup.AIRPORT_SERVICES),
    (('COMMUNICATION', 'COM'), NotamGroup.AIRPORT_SERVICES),
)


def group_from_type_heading(heading: str) -> Optional[NotamGroup]:
    """
    Map a type heading to a group.

    Args:
        heading: Heading text (e.g., "RUNWAY", "OBSTACLE")

    Returns:
        NotamGroup or None when the heading is not recognised
    """
    heading = (heading or '').upper()
    for keywords, group in HEADING_RULES:
        if any(keyword in heading for keyword in keywords):
            return group
    return None


def group_from_type_marker(raw_text: str) -> Optional[NotamGroup]:
    """Group implied by the ``[TYPE: ...]`` marker at the start of a block, if any."""
    heading = extract_type_marker(raw_text or '')
    return group_from_type_heading(heading) if heading else None
