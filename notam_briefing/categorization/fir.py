"""
Grouping of FIR-wide NOTAMs.

FIR NOTAM series letters carry meaning: E series are airspace restrictions,
L series ATC/navigation, F series obstacles and charts, H series
infrastructure, G and W series general/administrative notices. The series
letter selects a keyword set to confirm; otherwise content keywords decide.
Keyword sets match as plain substrings of the upper-cased body.
"""

from typing import FrozenSet, Optional, Tuple

from notam_briefing.models.notam import NotamGroup

FIR_SERIES = frozenset('ELFHGW')

AIRSPACE_KEYWORDS: Tuple[str, ...] = (
    "AIRSPACE",
    "RESTRICTED",
    "MILITARY FLYING",
    "MIL FLYING",
    "DANGER AREA",
    "PROHIBITED AREA",
    "SPECIAL USE AIRSPACE",
    "RESTRICTED AREA",
    "MILITARY EXERCISE",
    "MIL NON-FLYING",
    "TEMPO RESTRICTED AREA",
    "EMERGENCY EXERCIS",
)

ATC_KEYWORDS: Tuple[str, ...] = (
    "RADAR COVERAGE",
    "A/G FAC",
    "ATC",
    "NAVIGATION",
    "FREQUENCY",
    "MELBOURNE CENTRE",
    "APPROACH",
    "DEPARTURE",
    "CONTROL",
    "TOWER",
)

OBSTACLE_KEYWORDS: Tuple[str, ...] = (
    "MAST",
    "WIND TURBINE",
    "OBST",
    "OBSTACLE",
    "AIP CHARTS AMD",
    "CHART",
    "UNLIT",
    "LIT",
    "MET MAST",
    "COMMUNICATION TOWER",
    "BLDG",
    "GRID LOWEST SAFE ALTITUDE",
    "LSALT",
)

INFRASTRUCTURE_KEYWORDS: Tuple[str, ...] = (
    "AIRPORT",
    "AERODROME",
    "RUNWAY",
    "TAXIWAY",
    "INTEGRATED AIP",
    "IAIP",
    "FACILITY",
    "TERMINAL",
    "WESTERN SYDNEY INTERNATIONAL",
    "NANCY-BIRD WALTON",
)

DRONE_KEYWORDS: Tuple[str, ...] = (
    "UA OPS",
    "MULTI-ROTOR",
    "FIXED-WING",
    "UNMANNED AIRCRAFT",
    "DRONE",
    "UAS",
    "RPAS",
)

# Series letter -> (keywords that confirm it, group)
SERIES_RULES = {
    'E': (AIRSPACE_KEYWORDS, NotamGroup.FIR_AIRSPACE_RESTRICTIONS),
    'L': (ATC_KEYWORDS, NotamGroup.FIR_ATC_NAVIGATION),
    'F': (OBSTACLE_KEYWORDS, NotamGroup.FIR_OBSTACLES_CHARTS),
    'H': (INFRASTRUCTURE_KEYWORDS, NotamGroup.FIR_INFRASTRUCTURE),
}

ADMINISTRATIVE_SERIES: FrozenSet[str] = frozenset('GW')

# Content checks when the series letter did not decide
CONTENT_RULES: Tuple[Tuple[Tuple[str, ...], NotamGroup], ...] = (
    (DRONE_KEYWORDS, NotamGroup.FIR_DRONE_OPERATIONS),
    (AIRSPACE_KEYWORDS, NotamGroup.FIR_AIRSPACE_RESTRICTIONS),
    (ATC_KEYWORDS, NotamGroup.FIR_ATC_NAVIGATION),
    (OBSTACLE_KEYWORDS, NotamGroup.FIR_OBSTACLES_CHARTS),
)


def contains_any(content: str, keywords: Tuple[str, ...]) -> bool:
    return any(keyword in content for keyword in keywords)


def is_fir_notam(notam_id: str) -> bool:
    """
    Check whether a NOTAM identifier belongs to a FIR series.

    Args:
        notam_id: Identifier such as "E1234/25"

    Returns:
        True if the first character is E, L, F, H, G or W
    """
    notam_id = (notam_id or '').strip().upper()
    return bool(notam_id) and notam_id[0] in FIR_SERIES


def _series_group(series: str, content: str) -> Optional[NotamGroup]:
    if series in ADMINISTRATIVE_SERIES:
        return NotamGroup.FIR_ADMINISTRATIVE
    rule = SERIES_RULES.get(series)
    if rule and contains_any(content, rule[0]):
        return rule[1]
    return None


def group_fir_notam(notam_id: str, field_e: str, raw_text: str) -> NotamGroup:
    """
    Group a FIR NOTAM by series letter and content.

    Args:
        notam_id: NOTAM identifier
        field_e: Item E text
        raw_text: Whole block, used when item E is empty

    Returns:
        FIR group, or ``OTHER`` when nothing matched
    """
    notam_id = (notam_id or '').upper()
    series = notam_id[0] if notam_id else ''
    content = (field_e or raw_text or '').upper()

    group = _series_group(series, content)
    if group is not None:
        return group

    for keywords, content_group in CONTENT_RULES:
        if contains_any(content, keywords):
            return content_group

    return NotamGroup.OTHER
