"""Q-code catalog mapping ICAO subject codes to operational groups.

Q-code structure:
- Q (prefix)
- 2 letters: Subject (what is affected)
- 2 letters: Condition (what happened to it)

Example: QMRLC = Q + MR (Runway) + LC (Closed) -> runways

Special codes:
- QKKKK: Checklist of all currently valid NOTAMs
- XX: Situation too unique for standard code, refer to Item E text
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, FrozenSet, Mapping, Any

from notam_briefing.models.notam import NotamGroup


SUBJECTS_BY_GROUP: Mapping[NotamGroup, FrozenSet[str]] = MappingProxyType({
    NotamGroup.RUNWAYS: frozenset({'MR', 'MS', 'MT', 'MU', 'MW', 'MD'}),
    NotamGroup.TAXIWAYS: frozenset({'MX', 'MY', 'MK', 'MN', 'MP'}),
    NotamGroup.INSTRUMENT_PROCEDURES: frozenset({
        # ILS / MLS
        'IC', 'ID', 'IG', 'II', 'IL', 'IM', 'IN', 'IO', 'IS', 'IT', 'IU', 'IW', 'IX', 'IY',
        # Navaids
        'NA', 'NB', 'NC', 'ND', 'NF', 'NL', 'NM', 'NN', 'NO', 'NT', 'NV',
        # Procedures
        'PA', 'PB', 'PC', 'PD', 'PE', 'PH', 'PI', 'PK', 'PU',
        # Airspace organisation
        'AA', 'AC', 'AD', 'AE', 'AF', 'AH', 'AL', 'AN', 'AO', 'AP', 'AR', 'AT', 'AU',
        'AV', 'AX', 'AZ',
        # Airspace restrictions
        'RA', 'RD', 'RM', 'RO', 'RP', 'RR', 'RT',
        # GNSS
        'GA', 'GW',
    }),
    NotamGroup.AIRPORT_SERVICES: frozenset({'FA', 'FF', 'FU', 'FM'}),
    NotamGroup.LIGHTING: frozenset({
        'LA', 'LB', 'LC', 'LD', 'LE', 'LF', 'LG', 'LH', 'LI', 'LJ', 'LK', 'LL', 'LM',
        'LP', 'LR', 'LS', 'LT', 'LU', 'LV', 'LW', 'LX', 'LY', 'LZ',
    }),
    NotamGroup.HAZARDS: frozenset({
        'OB', 'OL',
        'WA', 'WB', 'WC', 'WD', 'WE', 'WF', 'WG', 'WH', 'WJ', 'WL', 'WM', 'WP', 'WR',
        'WS', 'WT', 'WU', 'WV', 'WW', 'WY', 'WZ',
    }),
    NotamGroup.ADMIN: frozenset({'PF', 'PL', 'PN', 'PO', 'PR', 'PT', 'PX', 'PZ'}),
})

# Inverted lookup: subject code -> group
SUBJECT_GROUPS: Mapping[str, NotamGroup] = MappingProxyType({
    subject: group
    for group, subjects in SUBJECTS_BY_GROUP.items()
    for subject in subjects
})


def is_valid_q_code(q_code: str) -> bool:
    return bool(q_code) and len(q_code) == 5 and q_code.startswith('Q')


def determine_group_from_q_code(q_code: str) -> NotamGroup:
    """
    Map a Q-code to an operational group by its subject.

    Args:
        q_code: 5-letter Q-code (e.g., "QMRLC")

    Returns:
        NotamGroup, ``OTHER`` for malformed or unmapped codes
    """
    if not is_valid_q_code(q_code or ''):
        return NotamGroup.OTHER
    return SUBJECT_GROUPS.get(q_code[1:3], NotamGroup.OTHER)


@dataclass(frozen=True)
class QCodeInfo:
    """Decoded Q-code."""

    q_code: str
    subject_code: str
    condition_code: str
    group: NotamGroup

    # Derived
    is_checklist: bool = False  # True if QKKKK
    is_plain_language: bool = False  # True if XX condition (refer to Item E)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "q_code": self.q_code,
            "subject_code": self.subject_code,
            "condition_code": self.condition_code,
            "group": self.group.value,
            "is_checklist": self.is_checklist,
            "is_plain_language": self.is_plain_language,
        }


def parse_q_code(q_code: str) -> QCodeInfo:
    """
    Split a Q-code into subject and condition.

    Args:
        q_code: Q-code with or without the leading Q (e.g., "QMRLC" or "MRLC")

    Returns:
        QCodeInfo; subject/condition are empty for codes that are too short
    """
    q_code = (q_code or '').upper().strip()
    if not q_code.startswith('Q'):
        q_code = 'Q' + q_code

    if len(q_code) < 5:
        return QCodeInfo(q_code=q_code, subject_code='', condition_code='', group=NotamGroup.OTHER)

    subject_code = q_code[1:3]
    condition_code = q_code[3:5]
    return QCodeInfo(
        q_code=q_code,
        subject_code=subject_code,
        condition_code=condition_code,
        group=determine_group_from_q_code(q_code),
        is_checklist=q_code == 'QKKKK',
        is_plain_language=subject_code == 'XX' or condition_code == 'XX',
    )
