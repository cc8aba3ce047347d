"""
NOTAM categorization into operational groups.

Classification order:
- Type heading markers from the briefing layout
- FIR series NOTAMs by series letter and content keywords
- Aerodrome NOTAMs by Q-code subject
- Aerodrome NOTAMs without a Q-code by weighted keyword scoring

Example:
    from notam_briefing.categorization import assign_group

    group = assign_group("QMRLC", "A1234/24", "RWY 09/27 CLSD", raw_text)
"""

from notam_briefing.categorization.q_code import (
    QCodeInfo,
    parse_q_code,
    determine_group_from_q_code,
)
from notam_briefing.categorization.keywords import (
    GroupKeywords,
    AIRPORT_GROUP_KEYWORDS,
    classify_by_text_scoring,
    score_groups,
)
from notam_briefing.categorization.fir import is_fir_notam, group_fir_notam
from notam_briefing.categorization.type_heading import group_from_type_heading
from notam_briefing.categorization.pipeline import (
    NotamKind,
    CategorizationResult,
    Categorizer,
    classify_kind,
    categorize_fields,
    assign_group,
)

__all__ = [
    'QCodeInfo',
    'parse_q_code',
    'determine_group_from_q_code',
    'GroupKeywords',
    'AIRPORT_GROUP_KEYWORDS',
    'classify_by_text_scoring',
    'score_groups',
    'is_fir_notam',
    'group_fir_notam',
    'group_from_type_heading',
    'NotamKind',
    'CategorizationResult',
    'Categorizer',
    'classify_kind',
    'categorize_fields',
    'assign_group',
]
