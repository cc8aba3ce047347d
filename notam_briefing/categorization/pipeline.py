"""Group assignment for parsed NOTAMs."""

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable, Dict, Iterable, List, Optional

from notam_briefing.categorization.fir import group_fir_notam, is_fir_notam
from notam_briefing.categorization.keywords import classify_by_text_scoring
from notam_briefing.categorization.q_code import determine_group_from_q_code
from notam_briefing.categorization.type_heading import group_from_type_marker
from notam_briefing.models.notam import NotamGroup, ParsedNotam

logger = logging.getLogger(__name__)


class NotamKind(Enum):
    """How a NOTAM without a type heading is classified."""
    FIR = "fir"
    AIRPORT_Q_CODE = "airport_q_code"
    AIRPORT_KEYWORDS = "airport_keywords"


def classify_kind(q_code: Optional[str], notam_id: str) -> NotamKind:
    """
    Decide which classification branch applies.

    FIR series identifiers take precedence over a Q-code.
    """
    if is_fir_notam(notam_id):
        return NotamKind.FIR
    if q_code:
        return NotamKind.AIRPORT_Q_CODE
    return NotamKind.AIRPORT_KEYWORDS


@dataclass(frozen=True)
class CategorizationResult:
    """
    Group assigned to a NOTAM and the rule that decided it.

    Attributes:
        group: Assigned group
        source: "type_heading" or the NotamKind value of the branch used
    """
    group: NotamGroup
    source: str


_BRANCHES: Dict[NotamKind, Callable[[Optional[str], str, str, str], NotamGroup]] = {
    NotamKind.FIR: lambda q_code, notam_id, field_e, raw_text: group_fir_notam(notam_id, field_e, raw_text),
    NotamKind.AIRPORT_Q_CODE: lambda q_code, notam_id, field_e, raw_text: determine_group_from_q_code(q_code),
    NotamKind.AIRPORT_KEYWORDS: lambda q_code, notam_id, field_e, raw_text: classify_by_text_scoring(field_e or raw_text),
}


def categorize_fields(q_code: Optional[str], notam_id: str, field_e: str, raw_text: str) -> CategorizationResult:
    """
    Assign a group and report which rule decided it.

    A type heading marker in the raw text is authoritative. Otherwise FIR
    NOTAMs are grouped by series and content, aerodrome NOTAMs with a Q-code
    by the Q-code subject, and the rest by keyword scoring.

    Args:
        q_code: Q-code or None
        notam_id: NOTAM identifier
        field_e: Item E text
        raw_text: Whole block text

    Returns:
        CategorizationResult
    """
    heading_group = group_from_type_marker(raw_text)
    if heading_group is not None:
        return CategorizationResult(group=heading_group, source="type_heading")

    kind = classify_kind(q_code, notam_id)
    group = _BRANCHES[kind](q_code, notam_id or '', field_e or '', raw_text or '')
    return CategorizationResult(group=group, source=kind.value)


def assign_group(q_code: Optional[str], notam_id: str, field_e: str, raw_text: str) -> NotamGroup:
    """Assign an operational group to a NOTAM from its parsed parts."""
    return categorize_fields(q_code, notam_id, field_e, raw_text).group


class Categorizer:
    """
    Assign groups to parsed NOTAMs.

    NOTAMs are immutable, so re-categorizing returns new instances.

    Example:
        categorizer = Categorizer()
        notams = categorizer.categorize_all(result.notams)
    """

    def categorize(self, notam: ParsedNotam) -> CategorizationResult:
        """
        Categorize a single NOTAM.

        Args:
            notam: NOTAM to categorize

        Returns:
            CategorizationResult
        """
        result = categorize_fields(notam.q_code, notam.notam_id, notam.field_e, notam.raw_text)
        logger.debug(f"{notam.notam_id} -> {result.group.value} ({result.source})")
        return result

    def categorize_all(self, notams: Iterable[ParsedNotam]) -> List[ParsedNotam]:
        """
        Categorize NOTAMs and return copies carrying the assigned group.

        Args:
            notams: NOTAMs to categorize

        Returns:
            New list of NOTAMs in the same order
        """
        return [replace(notam, group=self.categorize(notam).group) for notam in notams]
