"""
Anti-pattern sniffers for non-NOTAM content.

Briefing documents contain flight plans, fuel tables, navigation logs and
procedure descriptions that carry field-like tokens. Each sniffer recognises
one kind of noise; the validator runs them in order and rejects a block on
the first match.
"""

import re
from abc import ABC, abstractmethod
from typing import List, Optional

from notam_briefing.config import ParserSettings, resolve_settings

NUMERIC_TOKEN = re.compile(r'\b\d+\b')


def _non_empty_lines(block: str) -> List[str]:
    return [line for line in block.split('\n') if line.strip()]


def _count_numeric_tokens(line: str) -> int:
    return len(NUMERIC_TOKEN.findall(line))


class BlockSniffer(ABC):
    """
    Base interface for non-NOTAM content detectors.

    Example:
        class MetarSniffer(BlockSniffer):
            name = "metar"
            reason = "METAR detected"
            confidence = 0.9

            def matches(self, block: str) -> bool:
                return block.startswith("METAR")
    """

    def __init__(self, settings: Optional[ParserSettings] = None):
        self.settings = resolve_settings(settings)

    @property
    @abstractmethod
    def name(self) -> str:
        """Sniffer name for logging."""
        pass

    @property
    @abstractmethod
    def reason(self) -> str:
        """Rejection reason reported when the sniffer matches."""
        pass

    @property
    @abstractmethod
    def confidence(self) -> float:
        """Confidence of the rejection."""
        pass

    @abstractmethod
    def matches(self, block: str) -> bool:
        """
        Check whether a block is this kind of noise.

        Args:
            block: Candidate block text

        Returns:
            True if the block should be rejected
        """
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.name})"


class FlightPlanSniffer(BlockSniffer):
    """ICAO flight plan messages and their item 18 indicators."""

    name = "flight_plan"
    reason = "Flight plan format detected"
    confidence = 0.9

    PATTERNS = [
        re.compile(r'FPL-[A-Z0-9]+-[A-Z]', re.IGNORECASE),
        re.compile(r'\bDEP/[A-Z]{4}\b', re.IGNORECASE),
        re.compile(r'\bDEST/[A-Z]{4}\b', re.IGNORECASE),
        re.compile(r'\bEET/[A-Z]{4}\b', re.IGNORECASE),
        re.compile(r'\bOPR/[A-Z]', re.IGNORECASE),
        re.compile(r'\bRMK/[A-Z]', re.IGNORECASE),
        re.compile(r'\bREG/[A-Z0-9-]+', re.IGNORECASE),
    ]

    def matches(self, block: str) -> bool:
        return any(p.search(block) for p in self.PATTERNS)


class FuelTableSniffer(BlockSniffer):
    """Fuel/performance tables: a fuel keyword plus several numeric rows."""

    name = "fuel_table"
    reason = "Fuel/performance table detected"
    confidence = 0.9

    KEYWORDS = re.compile(r'\bFUEL\b|\bGALLONS?\b|\bLITRE?S?\b|\bENDURANCE\b', re.IGNORECASE)

    def matches(self, block: str) -> bool:
        if not self.KEYWORDS.search(block):
            return False
        numeric_rows = sum(
            1 for line in _non_empty_lines(block)
            if _count_numeric_tokens(line) >= self.settings.numeric_tokens_per_line
        )
        return numeric_rows >= self.settings.fuel_table_min_lines


class WaypointSniffer(BlockSniffer):
    """Navigation log rows: mostly numeric, coordinate or track lines."""

    name = "waypoint"
    reason = "Waypoint/navigation data detected"
    confidence = 0.85

    COORDINATE = re.compile(r'\d{2,4}[NS]\s*\d{2,5}[EW]')
    TRACK = re.compile(r'\b\d{3}°?\b')

    def _is_tabular(self, line: str) -> bool:
        return (
            _count_numeric_tokens(line) >= self.settings.numeric_tokens_per_line
            or bool(self.COORDINATE.search(line))
            or bool(self.TRACK.search(line))
        )

    def matches(self, block: str) -> bool:
        lines = _non_empty_lines(block)
        if not lines:
            return False
        tabular = sum(1 for line in lines if self._is_tabular(line))
        return tabular / len(lines) > self.settings.waypoint_line_ratio


class ProcedureSniffer(BlockSniffer):
    """
    Instrument procedure descriptions.

    A single approach mention is common in genuine NOTAMs, so several
    distinct indicators are required.
    """

    name = "procedure"
    reason = "Instrument procedure detected"
    confidence = 0.85

    INDICATORS = [
        re.compile(r'\b(?:SID|STAR|IAP)\b', re.IGNORECASE),
        re.compile(r'\bTransition\b', re.IGNORECASE),
        re.compile(r'\bInitial\s+(?:Approach|Fix)\b', re.IGNORECASE),
        re.compile(r'\bFinal\s+Approach\s+(?:Fix|Course)\b', re.IGNORECASE),
        re.compile(r'\bMissed\s+Approach\s+(?:Point|Procedure)\b', re.IGNORECASE),
    ]

    def matches(self, block: str) -> bool:
        found = sum(1 for p in self.INDICATORS if p.search(block))
        return found >= self.settings.procedure_indicator_threshold


DEFAULT_SNIFFER_TYPES = (FlightPlanSniffer, FuelTableSniffer, WaypointSniffer, ProcedureSniffer)


def default_sniffers(settings: Optional[ParserSettings] = None) -> List[BlockSniffer]:
    """Create the standard sniffers in evaluation order."""
    return [sniffer_type(settings) for sniffer_type in DEFAULT_SNIFFER_TYPES]
