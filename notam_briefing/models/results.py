"""Result objects produced by the text pipeline stages."""

from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, List, Dict, Any

from notam_briefing.models.notam import ParsedNotam


@dataclass(frozen=True)
class ValidationResult:
    """
    Outcome of validating one candidate block.

    Attributes:
        is_valid: Whether the block looks like a NOTAM
        confidence: Confidence in the decision (0-1)
        reason: Rejection reason, None for accepted blocks
    """
    is_valid: bool
    confidence: float
    reason: Optional[str] = None

    @classmethod
    def accept(cls, confidence: float) -> 'ValidationResult':
        return cls(is_valid=True, confidence=min(confidence, 1.0))

    @classmethod
    def reject(cls, reason: str, confidence: float) -> 'ValidationResult':
        return cls(is_valid=False, confidence=confidence, reason=reason)

    def __str__(self) -> str:
        if self.is_valid:
            return f"Valid (confidence {self.confidence:.2f})"
        return f"Invalid: {self.reason}"


@dataclass
class ValidationStats:
    """Block validation counters for one pipeline run."""
    total_blocks: int = 0
    accepted_blocks: int = 0
    rejected_blocks: int = 0
    rejection_reasons: Counter = field(default_factory=Counter)

    def record(self, result: ValidationResult) -> None:
        """Count a validation outcome."""
        self.total_blocks += 1
        if result.is_valid:
            self.accepted_blocks += 1
        else:
            self.rejected_blocks += 1
            self.rejection_reasons[result.reason or "Unknown"] += 1

    def to_dict(self) -> Dict[str, Any]:
        return {
            'total_blocks': self.total_blocks,
            'accepted_blocks': self.accepted_blocks,
            'rejected_blocks': self.rejected_blocks,
            'rejection_reasons': dict(self.rejection_reasons),
        }


@dataclass(frozen=True)
class RejectedBlock:
    block: str
    reason: str


@dataclass
class BlockValidationReport:
    """Accepted and rejected partitions of a batch of blocks."""
    valid_blocks: List[str] = field(default_factory=list)
    invalid_blocks: List[RejectedBlock] = field(default_factory=list)
    stats: ValidationStats = field(default_factory=ValidationStats)


class SectionKind(Enum):
    NOTAMS = "notams"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class SectionBoundary:
    """
    Character range of one NOTAM section within a document.

    ``start_offset`` points at the first content line after the heading
    (and any decorative separator lines), ``end_offset`` at the start of
    the line that ended the section or the end of the document.
    """
    start_offset: int
    end_offset: int
    kind: SectionKind = SectionKind.NOTAMS
    heading: Optional[str] = None

    def slice(self, text: str) -> str:
        return text[self.start_offset:self.end_offset]


@dataclass
class DetectionResult:
    """Sections found in a document and the NOTAM text extracted from them."""
    sections: List[SectionBoundary]
    extracted_text: str
    full_text_length: int = 0

    @property
    def stats(self) -> Dict[str, int]:
        return {
            'total_sections': len(self.sections),
            'notam_sections': sum(1 for s in self.sections if s.kind is SectionKind.NOTAMS),
            'full_text_length': self.full_text_length,
            'extracted_text_length': len(self.extracted_text),
        }


@dataclass
class ParseResult:
    """
    Output of the parsing pipeline.

    Attributes:
        notams: Parsed NOTAMs in source order
        warnings: Global warnings (per-NOTAM warnings are repeated here, prefixed)
        validation_stats: Block validation counters
        detection: Section detection result when a whole document was parsed
    """
    notams: List[ParsedNotam] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    validation_stats: ValidationStats = field(default_factory=ValidationStats)
    detection: Optional[DetectionResult] = None

    def to_dict(self) -> Dict[str, Any]:
        result = {
            'notams': [n.to_dict() for n in self.notams],
            'warnings': list(self.warnings),
            'validation_stats': self.validation_stats.to_dict(),
        }
        if self.detection is not None:
            result['detection_stats'] = self.detection.stats
        return result

    def __len__(self) -> int:
        return len(self.notams)
