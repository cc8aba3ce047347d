"""
Pre-validation of candidate NOTAM blocks.

Rejects noise before field extraction: blocks that are too short, blocks
recognised by one of the sniffers, and blocks lacking NOTAM structure
(neither a Q-code nor both items A and E). Accepted blocks get a confidence
score built from the structural evidence found.
"""

import logging
import re
from typing import Iterable, List, Optional

from notam_briefing.config import ParserSettings, resolve_settings
from notam_briefing.models.results import (
    BlockValidationReport,
    RejectedBlock,
    ValidationResult,
)
from notam_briefing.validation.sniffers import BlockSniffer, default_sniffers

logger = logging.getLogger(__name__)


TOO_SHORT_REASON = "Text too short (< {min_length} chars)"

Q_CODE_PATTERN = re.compile(r'\bQ[A-Z]{4}\b', re.IGNORECASE)
NOTAM_ID_PATTERN = re.compile(r'(?:^|\n)\s*[A-Z]+\d+/\d+(?:\s+NOTAM[NRC])?', re.IGNORECASE | re.MULTILINE)

FIELD_MARKERS = {
    letter: re.compile(rf'\b{letter}\)')
    for letter in 'ABCEFG'
}

BASE_CONFIDENCE = 0.5
Q_CODE_BONUS = 0.2
NOTAM_ID_BONUS = 0.15
DATE_FIELD_BONUS = 0.05
BODY_FIELD_BONUS = 0.1
FIELD_COUNT_BONUS = 0.1
FIELD_COUNT_THRESHOLD = 3


def _bool_text(value: bool) -> str:
    return "true" if value else "false"


class BlockValidator:
    """
    Decide whether a candidate block is plausibly a NOTAM.

    Sniffers are evaluated in order and the first match rejects the block.
    Additional sniffers can be appended without changing the existing ones.

    Example:
        validator = BlockValidator()
        result = validator.validate(block)
        if not result.is_valid:
            print(result.reason)
    """

    def __init__(self, settings: Optional[ParserSettings] = None,
                 sniffers: Optional[List[BlockSniffer]] = None):
        self.settings = resolve_settings(settings)
        self.sniffers = list(sniffers) if sniffers is not None else default_sniffers(self.settings)

    def add_sniffer(self, sniffer: BlockSniffer) -> 'BlockValidator':
        """Append a sniffer. Returns self for chaining."""
        self.sniffers.append(sniffer)
        return self

    def validate(self, block: str) -> ValidationResult:
        """
        Validate a single candidate block.

        Args:
            block: Candidate block text

        Returns:
            ValidationResult with a reason for rejected blocks
        """
        text = (block or '').strip()
        min_length = self.settings.min_block_length
        if len(text) < min_length:
            return ValidationResult.reject(TOO_SHORT_REASON.format(min_length=min_length), 1.0)

        for sniffer in self.sniffers:
            if sniffer.matches(text):
                return ValidationResult.reject(sniffer.reason, sniffer.confidence)

        has_q_code = bool(Q_CODE_PATTERN.search(text))
        present = {letter: bool(p.search(text)) for letter, p in FIELD_MARKERS.items()}

        if not has_q_code and not (present['A'] and present['E']):
            reason = (
                f"Missing required structure (Q-code: {_bool_text(has_q_code)}, "
                f"Field A: {_bool_text(present['A'])}, Field E: {_bool_text(present['E'])})"
            )
            return ValidationResult.reject(reason, 0.95)

        confidence = BASE_CONFIDENCE
        if has_q_code:
            confidence += Q_CODE_BONUS
        if NOTAM_ID_PATTERN.search(text):
            confidence += NOTAM_ID_BONUS
        for letter in 'ABC':
            if present[letter]:
                confidence += DATE_FIELD_BONUS
        if present['E']:
            confidence += BODY_FIELD_BONUS
        if sum(present.values()) >= FIELD_COUNT_THRESHOLD:
            confidence += FIELD_COUNT_BONUS

        return ValidationResult.accept(confidence)

    def validate_blocks(self, blocks: Iterable[str]) -> BlockValidationReport:
        """
        Validate a batch of blocks.

        Args:
            blocks: Candidate blocks

        Returns:
            BlockValidationReport with accepted and rejected partitions
        """
        report = BlockValidationReport()
        for block in blocks:
            result = self.validate(block)
            report.stats.record(result)
            if result.is_valid:
                report.valid_blocks.append(block)
            else:
                logger.debug(f"Rejected block ({result.reason}): {block[:40]!r}")
                report.invalid_blocks.append(RejectedBlock(block=block, reason=result.reason))
        return report


def validate_notam_block(block: str) -> ValidationResult:
    """Validate a single block with the default thresholds."""
    return BlockValidator().validate(block)


def validate_blocks(blocks: Iterable[str]) -> BlockValidationReport:
    """Validate a batch of blocks with the default thresholds."""
    return BlockValidator().validate_blocks(blocks)
