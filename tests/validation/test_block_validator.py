"""Tests for candidate block validation."""

import logging

import pytest

from notam_briefing.config import ParserSettings
from notam_briefing.validation.block_validator import (
    BlockValidator,
    validate_blocks,
    validate_notam_block,
)
from notam_briefing.validation.sniffers import BlockSniffer

FLIGHT_PLAN = """(FPL-VJT534-IS
-C56X/M-SDFGRWY/LB1
-YMML0800
-N0450F410 DCT
-YSSY0120
-DEP/YMML DEST/YSSY)"""


class AlwaysSniffer(BlockSniffer):
    name = "always"
    reason = "Always rejected"
    confidence = 0.5

    def matches(self, block: str) -> bool:
        return True


class TestTooShort:
    """Tests for the minimum length rule."""

    @pytest.mark.parametrize("block", ["", "   ", "A) YBBN E) SHORT", "\n  RWY CLSD  \n"])
    def test_too_short(self, block):
        result = validate_notam_block(block)

        assert not result.is_valid
        assert result.reason == "Text too short (< 20 chars)"
        assert result.confidence == 1.0

    def test_none_block(self):
        assert validate_notam_block(None).reason == "Text too short (< 20 chars)"


class TestSnifferRejections:
    """Tests for sniffer based rejections."""

    def test_flight_plan(self):
        result = validate_notam_block(FLIGHT_PLAN)

        assert not result.is_valid
        assert "Flight plan" in result.reason
        assert result.confidence == 0.9

    def test_flight_plan_with_field_tokens(self):
        """Test embedded Q-codes and field markers do not rescue a flight plan."""
        block = FLIGHT_PLAN + "\nQ) QMRLC A) YSSY E) TEXT"

        assert validate_notam_block(block).reason == "Flight plan format detected"

    def test_fuel_table(self):
        block = "FUEL SUMMARY\nTAXI 10 20 30\nTRIP 120 240 360\nRESERVE 45 90 135"

        assert validate_notam_block(block).reason == "Fuel/performance table detected"

    def test_waypoint_table(self):
        block = "WAYPOINT LOG\nYMML 3740S14451E 045\nBOOTH 3600S14700E 052\nYSSY 3356S15110E 061"

        result = validate_notam_block(block)

        assert result.reason == "Waypoint/navigation data detected"
        assert result.confidence == 0.85

    def test_procedure(self):
        block = "RNAV RWY 34 SID TRANSITION VIA INITIAL APPROACH FIX ABC"

        assert validate_notam_block(block).reason == "Instrument procedure detected"

    def test_added_sniffer_runs_last(self, runway_notam):
        validator = BlockValidator().add_sniffer(AlwaysSniffer())

        assert validator.validate(runway_notam).reason == "Always rejected"
        assert validator.validate(FLIGHT_PLAN).reason == "Flight plan format detected"


class TestStructure:
    """Tests for the structural evidence rule and confidence scoring."""

    def test_missing_structure(self):
        result = validate_notam_block("ORDINARY TEXT WITHOUT ANY MARKERS AT ALL")

        assert not result.is_valid
        assert result.reason == "Missing required structure (Q-code: false, Field A: false, Field E: false)"
        assert result.confidence == 0.95

    def test_field_a_without_field_e(self):
        result = validate_notam_block("A) YSSY B) 2501150000 C) 2501160000")

        assert result.reason == "Missing required structure (Q-code: false, Field A: true, Field E: false)"

    def test_complete_notam_confidence_capped(self, runway_notam):
        result = validate_notam_block(runway_notam)

        assert result.is_valid
        assert result.reason is None
        assert result.confidence == 1.0

    def test_notam_without_q_code(self):
        block = "A) YBBN\nB) 2501151200\nC) 2501151800\nE) RWY 01/19 CLSD DUE TO MAINT"

        result = validate_notam_block(block)

        assert result.is_valid
        assert result.confidence == pytest.approx(0.85)

    def test_q_code_alone_is_enough(self):
        result = validate_notam_block("Q) YBBB/QMRLC/IV/NBO RWY CLSD")

        assert result.is_valid
        assert result.confidence == pytest.approx(0.7)

    def test_min_length_from_settings(self):
        validator = BlockValidator(ParserSettings(min_block_length=5))

        assert validator.validate("A) YSSY E) X").is_valid


class TestCustomSniffers:
    """Tests for extending the sniffer list."""

    def test_add_sniffer_keeps_caller_list(self):
        sniffers = []
        validator = BlockValidator(sniffers=sniffers)

        validator.add_sniffer(AlwaysSniffer())

        assert sniffers == []
        assert len(validator.sniffers) == 1
        assert validator.validate("A) YBBN E) RWY 01/19 CLSD DUE TO MAINT").reason == "Always rejected"


class TestValidateBlocks:
    """Tests for batch validation."""

    def test_partitions_and_stats(self, runway_notam, taxiway_notam):
        blocks = [runway_notam, FLIGHT_PLAN, "short", taxiway_notam]

        report = validate_blocks(blocks)

        assert report.valid_blocks == [runway_notam, taxiway_notam]
        assert [r.reason for r in report.invalid_blocks] == [
            "Flight plan format detected",
            "Text too short (< 20 chars)",
        ]
        assert report.stats.to_dict() == {
            "total_blocks": 4,
            "accepted_blocks": 2,
            "rejected_blocks": 2,
            "rejection_reasons": {
                "Flight plan format detected": 1,
                "Text too short (< 20 chars)": 1,
            },
        }

    def test_batch_matches_single(self, runway_notam):
        report = BlockValidator().validate_blocks([runway_notam])

        assert report.valid_blocks == [runway_notam]
        assert validate_notam_block(runway_notam).is_valid

    def test_rejections_logged_at_debug(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="notam_briefing.validation.block_validator"):
            validate_blocks([FLIGHT_PLAN])

        assert "Flight plan format detected" in caplog.text
