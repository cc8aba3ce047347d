"""Tests for non-NOTAM content sniffers."""

import pytest

from notam_briefing.config import ParserSettings
from notam_briefing.validation.sniffers import (
    BlockSniffer,
    FlightPlanSniffer,
    FuelTableSniffer,
    ProcedureSniffer,
    WaypointSniffer,
    default_sniffers,
)

FUEL_TABLE = """FUEL SUMMARY
TAXI 10 20 30
TRIP 120 240 360
RESERVE 45 90 135"""

NAV_LOG = """WAYPOINT LOG
YMML 3740S14451E 045
BOOTH 3600S14700E 052
YSSY 3356S15110E 061"""


class TestFlightPlanSniffer:
    """Tests for FlightPlanSniffer."""

    @pytest.mark.parametrize("text", [
        "(FPL-VJT534-IS -C56X/M",
        "-DEP/YMML DEST/YSSY",
        "EET/YBBB 0120",
        "RMK/TCAS EQUIPPED",
        "REG/VH-ABC",
    ])
    def test_flight_plan_indicators(self, text):
        assert FlightPlanSniffer().matches(text)

    def test_notam_is_not_flight_plan(self, runway_notam):
        assert not FlightPlanSniffer().matches(runway_notam)


class TestFuelTableSniffer:
    """Tests for FuelTableSniffer."""

    def test_fuel_table(self):
        assert FuelTableSniffer().matches(FUEL_TABLE)

    def test_numeric_rows_without_fuel_keyword(self):
        assert not FuelTableSniffer().matches(FUEL_TABLE.replace("FUEL", "LOAD"))

    def test_fuel_notam_with_few_numbers(self):
        assert not FuelTableSniffer().matches("A) YSSY\nE) FUEL NOT AVBL DUE TO SUPPLY 2 DAYS")

    def test_threshold_from_settings(self):
        sniffer = FuelTableSniffer(ParserSettings(fuel_table_min_lines=4))

        assert not sniffer.matches(FUEL_TABLE)


class TestWaypointSniffer:
    """Tests for WaypointSniffer."""

    def test_navigation_log(self):
        assert WaypointSniffer().matches(NAV_LOG)

    def test_notam_is_not_navigation_log(self, runway_notam, lighting_notam):
        assert not WaypointSniffer().matches(runway_notam)
        assert not WaypointSniffer().matches(lighting_notam)

    def test_exactly_half_tabular_is_accepted(self):
        """Test the share of tabular lines must exceed the ratio."""
        text = "YMML 3740S14451E\nREMARKS FOLLOW"

        assert not WaypointSniffer().matches(text)

    def test_empty_block(self):
        assert not WaypointSniffer().matches("")


class TestProcedureSniffer:
    """Tests for ProcedureSniffer."""

    def test_two_indicators(self):
        text = "RNAV RWY 34 SID TRANSITION VIA INITIAL APPROACH FIX ABC"

        assert ProcedureSniffer().matches(text)

    def test_single_approach_mention(self):
        """Test one indicator is normal in genuine NOTAMs."""
        text = "E) MISSED APPROACH PROCEDURE RWY 16 AMENDED"

        assert not ProcedureSniffer().matches(text)


class TestDefaultSniffers:
    """Tests for the default sniffer list."""

    def test_evaluation_order(self):
        names = [s.name for s in default_sniffers()]

        assert names == ["flight_plan", "fuel_table", "waypoint", "procedure"]

    def test_custom_sniffer(self):
        class MetarSniffer(BlockSniffer):
            name = "metar"
            reason = "METAR detected"
            confidence = 0.9

            def matches(self, block: str) -> bool:
                return block.startswith("METAR")

        sniffer = MetarSniffer()

        assert sniffer.matches("METAR YSSY 150800Z")
        assert repr(sniffer) == "MetarSniffer(metar)"

    def test_base_class_is_abstract(self):
        with pytest.raises(TypeError):
            BlockSniffer()
