"""Tests for FIR NOTAM grouping."""

import pytest

from notam_briefing.categorization.fir import group_fir_notam, is_fir_notam
from notam_briefing.models.notam import NotamGroup


class TestIsFirNotam:
    """Tests for FIR series detection."""

    @pytest.mark.parametrize("notam_id", ["E1234/25", "L0001/25", "F0002/25", "H0003/25", "G0004/25", "W0005/25", "e0001/25"])
    def test_fir_series(self, notam_id):
        assert is_fir_notam(notam_id)

    @pytest.mark.parametrize("notam_id", ["A1234/25", "C4621/25", "YBBN", "", None])
    def test_airport_series(self, notam_id):
        assert not is_fir_notam(notam_id)


class TestGroupFirNotam:
    """Tests for group_fir_notam."""

    @pytest.mark.parametrize("notam_id,field_e,expected", [
        ("E1234/25", "RESTRICTED AREA R123 ACT", NotamGroup.FIR_AIRSPACE_RESTRICTIONS),
        ("L0001/25", "RADAR COVERAGE REDUCED", NotamGroup.FIR_ATC_NAVIGATION),
        ("F0001/25", "WIND TURBINE ERECTED", NotamGroup.FIR_OBSTACLES_CHARTS),
        ("H0001/25", "NEW TERMINAL BUILDING OPEN", NotamGroup.FIR_INFRASTRUCTURE),
        ("G0001/25", "RESTRICTED AREA R123 ACT", NotamGroup.FIR_ADMINISTRATIVE),
        ("W0001/25", "GENERAL NOTICE", NotamGroup.FIR_ADMINISTRATIVE),
    ])
    def test_series_rules(self, notam_id, field_e, expected):
        assert group_fir_notam(notam_id, field_e, "") is expected

    def test_content_fallback_prefers_drones(self):
        """Test an E series NOTAM without airspace keywords falls back to content."""
        assert group_fir_notam("E0001/25", "UA OPS MULTI-ROTOR BLW 400FT", "") is NotamGroup.FIR_DRONE_OPERATIONS

    def test_content_fallback_other_series_keywords(self):
        """Test an H series NOTAM about ATC falls back to the ATC group."""
        assert group_fir_notam("H0001/25", "ATC SERVICE HOURS AMENDED", "") is NotamGroup.FIR_ATC_NAVIGATION

    def test_nothing_matched(self):
        assert group_fir_notam("E0001/25", "GENERAL NOTICE", "") is NotamGroup.OTHER

    def test_raw_text_used_without_field_e(self):
        raw = "L0001/25 NOTAMN\nRADAR COVERAGE REDUCED"

        assert group_fir_notam("L0001/25", "", raw) is NotamGroup.FIR_ATC_NAVIGATION

    def test_lower_case_body(self):
        assert group_fir_notam("E1234/25", "danger area active", "") is NotamGroup.FIR_AIRSPACE_RESTRICTIONS
