"""Tests for the categorization pipeline."""

from notam_briefing.categorization.pipeline import (
    Categorizer,
    NotamKind,
    assign_group,
    categorize_fields,
    classify_kind,
)
from notam_briefing.models.notam import NotamGroup, ParsedNotam


class TestClassifyKind:
    """Tests for branch selection."""

    def test_fir_precedes_q_code(self):
        assert classify_kind("QMRLC", "E1234/25") is NotamKind.FIR

    def test_airport_with_q_code(self):
        assert classify_kind("QMRLC", "A1234/25") is NotamKind.AIRPORT_Q_CODE

    def test_airport_without_q_code(self):
        assert classify_kind(None, "A1234/25") is NotamKind.AIRPORT_KEYWORDS


class TestAssignGroup:
    """Tests for assign_group."""

    def test_q_code_beats_keywords(self):
        """Test QMRLC is runways even when the text says taxiway."""
        group = assign_group("QMRLC", "A1234/25", "TAXIWAY CLOSED", "A1234/25 NOTAMN\nE) TAXIWAY CLOSED")

        assert group is NotamGroup.RUNWAYS

    def test_fir_ignores_q_code(self):
        group = assign_group("QMRLC", "E1234/25", "RESTRICTED AREA R123 ACT", "")

        assert group is NotamGroup.FIR_AIRSPACE_RESTRICTIONS

    def test_type_heading_is_authoritative(self):
        raw = "[TYPE: RUNWAY]\nE1234/25 NOTAMN\nE) RESTRICTED AREA R123 ACT"

        result = categorize_fields("QFAXX", "E1234/25", "RESTRICTED AREA R123 ACT", raw)

        assert result.group is NotamGroup.RUNWAYS
        assert result.source == "type_heading"

    def test_unrecognised_heading_falls_through(self):
        raw = "[TYPE: MISCELLANEOUS]\nA1234/25 NOTAMN\nE) TWY B CLSD"

        result = categorize_fields("QMXLC", "A1234/25", "TWY B CLSD", raw)

        assert result.group is NotamGroup.TAXIWAYS
        assert result.source == "airport_q_code"

    def test_keyword_branch(self):
        result = categorize_fields(None, "A1234/25", "TWY B CLSD", "")

        assert result.group is NotamGroup.TAXIWAYS
        assert result.source == "airport_keywords"

    def test_keywords_use_raw_text_without_field_e(self):
        assert assign_group(None, "A1234/25", "", "A1234/25 NOTAMN RWY 16 CLOSED") is NotamGroup.RUNWAYS


class TestCategorizer:
    """Tests for Categorizer."""

    def test_categorize_all_returns_copies(self):
        notam = ParsedNotam(
            raw_text="A1234/25 NOTAMN\nE) RWY 16 CLSD",
            notam_id="A1234/25",
            q_code="QMRLC",
            field_e="RWY 16 CLSD",
        )

        result = Categorizer().categorize_all([notam])

        assert result[0].group is NotamGroup.RUNWAYS
        assert notam.group is NotamGroup.OTHER
        assert result[0].raw_text == notam.raw_text

    def test_categorize_reports_source(self):
        notam = ParsedNotam(raw_text="L0001/25 NOTAMN", notam_id="L0001/25", field_e="RADAR COVERAGE REDUCED")

        result = Categorizer().categorize(notam)

        assert result.group is NotamGroup.FIR_ATC_NAVIGATION
        assert result.source == "fir"
