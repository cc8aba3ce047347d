"""Tests for ICAO item extraction."""

import pytest

from notam_briefing.parsers.field_extractor import (
    extract_icao_fields,
    extract_notam_id,
    extract_q_code,
)


class TestExtractIcaoFields:
    """Tests for extract_icao_fields."""

    def test_one_field_per_line(self):
        text = "A) YBBN\nB) 2501151200\nC) 2501151800\nE) RWY 01/19 CLSD DUE TO MAINT"

        fields = extract_icao_fields(text)

        assert fields.field_a == "YBBN"
        assert fields.field_b == "2501151200"
        assert fields.field_c == "2501151800"
        assert fields.field_d == ""
        assert fields.field_e == "RWY 01/19 CLSD DUE TO MAINT"

    def test_inline_fields(self, runway_notam):
        """Test A, B and C on a single line."""
        fields = extract_icao_fields(runway_notam)

        assert fields.field_a == "YBBN"
        assert fields.field_b == "2501150800"
        assert fields.field_c == "2501152000"
        assert fields.field_e == "RWY 01/19 CLSD DUE TO MAINT"

    def test_multiline_field_e_and_limits(self):
        """Test item E spans lines until F) and F/G are extracted."""
        text = (
            "A) YSSY B) 2501150000 C) 2501152359\n"
            "D) 0800-1700 DAILY\n"
            "E) PARACHUTE OPERATIONS\n"
            "WITHIN 2NM RADIUS OF AD\n"
            "F) SFC\n"
            "G) 10000FT AMSL"
        )

        fields = extract_icao_fields(text)

        assert fields.field_d == "0800-1700 DAILY"
        assert fields.field_e == "PARACHUTE OPERATIONS\nWITHIN 2NM RADIUS OF AD"
        assert fields.field_f == "SFC"
        assert fields.field_g == "10000FT AMSL"

    def test_parenthesised_letter_does_not_open_field(self):
        """Test "(F)" inside item E is part of the body."""
        fields = extract_icao_fields("A) YSSY\nE) TWY (F) CLSD")

        assert fields.field_e == "TWY (F) CLSD"
        assert fields.field_f == ""

    def test_earlier_letter_inside_item_e(self):
        """Test "D)" after the E) marker stays in the body."""
        fields = extract_icao_fields("A) YSSY B) 2501150000 C) 2501200000\nE) TWY D) CLSD")

        assert fields.field_d == ""
        assert fields.field_e == "TWY D) CLSD"
        assert fields.field_c == "2501200000"

    def test_item_a_inside_body_without_location(self):
        """Test "A)" in item E is not read as a location."""
        fields = extract_icao_fields("Q) YBBB/QMXLC/IV/M/A/000/999\nE) TWY A) CLSD")

        assert fields.field_a == ""
        assert fields.field_e == "TWY A) CLSD"

    def test_missing_fields_are_empty(self):
        fields = extract_icao_fields("NO ICAO ITEMS HERE")

        assert fields.to_dict() == {
            "field_a": "", "field_b": "", "field_c": "", "field_d": "",
            "field_e": "", "field_f": "", "field_g": "",
        }

    def test_empty_input(self):
        assert extract_icao_fields("").field_a == ""
        assert extract_icao_fields(None).field_e == ""


class TestExtractQCode:
    """Tests for extract_q_code."""

    def test_extract_from_q_line(self, runway_notam):
        assert extract_q_code(runway_notam) == "QMRLC"

    def test_case_insensitive(self):
        assert extract_q_code("q) ybbb/qmrlc/iv/nbo/a/000/999") == "QMRLC"

    def test_first_match_wins(self):
        assert extract_q_code("QFAXX THEN QMRLC") == "QFAXX"

    @pytest.mark.parametrize("text", ["", "RWY 01/19 CLSD", "QMRL", "QMRLCX"])
    def test_no_q_code(self, text):
        assert extract_q_code(text) is None


class TestExtractNotamId:
    """Tests for extract_notam_id."""

    def test_id_at_start(self, runway_notam):
        assert extract_notam_id(runway_notam) == "A1234/25"

    def test_id_after_type_marker(self):
        """Test an identifier on the line after a [TYPE: ...] marker."""
        text = "[TYPE: RUNWAY]\nC4621/25 NOTAMN\nA) YSSY\nE) RWY 16R/34L CLSD"

        assert extract_notam_id(text) == "C4621/25"

    def test_falls_back_to_field_a(self):
        text = "A) YBBN YBCG\nE) RWY 01/19 CLSD"

        assert extract_notam_id(text) == "YBBN"

    def test_unknown(self):
        assert extract_notam_id("E) SOMETHING WITHOUT LOCATION") == "UNKNOWN"
        assert extract_notam_id("") == "UNKNOWN"
