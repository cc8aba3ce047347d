"""Tests for ICAO date/time decoding."""

from datetime import datetime, timedelta, timezone

import pytest

from notam_briefing.config import ParserSettings
from notam_briefing.parsers.datetime_codec import (
    ensure_utc,
    parse_icao_datetime,
)


class TestParseIcaoDateTime:
    """Tests for parse_icao_datetime."""

    def test_parse_ten_digit_value(self, now):
        """Test decoding YYMMDDHHMM as UTC."""
        result = parse_icao_datetime("2501151200", now=now)

        assert result.is_valid
        assert result.date == datetime(2025, 1, 15, 12, 0, tzinfo=timezone.utc)
        assert result.is_permanent is False

    def test_surrounding_whitespace_ignored(self, now):
        result = parse_icao_datetime("  2501151200 ", now=now)

        assert result.date == datetime(2025, 1, 15, 12, 0, tzinfo=timezone.utc)

    @pytest.mark.parametrize("value", ["PERM", "perm", "PERMANENT", "Permanent"])
    def test_permanent_end_date(self, now, value):
        """Test PERM markers on item C give a far-future sentinel."""
        result = parse_icao_datetime(value, is_end_date=True, now=now)

        assert result.is_permanent is True
        assert result.date == datetime(2035, 1, 15, 10, 0, tzinfo=timezone.utc)

    def test_permanent_not_allowed_on_start_date(self, now):
        """Test PERM on item B is not a valid date."""
        result = parse_icao_datetime("PERM", is_end_date=False, now=now)

        assert result.date is None
        assert result.is_permanent is False

    def test_permanent_validity_from_settings(self, now):
        settings = ParserSettings(permanent_validity_years=5)

        result = parse_icao_datetime("PERM", is_end_date=True, now=now, settings=settings)

        assert result.date.year == 2030

    def test_far_past_year_shifts_back_a_century(self, now):
        """Test 99 read in 2025 is 1999, not 2099."""
        result = parse_icao_datetime("9912312359", now=now)

        assert result.date == datetime(1999, 12, 31, 23, 59, tzinfo=timezone.utc)

    def test_year_within_window_stays_in_century(self, now):
        """Test exactly 50 years ahead is not shifted."""
        result = parse_icao_datetime("7501010000", now=now)

        assert result.date.year == 2075

    def test_far_future_year_shifts_forward_a_century(self):
        """Test 05 read in 2095 is 2105."""
        late_century = datetime(2095, 6, 1, tzinfo=timezone.utc)

        result = parse_icao_datetime("0501010000", now=late_century)

        assert result.date.year == 2105

    @pytest.mark.parametrize("value", [
        "",
        "25011512",        # too short
        "250115120000",    # too long
        "2513011200",      # month 13
        "2502301200",      # 30 February
        "2501152460",      # minute 60
        "25O1151200",      # letter O
        "TOMORROW",
    ])
    def test_invalid_values(self, now, value):
        """Test malformed values decode to no date instead of raising."""
        result = parse_icao_datetime(value, is_end_date=True, now=now)

        assert result.date is None
        assert result.is_permanent is False
        assert not result.is_valid

    def test_none_value(self, now):
        assert parse_icao_datetime(None, now=now).date is None

    def test_naive_now_treated_as_utc(self):
        result = parse_icao_datetime("PERM", is_end_date=True, now=datetime(2025, 1, 15, 10, 0))

        assert result.date.tzinfo is not None
        assert result.date == datetime(2035, 1, 15, 10, 0, tzinfo=timezone.utc)


class TestDateTimeHelpers:
    """Tests for UTC helpers."""

    def test_ensure_utc_converts_offsets(self):
        paris = timezone(timedelta(hours=1))

        result = ensure_utc(datetime(2025, 1, 15, 13, 0, tzinfo=paris))

        assert result == datetime(2025, 1, 15, 12, 0, tzinfo=timezone.utc)
        assert result.tzinfo == timezone.utc
