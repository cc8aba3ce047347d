"""Shared fixtures for the NOTAM briefing tests."""

from datetime import datetime, timezone

import pytest

NOW = datetime(2025, 1, 15, 10, 0, tzinfo=timezone.utc)


RUNWAY_NOTAM = """A1234/25 NOTAMN
Q) YBBB/QMRLC/IV/NBO/A/000/999/2723S15307E005
A) YBBN B) 2501150800 C) 2501152000
E) RWY 01/19 CLSD DUE TO MAINT"""

TAXIWAY_NOTAM = """A1235/25 NOTAMN
Q) YBBB/QMXLC/IV/M/A/000/999/2723S15307E005
A) YBBN B) 2501160000 C) 2501180000
E) TWY B CLSD BTN TWY B4 AND TWY B6"""

LIGHTING_NOTAM = """C0456/25 NOTAMN
Q) YMMM/QLRAS/IV/NBO/A/000/999/3740S14451E005
A) YMML B) 2501100000 C) PERM
E) HIRL RWY 16/34 NOT AVBL"""


@pytest.fixture
def now() -> datetime:
    """Fixed reference time, 2025-01-15 10:00 UTC."""
    return NOW


@pytest.fixture
def runway_notam() -> str:
    return RUNWAY_NOTAM


@pytest.fixture
def taxiway_notam() -> str:
    return TAXIWAY_NOTAM


@pytest.fixture
def lighting_notam() -> str:
    """Permanent lighting NOTAM for YMML."""
    return LIGHTING_NOTAM


@pytest.fixture
def three_notams_with_footers() -> str:
    """Three NOTAMs without blank lines between them, interleaved with page footers."""
    return "\n".join([
        RUNWAY_NOTAM,
        "NOTAMs 1 of 9",
        TAXIWAY_NOTAM,
        "-- 16 of 24 --",
        "12",
        LIGHTING_NOTAM,
    ])


@pytest.fixture
def briefing_document() -> str:
    """A briefing with a flight plan, a NOTAM section and a weather section."""
    return "\n".join([
        "FLIGHT PLAN",
        "(FPL-VJT534-IS",
        "-C56X/M-SDFGRWY/LB1",
        "-YMML0800",
        "-DEP/YMML DEST/YSSY)",
        "",
        "NOTAMs",
        "------",
        RUNWAY_NOTAM,
        "",
        TAXIWAY_NOTAM,
        "NOTAMs 1 of 2",
        "",
        "WEATHER",
        "METAR YBBN 150800Z 12010KT 9999 FEW030 28/19 Q1015",
    ])
