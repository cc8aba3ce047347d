"""Tests for splitting NOTAM text into blocks."""

import pytest

from notam_briefing.parsers.block_splitter import (
    BlockSplitter,
    is_notam_start,
    is_page_footer,
    split_notam_blocks,
)


class TestPageFooters:
    """Tests for page footer recognition."""

    @pytest.mark.parametrize("line", ["NOTAMs 7 of 9", "NOTAM 1 of 2", "-- 22 of 24 --", "--16 of 24--", "7", " 123 "])
    def test_footers(self, line):
        assert is_page_footer(line)

    @pytest.mark.parametrize("line", ["1234", "RWY 01", "A1234/25 NOTAMN", "E) 2 OF 3 RWY CLSD"])
    def test_not_footers(self, line):
        assert not is_page_footer(line)


class TestNotamStart:
    """Tests for identifier line recognition."""

    @pytest.mark.parametrize("line", ["A1234/25 NOTAMN", "C4621/25 NOTAMR A4620/25", "  B0001/24 NOTAMC", "!SYD01/001 NOTAM"])
    def test_identifier_lines(self, line):
        assert is_notam_start(line)

    @pytest.mark.parametrize("line", [
        "E) REPLACES A0999/24 NOTAMN",
        "A1234/25",
        "A1234/25 NOTAMNX",
        "REF A1234/25 NOTAMN",
    ])
    def test_not_identifier_lines(self, line):
        assert not is_notam_start(line)


class TestBlockSplitter:
    """Tests for BlockSplitter."""

    def test_three_notams_without_blank_lines(self, three_notams_with_footers):
        """Test each NOTAM gets its own block and footers are stripped."""
        blocks = BlockSplitter().split(three_notams_with_footers)

        assert len(blocks) == 3
        assert blocks[0].startswith("A1234/25 NOTAMN")
        assert blocks[1].startswith("A1235/25 NOTAMN")
        assert blocks[2].startswith("C0456/25 NOTAMN")
        assert "E) RWY 01/19 CLSD DUE TO MAINT" in blocks[0]
        assert "E) TWY B CLSD" in blocks[1]
        assert "E) HIRL RWY 16/34 NOT AVBL" in blocks[2]
        for block in blocks:
            assert "of 9" not in block
            assert "of 24" not in block
            assert "\n12" not in block

    def test_identifier_inside_field_e_does_not_split(self, runway_notam):
        text = runway_notam + "\nTHIS NOTAM REPLACES A0999/24 NOTAMN"

        blocks = BlockSplitter().split(text)

        assert blocks == [text]

    def test_type_heading_before_first_notam(self, runway_notam):
        text = "RUNWAY\n" + runway_notam

        blocks = BlockSplitter().split(text)

        assert blocks == ["[TYPE: RUNWAY]\n" + runway_notam]

    def test_type_heading_between_notams(self, runway_notam, taxiway_notam):
        """Test a heading after a blank line is attached to the next NOTAM."""
        text = runway_notam + "\n\nOBSTACLE\n" + taxiway_notam

        blocks = BlockSplitter().split(text)

        assert blocks == [runway_notam, "[TYPE: OBSTACLE]\n" + taxiway_notam]

    def test_type_heading_after_footer(self, runway_notam, taxiway_notam):
        text = runway_notam + "\nNOTAMs 1 of 2\nAERODROME\n" + taxiway_notam

        blocks = BlockSplitter().split(text)

        assert blocks[1] == "[TYPE: AERODROME]\n" + taxiway_notam

    def test_uppercase_body_line_stays_in_block(self, taxiway_notam):
        """Test a letters-only continuation of item E is not taken as a heading."""
        first = "A0001/25 NOTAMN\nA) YSSY B) 2501150000 C) 2501160000\nE) AERODROME\nCLOSED DUE WORKS"

        blocks = BlockSplitter().split(first + "\n" + taxiway_notam)

        assert blocks == [first, taxiway_notam]

    def test_heading_not_followed_by_notam_is_text(self, runway_notam):
        text = runway_notam + "\n\nEND OF BRIEFING"

        blocks = BlockSplitter().split(text)

        assert blocks == [runway_notam + "\n\nEND OF BRIEFING"]

    def test_text_before_first_identifier_is_its_own_block(self, runway_notam):
        text = "(FPL-VJT534-IS\n-DEP/YMML DEST/YSSY)\n" + runway_notam

        blocks = BlockSplitter().split(text)

        assert blocks == ["(FPL-VJT534-IS\n-DEP/YMML DEST/YSSY)", runway_notam]

    def test_resplitting_a_block_is_stable(self, runway_notam):
        """Test a block carrying a type marker splits back to itself."""
        block = "[TYPE: RUNWAY]\n" + runway_notam

        assert BlockSplitter().split(block) == [block]

    def test_paragraph_fallback_without_identifiers(self):
        text = (
            "A) YBBN B) 2501150000 C) 2501160000\nE) RWY 01/19 CLSD\n"
            "\n"
            "7\n"
            "A) YSSY B) 2501150000 C) 2501160000\nE) TWY A CLSD\n"
        )

        blocks = split_notam_blocks(text)

        assert blocks == [
            "A) YBBN B) 2501150000 C) 2501160000\nE) RWY 01/19 CLSD",
            "A) YSSY B) 2501150000 C) 2501160000\nE) TWY A CLSD",
        ]

    @pytest.mark.parametrize("text", ["", "  \n  ", None])
    def test_empty_input(self, text):
        assert BlockSplitter().split(text) == []
