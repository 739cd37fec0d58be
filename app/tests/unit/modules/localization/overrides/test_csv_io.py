"""Unit tests for the override CSV exchange format."""

import pytest

from modules.localization.overrides import CSV_HEADER, OverrideRow, read_csv, write_csv


@pytest.mark.unit
class TestWriteCsv:
    """Tests for write_csv()."""

    def test_header_only(self):
        assert write_csv([]) == ",".join(CSV_HEADER) + "\r\n"

    def test_quotes_commas_and_quotes(self):
        text = write_csv(
            [OverrideRow("StandardPage", "mainbody", "Caption", "en", 'Say "hi", then go')]
        )

        assert text.splitlines()[1] == (
            'StandardPage,mainbody,Caption,en,"Say ""hi"", then go"'
        )


@pytest.mark.unit
class TestReadCsv:
    """Tests for read_csv()."""

    def test_reads_written_rows(self):
        rows = [
            OverrideRow("StandardPage", "mainbody", "Caption", "en", 'a, "b"'),
            OverrideRow("", "heading", "HelpText", "sv", "line one\nline two"),
        ]

        assert read_csv(write_csv(rows)) == rows

    def test_skips_header_and_short_rows(self):
        text = (
            "ContentType,Property,OverrideType,Language,Value\n"
            "only,three,fields\n"
            ",mainbody,Caption,en,Body\n"
        )

        assert read_csv(text) == [OverrideRow("", "mainbody", "Caption", "en", "Body")]

    def test_empty_text(self):
        assert read_csv("") == []
