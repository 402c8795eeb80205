"""
Unit tests for date string parsing.
"""

from datetime import datetime, timezone

import pytest
from gql_validators.validation.dates import (
    DEFAULT_DATE_FORMATS,
    DEFAULT_FORMAT,
    ISO_8601,
    RFC_2822,
    SHORT_DATE_FORMAT,
    parse_date,
    parse_with_format,
)


class TestParseDate:
    """Test the default formats."""

    def test_default_formats(self):
        """Test four formats are tried by default."""
        assert DEFAULT_DATE_FORMATS == (ISO_8601, RFC_2822, DEFAULT_FORMAT, SHORT_DATE_FORMAT)

    def test_iso_date(self):
        """Test a plain ISO date."""
        assert parse_date("2020-08-01") == datetime(2020, 8, 1)

    def test_iso_with_z_suffix(self):
        """Test 'Z' is read as UTC."""
        parsed = parse_date("2020-08-01T10:30:00Z")

        assert parsed == datetime(2020, 8, 1, 10, 30, tzinfo=timezone.utc)

    def test_rfc_2822(self):
        """Test an RFC 2822 date."""
        parsed = parse_date("Sat, 01 Aug 2020 10:30:00 +0000")

        assert parsed == datetime(2020, 8, 1, 10, 30, tzinfo=timezone.utc)

    def test_offset_without_colon(self):
        """Test the 'YYYY-MM-DDTHH:MM:SS+HHMM' form."""
        parsed = parse_date("2020-08-01T10:30:00+0000")

        assert parsed is not None
        assert parsed.utcoffset().total_seconds() == 0

    @pytest.mark.parametrize("value", ["20200801", "2020-W31-6", "2020-W31-6T10:30:00"])
    def test_extended_iso_forms(self, value):
        """Test basic and week ISO forms parse as ISO 8601."""
        parsed = parse_with_format(value, ISO_8601)

        assert parsed.date() == datetime(2020, 8, 1).date()

    def test_short_date(self):
        """Test the MM/DD/YYYY form."""
        assert parse_date("08/01/2020") == datetime(2020, 8, 1)

    @pytest.mark.parametrize("value", ["some date", "", "2020-13-45", "32/01/2020"])
    def test_unparseable(self, value):
        """Test strings no format accepts."""
        assert parse_date(value) is None

    def test_custom_formats(self):
        """Test only the given formats are tried."""
        assert parse_date("01.08.2020", ["%d.%m.%Y"]) == datetime(2020, 8, 1)
        assert parse_date("01.08.2020") is None
        assert parse_date("2020-08-01", ["%d.%m.%Y"]) is None


class TestParseWithFormat:
    """Test single-format parsing."""

    def test_raises_on_mismatch(self):
        """Test a mismatch raises instead of returning None."""
        with pytest.raises(ValueError):
            parse_with_format("not a date", ISO_8601)

    def test_strptime_pattern(self):
        """Test any other format is a strptime pattern."""
        assert parse_with_format("2020/08/01", "%Y/%m/%d") == datetime(2020, 8, 1)
