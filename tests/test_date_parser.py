"""Tests for date parsing, including spreadsheet cells."""

import pytest
from datetime import date, datetime, timedelta
from contabook.utils.date_parser import parse_date, parse_sheet_date, excel_serial_to_date

FALLBACK = date(2023, 1, 1)


def test_parse_absolute_date():
    """Test parsing absolute dates."""
    assert parse_date("2024-01-15") == date(2024, 1, 15)


def test_parse_relative_dates():
    """Test parsing 'today', 'yesterday' and 'this month'."""
    today = date.today()
    assert parse_date("today") == today
    assert parse_date("yesterday") == today - timedelta(days=1)
    assert parse_date("this month") == today.replace(day=1)


def test_parse_invalid_date():
    """Test that garbage raises ValueError."""
    with pytest.raises(ValueError):
        parse_date("not a date at all")


def test_excel_serial_conversion():
    """Serial 44927 is 2023-01-01 under the 1899-12-30 epoch."""
    assert excel_serial_to_date(44927) == date(2023, 1, 1)
    assert excel_serial_to_date(1) == date(1899, 12, 31)


def test_excel_serial_drops_time_of_day():
    """The fractional part of a serial is a time and is ignored."""
    assert excel_serial_to_date(44927.75) == date(2023, 1, 1)


class TestParseSheetDate:
    """Tests for lenient spreadsheet date parsing."""

    def test_serial_number(self):
        assert parse_sheet_date(44927, FALLBACK) == date(2023, 1, 1)
        assert parse_sheet_date(45000.0, FALLBACK) == date(2023, 3, 15)

    def test_numeric_string_is_serial(self):
        assert parse_sheet_date("44928", FALLBACK) == date(2023, 1, 2)

    def test_datetime_and_date_cells(self):
        assert parse_sheet_date(datetime(2023, 3, 4, 10, 30), FALLBACK) == date(2023, 3, 4)
        assert parse_sheet_date(date(2022, 12, 31), FALLBACK) == date(2022, 12, 31)

    def test_iso_string(self):
        assert parse_sheet_date("2023-03-05", FALLBACK) == date(2023, 3, 5)
        assert parse_sheet_date("2023-03-05T08:00:00", FALLBACK) == date(2023, 3, 5)

    def test_day_first_string(self):
        assert parse_sheet_date("05/03/2023", FALLBACK) == date(2023, 3, 5)
        assert parse_sheet_date("15-01-2024", FALLBACK) == date(2024, 1, 15)

    @pytest.mark.parametrize("value", [None, "", "   ", "not-a-date", True, 10**12, "nan"])
    def test_unreadable_values_fall_back(self, value):
        assert parse_sheet_date(value, FALLBACK) == FALLBACK

    @pytest.mark.parametrize("value", ["10:30", "Mar", "March 2023", "15/03"])
    def test_partial_dates_fall_back(self, value):
        """Missing date parts are never filled in from the current date."""
        assert parse_sheet_date(value, FALLBACK) == FALLBACK

    def test_full_textual_date(self):
        assert parse_sheet_date("5 March 2023", FALLBACK) == date(2023, 3, 5)
