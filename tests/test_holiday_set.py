"""Tests for holiday list parsing."""

import logging
from datetime import date

import pytest

from vacation_calculator.core.holiday_set import HolidaySet, load_holiday_file, parse_holidays


class TestParseHolidays:
    """Tests for parse_holidays."""

    def test_newline_and_comma_separated(self):
        holidays = parse_holidays("2024-01-01\n2024-01-07, 2024-03-08,2024-05-01")

        assert len(holidays) == 4
        assert date(2024, 3, 8) in holidays

    def test_whitespace_and_blank_lines(self):
        holidays = parse_holidays("  2024-01-01  \n\n\r\n ,, 2024-12-25\t\n")
        assert list(holidays) == [date(2024, 1, 1), date(2024, 12, 25)]

    @pytest.mark.parametrize(
        "token",
        [
            "2024-1-01",
            "24-01-01",
            "01.01.2024",
            "2024/01/01",
            "2024-01-01x",
            "holiday",
            "2024-02-30",
            "2024-13-01",
        ],
    )
    def test_malformed_entries_are_dropped(self, token):
        holidays = parse_holidays(f"{token}\n2024-06-28")
        assert list(holidays) == [date(2024, 6, 28)]

    def test_non_ascii_digits_are_rejected(self):
        assert len(parse_holidays("٢٠٢٤-٠١-٠١")) == 0

    def test_empty_text(self):
        assert len(parse_holidays("")) == 0
        assert len(parse_holidays(None)) == 0

    def test_duplicates_collapse(self):
        assert len(parse_holidays("2024-01-01,2024-01-01")) == 1


class TestHolidaySet:
    """Tests for the HolidaySet value type."""

    def test_iterates_in_date_order(self):
        holidays = HolidaySet([date(2024, 5, 1), date(2024, 1, 1), date(2024, 3, 8)])
        assert list(holidays) == [date(2024, 1, 1), date(2024, 3, 8), date(2024, 5, 1)]

    def test_in_range_is_inclusive(self):
        holidays = parse_holidays("2024-01-01,2024-01-07,2024-01-08")
        assert holidays.in_range(date(2024, 1, 1), date(2024, 1, 7)) == [
            date(2024, 1, 1),
            date(2024, 1, 7),
        ]

    def test_union_and_equality(self):
        merged = parse_holidays("2024-01-01").union(parse_holidays("2024-01-07"))
        assert merged == parse_holidays("2024-01-07,2024-01-01")
        assert hash(merged) == hash(HolidaySet([date(2024, 1, 1), date(2024, 1, 7)]))

    def test_from_file(self, tmp_path):
        holiday_file = tmp_path / "holidays.txt"
        holiday_file.write_text("# state holidays\n2024-08-24\n2024-10-14\n", encoding="utf-8")

        holidays = HolidaySet.from_file(holiday_file)

        assert list(holidays) == [date(2024, 8, 24), date(2024, 10, 14)]

    def test_from_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            HolidaySet.from_file(tmp_path / "missing.txt")


class TestLoadHolidayFile:
    """Tests for load_holiday_file, used by the long-running servers."""

    def test_no_file_configured(self):
        assert load_holiday_file(None) == HolidaySet()
        assert load_holiday_file("") == HolidaySet()

    def test_reads_file(self, tmp_path):
        holiday_file = tmp_path / "holidays.txt"
        holiday_file.write_text("2024-01-03\n", encoding="utf-8")

        assert list(load_holiday_file(str(holiday_file))) == [date(2024, 1, 3)]

    def test_missing_file_is_empty(self, tmp_path, caplog):
        with caplog.at_level(logging.WARNING):
            holidays = load_holiday_file(str(tmp_path / "missing.txt"))

        assert holidays == HolidaySet()
        assert "Ignoring holiday file" in caplog.text

    def test_undecodable_file_is_empty(self, tmp_path):
        holiday_file = tmp_path / "holidays.txt"
        holiday_file.write_bytes(b"\xff\xfe2024-01-03\n\x80")

        assert load_holiday_file(str(holiday_file)) == HolidaySet()
