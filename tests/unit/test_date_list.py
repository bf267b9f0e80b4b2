"""
Unit tests for date_list (price generation dates).
"""

from datetime import date

import pytest

from ledgerfolio.core.timezone import date_list, parse_date


def iso(days: list[date]) -> list[str]:
    return [d.isoformat() for d in days]


class TestDateList:
    """Tests for the all / month-start / month-end frequencies."""

    def test_all_returns_every_day_inclusive(self):
        result = date_list(date(2023, 1, 1), date(2023, 1, 5), "all")

        assert iso(result) == [
            "2023-01-01",
            "2023-01-02",
            "2023-01-03",
            "2023-01-04",
            "2023-01-05",
        ]

    def test_month_start(self):
        result = date_list(date(2023, 1, 15), date(2023, 4, 15), "month-start")

        assert iso(result) == ["2023-02-01", "2023-03-01", "2023-04-01"]

    def test_month_end(self):
        result = date_list(date(2023, 1, 15), date(2023, 4, 15), "month-end")

        assert iso(result) == ["2023-01-31", "2023-02-28", "2023-03-31"]

    def test_month_end_in_leap_year(self):
        result = date_list(date(2024, 2, 1), date(2024, 3, 1), "month-end")

        assert iso(result) == ["2024-02-29"]

    def test_single_day(self):
        assert iso(date_list(date(2023, 3, 1), date(2023, 3, 1))) == ["2023-03-01"]

    @pytest.mark.parametrize("frequency", ["all", "month-start", "month-end"])
    def test_from_after_to_is_empty(self, frequency):
        assert date_list(date(2023, 5, 1), date(2023, 4, 1), frequency) == []

    def test_unknown_frequency(self):
        with pytest.raises(ValueError):
            date_list(date(2023, 1, 1), date(2023, 1, 2), "weekly")


class TestParseDate:
    def test_parses_iso_strings(self):
        assert parse_date("2024-02-29") == date(2024, 2, 29)

    def test_keeps_calendar_day_of_datetimes(self):
        assert parse_date("2024-01-15T23:30:00-05:00") == date(2024, 1, 15)
