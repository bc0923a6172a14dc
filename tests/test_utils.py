"""Tests for cell access, date and numeric normalisation."""

import pandas as pd
import pytest

from tor_dashboard.loaders.utils import get_cell, parse_sheet_date, parse_sheet_number


class TestParseSheetNumber:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("1.500,00", 1500.0),
            ("1.500", 1500.0),
            ("1.5", 1.5),
            ("528.00", 528.0),
            ("528", 528.0),
            ("150.000", 150000.0),
            ("10.000,50", 10000.5),
            ("0,5", 0.5),
            ("-3", -3.0),
        ],
    )
    def test_formats(self, raw, expected):
        assert parse_sheet_number(raw) == expected

    def test_empty_and_missing(self):
        assert parse_sheet_number("") == 0
        assert parse_sheet_number(None) == 0

    @pytest.mark.parametrize("raw", ["R$ 1.500,00", "r$1.500,00", "R$  1500,00"])
    def test_currency_marker(self, raw):
        assert parse_sheet_number(raw) == 1500.0

    def test_distance_unit(self):
        assert parse_sheet_number("15.200 KM") == 15200.0
        assert parse_sheet_number("320km") == 320.0

    @pytest.mark.parametrize("raw", ["Sgt. Moraes", "ver obs", "12 g", "N/A", "1,5 kg"])
    def test_text_cells_are_zero(self, raw):
        assert parse_sheet_number(raw) == 0

    def test_three_decimal_fraction_reads_as_thousands(self):
        assert parse_sheet_number("1.234") == 1234.0

    def test_only_separators_is_zero(self):
        assert parse_sheet_number("-") == 0
        assert parse_sheet_number("...") == 0
        assert parse_sheet_number(",") == 0

    def test_leading_numeric_prefix_wins(self):
        assert parse_sheet_number("1.2.3") == 1.2
        assert parse_sheet_number("1,2,3") == 1.2
        assert parse_sheet_number("10-20") == 10.0

    def test_stray_symbols_are_dropped(self):
        assert parse_sheet_number("(25)") == 25.0
        assert parse_sheet_number("~40") == 40.0

    def test_overflowing_digit_run_is_zero(self):
        assert parse_sheet_number("9" * 400) == 0
        assert parse_sheet_number("-" + "9" * 400) == 0


class TestParseSheetDate:
    def test_date_with_time_is_noon(self):
        result = parse_sheet_date("05/03/2024 23:59:59")
        assert result == pd.Timestamp(2024, 3, 5, 12, 0, 0)

    def test_date_only(self):
        result = parse_sheet_date("05/03/2024")
        assert (result.day, result.month, result.year) == (5, 3, 2024)

    def test_same_day_different_times_are_equal(self):
        assert parse_sheet_date("05/03/2024 00:00:01") == parse_sheet_date("05/03/2024 23:00:00")

    def test_surrounding_whitespace(self):
        assert parse_sheet_date("  01/12/2023 08:00:00") == pd.Timestamp(2023, 12, 1, 12)

    @pytest.mark.parametrize(
        "raw",
        ["", None, "2024-03-05", "05/03", "05/03/2024/1", "aa/03/2024", "05/mar/2024", "//"],
    )
    def test_invalid_returns_none(self, raw):
        assert parse_sheet_date(raw) is None

    def test_overflowing_day_rolls_over(self):
        assert parse_sheet_date("31/02/2024") == pd.Timestamp(2024, 3, 2, 12)

    def test_overflowing_month_rolls_over(self):
        assert parse_sheet_date("15/13/2023") == pd.Timestamp(2024, 1, 15, 12)

    def test_day_zero_is_last_day_of_previous_month(self):
        assert parse_sheet_date("00/03/2024") == pd.Timestamp(2024, 2, 29, 12)

    def test_out_of_range_year_returns_none(self):
        assert parse_sheet_date("01/01/99999") is None

    def test_segments_read_leading_digits(self):
        assert parse_sheet_date("05/03/2024\t08:00:00") == pd.Timestamp(2024, 3, 5, 12)
        assert parse_sheet_date("5abc/03/2024") == pd.Timestamp(2024, 3, 5, 12)
        assert parse_sheet_date("1_0/03/2024") == pd.Timestamp(2024, 3, 1, 12)


class TestGetCell:
    def test_short_row_reads_empty(self):
        assert get_cell(["a", "b"], 5) == ""

    def test_negative_index_reads_empty(self):
        assert get_cell(["a"], -1) == ""

    def test_in_range(self):
        assert get_cell(["a", "b"], 1) == "b"
