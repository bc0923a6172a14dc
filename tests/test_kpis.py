"""Tests for sums, trends, value formatting and the monthly timeline."""

import pytest

from tor_dashboard.kpis import (
    build_timeline,
    calc_trend,
    format_metric_value,
    metric_with_trend,
    month_label,
    sum_column,
    timeline_frame,
)


class TestCalcTrend:
    def test_from_zero_to_something_is_flat_hundred(self):
        assert calc_trend(5, 0) == 100

    def test_zero_to_zero(self):
        assert calc_trend(0, 0) == 0

    def test_decrease(self):
        assert calc_trend(150, 200) == -25

    def test_increase(self):
        assert calc_trend(300, 200) == 50

    def test_halves_round_up(self):
        assert calc_trend(7, 8) == -12   # -12.5
        assert calc_trend(9, 8) == 13    # 12.5

    def test_negative_current_from_zero(self):
        assert calc_trend(-5, 0) == 0


class TestFormatMetricValue:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (0.0, "0"),
            (5.0, "5"),
            (999.0, "999"),
            (1.5, "1.5"),
            (12.25, "12.25"),
            (1000.0, "1.000"),
            (1500.5, "1.500,5"),
            (1234567.0, "1.234.567"),
            (2000.125, "2.000,125"),
        ],
    )
    def test_rendering(self, value, expected):
        assert format_metric_value(value) == expected


class TestSums:
    ROWS = [["05/03/2024", "1.500,00", "x"], ["06/03/2024", "250"], ["07/03/2024", "texto"]]

    def test_sum_column_normalises_and_skips_short_rows(self):
        assert sum_column(self.ROWS, 1) == 1750.0
        assert sum_column(self.ROWS, 2) == 0.0

    def test_sum_of_nothing(self):
        assert sum_column([], 1) == 0.0

    def test_metric_with_trend(self):
        current = [["", "150"]]
        prior = [["", "100"], ["", "100"]]
        assert metric_with_trend(current, prior, 1) == {"value": "150", "trend": -25}

    def test_metric_with_trend_no_prior(self):
        assert metric_with_trend([["", "5"]], [], 1) == {"value": "5", "trend": 100}


class TestTimeline:
    def test_month_label(self):
        assert month_label(2023, 12) == "DEZ/23"
        assert month_label(2024, 2) == "FEV/24"
        assert month_label(2005, 1) == "JAN/05"

    def test_buckets_sum_volume_columns(self):
        rows = [
            ["05/03/2024 08:00:00", "1", "2"],
            ["20/03/2024 08:00:00", "3", ""],
            ["02/04/2024 08:00:00", "1", "1"],
        ]
        assert build_timeline(rows, 0, [1, 2]) == [
            {"month": "MAR/24", "value": 6.0},
            {"month": "ABR/24", "value": 2.0},
        ]

    def test_year_boundary_is_chronological(self):
        rows = [
            ["10/01/2024", "1"],
            ["10/12/2023", "1"],
            ["10/02/2024", "1"],
            ["10/08/2023", "1"],
        ]
        months = [b["month"] for b in build_timeline(rows, 0, [1])]
        assert months == ["AGO/23", "DEZ/23", "JAN/24", "FEV/24"]

    def test_rows_without_date_are_ignored(self):
        assert build_timeline([["sem data", "4"]], 0, [1]) == []

    def test_timeline_frame(self):
        frame = timeline_frame([{"month": "JAN/24", "value": 3.0}])
        assert list(frame.columns) == ["month", "value"]
        assert frame.iloc[0]["value"] == 3.0
        assert timeline_frame([]).empty
