"""Tests for zedstat.reporting.series."""

import polars as pl
import pytest

from zedstat.core.config import ZedConfig
from zedstat.core.results import SeriesSummary, Trial, ZedResult
from zedstat.reporting.series import (
    SeriesReporter,
    describe_result,
    describe_series,
    format_value,
)


class TestFormatting:

    def test_format_value(self):
        assert format_value(1.625) == "1.625"
        assert format_value(1.625, 2) == "1.62"
        assert format_value(0.1, 4) == "0.1000"
        assert format_value(None, 3) == "-"

    def test_describe_result_uses_precision(self):
        cfg = ZedConfig(z_precision=2, p_precision=3)
        text = describe_result(ZedResult(1.75, 0.080118, 7.0, 4.0), cfg)
        assert text == "Z = 1.75, 2p = 0.080"

    def test_describe_result_one_tailed(self):
        text = describe_result(ZedResult(1.5, 0.0668, 3.0, 2.0, tails=1))
        assert text == "Z = 1.5, 1p = 0.0668"

    def test_describe_degenerate(self):
        assert describe_result(ZedResult(None, None, 3.0, 0.0)) == "Z = -, 2p = -"

    def test_describe_series(self):
        summary = SeriesSummary(
            result=ZedResult(2.0, 0.0455, 4.0, 2.0),
            observed_sum=10.0,
            expected_sum=6.0,
            variance_sum=4.0,
            sample_count_sum=80,
            trial_count=2,
        )
        assert describe_series(summary) == "Z (N = 80) = 2.0, 2p = 0.0455"

    def test_describe_series_with_stouffer(self):
        summary = SeriesSummary(
            result=ZedResult(2.0, 0.0455, 4.0, 2.0),
            observed_sum=10.0,
            expected_sum=6.0,
            variance_sum=4.0,
            sample_count_sum=80,
            trial_count=2,
            stouffer_z=1.5,
            stouffer_p=0.1336,
        )
        assert describe_series(summary).endswith("; Stouffer Z = 1.5, 2p = 0.1336")


class TestSeriesReporter:

    def test_trials_table(self, open_series, sample_trials):
        for trial in sample_trials:
            open_series.score(trial)
        table = SeriesReporter(open_series).trials_table()
        assert isinstance(table, pl.DataFrame)
        assert table.height == 3
        assert table["trial"].to_list() == [1, 2, 3]
        assert table["observed"].to_list() == [14.0, 8.0, 17.0]
        assert table["z_value"].null_count() == 0

    def test_trials_table_empty(self, open_series):
        table = SeriesReporter(open_series).trials_table()
        assert table.height == 0
        assert table.columns == [
            "trial",
            "observed",
            "expected",
            "variance",
            "sample_count",
            "z_value",
        ]

    def test_trials_table_variance_from_sd(self, open_series):
        open_series.update(Trial(observed=3, expected=1, standard_deviation=2))
        table = SeriesReporter(open_series).trials_table()
        assert table["variance"].to_list() == [4.0]
        assert table["sample_count"].to_list() == [None]

    def test_summary_table(self, open_series, sample_trials):
        for trial in sample_trials:
            open_series.update(trial)
        summary = open_series.summarize()
        table = SeriesReporter(open_series).summary_table()
        assert table.height == 1
        assert table["z_value"][0] == pytest.approx(summary.z_value)
        assert table["trial_count"][0] == 3
        assert table["stouffer_z"][0] is None
        assert "tag" not in table.columns

    def test_summary_table_requires_summary(self, open_series):
        with pytest.raises(RuntimeError, match="summarize"):
            SeriesReporter(open_series).summary_table()
