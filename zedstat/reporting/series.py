"""
zedstat.reporting.series
========================

Formatting of results and a Polars view of a series.

Examples
--------
>>> from zedstat.core.results import ZedResult
>>> from zedstat.reporting.series import describe_result, format_value
>>> describe_result(ZedResult(1.625, 0.104162, 6.5, 4.0))
'Z = 1.625, 2p = 0.104162'
>>> format_value(0.1041621, 3)
'0.104'
>>> format_value(None)
'-'
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, TYPE_CHECKING

import polars as pl

from zedstat.core.config import ZedConfig, pick_config
from zedstat.core.results import SeriesSummary, ZedResult

if TYPE_CHECKING:
    from zedstat.stats.series import ZedSeries


def format_value(value: Optional[float], precision: Optional[int] = None) -> str:
    """Fixed-point string of `value`; '-' when there is no value."""
    if value is None:
        return "-"
    if precision is None:
        return str(value)
    return f"{value:.{precision}f}"


def describe_result(result: ZedResult, config: Optional[ZedConfig] = None) -> str:
    """One line giving the z-value and its p-value."""
    cfg = pick_config(config)
    return (
        f"Z = {format_value(result.z_value, cfg.z_precision)}, "
        f"{result.tails}p = {format_value(result.p_value, cfg.p_precision)}"
    )


def describe_series(summary: SeriesSummary, config: Optional[ZedConfig] = None) -> str:
    """One line giving the series z-value and p-value, plus Stouffer's pair."""
    cfg = pick_config(config)
    line = (
        f"Z (N = {summary.sample_count_sum}) = "
        f"{format_value(summary.z_value, cfg.z_precision)}, "
        f"{summary.result.tails}p = {format_value(summary.p_value, cfg.p_precision)}"
    )
    if summary.stouffer_z is not None:
        line += (
            f"; Stouffer Z = {format_value(summary.stouffer_z, cfg.z_precision)}, "
            f"{summary.result.tails}p = "
            f"{format_value(summary.stouffer_p, cfg.p_precision)}"
        )
    return line


@dataclass
class SeriesReporter:
    """Tabular view of a `ZedSeries` as Polars DataFrames."""

    series: "ZedSeries"

    def trials_table(self) -> pl.DataFrame:
        """
        Return one row per trial:
        - trial, observed, expected, variance, sample_count, z_value
        """
        rows = [
            {
                "trial": i,
                "observed": float(t.observed),
                "expected": float(t.expected),
                "variance": t.resolved_variance,
                "sample_count": t.sample_count,
                "z_value": None if t.z_value is None else float(t.z_value),
            }
            for i, t in enumerate(self.series.trials, start=1)
        ]
        return pl.DataFrame(
            rows,
            schema={
                "trial": pl.Int64,
                "observed": pl.Float64,
                "expected": pl.Float64,
                "variance": pl.Float64,
                "sample_count": pl.Int64,
                "z_value": pl.Float64,
            },
        )

    def summary_table(self) -> pl.DataFrame:
        """Return the finalized summary as a one-row DataFrame."""
        summary = self.series.summary
        if summary is None:
            raise RuntimeError("Series not summarized. Call summarize() first.")
        payload = dict(summary.to_dict())
        payload.pop("tag")
        return pl.DataFrame(
            [payload],
            schema={
                "z_value": pl.Float64,
                "p_value": pl.Float64,
                "observed_deviation": pl.Float64,
                "standard_deviation": pl.Float64,
                "tails": pl.Int64,
                "observed_sum": pl.Float64,
                "expected_sum": pl.Float64,
                "variance_sum": pl.Float64,
                "sample_count_sum": pl.Int64,
                "trial_count": pl.Int64,
                "stouffer_z": pl.Float64,
                "stouffer_p": pl.Float64,
            },
        )
