"""
zedstat.api.zed
===============

`Zed`: a configured entry point to the whole package.

The options are bound once when the object is built and never change
afterwards; per-call variations go through `ZedConfig.with_overrides` or a
second `Zed`.

Examples
--------
>>> from zedstat.api.zed import Zed
>>> zed = Zed(continuity_correction=True, tails=2, z_precision=3, p_precision=5)
>>> zed.zscore(12, 5, variance=16).as_tuple()
(1.625, 0.10416, 6.5, 4.0)
>>> zed.z_to_p(1.5, tails=1)
0.06681
>>> series = zed.series()
>>> series.update(zed.trial(observed=6, expected=4, variance=2, sample_count=10))
>>> series.update(zed.trial(observed=7, expected=5, variance=2, sample_count=10))
>>> zed.describe_series(series.summarize())
'Z (N = 20) = 1.750, 2p = 0.08012'
"""

from __future__ import annotations
from typing import Any, Iterable, Optional

import numpy as np

from zedstat.core.config import ZedConfig
from zedstat.core.results import SeriesSummary, Trial, ZedResult
from zedstat.reporting.series import describe_result, describe_series
from zedstat.stats.common import transforms
from zedstat.stats.deviation import p_to_z, z_to_p, zscore, zscore_trial
from zedstat.stats.series import ZedSeries


class Zed:
    """
    Deviation ratios with a fixed configuration.

    Parameters
    ----------
    config : ZedConfig, optional
        Options to bind. Mutually exclusive with keyword options.
    **options
        Fields of `ZedConfig` (tails, continuity_correction, z_precision,
        p_precision). Unknown names raise ValueError.
    """

    def __init__(self, config: Optional[ZedConfig] = None, **options: Any):
        if config is not None and options:
            raise ValueError("Pass either a ZedConfig or keyword options, not both")
        self._config = config if config is not None else ZedConfig.from_mapping(options)

    @property
    def config(self) -> ZedConfig:
        return self._config

    def __repr__(self) -> str:
        return f"Zed({self._config!r})"

    @staticmethod
    def trial(**fields: Any) -> Trial:
        """Build a validated `Trial`."""
        return Trial(**fields)

    def zscore(
        self,
        observed: Optional[float],
        expected: Optional[float],
        *,
        variance: Optional[float] = None,
        standard_deviation: Optional[float] = None,
        sample_count: Optional[int] = None,
        test_of_mean: bool = False,
    ) -> ZedResult:
        return zscore(
            observed,
            expected,
            variance=variance,
            standard_deviation=standard_deviation,
            sample_count=sample_count,
            test_of_mean=test_of_mean,
            config=self._config,
        )

    def zscore_trial(self, trial: Trial, *, test_of_mean: bool = False) -> ZedResult:
        return zscore_trial(trial, test_of_mean=test_of_mean, config=self._config)

    def z_to_p(self, z: Any, tails: Optional[int] = None) -> Optional[float]:
        return z_to_p(z, tails, config=self._config)

    def p_to_z(self, p: Any, tails: Optional[int] = None) -> Optional[float]:
        return p_to_z(p, tails, config=self._config)

    def series(self) -> ZedSeries:
        """Return a new series bound to this configuration, ready for trials."""
        series = ZedSeries(config=self._config)
        series.reset()
        return series

    def describe(self, result: ZedResult) -> str:
        return describe_result(result, self._config)

    def describe_series(self, summary: SeriesSummary) -> str:
        return describe_series(summary, self._config)

    # Auxiliary transforms; configuration does not apply to them.

    @staticmethod
    def z_to_chi(z: float) -> float:
        return transforms.z_to_chi(z)

    @staticmethod
    def chi_to_z(chi: float, df: Optional[float] = None) -> float:
        return transforms.chi_to_z(chi, df)

    @staticmethod
    def r_to_z(r: Optional[float]) -> float:
        return transforms.r_to_z(r)

    @staticmethod
    def z_to_r(z: Optional[float]) -> Optional[float]:
        return transforms.z_to_r(z)

    @staticmethod
    def standardize(values: Iterable[float]) -> np.ndarray:
        return transforms.standardize(values)
