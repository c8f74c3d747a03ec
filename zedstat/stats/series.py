"""
zedstat.stats.series
====================

Aggregate z-scores over repeated trials.

A `ZedSeries` keeps running sums of the observed values, expected values and
variances of its trials. Summarizing divides the summed deviation by the
root of the summed variance, and additionally combines any per-trial
z-values with Stouffer's method:

    Z_stouffer = Σ z_i / √k

Lifecycle::

    UNINITIALIZED --reset()--> ACCUMULATING --summarize()--> FINALIZED
                                    ^                            |
                                    +----------reset()-----------+

Examples
--------
>>> from zedstat.core.results import Trial
>>> from zedstat.stats.series import ZedSeries
>>> series = ZedSeries()
>>> series.reset()
>>> series.update(Trial(observed=10, expected=8, variance=4, z_value=1.0))
>>> series.update(Trial(observed=14, expected=12, variance=5, z_value=0.5))
>>> summary = series.summarize()
>>> (summary.observed_sum, summary.expected_sum, summary.variance_sum)
(24.0, 20.0, 9.0)
>>> round(summary.z_value, 4)
1.3333
>>> round(summary.stouffer_z, 4)
1.0607
"""

from __future__ import annotations
import logging
import math
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from zedstat.core.config import ZedConfig, pick_config
from zedstat.core.names import SeriesState
from zedstat.core.results import SeriesSummary, Trial, ZedResult
from zedstat.stats.common.running import RunningStat
from zedstat.stats.deviation import z_to_p, zscore, zscore_trial

logger = logging.getLogger(__name__)


@dataclass
class ZedSeries:
    """
    Accumulator of trials for a combined z-score.

    Not thread-safe: use one instance per batch and call `reset()` before
    each batch.

    Attributes:
        config: Options used by `score()` and `summarize()`
    """

    config: Optional[ZedConfig] = None
    _state: SeriesState = field(default=SeriesState.UNINITIALIZED, init=False)
    _observed: RunningStat = field(default_factory=RunningStat, init=False)
    _expected: RunningStat = field(default_factory=RunningStat, init=False)
    _variance: RunningStat = field(default_factory=RunningStat, init=False)
    _sample_count: RunningStat = field(default_factory=RunningStat, init=False)
    _z_value: RunningStat = field(default_factory=RunningStat, init=False)
    _trials: List[Trial] = field(default_factory=list, init=False)
    _summary: Optional[SeriesSummary] = field(default=None, init=False)

    @property
    def state(self) -> SeriesState:
        return self._state

    @property
    def trial_count(self) -> int:
        return len(self._trials)

    @property
    def trials(self) -> Tuple[Trial, ...]:
        return tuple(self._trials)

    @property
    def summary(self) -> Optional[SeriesSummary]:
        """The finalized snapshot, or None before `summarize()`."""
        return self._summary

    def reset(self) -> None:
        """Clear all accumulated data and start a new batch."""
        for stat in (
            self._observed,
            self._expected,
            self._variance,
            self._sample_count,
            self._z_value,
        ):
            stat.clear()
        self._trials.clear()
        self._summary = None
        self._state = SeriesState.ACCUMULATING
        logger.debug("series reset")

    def update(self, trial: Trial) -> None:
        """Add one trial to the running sums."""
        if self._state is SeriesState.UNINITIALIZED:
            raise RuntimeError("Series not initialised. Call reset() first.")
        if self._state is SeriesState.FINALIZED:
            raise RuntimeError(
                "Series already summarized. Call reset() to start a new batch."
            )
        self._observed.add(trial.observed)
        self._expected.add(trial.expected)
        self._variance.add(trial.resolved_variance)
        if trial.sample_count is not None:
            self._sample_count.add(trial.sample_count)
        if trial.z_value is not None:
            self._z_value.add(trial.z_value)
        self._trials.append(trial)

    def score(self, trial: Trial, *, test_of_mean: bool = False) -> ZedResult:
        """Compute the z-score of `trial`, then add it with that z-value.

        The recorded z-value is the unrounded ratio, so `z_precision` only
        affects the returned result. A degenerate result is added without a
        z-value.
        """
        result = zscore_trial(trial, test_of_mean=test_of_mean, config=self.config)
        if result.z_value is not None and trial.z_value is None:
            z_value = result.observed_deviation / result.standard_deviation
            trial = Trial(
                observed=trial.observed,
                expected=trial.expected,
                variance=trial.variance,
                standard_deviation=trial.standard_deviation,
                sample_count=trial.sample_count,
                z_value=z_value,
            )
        self.update(trial)
        return result

    def summarize(self, *, config: Optional[ZedConfig] = None) -> SeriesSummary:
        """
        Combine the accumulated trials.

        Args:
            config: Options for this summary; defaults to the series' config

        Returns:
            SeriesSummary with the aggregate result and the Stouffer pair

        Raises:
            RuntimeError: if `reset()` was never called or no trial was added
        """
        if self._state is SeriesState.UNINITIALIZED:
            raise RuntimeError("Series not initialised. Call reset() first.")
        if self._state is SeriesState.FINALIZED and config is None:
            return self._summary  # type: ignore[return-value]
        if not self._variance.count:
            raise RuntimeError(
                "No data for series testing; call update() with some trials first."
            )

        cfg = pick_config(config if config is not None else self.config)
        result = zscore(
            self._observed.sum,
            self._expected.sum,
            variance=self._variance.sum,
            config=cfg,
        )

        stouffer_z = stouffer_p = None
        if self._z_value.count:
            stouffer_z = self._z_value.sum / math.sqrt(self._z_value.count)
            stouffer_p = z_to_p(stouffer_z, config=cfg)

        self._summary = SeriesSummary(
            result=result,
            observed_sum=self._observed.sum,
            expected_sum=self._expected.sum,
            variance_sum=self._variance.sum,
            sample_count_sum=int(self._sample_count.sum),
            trial_count=self.trial_count,
            stouffer_z=stouffer_z,
            stouffer_p=stouffer_p,
        )
        self._state = SeriesState.FINALIZED
        logger.debug(
            "series summarized: %d trials, z=%s", self.trial_count, result.z_value
        )
        return self._summary
