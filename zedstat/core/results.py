"""
zedstat.core.results
====================

Value objects passed into and returned from the statistics layer.

- `Trial`: one measurement (observed, expected and a variance source)
- `ZedResult`: a z-value with its probability and the deviation behind it
- `SeriesSummary`: the finalized aggregate of a `ZedSeries`

Examples
--------
>>> from zedstat.core.results import Trial
>>> Trial(observed=12, expected=5, standard_deviation=4).resolved_variance
16.0
>>> Trial(observed=12, expected=5)
Traceback (most recent call last):
...
ValueError: Need a variance or standard_deviation for the trial
"""

from __future__ import annotations
import numbers
from dataclasses import dataclass
from typing import Optional, Tuple, TypedDict

from zedstat.core.names import SeriesTag, ZScoreTag
from zedstat.stats.common.normal import require_real


class ZedResultPayload(TypedDict):
    """Plain-dict form of a `ZedResult`."""

    tag: ZScoreTag
    z_value: Optional[float]
    p_value: Optional[float]
    observed_deviation: float
    standard_deviation: float
    tails: int


class SeriesSummaryPayload(TypedDict):
    """Plain-dict form of a `SeriesSummary`."""

    tag: SeriesTag
    z_value: Optional[float]
    p_value: Optional[float]
    observed_deviation: float
    standard_deviation: float
    tails: int
    observed_sum: float
    expected_sum: float
    variance_sum: float
    sample_count_sum: int
    trial_count: int
    stouffer_z: Optional[float]
    stouffer_p: Optional[float]


def _require_number(name: str, value: object) -> float:
    if value is None:
        raise ValueError(f"Need to define {name} for the trial")
    return require_real(name, value)


@dataclass(frozen=True, kw_only=True)
class Trial:
    """
    A single measurement.

    Exactly one of `variance` and `standard_deviation` must be given.
    `sample_count` is only needed for a test of the mean; `z_value` is a
    per-trial z recorded for Stouffer's method by a `ZedSeries`.
    """

    observed: float
    expected: float
    variance: Optional[float] = None
    standard_deviation: Optional[float] = None
    sample_count: Optional[int] = None
    z_value: Optional[float] = None

    def __post_init__(self) -> None:
        _require_number("observed", self.observed)
        _require_number("expected", self.expected)
        if self.variance is None and self.standard_deviation is None:
            raise ValueError("Need a variance or standard_deviation for the trial")
        if self.variance is not None and self.standard_deviation is not None:
            raise ValueError(
                "Give either variance or standard_deviation for the trial, not both"
            )
        source = "variance" if self.variance is not None else "standard_deviation"
        if _require_number(source, getattr(self, source)) < 0:
            raise ValueError(
                f"{source} must be non-negative, got {getattr(self, source)}"
            )
        if self.sample_count is not None and (
            isinstance(self.sample_count, bool)
            or not isinstance(self.sample_count, numbers.Integral)
            or self.sample_count <= 0
        ):
            raise ValueError(
                f"sample_count must be a positive integer, got {self.sample_count!r}"
            )
        if self.z_value is not None:
            _require_number("z_value", self.z_value)

    @property
    def resolved_variance(self) -> float:
        """Variance of the trial; a standard deviation is squared here only."""
        if self.variance is not None:
            return float(self.variance)
        return float(self.standard_deviation) ** 2  # type: ignore[arg-type]


@dataclass(frozen=True)
class ZedResult:
    """
    A deviation ratio and its tail probability.

    `z_value` and `p_value` are None when the result is degenerate (zero
    denominator).
    """

    z_value: Optional[float]
    p_value: Optional[float]
    observed_deviation: float
    standard_deviation: float
    tails: int = 2

    @property
    def is_degenerate(self) -> bool:
        return self.z_value is None

    def as_tuple(self) -> Tuple[Optional[float], Optional[float], float, float]:
        """Return (z, p, observed_deviation, standard_deviation)."""
        return (
            self.z_value,
            self.p_value,
            self.observed_deviation,
            self.standard_deviation,
        )

    def to_dict(self) -> ZedResultPayload:
        return {
            "tag": "stat:zscore",
            "z_value": self.z_value,
            "p_value": self.p_value,
            "observed_deviation": self.observed_deviation,
            "standard_deviation": self.standard_deviation,
            "tails": self.tails,
        }


@dataclass(frozen=True)
class SeriesSummary:
    """Finalized snapshot of a series of trials."""

    result: ZedResult
    observed_sum: float
    expected_sum: float
    variance_sum: float
    sample_count_sum: int
    trial_count: int
    stouffer_z: Optional[float] = None
    stouffer_p: Optional[float] = None

    @property
    def z_value(self) -> Optional[float]:
        return self.result.z_value

    @property
    def p_value(self) -> Optional[float]:
        return self.result.p_value

    def to_dict(self) -> SeriesSummaryPayload:
        return {
            "tag": "stat:series",
            "z_value": self.result.z_value,
            "p_value": self.result.p_value,
            "observed_deviation": self.result.observed_deviation,
            "standard_deviation": self.result.standard_deviation,
            "tails": self.result.tails,
            "observed_sum": self.observed_sum,
            "expected_sum": self.expected_sum,
            "variance_sum": self.variance_sum,
            "sample_count_sum": self.sample_count_sum,
            "trial_count": self.trial_count,
            "stouffer_z": self.stouffer_z,
            "stouffer_p": self.stouffer_p,
        }
