"""
zedstat.stats.deviation
=======================

The deviation ratio and its conversions to and from tail probabilities.

Mathematical Background
-----------------------
The standard score of an observation is

    Z = (x − E[x]) / SD

where SD is the standard deviation of x, or SD/√n when testing the mean of n
samples. With the continuity correction the numerator is shrunk by 0.5
toward zero before dividing. Probabilities are read off the standard normal
distribution:

    p = 2·(1 − Φ(|Z|))   (two-tailed)
    p = 1 − Φ(|Z|)       (one-tailed)

and p_to_z inverts the same relation, returning |Z|.

Examples
--------
>>> from zedstat.core.config import ZedConfig
>>> from zedstat.stats.deviation import zscore, z_to_p, p_to_z
>>> result = zscore(12, 5, variance=16, config=ZedConfig(continuity_correction=True))
>>> result.z_value
1.625
>>> round(result.p_value, 5)
0.10416
>>> z_to_p(0)
1.0
>>> round(p_to_z(0.05), 2)
1.96
"""

from __future__ import annotations
import logging
import math
import numbers
from typing import Any, Optional

from zedstat.core.config import ZedConfig, pick_config, resolve_tails
from zedstat.core.results import Trial, ZedResult
from zedstat.stats.common.correction import continuity_correct
from zedstat.stats.common.normal import (
    as_real,
    clamp_probability,
    require_real,
    round_to,
    upper_quantile,
    upper_tail,
)

logger = logging.getLogger(__name__)


def _variance_source(
    variance: Optional[float], standard_deviation: Optional[float]
) -> float:
    """Return the standard deviation implied by exactly one variance source."""
    if variance is None and standard_deviation is None:
        raise ValueError("Need a variance or standard_deviation for zscore")
    if variance is not None and standard_deviation is not None:
        raise ValueError("Give either variance or standard_deviation, not both")
    if standard_deviation is not None:
        standard_deviation = require_real("standard_deviation", standard_deviation)
        if standard_deviation < 0:
            raise ValueError(
                f"standard_deviation must be non-negative, got {standard_deviation}"
            )
        return standard_deviation
    variance = require_real("variance", variance)
    if variance < 0:
        raise ValueError(f"variance must be non-negative, got {variance}")
    return math.sqrt(variance)


def z_to_p(
    z: Any,
    tails: Optional[int] = None,
    *,
    config: Optional[ZedConfig] = None,
) -> Optional[float]:
    """
    Return the tail probability of a z-value under the standard normal.

    Args:
        z: z-value; its absolute value is used
        tails: 1 or 2; defaults to ``config.tails``. Other values mean 2.
        config: Options (p_precision); defaults to DEFAULT_CONFIG

    Returns:
        p in [0, 1], or None when `z` is missing or not a number

    Examples:
        >>> round(z_to_p(1.96), 3)
        0.05
        >>> round(z_to_p(-1.96, tails=1), 3)
        0.025
        >>> z_to_p("abc") is None
        True
    """
    cfg = pick_config(config)
    value = as_real(z)
    if value is None:
        return None
    if value == 0:
        return 1.0
    n_tails = cfg.tails if tails is None else resolve_tails(tails)
    p = upper_tail(abs(value))
    if n_tails == 2:
        p *= 2
    return round_to(clamp_probability(p), cfg.p_precision)


def p_to_z(
    p: Any,
    tails: Optional[int] = None,
    *,
    config: Optional[ZedConfig] = None,
) -> Optional[float]:
    """
    Return the non-negative z-value whose tail probability is `p`.

    A two-tailed p is halved first, so 0.05 (two-tailed) and 0.025
    (one-tailed) give the same z ≈ 1.96. The result is Φ⁻¹(1 − p) of the
    one-sided probability and carries no direction.

    Args:
        p: p-value
        tails: 1 or 2; defaults to ``config.tails``. Other values mean 2.
        config: Options; defaults to DEFAULT_CONFIG

    Returns:
        z ≥ 0; 0.0 for p ≥ 1 (or a one-tailed p ≥ 0.5); None for missing,
        non-numeric or p ≤ 0

    Examples:
        >>> round(p_to_z(0.066807, tails=1), 3)
        1.5
        >>> p_to_z(1)
        0.0
        >>> p_to_z(0) is None
        True
    """
    cfg = pick_config(config)
    value = as_real(p)
    if value is None or value <= 0:
        return None
    if value >= 1:
        return 0.0
    n_tails = cfg.tails if tails is None else resolve_tails(tails)
    if n_tails == 2:
        value /= 2
    if value >= 0.5:
        # one-tailed p of at least 0.5 has no positive z
        return 0.0
    return upper_quantile(value)


def zscore(
    observed: Optional[float],
    expected: Optional[float],
    *,
    variance: Optional[float] = None,
    standard_deviation: Optional[float] = None,
    sample_count: Optional[int] = None,
    test_of_mean: bool = False,
    config: Optional[ZedConfig] = None,
) -> ZedResult:
    """
    Compute the deviation ratio (observed − expected) / SD and its p-value.

    Args:
        observed: Observed value of the statistic
        expected: Expected value of the statistic
        variance: Variance of the statistic (give this or standard_deviation)
        standard_deviation: Standard deviation of the statistic
        sample_count: Number of samples, required when test_of_mean is set
        test_of_mean: Divide SD by √sample_count (test of a sample mean)
        config: Options; defaults to DEFAULT_CONFIG

    Returns:
        ZedResult; z_value and p_value are None when SD resolves to zero

    Raises:
        ValueError: on a missing, non-numeric or NaN observed/expected, a
            missing, duplicated, negative or NaN variance source, or a
            sample_count that is not a positive integer in test mode
    """
    cfg = pick_config(config)
    if observed is None or expected is None:
        raise ValueError(
            f"Need to define observed ({observed}) and expected ({expected}) "
            "values for zscore"
        )
    observed = require_real("observed", observed)
    expected = require_real("expected", expected)
    sd = _variance_source(variance, standard_deviation)
    if test_of_mean:
        if (
            isinstance(sample_count, bool)
            or not isinstance(sample_count, numbers.Integral)
            or sample_count <= 0
        ):
            raise ValueError(
                f"sample_count must be a positive integer for a test of the mean, "
                f"got {sample_count}"
            )
        sd /= math.sqrt(sample_count)

    obs_dev = observed - expected
    if cfg.continuity_correction:
        obs_dev = continuity_correct(obs_dev)

    if sd == 0:
        logger.debug(
            "zscore: zero standard deviation (observed=%s, expected=%s)",
            observed,
            expected,
        )
        return ZedResult(None, None, obs_dev, sd, cfg.tails)

    z = obs_dev / sd
    p = z_to_p(z, config=cfg)
    return ZedResult(round_to(z, cfg.z_precision), p, obs_dev, sd, cfg.tails)


def zscore_trial(
    trial: Trial,
    *,
    test_of_mean: bool = False,
    config: Optional[ZedConfig] = None,
) -> ZedResult:
    """Run `zscore` on a `Trial`."""
    return zscore(
        trial.observed,
        trial.expected,
        variance=trial.variance,
        standard_deviation=trial.standard_deviation,
        sample_count=trial.sample_count,
        test_of_mean=test_of_mean,
        config=config,
    )
