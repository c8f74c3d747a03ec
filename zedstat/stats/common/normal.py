"""
zedstat.stats.common.normal
===========================

Standard-normal primitives and the small helpers used around them.

The survival and quantile functions are taken from `scipy.stats.norm`;
nothing here reimplements the distribution.

Examples
--------
>>> from zedstat.stats.common.normal import upper_tail, upper_quantile
>>> round(upper_tail(1.96), 4)
0.025
>>> round(upper_quantile(0.025), 2)
1.96
"""

from __future__ import annotations
import math
import numbers
from typing import Any, Optional

from scipy.stats import norm


def upper_tail(x: float) -> float:
    """Return 1 - Φ(x) for the standard normal CDF Φ."""
    return float(norm.sf(x))


def upper_quantile(p: float) -> float:
    """Return x such that 1 - Φ(x) = p, i.e. Φ⁻¹(1 - p).

    Uses the inverse survival function, which keeps precision for small p.
    """
    return float(norm.isf(p))


def clamp_probability(p: float) -> float:
    """Clamp `p` into [0, 1] to absorb floating-point drift."""
    return min(max(p, 0.0), 1.0)


def round_to(value: float, precision: Optional[int]) -> float:
    """Round to `precision` decimal places; None leaves the value unchanged."""
    if precision is None:
        return value
    return round(value, precision)


def as_real(value: Any) -> Optional[float]:
    """Return `value` as a float, or None when it is missing or not a number.

    NaN counts as not a number.

    >>> as_real("1.5") is None
    True
    >>> as_real(2)
    2.0
    """
    if value is None or isinstance(value, bool):
        return None
    if not isinstance(value, numbers.Real):
        return None
    value = float(value)
    if math.isnan(value):
        return None
    return value


def require_real(name: str, value: Any) -> float:
    """Return `value` as a float, raising ValueError unless it is a real number.

    Bools and NaN are rejected. `None` is rejected too; callers that want a
    more specific message for a missing value check for it first.

    >>> require_real("variance", float("nan"))
    Traceback (most recent call last):
    ...
    ValueError: variance must not be NaN
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise ValueError(f"{name} must be a real number, got {value!r}")
    value = float(value)
    if math.isnan(value):
        raise ValueError(f"{name} must not be NaN")
    return value
