"""
zedstat.stats.common.transforms
===============================

Auxiliary transforms around the standard score.

- z <-> chi-square (one degree of freedom, or a normal approximation for df)
- Fisher r <-> z for correlation coefficients
- Standardization of a sequence of values

Examples
--------
>>> from zedstat.stats.common.transforms import z_to_chi, chi_to_z, r_to_z, z_to_r
>>> z_to_chi(-2.0)
4.0
>>> chi_to_z(4.0)
2.0
>>> round(z_to_r(r_to_z(0.5)), 12)
0.5
"""

from __future__ import annotations
import math
from typing import Iterable, Optional

import numpy as np

from zedstat.stats.common.normal import as_real


def z_to_chi(z: float) -> float:
    """Return the chi-square value z²."""
    return float(z) ** 2


def chi_to_z(chi: float, df: Optional[float] = None) -> float:
    """
    Convert a chi-square statistic to a z-value.

    Without `df` this is √chi. With `df` degrees of freedom the normal
    approximation √(2·chi) − √(2·df − 1) is used; a negative result means
    chi is smaller than expected for that many degrees of freedom.

    Args:
        chi: Chi-square statistic (non-negative)
        df: Degrees of freedom, at least 0.5

    Returns:
        z-value

    Examples:
        >>> chi_to_z(12.5, df=1)
        4.0
    """
    if chi < 0:
        raise ValueError(f"chi must be non-negative, got {chi}")
    if df is None:
        return math.sqrt(chi)
    if 2 * df - 1 < 0:
        raise ValueError(f"df must be at least 0.5, got {df}")
    return math.sqrt(2 * chi) - math.sqrt(2 * df - 1)


def r_to_z(r: Optional[float]) -> float:
    """
    Fisher transform of a correlation coefficient: 0.5·ln((1+r)/(1−r)).

    r = ±1 maps to ±inf.

    Raises:
        ValueError: if `r` is missing, not a number, or outside [-1, 1]
    """
    value = as_real(r)
    if value is None:
        raise ValueError(f"r must be a correlation coefficient, got {r!r}")
    if value < -1 or value > 1:
        raise ValueError(f"r must be in [-1, 1], got {value}")
    if value == 1:
        return math.inf
    if value == -1:
        return -math.inf
    return 0.5 * math.log((1 + value) / (1 - value))


def z_to_r(z: Optional[float]) -> Optional[float]:
    """
    Inverse Fisher transform: (e^(2z) − 1)/(e^(2z) + 1).

    The expression equals tanh(z), which is used to avoid overflow for large
    |z|. Missing or non-numeric input gives None.
    """
    value = as_real(z)
    if value is None:
        return None
    return math.tanh(value)


def standardize(values: Iterable[float]) -> np.ndarray:
    """
    Return (x − mean)/sd for every value, sd from the sample variance.

    When the variance is zero or undefined (fewer than two values) every
    standardized value is 0.

    Examples:
        >>> standardize([3, 3, 3]).tolist()
        [0.0, 0.0, 0.0]
        >>> standardize([1, 2, 3]).tolist()
        [-1.0, 0.0, 1.0]
    """
    data = np.asarray(list(values), dtype=float)
    if data.size < 2 or np.all(data == data[0]):
        return np.zeros(data.shape, dtype=float)
    sd = float(np.std(data, ddof=1))
    if sd == 0 or not math.isfinite(sd):
        return np.zeros(data.shape, dtype=float)
    return (data - data.mean()) / sd
