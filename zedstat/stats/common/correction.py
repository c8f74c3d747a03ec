"""
zedstat.stats.common.correction
===============================

Continuity correction for deviations of discrete (e.g. binomial) counts
approximated by the normal distribution.
"""

from __future__ import annotations
import math


def continuity_correct(deviation: float) -> float:
    """Shrink `deviation` by 0.5 toward zero, keeping its sign.

    A zero deviation is returned unchanged. A deviation smaller than 0.5 in
    magnitude is corrected to (signed) zero rather than past it.

    Args:
        deviation: Observed minus expected value

    Returns:
        sign(deviation) * (|deviation| - 0.5), or 0 for a zero deviation

    Examples:
        >>> continuity_correct(7)
        6.5
        >>> continuity_correct(-3.0)
        -2.5
        >>> continuity_correct(0)
        0
        >>> continuity_correct(0.25)
        0.0
    """
    if not deviation:
        return deviation
    return math.copysign(max(abs(deviation) - 0.5, 0.0), deviation)
