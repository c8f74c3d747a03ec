"""
zedstat.stats.common.running
============================

A running sum/count accumulator used by the series accumulator.

Examples
--------
>>> from zedstat.stats.common.running import RunningStat
>>> stat = RunningStat()
>>> for x in (2.0, 4.0, 9.0):
...     stat.add(x)
>>> (stat.count, stat.sum)
(3, 15.0)
"""

from __future__ import annotations
from dataclasses import dataclass


@dataclass
class RunningStat:
    """Running count and sum of added values."""

    count: int = 0
    sum: float = 0.0

    def add(self, value: float) -> None:
        """Add one value."""
        self.count += 1
        self.sum += float(value)

    def clear(self) -> None:
        self.count = 0
        self.sum = 0.0
