"""
zedstat.core.names
==================

Typed names shared across the package.

- `SeriesState`: an Enum for the lifecycle of a series accumulator.
- `Tails`: literal type for the number of tails of a probability.
- Common `Literal` tags for result payloads.

Examples
--------
>>> from zedstat.core.names import SeriesState
>>> SeriesState.ACCUMULATING.value
'accumulating'
"""

from __future__ import annotations
from enum import Enum
from typing import Literal


class SeriesState(str, Enum):
    """Lifecycle of a `ZedSeries`.

    - UNINITIALIZED: created, `reset()` not yet called
    - ACCUMULATING: accepting trials
    - FINALIZED: summarized; readable until the next `reset()`
    """

    UNINITIALIZED = "uninitialized"
    ACCUMULATING = "accumulating"
    FINALIZED = "finalized"


Tails = Literal[1, 2]
TWO_TAILED: Tails = 2

# Payload tags.
ZScoreTag = Literal["stat:zscore"]
SeriesTag = Literal["stat:series"]
