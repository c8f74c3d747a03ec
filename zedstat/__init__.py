"""
zedstat — deviation ratios, their normal probabilities, and series of them.

A z-score is the ratio of an observed deviation (observed less expected,
optionally continuity-corrected) to a standard deviation. zedstat computes
it, reads its one- or two-tailed p-value off the standard normal
distribution, inverts p-values back to z-values, and combines the trials of a
repeated test into one aggregate z (from summed sufficient statistics) and a
Stouffer combined z (from the individual z-values).

Configuration is an immutable `ZedConfig` passed to each call or bound once
to a `Zed` facade; nothing changes behind the caller's back.

The library logs under the ``zedstat`` logger and is silent unless the
application configures logging.

Example
-------
>>> import zedstat
>>> assert hasattr(zedstat, "core")
>>> assert hasattr(zedstat, "stats")
>>> zedstat.zscore(12, 5, standard_deviation=4).z_value
1.75
"""

import logging

from zedstat.__version__ import __version__
from zedstat import core, stats
from zedstat.api.zed import Zed
from zedstat.core.config import DEFAULT_CONFIG, ZedConfig
from zedstat.core.results import SeriesSummary, Trial, ZedResult
from zedstat.stats.common.transforms import (
    chi_to_z,
    r_to_z,
    standardize,
    z_to_chi,
    z_to_r,
)
from zedstat.stats.deviation import p_to_z, z_to_p, zscore, zscore_trial
from zedstat.stats.series import ZedSeries

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    "DEFAULT_CONFIG",
    "SeriesSummary",
    "Trial",
    "Zed",
    "ZedConfig",
    "ZedResult",
    "ZedSeries",
    "chi_to_z",
    "p_to_z",
    "r_to_z",
    "standardize",
    "z_to_chi",
    "z_to_p",
    "z_to_r",
    "zscore",
    "zscore_trial",
]
