import pytest

from zedstat.core.config import ZedConfig
from zedstat.core.results import Trial
from zedstat.stats.series import ZedSeries


@pytest.fixture
def ccorr_config():
    """Two-tailed config with the continuity correction switched on."""
    return ZedConfig(continuity_correction=True)


@pytest.fixture
def sample_trials():
    """
    Three trials of a hit/miss test with binomial variances (n p q).

    n = 40, 36, 50 with p = 0.25:
        expected = 10, 9, 12.5
        variance = 7.5, 6.75, 9.375
    """
    return [
        Trial(observed=14, expected=10, variance=7.5),
        Trial(observed=8, expected=9, variance=6.75),
        Trial(observed=17, expected=12.5, variance=9.375),
    ]


@pytest.fixture
def open_series():
    """A series that has been reset and is accepting trials."""
    series = ZedSeries()
    series.reset()
    return series
