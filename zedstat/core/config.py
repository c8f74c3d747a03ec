"""
zedstat.core.config
===================

Immutable configuration for deviation ratios and their probabilities.

A `ZedConfig` is passed to each operation (or bound once to a `Zed` facade
or a `ZedSeries`). Overrides always produce a new instance.

Examples
--------
>>> from zedstat.core.config import ZedConfig, DEFAULT_CONFIG
>>> DEFAULT_CONFIG.tails
2
>>> cfg = DEFAULT_CONFIG.with_overrides(tails=1, z_precision=3)
>>> (cfg.tails, cfg.z_precision, DEFAULT_CONFIG.z_precision)
(1, 3, None)
>>> ZedConfig(tails=5).tails
2
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, fields, replace
from typing import Any, Mapping, Optional

from zedstat.core.names import Tails, TWO_TAILED

logger = logging.getLogger(__name__)


def resolve_tails(tails: Any) -> Tails:
    """Return 1 or 2; anything else falls back to two-tailed."""
    if isinstance(tails, bool):
        tails = int(tails)
    if tails == 1:
        return 1
    if tails != 2:
        logger.warning("tails must be 1 or 2, got %r; using two-tailed", tails)
    return TWO_TAILED


def _check_precision(name: str, value: Optional[int]) -> None:
    if value is None:
        return
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValueError(f"{name} must be a non-negative integer or None, got {value!r}")


@dataclass(frozen=True, kw_only=True)
class ZedConfig:
    """
    Options shared by z-score and probability computations.

    Parameters
    ----------
    tails : int, default=2
        Tails used to read off p-values (1 or 2). Other values are treated
        as 2.
    continuity_correction : bool, default=False
        Shrink the observed deviation by 0.5 toward zero before dividing.
    z_precision : int, optional
        Decimal places to round output z-values to. ``None`` keeps full
        precision.
    p_precision : int, optional
        Decimal places to round output p-values to. ``None`` keeps full
        precision.
    """

    tails: int = TWO_TAILED
    continuity_correction: bool = False
    z_precision: Optional[int] = None
    p_precision: Optional[int] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "tails", resolve_tails(self.tails))
        object.__setattr__(
            self, "continuity_correction", bool(self.continuity_correction)
        )
        _check_precision("z_precision", self.z_precision)
        _check_precision("p_precision", self.p_precision)

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any]) -> "ZedConfig":
        """Build a config from a plain mapping, rejecting unknown keys."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(options) - known)
        if unknown:
            raise ValueError(
                f"Unknown configuration option(s): {', '.join(unknown)}; "
                f"expected any of {', '.join(sorted(known))}"
            )
        return cls(**dict(options))

    def with_overrides(self, **changes: Any) -> "ZedConfig":
        """Return a copy with `changes` applied; unknown keys raise ValueError."""
        if not changes:
            return self
        known = {f.name for f in fields(self)}
        unknown = sorted(set(changes) - known)
        if unknown:
            raise ValueError(f"Unknown configuration option(s): {', '.join(unknown)}")
        return replace(self, **changes)


DEFAULT_CONFIG = ZedConfig()


def pick_config(config: Optional[ZedConfig]) -> ZedConfig:
    """Return `config`, or the process-wide default when None."""
    return DEFAULT_CONFIG if config is None else config
