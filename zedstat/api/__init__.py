"""
zedstat.api - User-Friendly Facade
==================================

`Zed` binds a configuration once and exposes every operation of the package
as a method, so callers do not have to thread a `ZedConfig` through each
call.

Examples
--------
>>> from zedstat.api import Zed
>>> zed = Zed(tails=1)
>>> zed.p_to_z(0.5)
0.0
"""

from zedstat.api.zed import Zed

__all__ = ["Zed"]
