"""
zedstat.stats.common.__init__.py
================================

Common numeric utilities.

The functions here operate on plain floats (or sequences of them) and are
independent of the trial/series vocabulary used by the rest of the package.
"""
