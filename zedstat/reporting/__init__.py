"""
zedstat.reporting
=================

Value formatting and tabular views of results and series. Nothing here
prints; callers decide where strings and frames go.
"""
