"""
zedstat.core
============

Typed building blocks shared across the package: configuration, names and
result containers. Nothing in here performs statistics.
"""
