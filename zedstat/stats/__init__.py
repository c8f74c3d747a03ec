"""
Statistics for deviation ratios.

1. **Common** (zedstat.stats.common):
   Generic numeric building blocks that know nothing about trials or
   series: normal-distribution wrappers, continuity correction, running
   sums and the auxiliary z transforms.

2. **Deviation** (zedstat.stats.deviation):
   The z-score engine and the z/p conversions built on the common layer.

3. **Series** (zedstat.stats.series):
   A stateful accumulator that combines trials into one aggregate z and a
   Stouffer combined z.

Example:
--------
>>> from zedstat.stats.deviation import zscore
>>> zscore(12, 5, variance=16).z_value
1.75
"""
