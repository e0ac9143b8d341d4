"""Retention index calculation against an n-alkane ladder.

Core algorithms:
1. Binary search for the bracketing alkane pair (O(log n))
2. Van Den Dool & Kratz interpolation, RT -> RI and RI -> RT
3. Linear extrapolation from the end intervals outside the ladder
"""

from .ladder import AlkaneLadder, ConfigurationError, as_ladder
from .interval import (
    RetentionRangeWarning,
    count_at_or_below,
    locate_interval,
    locate_intervals,
)
from .conversion import (
    calc_ri,
    calc_rt,
    calc_RI,
    calc_RT,
    ri_from_rt,
    rt_from_ri,
)

__all__ = [
    # Ladder
    'AlkaneLadder',
    'ConfigurationError',
    'as_ladder',
    # Interval search
    'RetentionRangeWarning',
    'count_at_or_below',
    'locate_interval',
    'locate_intervals',
    # Conversion
    'calc_ri',
    'calc_rt',
    'calc_RI',
    'calc_RT',
    'ri_from_rt',
    'rt_from_ri',
]
