"""AlkaneRI - Van Den Dool & Kratz retention indices for gas chromatography.

Converts retention times to retention indices, and back, by linear
interpolation between the retention times of an n-alkane ladder.

Examples
--------
>>> from alkaneri import AlkaneLadder, calc_ri
>>> ladder = AlkaneLadder.standard()
>>> calc_ri([11.237, 20.2], ladder)
array([1007.94212219, 1300.        ])
"""

__version__ = "0.1.0"

from alkaneri import ri
from alkaneri import convenience
from alkaneri.ri import (
    AlkaneLadder,
    ConfigurationError,
    RetentionRangeWarning,
    as_ladder,
    calc_ri,
    calc_rt,
    calc_RI,
    calc_RT,
    locate_interval,
    locate_intervals,
    ri_from_rt,
    rt_from_ri,
)

__all__ = [
    "ri",
    "convenience",
    "AlkaneLadder",
    "ConfigurationError",
    "RetentionRangeWarning",
    "as_ladder",
    "calc_ri",
    "calc_rt",
    "calc_RI",
    "calc_RT",
    "locate_interval",
    "locate_intervals",
    "ri_from_rt",
    "rt_from_ri",
]
