"""Convenience wrappers for compound tables.

These add a converted column to a table of compounds (typically a pandas
DataFrame of picked peaks) without touching the input table.

For performance-critical code, use calc_ri / calc_rt on arrays directly.

Examples
--------
>>> import pandas as pd
>>> from alkaneri import AlkaneLadder
>>> from alkaneri.convenience import annotate_retention_indices
>>> peaks = pd.DataFrame({"name": ["limonene"], "rt": [11.237]})
>>> annotate_retention_indices(peaks, AlkaneLadder.standard())
       name      rt           ri
0  limonene  11.237  1007.942122
"""

import logging
from typing import Any, Optional

import numpy as np

from .constants import COMPOUND_RI_COLUMN, COMPOUND_RT_COLUMN, EXPECTED_RT_COLUMN
from .ri.conversion import calc_ri, calc_rt
from .ri.ladder import as_ladder

logger = logging.getLogger(__name__)


def _column(table: Any, column: str) -> np.ndarray:
    if column not in table:
        raise KeyError(f"Column '{column}' not found in compound table")
    return np.asarray(table[column], dtype=np.float64)


def annotate_retention_indices(
    table: Any,
    alkanes_rt,
    carbon_numbers: Optional[Any] = None,
    rt_column: str = COMPOUND_RT_COLUMN,
    ri_column: str = COMPOUND_RI_COLUMN,
) -> Any:
    """Return a copy of ``table`` with a retention index column added.

    Parameters
    ----------
    table : pandas.DataFrame
        Compound table with a retention time column
    alkanes_rt : array-like or AlkaneLadder
        Alkane retention times, or a ladder
    carbon_numbers : array-like, optional
        Carbon number of each alkane; omitted when a ladder is passed
    rt_column : str, default="rt"
        Column to read retention times from
    ri_column : str, default="ri"
        Column to write retention indices to

    Returns
    -------
    pandas.DataFrame
        Copy of the input with ``ri_column`` set; NaN where rt == 0
    """
    ladder = as_ladder(alkanes_rt, carbon_numbers)
    rts = _column(table, rt_column)
    out = table.copy()
    out[ri_column] = calc_ri(rts, ladder, stacklevel=3)
    logger.info(f"Annotated {len(rts):,} compounds with retention indices")
    return out


def annotate_retention_times(
    table: Any,
    alkanes_rt,
    carbon_numbers: Optional[Any] = None,
    ri_column: str = COMPOUND_RI_COLUMN,
    rt_column: str = EXPECTED_RT_COLUMN,
) -> Any:
    """Return a copy of ``table`` with an expected retention time column.

    Typical use is projecting library retention indices onto the current
    run's alkane ladder to predict where compounds should elute.

    Parameters
    ----------
    table : pandas.DataFrame
        Compound table with a retention index column
    alkanes_rt : array-like or AlkaneLadder
        Alkane retention times, or a ladder
    carbon_numbers : array-like, optional
        Carbon number of each alkane; omitted when a ladder is passed
    ri_column : str, default="ri"
        Column to read retention indices from
    rt_column : str, default="rt_expected"
        Column to write expected retention times to

    Returns
    -------
    pandas.DataFrame
        Copy of the input with ``rt_column`` set
    """
    ladder = as_ladder(alkanes_rt, carbon_numbers)
    ris = _column(table, ri_column)
    out = table.copy()
    out[rt_column] = calc_rt(ris, ladder, stacklevel=3)
    logger.info(f"Annotated {len(ris):,} compounds with expected retention times")
    return out
