"""Van Den Dool & Kratz retention index <-> retention time conversion.

The retention index of a compound eluting between alkanes n and N is

    RI = 100 * (n + (N - n) * (rt - t_n) / (t_N - t_n))

which for consecutive alkanes (N = n + 1) is the usual linear-temperature
programmed formula. rt_from_ri is its algebraic inverse.

The (N - n) factor differs from the R package, which assumes every
neighbouring pair is one carbon apart. Results are identical for consecutive
ladders; for ladders that skip alkanes (e.g. even carbon numbers only) the R
formula is off by the step size, while this one still returns 100 * n at
each alkane.

Outside the ladder the first or last interval is extrapolated and a
RetentionRangeWarning is emitted. A retention time of exactly zero has no
retention index and gives NaN.

Examples
--------
>>> from alkaneri.ri import calc_ri, calc_rt
>>> alkanes_rt = [1.88, 2.23, 5.51, 8.05, 10.99, 14.10, 17.20, 20.20,
...               22.90, 25.60, 28.10, 30.50, 32.81, 35.22, 37.30]
>>> carbon_numbers = range(6, 21)
>>> calc_ri(11.237, alkanes_rt, carbon_numbers)
array([1007.94212219])
>>> calc_rt(1007.942, alkanes_rt, carbon_numbers)
array([11.2369962])
"""

import logging

import numpy as np
import numba

from ..constants import RI_SCALE
from .interval import locate_interval, locate_intervals
from .ladder import as_ladder

logger = logging.getLogger(__name__)


# =============================================================================
# Interpolation Kernels (Numba)
# =============================================================================

@numba.jit(nopython=True, cache=True, error_model="numpy")
def _ri_in_interval(rt, pos, alkane_rts, carbon_numbers):
    """Retention index from the alkane pair (pos, pos + 1)."""
    t_n = alkane_rts[pos]
    t_N = alkane_rts[pos + 1]
    n = carbon_numbers[pos]
    N = carbon_numbers[pos + 1]
    return RI_SCALE * (n + (N - n) * (rt - t_n) / (t_N - t_n))


@numba.jit(nopython=True, cache=True, error_model="numpy")
def _rt_in_interval(ri, pos, alkane_rts, carbon_numbers):
    """Retention time from the alkane pair (pos, pos + 1)."""
    t_n = alkane_rts[pos]
    t_N = alkane_rts[pos + 1]
    n = carbon_numbers[pos]
    N = carbon_numbers[pos + 1]
    return t_n + (ri / RI_SCALE - n) / (N - n) * (t_N - t_n)


@numba.njit(parallel=True, cache=True, error_model="numpy")
def _ri_many(rts, positions, alkane_rts, carbon_numbers):
    out = np.empty(rts.size, dtype=np.float64)
    for i in numba.prange(rts.size):
        if rts[i] == 0.0:
            out[i] = np.nan
        else:
            out[i] = _ri_in_interval(rts[i], positions[i], alkane_rts, carbon_numbers)
    return out


@numba.njit(parallel=True, cache=True, error_model="numpy")
def _rt_many(ris, positions, alkane_rts, carbon_numbers):
    out = np.empty(ris.size, dtype=np.float64)
    for i in numba.prange(ris.size):
        out[i] = _rt_in_interval(ris[i], positions[i], alkane_rts, carbon_numbers)
    return out


def _as_queries(values) -> np.ndarray:
    return np.atleast_1d(np.asarray(values, dtype=np.float64)).ravel()


# =============================================================================
# Single Values
# =============================================================================

def ri_from_rt(rt: float, alkanes_rt, carbon_numbers=None) -> float:
    """Retention index of a single retention time.

    Parameters
    ----------
    rt : float
        Compound retention time (same unit as the ladder)
    alkanes_rt : array-like or AlkaneLadder
        Alkane retention times (ascending or descending), or a ladder
    carbon_numbers : array-like, optional
        Carbon number of each alkane; omitted when a ladder is passed

    Returns
    -------
    ri : float
        Van Den Dool & Kratz retention index, NaN for rt == 0

    Raises
    ------
    ConfigurationError
        If the ladder arrays differ in length or hold fewer than two alkanes
    """
    ladder = as_ladder(alkanes_rt, carbon_numbers)
    rt = float(rt)
    if rt == 0.0:
        return np.nan
    pos = locate_interval(rt, ladder.retention_times, "RT", stacklevel=3)
    return float(_ri_in_interval(rt, pos, ladder.retention_times, ladder.carbon_numbers))


def rt_from_ri(ri: float, alkanes_rt, carbon_numbers=None) -> float:
    """Expected retention time of a single retention index.

    Unlike ri_from_rt, ri == 0 is not special-cased; it is extrapolated like
    any other index below the ladder.

    Parameters
    ----------
    ri : float
        Van Den Dool & Kratz retention index
    alkanes_rt : array-like or AlkaneLadder
        Alkane retention times (ascending or descending), or a ladder
    carbon_numbers : array-like, optional
        Carbon number of each alkane; omitted when a ladder is passed

    Returns
    -------
    rt : float
        Expected retention time (same unit as the ladder)
    """
    ladder = as_ladder(alkanes_rt, carbon_numbers)
    ri = float(ri)
    pos = locate_interval(ri, ladder.ri_values, "RI", stacklevel=3)
    return float(_rt_in_interval(ri, pos, ladder.retention_times, ladder.carbon_numbers))


# =============================================================================
# Batch Conversion
# =============================================================================

def calc_ri(rts, alkanes_rt, carbon_numbers=None, stacklevel: int = 2) -> np.ndarray:
    """Calculate Van Den Dool & Kratz retention indices.

    Each element is converted independently, exactly as ri_from_rt would.
    The ladder is validated once, before anything is computed.

    Parameters
    ----------
    rts : float or array-like
        Retention times to convert
    alkanes_rt : array-like or AlkaneLadder
        Alkane retention times (ascending or descending), or a ladder
    carbon_numbers : array-like, optional
        Carbon number of each alkane; omitted when a ladder is passed
    stacklevel : int, default=2
        Frame that out-of-range warnings are attributed to, as in
        warnings.warn (2 is the caller of calc_ri)

    Returns
    -------
    ris : np.ndarray (float64)
        Retention indices in input order, NaN where rt == 0
    """
    ladder = as_ladder(alkanes_rt, carbon_numbers)
    rts = _as_queries(rts)
    zero = rts == 0.0
    positions = locate_intervals(
        rts, ladder.retention_times, "RT", skip=zero, stacklevel=stacklevel + 1
    )
    logger.debug(
        f"Converting {rts.size:,} retention times against {len(ladder)} alkanes"
    )
    return _ri_many(rts, positions, ladder.retention_times, ladder.carbon_numbers)


def calc_rt(ris, alkanes_rt, carbon_numbers=None, stacklevel: int = 2) -> np.ndarray:
    """Back-calculate expected retention times from retention indices.

    Parameters
    ----------
    ris : float or array-like
        Retention indices to convert
    alkanes_rt : array-like or AlkaneLadder
        Alkane retention times (ascending or descending), or a ladder
    carbon_numbers : array-like, optional
        Carbon number of each alkane; omitted when a ladder is passed
    stacklevel : int, default=2
        Frame that out-of-range warnings are attributed to, as in
        warnings.warn (2 is the caller of calc_rt)

    Returns
    -------
    rts : np.ndarray (float64)
        Expected retention times in input order
    """
    ladder = as_ladder(alkanes_rt, carbon_numbers)
    ris = _as_queries(ris)
    positions = locate_intervals(ris, ladder.ri_values, "RI", stacklevel=stacklevel + 1)
    logger.debug(
        f"Converting {ris.size:,} retention indices against {len(ladder)} alkanes"
    )
    return _rt_many(ris, positions, ladder.retention_times, ladder.carbon_numbers)


# Names used by the R package
calc_RI = calc_ri
calc_RT = calc_rt
