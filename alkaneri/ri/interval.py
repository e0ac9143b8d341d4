"""Bracketing-interval search over an ascending reference series.

Positions are zero-based: ``pos`` selects the pair
``(series[pos], series[pos + 1])``. Queries below the first element, or at or
beyond the last, are clamped to the first or last interval, so results
outside the ladder are linear extrapolations. A RetentionRangeWarning is
emitted for every clamped query, including one exactly on the last element.
"""

import warnings
from typing import Optional

import numpy as np
import numba


class RetentionRangeWarning(UserWarning):
    """Query lies outside the alkane ladder and is extrapolated."""


# =============================================================================
# Binary Search (Numba)
# =============================================================================

@numba.jit(nopython=True, cache=True)
def count_at_or_below(series: np.ndarray, query: float) -> int:
    """Count elements of an ascending series that are <= query.

    Same result as ``np.searchsorted(series, query, side='right')``.
    A NaN query returns 0.

    Parameters
    ----------
    series : np.ndarray
        Ascending reference values
        Not validated for speed.
    query : float
        Value to locate

    Returns
    -------
    count : int
        Number of leading elements that are <= query (0 to len(series))
    """
    lo, hi = 0, len(series)
    while lo < hi:
        mid = (lo + hi) // 2
        if series[mid] <= query:
            lo = mid + 1
        else:
            hi = mid
    return lo


@numba.jit(nopython=True, cache=True)
def _count_at_or_below_many(series: np.ndarray, queries: np.ndarray) -> np.ndarray:
    out = np.empty(queries.size, dtype=np.int64)
    for i in range(queries.size):
        out[i] = count_at_or_below(series, queries[i])
    return out


# =============================================================================
# Clamping
# =============================================================================

def _warn_below(query: float, series: np.ndarray, quantity: str, stacklevel: int):
    warnings.warn(
        f"Compound {quantity} {query:g} is earlier than that of the smallest "
        f"alkane ({series[0]:g}); extrapolating from the first interval.",
        RetentionRangeWarning,
        stacklevel=stacklevel + 1,
    )


def _warn_above(query: float, series: np.ndarray, quantity: str, stacklevel: int):
    warnings.warn(
        f"Compound {quantity} {query:g} is at or later than that of the largest "
        f"alkane ({series[-1]:g}); extrapolating from the last interval.",
        RetentionRangeWarning,
        stacklevel=stacklevel + 1,
    )


def locate_interval(
    query: float,
    series: np.ndarray,
    quantity: str = "RT",
    stacklevel: int = 2,
) -> int:
    """Find the bracketing interval for a single query.

    Parameters
    ----------
    query : float
        Retention time or retention index to locate
    series : np.ndarray
        Ascending reference series with at least two elements
    quantity : str, default="RT"
        Name used in the out-of-range warning ("RT" or "RI")
    stacklevel : int, default=2
        Passed on to warnings.warn

    Returns
    -------
    pos : int
        Zero-based left endpoint of the bracketing pair

    Examples
    --------
    >>> series = np.array([1.88, 2.23, 5.51, 8.05])
    >>> locate_interval(3.0, series)
    1
    >>> locate_interval(9.0, series)  # warns, clamped to last interval
    2
    """
    query = float(query)
    n = len(series)
    count = count_at_or_below(series, query)

    if count == 0:
        if not np.isnan(query):
            _warn_below(query, series, quantity, stacklevel)
        return 0
    if count == n:
        _warn_above(query, series, quantity, stacklevel)
        return n - 2
    return count - 1


def locate_intervals(
    queries: np.ndarray,
    series: np.ndarray,
    quantity: str = "RT",
    skip: Optional[np.ndarray] = None,
    stacklevel: int = 2,
) -> np.ndarray:
    """Vectorised locate_interval.

    Parameters
    ----------
    queries : np.ndarray
        Values to locate
    series : np.ndarray
        Ascending reference series with at least two elements
    quantity : str, default="RT"
        Name used in the out-of-range warnings
    skip : np.ndarray (bool), optional
        Elements that are not converted; they never warn
    stacklevel : int, default=2
        Passed on to warnings.warn

    Returns
    -------
    positions : np.ndarray (int64)
        Zero-based left endpoints, one per query, in input order
    """
    queries = np.asarray(queries, dtype=np.float64)
    n = len(series)
    counts = _count_at_or_below_many(series, queries)
    positions = np.clip(counts - 1, 0, n - 2)

    below = (counts == 0) & ~np.isnan(queries)
    above = counts == n
    if skip is not None:
        below &= ~skip
        above &= ~skip

    for query in queries[below]:
        _warn_below(query, series, quantity, stacklevel)
    for query in queries[above]:
        _warn_above(query, series, quantity, stacklevel)

    return positions
