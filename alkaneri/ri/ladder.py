"""
Reference alkane ladder: paired retention times and carbon numbers.

A ladder can be given in either elution order. Descending ladders (latest
alkane first) are reversed internally so that every search runs over an
ascending series; the bracketing alkane pairs are the same either way.

No monotonicity check is made. Two alkanes with the same retention time make
the interpolation divide by zero, which yields inf/NaN rather than an error.
"""

from dataclasses import dataclass, field
from typing import Any, Optional, Tuple

import numpy as np

from ..constants import (
    LADDER_CARBON_COLUMN,
    LADDER_RT_COLUMN,
    RI_SCALE,
    STANDARD_ALKANE_RT,
    STANDARD_CARBON_NUMBERS,
)


class ConfigurationError(ValueError):
    """Raised when a reference ladder is structurally invalid."""


def _as_vector(values, name: str) -> np.ndarray:
    arr = np.array(values, dtype=np.float64)
    if arr.ndim != 1:
        raise ConfigurationError(
            f"{name} must be one-dimensional, got shape {arr.shape}"
        )
    return arr


@dataclass(frozen=True, eq=False)
class AlkaneLadder:
    """Alkane standards used to anchor the retention index scale.

    The ladder is immutable: fields cannot be reassigned and the stored
    arrays are read-only.

    Args:
        retention_times: Alkane retention times, ascending or descending
        carbon_numbers: Carbon number of each alkane, paired index-for-index

    Raises:
        ConfigurationError: If lengths differ or fewer than two alkanes are given
    """

    retention_times: np.ndarray
    carbon_numbers: np.ndarray
    descending_input: bool = field(default=False, init=False)

    def __post_init__(self):
        rts = _as_vector(self.retention_times, "alkanes_rt")
        carbons = _as_vector(self.carbon_numbers, "carbon_numbers")

        if rts.size != carbons.size:
            raise ConfigurationError(
                "Supplied alkanes_rt and carbon_numbers must be equal length "
                f"(got {rts.size} and {carbons.size})"
            )
        if rts.size < 2:
            raise ConfigurationError(
                f"At least two alkanes are needed to interpolate, got {rts.size}"
            )

        # Searches run over ascending series
        descending = bool(rts[0] > rts[-1])
        if descending:
            rts = rts[::-1].copy()
            carbons = carbons[::-1].copy()

        rts.setflags(write=False)
        carbons.setflags(write=False)
        object.__setattr__(self, "retention_times", rts)
        object.__setattr__(self, "carbon_numbers", carbons)
        object.__setattr__(self, "descending_input", descending)

    def __eq__(self, other):
        if not isinstance(other, AlkaneLadder):
            return NotImplemented
        return (
            np.array_equal(self.retention_times, other.retention_times)
            and np.array_equal(self.carbon_numbers, other.carbon_numbers)
        )

    __hash__ = None

    def __len__(self) -> int:
        return self.retention_times.size

    @property
    def ri_values(self) -> np.ndarray:
        """Retention index of each alkane (100 * carbon number)."""
        return self.carbon_numbers * RI_SCALE

    @property
    def rt_range(self) -> Tuple[float, float]:
        return float(self.retention_times[0]), float(self.retention_times[-1])

    @property
    def ri_range(self) -> Tuple[float, float]:
        ri = self.ri_values
        return float(ri[0]), float(ri[-1])

    @classmethod
    def standard(cls) -> 'AlkaneLadder':
        """C6-C20 ladder from the documentation examples."""
        return cls(STANDARD_ALKANE_RT, STANDARD_CARBON_NUMBERS)

    @classmethod
    def from_table(
        cls,
        table: Any,
        rt_column: str = LADDER_RT_COLUMN,
        carbon_column: str = LADDER_CARBON_COLUMN,
    ) -> 'AlkaneLadder':
        """Build a ladder from two columns of a table.

        Works with anything indexable by column name, e.g. a pandas DataFrame
        or a dict of arrays.

        Args:
            table: Alkane standards table
            rt_column: Column holding alkane retention times
            carbon_column: Column holding carbon numbers

        Returns:
            AlkaneLadder built from the two columns
        """
        missing = [c for c in (rt_column, carbon_column) if c not in table]
        if missing:
            raise ConfigurationError(f"Alkane table is missing columns: {missing}")
        return cls(np.asarray(table[rt_column]), np.asarray(table[carbon_column]))


def as_ladder(alkanes_rt, carbon_numbers: Optional[Any] = None) -> AlkaneLadder:
    """Return an AlkaneLadder for either a ladder or a pair of sequences."""
    if isinstance(alkanes_rt, AlkaneLadder):
        if carbon_numbers is not None:
            raise ConfigurationError(
                "carbon_numbers must not be given together with an AlkaneLadder"
            )
        return alkanes_rt
    if carbon_numbers is None:
        raise ConfigurationError("carbon_numbers is required with raw retention times")
    return AlkaneLadder(alkanes_rt, carbon_numbers)
