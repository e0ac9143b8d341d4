"""Tests for the alkane reference ladder."""

import dataclasses

import numpy as np
import pytest

from alkaneri.constants import STANDARD_ALKANE_RT, STANDARD_CARBON_NUMBERS
from alkaneri.ri.ladder import AlkaneLadder, ConfigurationError, as_ladder


class TestLadderValidation:
    """Test structural checks on construction."""

    def test_length_mismatch(self, alkanes_rt, carbon_numbers):
        """Test that unequal lengths raise ConfigurationError."""
        with pytest.raises(ConfigurationError, match="equal length"):
            AlkaneLadder(alkanes_rt, carbon_numbers[:-1])

    def test_configuration_error_is_value_error(self):
        """Test that callers catching ValueError still catch it."""
        with pytest.raises(ValueError):
            AlkaneLadder([1.0, 2.0, 3.0], [6, 7])

    def test_single_alkane_rejected(self):
        """Test that one alkane cannot define an interval."""
        with pytest.raises(ConfigurationError, match="At least two"):
            AlkaneLadder([5.0], [10])

    def test_two_dimensional_rejected(self):
        """Test that matrices are rejected."""
        with pytest.raises(ConfigurationError, match="one-dimensional"):
            AlkaneLadder(np.ones((2, 2)), np.ones((2, 2)))

    def test_inputs_not_mutated(self, alkanes_rt_desc, carbon_numbers_desc):
        """Test that caller arrays are copied, not reversed in place."""
        rts = alkanes_rt_desc.copy()
        carbons = carbon_numbers_desc.copy()
        AlkaneLadder(rts, carbons)
        np.testing.assert_array_equal(rts, alkanes_rt_desc)
        np.testing.assert_array_equal(carbons, carbon_numbers_desc)


class TestLadderOrientation:
    """Test normalisation to ascending retention time."""

    def test_ascending_kept(self, alkanes_rt, carbon_numbers):
        """Test that an ascending ladder is stored as given."""
        ladder = AlkaneLadder(alkanes_rt, carbon_numbers)
        np.testing.assert_array_equal(ladder.retention_times, alkanes_rt)
        np.testing.assert_array_equal(ladder.carbon_numbers, carbon_numbers)
        assert not ladder.descending_input

    def test_descending_reversed(self, alkanes_rt, carbon_numbers,
                                 alkanes_rt_desc, carbon_numbers_desc):
        """Test that a descending ladder is reversed with its pairing intact."""
        ladder = AlkaneLadder(alkanes_rt_desc, carbon_numbers_desc)
        np.testing.assert_array_equal(ladder.retention_times, alkanes_rt)
        np.testing.assert_array_equal(ladder.carbon_numbers, carbon_numbers)
        assert ladder.descending_input

    def test_lists_accepted(self):
        """Test plain Python sequences."""
        ladder = AlkaneLadder([3.0, 1.0], range(9, 7, -1))
        assert ladder.retention_times.dtype == np.float64
        np.testing.assert_array_equal(ladder.carbon_numbers, [8.0, 9.0])


class TestLadderProperties:
    """Test derived values and constructors."""

    def test_ri_values(self, alkanes_rt, carbon_numbers):
        """Test RI = 100 * carbon number."""
        ladder = AlkaneLadder(alkanes_rt, carbon_numbers)
        np.testing.assert_array_equal(ladder.ri_values, carbon_numbers * 100)

    def test_ranges_and_len(self, alkanes_rt_desc, carbon_numbers_desc):
        """Test ranges are reported earliest alkane first."""
        ladder = AlkaneLadder(alkanes_rt_desc, carbon_numbers_desc)
        assert len(ladder) == 15
        assert ladder.rt_range == (1.88, 37.30)
        assert ladder.ri_range == (600.0, 2000.0)

    def test_standard_ladder(self):
        """Test the documented C6-C20 ladder."""
        ladder = AlkaneLadder.standard()
        np.testing.assert_array_equal(ladder.retention_times, STANDARD_ALKANE_RT)
        np.testing.assert_array_equal(ladder.carbon_numbers, STANDARD_CARBON_NUMBERS)

    def test_from_table_dict(self, alkanes_rt, carbon_numbers):
        """Test building from a dict with the default column names."""
        ladder = AlkaneLadder.from_table({"RT": alkanes_rt, "C_num": carbon_numbers})
        np.testing.assert_array_equal(ladder.retention_times, alkanes_rt)

    def test_from_table_dataframe(self, alkanes_rt, carbon_numbers):
        """Test building from a pandas DataFrame with custom columns."""
        pd = pytest.importorskip("pandas")
        df = pd.DataFrame({"time": alkanes_rt[::-1], "carbons": carbon_numbers[::-1]})
        ladder = AlkaneLadder.from_table(df, rt_column="time", carbon_column="carbons")
        np.testing.assert_array_equal(ladder.retention_times, alkanes_rt)

    def test_from_table_missing_column(self, alkanes_rt):
        """Test that a missing column raises ConfigurationError."""
        with pytest.raises(ConfigurationError, match="C_num"):
            AlkaneLadder.from_table({"RT": alkanes_rt})


class TestAsLadder:
    """Test argument normalisation used by the conversion functions."""

    def test_passthrough(self):
        """Test that a ladder is returned unchanged."""
        ladder = AlkaneLadder.standard()
        assert as_ladder(ladder) is ladder

    def test_ladder_with_carbon_numbers(self, carbon_numbers):
        """Test that a ladder plus carbon numbers is ambiguous."""
        with pytest.raises(ConfigurationError):
            as_ladder(AlkaneLadder.standard(), carbon_numbers)

    def test_missing_carbon_numbers(self, alkanes_rt):
        """Test that raw retention times need carbon numbers."""
        with pytest.raises(ConfigurationError):
            as_ladder(alkanes_rt)


class TestLadderImmutability:
    """Test equality and protection against changes after validation."""

    def test_equal_ladders(self, alkanes_rt, carbon_numbers,
                           alkanes_rt_desc, carbon_numbers_desc):
        """Test array-aware equality, independent of input orientation."""
        assert AlkaneLadder.standard() == AlkaneLadder.standard()
        assert (AlkaneLadder(alkanes_rt, carbon_numbers)
                == AlkaneLadder(alkanes_rt_desc, carbon_numbers_desc))

    def test_unequal_ladders(self, alkanes_rt, carbon_numbers):
        """Test that different ladders and other types compare unequal."""
        shifted = AlkaneLadder(alkanes_rt + 0.01, carbon_numbers)
        assert shifted != AlkaneLadder.standard()
        assert AlkaneLadder(alkanes_rt[:5], carbon_numbers[:5]) != AlkaneLadder.standard()
        assert AlkaneLadder.standard() != "C6-C20"

    def test_arrays_read_only(self):
        """Test that in-place writes to the stored arrays are rejected."""
        ladder = AlkaneLadder.standard()
        with pytest.raises(ValueError):
            ladder.retention_times[0] = 0.5
        with pytest.raises(ValueError):
            ladder.carbon_numbers[-1] = 30.0
        np.testing.assert_array_equal(ladder.retention_times, STANDARD_ALKANE_RT)

    def test_fields_not_reassignable(self, carbon_numbers):
        """Test that a validated ladder cannot be given mismatched arrays."""
        ladder = AlkaneLadder.standard()
        with pytest.raises(dataclasses.FrozenInstanceError):
            ladder.carbon_numbers = carbon_numbers[:3]
        assert len(ladder.carbon_numbers) == len(ladder.retention_times)

    def test_constants_untouched(self):
        """Test that freezing a ladder does not freeze the module constants."""
        AlkaneLadder.standard()
        assert STANDARD_ALKANE_RT.flags.writeable

    def test_read_only_ladder_converts(self):
        """Test that the compiled kernels accept the read-only arrays."""
        from alkaneri.ri import calc_ri, ri_from_rt
        ladder = AlkaneLadder.standard()
        assert ri_from_rt(11.237, ladder) == pytest.approx(1007.942122, abs=1e-5)
        np.testing.assert_allclose(calc_ri([20.20], ladder), [1300.0])
