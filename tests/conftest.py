"""Pytest configuration for AlkaneRI tests.

Common fixtures: the C6-C20 alkane ladder from the documentation examples,
in both elution orders.
"""

import numpy as np
import pytest


@pytest.fixture
def alkanes_rt():
    """C6-C20 alkane retention times (minutes), earliest first."""
    return np.array([
        1.88, 2.23, 5.51, 8.05, 10.99,
        14.10, 17.20, 20.20, 22.90, 25.60,
        28.10, 30.50, 32.81, 35.22, 37.30,
    ])


@pytest.fixture
def carbon_numbers():
    """Carbon numbers paired with alkanes_rt."""
    return np.arange(6, 21, dtype=np.float64)


@pytest.fixture
def alkanes_rt_desc(alkanes_rt):
    """Same ladder, latest alkane first."""
    return alkanes_rt[::-1].copy()


@pytest.fixture
def carbon_numbers_desc(carbon_numbers):
    """Carbon numbers paired with alkanes_rt_desc."""
    return carbon_numbers[::-1].copy()


@pytest.fixture(params=["ascending", "descending"])
def ladder_arrays(request, alkanes_rt, carbon_numbers):
    """(alkanes_rt, carbon_numbers) in either elution order."""
    if request.param == "descending":
        return alkanes_rt[::-1].copy(), carbon_numbers[::-1].copy()
    return alkanes_rt, carbon_numbers


# Random seed for reproducibility
@pytest.fixture(scope="session", autouse=True)
def set_random_seed():
    """Set random seed for reproducible tests."""
    np.random.seed(42)
