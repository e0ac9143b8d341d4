"""Constants for Van Den Dool & Kratz retention index calculations.

Retention indices are defined relative to the n-alkanes: an alkane with n
carbon atoms elutes at RI = 100 * n by definition, on any column.

Sources
-------
- Van Den Dool & Kratz, J. Chromatogr. 11 (1963) 463-471
- NIST gas chromatographic retention data: https://webbook.nist.gov/chemistry/gc-ri/
"""

import numpy as np

# =============================================================================
# Retention Index Scale
# =============================================================================

# RI units per carbon atom
RI_SCALE = 100.0

# =============================================================================
# Standard Alkane Ladder (C6-C20)
# =============================================================================

# Example temperature-programmed run, retention times in minutes.
# Used in the documentation examples and as a test fixture.
STANDARD_ALKANE_RT = np.array([
    1.88, 2.23, 5.51, 8.05, 10.99,
    14.10, 17.20, 20.20, 22.90, 25.60,
    28.10, 30.50, 32.81, 35.22, 37.30,
], dtype=np.float64)

STANDARD_CARBON_NUMBERS = np.arange(6, 21, dtype=np.float64)

# =============================================================================
# Table Column Defaults
# =============================================================================

# Column names of an alkane standards table (same as the R package examples)
LADDER_RT_COLUMN = "RT"
LADDER_CARBON_COLUMN = "C_num"

# Column names used when annotating compound tables
COMPOUND_RT_COLUMN = "rt"
COMPOUND_RI_COLUMN = "ri"
EXPECTED_RT_COLUMN = "rt_expected"
