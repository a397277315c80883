"""
Default Configuration Constants for blockgrid

This module contains the numerical constants used throughout the package.
The default mesh layout (domain, block counts) lives in defaults.yaml and is
read through yaml_loader.

IMPORTANT Import Policies:
    1. DO NOT use: from blockgrid.config.defaults import *

    2. DO use explicit imports:
       from blockgrid.config.defaults import DEFAULT_MASS_CONSERVATION_TOL
"""

# =============================================================================
# Axis Names
# =============================================================================

AXIS_NAMES = ("x", "y", "z")

# =============================================================================
# Gaussian Density Defaults
# =============================================================================

# Clustering sharpness. Larger values shrink the centre cells further.
DEFAULT_GAUSSIAN_A = 1.0

# Width of the tapered region relative to the axis cell count
DEFAULT_GAUSSIAN_B = 0.25

# Below this A the Gaussian profile is nearly uniform; a uniform density
# gives the same grid with the closed-form position fast path.
GAUSSIAN_A_NEAR_UNIFORM = 1.0e-6

# =============================================================================
# Tolerance Defaults (Validation)
# =============================================================================

# Relative tolerance for sum(cell widths) == axis extent
# Checked once after every AxisMesh.init
DEFAULT_MASS_CONSERVATION_TOL = 1e-10

# =============================================================================
# Block Metadata Defaults
# =============================================================================

# Block id of an empty placeholder record
EMPTY_BLOCK_ID = -1
