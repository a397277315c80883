"""Block-Structured Grid Geometry

Geometric backbone for block-structured solvers: per-axis meshes with
pluggable cell-density distributions and per-block geometry records that
answer "how wide is cell i?" and "where is grid point (ix, iy[, iz])?".

Key Principles:
- One AxisMesh per spatial axis, initialized once, read-only afterwards
- Interior cell widths always sum to the axis extent
- Ghost widths follow the same density beyond the domain ends
- Uniform axes use closed-form positions, stretched axes sum cell widths

Version: 1.0
"""

__version__ = "1.0"

# Core data structures
from blockgrid.core.density import (
    DensityDistribution,
    GaussianDensity,
    UniformDensity,
    create_density,
)
from blockgrid.core.axis_mesh import AxisMesh
from blockgrid.core.block_info import BlockInfo, MeshAxis, UniformAxis
from blockgrid.core.block_grid import BlockGrid
from blockgrid.core.errors import MeshConservationError, MeshError, MeshStateError

# Configuration
from blockgrid.config import AxisConfig, DensityType, MeshConfig

__all__ = [
    # Version
    "__version__",
    # Density distributions
    "DensityDistribution",
    "UniformDensity",
    "GaussianDensity",
    "create_density",
    # Geometry
    "AxisMesh",
    "BlockInfo",
    "UniformAxis",
    "MeshAxis",
    "BlockGrid",
    # Errors
    "MeshError",
    "MeshStateError",
    "MeshConservationError",
    # Configuration
    "AxisConfig",
    "MeshConfig",
    "DensityType",
]
