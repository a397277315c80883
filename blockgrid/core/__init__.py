"""Core geometry for block-structured grids.

This module contains the cell-density distributions, the per-axis mesh,
the per-block geometry record and the block lattice built from them.
"""

from blockgrid.core.axis_mesh import AxisMesh
from blockgrid.core.block_grid import BlockGrid
from blockgrid.core.block_info import AxisSpec, BlockInfo, MeshAxis, UniformAxis
from blockgrid.core.density import (
    DensityDistribution,
    GaussianDensity,
    UniformDensity,
    create_density,
)
from blockgrid.core.errors import MeshConservationError, MeshError, MeshStateError

__all__ = [
    "DensityDistribution",
    "UniformDensity",
    "GaussianDensity",
    "create_density",
    "AxisMesh",
    "AxisSpec",
    "UniformAxis",
    "MeshAxis",
    "BlockInfo",
    "BlockGrid",
    "MeshError",
    "MeshStateError",
    "MeshConservationError",
]
