"""Pytest configuration and shared fixtures for blockgrid tests."""

import matplotlib

matplotlib.use("Agg")

import pytest

from blockgrid.core.axis_mesh import AxisMesh
from blockgrid.core.block_grid import BlockGrid
from blockgrid.core.density import GaussianDensity, UniformDensity


# Fixtures for axis meshes


@pytest.fixture
def uniform_mesh():
    """Unit interval, 4 blocks of 2 cells, uniform spacing."""
    mesh = AxisMesh(0.0, 1.0, n_blocks=4, cells_per_block=2)
    mesh.init(UniformDensity())
    return mesh


@pytest.fixture
def gaussian_mesh():
    """[0, 2] with 4 blocks of 8 cells, Gaussian spacing."""
    mesh = AxisMesh(0.0, 2.0, n_blocks=4, cells_per_block=8)
    mesh.init(GaussianDensity(A=1.0, B=0.25))
    return mesh


@pytest.fixture
def make_uniform_mesh():
    """Factory for initialized uniform meshes."""
    def _make(start=0.0, end=1.0, n_blocks=4, cells_per_block=2):
        mesh = AxisMesh(start, end, n_blocks=n_blocks, cells_per_block=cells_per_block)
        mesh.init(UniformDensity())
        return mesh
    return _make


# Fixtures for block grids


@pytest.fixture
def uniform_grid(make_uniform_mesh):
    """4 x 4 x 4 blocks on the unit cube, 2 cells per block."""
    return BlockGrid(make_uniform_mesh(), make_uniform_mesh(), make_uniform_mesh())


@pytest.fixture
def mixed_grid(make_uniform_mesh):
    """Gaussian x axis, uniform y and z axes, 8 cells per block."""
    mesh_x = AxisMesh(-1.0, 1.0, n_blocks=3, cells_per_block=8)
    mesh_x.init(GaussianDensity(A=2.0, B=0.2), ghost_start=3, ghost_end=3)
    mesh_y = make_uniform_mesh(0.0, 2.0, n_blocks=2, cells_per_block=8)
    mesh_z = make_uniform_mesh(0.0, 1.0, n_blocks=1, cells_per_block=8)
    return BlockGrid(mesh_x, mesh_y, mesh_z)


# Utility fixtures for testing


@pytest.fixture
def rtol():
    """Relative tolerance for the mass-conservation invariant."""
    return 1e-10


@pytest.fixture
def atol():
    """Default absolute tolerance."""
    return 1e-12
