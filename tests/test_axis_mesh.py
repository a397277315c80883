"""Tests for AxisMesh."""

import pytest
import numpy as np
from numpy.testing import assert_allclose, assert_array_equal

from blockgrid.core.axis_mesh import AxisMesh
from blockgrid.core.density import DensityDistribution, GaussianDensity, UniformDensity
from blockgrid.core.errors import MeshConservationError, MeshStateError


class _FixedDensity(DensityDistribution):
    """Returns preset widths regardless of the interval."""

    def __init__(self, widths, ghosts=()):
        self.widths = np.asarray(widths, dtype=float)
        self.ghosts = np.asarray(ghosts, dtype=float)

    def compute_spacing(self, start, end, n_cells, ghost_start=0, ghost_end=0):
        return self.widths.copy(), self.ghosts.copy()


class TestAxisMeshConstruction:
    """Tests for AxisMesh construction parameters."""

    def test_parameters(self):
        mesh = AxisMesh(-1.0, 3.0, n_blocks=5, cells_per_block=4)

        assert mesh.start == -1.0
        assert mesh.end == 3.0
        assert mesh.extent == 4.0
        assert mesh.n_blocks == 5
        assert mesh.cells_per_block == 4
        assert mesh.n_cells == 20
        assert not mesh.is_initialized

    def test_empty_domain(self):
        with pytest.raises(ValueError, match="end.*must be > start"):
            AxisMesh(1.0, 1.0, n_blocks=2, cells_per_block=2)

    def test_reversed_domain(self):
        with pytest.raises(ValueError, match="end.*must be > start"):
            AxisMesh(1.0, 0.0, n_blocks=2, cells_per_block=2)

    @pytest.mark.parametrize("n_blocks,cells_per_block", [(0, 4), (-1, 4), (4, 0), (4, -2)])
    def test_non_positive_counts(self, n_blocks, cells_per_block):
        with pytest.raises(ValueError, match="must be > 0"):
            AxisMesh(0.0, 1.0, n_blocks=n_blocks, cells_per_block=cells_per_block)


class TestAxisMeshLifecycle:
    """Init-once contract."""

    def test_init_twice(self, uniform_mesh):
        with pytest.raises(MeshStateError, match="only be called once"):
            uniform_mesh.init(UniformDensity())

    @pytest.mark.parametrize(
        "query",
        [
            lambda m: m.cell_width(0),
            lambda m: m.block_width(0),
            lambda m: m.block_origin(0),
            lambda m: m.spacing_slice(0),
            lambda m: m.uniform,
            lambda m: m.cell_widths,
            lambda m: m.ghost_widths,
            lambda m: m.cell_centers,
        ],
    )
    def test_query_before_init(self, query):
        mesh = AxisMesh(0.0, 1.0, n_blocks=2, cells_per_block=2)
        with pytest.raises(MeshStateError, match="must be initialized"):
            query(mesh)

    def test_default_density_is_uniform(self):
        mesh = AxisMesh(0.0, 1.0, n_blocks=2, cells_per_block=2)
        mesh.init()

        assert mesh.uniform
        assert_array_equal(mesh.cell_widths, np.full(4, 0.25))

    def test_uniform_flag_follows_density(self, gaussian_mesh):
        assert gaussian_mesh.uniform is False

    def test_init_returns_ghost_widths(self):
        mesh = AxisMesh(0.0, 10.0, n_blocks=5, cells_per_block=2)
        ghosts = mesh.init(UniformDensity(), ghost_start=3, ghost_end=3)

        assert_array_equal(ghosts, np.ones(6))
        assert ghosts is mesh.ghost_widths


class TestAxisMeshUniformScenario:
    """Domain [0, 1], 4 blocks of 2 cells, uniform density."""

    def test_cell_widths(self, uniform_mesh):
        assert_array_equal(uniform_mesh.cell_widths, np.full(8, 0.125))
        assert uniform_mesh.cell_width(5) == 0.125

    def test_block_widths(self, uniform_mesh):
        assert_array_equal(uniform_mesh.block_widths, np.full(4, 0.25))

    def test_block_origins(self, uniform_mesh):
        origins = [uniform_mesh.block_origin(k) for k in range(4)]
        assert_allclose(origins, [0.0, 0.25, 0.5, 0.75])

    def test_spacing_slice(self, uniform_mesh):
        assert_array_equal(uniform_mesh.spacing_slice(3), [0.125, 0.125])


class TestAxisMeshInvariants:
    """Mass conservation and block decomposition."""

    @pytest.mark.parametrize("density", [UniformDensity(), GaussianDensity(A=1.0, B=0.25)])
    @pytest.mark.parametrize("n_cells", [1, 2, 100, 10007])
    def test_mass_conservation(self, density, n_cells, rtol):
        mesh = AxisMesh(0.5, 3.25, n_blocks=n_cells, cells_per_block=1)
        mesh.init(density)

        assert mesh.cell_widths.sum() == pytest.approx(mesh.extent, rel=rtol)

    @pytest.mark.parametrize("density", [UniformDensity(), GaussianDensity(A=3.0, B=0.15)])
    def test_block_decomposition(self, density, rtol):
        mesh = AxisMesh(-2.0, 5.0, n_blocks=7, cells_per_block=6)
        mesh.init(density)

        assert mesh.block_widths.sum() == pytest.approx(mesh.extent, rel=rtol)
        for k in range(mesh.n_blocks):
            expected = mesh.cell_widths[k * 6:(k + 1) * 6].sum()
            assert mesh.block_width(k) == pytest.approx(expected, rel=1e-14)

    def test_origin_monotonicity(self, gaussian_mesh):
        assert gaussian_mesh.block_origin(0) == gaussian_mesh.start
        for k in range(gaussian_mesh.n_blocks - 1):
            assert gaussian_mesh.block_origin(k + 1) == pytest.approx(
                gaussian_mesh.block_origin(k) + gaussian_mesh.block_width(k), rel=1e-15
            )
            assert gaussian_mesh.block_origin(k + 1) > gaussian_mesh.block_origin(k)

    def test_last_block_ends_at_domain_end(self, gaussian_mesh, rtol):
        last = gaussian_mesh.n_blocks - 1
        end = gaussian_mesh.block_origin(last) + gaussian_mesh.block_width(last)
        assert end == pytest.approx(gaussian_mesh.end, rel=rtol)

    def test_ghosts_do_not_change_uniform_interior(self):
        plain = AxisMesh(0.0, 10.0, n_blocks=5, cells_per_block=2)
        plain.init(UniformDensity())
        ghosted = AxisMesh(0.0, 10.0, n_blocks=5, cells_per_block=2)
        ghosted.init(UniformDensity(), ghost_start=3, ghost_end=3)

        assert_array_equal(plain.cell_widths, np.ones(10))
        assert_array_equal(ghosted.cell_widths, plain.cell_widths)

    def test_ghosts_keep_gaussian_extent(self, rtol):
        mesh = AxisMesh(0.0, 1.0, n_blocks=4, cells_per_block=4)
        mesh.init(GaussianDensity(), ghost_start=4, ghost_end=2)

        assert mesh.cell_widths.sum() == pytest.approx(1.0, rel=rtol)
        assert mesh.ghost_widths.shape == (6,)


class TestAxisMeshQueries:
    """Bounds checks and derived tables."""

    @pytest.mark.parametrize("index", [-1, 8])
    def test_cell_index_out_of_range(self, uniform_mesh, index):
        with pytest.raises(IndexError, match="cell index"):
            uniform_mesh.cell_width(index)

    @pytest.mark.parametrize("index", [-1, 4])
    def test_block_index_out_of_range(self, uniform_mesh, index):
        with pytest.raises(IndexError, match="block index"):
            uniform_mesh.block_width(index)
        with pytest.raises(IndexError, match="block index"):
            uniform_mesh.block_origin(index)
        with pytest.raises(IndexError, match="block index"):
            uniform_mesh.spacing_slice(index)

    def test_spacing_slice_is_view(self, gaussian_mesh):
        view = gaussian_mesh.spacing_slice(2)

        assert view.shape == (8,)
        assert np.shares_memory(view, gaussian_mesh.cell_widths)
        assert_array_equal(view, gaussian_mesh.cell_widths[16:24])

    def test_tables_are_read_only(self, gaussian_mesh):
        with pytest.raises(ValueError):
            gaussian_mesh.spacing_slice(0)[0] = 1.0
        with pytest.raises(ValueError):
            gaussian_mesh.block_widths[0] = 1.0

    def test_cell_edges_and_centers(self, gaussian_mesh):
        edges = gaussian_mesh.cell_edges
        centers = gaussian_mesh.cell_centers

        assert edges.shape == (33,)
        assert edges[0] == gaussian_mesh.start
        assert edges[-1] == gaussian_mesh.end
        assert np.all(np.diff(edges) > 0)
        assert_allclose(centers, 0.5 * (edges[:-1] + edges[1:]), rtol=1e-13)

    def test_summary(self, gaussian_mesh):
        text = gaussian_mesh.summary()
        assert "4 blocks x 8 cells" in text
        assert "non-uniform" in text

    def test_summary_uninitialized(self):
        assert "uninitialized" in AxisMesh(0.0, 1.0, 2, 2).summary()


class TestAxisMeshDegenerateDensity:
    """Numerical degeneracy fails fast."""

    def test_non_positive_widths(self):
        mesh = AxisMesh(0.0, 1.0, n_blocks=2, cells_per_block=2)

        with pytest.raises(MeshConservationError, match="non-positive"):
            mesh.init(_FixedDensity([0.5, 0.5, 0.5, -0.5]))
        assert not mesh.is_initialized

    def test_extent_not_covered(self):
        mesh = AxisMesh(0.0, 1.0, n_blocks=2, cells_per_block=2)

        with pytest.raises(MeshConservationError, match="sum to"):
            mesh.init(_FixedDensity([0.25, 0.25, 0.25, 0.3]))
        assert not mesh.is_initialized

    def test_wrong_cell_count(self):
        mesh = AxisMesh(0.0, 1.0, n_blocks=2, cells_per_block=2)

        with pytest.raises(MeshConservationError, match="cell widths"):
            mesh.init(_FixedDensity([0.5, 0.5]))

    def test_wrong_ghost_count(self):
        mesh = AxisMesh(0.0, 1.0, n_blocks=2, cells_per_block=2)

        with pytest.raises(MeshConservationError, match="ghost widths"):
            mesh.init(_FixedDensity([0.25] * 4, ghosts=[0.25]), ghost_start=1, ghost_end=1)

    def test_failed_init_can_be_retried(self):
        mesh = AxisMesh(0.0, 1.0, n_blocks=2, cells_per_block=2)

        with pytest.raises(MeshConservationError):
            mesh.init(_FixedDensity([0.1] * 4))
        mesh.init(UniformDensity())

        assert mesh.is_initialized
