"""One-dimensional block-partitioned mesh along a single spatial axis.

An AxisMesh splits the interval [start, end) into ``n_blocks`` blocks of
``cells_per_block`` cells each. The cell widths come from a
DensityDistribution applied once by ``init``; afterwards the mesh is
read-only and safe to share between threads.

Tables owned by the mesh (all float64, read-only after init):
    cell_widths: [n_cells]
    block_widths: [n_blocks], sum of the cells of each block
    block_origins: [n_blocks], lower bound of each block
    ghost_widths: [ghost_start + ghost_end], low side first
"""

import logging
from typing import Optional

import numpy as np

from blockgrid.config.defaults import DEFAULT_MASS_CONSERVATION_TOL
from blockgrid.core.density import DensityDistribution, UniformDensity
from blockgrid.core.errors import MeshConservationError, MeshStateError

logger = logging.getLogger(__name__)


def _readonly(array: np.ndarray) -> np.ndarray:
    array.flags.writeable = False
    return array


class AxisMesh:
    """Cell and block widths along one axis.

    Example:
        >>> mesh = AxisMesh(0.0, 1.0, n_blocks=4, cells_per_block=2)
        >>> mesh.init(UniformDensity())
        >>> mesh.block_origin(2)
        0.5
    """

    def __init__(
        self,
        start: float,
        end: float,
        n_blocks: int,
        cells_per_block: int,
        tolerance: float = DEFAULT_MASS_CONSERVATION_TOL,
    ):
        """Create an uninitialized axis mesh.

        Args:
            start: Lower bound of the axis domain
            end: Upper bound of the axis domain
            n_blocks: Number of blocks along the axis
            cells_per_block: Interior cells per block
            tolerance: Relative tolerance for the mass-conservation check

        Raises:
            ValueError: If the domain is empty or a count is not positive
        """
        if not end > start:
            raise ValueError(f"end ({end}) must be > start ({start})")
        if n_blocks <= 0:
            raise ValueError(f"n_blocks must be > 0, got {n_blocks}")
        if cells_per_block <= 0:
            raise ValueError(f"cells_per_block must be > 0, got {cells_per_block}")

        self._start = float(start)
        self._end = float(end)
        self._n_blocks = int(n_blocks)
        self._cells_per_block = int(cells_per_block)
        self._tolerance = tolerance

        self._uniform = True
        self._initialized = False
        self._cell_widths: Optional[np.ndarray] = None
        self._block_widths: Optional[np.ndarray] = None
        self._block_origins: Optional[np.ndarray] = None
        self._ghost_widths: Optional[np.ndarray] = None

    def init(
        self,
        density: Optional[DensityDistribution] = None,
        ghost_start: int = 0,
        ghost_end: int = 0,
    ) -> np.ndarray:
        """Distribute cell widths with ``density`` (uniform if omitted).

        Args:
            density: Cell-density distribution
            ghost_start: Ghost cells below start
            ghost_end: Ghost cells above end

        Returns:
            Ghost widths [ghost_start + ghost_end], low side first

        Raises:
            MeshStateError: If the mesh is already initialized
            MeshConservationError: If the widths are not positive or do not
                sum to the extent; the mesh stays uninitialized
        """
        if self._initialized:
            raise MeshStateError("AxisMesh.init may only be called once")
        if density is None:
            density = UniformDensity()

        cell_widths, ghost_widths = density.compute_spacing(
            self._start, self._end, self.n_cells, ghost_start, ghost_end
        )
        cell_widths = np.ascontiguousarray(cell_widths, dtype=np.float64)
        ghost_widths = np.ascontiguousarray(ghost_widths, dtype=np.float64)
        self._check_widths(density, cell_widths, ghost_widths, ghost_start + ghost_end)

        block_widths = cell_widths.reshape(self._n_blocks, self._cells_per_block).sum(axis=1)

        # origin[k + 1] == origin[k] + width[k] holds exactly
        block_origins = np.cumsum(np.concatenate(([self._start], block_widths[:-1])))

        self._cell_widths = _readonly(cell_widths)
        self._block_widths = _readonly(block_widths)
        self._block_origins = _readonly(block_origins)
        self._ghost_widths = _readonly(ghost_widths)
        self._uniform = density.uniform
        self._initialized = True

        logger.debug(
            f"AxisMesh [{self._start}, {self._end}) initialized with {density}: "
            f"{self._n_blocks} blocks x {self._cells_per_block} cells, "
            f"min width {cell_widths.min():.6g}, max width {cell_widths.max():.6g}"
        )
        return self._ghost_widths

    def _check_widths(self, density, cell_widths, ghost_widths, n_ghosts):
        if cell_widths.shape != (self.n_cells,):
            raise MeshConservationError(
                f"{density} returned {cell_widths.shape} cell widths, expected ({self.n_cells},)"
            )
        if ghost_widths.shape != (n_ghosts,):
            raise MeshConservationError(
                f"{density} returned {ghost_widths.shape} ghost widths, expected ({n_ghosts},)"
            )
        if not (np.all(np.isfinite(cell_widths)) and np.all(cell_widths > 0)):
            raise MeshConservationError(f"{density} produced non-positive cell widths")
        if not (np.all(np.isfinite(ghost_widths)) and np.all(ghost_widths > 0)):
            raise MeshConservationError(f"{density} produced non-positive ghost widths")

        total = cell_widths.sum()
        rel_error = abs(total - self.extent) / abs(self.extent)
        if rel_error > self._tolerance:
            raise MeshConservationError(
                f"Cell widths sum to {total!r}, expected extent {self.extent!r} "
                f"(relative error {rel_error:.3e} > {self._tolerance:.1e})"
            )

    def _require_initialized(self):
        if not self._initialized:
            raise MeshStateError("AxisMesh must be initialized with init() before use")

    def _check_block(self, block_index: int):
        self._require_initialized()
        if not 0 <= block_index < self._n_blocks:
            raise IndexError(f"block index {block_index} out of range [0, {self._n_blocks})")

    # ------------------------------------------------------------------
    # Construction parameters

    @property
    def start(self) -> float:
        return self._start

    @property
    def end(self) -> float:
        return self._end

    @property
    def extent(self) -> float:
        return self._end - self._start

    @property
    def n_blocks(self) -> int:
        return self._n_blocks

    @property
    def cells_per_block(self) -> int:
        return self._cells_per_block

    @property
    def n_cells(self) -> int:
        return self._n_blocks * self._cells_per_block

    @property
    def uniform(self) -> bool:
        """True if the mesh was built from a uniform density."""
        self._require_initialized()
        return self._uniform

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    # ------------------------------------------------------------------
    # Point queries

    def cell_width(self, cell_index: int) -> float:
        """Width of interior cell ``cell_index``."""
        self._require_initialized()
        if not 0 <= cell_index < self.n_cells:
            raise IndexError(f"cell index {cell_index} out of range [0, {self.n_cells})")
        return float(self._cell_widths[cell_index])

    def block_width(self, block_index: int) -> float:
        """Physical width of block ``block_index``."""
        self._check_block(block_index)
        return float(self._block_widths[block_index])

    def block_origin(self, block_index: int) -> float:
        """Lower bound of block ``block_index``."""
        self._check_block(block_index)
        return float(self._block_origins[block_index])

    def spacing_slice(self, block_index: int) -> np.ndarray:
        """Read-only view of the ``cells_per_block`` cell widths of a block."""
        self._check_block(block_index)
        offset = block_index * self._cells_per_block
        return self._cell_widths[offset:offset + self._cells_per_block]

    # ------------------------------------------------------------------
    # Whole tables (read-only)

    @property
    def cell_widths(self) -> np.ndarray:
        self._require_initialized()
        return self._cell_widths

    @property
    def block_widths(self) -> np.ndarray:
        self._require_initialized()
        return self._block_widths

    @property
    def block_origins(self) -> np.ndarray:
        self._require_initialized()
        return self._block_origins

    @property
    def ghost_widths(self) -> np.ndarray:
        self._require_initialized()
        return self._ghost_widths

    @property
    def cell_edges(self) -> np.ndarray:
        """Cell boundaries [n_cells + 1], from start to end."""
        self._require_initialized()
        edges = np.concatenate(([self._start], self._start + np.cumsum(self._cell_widths)))
        edges[-1] = self._end
        return edges

    @property
    def cell_centers(self) -> np.ndarray:
        """Cell centres [n_cells]."""
        edges = self.cell_edges
        return edges[:-1] + 0.5 * self._cell_widths

    def summary(self) -> str:
        """One-line human-readable description of the mesh."""
        if not self._initialized:
            return (
                f"[{self._start:g}, {self._end:g}) {self._n_blocks} blocks x "
                f"{self._cells_per_block} cells (uninitialized)"
            )
        kind = "uniform" if self._uniform else "non-uniform"
        return (
            f"[{self._start:g}, {self._end:g}) {self._n_blocks} blocks x "
            f"{self._cells_per_block} cells, {kind}, "
            f"h_min = {self._cell_widths.min():.6g}, h_max = {self._cell_widths.max():.6g}, "
            f"{self._ghost_widths.size} ghost cells"
        )

    def __repr__(self) -> str:
        return (
            f"AxisMesh(start={self._start!r}, end={self._end!r}, n_blocks={self._n_blocks}, "
            f"cells_per_block={self._cells_per_block}, initialized={self._initialized})"
        )


__all__ = ["AxisMesh"]
