"""Block lattice spanned by three axis meshes.

BlockGrid owns one initialized AxisMesh per axis and hands out BlockInfo
records for the blocks of the lattice. Block ids are assigned x-fastest:
``block_id = ix + nx * (iy + ny * iz)``.
"""

import logging
from typing import Any, Iterator, List, Sequence, Tuple, Union

import numpy as np

from blockgrid.config.defaults import AXIS_NAMES
from blockgrid.config.mesh_config import MeshConfig
from blockgrid.core.axis_mesh import AxisMesh
from blockgrid.core.block_info import BlockInfo, _axis_number
from blockgrid.core.density import create_density
from blockgrid.core.errors import MeshStateError

logger = logging.getLogger(__name__)


class BlockGrid:
    """Three axis meshes and the blocks they define.

    Attributes:
        meshes: (mesh_x, mesh_y, mesh_z), all initialized
    """

    def __init__(self, mesh_x: AxisMesh, mesh_y: AxisMesh, mesh_z: AxisMesh):
        meshes = (mesh_x, mesh_y, mesh_z)
        for name, mesh in zip(AXIS_NAMES, meshes):
            if not mesh.is_initialized:
                raise MeshStateError(f"Axis mesh {name} must be initialized before building blocks")
        if len({mesh.cells_per_block for mesh in meshes}) != 1:
            raise ValueError(
                "All axis meshes must share cells_per_block, got "
                f"{tuple(mesh.cells_per_block for mesh in meshes)}"
            )
        self.meshes: Tuple[AxisMesh, AxisMesh, AxisMesh] = meshes

    @classmethod
    def from_config(cls, config: MeshConfig) -> "BlockGrid":
        """Build and initialize the three axis meshes described by ``config``.

        Raises:
            ConfigurationError: If the configuration is invalid
        """
        from blockgrid.config.validation import validate_config

        validate_config(config)

        meshes = []
        for name, axis in zip(AXIS_NAMES, config.axes):
            mesh = AxisMesh(axis.start, axis.end, axis.n_blocks, config.cells_per_block)
            density = create_density(axis.density, **axis.density_params())
            mesh.init(density, axis.ghost_start, axis.ghost_end)
            logger.debug(f"axis {name}: {mesh.summary()}")
            meshes.append(mesh)

        grid = cls(*meshes)
        logger.info(
            f"Built block grid {grid.shape[0]}x{grid.shape[1]}x{grid.shape[2]} blocks "
            f"({grid.n_blocks} total, {config.cells_per_block} cells per block per axis)"
        )
        return grid

    @property
    def shape(self) -> Tuple[int, int, int]:
        """Number of blocks along each axis."""
        return tuple(mesh.n_blocks for mesh in self.meshes)

    @property
    def n_blocks(self) -> int:
        nx, ny, nz = self.shape
        return nx * ny * nz

    @property
    def cells_per_block(self) -> int:
        return self.meshes[0].cells_per_block

    def mesh(self, axis: Union[int, str]) -> AxisMesh:
        return self.meshes[_axis_number(axis)]

    def ghost_widths(self, axis: Union[int, str]) -> np.ndarray:
        """Ghost widths of ``axis`` as computed at init, low side first."""
        return self.mesh(axis).ghost_widths

    def _check_index(self, index: Sequence[int]) -> Tuple[int, int, int]:
        if len(index) != 3:
            raise ValueError(f"index must have 3 entries, got {index!r}")
        index = tuple(int(i) for i in index)
        for name, i, n in zip(AXIS_NAMES, index, self.shape):
            if not 0 <= i < n:
                raise IndexError(f"block index {name}={i} out of range [0, {n})")
        return index

    def block_id(self, index: Sequence[int]) -> int:
        ix, iy, iz = self._check_index(index)
        nx, ny, _ = self.shape
        return ix + nx * (iy + ny * iz)

    def block_index(self, block_id: int) -> Tuple[int, int, int]:
        """Inverse of block_id."""
        if not 0 <= block_id < self.n_blocks:
            raise IndexError(f"block id {block_id} out of range [0, {self.n_blocks})")
        nx, ny, _ = self.shape
        return (block_id % nx, (block_id // nx) % ny, block_id // (nx * ny))

    def block(self, index: Sequence[int], payload: Any = None, special: bool = False) -> BlockInfo:
        """BlockInfo for the block at lattice position ``index``."""
        index = self._check_index(index)
        return BlockInfo.from_axis_meshes(
            self.block_id(index), index, *self.meshes, payload=payload, special=special
        )

    def iter_blocks(self) -> Iterator[BlockInfo]:
        for block_id in range(self.n_blocks):
            yield self.block(self.block_index(block_id))

    def blocks(self) -> List[BlockInfo]:
        """All blocks, ordered by block id."""
        return list(self.iter_blocks())

    def summary(self) -> str:
        lines = [f"BlockGrid {self.shape[0]}x{self.shape[1]}x{self.shape[2]} blocks"]
        for name, mesh in zip(AXIS_NAMES, self.meshes):
            lines.append(f"  {name}: {mesh.summary()}")
        return "\n".join(lines)


__all__ = ["BlockGrid"]
