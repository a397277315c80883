"""Per-block geometry record.

A BlockInfo carries the identity of one block (id, 3D lattice index, opaque
payload) together with one AxisSpec per spatial axis. The axis spec decides
how positions inside the block are evaluated:

    UniformAxis: constant spacing, closed form origin + h * (i + 0.5)
    MeshAxis: reference to an initialized AxisMesh and a block index along
        that axis. Uniform meshes still use the closed form; non-uniform
        meshes sum the block's cell widths.

MeshAxis holds a reference to its AxisMesh, so the spacing data it reads
stays alive as long as the record does.
"""

from dataclasses import dataclass, field
from typing import Any, Optional, Tuple, Union

import numpy as np

from blockgrid.config.defaults import AXIS_NAMES, EMPTY_BLOCK_ID
from blockgrid.core.axis_mesh import AxisMesh
from blockgrid.core.errors import MeshStateError


@dataclass(frozen=True)
class UniformAxis:
    """Axis with constant cell spacing, independent of any AxisMesh.

    Attributes:
        origin: Lower bound of the block along the axis
        extent: Physical width of the block along the axis
        spacing: Cell width
    """

    origin: float
    extent: float
    spacing: float

    uniform = True

    def __post_init__(self):
        if not self.spacing > 0:
            raise ValueError(f"spacing must be > 0, got {self.spacing}")
        if not self.extent > 0:
            raise ValueError(f"extent must be > 0, got {self.extent}")

    @property
    def widths(self) -> None:
        return None

    def offset(self, index: int) -> float:
        return self.spacing * (index + 0.5)

    def offsets(self, n_cells: int) -> np.ndarray:
        if n_cells < 0:
            raise ValueError(f"n_cells must be >= 0, got {n_cells}")
        return self.spacing * (np.arange(n_cells, dtype=np.float64) + 0.5)


@dataclass(frozen=True)
class MeshAxis:
    """Axis backed by block ``block_index`` of an initialized AxisMesh."""

    mesh: AxisMesh
    block_index: int

    def __post_init__(self):
        if not self.mesh.is_initialized:
            raise MeshStateError("MeshAxis requires an initialized AxisMesh")
        if not 0 <= self.block_index < self.mesh.n_blocks:
            raise IndexError(
                f"block index {self.block_index} out of range [0, {self.mesh.n_blocks})"
            )

    @property
    def uniform(self) -> bool:
        return self.mesh.uniform

    @property
    def origin(self) -> float:
        return self.mesh.block_origin(self.block_index)

    @property
    def extent(self) -> float:
        return self.mesh.block_width(self.block_index)

    @property
    def spacing(self) -> Optional[float]:
        if self.mesh.uniform:
            return float(self.widths[0])
        return None

    @property
    def widths(self) -> np.ndarray:
        return self.mesh.spacing_slice(self.block_index)

    def offset(self, index: int) -> float:
        if self.mesh.uniform:
            return self.spacing * (index + 0.5)

        widths = self.widths
        if not 0 <= index < widths.size:
            raise IndexError(f"cell index {index} out of range [0, {widths.size})")
        return float(widths[:index].sum() + 0.5 * widths[index])

    def offsets(self, n_cells: int) -> np.ndarray:
        widths = self.widths
        if n_cells < 0:
            raise ValueError(f"n_cells must be >= 0, got {n_cells}")
        if n_cells > widths.size:
            raise IndexError(f"block has {widths.size} cells, requested {n_cells}")
        return np.cumsum(widths[:n_cells]) - 0.5 * widths[:n_cells]


AxisSpec = Union[UniformAxis, MeshAxis]


@dataclass(frozen=True)
class BlockInfo:
    """Geometry and identity of one block.

    A default-constructed BlockInfo is an empty placeholder (block id -1,
    no axes) suitable for pre-sizing containers; geometry queries on it
    raise MeshStateError.

    Attributes:
        block_id: Process-local block id (not unique across processes)
        index: Block index (ix, iy, iz) in the block lattice
        axes: One AxisSpec per spatial axis (x, y, z)
        payload: Opaque reference to the block's field data, owned by the caller
        special: Marker flag for the block container
        h: Block size of the legacy uniform construction, None otherwise
        h_gridpoint: Grid spacing of the legacy uniform construction, None otherwise

    Example:
        >>> info = BlockInfo.from_axis_meshes(0, (0, 0, 0), mesh_x, mesh_y, mesh_z)
        >>> info.position(0, 0, 0)
        array([0.0625, 0.0625, 0.0625])
    """

    block_id: int = EMPTY_BLOCK_ID
    index: Tuple[int, int, int] = (0, 0, 0)
    axes: Tuple[AxisSpec, ...] = ()
    payload: Any = field(default=None, compare=False)
    special: bool = False
    h: Optional[float] = None
    h_gridpoint: Optional[float] = None

    def __post_init__(self):
        index = tuple(int(i) for i in self.index)
        if len(index) != 3:
            raise ValueError(f"index must have 3 entries, got {self.index!r}")
        object.__setattr__(self, "index", index)

        axes = tuple(self.axes)
        if len(axes) not in (0, 3):
            raise ValueError(f"BlockInfo needs 3 axis specs (or none for a placeholder), got {len(axes)}")
        object.__setattr__(self, "axes", axes)

    @classmethod
    def uniform(
        cls,
        block_id: int,
        index,
        origin,
        block_size: float,
        h_gridpoint: float,
        payload: Any = None,
        special: bool = False,
    ) -> "BlockInfo":
        """Cubic block with the same spacing on every axis.

        Args:
            block_id: Block id
            index: Block index (ix, iy, iz)
            origin: Lower corner (x, y, z) of the block
            block_size: Physical width of the block on every axis
            h_gridpoint: Cell spacing on every axis
        """
        if len(origin) != 3:
            raise ValueError(f"origin must have 3 entries, got {origin!r}")
        axes = tuple(UniformAxis(float(o), block_size, h_gridpoint) for o in origin)
        return cls(
            block_id=block_id,
            index=index,
            axes=axes,
            payload=payload,
            special=special,
            h=block_size,
            h_gridpoint=h_gridpoint,
        )

    @classmethod
    def from_axis_meshes(
        cls,
        block_id: int,
        index,
        mesh_x: AxisMesh,
        mesh_y: AxisMesh,
        mesh_z: AxisMesh,
        payload: Any = None,
        special: bool = False,
    ) -> "BlockInfo":
        """Block ``index`` of the lattice spanned by three axis meshes."""
        if len(index) != 3:
            raise ValueError(f"index must have 3 entries, got {index!r}")
        axes = tuple(
            MeshAxis(mesh, int(i)) for mesh, i in zip((mesh_x, mesh_y, mesh_z), index)
        )
        return cls(block_id=block_id, index=index, axes=axes, payload=payload, special=special)

    # ------------------------------------------------------------------

    @property
    def is_empty(self) -> bool:
        return not self.axes

    def _require_axes(self):
        if not self.axes:
            raise MeshStateError("Empty BlockInfo placeholder has no geometry")

    @property
    def origin(self) -> np.ndarray:
        """Lower corner of the block."""
        self._require_axes()
        return np.array([axis.origin for axis in self.axes], dtype=np.float64)

    @property
    def block_extent(self) -> np.ndarray:
        """Physical width of the block along each axis."""
        self._require_axes()
        return np.array([axis.extent for axis in self.axes], dtype=np.float64)

    @property
    def grid_spacing(self) -> Tuple[Optional[float], ...]:
        """Per-axis cell spacing; None for non-uniform axes."""
        self._require_axes()
        return tuple(axis.spacing for axis in self.axes)

    @property
    def uniform_axes(self) -> Tuple[bool, ...]:
        self._require_axes()
        return tuple(axis.uniform for axis in self.axes)

    def spacing(self, axis: Union[int, str]) -> Optional[np.ndarray]:
        """Cell widths of this block along ``axis``.

        Returns the AxisMesh slice for mesh-backed axes, None for UniformAxis.
        """
        self._require_axes()
        return self.axes[_axis_number(axis)].widths

    def position(self, ix: int, iy: int, iz: Optional[int] = None) -> np.ndarray:
        """Physical coordinates of the cell centre (ix, iy[, iz]).

        Returns:
            float64 array of length 2 (iz omitted) or 3
        """
        self._require_axes()
        indices = (ix, iy) if iz is None else (ix, iy, iz)
        return np.array(
            [axis.origin + axis.offset(int(i)) for axis, i in zip(self.axes, indices)],
            dtype=np.float64,
        )

    def cell_centers(self, axis: Union[int, str], n_cells: int) -> np.ndarray:
        """Coordinates of the first ``n_cells`` cell centres along ``axis``."""
        self._require_axes()
        spec = self.axes[_axis_number(axis)]
        return spec.origin + spec.offsets(n_cells)


def _axis_number(axis: Union[int, str]) -> int:
    if isinstance(axis, str):
        try:
            return AXIS_NAMES.index(axis.lower())
        except ValueError:
            raise ValueError(f"Unknown axis {axis!r}, expected one of {AXIS_NAMES}") from None
    if not 0 <= axis < 3:
        raise IndexError(f"axis {axis} out of range [0, 3)")
    return axis


__all__ = [
    "UniformAxis",
    "MeshAxis",
    "AxisSpec",
    "BlockInfo",
]
