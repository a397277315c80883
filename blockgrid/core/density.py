"""Cell-density distributions for axis meshes.

A density distribution decides how the cell widths of one axis vary across
the domain. Every distribution produces interior widths that sum to the axis
extent, plus optional ghost widths sampled from the same profile beyond
either end of the axis.

Distributions:
    UniformDensity: constant width (end - start) / n
    GaussianDensity: weight 1 / (A exp(-0.5 (x y)^2) + 1),
        small cells around the middle of the axis, large cells toward both ends
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Tuple

import numpy as np

from blockgrid.config.defaults import DEFAULT_GAUSSIAN_A, DEFAULT_GAUSSIAN_B
from blockgrid.config.enums import DensityType


def _check_arguments(start: float, end: float, n_cells: int, ghost_start: int, ghost_end: int):
    if n_cells <= 0:
        raise ValueError(f"n_cells must be > 0, got {n_cells}")
    if end <= start:
        raise ValueError(f"end ({end}) must be > start ({start})")
    if ghost_start < 0 or ghost_end < 0:
        raise ValueError(
            f"Ghost counts must be >= 0: ghost_start={ghost_start}, ghost_end={ghost_end}"
        )


class DensityDistribution(ABC):
    """Strategy that computes the cell widths of one axis.

    Attributes:
        uniform: True if every interior cell has the same width. Axis meshes
            built from a uniform distribution allow closed-form positions.
    """

    uniform: bool = False

    @abstractmethod
    def compute_spacing(
        self,
        start: float,
        end: float,
        n_cells: int,
        ghost_start: int = 0,
        ghost_end: int = 0,
    ) -> Tuple[np.ndarray, np.ndarray]:
        """Compute interior and ghost cell widths on [start, end).

        Args:
            start: Lower bound of the axis
            end: Upper bound of the axis
            n_cells: Number of interior cells
            ghost_start: Ghost cells below start
            ghost_end: Ghost cells above end

        Returns:
            (cell_widths, ghost_widths) tuple of float64 arrays
            - cell_widths: [n_cells], sums to end - start
            - ghost_widths: [ghost_start + ghost_end], low side first
        """


@dataclass(frozen=True)
class UniformDensity(DensityDistribution):
    """Equal cell widths across the axis."""

    uniform: bool = field(default=True, init=False)

    def compute_spacing(self, start, end, n_cells, ghost_start=0, ghost_end=0):
        _check_arguments(start, end, n_cells, ghost_start, ghost_end)

        h = (end - start) / n_cells
        cell_widths = np.full(n_cells, h, dtype=np.float64)
        ghost_widths = np.full(ghost_start + ghost_end, h, dtype=np.float64)
        return cell_widths, ghost_widths


@dataclass(frozen=True)
class GaussianDensity(DensityDistribution):
    """Gaussian-profile density clustering cells around the middle of the axis.

    The relative weight of the cell at 1-based position p among all
    ``total = ghost_start + n_cells + ghost_end`` cells is

        w(p) = 1 / (A * exp(-0.5 * ((p - c) * y)^2) + 1)

    with ``c = (total + 1) / 2`` and ``y = 1 / (B * (total + 1))``. Interior
    weights are rescaled so they sum to the axis extent; ghost cells get the
    same scale factor and are not normalized on their own.

    Attributes:
        A: Clustering sharpness (> 0). The centre cell is about 1 / (A + 1)
            times the size of a far-field cell; A -> 0 approaches uniform.
        B: Width of the tapered region relative to the cell count (> 0).
    """

    A: float = DEFAULT_GAUSSIAN_A
    B: float = DEFAULT_GAUSSIAN_B
    uniform: bool = field(default=False, init=False)

    def __post_init__(self):
        if not (np.isfinite(self.A) and self.A > 0):
            raise ValueError(f"Gaussian density requires finite A > 0, got {self.A}")
        if not (np.isfinite(self.B) and self.B > 0):
            raise ValueError(f"Gaussian density requires finite B > 0, got {self.B}")

    def weights(self, total_cells: int) -> np.ndarray:
        """Relative (unscaled) weights for ``total_cells`` consecutive cells."""
        position = np.arange(1, total_cells + 1, dtype=np.float64)
        x = position - 0.5 * (total_cells + 1)
        y = 1.0 / (self.B * (total_cells + 1))
        return 1.0 / (self.A * np.exp(-0.5 * (x * y) ** 2) + 1.0)

    def compute_spacing(self, start, end, n_cells, ghost_start=0, ghost_end=0):
        _check_arguments(start, end, n_cells, ghost_start, ghost_end)

        total_cells = ghost_start + n_cells + ghost_end
        profile = self.weights(total_cells)

        interior = slice(ghost_start, ghost_start + n_cells)
        profile *= (end - start) / profile[interior].sum()

        cell_widths = profile[interior].copy()
        ghost_widths = np.concatenate((profile[:ghost_start], profile[ghost_start + n_cells:]))
        return cell_widths, ghost_widths


def create_density(kind=DensityType.UNIFORM, **params) -> DensityDistribution:
    """Create a density distribution from its configuration name.

    Args:
        kind: DensityType or its string value ('uniform', 'gaussian')
        **params: Distribution parameters (A, B for GAUSSIAN)

    Raises:
        ValueError: If the kind is unknown or parameters do not apply
    """
    if not isinstance(kind, DensityType):
        kind = DensityType(str(kind).lower())

    if kind == DensityType.UNIFORM:
        if params:
            raise ValueError(f"Uniform density takes no parameters, got {sorted(params)}")
        return UniformDensity()

    elif kind == DensityType.GAUSSIAN:
        return GaussianDensity(**params)

    else:
        raise ValueError(f"Unknown density type: {kind}")


__all__ = [
    "DensityDistribution",
    "UniformDensity",
    "GaussianDensity",
    "create_density",
]
