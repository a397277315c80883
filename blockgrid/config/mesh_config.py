"""Mesh Configuration - Single Source of Truth (SSOT)

This module provides the configuration dataclasses for a block-structured
mesh: one AxisConfig per spatial axis plus the shared cells-per-block count.

Import Policy:
    from blockgrid.config.mesh_config import AxisConfig, MeshConfig

DO NOT use: from blockgrid.config.mesh_config import *
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields
from pathlib import Path

from blockgrid.config.defaults import AXIS_NAMES
from blockgrid.config.enums import DensityType
from blockgrid.config.yaml_loader import get_default, load_yaml


def _parse_density(value) -> DensityType:
    if isinstance(value, DensityType):
        return value
    return DensityType(str(value).lower())


@dataclass
class AxisConfig:
    """Construction parameters for one axis mesh.

    Attributes:
        start, end: Domain bounds along the axis
        n_blocks: Number of blocks along the axis
        density: Cell-density distribution
        gaussian_a, gaussian_b: Gaussian density parameters (ignored for UNIFORM)
        ghost_start, ghost_end: Ghost cells required by the solver stencil
            on the low and high side of the axis

    """

    start: float = field(default_factory=lambda: get_default("axis.start", 0.0))
    end: float = field(default_factory=lambda: get_default("axis.end", 1.0))
    n_blocks: int = field(default_factory=lambda: get_default("axis.n_blocks", 1))
    density: DensityType = field(
        default_factory=lambda: _parse_density(get_default("axis.density", "uniform"))
    )
    gaussian_a: float = field(default_factory=lambda: get_default("gaussian.a", 1.0))
    gaussian_b: float = field(default_factory=lambda: get_default("gaussian.b", 0.25))
    ghost_start: int = field(default_factory=lambda: get_default("axis.ghost_start", 0))
    ghost_end: int = field(default_factory=lambda: get_default("axis.ghost_end", 0))

    def __post_init__(self):
        self.density = _parse_density(self.density)

    @property
    def extent(self) -> float:
        return self.end - self.start

    def density_params(self) -> dict:
        """Keyword arguments for create_density."""
        if self.density == DensityType.GAUSSIAN:
            return {"A": self.gaussian_a, "B": self.gaussian_b}
        return {}

    def validate(self, name: str = "axis") -> list[str]:
        """Validate axis configuration.

        Returns:
            List of error messages (empty if valid)

        """
        errors = []

        if self.end <= self.start:
            errors.append(f"{name}: end ({self.end}) must be > start ({self.start})")
        if self.n_blocks <= 0:
            errors.append(f"{name}: n_blocks must be > 0, got {self.n_blocks}")
        if self.ghost_start < 0:
            errors.append(f"{name}: ghost_start must be >= 0, got {self.ghost_start}")
        if self.ghost_end < 0:
            errors.append(f"{name}: ghost_end must be >= 0, got {self.ghost_end}")

        if self.density == DensityType.GAUSSIAN:
            if self.gaussian_a <= 0:
                errors.append(f"{name}: gaussian_a must be > 0, got {self.gaussian_a}")
            if self.gaussian_b <= 0:
                errors.append(f"{name}: gaussian_b must be > 0, got {self.gaussian_b}")

        return errors

    def to_dict(self) -> dict:
        data = asdict(self)
        data["density"] = self.density.value
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "AxisConfig":
        """Create an axis configuration, falling back to defaults.yaml for missing keys."""
        unknown = set(data) - {f.name for f in fields(cls)}
        if unknown:
            raise ValueError(f"Unknown axis configuration keys: {sorted(unknown)}")

        defaults = cls()
        return cls(
            start=float(data.get("start", defaults.start)),
            end=float(data.get("end", defaults.end)),
            n_blocks=int(data.get("n_blocks", defaults.n_blocks)),
            density=_parse_density(data.get("density", defaults.density)),
            gaussian_a=float(data.get("gaussian_a", defaults.gaussian_a)),
            gaussian_b=float(data.get("gaussian_b", defaults.gaussian_b)),
            ghost_start=int(data.get("ghost_start", defaults.ghost_start)),
            ghost_end=int(data.get("ghost_end", defaults.ghost_end)),
        )


@dataclass
class MeshConfig:
    """Complete mesh configuration (SSOT).

    Example:
        >>> config = MeshConfig(x=AxisConfig(n_blocks=4), cells_per_block=8)
        >>> errors = config.validate()
        >>> if not errors:
        ...     grid = BlockGrid.from_config(config)

    Attributes:
        x, y, z: Per-axis configuration
        cells_per_block: Interior cells per block along every axis,
            shared with the block container

    """

    x: AxisConfig = field(default_factory=AxisConfig)
    y: AxisConfig = field(default_factory=AxisConfig)
    z: AxisConfig = field(default_factory=AxisConfig)
    cells_per_block: int = field(
        default_factory=lambda: get_default("mesh.cells_per_block", 16)
    )

    @property
    def axes(self) -> tuple[AxisConfig, AxisConfig, AxisConfig]:
        return (self.x, self.y, self.z)

    def validate(self) -> list[str]:
        """Validate the complete mesh configuration.

        Returns:
            List of error messages (empty if valid)

        """
        errors = []

        if self.cells_per_block <= 0:
            errors.append(f"cells_per_block must be > 0, got {self.cells_per_block}")

        for name, axis in zip(AXIS_NAMES, self.axes):
            errors.extend(axis.validate(name))

        return errors

    def to_dict(self) -> dict:
        """Convert configuration to dictionary for serialization."""
        return {
            "cells_per_block": self.cells_per_block,
            **{name: axis.to_dict() for name, axis in zip(AXIS_NAMES, self.axes)},
        }

    @classmethod
    def from_dict(cls, data: dict) -> "MeshConfig":
        """Create configuration from dictionary.

        Missing axes or keys take their values from defaults.yaml.
        """
        unknown = set(data) - {"cells_per_block", *AXIS_NAMES}
        if unknown:
            raise ValueError(f"Unknown mesh configuration keys: {sorted(unknown)}")

        kwargs = {name: AxisConfig.from_dict(data.get(name) or {}) for name in AXIS_NAMES}
        if "cells_per_block" in data:
            kwargs["cells_per_block"] = int(data["cells_per_block"])
        return cls(**kwargs)

    @classmethod
    def from_yaml(cls, path: str | Path) -> "MeshConfig":
        """Load a mesh configuration from a YAML file.

        The file may either hold the mapping at top level or under a
        ``mesh:`` key.
        """
        data = load_yaml(path)
        if "mesh" in data and isinstance(data["mesh"], dict) and not (set(data) & set(AXIS_NAMES)):
            data = data["mesh"]
        return cls.from_dict(data)


def create_default_config() -> MeshConfig:
    """Create a default mesh configuration.

    Raises:
        ValueError: If defaults.yaml produces an invalid configuration
    """
    config = MeshConfig()
    errors = config.validate()

    if errors:
        raise ValueError("Default configuration is invalid:\n" + "\n".join(errors))

    return config
