"""Configuration Module - Single Source of Truth for Mesh Parameters

Default Configuration (loaded from defaults.yaml):
    from blockgrid.config import get_default

    cells_per_block = get_default('mesh.cells_per_block')

Recommended Usage:
    from blockgrid.config import MeshConfig, AxisConfig, create_validated_config
    from blockgrid.config.enums import DensityType

    # Default config (already validated)
    config = create_validated_config()

    # Custom config with validation
    config = create_validated_config(cells_per_block=8, x_density='gaussian')

    # Or from a YAML file
    config = MeshConfig.from_yaml('mesh.yaml')

Import Policy:
    DO NOT use: from blockgrid.config import *

Submodules:
    enums: Configuration enumerations (DensityType)
    defaults: Numerical constants (tolerances, Gaussian defaults)
    yaml_loader: YAML configuration loader (get_default, get_defaults)
    mesh_config: Configuration dataclasses (AxisConfig, MeshConfig)
    validation: Validation utilities (validate_config, warn_if_unsafe, etc.)
"""

from blockgrid.config.enums import DensityType
# Import YAML loader functions first (no circular dependencies)
from blockgrid.config.yaml_loader import get_default, get_defaults, reload_defaults
from blockgrid.config.mesh_config import AxisConfig, MeshConfig, create_default_config
from blockgrid.config.validation import (
    ConfigurationError,
    ConfigurationWarning,
    create_validated_config,
    validate_and_warn,
    validate_config,
    warn_if_unsafe,
)


__all__ = [
    # Enums
    "DensityType",
    # Config classes
    "AxisConfig",
    "MeshConfig",
    # Factory functions
    "create_default_config",
    "create_validated_config",
    # Validation
    "ConfigurationError",
    "ConfigurationWarning",
    "validate_config",
    "warn_if_unsafe",
    "validate_and_warn",
    # YAML defaults access
    "get_default",
    "get_defaults",
    "reload_defaults",
]
