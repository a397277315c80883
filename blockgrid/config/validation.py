"""
Configuration Validation Utilities

This module provides validation functions for mesh configurations.
It includes invariant checking and safety warnings.

Import Policy:
    from blockgrid.config.validation import validate_config, warn_if_unsafe

DO NOT use: from blockgrid.config.validation import *
"""

import warnings
from dataclasses import fields
from typing import List, Tuple

from blockgrid.config.defaults import AXIS_NAMES, GAUSSIAN_A_NEAR_UNIFORM
from blockgrid.config.enums import DensityType
from blockgrid.config.mesh_config import MeshConfig


class ConfigurationError(Exception):
    """Raised when configuration validation fails."""

    pass


class ConfigurationWarning(Warning):
    """Warning for potentially unsafe configuration choices."""

    pass


def validate_config(config: MeshConfig, raise_on_error: bool = True) -> Tuple[bool, List[str]]:
    """Validate a mesh configuration.

    Args:
        config: MeshConfig to validate
        raise_on_error: If True, raise ConfigurationError on validation failure

    Returns:
        Tuple of (is_valid, error_messages)

    Raises:
        ConfigurationError: If validation fails and raise_on_error=True
    """
    errors = config.validate()

    if errors:
        if raise_on_error:
            raise ConfigurationError(
                f"Configuration validation failed with {len(errors)} error(s):\n"
                + "\n".join(f"  - {err}" for err in errors)
            )
        return False, errors

    return True, []


def warn_if_unsafe(config: MeshConfig) -> List[str]:
    """Check for configuration choices that are legal but suspicious.

    Warnings are issued via Python's warnings module.

    Returns:
        List of warning messages (empty if no warnings)
    """
    warnings_list = []

    for name, axis in zip(AXIS_NAMES, config.axes):
        # Ghost layer deeper than a block: the stencil reaches past the neighbour
        for side, count in (("ghost_start", axis.ghost_start), ("ghost_end", axis.ghost_end)):
            if count > config.cells_per_block:
                warnings_list.append(
                    f"{name}: {side} ({count}) exceeds cells_per_block "
                    f"({config.cells_per_block}). Halo exchange will span several blocks."
                )

        if axis.density == DensityType.GAUSSIAN and axis.gaussian_a < GAUSSIAN_A_NEAR_UNIFORM:
            warnings_list.append(
                f"{name}: gaussian_a ({axis.gaussian_a:.3g}) gives a nearly uniform grid. "
                "Use density 'uniform' to get the closed-form position path."
            )

    for warning_msg in warnings_list:
        warnings.warn(warning_msg, ConfigurationWarning, stacklevel=2)

    return warnings_list


def validate_and_warn(config: MeshConfig) -> MeshConfig:
    """Validate a configuration and emit warnings for unsafe choices.

    Raises:
        ConfigurationError: If validation fails
    """
    validate_config(config)
    warn_if_unsafe(config)
    return config


def create_validated_config(**kwargs) -> MeshConfig:
    """Create a mesh configuration with validation.

    Keyword arguments are either ``cells_per_block``, a per-axis override
    written ``<axis>_<field>`` (e.g. ``x_n_blocks=4``), or a plain field name
    which is applied to all three axes (e.g. ``density='gaussian'``).

    Raises:
        ConfigurationError: If the resulting configuration is invalid
        ValueError: If a parameter name is unknown

    Example:
        >>> config = create_validated_config(
        ...     cells_per_block=8, n_blocks=4, x_density='gaussian'
        ... )
    """
    from blockgrid.config.mesh_config import create_default_config

    config = create_default_config()
    axis_fields = {f.name for f in fields(config.x)}

    for key, value in kwargs.items():
        if key == "cells_per_block":
            config.cells_per_block = value
            continue

        prefix, _, field_name = key.partition("_")
        if prefix in AXIS_NAMES and field_name in axis_fields:
            targets = [getattr(config, prefix)]
        elif key in axis_fields:
            targets, field_name = list(config.axes), key
        else:
            raise ValueError(f"Unknown configuration parameter: {key}")

        for axis in targets:
            setattr(axis, field_name, value)
            axis.__post_init__()

    return validate_and_warn(config)
