"""
Configuration Enums for blockgrid

This module defines the enumeration types used in mesh configuration.

Import Policy:
    from blockgrid.config.enums import DensityType

DO NOT use: from blockgrid.config.enums import *
"""

from enum import Enum


class DensityType(Enum):
    """Cell-density distribution along one axis.

    Options:
        UNIFORM: Equal cell widths across the whole axis (closed-form positions)
        GAUSSIAN: Gaussian-profile density, cells cluster around the axis centre

    Note:
        GAUSSIAN takes two parameters: A (clustering sharpness) and
        B (width of the tapered region relative to the axis length).
    """
    UNIFORM = "uniform"
    GAUSSIAN = "gaussian"
