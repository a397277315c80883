"""Utilities package."""

from blockgrid.utils.visualization import (
    plot_axis_spacing,
    plot_block_layout,
)

__all__ = [
    'plot_axis_spacing',
    'plot_block_layout',
]
