"""Simple visualization utilities for axis meshes and block layouts."""

import numpy as np
import matplotlib.pyplot as plt

from blockgrid.config.defaults import AXIS_NAMES


def plot_axis_spacing(
    mesh,
    title: str = 'Cell Width Distribution',
    show_blocks: bool = True,
    save_path: str = None,
):
    """Plot cell width against cell centre along one axis.

    Args:
        mesh: Initialized AxisMesh
        title: Plot title
        show_blocks: Draw vertical lines at block boundaries
        save_path: If provided, save to file
    """
    fig, ax = plt.subplots(figsize=(10, 6))

    ax.plot(mesh.cell_centers, mesh.cell_widths, marker='.', linewidth=1.5)

    ghosts = mesh.ghost_widths
    if ghosts.size:
        ax.axhline(ghosts.min(), color='gray', linestyle=':', label='min ghost width')
        ax.legend()

    if show_blocks:
        for origin in mesh.block_origins[1:]:
            ax.axvline(origin, color='gray', alpha=0.3, linewidth=0.8)

    ax.set_xlabel('Position')
    ax.set_ylabel('Cell width')
    ax.set_title(title)
    ax.grid(True, alpha=0.3)

    plt.tight_layout()

    if save_path:
        plt.savefig(save_path, dpi=150, bbox_inches='tight')
        print(f"Saved: {save_path}")
    else:
        plt.show()

    plt.close(fig)


def plot_block_layout(
    grid,
    plane: str = 'xy',
    title: str = 'Block Layout',
    show_cells: bool = False,
    save_path: str = None,
):
    """Draw block (and optionally cell) boundaries in a coordinate plane.

    Args:
        grid: BlockGrid
        plane: Two axis names, e.g. 'xy', 'xz'
        title: Plot title
        show_cells: Also draw cell boundaries
        save_path: If provided, save to file
    """
    if len(plane) != 2 or any(a not in AXIS_NAMES for a in plane) or plane[0] == plane[1]:
        raise ValueError(f"plane must name two different axes from {AXIS_NAMES}, got {plane!r}")

    mesh_h = grid.mesh(plane[0])
    mesh_v = grid.mesh(plane[1])

    fig, ax = plt.subplots(figsize=(8, 8))

    if show_cells:
        for x in mesh_h.cell_edges:
            ax.axvline(x, color='lightgray', linewidth=0.5)
        for y in mesh_v.cell_edges:
            ax.axhline(y, color='lightgray', linewidth=0.5)

    block_edges_h = np.append(mesh_h.block_origins, mesh_h.end)
    block_edges_v = np.append(mesh_v.block_origins, mesh_v.end)
    for x in block_edges_h:
        ax.axvline(x, color='black', linewidth=1.2)
    for y in block_edges_v:
        ax.axhline(y, color='black', linewidth=1.2)

    ax.set_xlim(mesh_h.start, mesh_h.end)
    ax.set_ylim(mesh_v.start, mesh_v.end)
    ax.set_aspect('equal')
    ax.set_xlabel(plane[0])
    ax.set_ylabel(plane[1])
    ax.set_title(title)

    plt.tight_layout()

    if save_path:
        plt.savefig(save_path, dpi=150, bbox_inches='tight')
        print(f"Saved: {save_path}")
    else:
        plt.show()

    plt.close(fig)
