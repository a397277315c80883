"""Command-line interface for inspecting block grids.

Usage:
    python -m blockgrid.cli summary
    python -m blockgrid.cli summary --config mesh.yaml
    python -m blockgrid.cli plot --config mesh.yaml --axis x --output spacing_x.png
    python -m blockgrid.cli plot --layout xy --output layout.png
"""

import argparse
import logging
import sys

import yaml

from blockgrid.config import ConfigurationError, MeshConfig, create_default_config, warn_if_unsafe
from blockgrid.core.block_grid import BlockGrid
from blockgrid.core.errors import MeshError

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def _load_config(args: argparse.Namespace) -> MeshConfig:
    if args.config:
        logger.info(f"Loading mesh configuration from {args.config}")
        config = MeshConfig.from_yaml(args.config)
    else:
        config = create_default_config()
    warn_if_unsafe(config)
    return config


def cmd_summary(args: argparse.Namespace) -> None:
    """Print the per-axis summary of the configured grid."""
    grid = BlockGrid.from_config(_load_config(args))

    print("\n" + "=" * 60)
    print("BLOCK GRID")
    print("=" * 60)
    print(grid.summary())

    if args.blocks:
        print("\n[Blocks]")
        for info in grid.iter_blocks():
            origin = ", ".join(f"{v:.6g}" for v in info.origin)
            extent = ", ".join(f"{v:.6g}" for v in info.block_extent)
            print(f"  {info.block_id:6d} {info.index}  origin=({origin})  extent=({extent})")

    print("\n" + "=" * 60)


def cmd_plot(args: argparse.Namespace) -> None:
    """Plot cell spacing of one axis or the block layout of a plane."""
    from blockgrid.utils.visualization import plot_axis_spacing, plot_block_layout

    grid = BlockGrid.from_config(_load_config(args))

    if args.layout:
        plot_block_layout(
            grid,
            plane=args.layout,
            title=f"Block layout ({args.layout})",
            show_cells=args.cells,
            save_path=args.output,
        )
    else:
        plot_axis_spacing(
            grid.mesh(args.axis),
            title=f"Cell widths along {args.axis}",
            save_path=args.output,
        )


def main(argv=None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Inspect block-structured grids",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Summary of the default grid (defaults.yaml)
  python -m blockgrid.cli summary

  # Summary with every block listed
  python -m blockgrid.cli summary --config mesh.yaml --blocks

  # Plot cell widths along y
  python -m blockgrid.cli plot --config mesh.yaml --axis y --output spacing_y.png
        """,
    )
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--config", help="YAML mesh configuration (default: defaults.yaml)")
    common.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    summary_parser = subparsers.add_parser("summary", parents=[common], help="Print grid summary")
    summary_parser.add_argument("--blocks", action="store_true", help="List every block")

    plot_parser = subparsers.add_parser("plot", parents=[common], help="Plot spacing or block layout")
    plot_parser.add_argument("--axis", choices=["x", "y", "z"], default="x")
    plot_parser.add_argument("--layout", choices=["xy", "xz", "yz"], help="Plot block layout instead")
    plot_parser.add_argument("--cells", action="store_true", help="Draw cell boundaries in layout")
    plot_parser.add_argument("--output", help="Save figure to this file instead of showing it")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    if args.verbose:
        logging.getLogger("blockgrid").setLevel(logging.DEBUG)

    try:
        if args.command == "summary":
            cmd_summary(args)
        elif args.command == "plot":
            cmd_plot(args)
    except (ConfigurationError, MeshError) as e:
        logger.error(str(e))
        return 2
    except (ValueError, OSError, yaml.YAMLError) as e:
        logger.error(f"Invalid mesh configuration: {e}")
        return 2

    return 0


if __name__ == "__main__":
    sys.exit(main())
