"""Tests for the command-line interface and plotting utilities."""

import pytest

from blockgrid import cli
from blockgrid.core.block_grid import BlockGrid
from blockgrid.utils.visualization import plot_axis_spacing, plot_block_layout


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "mesh.yaml"
    path.write_text(
        "cells_per_block: 4\n"
        "x: {start: 0.0, end: 2.0, n_blocks: 2, density: gaussian, ghost_start: 2, ghost_end: 2}\n"
        "y: {n_blocks: 2}\n"
        "z: {n_blocks: 1}\n"
    )
    return path


class TestCli:
    """Tests for python -m blockgrid.cli."""

    def test_no_command(self, capsys):
        assert cli.main([]) == 1
        assert "usage" in capsys.readouterr().out

    def test_summary_default(self, capsys):
        assert cli.main(["summary"]) == 0

        out = capsys.readouterr().out
        assert "BLOCK GRID" in out
        assert "BlockGrid 8x8x8 blocks" in out

    def test_summary_with_blocks(self, config_file, capsys):
        assert cli.main(["summary", "--config", str(config_file), "--blocks"]) == 0

        out = capsys.readouterr().out
        assert "BlockGrid 2x2x1 blocks" in out
        assert "non-uniform" in out
        assert "(1, 1, 0)" in out

    def test_invalid_config_reports_error(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("cells_per_block: 0\n")

        assert cli.main(["summary", "--config", str(path)]) == 2

    @pytest.mark.parametrize("content", [
        "x: {density: logarithmic}\n",
        "cells_per_blok: 4\n",
        "x: {n_block: 64}\n",
        "x: [unclosed\n",
    ])
    def test_malformed_config_reports_error(self, tmp_path, content):
        path = tmp_path / "bad.yaml"
        path.write_text(content)

        assert cli.main(["summary", "--config", str(path)]) == 2

    def test_missing_config_file(self, tmp_path):
        path = tmp_path / "absent.yaml"

        assert cli.main(["summary", "--config", str(path)]) == 2

    def test_plot_spacing(self, config_file, tmp_path):
        output = tmp_path / "spacing.png"

        assert cli.main(["plot", "--config", str(config_file), "--axis", "x",
                         "--output", str(output)]) == 0
        assert output.exists()

    def test_plot_layout(self, config_file, tmp_path):
        output = tmp_path / "layout.png"

        assert cli.main(["plot", "--config", str(config_file), "--layout", "xy", "--cells",
                         "--output", str(output)]) == 0
        assert output.exists()


class TestVisualization:
    """Direct tests for plotting helpers."""

    def test_plot_axis_spacing(self, gaussian_mesh, tmp_path):
        output = tmp_path / "axis.png"
        plot_axis_spacing(gaussian_mesh, save_path=str(output))
        assert output.exists()

    def test_plot_block_layout(self, mixed_grid, tmp_path):
        output = tmp_path / "layout.png"
        plot_block_layout(mixed_grid, plane="xz", save_path=str(output))
        assert output.exists()

    def test_plot_block_layout_bad_plane(self, mixed_grid):
        with pytest.raises(ValueError, match="plane"):
            plot_block_layout(mixed_grid, plane="xx")

    def test_grid_from_config_file(self, config_file):
        from blockgrid.config import MeshConfig

        grid = BlockGrid.from_config(MeshConfig.from_yaml(config_file))
        assert grid.shape == (2, 2, 1)
