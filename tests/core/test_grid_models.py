"""
Unit tests for grid, rect and tile models.
"""

import pytest
from PIL import Image

from poster_toolkit.core import InvalidInput
from poster_toolkit.core.models import GridSpec, PixelRect, Tile


class TestGridSpec:
    """Tests for GridSpec dataclass."""

    def test_tile_count_when_3x4_then_12(self):
        """Total pages is columns × rows."""
        # Arrange
        grid = GridSpec(columns=3, rows=4)

        # Act & Assert
        assert grid.tile_count == 12

    def test_init_when_large_grid_then_accepted(self):
        """The model accepts any positive integers; UI limits live in PosterConfig."""
        grid = GridSpec(columns=25, rows=40)

        assert grid.tile_count == 1000

    @pytest.mark.parametrize("columns, rows", [(0, 1), (1, 0), (-2, 3)])
    def test_init_when_non_positive_then_raises_invalid_input(self, columns, rows):
        """Zero or negative dimensions are rejected."""
        with pytest.raises(InvalidInput, match="must be positive"):
            GridSpec(columns=columns, rows=rows)

    @pytest.mark.parametrize("value", [1.5, "2", True, None])
    def test_init_when_not_integer_then_raises_invalid_input(self, value):
        """Non-integer dimensions are rejected."""
        with pytest.raises(InvalidInput, match="must be an integer"):
            GridSpec(columns=value, rows=2)

    def test_invalid_input_when_raised_then_is_value_error(self):
        """InvalidInput doubles as ValueError for generic callers."""
        with pytest.raises(ValueError):
            GridSpec(columns=0, rows=1)

    def test_position_when_row_major_then_column_is_index_mod_columns(self):
        """Flat index i maps to (i % columns, i // columns)."""
        # Arrange
        grid = GridSpec(columns=3, rows=2)

        # Act
        positions = [grid.position(i) for i in range(grid.tile_count)]

        # Assert
        assert positions == [(0, 0), (1, 0), (2, 0), (0, 1), (1, 1), (2, 1)]

    def test_position_when_out_of_range_then_raises_index_error(self):
        grid = GridSpec(columns=2, rows=2)

        with pytest.raises(IndexError):
            grid.position(4)

    def test_str_when_formatted_then_columns_x_rows(self):
        assert str(GridSpec(columns=3, rows=4)) == "3x4"


class TestPixelRect:
    """Tests for PixelRect dataclass."""

    def test_right_bottom_when_fractional_then_exact(self):
        # Arrange
        rect = PixelRect(x=500.5, y=0.0, width=500.5, height=250.25)

        # Act & Assert
        assert rect.right == 1001.0
        assert rect.bottom == 250.25
        assert rect.box == (500.5, 0.0, 1001.0, 250.25)

    def test_snapped_when_half_pixel_then_rounds_up(self):
        """Halves always round up, unlike Python's round()."""
        rect = PixelRect(x=0.0, y=2.5, width=500.5, height=1.0)

        assert rect.snapped() == (0, 3, 501, 4)


class TestTile:
    """Tests for Tile dataclass."""

    def test_label_when_created_then_one_based_column_row(self):
        # Arrange
        tile = Tile(
            index=5,
            column=2,
            row=1,
            rect=PixelRect(200, 100, 100, 100),
            image=Image.new("RGB", (100, 100)),
        )

        # Act & Assert
        assert tile.label == "3, 2"

    def test_aspect_ratio_when_fractional_rect_then_uses_rect_not_raster(self):
        """Aspect ratio comes from the source region, not the rounded raster."""
        tile = Tile(
            index=0,
            column=0,
            row=0,
            rect=PixelRect(0, 0, 500.5, 250.0),
            image=Image.new("RGB", (501, 250)),
        )

        assert tile.aspect_ratio == pytest.approx(500.5 / 250.0)
        assert tile.pixel_size == (501, 250)
