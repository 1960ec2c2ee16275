"""
Tests for tiling.partitioner

Test Coverage:
- partition(): tile count, row-major order, crop content
- compute_rects(): contiguous real-valued rectangles, memoisation
- tile_raster_size(): rounding of fractional piece sizes
- Boundary rejection of missing image/grid
"""

import pytest

from poster_toolkit.core import InvalidInput
from poster_toolkit.core.models import GridSpec, PixelRect
from poster_toolkit.tiling import (
    compute_piece_size,
    compute_rects,
    partition,
    tile_raster_size,
)


class TestPartitionScenarios:
    """Concrete partition scenarios."""

    def test_partition_when_1000x500_into_2x1_then_two_square_tiles(self, make_source):
        # Arrange
        src = make_source(1000, 500)

        # Act
        tiles = partition(src, GridSpec(columns=2, rows=1))

        # Assert
        assert [t.rect for t in tiles] == [
            PixelRect(0.0, 0.0, 500.0, 500.0),
            PixelRect(500.0, 0.0, 500.0, 500.0),
        ]
        assert [t.pixel_size for t in tiles] == [(500, 500), (500, 500)]

    def test_partition_when_1001x500_into_2x1_then_same_fractional_piece_width(self, make_source):
        """Both tiles use the same 500.5px piece; rasters round independently."""
        # Arrange
        src = make_source(1001, 500)

        # Act
        tiles = partition(src, GridSpec(columns=2, rows=1))

        # Assert
        assert [t.rect.width for t in tiles] == [500.5, 500.5]
        assert tiles[1].rect.x == 500.5
        widths = [t.pixel_size[0] for t in tiles]
        assert all(w in (500, 501) for w in widths)
        assert 1000 <= sum(widths) <= 1002

    def test_partition_when_cropped_then_tile_pixels_come_from_its_region(self, make_source):
        """Top-left pixel of each tile is the source pixel at the rect origin."""
        # Arrange
        src = make_source(600, 400)

        # Act
        tiles = partition(src, GridSpec(columns=3, rows=2))

        # Assert
        for tile in tiles:
            x, y = int(tile.rect.x), int(tile.rect.y)
            assert tile.image.getpixel((0, 0)) == src.image.getpixel((x, y))
            assert tile.image.getpixel((199, 199)) == src.image.getpixel((x + 199, y + 199))

    def test_partition_when_1x1_grid_then_single_tile_equals_source(self, make_source):
        src = make_source(120, 80)

        tiles = partition(src, GridSpec(columns=1, rows=1))

        assert len(tiles) == 1
        assert tiles[0].image.tobytes() == src.image.tobytes()

    def test_partition_when_grid_larger_than_ui_limit_then_still_partitions(self, make_source):
        """The partitioner itself accepts any positive grid."""
        src = make_source(240, 60)

        tiles = partition(src, GridSpec(columns=12, rows=3))

        assert len(tiles) == 36


class TestPartitionProperties:
    """Invariants over a range of grids and image sizes."""

    @pytest.mark.parametrize("width, height", [(97, 61), (300, 200), (1001, 333)])
    @pytest.mark.parametrize("columns, rows", [(1, 1), (2, 3), (3, 2), (7, 5)])
    def test_partition_when_any_grid_then_count_and_row_major_order(
        self, make_source, width, height, columns, rows
    ):
        # Arrange
        src = make_source(width, height)

        # Act
        tiles = partition(src, GridSpec(columns=columns, rows=rows))

        # Assert
        assert len(tiles) == columns * rows
        for i, tile in enumerate(tiles):
            assert tile.index == i
            assert tile.column == i % columns
            assert tile.row == i // columns

    @pytest.mark.parametrize("width, height, columns, rows", [
        (1000, 500, 2, 1),
        (1001, 500, 2, 1),
        (997, 613, 7, 3),
        (640, 480, 10, 10),
        (333, 1000, 6, 9),
    ])
    def test_compute_rects_when_any_grid_then_contiguous_and_covering(
        self, width, height, columns, rows
    ):
        """Rectangles share edges exactly and span the whole image."""
        # Act
        rects = compute_rects(width, height, columns, rows)

        # Assert
        for r in range(rows):
            row_rects = rects[r * columns:(r + 1) * columns]
            assert row_rects[0].x == 0
            assert row_rects[-1].right == pytest.approx(width)
            for left, right in zip(row_rects, row_rects[1:]):
                assert left.right == pytest.approx(right.x)
        for c in range(columns):
            col_rects = rects[c::columns]
            assert col_rects[0].y == 0
            assert col_rects[-1].bottom == pytest.approx(height)
            for top, bottom in zip(col_rects, col_rects[1:]):
                assert top.bottom == pytest.approx(bottom.y)

    def test_compute_rects_when_any_grid_then_every_piece_same_size(self):
        rects = compute_rects(997, 613, 7, 3)

        assert len({(r.width, r.height) for r in rects}) == 1

    def test_partition_when_called_twice_then_identical_output(self, make_source):
        """Partition is a pure function of its inputs."""
        src = make_source(300, 200)
        grid = GridSpec(columns=3, rows=2)

        first = partition(src, grid)
        second = partition(src, grid)

        assert [t.rect for t in first] == [t.rect for t in second]
        assert [t.image.tobytes() for t in first] == [t.image.tobytes() for t in second]


class TestPartitionValidation:
    """Boundary rejection."""

    def test_partition_when_no_image_then_raises_invalid_input(self):
        with pytest.raises(InvalidInput, match="No image"):
            partition(None, GridSpec(columns=2, rows=2))

    def test_partition_when_no_grid_then_raises_invalid_input(self, make_source):
        with pytest.raises(InvalidInput, match="No grid"):
            partition(make_source(10, 10), None)

    def test_compute_rects_when_zero_columns_then_raises_invalid_input(self):
        with pytest.raises(InvalidInput):
            compute_rects(100, 100, 0, 1)

    def test_compute_piece_size_when_fractional_then_real_valued(self):
        assert compute_piece_size(1001, 500, GridSpec(columns=2, rows=3)) == (
            pytest.approx(500.5),
            pytest.approx(166.6666667),
        )


class TestRasterSize:
    """Tests for tile_raster_size()."""

    def test_tile_raster_size_when_half_then_rounds_up(self):
        assert tile_raster_size(500.5, 250.0) == (501, 250)

    def test_tile_raster_size_when_below_one_pixel_then_clamped_to_one(self):
        assert tile_raster_size(0.3, 0.4) == (1, 1)


class TestMemoisation:
    """compute_rects() is cached on plain integers."""

    def test_compute_rects_when_repeated_then_served_from_cache(self):
        # Arrange
        compute_rects(1234, 567, 4, 3)
        hits_before = compute_rects.cache_info().hits

        # Act
        compute_rects(1234, 567, 4, 3)

        # Assert
        assert compute_rects.cache_info().hits == hits_before + 1
