"""
Module: core.models.grid

Purpose:
    Grid shape, crop rectangles and tiles produced by the partitioner.

Key Classes:
    - GridSpec: Columns × rows of the poster
    - PixelRect: Real-valued region in source pixel space
    - Tile: One cropped grid cell in row-major order

Dependencies:
    - PIL: Tile raster type
    - common.units: round_half_up for snapping

Used By:
    - tiling.partitioner: Creates PixelRects and Tiles
    - layout.planner: Reads tile aspect ratios and positions
    - output.zip_writer: Tile filenames
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from PIL import Image

from poster_toolkit.common.units import round_half_up
from ..errors import InvalidInput


@dataclass(frozen=True)
class GridSpec:
    """
    Grid shape (immutable).

    Columns and rows are independent. The partitioner accepts any
    positive integers; UI maxima are enforced by PosterConfig.

    Attributes:
        columns: Number of pages across (>= 1)
        rows: Number of pages down (>= 1)

    Example:
        >>> GridSpec(columns=3, rows=4).tile_count
        12
    """

    columns: int
    rows: int

    def __post_init__(self) -> None:
        for field_name in ("columns", "rows"):
            value = getattr(self, field_name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidInput(f"{field_name} must be an integer: {value!r}")
            if value < 1:
                raise InvalidInput(f"{field_name} must be positive: {value}")

    @property
    def tile_count(self) -> int:
        """Total number of tiles (and exported pages)."""
        return self.columns * self.rows

    def position(self, index: int) -> Tuple[int, int]:
        """Return (column, row) of the tile at flat row-major *index*."""
        if not 0 <= index < self.tile_count:
            raise IndexError(f"Tile index {index} outside grid of {self.tile_count}")
        return index % self.columns, index // self.columns

    def __str__(self) -> str:
        return f"{self.columns}x{self.rows}"


@dataclass(frozen=True)
class PixelRect:
    """
    Crop region in source pixel space.

    Corners are real-valued: adjacent tiles share the same floating
    edge, so the rectangles are contiguous by construction.

    Attributes:
        x: Left edge
        y: Top edge
        width: Region width
        height: Region height
    """

    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def box(self) -> Tuple[float, float, float, float]:
        """(left, top, right, bottom) as used by Pillow."""
        return (self.x, self.y, self.right, self.bottom)

    def snapped(self) -> Tuple[int, int, int, int]:
        """Integer (left, top, right, bottom) with halves rounded up."""
        return (
            round_half_up(self.x),
            round_half_up(self.y),
            round_half_up(self.right),
            round_half_up(self.bottom),
        )


@dataclass(frozen=True)
class Tile:
    """
    One cell of the partitioned image (immutable, ephemeral).

    Attributes:
        index: 0-based row-major index
        column: 0-based column
        row: 0-based row
        rect: Source region the tile was cropped from
        image: Rendered raster for this cell
    """

    index: int
    column: int
    row: int
    rect: PixelRect
    image: Image.Image

    @property
    def label(self) -> str:
        """1-based "column, row" label used in previews and captions."""
        return f"{self.column + 1}, {self.row + 1}"

    @property
    def aspect_ratio(self) -> float:
        """Intrinsic aspect ratio of the source region."""
        return self.rect.width / self.rect.height

    @property
    def pixel_size(self) -> Tuple[int, int]:
        """Rendered raster size (width, height)."""
        return self.image.size
