"""
Module: tiling.partitioner

Purpose:
    Split a source image into columns × rows equal-area tiles.

Algorithm:
    Every tile uses the same real-valued piece size
    (image.width / columns, image.height / rows). Tile (column, row)
    covers [column * pieceWidth, (column + 1) * pieceWidth) and likewise
    for rows, so adjacent rectangles share an exact floating edge.
    There is no remainder redistribution: a fractional piece size is
    carried through to the crop and only the rendered raster size is
    rounded.

    Tiles are emitted row-major (row outer, column inner). This order
    fixes preview placement, labels and export page order.

Key Functions:
    - partition(): Main entry point
    - compute_piece_size(): Floating piece size for a grid
    - compute_rects(): All crop rectangles, memoised on plain integers
    - tile_raster_size(): Integer raster size for a piece size

Dependencies:
    - tiling.cropper: crop_tile
    - core.models: SourceImage, GridSpec, PixelRect, Tile

Used By:
    - controller: generate_preview(), build_poster()
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import List, Optional, Tuple

from poster_toolkit.common.units import round_half_up
from poster_toolkit.core.errors import InvalidInput
from poster_toolkit.core.models import GridSpec, PixelRect, SourceImage, Tile

from .cropper import crop_tile

logger = logging.getLogger(__name__)


def partition(image: Optional[SourceImage], grid: Optional[GridSpec]) -> List[Tile]:
    """
    Partition *image* into grid.columns × grid.rows tiles.

    Pure function of its inputs: no reference to the image is kept
    once the call returns.

    Args:
        image: Decoded source image
        grid: Grid shape

    Returns:
        Tiles in row-major order, length grid.tile_count

    Raises:
        InvalidInput: If the image or grid is missing

    Example:
        >>> tiles = partition(src_1000x500, GridSpec(2, 1))
        >>> [t.rect for t in tiles]
        [PixelRect(x=0.0, y=0.0, width=500.0, height=500.0),
         PixelRect(x=500.0, y=0.0, width=500.0, height=500.0)]
    """
    if image is None:
        raise InvalidInput("No image loaded")
    if grid is None:
        raise InvalidInput("No grid specified")

    rects = compute_rects(image.width, image.height, grid.columns, grid.rows)
    size = tile_raster_size(rects[0].width, rects[0].height)

    tiles: List[Tile] = []
    for index, rect in enumerate(rects):
        column, row = grid.position(index)
        tiles.append(Tile(
            index=index,
            column=column,
            row=row,
            rect=rect,
            image=crop_tile(image.image, rect, size),
        ))
        logger.debug(f"Tile {index} ({column}, {row}): box {rect.box} -> {size}")

    logger.info(
        f"Partitioned {image.width}x{image.height} image into {len(tiles)} tiles "
        f"({grid}, {size[0]}x{size[1]}px each)"
    )
    return tiles


def compute_piece_size(width: int, height: int, grid: GridSpec) -> Tuple[float, float]:
    """Real-valued (pieceWidth, pieceHeight) for *grid*."""
    if width < 1 or height < 1:
        raise InvalidInput(f"Image dimensions must be positive: {width}x{height}")
    return width / grid.columns, height / grid.rows


@lru_cache(maxsize=64)
def compute_rects(width: int, height: int, columns: int, rows: int) -> Tuple[PixelRect, ...]:
    """
    Crop rectangles for every cell, row-major.

    Cached on plain integers so repeated previews of the same image and
    grid skip the arithmetic; the image itself is never part of the key.

    Raises:
        InvalidInput: If any dimension is not positive
    """
    grid = GridSpec(columns=columns, rows=rows)
    piece_width, piece_height = compute_piece_size(width, height, grid)

    return tuple(
        PixelRect(
            x=column * piece_width,
            y=row * piece_height,
            width=piece_width,
            height=piece_height,
        )
        for row in range(rows)
        for column in range(columns)
    )


def tile_raster_size(piece_width: float, piece_height: float) -> Tuple[int, int]:
    """
    Integer raster size for a floating piece size.

    Example:
        >>> tile_raster_size(500.5, 250.0)
        (501, 250)
    """
    return max(1, round_half_up(piece_width)), max(1, round_half_up(piece_height))
