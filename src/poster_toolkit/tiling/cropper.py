"""
Module: tiling.cropper

Purpose:
    Resample a real-valued region of the source image into a tile raster.

Key Functions:
    - crop_tile(): Crop one region with nearest-neighbour sampling

Dependencies:
    - PIL: Image resampling

Used By:
    - tiling.partitioner: One call per grid cell
"""

from __future__ import annotations

from typing import Tuple

from PIL import Image

from poster_toolkit.core.models import PixelRect


def crop_tile(
    source: Image.Image,
    rect: PixelRect,
    size: Tuple[int, int],
) -> Image.Image:
    """
    Crop *rect* from *source* into a raster of *size*.

    Pillow's resize() accepts a floating source box, so fractional tile
    edges are sampled exactly rather than rounded before cropping. Every
    tile goes through the same call, so rounding is identical across
    the grid.

    Args:
        source: Full source image
        rect: Region to crop, in source pixels
        size: Output raster (width, height)

    Returns:
        New image (not a view of the source)

    Raises:
        ValueError: If rect lies outside the source image

    Example:
        >>> tile = crop_tile(img, PixelRect(500, 0, 500.5, 500), (501, 500))
        >>> tile.size
        (501, 500)
    """
    # Allow float noise on the far edge (e.g. 3 * (1000 / 3))
    tolerance = 1e-6
    if rect.x < 0 or rect.y < 0:
        raise ValueError(f"Crop origin ({rect.x}, {rect.y}) is negative")
    if rect.right > source.width + tolerance:
        raise ValueError(f"Crop right {rect.right} exceeds image width {source.width}")
    if rect.bottom > source.height + tolerance:
        raise ValueError(f"Crop bottom {rect.bottom} exceeds image height {source.height}")

    box = (
        rect.x,
        rect.y,
        min(rect.right, float(source.width)),
        min(rect.bottom, float(source.height)),
    )
    return source.resize(size, resample=Image.Resampling.NEAREST, box=box)
