"""
Module: tiling

Purpose:
    Uniform grid partition of a source image into row-major tiles.

Key Functions:
    - partition(): Crop every grid cell of an image
    - compute_rects(): Real-valued crop rectangles (memoised)
    - crop_tile(): Resample one region into a tile raster
    - check_coverage(): Verify rectangles tile the image without seams

Dependencies:
    - PIL: Cropping
    - numpy: Coverage maps
"""

from .partitioner import partition, compute_piece_size, compute_rects, tile_raster_size
from .cropper import crop_tile
from .diagnostics import CoverageReport, check_coverage

__all__ = [
    "partition",
    "compute_piece_size",
    "compute_rects",
    "tile_raster_size",
    "crop_tile",
    "CoverageReport",
    "check_coverage",
]
