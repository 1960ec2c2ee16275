"""
Module: output.naming

Purpose:
    Deterministic output file names.

Key Functions:
    - poster_filename(): poster-<cols>x<rows>-<format>-<orientation>.pdf
    - tiles_archive_filename(): Matching .zip name for tile exports
    - tile_filename(): Per-tile PNG name inside the archive
"""

from __future__ import annotations

from poster_toolkit.core.models import GridSpec, Orientation, PaperSpec, Tile


def poster_filename(grid: GridSpec, paper: PaperSpec, orientation: Orientation) -> str:
    """
    File name for an exported poster.

    Example:
        >>> poster_filename(GridSpec(3, 4), get_paper("a4"), Orientation.LANDSCAPE)
        'poster-3x4-a4-landscape.pdf'
    """
    orientation = Orientation.parse(orientation)
    return f"poster-{grid.columns}x{grid.rows}-{paper.format_id}-{orientation.value}.pdf"


def tiles_archive_filename(grid: GridSpec, paper: PaperSpec, orientation: Orientation) -> str:
    """ZIP name matching poster_filename()."""
    return poster_filename(grid, paper, orientation)[: -len(".pdf")] + "-tiles.zip"


def tile_filename(tile: Tile) -> str:
    """PNG name for a tile, 1-based row then column."""
    return f"tile-r{tile.row + 1:02d}-c{tile.column + 1:02d}.png"
