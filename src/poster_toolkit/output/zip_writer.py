"""
Module: output.zip_writer

Purpose:
    Export partitioned tiles as individual PNG files in a ZIP archive,
    for printing tiles through another application.

Key Functions:
    - write_tiles_zip(): Main entry point

Dependencies:
    - zipfile (std)
    - PIL/Pillow
    - output.naming: tile_filename

Used By:
    - controller.build_poster(): When export_zip is enabled
"""

from __future__ import annotations

import logging
import zipfile
from io import BytesIO
from pathlib import Path
from typing import Optional, Sequence

from poster_toolkit.core.errors import ExportError
from poster_toolkit.core.models import GridSpec, Tile

from .naming import tile_filename

logger = logging.getLogger(__name__)


def write_tiles_zip(
    tiles: Sequence[Tile],
    output_path: Path,
    *,
    grid: Optional[GridSpec] = None,
    include_readme: bool = True,
) -> Path:
    """
    Export tiles as PNGs in a ZIP archive.

    Creates a ZIP file with structure:
        poster-2x2-a4-portrait-tiles.zip
        ├── README.txt               # Assembly order (optional)
        ├── tile-r01-c01.png         # Row 1, column 1
        ├── tile-r01-c02.png
        └── ...

    Args:
        tiles: Tiles in row-major order
        output_path: Path for .zip file (will append .zip if missing)
        grid: Grid shape for the README
        include_readme: Whether to include README.txt

    Returns:
        Path to created ZIP file

    Raises:
        ExportError: If the archive cannot be written
    """
    output_path = Path(output_path)
    if output_path.suffix != ".zip":
        output_path = output_path.with_suffix(".zip")

    logger.info(f"Creating tile ZIP at {output_path}")

    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with zipfile.ZipFile(output_path, "w", zipfile.ZIP_DEFLATED) as zf:
            if include_readme:
                zf.writestr("README.txt", _generate_readme(tiles, grid))
            for tile in tiles:
                _write_tile(zf, tile)
    except OSError as e:
        raise ExportError(f"Could not write tile archive {output_path}: {e}") from e

    return output_path


def _write_tile(zf: zipfile.ZipFile, tile: Tile) -> None:
    """Write a single tile to the ZIP as PNG."""
    buf = BytesIO()
    tile.image.save(buf, format="PNG")
    zf.writestr(tile_filename(tile), buf.getvalue())


def _generate_readme(tiles: Sequence[Tile], grid: Optional[GridSpec]) -> str:
    """Generate README content listing tiles in assembly order."""
    lines = [
        "Poster Tiles",
        "============",
        "",
    ]
    if grid is not None:
        lines.append(f"Grid: {grid.columns} columns x {grid.rows} rows ({grid.tile_count} tiles)")
        lines.append("")

    lines.append("Assemble left to right, top to bottom:")
    for tile in tiles:
        width, height = tile.pixel_size
        lines.append(
            f"  {tile.index + 1:3d}. {tile_filename(tile)}  "
            f"(column {tile.column + 1}, row {tile.row + 1}, {width}x{height}px)"
        )
    return "\n".join(lines) + "\n"
