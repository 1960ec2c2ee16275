"""
Module: controller

Purpose:
    Orchestrate the poster pipeline.
    Decode → Partition → Plan → Render (→ ZIP)

Key Functions:
    - generate_preview(): Partition an image for the preview grid
    - export_poster(): Plan and render previously generated tiles
    - build_poster(): Whole pipeline from an image or file

Key Classes:
    - BuildResult: Paths, plan and build metadata

Dependencies:
    - images: Decoding
    - tiling: Partition and coverage check
    - layout: Poster planning
    - output: PDF rendering, tile archive

Used By:
    - UI shells: Preview and download actions
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional, Sequence, Union

from poster_toolkit.common.units import MM_PER_INCH
from poster_toolkit.core.errors import InvalidInput
from poster_toolkit.core.models import GridSpec, SourceImage, Tile

from .config import PosterConfig
from .images import load_source_image
from .images.loader import ImageSource
from .layout import PosterPlan, plan_poster
from .output.renderer import render_to_pdf
from .output.zip_writer import write_tiles_zip
from .tiling import check_coverage, compute_rects, partition

logger = logging.getLogger(__name__)

# Below this the printed tiles look visibly soft
MIN_PRINT_DPI = 150


@dataclass(frozen=True)
class BuildResult:
    """
    Complete build result (immutable).

    Attributes:
        pdf_path: Path to the generated poster PDF
        tiles_zip: Path to the tile archive (if exported)
        plan: Poster plan that was rendered
        page_count: Number of pages generated
        metadata: Build metadata dictionary
        warnings: Any warnings during build

    Example:
        >>> result = build_poster(Path("photo.jpg"), PosterConfig(columns=3, rows=2))
        >>> print(f"Generated {result.page_count} pages at {result.pdf_path}")
    """

    pdf_path: Path
    tiles_zip: Optional[Path]
    plan: PosterPlan
    page_count: int
    metadata: dict
    warnings: tuple[str, ...]


def generate_preview(image: Optional[SourceImage], grid: Optional[GridSpec]) -> List[Tile]:
    """
    Partition *image* for the preview grid.

    Raises:
        InvalidInput: If no image is loaded or the grid is missing
    """
    if image is None:
        raise InvalidInput("Load an image before generating the preview")
    tiles = partition(image, grid)
    logger.info(f"Preview ready: {len(tiles)} tiles")
    return tiles


def export_poster(
    tiles: Sequence[Tile],
    config: PosterConfig,
    *,
    source: Optional[SourceImage] = None,
) -> BuildResult:
    """
    Lay out and render previously generated tiles.

    Args:
        tiles: Tiles from generate_preview() for config's grid
        config: Poster configuration
        source: Source image, recorded in metadata and seam checks

    Returns:
        BuildResult

    Raises:
        InvalidInput: No tiles, or tiles from a different grid
        ExportError: If files cannot be written
    """
    warnings: List[str] = []
    start_time = time.perf_counter()

    plan = plan_poster(
        tiles,
        config.grid,
        config.paper,
        config.orientation,
        show_guides=config.show_guides,
        variant=config.variant,
        margin_mm=config.margin_mm,
        captions=config.captions,
    )

    if source is not None:
        warnings.extend(_check_seams(source, config.grid))
    warnings.extend(_check_resolution(plan))
    for warning in warnings:
        logger.warning(warning)

    output_dir = config.output_dir or Path.cwd()
    pdf_path = render_to_pdf(plan, output_dir / config.pdf_filename)

    tiles_zip = None
    if config.export_zip:
        tiles_zip = write_tiles_zip(tiles, output_dir / config.zip_filename, grid=config.grid)

    duration = time.perf_counter() - start_time
    metadata = {
        "generated_at": datetime.now(timezone.utc).isoformat(),
        "grid": {"columns": config.columns, "rows": config.rows},
        "paper_format": config.paper_format,
        "paper_name": config.paper.name,
        "orientation": config.orientation.value,
        "variant": config.variant.value,
        "show_guides": config.show_guides,
        "page_count": plan.page_count,
        "tile_size_px": list(tiles[0].pixel_size),
        "duration_s": round(duration, 3),
    }
    if source is not None:
        metadata["source"] = {
            "name": source.name,
            "format": source.format,
            "width": source.width,
            "height": source.height,
        }

    logger.info(f"Exported {plan.page_count} pages to {pdf_path} in {duration:.2f}s")

    return BuildResult(
        pdf_path=pdf_path,
        tiles_zip=tiles_zip,
        plan=plan,
        page_count=plan.page_count,
        metadata=metadata,
        warnings=tuple(warnings),
    )


def build_poster(
    source: Union[SourceImage, ImageSource],
    config: PosterConfig,
) -> BuildResult:
    """
    Build a poster from start to finish.

    Pipeline:
    1. Decode the image (unless already decoded)
    2. Partition into tiles
    3. Plan one page per tile
    4. Render the PDF
    5. (Optional) Write the tile archive

    Args:
        source: Decoded SourceImage, or a path/bytes/stream to decode
        config: Poster configuration

    Returns:
        BuildResult with paths and metadata

    Raises:
        InvalidInput: Bad configuration or unsupported file
        DecodeFailure: Image could not be decoded
        ExportError: Output could not be written

    Example:
        >>> config = PosterConfig(columns=2, rows=2, show_guides=True,
        ...                       output_dir=Path("output"))
        >>> result = build_poster(Path("photo.png"), config)
        >>> result.pdf_path.name
        'poster-2x2-a4-portrait.pdf'
    """
    logger.info(f"Starting poster build: {config.summary()}")

    image = source if isinstance(source, SourceImage) else load_source_image(source)
    tiles = generate_preview(image, config.grid)
    return export_poster(tiles, config, source=image)


def _check_seams(source: SourceImage, grid: GridSpec) -> List[str]:
    """Warn if rounding opens or duplicates more than a one-pixel strip."""
    rects = compute_rects(source.width, source.height, grid.columns, grid.rows)
    report = check_coverage(rects, source.width, source.height)
    if report.is_seamless:
        return []
    return [
        f"Tile edges are misaligned by up to {report.max_seam_px}px "
        f"({report.gap_pixels} gap px, {report.overlap_pixels} duplicated px)"
    ]


def _check_resolution(plan: PosterPlan) -> List[str]:
    """Warn when tiles are stretched below MIN_PRINT_DPI on paper."""
    page = plan.pages[0]
    width_px, _ = page.tile.pixel_size
    width_in = page.layout.image_width_mm / MM_PER_INCH
    dpi = width_px / width_in
    if dpi >= MIN_PRINT_DPI:
        return []
    return [
        f"Tiles will print at about {dpi:.0f} DPI (below {MIN_PRINT_DPI}); "
        "use a larger image or fewer pages for a sharper poster"
    ]
