"""
Module: layout.planner

Purpose:
    Lay out every tile of a poster, one page per tile, in tile order.

Key Functions:
    - plan_poster(): Build a PosterPlan from partitioned tiles

Dependencies:
    - layout.engine: compute_layout

Used By:
    - controller.build_poster()
    - output.renderer, output.preview (consume the plan)
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from poster_toolkit.core.errors import InvalidInput
from poster_toolkit.core.models import GridSpec, Orientation, PaperSpec, Tile

from .config import LayoutConfig, LayoutVariant
from .engine import compute_layout
from .models import CaptionContext, PagePlan, PosterPlan

logger = logging.getLogger(__name__)


def plan_poster(
    tiles: Sequence[Tile],
    grid: GridSpec,
    paper: PaperSpec,
    orientation: Orientation,
    *,
    show_guides: bool = False,
    variant: LayoutVariant = LayoutVariant.CENTERED,
    margin_mm: Optional[float] = None,
    captions: bool = True,
    config: Optional[LayoutConfig] = None,
) -> PosterPlan:
    """
    Compute one page layout per tile.

    Args:
        tiles: Tiles from partition(), row-major
        grid: Grid the tiles were cut with
        paper: Paper format
        orientation: Page orientation
        show_guides: Draw crop marks and centre lines
        variant: Layout variant
        margin_mm: Margin override
        captions: Include caption text
        config: Layout constants

    Returns:
        PosterPlan with pages in tile order

    Raises:
        InvalidInput: No tiles, or tiles that do not match the grid
    """
    if not tiles:
        raise InvalidInput("No tiles to export; generate the preview first")
    if len(tiles) != grid.tile_count:
        raise InvalidInput(
            f"Got {len(tiles)} tiles for a {grid} grid ({grid.tile_count} expected); "
            "regenerate the preview"
        )

    variant = LayoutVariant.parse(variant)
    orientation = Orientation.parse(orientation)
    pages = []
    for position, tile in enumerate(tiles):
        if (tile.column, tile.row) != grid.position(position):
            raise InvalidInput(
                f"Tile {tile.label} does not belong at page {position + 1} of a {grid} grid; "
                "regenerate the preview"
            )
        context = None
        if captions:
            context = CaptionContext(
                page_index=position,
                page_count=len(tiles),
                column=tile.column,
                row=tile.row,
                grid=grid,
            )
        layout = compute_layout(
            tile.aspect_ratio,
            paper,
            orientation,
            show_guides,
            margin_mm,
            variant=variant,
            caption=context,
            config=config,
        )
        pages.append(PagePlan(index=position, tile=tile, layout=layout))

    logger.info(
        f"Planned {len(pages)} pages on {paper.name} {orientation.value} "
        f"({variant.value}{', guides' if show_guides else ''})"
    )
    return PosterPlan(
        grid=grid,
        paper=paper,
        orientation=orientation,
        variant=variant,
        show_guides=show_guides,
        pages=tuple(pages),
    )
