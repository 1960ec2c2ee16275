"""
Module: layout.engine

Purpose:
    Fit one tile onto one page: resolve page size for the orientation,
    subtract margins (and the caption reservation), scale the tile to the
    largest size that keeps its aspect ratio, then position it.

Algorithm:
    ratio > maxWidth / maxHeight  ->  width-constrained
        imageWidth  = maxWidth
        imageHeight = maxWidth / ratio
    otherwise                     ->  height-constrained
        imageHeight = maxHeight
        imageWidth  = maxHeight * ratio

    imageX is always horizontally centred. imageY is vertically centred
    for CENTERED and sits directly under the header band for CAPTIONED.

Key Functions:
    - compute_layout(): Main entry point, one call per tile
    - fit_to_area(): The scale-to-fit rule on its own

Dependencies:
    - layout.guides: compute_guides
    - layout.captions: compute_captions
    - core.models: PaperSpec, Orientation

Used By:
    - layout.planner: plan_poster()
"""

from __future__ import annotations

import logging
import math
from typing import Optional, Tuple

from poster_toolkit.core.errors import InvalidInput
from poster_toolkit.core.models import Orientation, PaperSpec

from .captions import compute_captions
from .config import DEFAULT_LAYOUT_CONFIG, LayoutConfig, LayoutVariant
from .guides import compute_guides
from .models import CaptionContext, LayoutResult, MmRect

logger = logging.getLogger(__name__)


def compute_layout(
    tile_aspect_ratio: float,
    paper: PaperSpec,
    orientation: Orientation,
    show_guides: bool = False,
    margin_mm: Optional[float] = None,
    *,
    variant: LayoutVariant = LayoutVariant.CENTERED,
    caption: Optional[CaptionContext] = None,
    config: Optional[LayoutConfig] = None,
) -> LayoutResult:
    """
    Place a tile of *tile_aspect_ratio* on a page.

    Args:
        tile_aspect_ratio: Tile width / height (> 0)
        paper: Paper format
        orientation: Portrait or landscape
        show_guides: Add crop marks, bounding box and centre lines
        margin_mm: Page margin; None uses the variant's default
        variant: CENTERED or CAPTIONED
        caption: Page position for caption text; None for no captions
        config: Layout constants

    Returns:
        LayoutResult in page millimetres

    Raises:
        InvalidInput: Non-positive ratio, paper size or drawable area

    Example:
        >>> result = compute_layout(2.0, get_paper("a4"), Orientation.PORTRAIT,
        ...                         margin_mm=15, variant=LayoutVariant.CAPTIONED)
        >>> result.image_width_mm, result.image_height_mm
        (180.0, 90.0)
    """
    config = config or DEFAULT_LAYOUT_CONFIG
    variant = LayoutVariant.parse(variant)
    orientation = Orientation.parse(orientation)

    if not isinstance(tile_aspect_ratio, (int, float)) or not math.isfinite(tile_aspect_ratio):
        raise InvalidInput(f"Tile aspect ratio must be a finite number: {tile_aspect_ratio!r}")
    if tile_aspect_ratio <= 0:
        raise InvalidInput(f"Tile aspect ratio must be positive: {tile_aspect_ratio}")
    if paper.width_mm <= 0 or paper.height_mm <= 0:
        raise InvalidInput(
            f"Paper dimensions must be positive: {paper.width_mm}x{paper.height_mm}mm"
        )

    margin = config.default_margin(variant) if margin_mm is None else float(margin_mm)
    if margin < 0:
        raise InvalidInput(f"Margin must be non-negative: {margin}")

    # 1. Effective page size
    page_width, page_height = paper.dimensions(orientation)

    # 2. Drawable area
    max_width = page_width - 2 * margin
    max_height = page_height - 2 * margin - config.reserved_height(variant)
    if max_width <= 0 or max_height <= 0:
        raise InvalidInput(
            f"Margin {margin}mm leaves no drawable area on "
            f"{paper.name} {orientation.label.lower()}"
        )

    # 3. Scale to fit
    image_width, image_height = fit_to_area(tile_aspect_ratio, max_width, max_height)

    # 4. Position
    image_x = (page_width - image_width) / 2
    if variant is LayoutVariant.CAPTIONED:
        image_y = margin + config.header_mm
    else:
        image_y = (page_height - image_height) / 2

    image_rect = MmRect(image_x, image_y, image_width, image_height)

    # 5. Guides
    guides = compute_guides(image_rect, page_width, page_height, config) if show_guides else None

    # 6. Captions
    captions = ()
    if caption is not None:
        captions = compute_captions(
            caption,
            paper=paper,
            orientation=orientation,
            variant=variant,
            page_width=page_width,
            page_height=page_height,
            margin=margin,
            show_guides=show_guides,
            config=config,
        )

    logger.debug(
        f"Layout {paper.format_id}/{orientation.value}/{variant.value}: ratio "
        f"{tile_aspect_ratio:.4f} -> {image_width:.2f}x{image_height:.2f}mm "
        f"at ({image_x:.2f}, {image_y:.2f})"
    )

    return LayoutResult(
        page_width_mm=page_width,
        page_height_mm=page_height,
        image_x=image_x,
        image_y=image_y,
        image_width_mm=image_width,
        image_height_mm=image_height,
        margin_mm=margin,
        variant=variant,
        guides=guides,
        captions=captions,
    )


def fit_to_area(
    aspect_ratio: float,
    max_width: float,
    max_height: float,
) -> Tuple[float, float]:
    """
    Largest (width, height) with *aspect_ratio* inside the area.

    Exactly one dimension equals its maximum; there is no third case.

    Example:
        >>> fit_to_area(2.0, 180, 242)
        (180, 90.0)
        >>> fit_to_area(0.5, 180, 242)
        (121.0, 242)
    """
    if aspect_ratio > max_width / max_height:
        return max_width, max_width / aspect_ratio
    return max_height * aspect_ratio, max_height
