"""
Module: output.preview

Purpose:
    Raster previews of poster pages for the UI shell. Each preview is a
    white sheet of the page's proportions with the tile, guides and
    caption text drawn where the PDF will put them.

Key Functions:
    - render_page_preview(): Preview of one page
    - render_preview_sheet(): All page previews arranged in the poster grid

Dependencies:
    - PIL: Image drawing
    - layout.models: PagePlan, PosterPlan

Used By:
    - controller.build_poster(): Optional preview sheet
    - UI shells: Preview grid
"""

from __future__ import annotations

import logging
from typing import Tuple

from PIL import Image, ImageDraw, ImageFont

from poster_toolkit.common.units import mm_to_px
from poster_toolkit.layout.models import Caption, GuideGeometry, PagePlan, PosterPlan

logger = logging.getLogger(__name__)

# Default settings
DEFAULT_PREVIEW_DPI = 36
PAPER_COLOR = "white"
SHEET_BACKGROUND = (229, 231, 235)
PAPER_BORDER_COLOR = (209, 213, 219)
GUIDE_COLOR = (140, 140, 140)
MARK_COLOR = (0, 0, 0)
CAPTION_COLOR = (120, 120, 120)
PT_PER_INCH = 72.0


def render_page_preview(page: PagePlan, dpi: int = DEFAULT_PREVIEW_DPI) -> Image.Image:
    """
    Render one page as it will print.

    Args:
        page: Page plan
        dpi: Preview resolution

    Returns:
        RGB image sized to the page at *dpi*

    Example:
        >>> preview = render_page_preview(plan.pages[0], dpi=36)
        >>> preview.size
        (298, 421)  # A4 portrait
    """
    if dpi <= 0:
        raise ValueError(f"dpi must be positive: {dpi}")

    layout = page.layout
    size = (_px(layout.page_width_mm, dpi), _px(layout.page_height_mm, dpi))
    sheet = Image.new("RGB", size, PAPER_COLOR)

    left = _px(layout.image_x, dpi)
    top = _px(layout.image_y, dpi)
    right = _px(layout.image_x + layout.image_width_mm, dpi)
    bottom = _px(layout.image_y + layout.image_height_mm, dpi)
    target = (max(1, right - left), max(1, bottom - top))

    tile = page.tile.image.resize(target, resample=Image.Resampling.LANCZOS)
    if tile.mode == "RGBA":
        sheet.paste(tile, (left, top), tile)
    else:
        sheet.paste(tile.convert("RGB"), (left, top))

    draw = ImageDraw.Draw(sheet)
    if layout.guides is not None:
        _draw_guides(draw, layout.guides, dpi)
    for caption in layout.captions:
        _draw_caption(draw, caption, dpi)

    return sheet


def render_preview_sheet(
    plan: PosterPlan,
    dpi: int = DEFAULT_PREVIEW_DPI,
    *,
    gap_px: int = 8,
) -> Image.Image:
    """
    Arrange every page preview in the poster's column layout.

    Args:
        plan: Poster plan
        dpi: Preview resolution per page
        gap_px: Space between pages

    Returns:
        RGB image with columns × rows page previews
    """
    if plan.is_empty:
        raise ValueError("Cannot preview an empty poster plan")

    previews = [render_page_preview(page, dpi) for page in plan.pages]
    cell_w = max(p.width for p in previews)
    cell_h = max(p.height for p in previews)
    columns, rows = plan.grid.columns, plan.grid.rows

    sheet = Image.new(
        "RGB",
        (columns * cell_w + (columns + 1) * gap_px, rows * cell_h + (rows + 1) * gap_px),
        SHEET_BACKGROUND,
    )
    draw = ImageDraw.Draw(sheet)
    for page, preview in zip(plan.pages, previews):
        x = gap_px + page.tile.column * (cell_w + gap_px)
        y = gap_px + page.tile.row * (cell_h + gap_px)
        sheet.paste(preview, (x, y))
        draw.rectangle(
            (x - 1, y - 1, x + preview.width, y + preview.height),
            outline=PAPER_BORDER_COLOR,
        )

    logger.debug(f"Preview sheet {sheet.width}x{sheet.height} for {plan.page_count} pages")
    return sheet


def _draw_guides(draw: ImageDraw.ImageDraw, guides: GuideGeometry, dpi: int) -> None:
    """Draw guide geometry scaled to *dpi*."""
    box = guides.bounding_box
    draw.rectangle(
        (_px(box.x, dpi), _px(box.y, dpi), _px(box.right, dpi), _px(box.bottom, dpi)),
        outline=GUIDE_COLOR,
    )
    for mark in guides.crop_marks:
        for seg in mark.segments:
            draw.line(_seg_px(seg.x1, seg.y1, seg.x2, seg.y2, dpi), fill=MARK_COLOR)
    for seg in guides.centerlines:
        draw.line(_seg_px(seg.x1, seg.y1, seg.x2, seg.y2, dpi), fill=GUIDE_COLOR)


def _draw_caption(draw: ImageDraw.ImageDraw, caption: Caption, dpi: int) -> None:
    """Draw caption text with its baseline at the caption's y."""
    font = _load_font(max(6, round(caption.font_size * dpi / PT_PER_INCH)))
    anchor = {"left": "ls", "center": "ms", "right": "rs"}.get(caption.anchor, "ls")
    draw.text(
        (_px(caption.x, dpi), _px(caption.y, dpi)),
        caption.text,
        fill=CAPTION_COLOR,
        font=font,
        anchor=anchor,
    )


def _load_font(size: int) -> ImageFont.FreeTypeFont:
    """
    Load a font for caption text.

    Prefers common sans fonts; falls back to Pillow's bundled font.
    """
    for name in ("DejaVuSans.ttf", "arial.ttf", "Arial.ttf", "Helvetica.ttc"):
        try:
            return ImageFont.truetype(name, size)
        except OSError:
            continue
    return ImageFont.load_default(size=size)


def _px(mm: float, dpi: int) -> int:
    return int(round(mm_to_px(mm, dpi)))


def _seg_px(x1: float, y1: float, x2: float, y2: float, dpi: int) -> Tuple[int, int, int, int]:
    return (_px(x1, dpi), _px(y1, dpi), _px(x2, dpi), _px(y2, dpi))
