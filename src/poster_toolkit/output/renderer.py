"""
Module: output.renderer

Purpose:
    Render a PosterPlan to PDF using ReportLab. Each PagePlan becomes
    one PDF page with its tile, guides and captions drawn at the
    positions computed by the layout engine.

Key Functions:
    - render_to_pdf(): Write the PDF to a file
    - render_to_bytes(): Return the PDF as bytes

Dependencies:
    - reportlab: PDF generation
    - PIL: Image handling
    - layout.models: PosterPlan, PagePlan

Used By:
    - controller.build_poster()
"""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import BinaryIO, Union

from PIL import Image
from reportlab.lib.utils import ImageReader
from reportlab.pdfgen import canvas

from poster_toolkit.common.units import mm_to_pt
from poster_toolkit.core.errors import ExportError
from poster_toolkit.layout.models import (
    Caption,
    GuideGeometry,
    LayoutResult,
    PagePlan,
    PosterPlan,
)

logger = logging.getLogger(__name__)

# Styling
CAPTION_FONT = "Helvetica"
CAPTION_GRAY = 120 / 255  # Subtle gray
GUIDE_GRAY = 0.55
BOX_LINE_WIDTH = 0.3
MARK_LINE_WIDTH = 0.5
CENTERLINE_WIDTH = 0.3
CENTERLINE_DASH = (3, 2)


def render_to_pdf(plan: PosterPlan, output_path: Path) -> Path:
    """
    Render a poster plan to a PDF file.

    A new page is started before every tile after the first.

    Args:
        plan: Poster plan from plan_poster()
        output_path: Path to write the PDF

    Returns:
        The written path

    Raises:
        ExportError: If the PDF cannot be written

    Example:
        >>> render_to_pdf(plan, Path("out/poster-2x2-a4-portrait.pdf"))
    """
    output_path = Path(output_path)
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        _render(plan, str(output_path))
    except OSError as e:
        raise ExportError(f"Could not write PDF to {output_path}: {e}") from e

    logger.info(f"Rendered {plan.page_count} pages to {output_path}")
    return output_path


def render_to_bytes(plan: PosterPlan) -> bytes:
    """Render a poster plan and return the PDF bytes (for downloads)."""
    buf = io.BytesIO()
    _render(plan, buf)
    logger.info(f"Rendered {plan.page_count} pages ({buf.tell()} bytes)")
    return buf.getvalue()


def _render(plan: PosterPlan, target: Union[str, BinaryIO]) -> None:
    """Draw every page of *plan* onto a canvas writing to *target*."""
    if plan.is_empty:
        logger.warning("Empty poster plan, creating empty PDF")

    c = canvas.Canvas(target)
    c.setTitle(f"Poster {plan.grid} - {plan.paper.name} {plan.orientation.label}")
    c.setCreator(_creator())

    for page in plan.pages:
        _render_page(c, page)
        c.showPage()

    c.save()


def _render_page(c: canvas.Canvas, page: PagePlan) -> None:
    """Render one tile with its guides and captions."""
    layout = page.layout
    page_width_pt = mm_to_pt(layout.page_width_mm)
    page_height_pt = mm_to_pt(layout.page_height_mm)
    c.setPageSize((page_width_pt, page_height_pt))

    _draw_tile(c, page.tile.image, layout, page_height_pt)

    if layout.guides is not None:
        _draw_guides(c, layout.guides, page_height_pt)

    for caption in layout.captions:
        _draw_caption(c, caption, page_height_pt)


def _draw_tile(
    c: canvas.Canvas,
    image: Image.Image,
    layout: LayoutResult,
    page_height_pt: float,
) -> None:
    """Draw the tile image at its layout rectangle."""
    x_pt = mm_to_pt(layout.image_x)
    y_pt = _transform_y(page_height_pt, layout.image_y, layout.image_height_mm)
    c.drawImage(
        _pil_to_reader(image),
        x_pt,
        y_pt,
        width=mm_to_pt(layout.image_width_mm),
        height=mm_to_pt(layout.image_height_mm),
        mask="auto" if image.mode == "RGBA" else None,
    )


def _draw_guides(c: canvas.Canvas, guides: GuideGeometry, page_height_pt: float) -> None:
    """Draw bounding box, crop marks and dashed centre lines."""
    c.saveState()
    c.setStrokeColorRGB(GUIDE_GRAY, GUIDE_GRAY, GUIDE_GRAY)

    box = guides.bounding_box
    c.setLineWidth(BOX_LINE_WIDTH)
    c.rect(
        mm_to_pt(box.x),
        _transform_y(page_height_pt, box.y, box.height),
        mm_to_pt(box.width),
        mm_to_pt(box.height),
        stroke=1,
        fill=0,
    )

    c.setStrokeColorRGB(0, 0, 0)
    c.setLineWidth(MARK_LINE_WIDTH)
    for mark in guides.crop_marks:
        for seg in mark.segments:
            _line(c, seg.x1, seg.y1, seg.x2, seg.y2, page_height_pt)

    c.setStrokeColorRGB(GUIDE_GRAY, GUIDE_GRAY, GUIDE_GRAY)
    c.setLineWidth(CENTERLINE_WIDTH)
    c.setDash(*CENTERLINE_DASH)
    for seg in guides.centerlines:
        _line(c, seg.x1, seg.y1, seg.x2, seg.y2, page_height_pt)

    c.restoreState()


def _draw_caption(c: canvas.Canvas, caption: Caption, page_height_pt: float) -> None:
    """Draw caption text at its anchor."""
    c.saveState()
    c.setFont(CAPTION_FONT, caption.font_size)
    c.setFillColorRGB(CAPTION_GRAY, CAPTION_GRAY, CAPTION_GRAY)

    x_pt = mm_to_pt(caption.x)
    y_pt = page_height_pt - mm_to_pt(caption.y)
    if caption.anchor == "center":
        c.drawCentredString(x_pt, y_pt, caption.text)
    elif caption.anchor == "right":
        c.drawRightString(x_pt, y_pt, caption.text)
    else:
        c.drawString(x_pt, y_pt, caption.text)

    c.restoreState()


def _line(
    c: canvas.Canvas,
    x1_mm: float,
    y1_mm: float,
    x2_mm: float,
    y2_mm: float,
    page_height_pt: float,
) -> None:
    """Draw a line given top-down millimetre coordinates."""
    c.line(
        mm_to_pt(x1_mm),
        page_height_pt - mm_to_pt(y1_mm),
        mm_to_pt(x2_mm),
        page_height_pt - mm_to_pt(y2_mm),
    )


def _pil_to_reader(img: Image.Image) -> ImageReader:
    """
    Convert PIL image to ReportLab ImageReader.

    Args:
        img: PIL Image object

    Returns:
        ImageReader for use with ReportLab
    """
    buf = io.BytesIO()
    img.save(buf, format="PNG")
    buf.seek(0)
    return ImageReader(buf)


def _transform_y(page_height_pt: float, y_mm_top: float, height_mm: float) -> float:
    """
    Convert a top-down millimetre Y coordinate to bottom-up PDF points.

    Args:
        page_height_pt: Page height in points
        y_mm_top: Top edge in millimetres from the page top
        height_mm: Element height in millimetres

    Returns:
        Bottom edge in points from the page bottom
    """
    return page_height_pt - mm_to_pt(y_mm_top) - mm_to_pt(height_mm)


def _creator() -> str:
    """Creator string with the current version number."""
    from poster_toolkit import __version__
    return f"Poster Toolkit v{__version__}"
