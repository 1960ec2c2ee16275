"""
Module: layout.captions

Purpose:
    Caption text and placement for a poster page.

    CENTERED pages carry two small corner captions at the top right:
    the page counter and the 1-based "column,row" position.
    CAPTIONED pages carry a header line in the reserved header band and
    footer lines with the paper, orientation and grid.

Key Functions:
    - compute_captions(): Captions for one page

Used By:
    - layout.engine: When a CaptionContext is supplied
"""

from __future__ import annotations

from typing import Tuple

from poster_toolkit.core.models import Orientation, PaperSpec

from .config import LayoutConfig, LayoutVariant
from .models import Caption, CaptionContext

ASSEMBLY_HINT = "Trim along the crop marks and line up the centre lines with neighbouring pages"


def compute_captions(
    context: CaptionContext,
    *,
    paper: PaperSpec,
    orientation: Orientation,
    variant: LayoutVariant,
    page_width: float,
    page_height: float,
    margin: float,
    show_guides: bool,
    config: LayoutConfig,
) -> Tuple[Caption, ...]:
    """
    Build captions for the page described by *context*.

    Returns:
        Captions in drawing order
    """
    page_label = f"{context.page_index + 1}/{context.page_count}"

    if variant is LayoutVariant.CENTERED:
        x = page_width - config.corner_caption_inset_mm
        top = config.corner_caption_top_mm
        return (
            Caption(page_label, x, top, "left", config.caption_font_size, "corner"),
            Caption(
                f"{context.column + 1},{context.row + 1}",
                x,
                top + config.corner_caption_spacing_mm,
                "left",
                config.caption_font_size,
                "corner",
            ),
        )

    center_x = page_width / 2
    header = Caption(
        f"Page {page_label} - Column {context.column + 1}, Row {context.row + 1}",
        center_x,
        margin + config.header_mm / 2,
        "center",
        config.header_font_size,
        "header",
    )

    details = f"{paper.name} - {orientation.label}"
    if context.grid is not None:
        details += f" - grid {context.grid}"
    footer_top = page_height - margin - config.footer_mm
    line_step = config.footer_mm / 2.5
    captions = [
        header,
        Caption(details, center_x, footer_top + line_step, "center",
                config.caption_font_size, "footer"),
    ]
    if show_guides:
        captions.append(
            Caption(ASSEMBLY_HINT, center_x, footer_top + 2 * line_step, "center",
                    config.caption_font_size, "footer")
        )
    return tuple(captions)
