"""
Module: layout.guides

Purpose:
    Crop marks, bounding box and centre lines around a placed image.
    Geometry depends only on the image rectangle and page size.

Key Functions:
    - compute_guides(): Build GuideGeometry for one page

Used By:
    - layout.engine: When guides are enabled
"""

from __future__ import annotations

from .config import LayoutConfig
from .models import CropMark, GuideGeometry, MmRect, Segment


def compute_guides(
    image: MmRect,
    page_width: float,
    page_height: float,
    config: LayoutConfig,
) -> GuideGeometry:
    """
    Build guide geometry around *image*.

    - Bounding box: image grown by guide_inset_mm on every side.
    - Crop marks: at each box corner, two arms of crop_mark_length_mm
      continuing the box edges outward, starting crop_mark_gap_mm away
      from the corner so they never touch the box.
    - Centre lines: horizontal at page_height / 2 and vertical at
      page_width / 2, each overhanging the image by
      centerline_overhang_mm at both ends.

    Args:
        image: Placed image rectangle
        page_width: Effective page width
        page_height: Effective page height
        config: Guide sizes

    Returns:
        GuideGeometry
    """
    box = image.expanded(config.guide_inset_mm)
    gap = config.crop_mark_gap_mm
    length = config.crop_mark_length_mm

    marks = (
        _crop_mark("top_left", box.x, box.y, -1, -1, gap, length),
        _crop_mark("top_right", box.right, box.y, 1, -1, gap, length),
        _crop_mark("bottom_left", box.x, box.bottom, -1, 1, gap, length),
        _crop_mark("bottom_right", box.right, box.bottom, 1, 1, gap, length),
    )

    overhang = config.centerline_overhang_mm
    center_x = page_width / 2
    center_y = page_height / 2
    horizontal = Segment(image.x - overhang, center_y, image.right + overhang, center_y)
    vertical = Segment(center_x, image.y - overhang, center_x, image.bottom + overhang)

    return GuideGeometry(
        bounding_box=box,
        crop_marks=marks,
        centerlines=(horizontal, vertical),
    )


def _crop_mark(
    corner: str,
    x: float,
    y: float,
    dx: int,
    dy: int,
    gap: float,
    length: float,
) -> CropMark:
    """Crop mark at corner (x, y); dx/dy point away from the box."""
    near = gap
    far = gap + length
    return CropMark(
        corner=corner,
        horizontal=Segment(x + dx * near, y, x + dx * far, y),
        vertical=Segment(x, y + dy * near, x, y + dy * far),
    )
