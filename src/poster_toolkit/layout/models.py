"""
Module: layout.models

Purpose:
    Data models for page layout. Immutable dataclasses describing where
    a tile lands on its page, the guide marks around it and the caption
    text. All coordinates are millimetres from the page's top-left
    corner, y growing downward.

Key Classes:
    - MmRect: Rectangle on the page
    - Segment: Straight line segment
    - CropMark: Two arms marking one corner
    - GuideGeometry: Bounding box, crop marks, centre lines
    - Caption: Positioned caption text
    - CaptionContext: Page/grid position used to build captions
    - LayoutResult: Placement of one tile on one page
    - PagePlan: Tile plus its layout
    - PosterPlan: Every page of the poster, in export order

Dependencies:
    - core.models: Tile, GridSpec, PaperSpec, Orientation
    - layout.config: LayoutVariant

Used By:
    - layout.engine, layout.guides, layout.captions, layout.planner
    - output.renderer, output.preview
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from poster_toolkit.core.models import GridSpec, Orientation, PaperSpec, Tile

from .config import LayoutVariant


@dataclass(frozen=True)
class MmRect:
    """Rectangle in page millimetres."""

    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def center(self) -> Tuple[float, float]:
        return self.x + self.width / 2, self.y + self.height / 2

    def expanded(self, amount: float) -> "MmRect":
        """Grow by *amount* on every side."""
        return MmRect(
            self.x - amount,
            self.y - amount,
            self.width + 2 * amount,
            self.height + 2 * amount,
        )


@dataclass(frozen=True)
class Segment:
    """Line segment from (x1, y1) to (x2, y2)."""

    x1: float
    y1: float
    x2: float
    y2: float

    @property
    def length(self) -> float:
        return ((self.x2 - self.x1) ** 2 + (self.y2 - self.y1) ** 2) ** 0.5

    @property
    def is_horizontal(self) -> bool:
        return self.y1 == self.y2

    @property
    def is_vertical(self) -> bool:
        return self.x1 == self.x2


@dataclass(frozen=True)
class CropMark:
    """
    Crop mark at one corner of the guide bounding box.

    Attributes:
        corner: "top_left", "top_right", "bottom_left" or "bottom_right"
        horizontal: Arm continuing the box's horizontal edge outward
        vertical: Arm continuing the box's vertical edge outward
    """

    corner: str
    horizontal: Segment
    vertical: Segment

    @property
    def segments(self) -> Tuple[Segment, Segment]:
        return (self.horizontal, self.vertical)


@dataclass(frozen=True)
class GuideGeometry:
    """
    Cutting and alignment guides for one page.

    Attributes:
        bounding_box: Rectangle drawn just outside the image
        crop_marks: Four corner marks, outside the bounding box
        centerlines: (horizontal, vertical) lines through the page centre
    """

    bounding_box: MmRect
    crop_marks: Tuple[CropMark, ...]
    centerlines: Tuple[Segment, Segment]

    @property
    def segments(self) -> Tuple[Segment, ...]:
        """Every crop mark arm and centre line."""
        arms = tuple(s for mark in self.crop_marks for s in mark.segments)
        return arms + self.centerlines


@dataclass(frozen=True)
class Caption:
    """
    Caption text placed on the page.

    Attributes:
        text: Text to draw
        x: Anchor x in mm
        y: Baseline y in mm from the page top
        anchor: "left", "center" or "right"
        font_size: Size in points
        role: "corner", "header" or "footer"
    """

    text: str
    x: float
    y: float
    anchor: str = "left"
    font_size: float = 8.0
    role: str = "corner"


@dataclass(frozen=True)
class CaptionContext:
    """
    Where a page sits in the poster, for caption text.

    Attributes:
        page_index: 0-based page index
        page_count: Total pages
        column: 0-based grid column
        row: 0-based grid row
        grid: Grid shape
    """

    page_index: int
    page_count: int
    column: int
    row: int
    grid: Optional[GridSpec] = None


@dataclass(frozen=True)
class LayoutResult:
    """
    Placement of one tile on its page (immutable, recomputed per export).

    Attributes:
        page_width_mm: Effective page width (after orientation)
        page_height_mm: Effective page height
        image_x: Left edge of the image
        image_y: Top edge of the image
        image_width_mm: Scaled image width
        image_height_mm: Scaled image height
        margin_mm: Margin used
        variant: Layout variant
        guides: Guide geometry when guides are enabled
        captions: Caption strings with positions
    """

    page_width_mm: float
    page_height_mm: float
    image_x: float
    image_y: float
    image_width_mm: float
    image_height_mm: float
    margin_mm: float
    variant: LayoutVariant
    guides: Optional[GuideGeometry] = None
    captions: Tuple[Caption, ...] = ()

    @property
    def image_rect(self) -> MmRect:
        return MmRect(self.image_x, self.image_y, self.image_width_mm, self.image_height_mm)

    @property
    def page_size_mm(self) -> Tuple[float, float]:
        return self.page_width_mm, self.page_height_mm


@dataclass(frozen=True)
class PagePlan:
    """
    One exported page: a tile and where it is drawn.

    Attributes:
        index: Page number (0-indexed, equals tile index)
        tile: Tile drawn on this page
        layout: Its layout on the page
    """

    index: int
    tile: Tile
    layout: LayoutResult


@dataclass(frozen=True)
class PosterPlan:
    """
    Every page of a poster in export order.

    Example:
        >>> plan.page_count
        12  # for a 3x4 grid
    """

    grid: GridSpec
    paper: PaperSpec
    orientation: Orientation
    variant: LayoutVariant
    show_guides: bool
    pages: Tuple[PagePlan, ...]

    @property
    def page_count(self) -> int:
        return len(self.pages)

    @property
    def is_empty(self) -> bool:
        return not self.pages
