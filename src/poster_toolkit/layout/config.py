"""
Module: layout.config

Purpose:
    Layout variants and the millimetre constants of the page layout
    engine.

Key Classes:
    - LayoutVariant: Closed set of page layouts
    - LayoutConfig: Immutable layout constants

Used By:
    - layout.engine: Margins, header/footer reservation
    - layout.guides: Crop mark and centre line sizes
    - layout.captions: Caption placement
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum

from poster_toolkit.core.errors import InvalidInput


class LayoutVariant(str, Enum):
    """
    Page layout variant.

    CENTERED: minimal margin, image centred on the page, discreet
        corner captions.
    CAPTIONED: wider margin, image top-aligned below a header band,
        footer caption with paper and assembly details.
    """

    CENTERED = "centered"
    CAPTIONED = "captioned"

    @classmethod
    def parse(cls, value: "LayoutVariant | str") -> "LayoutVariant":
        """Accept a LayoutVariant or its string value."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise InvalidInput(f"Unknown layout variant: {value!r}") from None


@dataclass(frozen=True)
class LayoutConfig:
    """
    Configuration for page layout (immutable). All values in millimetres
    except font sizes, which are in points.

    Attributes:
        centered_margin_mm: Default margin for the CENTERED variant
        captioned_margin_mm: Default margin for the CAPTIONED variant
        header_mm: Header band reserved above the image (CAPTIONED)
        footer_mm: Footer band reserved below the image (CAPTIONED)
        guide_inset_mm: Gap between image and guide bounding box
        crop_mark_length_mm: Length of each crop mark arm
        crop_mark_gap_mm: Clearance between bounding box corner and marks
        centerline_overhang_mm: How far centre lines extend past the image
        corner_caption_inset_mm: Distance of corner captions from right edge
        corner_caption_top_mm: Baseline of the first corner caption
        corner_caption_spacing_mm: Baseline step between corner captions
        caption_font_size: Corner and footer caption size (pt)
        header_font_size: Header caption size (pt)

    Example:
        >>> config = LayoutConfig()
        >>> config.reserved_height(LayoutVariant.CAPTIONED)
        25.0
    """

    centered_margin_mm: float = 5.0
    captioned_margin_mm: float = 15.0
    header_mm: float = 15.0
    footer_mm: float = 10.0

    guide_inset_mm: float = 3.0
    crop_mark_length_mm: float = 6.0
    crop_mark_gap_mm: float = 2.0
    centerline_overhang_mm: float = 5.0

    corner_caption_inset_mm: float = 15.0
    corner_caption_top_mm: float = 10.0
    corner_caption_spacing_mm: float = 8.0
    caption_font_size: float = 8.0
    header_font_size: float = 10.0

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        for f in fields(self):
            value = getattr(self, f.name)
            if value < 0:
                raise InvalidInput(f"{f.name} must be non-negative: {value}")
        if self.caption_font_size <= 0 or self.header_font_size <= 0:
            raise InvalidInput("Caption font sizes must be positive")

    def default_margin(self, variant: LayoutVariant) -> float:
        """Margin used when the caller does not supply one."""
        if variant is LayoutVariant.CAPTIONED:
            return self.captioned_margin_mm
        return self.centered_margin_mm

    def reserved_height(self, variant: LayoutVariant) -> float:
        """Vertical space reserved for header and footer captions."""
        if variant is LayoutVariant.CAPTIONED:
            return self.header_mm + self.footer_mm
        return 0.0


DEFAULT_LAYOUT_CONFIG = LayoutConfig()
