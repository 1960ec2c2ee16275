"""
Module: layout

Purpose:
    Page layout engine. Fits each tile onto a printable page, adds
    crop/alignment guides and captions, and plans the whole poster.

Key Functions:
    - compute_layout(): Layout for one tile
    - fit_to_area(): Scale-to-fit rule
    - plan_poster(): Layout for every tile in export order

Key Classes:
    - LayoutVariant: CENTERED or CAPTIONED
    - LayoutConfig: Millimetre constants
    - LayoutResult, PagePlan, PosterPlan: Layout output

Used By:
    - controller: Poster build
    - output: Rendering
"""

from .config import LayoutConfig, LayoutVariant, DEFAULT_LAYOUT_CONFIG
from .models import (
    MmRect,
    Segment,
    CropMark,
    GuideGeometry,
    Caption,
    CaptionContext,
    LayoutResult,
    PagePlan,
    PosterPlan,
)
from .engine import compute_layout, fit_to_area
from .guides import compute_guides
from .captions import ASSEMBLY_HINT, compute_captions
from .planner import plan_poster

__all__ = [
    # Config
    "LayoutConfig",
    "LayoutVariant",
    "DEFAULT_LAYOUT_CONFIG",
    # Models
    "MmRect",
    "Segment",
    "CropMark",
    "GuideGeometry",
    "Caption",
    "CaptionContext",
    "LayoutResult",
    "PagePlan",
    "PosterPlan",
    # Functions
    "compute_layout",
    "fit_to_area",
    "compute_guides",
    "compute_captions",
    "ASSEMBLY_HINT",
    "plan_poster",
]
