"""
Core Models Package

Immutable, validated data models for the poster pipeline.

| Model | Role |
|-------|------|
| `SourceImage` | Decoded upload with pixel dimensions |
| `GridSpec` | Columns × rows of the poster |
| `PixelRect` | Real-valued crop region in source pixels |
| `Tile` | One cropped cell, row-major indexed |
| `PaperSpec` | Catalog paper size in millimetres |
| `Orientation` | Portrait or landscape |
"""

from .image import SourceImage
from .grid import GridSpec, PixelRect, Tile
from .paper import PaperSpec, Orientation, PAPER_FORMATS, get_paper

__all__ = [
    "SourceImage",
    "GridSpec",
    "PixelRect",
    "Tile",
    "PaperSpec",
    "Orientation",
    "PAPER_FORMATS",
    "get_paper",
]
