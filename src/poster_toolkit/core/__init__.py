"""
Poster Toolkit Core Package

Shared data models and the error taxonomy. Every model is a frozen
dataclass: values are created once per preview/export and never mutated.
"""

from .errors import PosterError, InvalidInput, DecodeFailure, ExportError
from .models import (
    SourceImage,
    GridSpec,
    PixelRect,
    Tile,
    PaperSpec,
    Orientation,
    PAPER_FORMATS,
    get_paper,
)

__all__ = [
    "PosterError",
    "InvalidInput",
    "DecodeFailure",
    "ExportError",
    "SourceImage",
    "GridSpec",
    "PixelRect",
    "Tile",
    "PaperSpec",
    "Orientation",
    "PAPER_FORMATS",
    "get_paper",
]
