"""
Module: core.models.paper

Purpose:
    Fixed catalog of printable paper formats and page orientation.

Key Classes:
    - Orientation: Portrait or landscape
    - PaperSpec: Paper dimensions in millimetres

Key Functions:
    - get_paper(): Look up a catalog entry by format id

Used By:
    - layout.engine: Page dimensions
    - output.naming: Deterministic file names
    - config: Format selection
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple

from ..errors import InvalidInput


class Orientation(str, Enum):
    """Page orientation. Landscape swaps the effective width and height."""

    PORTRAIT = "portrait"
    LANDSCAPE = "landscape"

    @property
    def label(self) -> str:
        """Human-readable label for captions and summaries."""
        return self.value.capitalize()

    @classmethod
    def parse(cls, value: "Orientation | str") -> "Orientation":
        """Accept an Orientation or its string value."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise InvalidInput(f"Unknown orientation: {value!r}") from None


@dataclass(frozen=True)
class PaperSpec:
    """
    Paper format (immutable catalog entry).

    Attributes:
        format_id: Catalog key, e.g. "a4"
        name: Display name
        width_mm: Portrait width in millimetres
        height_mm: Portrait height in millimetres

    Example:
        >>> get_paper("a4").dimensions(Orientation.LANDSCAPE)
        (297.0, 210.0)
    """

    format_id: str
    name: str
    width_mm: float
    height_mm: float

    def __post_init__(self) -> None:
        if self.width_mm <= 0 or self.height_mm <= 0:
            raise InvalidInput(
                f"Paper dimensions must be positive: {self.width_mm}x{self.height_mm}mm"
            )

    def dimensions(self, orientation: Orientation) -> Tuple[float, float]:
        """Effective (width, height) for *orientation*."""
        if Orientation.parse(orientation) is Orientation.LANDSCAPE:
            return float(self.height_mm), float(self.width_mm)
        return float(self.width_mm), float(self.height_mm)


PAPER_FORMATS: Dict[str, PaperSpec] = {
    "a4": PaperSpec("a4", "A4", 210, 297),
    "letter": PaperSpec("letter", "Letter", 216, 279),
    "a3": PaperSpec("a3", "A3", 297, 420),
    "tabloid": PaperSpec("tabloid", "Tabloid", 279, 432),
}


def get_paper(format_id: str) -> PaperSpec:
    """
    Look up a paper format by id (case-insensitive).

    Raises:
        InvalidInput: If the id is not in the catalog
    """
    try:
        return PAPER_FORMATS[format_id.lower()]
    except (KeyError, AttributeError):
        raise InvalidInput(
            f"Unknown paper format {format_id!r}; "
            f"expected one of {', '.join(PAPER_FORMATS)}"
        ) from None
