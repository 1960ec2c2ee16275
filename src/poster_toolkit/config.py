"""
Module: config

Purpose:
    Configuration dataclass for building a poster. Immutable
    configuration with validation on construction; this is where the
    UI-level limits (grid size, paper catalog) are enforced.

Key Classes:
    - PosterConfig: Grid, paper, orientation, guides and output settings

Dependencies:
    - core.models: GridSpec, Orientation, PaperSpec
    - layout.config: LayoutVariant

Used By:
    - controller.build_poster(), controller.export_poster()
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from poster_toolkit.core.errors import InvalidInput
from poster_toolkit.core.models import GridSpec, Orientation, PaperSpec, get_paper
from poster_toolkit.layout.config import LayoutVariant
from poster_toolkit.output.naming import poster_filename, tiles_archive_filename

MAX_GRID_DIMENSION = 10


@dataclass(frozen=True)
class PosterConfig:
    """
    Configuration for building a poster (immutable).

    Attributes:
        columns: Pages across (1-10)
        rows: Pages down (1-10)
        paper_format: Paper catalog id ("a4", "letter", "a3", "tabloid")
        orientation: Portrait or landscape (enum or string)
        show_guides: Draw crop marks and centre lines
        variant: Layout variant (enum or string)
        margin_mm: Page margin; None uses the variant's default
        captions: Print page/position captions
        output_dir: Directory for generated files (None = working directory)
        export_zip: Also export tiles as PNGs in a ZIP

    Example:
        >>> config = PosterConfig(columns=3, rows=4, paper_format="a3")
        >>> config.summary()
        '12 pages - A3 - Portrait'
    """

    columns: int = 2
    rows: int = 2
    paper_format: str = "a4"
    orientation: Orientation = Orientation.PORTRAIT
    show_guides: bool = False
    variant: LayoutVariant = LayoutVariant.CENTERED
    margin_mm: Optional[float] = None
    captions: bool = True
    output_dir: Optional[Path] = None
    export_zip: bool = False

    def __post_init__(self) -> None:
        """Validate and normalise configuration on construction."""
        grid = GridSpec(columns=self.columns, rows=self.rows)
        for name, value in (("columns", grid.columns), ("rows", grid.rows)):
            if value > MAX_GRID_DIMENSION:
                raise InvalidInput(
                    f"{name} must be between 1 and {MAX_GRID_DIMENSION}: {value}"
                )
        get_paper(self.paper_format)
        if self.margin_mm is not None and self.margin_mm < 0:
            raise InvalidInput(f"margin_mm must be non-negative: {self.margin_mm}")

        # Frozen: normalise string inputs from the UI through object.__setattr__
        object.__setattr__(self, "orientation", Orientation.parse(self.orientation))
        object.__setattr__(self, "variant", LayoutVariant.parse(self.variant))
        object.__setattr__(self, "paper_format", self.paper_format.lower())
        if self.output_dir is not None:
            object.__setattr__(self, "output_dir", Path(self.output_dir))

    @property
    def grid(self) -> GridSpec:
        return GridSpec(columns=self.columns, rows=self.rows)

    @property
    def paper(self) -> PaperSpec:
        return get_paper(self.paper_format)

    @property
    def page_count(self) -> int:
        return self.grid.tile_count

    @property
    def pdf_filename(self) -> str:
        return poster_filename(self.grid, self.paper, self.orientation)

    @property
    def zip_filename(self) -> str:
        return tiles_archive_filename(self.grid, self.paper, self.orientation)

    def summary(self) -> str:
        """Page count, paper and orientation as shown next to the grid inputs."""
        pages = "page" if self.page_count == 1 else "pages"
        return f"{self.page_count} {pages} - {self.paper.name} - {self.orientation.label}"
