"""
Unit tests for PosterConfig.
"""

from pathlib import Path

import pytest

from poster_toolkit.config import MAX_GRID_DIMENSION, PosterConfig
from poster_toolkit.core import InvalidInput
from poster_toolkit.core.models import GridSpec, Orientation
from poster_toolkit.layout import LayoutVariant


class TestPosterConfigDefaults:
    """Defaults and derived values."""

    def test_config_when_defaults_then_2x2_a4_portrait(self):
        config = PosterConfig()

        assert config.grid == GridSpec(2, 2)
        assert config.paper.name == "A4"
        assert config.orientation is Orientation.PORTRAIT
        assert config.variant is LayoutVariant.CENTERED
        assert not config.show_guides
        assert config.captions

    def test_config_when_3x4_a3_then_summary_counts_pages(self):
        config = PosterConfig(columns=3, rows=4, paper_format="a3")

        assert config.page_count == 12
        assert config.summary() == "12 pages - A3 - Portrait"

    def test_config_when_single_page_then_summary_singular(self):
        config = PosterConfig(columns=1, rows=1, orientation="landscape")

        assert config.summary() == "1 page - A4 - Landscape"

    def test_config_when_filenames_requested_then_match_settings(self):
        config = PosterConfig(columns=3, rows=2, paper_format="Tabloid", orientation="landscape")

        assert config.pdf_filename == "poster-3x2-tabloid-landscape.pdf"
        assert config.zip_filename == "poster-3x2-tabloid-landscape-tiles.zip"


class TestPosterConfigNormalisation:
    """String inputs from a UI are normalised."""

    def test_config_when_strings_given_then_enums_stored(self):
        config = PosterConfig(orientation="LANDSCAPE", variant="captioned", paper_format="LETTER")

        assert config.orientation is Orientation.LANDSCAPE
        assert config.variant is LayoutVariant.CAPTIONED
        assert config.paper_format == "letter"

    def test_config_when_output_dir_string_then_path(self, tmp_path):
        config = PosterConfig(output_dir=str(tmp_path))

        assert config.output_dir == Path(tmp_path)


class TestPosterConfigValidation:
    """Invalid settings are rejected at construction."""

    @pytest.mark.parametrize("columns, rows", [(0, 2), (2, 0), (MAX_GRID_DIMENSION + 1, 1)])
    def test_config_when_grid_out_of_range_then_raises(self, columns, rows):
        with pytest.raises(InvalidInput):
            PosterConfig(columns=columns, rows=rows)

    def test_config_when_grid_at_limit_then_accepted(self):
        config = PosterConfig(columns=MAX_GRID_DIMENSION, rows=MAX_GRID_DIMENSION)

        assert config.page_count == 100

    def test_config_when_unknown_paper_then_raises(self):
        with pytest.raises(InvalidInput, match="a5"):
            PosterConfig(paper_format="a5")

    def test_config_when_negative_margin_then_raises(self):
        with pytest.raises(InvalidInput, match="margin"):
            PosterConfig(margin_mm=-2)

    def test_config_when_unknown_orientation_then_raises(self):
        with pytest.raises(InvalidInput):
            PosterConfig(orientation="diagonal")

    def test_config_when_frozen_then_cannot_mutate(self):
        config = PosterConfig()

        with pytest.raises(AttributeError):
            config.columns = 5
