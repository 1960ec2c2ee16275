"""
Tests for page preview rendering.
"""

import pytest

from poster_toolkit.core.models import GridSpec, Orientation, get_paper
from poster_toolkit.layout import LayoutVariant, PosterPlan
from poster_toolkit.output import render_page_preview, render_preview_sheet

NAVY = (0, 0, 128)


def test_page_preview_when_a4_at_36_dpi_then_page_sized(make_plan):
    # Act
    preview = render_page_preview(make_plan(1, 1).pages[0], dpi=36)

    # Assert
    assert preview.size == (298, 421)
    assert preview.mode == "RGB"


def test_page_preview_when_rendered_then_tile_at_centre_and_paper_at_corner(make_plan):
    plan = make_plan(1, 1, color="navy", captions=False)

    preview = render_page_preview(plan.pages[0], dpi=36)

    assert preview.getpixel((preview.width // 2, preview.height // 2)) == NAVY
    assert preview.getpixel((0, 0)) == (255, 255, 255)


def test_page_preview_when_guides_enabled_then_pixels_differ(make_plan):
    plain = make_plan(1, 1, color="navy", captions=False)
    guided = make_plan(1, 1, color="navy", captions=False, show_guides=True)

    a = render_page_preview(plain.pages[0], dpi=36)
    b = render_page_preview(guided.pages[0], dpi=36)

    assert a.tobytes() != b.tobytes()


def test_page_preview_when_captions_enabled_then_pixels_differ(make_plan):
    silent = make_plan(1, 1, color="navy", captions=False)
    captioned = make_plan(1, 1, color="navy")

    a = render_page_preview(silent.pages[0], dpi=72)
    b = render_page_preview(captioned.pages[0], dpi=72)

    assert a.tobytes() != b.tobytes()


def test_page_preview_when_dpi_not_positive_then_raises(make_plan):
    with pytest.raises(ValueError, match="dpi"):
        render_page_preview(make_plan(1, 1).pages[0], dpi=0)


def test_preview_sheet_when_2x2_then_pages_arranged_in_grid(make_plan):
    # Act
    sheet = render_preview_sheet(make_plan(2, 2), dpi=36, gap_px=8)

    # Assert
    assert sheet.size == (2 * 298 + 3 * 8, 2 * 421 + 3 * 8)


def test_preview_sheet_when_plan_empty_then_raises():
    plan = PosterPlan(
        grid=GridSpec(1, 1),
        paper=get_paper("a4"),
        orientation=Orientation.PORTRAIT,
        variant=LayoutVariant.CENTERED,
        show_guides=False,
        pages=(),
    )

    with pytest.raises(ValueError, match="empty"):
        render_preview_sheet(plan)
