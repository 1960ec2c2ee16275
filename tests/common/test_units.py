"""
Unit tests for unit conversion helpers.
"""

import pytest

from poster_toolkit.common.units import mm_to_pt, mm_to_px, round_half_up


def test_mm_to_pt_when_one_inch_then_72_points():
    assert mm_to_pt(25.4) == pytest.approx(72.0)


def test_mm_to_pt_when_a4_width_then_matches_pdf_size():
    assert mm_to_pt(210) == pytest.approx(595.2756, abs=1e-3)


def test_mm_to_px_when_one_inch_then_dpi_pixels():
    assert mm_to_px(25.4, 150) == pytest.approx(150.0)


@pytest.mark.parametrize(
    "value, expected",
    [(0.5, 1), (1.5, 2), (2.5, 3), (500.5, 501), (2.49, 2), (0.0, 0), (7.0, 7)],
)
def test_round_half_up_when_half_then_rounds_up(value, expected):
    assert round_half_up(value) == expected
