"""
Module: common.units

Purpose:
    Unit conversion and rounding helpers shared by layout and output.

Key Functions:
    - mm_to_pt(): Millimetres to PDF points
    - mm_to_px(): Millimetres to pixels at a given DPI
    - round_half_up(): Nearest integer, halves rounded up
"""

from __future__ import annotations

import math

MM_PER_INCH = 25.4
POINTS_PER_INCH = 72.0


def mm_to_pt(mm: float) -> float:
    """Convert millimetres to PDF points (1/72 inch)."""
    return mm * POINTS_PER_INCH / MM_PER_INCH


def mm_to_px(mm: float, dpi: int) -> float:
    """Convert millimetres to pixels at *dpi*."""
    return mm * dpi / MM_PER_INCH


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer with .5 going up.

    Python's round() uses banker's rounding, which would give
    adjacent tile edges at x.5 different treatment depending on parity.

    Example:
        >>> round_half_up(500.5)
        501
        >>> round_half_up(2.5)
        3
    """
    return int(math.floor(value + 0.5))
