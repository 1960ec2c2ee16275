"""
Module: tiling.diagnostics

Purpose:
    Check that a set of crop rectangles tiles the source image. Builds a
    per-pixel coverage count over the snapped rectangles and measures the
    widest gap or duplicated strip between neighbouring tiles.

Key Classes:
    - CoverageReport: Gap/overlap counts and widest seam

Key Functions:
    - check_coverage(): Build a report for rectangles over an image

Dependencies:
    - numpy: Coverage map

Used By:
    - controller.build_poster(): Seam warnings in the build result
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

import numpy as np

from poster_toolkit.core.models import PixelRect

logger = logging.getLogger(__name__)

# Rounding may legitimately open or duplicate a single pixel strip
MAX_SEAM_PX = 1


@dataclass(frozen=True)
class CoverageReport:
    """
    Coverage of an image by tile rectangles.

    Attributes:
        width: Image width in pixels
        height: Image height in pixels
        gap_pixels: Pixels covered by no rectangle
        overlap_pixels: Pixels covered by more than one rectangle
        max_seam_px: Widest gap or duplicated strip between neighbours
    """

    width: int
    height: int
    gap_pixels: int
    overlap_pixels: int
    max_seam_px: int

    @property
    def is_exact(self) -> bool:
        """Every pixel covered exactly once."""
        return self.gap_pixels == 0 and self.overlap_pixels == 0

    @property
    def is_seamless(self) -> bool:
        """No seam wider than MAX_SEAM_PX."""
        return self.max_seam_px <= MAX_SEAM_PX


def check_coverage(rects: Sequence[PixelRect], width: int, height: int) -> CoverageReport:
    """
    Measure how *rects* cover a width × height image.

    Args:
        rects: Crop rectangles in source pixels
        width: Image width
        height: Image height

    Returns:
        CoverageReport

    Example:
        >>> report = check_coverage(compute_rects(1000, 500, 2, 1), 1000, 500)
        >>> report.is_exact
        True
    """
    coverage = np.zeros((height, width), dtype=np.uint16)
    x_edges: set[tuple[int, int]] = set()
    y_edges: set[tuple[int, int]] = set()

    for rect in rects:
        left, top, right, bottom = rect.snapped()
        coverage[max(top, 0):min(bottom, height), max(left, 0):min(right, width)] += 1
        x_edges.add((left, right))
        y_edges.add((top, bottom))

    gap_pixels = int(np.count_nonzero(coverage == 0))
    overlap_pixels = int(np.count_nonzero(coverage > 1))
    max_seam = max(_max_seam(sorted(x_edges)), _max_seam(sorted(y_edges)))

    report = CoverageReport(
        width=width,
        height=height,
        gap_pixels=gap_pixels,
        overlap_pixels=overlap_pixels,
        max_seam_px=max_seam,
    )
    if not report.is_exact:
        logger.debug(
            f"Coverage {width}x{height}: {gap_pixels} gap px, "
            f"{overlap_pixels} overlap px, widest seam {max_seam}px"
        )
    return report


def _max_seam(spans: list[tuple[int, int]]) -> int:
    """Largest |end - next start| between consecutive spans on one axis."""
    if len(spans) < 2:
        return 0
    starts = np.array([s for s, _ in spans[1:]])
    ends = np.array([e for _, e in spans[:-1]])
    return int(np.abs(starts - ends).max())
