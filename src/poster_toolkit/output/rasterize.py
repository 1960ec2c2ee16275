"""
Module: output.rasterize

Purpose:
    Render pages of an exported poster PDF back to images, for
    thumbnails and for checking where content landed.

Key Functions:
    - rasterize_pdf(): Render every page to a PIL image
    - page_sizes_mm(): Page sizes of a PDF in millimetres
    - find_content_box(): Bounding box of non-white pixels

Dependencies:
    - fitz (PyMuPDF): PDF rendering
    - PIL.Image: Image handling
    - numpy: Content detection

Used By:
    - UI shells: Thumbnails of the downloaded document
    - tests: Export verification
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Tuple, Union

import fitz
import numpy as np
from PIL import Image

from poster_toolkit.common.units import MM_PER_INCH, POINTS_PER_INCH
from poster_toolkit.core.errors import DecodeFailure

logger = logging.getLogger(__name__)

# Default configuration
DEFAULT_DPI = 72
WHITE_THRESHOLD = 245

PdfSource = Union[str, Path, bytes]


def rasterize_pdf(source: PdfSource, dpi: int = DEFAULT_DPI) -> List[Image.Image]:
    """
    Render each page of a PDF to an RGB image.

    Args:
        source: PDF path or bytes
        dpi: Rendering resolution

    Returns:
        One image per page, in page order

    Raises:
        DecodeFailure: If the document cannot be opened

    Example:
        >>> pages = rasterize_pdf(Path("poster-2x2-a4-portrait.pdf"), dpi=72)
        >>> pages[0].size
        (595, 842)
    """
    matrix = fitz.Matrix(dpi / POINTS_PER_INCH, dpi / POINTS_PER_INCH)
    images: List[Image.Image] = []
    with _open(source) as doc:
        for page in doc:
            pix = page.get_pixmap(matrix=matrix, alpha=False)
            images.append(Image.frombytes("RGB", (pix.width, pix.height), pix.samples))

    logger.debug(f"Rasterized {len(images)} pages at {dpi} DPI")
    return images


def page_sizes_mm(source: PdfSource) -> List[Tuple[float, float]]:
    """(width, height) in millimetres of every page."""
    scale = MM_PER_INCH / POINTS_PER_INCH
    with _open(source) as doc:
        return [(page.rect.width * scale, page.rect.height * scale) for page in doc]


def find_content_box(
    image: Image.Image,
    threshold: int = WHITE_THRESHOLD,
) -> Optional[Tuple[int, int, int, int]]:
    """
    Bounding box (left, top, right, bottom) of non-white pixels.

    Right and bottom are exclusive. Returns None for a blank image.
    """
    arr = np.asarray(image.convert("L"))
    mask = arr < threshold
    if not mask.any():
        return None
    ys, xs = np.where(mask)
    return int(xs.min()), int(ys.min()), int(xs.max()) + 1, int(ys.max()) + 1


def _open(source: PdfSource) -> fitz.Document:
    """Open a PDF from a path or bytes."""
    try:
        if isinstance(source, (bytes, bytearray)):
            return fitz.open(stream=bytes(source), filetype="pdf")
        return fitz.open(Path(source))
    except (RuntimeError, ValueError, OSError) as e:
        raise DecodeFailure(f"Could not open PDF: {e}") from e
