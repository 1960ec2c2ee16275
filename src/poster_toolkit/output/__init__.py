"""
Module: output

Purpose:
    Output generation: poster PDF (ReportLab), page previews (Pillow),
    PDF rasterization (PyMuPDF) and tile ZIP archives.

Key Functions:
    - render_to_pdf(), render_to_bytes(): Poster PDF
    - render_page_preview(), render_preview_sheet(): Preview images
    - rasterize_pdf(): Render exported pages back to images
    - write_tiles_zip(): Tile archive
    - poster_filename(): Deterministic file name
"""

from .naming import poster_filename, tiles_archive_filename, tile_filename
from .renderer import render_to_pdf, render_to_bytes
from .preview import render_page_preview, render_preview_sheet
from .rasterize import rasterize_pdf, page_sizes_mm, find_content_box
from .zip_writer import write_tiles_zip

__all__ = [
    "poster_filename",
    "tiles_archive_filename",
    "tile_filename",
    "render_to_pdf",
    "render_to_bytes",
    "render_page_preview",
    "render_preview_sheet",
    "rasterize_pdf",
    "page_sizes_mm",
    "find_content_box",
    "write_tiles_zip",
]
