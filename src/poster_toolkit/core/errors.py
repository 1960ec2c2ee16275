"""
Module: core.errors

Purpose:
    Error taxonomy shared by every stage of the poster pipeline.
    All failures are local and recoverable: the caller re-supplies
    valid input and tries again.

Key Classes:
    - PosterError: Base class for all toolkit errors
    - InvalidInput: Rejected input (grid, dimensions, paper, file type)
    - DecodeFailure: Image bytes could not be decoded
    - ExportError: PDF or archive could not be written

Used By:
    - images.loader, tiling.partitioner, layout.engine, output.*, controller
"""

from __future__ import annotations


class PosterError(Exception):
    """Base class for poster toolkit errors."""
    pass


class InvalidInput(PosterError, ValueError):
    """Input rejected before any computation ran."""
    pass


class DecodeFailure(PosterError):
    """Image data could not be decoded."""
    pass


class ExportError(PosterError):
    """Output document could not be written."""
    pass
