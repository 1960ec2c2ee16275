"""
Module: images

Purpose:
    Decode boundary between the UI shell and the pipeline. Turns an
    uploaded file into a SourceImage or rejects it.

Key Functions:
    - load_source_image(): Decode a path, bytes or stream
    - load_source_image_async(): Awaitable decode for async shells

Dependencies:
    - PIL: Decoding and EXIF orientation
"""

from .loader import (
    ALLOWED_FORMATS,
    ALLOWED_EXTENSIONS,
    MAX_UPLOAD_BYTES,
    load_source_image,
    load_source_image_async,
)

__all__ = [
    "ALLOWED_FORMATS",
    "ALLOWED_EXTENSIONS",
    "MAX_UPLOAD_BYTES",
    "load_source_image",
    "load_source_image_async",
]
