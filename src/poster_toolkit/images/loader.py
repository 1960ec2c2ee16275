"""
Module: images.loader

Purpose:
    Decode an uploaded image into a SourceImage. Enforces the file-type
    allow-list and upload size limit before any pixels are decoded.

Key Functions:
    - load_source_image(): Synchronous decode
    - load_source_image_async(): Same decode awaited from a worker thread

Dependencies:
    - PIL: Image decoding, EXIF transpose
    - core.models.image: SourceImage
    - core.errors: InvalidInput, DecodeFailure

Used By:
    - controller.build_poster(): When given a path or raw bytes
"""

from __future__ import annotations

import asyncio
import io
import logging
from pathlib import Path
from typing import BinaryIO, Optional, Union

from PIL import Image, ImageOps, UnidentifiedImageError

from poster_toolkit.core.errors import DecodeFailure, InvalidInput
from poster_toolkit.core.models import SourceImage

logger = logging.getLogger(__name__)

# Constants
ALLOWED_FORMATS = frozenset({"PNG", "JPEG", "WEBP"})
ALLOWED_EXTENSIONS = frozenset({".png", ".jpg", ".jpeg", ".webp"})
MAX_UPLOAD_BYTES = 10 * 1024 * 1024  # 10 MB

ImageSource = Union[str, Path, bytes, bytearray, BinaryIO]


def load_source_image(
    source: ImageSource,
    *,
    name: Optional[str] = None,
    max_bytes: int = MAX_UPLOAD_BYTES,
) -> SourceImage:
    """
    Decode an uploaded image.

    Args:
        source: File path, raw bytes or a binary stream
        name: Display name (defaults to the file name for paths)
        max_bytes: Upload size limit in bytes

    Returns:
        SourceImage with natural (EXIF-corrected) dimensions

    Raises:
        InvalidInput: Unsupported file type or file too large
        DecodeFailure: Data is not a decodable image

    Example:
        >>> src = load_source_image(Path("photo.jpg"))
        >>> src.width, src.height
        (4000, 3000)
    """
    data, name = _read_source(source, name)

    if len(data) > max_bytes:
        raise InvalidInput(
            f"Image is {len(data) / 1_048_576:.1f} MB; limit is "
            f"{max_bytes / 1_048_576:.0f} MB"
        )
    if not data:
        raise DecodeFailure(f"Image {name or '<bytes>'} is empty")

    try:
        with Image.open(io.BytesIO(data)) as opened:
            detected = opened.format
            if detected not in ALLOWED_FORMATS:
                raise InvalidInput(
                    f"Unsupported image format {detected!r}; use PNG, JPEG or WebP"
                )
            opened.load()
            image = _normalise(opened)
    except Image.DecompressionBombError as e:
        raise InvalidInput(f"Image {name or '<bytes>'} has too many pixels: {e}") from e
    except (UnidentifiedImageError, OSError, SyntaxError) as e:
        raise DecodeFailure(f"Could not decode image {name or '<bytes>'}: {e}") from e

    logger.info(f"Loaded {detected} image {name or '<bytes>'} ({image.width}x{image.height})")
    return SourceImage(
        image=image,
        width=image.width,
        height=image.height,
        format=detected,
        name=name,
    )


async def load_source_image_async(
    source: ImageSource,
    *,
    name: Optional[str] = None,
    max_bytes: int = MAX_UPLOAD_BYTES,
) -> SourceImage:
    """
    Awaitable variant of load_source_image().

    Decoding is the only suspension point of the pipeline; it runs in a
    worker thread so an event loop driving a UI stays responsive.
    """
    return await asyncio.to_thread(
        load_source_image, source, name=name, max_bytes=max_bytes
    )


def _read_source(source: ImageSource, name: Optional[str]) -> tuple[bytes, Optional[str]]:
    """Read raw bytes from any supported source, checking path extensions."""
    if isinstance(source, (str, Path)):
        path = Path(source)
        if path.suffix.lower() not in ALLOWED_EXTENSIONS:
            raise InvalidInput(
                f"Unsupported file type {path.suffix or '(none)'}; use PNG, JPEG or WebP"
            )
        try:
            return path.read_bytes(), name or path.name
        except OSError as e:
            raise DecodeFailure(f"Could not read {path}: {e}") from e

    if isinstance(source, (bytes, bytearray)):
        return bytes(source), name

    return source.read(), name or getattr(source, "name", None)


def _normalise(image: Image.Image) -> Image.Image:
    """Apply EXIF orientation and convert to RGB or RGBA."""
    image = ImageOps.exif_transpose(image)
    has_alpha = image.mode in ("RGBA", "LA", "PA") or "transparency" in image.info
    target = "RGBA" if has_alpha else "RGB"
    if image.mode != target:
        image = image.convert(target)
    return image
