"""
Module: core.models.image

Purpose:
    The decoded source image handed over by the UI shell.

Key Classes:
    - SourceImage: Pixel dimensions plus the decoded Pillow image

Dependencies:
    - PIL: Image type

Used By:
    - images.loader: Creates SourceImage after decoding
    - tiling.partitioner: Reads dimensions and pixels
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from PIL import Image

from ..errors import InvalidInput


@dataclass(frozen=True)
class SourceImage:
    """
    Decoded raster image (immutable).

    The Pillow image is treated as an opaque pixel handle; it is owned
    by the caller for one partition + layout + export cycle.

    Attributes:
        image: Decoded Pillow image
        width: Width in pixels (>= 1)
        height: Height in pixels (>= 1)
        format: Detected file format, e.g. "PNG"
        name: Original file name, if known

    Example:
        >>> src = SourceImage.from_pil(Image.new("RGB", (1000, 500)))
        >>> src.width, src.height
        (1000, 500)
    """

    image: Image.Image
    width: int
    height: int
    format: Optional[str] = None
    name: Optional[str] = None

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise InvalidInput(
                f"Image dimensions must be positive: {self.width}x{self.height}"
            )
        if self.image.size != (self.width, self.height):
            raise InvalidInput(
                f"Declared size {self.width}x{self.height} does not match "
                f"pixel data {self.image.width}x{self.image.height}"
            )

    @classmethod
    def from_pil(
        cls,
        image: Image.Image,
        *,
        format: Optional[str] = None,
        name: Optional[str] = None,
    ) -> "SourceImage":
        """Wrap an already decoded Pillow image."""
        return cls(
            image=image,
            width=image.width,
            height=image.height,
            format=format or image.format,
            name=name,
        )

    @property
    def aspect_ratio(self) -> float:
        """Width divided by height."""
        return self.width / self.height
