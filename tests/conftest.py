import io
import sys
from pathlib import Path

import numpy as np
import pytest
from PIL import Image

# Add src to sys.path so we can import poster_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from poster_toolkit.core.models import SourceImage  # noqa: E402


def _gradient(width: int, height: int) -> Image.Image:
    """RGB image whose pixel (x, y) encodes its own coordinates."""
    ys, xs = np.indices((height, width))
    arr = np.stack([xs % 256, ys % 256, (xs // 256) * 16 + (ys // 256)], axis=-1)
    return Image.fromarray(arr.astype(np.uint8))


# Common test fixtures
@pytest.fixture
def make_source():
    """Factory fixture: make_source(width, height) -> SourceImage with a coordinate gradient."""
    def _make(width: int, height: int, *, name: str = "sample.png") -> SourceImage:
        return SourceImage.from_pil(_gradient(width, height), format="PNG", name=name)
    return _make


@pytest.fixture
def make_image_bytes():
    """Factory fixture: make_image_bytes(width, height, fmt, color) -> encoded bytes."""
    def _make(width: int, height: int, fmt: str = "PNG", color="red") -> bytes:
        img = Image.new("RGB", (width, height), color)
        buf = io.BytesIO()
        img.save(buf, format=fmt)
        return buf.getvalue()
    return _make


@pytest.fixture
def sample_image(tmp_path: Path):
    """Create a simple test image on disk."""
    img = Image.new("RGB", (400, 200), color="navy")
    img_path = tmp_path / "sample.png"
    img.save(img_path)
    return img_path


@pytest.fixture
def make_plan(make_source):
    """Factory fixture: make_plan(columns, rows, ...) -> PosterPlan over a partitioned image."""
    from poster_toolkit.core.models import GridSpec, get_paper
    from poster_toolkit.layout import plan_poster
    from poster_toolkit.tiling import partition

    def _make(
        columns: int = 2,
        rows: int = 2,
        *,
        size=(400, 200),
        color=None,
        paper: str = "a4",
        orientation: str = "portrait",
        **plan_kwargs,
    ):
        if color is None:
            source = make_source(*size)
        else:
            source = SourceImage.from_pil(Image.new("RGB", size, color))
        grid = GridSpec(columns, rows)
        tiles = partition(source, grid)
        return plan_poster(tiles, grid, get_paper(paper), orientation, **plan_kwargs)
    return _make
