"""Top-level package for the Poster Toolkit.

Provides subpackages:
- poster_toolkit.core – immutable data models and the error taxonomy
- poster_toolkit.images – decoding uploaded images
- poster_toolkit.tiling – uniform grid partition of a source image
- poster_toolkit.layout – fitting tiles onto printable pages
- poster_toolkit.output – PDF, preview and archive output
"""

def _get_version() -> str:
    """Get version from pyproject.toml (dev) or importlib.metadata (installed)."""
    from pathlib import Path

    pyproject = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        try:
            content = pyproject.read_text()
        except OSError:
            content = ""
        for line in content.splitlines():
            if line.strip().startswith("version"):
                # Parse: version = "0.1.0"
                return line.split("=")[1].strip().strip('"').strip("'")

    from importlib.metadata import PackageNotFoundError, version as pkg_version
    try:
        return pkg_version("poster_toolkit")
    except PackageNotFoundError:
        return "0.0.0"

__version__ = _get_version()
__all__: list[str] = ["__version__"]
