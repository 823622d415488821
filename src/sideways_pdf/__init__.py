"""Top-level package for the sideways text PDF converter.

Provides subpackages:
- sideways_pdf.extraction – per-page text extraction (PyMuPDF)
- sideways_pdf.layout – wrapping, pagination and rotated placement
- sideways_pdf.output – PDF rendering (ReportLab)
"""

def _get_version() -> str:
    """Get version from importlib.metadata (installed) or pyproject.toml (dev)."""
    from importlib.metadata import PackageNotFoundError, version as pkg_version
    from pathlib import Path

    try:
        return pkg_version("sideways-pdf")
    except PackageNotFoundError:
        pass

    pyproject = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        for line in pyproject.read_text().splitlines():
            if line.strip().startswith("version"):
                # Parse: version = "0.1.0"
                return line.split("=")[1].strip().strip('"').strip("'")
    return "0.0.0"

__version__ = _get_version()
__all__: list[str] = ["__version__"]
