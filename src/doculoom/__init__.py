"""Top-level package for the doculoom document engine.

Provides subpackages:
- doculoom.core – element models, copying, serialization and validation
- doculoom.editor – element store, history, selection and transforms
- doculoom.catalog – catalog sections, switching and page planning
- doculoom.guides – alignment guides during drag
- doculoom.layout – TOC pagination
- doculoom.data – row data, formatting and binding
- doculoom.persistence – design payloads and auto-save
"""

import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())


def _get_version() -> str:
    """Get version from pyproject.toml (dev) or importlib.metadata (installed)."""
    from pathlib import Path

    # In dev mode, read directly from pyproject.toml
    pyproject = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        try:
            content = pyproject.read_text()
        except OSError:
            content = ""
        for line in content.splitlines():
            if line.strip().startswith("version"):
                # Parse: version = "0.3.0"
                return line.split("=")[1].strip().strip('"').strip("'")

    # Fallback to importlib.metadata for installed package
    from importlib.metadata import PackageNotFoundError, version as pkg_version
    try:
        return pkg_version("doculoom")
    except PackageNotFoundError:
        return "0.0.0"


__version__ = _get_version()
__all__: list[str] = ["__version__"]
