"""Application version module.

From a source checkout the version comes from the VERSION file at the
project root; an installed copy falls back to the package metadata.
"""

from importlib import metadata
from pathlib import Path

# editor/src/version.py -> ../../VERSION
_VERSION_FILE = Path(__file__).resolve().parent.parent.parent / "VERSION"


def get_version() -> str:
    """Application version string (e.g. '1.0.0')."""
    try:
        return _VERSION_FILE.read_text().strip() or "0.0.0"
    except OSError:
        pass
    try:
        return metadata.version("runsnap")
    except metadata.PackageNotFoundError:
        return "0.0.0"
