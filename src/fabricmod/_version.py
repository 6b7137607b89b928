"""Version lookup for source checkouts and installed distributions."""

import tomllib
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _metadata_version
from pathlib import Path

DISTRIBUTION = "fabricmod"
FALLBACK_VERSION = "0.0.0"

_PYPROJECT = Path(__file__).resolve().parents[2] / "pyproject.toml"


def _checkout_version(pyproject: Path) -> str | None:
    # Only trust a pyproject.toml that describes this project; an installed
    # copy can sit next to someone else's.
    try:
        with pyproject.open("rb") as f:
            project = tomllib.load(f).get("project", {})
    except (OSError, tomllib.TOMLDecodeError):
        return None
    if project.get("name") != DISTRIBUTION:
        return None
    version = project.get("version")
    return version if isinstance(version, str) else None


def get_version(pyproject: Path = _PYPROJECT) -> str:
    """Return the checkout version, else the installed one, else ``0.0.0``."""
    checkout = _checkout_version(pyproject)
    if checkout is not None:
        return checkout
    try:
        return _metadata_version(DISTRIBUTION)
    except PackageNotFoundError:
        return FALLBACK_VERSION
