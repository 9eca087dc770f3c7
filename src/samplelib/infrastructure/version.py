"""Package version resolution.

The only place the library reads from disk. A source checkout's
``pyproject.toml`` is tried first, then the installed distribution metadata.
Any failure yields :data:`FALLBACK_VERSION`; a missing display version must
never stop the library from working.
"""

from __future__ import annotations

import logging
import tomllib
from importlib import metadata
from pathlib import Path

from samplelib.config.models import FALLBACK_VERSION

logger = logging.getLogger(__name__)

DISTRIBUTION_NAME = "samplelib"

# src/samplelib/infrastructure/version.py -> repository root
_SOURCE_PYPROJECT = Path(__file__).resolve().parents[3] / "pyproject.toml"


def _version_from_pyproject(path: Path) -> str:
    data = tomllib.loads(path.read_text(encoding="utf-8"))
    version = data["project"]["version"]
    if not isinstance(version, str):
        raise TypeError(f"project.version in {path} is not a string")
    return version


def get_library_version(
    pyproject: Path | None = None,
    distribution: str = DISTRIBUTION_NAME,
) -> str:
    """Resolve the library version, never raising.

    Args:
        pyproject: Primary location to read. Defaults to the source
            checkout's ``pyproject.toml``.
        distribution: Installed distribution name used as the fallback.
    """
    path = pyproject if pyproject is not None else _SOURCE_PYPROJECT
    try:
        if path.is_file():
            return _version_from_pyproject(path)
        return metadata.version(distribution)
    except (OSError, tomllib.TOMLDecodeError, KeyError, TypeError, metadata.PackageNotFoundError):
        logger.debug("Version lookup failed, using %s", FALLBACK_VERSION, exc_info=True)
        return FALLBACK_VERSION
