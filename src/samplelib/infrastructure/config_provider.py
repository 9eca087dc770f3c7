"""ConfigProvider implementations.

``DefaultConfigProvider`` serves the baked-in identity; ``SettingsConfigProvider``
serves the ``[library]`` section of :class:`LibSettings` (TOML + env vars).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from samplelib.config.models import DEFAULT_DESCRIPTION, DEFAULT_NAME, LibConfig
from samplelib.infrastructure.version import get_library_version

if TYPE_CHECKING:
    from samplelib.config.settings import LibSettings


def default_config() -> LibConfig:
    """The library's own identity with the runtime-resolved version."""
    return LibConfig(
        name=DEFAULT_NAME,
        version=get_library_version(),
        description=DEFAULT_DESCRIPTION,
    )


class DefaultConfigProvider:
    """Serves :func:`default_config`.

    *valid* lets callers simulate a provider that reports itself unusable.
    """

    def __init__(self, valid: bool = True) -> None:
        self._valid = valid

    def get_config(self) -> LibConfig:
        return default_config()

    def is_valid(self) -> bool:
        return self._valid


class SettingsConfigProvider:
    """Builds the library identity from settings.

    The version comes from ``[library] version`` when set, otherwise from
    package metadata. Resolved once at construction.
    """

    def __init__(self, settings: LibSettings) -> None:
        section = settings.library
        self._config = LibConfig(
            name=section.name,
            version=section.version or get_library_version(),
            description=section.description,
        )

    def get_config(self) -> LibConfig:
        return self._config

    def is_valid(self) -> bool:
        return bool(self._config.name and self._config.version)
