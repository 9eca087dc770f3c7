"""ConfigService: access to and validation of the library configuration."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, TypeGuard

from samplelib.infrastructure.config_provider import default_config

if TYPE_CHECKING:
    from samplelib.config.models import LibConfig
    from samplelib.services.capabilities import ConfigProvider

REQUIRED_FIELDS = ("name", "version", "description")


class ConfigService:
    """Wraps a ConfigProvider with shape validation."""

    def __init__(self, provider: ConfigProvider) -> None:
        self._provider = provider

    def get_config(self) -> LibConfig:
        return self._provider.get_config()

    def is_valid_config(self, value: Any) -> TypeGuard[LibConfig]:
        """True iff *value* carries ``name``, ``version`` and ``description`` as text.

        Accepts mappings and attribute-bearing objects alike; ``None``,
        primitives, missing fields and non-``str`` fields are rejected.
        """
        if value is None or isinstance(value, (str, bytes, int, float, bool)):
            return False
        if isinstance(value, Mapping):
            return all(isinstance(value.get(f), str) for f in REQUIRED_FIELDS)
        return all(isinstance(getattr(value, f, None), str) for f in REQUIRED_FIELDS)

    def get_default_config(self) -> LibConfig:
        """The built-in identity; version resolved from package metadata."""
        return default_config()

    def is_config_valid(self) -> bool:
        """Provider must report valid AND return a well-formed config."""
        if not self._provider.is_valid():
            return False
        return self.is_valid_config(self._provider.get_config())
