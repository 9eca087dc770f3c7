"""LibraryService: composition root over the calculator, string and config services.

:func:`create_library_service` is the usual entry point; it wires fresh
sub-services around the given capabilities.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel

from samplelib.infrastructure.config_provider import DefaultConfigProvider
from samplelib.services.base import BaseService
from samplelib.services.calculator import CalculatorService
from samplelib.services.config import REQUIRED_FIELDS, ConfigService
from samplelib.services.strings import StringService

if TYPE_CHECKING:
    from samplelib.config.models import LibConfig
    from samplelib.services.capabilities import ConfigProvider, LoggerAdapter


def _log_fields(cfg: Any) -> dict[str, Any]:
    """Key/values for the info event; providers may hand back any config shape."""
    if isinstance(cfg, BaseModel):
        return cfg.model_dump()
    if isinstance(cfg, Mapping):
        return dict(cfg)
    return {f: getattr(cfg, f, None) for f in REQUIRED_FIELDS}


class LibraryService(BaseService):
    """Unified facade. Holds its sub-services but does not manage their lifecycle."""

    def __init__(
        self,
        calculator: CalculatorService,
        strings: StringService,
        config: ConfigService,
        logger: LoggerAdapter | None = None,
    ) -> None:
        super().__init__(logger)
        self._calculator = calculator
        self._strings = strings
        self._config = config

    def get_info(self) -> LibConfig:
        cfg = self._config.get_config()
        self._logger.info("Getting library info", _log_fields(cfg))
        return cfg

    def is_ready(self) -> bool:
        return self._config.is_config_valid()

    def get_calculator(self) -> CalculatorService:
        return self._calculator

    def get_string_service(self) -> StringService:
        return self._strings


def create_library_service(
    config_provider: ConfigProvider,
    logger: LoggerAdapter | None = None,
) -> LibraryService:
    """Wire a ready-to-use LibraryService around *config_provider*."""
    config = ConfigService(config_provider)
    calculator = CalculatorService()
    strings = StringService(logger)
    return LibraryService(calculator, strings, config, logger)


def create_default_config_provider(valid: bool = True) -> DefaultConfigProvider:
    """Provider serving the built-in configuration."""
    return DefaultConfigProvider(valid)
