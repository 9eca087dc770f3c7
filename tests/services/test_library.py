"""Tests for LibraryService and the factory functions."""

from __future__ import annotations

from types import SimpleNamespace

from samplelib.config.models import LibConfig
from samplelib.infrastructure.config_provider import DefaultConfigProvider
from samplelib.services.calculator import CalculatorService
from samplelib.services.config import ConfigService
from samplelib.services.library import (
    LibraryService,
    create_default_config_provider,
    create_library_service,
)
from samplelib.services.strings import StringService
from tests.conftest import RecordingLogger, StubConfigProvider, make_config


class TestLibraryService:
    def test_accessors_preserve_identity(self, config_provider: StubConfigProvider) -> None:
        calculator = CalculatorService()
        strings = StringService()
        lib = LibraryService(calculator, strings, ConfigService(config_provider))
        assert lib.get_calculator() is calculator
        assert lib.get_string_service() is strings
        assert lib.get_calculator() is lib.get_calculator()

    def test_get_info_returns_config(
        self, config_provider: StubConfigProvider, lib_config: LibConfig
    ) -> None:
        lib = create_library_service(config_provider)
        assert lib.get_info() == lib_config

    def test_get_info_logs_info(
        self, config_provider: StubConfigProvider, recording_logger: RecordingLogger
    ) -> None:
        lib = create_library_service(config_provider, recording_logger)
        lib.get_info()
        info = recording_logger.calls_for_level("info")
        assert len(info) == 1
        assert info[0].message == "Getting library info"
        assert info[0].args[0]["name"] == "samplelib"

    def test_get_info_without_logger(self, config_provider: StubConfigProvider) -> None:
        lib = create_library_service(config_provider)
        assert lib.get_info().name == "samplelib"

    def test_get_info_passes_mapping_config_through(self) -> None:
        cfg = {"name": "a", "version": "1", "description": "d"}
        lib = create_library_service(StubConfigProvider(cfg))
        assert lib.is_ready() is True
        assert lib.get_info() is cfg

    def test_get_info_logs_mapping_config(self, recording_logger: RecordingLogger) -> None:
        cfg = {"name": "a", "version": "1", "description": "d"}
        lib = create_library_service(StubConfigProvider(cfg), recording_logger)
        assert lib.get_info() is cfg
        info = recording_logger.calls_for_level("info")
        assert info[0].args == ({"name": "a", "version": "1", "description": "d"},)

    def test_get_info_attribute_config(self, recording_logger: RecordingLogger) -> None:
        cfg = SimpleNamespace(name="a", version="1", description="d")
        lib = create_library_service(StubConfigProvider(cfg), recording_logger)
        assert lib.is_ready() is True
        assert lib.get_info() is cfg
        assert recording_logger.calls[0].args[0] == {"name": "a", "version": "1", "description": "d"}

    def test_is_ready_valid(self, config_provider: StubConfigProvider) -> None:
        assert create_library_service(config_provider).is_ready() is True

    def test_is_ready_invalid_provider(self) -> None:
        provider = StubConfigProvider(make_config(), valid=False)
        assert create_library_service(provider).is_ready() is False


class TestFactories:
    def test_fresh_instances_per_call(self, config_provider: StubConfigProvider) -> None:
        first = create_library_service(config_provider)
        second = create_library_service(config_provider)
        assert first.get_calculator() is not second.get_calculator()
        assert first.get_string_service() is not second.get_string_service()

    def test_logger_reaches_string_service(
        self, config_provider: StubConfigProvider, recording_logger: RecordingLogger
    ) -> None:
        lib = create_library_service(config_provider, recording_logger)
        lib.get_string_service().process("x")
        assert len(recording_logger.calls_for_level("debug")) == 1

    def test_default_config_provider(self) -> None:
        provider = create_default_config_provider()
        assert isinstance(provider, DefaultConfigProvider)
        assert provider.is_valid() is True
        assert provider.get_config().name == "samplelib"

    def test_default_config_provider_invalid(self) -> None:
        provider = create_default_config_provider(valid=False)
        assert create_library_service(provider).is_ready() is False
