"""Shared pytest fixtures and test doubles for samplelib tests."""

from __future__ import annotations

from collections.abc import Generator
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from samplelib.config.models import LibConfig
from samplelib.infrastructure.version import get_library_version


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run in an empty temp directory so no samplelib.toml is discovered."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("SAMPLELIB_CONFIG", raising=False)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Undo handler/level changes made by configure_logging()."""
    import logging

    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    lib = logging.getLogger("samplelib")
    lib_handlers = lib.handlers[:]
    lib_level = lib.level
    lib_propagate = lib.propagate
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    lib.handlers = lib_handlers
    lib.setLevel(lib_level)
    lib.propagate = lib_propagate


# ---------------------------------------------------------------------------
# Test doubles for the capability contracts
# ---------------------------------------------------------------------------


@dataclass
class LogCall:
    level: str
    message: str
    args: tuple[Any, ...]


@dataclass
class RecordingLogger:
    """LoggerAdapter that records every call for later assertions."""

    calls: list[LogCall] = field(default_factory=list)

    def info(self, message: str, *args: Any) -> None:
        self.calls.append(LogCall("info", message, args))

    def warn(self, message: str, *args: Any) -> None:
        self.calls.append(LogCall("warn", message, args))

    def error(self, message: str, *args: Any) -> None:
        self.calls.append(LogCall("error", message, args))

    def debug(self, message: str, *args: Any) -> None:
        self.calls.append(LogCall("debug", message, args))

    def calls_for_level(self, level: str) -> list[LogCall]:
        return [c for c in self.calls if c.level == level]


class StubConfigProvider:
    """ConfigProvider returning a fixed value (of any shape)."""

    def __init__(self, config: Any, valid: bool = True) -> None:
        self.config = config
        self.valid = valid
        self.get_config_calls = 0

    def get_config(self) -> Any:
        self.get_config_calls += 1
        return self.config

    def is_valid(self) -> bool:
        return self.valid


class FakeClock:
    """Manually advanced monotonic clock (seconds)."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance_ms(self, ms: float) -> None:
        self.now += ms / 1000


def make_config(**overrides: str) -> LibConfig:
    fields = {
        "name": "samplelib",
        "version": get_library_version(),
        "description": "Sample Python Library Template",
    }
    fields.update(overrides)
    return LibConfig(**fields)


@pytest.fixture
def recording_logger() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def lib_config() -> LibConfig:
    return make_config()


@pytest.fixture
def config_provider(lib_config: LibConfig) -> StubConfigProvider:
    return StubConfigProvider(lib_config)


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()
