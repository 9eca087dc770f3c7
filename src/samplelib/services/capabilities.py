"""Capability contracts consumed by the service layer.

Each capability is a structural Protocol: anything with matching methods
satisfies it, so tests can pass small hand-written doubles. Services take
implementations through their constructors and never look them up globally.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from samplelib.config.models import LibConfig


@runtime_checkable
class LoggerAdapter(Protocol):
    """Leveled logging sink. Implementations may drop everything."""

    def info(self, message: str, *args: Any) -> None: ...

    def warn(self, message: str, *args: Any) -> None: ...

    def error(self, message: str, *args: Any) -> None: ...

    def debug(self, message: str, *args: Any) -> None: ...


@runtime_checkable
class ConfigProvider(Protocol):
    """Source of the library configuration.

    Both methods must be side-effect free and cheap; services may call them
    repeatedly.
    """

    def get_config(self) -> LibConfig: ...

    def is_valid(self) -> bool: ...


@runtime_checkable
class CacheAdapter(Protocol):
    """Key-value cache with optional per-entry TTL in milliseconds."""

    def get(self, key: str) -> Any | None: ...

    def set(self, key: str, value: Any, ttl_ms: int | None = None) -> None: ...

    def delete(self, key: str) -> None: ...

    def has(self, key: str) -> bool: ...


class NullLogger:
    """LoggerAdapter that discards every entry.

    Selected when a service is built without a logger, so call sites log
    unconditionally.
    """

    def info(self, message: str, *args: Any) -> None:
        pass

    def warn(self, message: str, *args: Any) -> None:
        pass

    def error(self, message: str, *args: Any) -> None:
        pass

    def debug(self, message: str, *args: Any) -> None:
        pass
