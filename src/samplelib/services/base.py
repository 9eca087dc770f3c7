"""BaseService: shared foundation for samplelib services.

Every service may receive a :class:`LoggerAdapter` at construction time.
A missing logger is replaced by :class:`NullLogger`, so subclasses call
``self._logger`` unconditionally.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from samplelib.services.capabilities import NullLogger

if TYPE_CHECKING:
    from samplelib.services.capabilities import LoggerAdapter


class BaseService:
    """Base for all service-layer classes.

    Services hold only injected capabilities, never per-call state.

    Usage::

        class GreetingService(BaseService):
            def greet(self, name: str) -> Result[str]:
                self._logger.debug("Greeting", {"name": name})
                return ok(f"hello {name}")
    """

    def __init__(self, logger: LoggerAdapter | None = None) -> None:
        self._logger: LoggerAdapter = logger if logger is not None else NullLogger()
