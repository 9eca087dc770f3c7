"""LoggerAdapter backed by structlog.

Mapping arguments become structured key/values on the event; anything else
is collected under ``args``::

    adapter.info("Getting library info", {"name": "samplelib"})
    # event="Getting library info" name="samplelib"
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import structlog


def _event_fields(args: tuple[Any, ...]) -> dict[str, Any]:
    fields: dict[str, Any] = {}
    extra: list[Any] = []
    for arg in args:
        if isinstance(arg, Mapping):
            fields.update({str(k): v for k, v in arg.items()})
        else:
            extra.append(arg)
    if extra:
        fields["args"] = extra
    return fields


class StructlogLoggerAdapter:
    """Forward LoggerAdapter calls to a structlog logger.

    Args:
        name: Logger name; defaults to ``samplelib`` so output follows the
            level set by :func:`samplelib.config.logging.configure_logging`.
    """

    def __init__(self, name: str = "samplelib") -> None:
        self._log = structlog.get_logger(name)

    def info(self, message: str, *args: Any) -> None:
        self._log.info(message, **_event_fields(args))

    def warn(self, message: str, *args: Any) -> None:
        self._log.warning(message, **_event_fields(args))

    def error(self, message: str, *args: Any) -> None:
        self._log.error(message, **_event_fields(args))

    def debug(self, message: str, *args: Any) -> None:
        self._log.debug(message, **_event_fields(args))
