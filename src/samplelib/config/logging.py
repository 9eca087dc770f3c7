"""structlog setup for events emitted by the samplelib services.

Only the ``samplelib`` logger hierarchy is touched: it gets its own stderr
handler and stops propagating, so an application embedding the library keeps
its root logging configuration.

Rendering:
- Human (default): one console line per event. Nested payloads such as the
  ``input``/``output`` of ``Processed string`` are flattened to dotted keys
  (``output.processed='HI'``).
- JSON (``--log-json``): one JSON object per line, payloads kept nested.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Mapping
from typing import Any

import structlog

from samplelib.infrastructure.logging_adapter import StructlogLoggerAdapter

LIBRARY_LOGGER = "samplelib"

_HANDLER_NAME = "samplelib-stderr"


def _flatten(prefix: str, value: Any, out: dict[str, Any]) -> None:
    if isinstance(value, Mapping) and value:
        for key, inner in value.items():
            _flatten(f"{prefix}.{key}", inner, out)
    else:
        out[prefix] = value


def flatten_payloads(
    _logger: Any, _method: str, event_dict: structlog.types.EventDict
) -> structlog.types.EventDict:
    """Processor turning nested mapping values into dotted top-level keys."""
    flat: dict[str, Any] = {}
    for key, value in event_dict.items():
        if key != "event" and isinstance(value, Mapping):
            _flatten(key, value, flat)
        else:
            flat[key] = value
    return flat


def _shared_processors() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def _render_chain(log_json: bool) -> list[structlog.types.Processor]:
    if log_json:
        return [structlog.processors.JSONRenderer(ensure_ascii=False)]
    return [flatten_payloads, structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())]


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
    name: str = LIBRARY_LOGGER,
) -> StructlogLoggerAdapter:
    """Route *name* events to stderr and return an adapter that logs there.

    Calling again replaces the previous handler, so the last call decides
    level and format.

    Args:
        verbose: Show DEBUG events (``Processed string``). Otherwise WARNING+.
        log_json: Use the JSON renderer instead of the console renderer.
        name: Logger hierarchy to configure; the returned adapter logs to it.
    """
    shared = _shared_processors()
    structlog.configure(
        processors=[*shared, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                *_render_chain(log_json),
            ],
        )
    )

    lib_logger = logging.getLogger(name)
    lib_logger.handlers = [h for h in lib_logger.handlers if h.get_name() != _HANDLER_NAME]
    lib_logger.addHandler(handler)
    lib_logger.propagate = False
    lib_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    return StructlogLoggerAdapter(name)
