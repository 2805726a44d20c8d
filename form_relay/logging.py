"""structlog wiring for the relay: one stdout handler, JSON or console lines."""

from __future__ import annotations

import logging
import sys

import structlog

# Records from plain stdlib loggers (uvicorn) get the same fields
# as structlog events before rendering.
_PRE_CHAIN: list[structlog.types.Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
]

_SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def _renderer(json: bool) -> structlog.types.Processor:
    if json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer()


def setup_logging(*, json: bool = True, level: str = "INFO") -> None:
    """Route relay events and server access logs through one formatter.

    ``json=False`` is meant for running the relay locally; deployed
    instances keep JSON so each submission outcome is one parseable line.
    ``level`` is a level name in any case (``"debug"``, ``"INFO"``).
    """
    structlog.configure(
        processors=[*_PRE_CHAIN, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_PRE_CHAIN,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(json),
            ],
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level.upper())

    # uvicorn attaches its own handlers at startup; let its records reach root.
    for name in _SERVER_LOGGERS:
        server_logger = logging.getLogger(name)
        server_logger.handlers.clear()
        server_logger.propagate = True
