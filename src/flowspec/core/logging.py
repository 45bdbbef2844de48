"""Structlog setup for the flowspec CLI.

Events are rendered by stdlib handlers, one per configured output, each
with its own level and console or JSON rendering. Every event carries the
request id of the current CLI invocation when one is set.
"""

from __future__ import annotations

import logging
import sys
from contextvars import ContextVar
from pathlib import Path
from typing import TYPE_CHECKING, Any
from uuid import uuid4

import structlog

if TYPE_CHECKING:
    from flowspec.config.models import LoggingConfig, LogOutputConfig

_request_id: ContextVar[str | None] = ContextVar("request_id", default=None)


def get_request_id() -> str | None:
    return _request_id.get()


def set_request_id(request_id: str | None = None) -> str:
    """Set or generate request correlation ID."""
    rid = request_id or uuid4().hex[:12]
    _request_id.set(rid)
    return rid


def clear_request_id() -> None:
    _request_id.set(None)


def _add_request_id(
    _logger: structlog.types.WrappedLogger,
    _method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    if rid := get_request_id():
        event_dict["request_id"] = rid
    return event_dict


_SHARED_PROCESSORS: list[structlog.types.Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.processors.add_log_level,
    structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S", key="timestamp"),
    _add_request_id,  # type: ignore[list-item]
]


def configure_logging(config: LoggingConfig | None = None) -> None:
    """Route structlog through stdlib handlers built from ``config``.

    Handlers installed by an earlier call are closed and replaced.
    """
    from flowspec.config.models import LoggingConfig

    config = config or LoggingConfig()
    root_level = logging.getLevelNamesMapping()[config.level]

    structlog.configure(
        processors=[*_SHARED_PROCESSORS, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        wrapper_class=structlog.make_filtering_bound_logger(root_level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    root_logger = logging.getLogger()
    for existing in list(root_logger.handlers):
        root_logger.removeHandler(existing)
        existing.close()
    root_logger.setLevel(root_level)

    for output in config.outputs:
        handler = _create_handler(output)
        handler.setLevel(logging.getLevelNamesMapping()[output.level or config.level])
        root_logger.addHandler(handler)


def _create_handler(output: LogOutputConfig) -> logging.Handler:
    handler: logging.Handler
    if output.destination == "stderr":
        handler = logging.StreamHandler(sys.stderr)
    elif output.destination == "stdout":
        handler = logging.StreamHandler(sys.stdout)
    else:
        path = Path(output.destination)
        path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(path, mode="a")

    renderer: structlog.types.Processor
    if output.format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        is_tty = output.destination in ("stderr", "stdout") and getattr(sys, output.destination).isatty()
        renderer = structlog.dev.ConsoleRenderer(colors=is_tty, pad_event_to=0, pad_level=False)

    handler.setFormatter(structlog.stdlib.ProcessorFormatter(processor=renderer, foreign_pre_chain=_SHARED_PROCESSORS))
    return handler
