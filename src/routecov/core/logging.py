"""Logging for routecov runs.

Events are emitted through structlog and rendered by stdlib handlers, one
handler per configured output. A coverage run binds a ``run_id`` to the
structlog context so the events of one invocation can be told apart in a
shared log file.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING
from uuid import uuid4

import structlog

if TYPE_CHECKING:
    from routecov.config.models import LoggingConfig, LogOutputConfig

_LEVELS = logging.getLevelNamesMapping()

_SHARED_PROCESSORS: list[structlog.types.Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_logger_name,
    structlog.processors.add_log_level,
    structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S", key="timestamp"),
]


def start_run(run_id: str | None = None) -> str:
    """Bind a run correlation id to every following log event."""
    rid = run_id or uuid4().hex[:12]
    structlog.contextvars.bind_contextvars(run_id=rid)
    return rid


def _renderer(output: LogOutputConfig) -> structlog.types.Processor:
    if output.format == "json":
        return structlog.processors.JSONRenderer()
    stream = sys.stdout if output.destination == "stdout" else sys.stderr
    colors = output.destination in ("stderr", "stdout") and stream.isatty()
    return structlog.dev.ConsoleRenderer(colors=colors, pad_event_to=0, pad_level=False)


def _handler(destination: str) -> logging.Handler:
    if destination == "stdout":
        return logging.StreamHandler(sys.stdout)
    if destination == "stderr":
        return logging.StreamHandler(sys.stderr)
    path = Path(destination)
    path.parent.mkdir(parents=True, exist_ok=True)
    return logging.FileHandler(path, mode="a", encoding="utf-8")


def _reset_handlers(root: logging.Logger) -> None:
    for handler in list(root.handlers):
        root.removeHandler(handler)
        if isinstance(handler, logging.FileHandler):
            handler.close()


def configure_logging(config: LoggingConfig, *, verbose: bool = False) -> None:
    """Route structlog events to the outputs of a logging config.

    Args:
        config: Level and outputs to log to.
        verbose: Log everything at DEBUG, ignoring configured levels.
    """
    root_level = logging.DEBUG if verbose else _LEVELS[config.level]

    structlog.configure(
        processors=[
            *_SHARED_PROCESSORS,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(root_level),
        logger_factory=structlog.stdlib.LoggerFactory(),
        # reconfigured per CLI invocation, so loggers must not be cached
        cache_logger_on_first_use=False,
    )

    root = logging.getLogger()
    _reset_handlers(root)
    root.setLevel(root_level)

    for output in config.outputs:
        handler = _handler(output.destination)
        if verbose or output.level is None:
            handler.setLevel(root_level)
        else:
            handler.setLevel(_LEVELS[output.level])
        handler.setFormatter(
            structlog.stdlib.ProcessorFormatter(
                processors=[
                    structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                    _renderer(output),
                ],
                foreign_pre_chain=_SHARED_PROCESSORS,
            )
        )
        root.addHandler(handler)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.stdlib.get_logger(name)
