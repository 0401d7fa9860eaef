"""structlog setup for tokendiff.

Events are rendered through stdlib handlers, one per configured output
(stderr, stdout or an absolute file path), each with its own level and a
console or JSON renderer. Every comparison started from the CLI gets a
short run id that is stamped on the events it emits.
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
    from tokendiff.config.models import LoggingConfig, LogLevel, LogOutputConfig

_run_id: ContextVar[str | None] = ContextVar("run_id", default=None)

_STREAM_NAMES = ("stderr", "stdout")


def get_run_id() -> str | None:
    return _run_id.get()


def set_run_id(run_id: str | None = None) -> str:
    """Start a comparison run; generates a 12-char id when none is given."""
    rid = run_id or uuid4().hex[:12]
    _run_id.set(rid)
    return rid


def clear_run_id() -> None:
    _run_id.set(None)


def _stamp_run_id(
    _logger: structlog.types.WrappedLogger,
    _method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    if rid := get_run_id():
        event_dict["run_id"] = rid
    return event_dict


def _pre_chain() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", key="timestamp"),
        _stamp_run_id,  # type: ignore[list-item]
    ]


def log_file_path(config: LoggingConfig) -> Path | None:
    """First file destination in ``config``, used to point users at details."""
    for output in config.outputs:
        if output.destination not in _STREAM_NAMES:
            return Path(output.destination)
    return None


def _open_handler(destination: str) -> logging.Handler:
    if destination in _STREAM_NAMES:
        return logging.StreamHandler(getattr(sys, destination))
    path = Path(destination)
    path.parent.mkdir(parents=True, exist_ok=True)
    return logging.FileHandler(path, mode="a", encoding="utf-8")


def _formatter(output: LogOutputConfig) -> logging.Formatter:
    renderer: structlog.types.Processor
    if output.format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        stream = getattr(sys, output.destination, None)
        renderer = structlog.dev.ConsoleRenderer(
            colors=stream is not None and stream.isatty(),
            pad_event_to=0,
            pad_level=False,
        )
    return structlog.stdlib.ProcessorFormatter(processor=renderer, foreign_pre_chain=_pre_chain())


def configure_logging(
    config: LoggingConfig | None = None,
    *,
    level: LogLevel | None = None,
) -> None:
    """Route structlog through the outputs described by ``config``.

    Args:
        config: Outputs and root level (defaults to a WARNING console on stderr)
        level: Overrides ``config.level``, e.g. DEBUG for ``--verbose``

    Calling it again replaces the previous handlers.
    """
    from tokendiff.config.models import LoggingConfig

    config = config or LoggingConfig()
    if level is not None:
        config = config.model_copy(update={"level": level})
    root_level = logging.getLevelName(config.level)

    structlog.configure(
        processors=[*_pre_chain(), structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        wrapper_class=structlog.make_filtering_bound_logger(root_level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    root = logging.getLogger()
    for existing in list(root.handlers):
        root.removeHandler(existing)
        existing.close()
    root.setLevel(root_level)

    for output in config.outputs:
        handler = _open_handler(output.destination)
        handler.setLevel(logging.getLevelName(output.level or config.level))
        handler.setFormatter(_formatter(output))
        root.addHandler(handler)
