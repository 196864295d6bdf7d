"""Logging helpers for command and trace correlation."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from contextvars import ContextVar
from typing import TYPE_CHECKING

from command_toolkit.telemetry.tracing import get_current_trace_id

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from command_toolkit.config.settings import Settings

_current_command: ContextVar[str | None] = ContextVar("command_toolkit_command", default=None)


def get_current_command() -> str | None:
    """Name of the command being dispatched in the current task, if any."""
    return _current_command.get()


@contextmanager
def command_scope(name: str) -> Iterator[None]:
    """Mark ``name`` as the current command for log records in this task."""
    token = _current_command.set(name)
    try:
        yield
    finally:
        _current_command.reset(token)


class CommandContextFilter(logging.Filter):
    """Attach command name and trace identifiers to log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        """Inject command and trace_id into the log record."""
        record.command = get_current_command() or "-"
        record.trace_id = get_current_trace_id() or "-"
        return True


def install_command_log_filter(loggers: Iterable[logging.Logger] | None = None) -> None:
    """Install command context filters for structured logging.

    Args:
        loggers: Optional iterable of loggers to attach the filter to. Defaults to root logger.
    """
    targets = list(loggers) if loggers is not None else [logging.getLogger()]
    for logger in targets:
        if any(isinstance(flt, CommandContextFilter) for flt in logger.filters):
            continue
        logger.addFilter(CommandContextFilter())


def configure_logging(settings: Settings) -> None:
    """Apply level and format from settings and install the context filter.

    Handlers already attached to the root logger get the configured format
    too. The filter is attached to the root handlers so that records emitted by
    child loggers carry ``command`` and ``trace_id`` when formatted.
    """
    logging.basicConfig(level=settings.log_level_number, format=settings.log_format)
    root = logging.getLogger()
    root.setLevel(settings.log_level_number)
    formatter = logging.Formatter(settings.log_format)
    for handler in root.handlers:
        handler.setFormatter(formatter)
        if not any(isinstance(flt, CommandContextFilter) for flt in handler.filters):
            handler.addFilter(CommandContextFilter())
    install_command_log_filter([root])
