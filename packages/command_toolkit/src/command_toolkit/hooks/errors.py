"""Error hook that records command failures in the log."""

from __future__ import annotations

import logging
from typing import Any


class LoggingErrorHandler:
    """Log failure values handed over by the execution engine."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or logging.getLogger(__name__)

    def __call__(self, context: Any, error: Any) -> None:
        name = getattr(context, "command_name", "") or "<unknown>"
        if isinstance(error, BaseException):
            self._logger.error(
                "Command '%s' failed: %s",
                name,
                error,
                exc_info=(type(error), error, error.__traceback__),
            )
            return
        self._logger.error("Command '%s' failed: %s", name, error)
