"""Exceptions raised by the command toolkit.

Command and check failures are not raised through the toolkit; they travel
as ``Err`` values inside an ``ExecutionResult``. The exceptions here cover
misuse of the toolkit itself.
"""

from __future__ import annotations

from typing import Any


class CommandToolkitError(Exception):
    """Base exception for command toolkit errors."""


class CommandNotFoundError(CommandToolkitError, LookupError):
    """Raised when a command name is not registered."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Command not registered: {name}")
        self.name = name


class CommandRegistrationError(CommandToolkitError, ValueError):
    """Raised when a command cannot be added to a registry."""


class ResponderMissingError(CommandToolkitError):
    """Raised when a context has no responder to deliver a reply."""


class UnwrapError(CommandToolkitError):
    """Raised when unwrapping an Err value."""

    def __init__(self, message: str, *, error: Any) -> None:
        super().__init__(message)
        self.error = error
