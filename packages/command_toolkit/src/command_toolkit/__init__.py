from command_toolkit.command import Command, CommandBuilder
from command_toolkit.config import Settings, load_settings
from command_toolkit.context import CommandContext, Responder
from command_toolkit.dispatcher import Dispatcher
from command_toolkit.errors import (
    CommandNotFoundError,
    CommandRegistrationError,
    CommandToolkitError,
    ResponderMissingError,
    UnwrapError,
)
from command_toolkit.execution import execute, run_checks
from command_toolkit.hooks import CooldownCheck, CooldownError, LoggingErrorHandler
from command_toolkit.models import (
    ArgumentKind,
    CommandArgument,
    Err,
    ExecutionOutput,
    ExecutionResult,
    ExecutionState,
    Ok,
    OutputKind,
    Permissions,
    Result,
)
from command_toolkit.registry import CommandRegistry
from command_toolkit.telemetry import configure_logging

__all__ = [
    "ArgumentKind",
    "Command",
    "CommandArgument",
    "CommandBuilder",
    "CommandContext",
    "CommandNotFoundError",
    "CommandRegistrationError",
    "CommandRegistry",
    "CommandToolkitError",
    "CooldownCheck",
    "CooldownError",
    "Dispatcher",
    "Err",
    "ExecutionOutput",
    "ExecutionResult",
    "ExecutionState",
    "LoggingErrorHandler",
    "Ok",
    "OutputKind",
    "Permissions",
    "Responder",
    "Result",
    "ResponderMissingError",
    "Settings",
    "UnwrapError",
    "configure_logging",
    "execute",
    "load_settings",
    "run_checks",
]
