"""Data types shared by commands, the execution engine and the dispatcher."""

from command_toolkit.models.argument import ArgumentKind, CommandArgument
from command_toolkit.models.execution import (
    ExecutionOutput,
    ExecutionResult,
    ExecutionState,
    OutputKind,
)
from command_toolkit.models.permissions import Permissions
from command_toolkit.models.result import Err, Ok, Result, as_result

__all__ = [
    "ArgumentKind",
    "CommandArgument",
    "Err",
    "ExecutionOutput",
    "ExecutionResult",
    "ExecutionState",
    "Ok",
    "OutputKind",
    "Permissions",
    "Result",
    "as_result",
]
