"""Execution engine: guards, entry point and failure routing.

``execute`` is the single place where a command's outcome is classified.
Each failure value is consumed exactly once, either by the command's error
handler or by the caller through ``ExecutionResult.output``, and the state
is always assigned without reference to where the value went.

The engine performs no retries, no logging and no I/O of its own. Hooks run
sequentially in one task; cancellation of that task propagates untouched.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from command_toolkit.hooks.base import capture, capture_check, resolve
from command_toolkit.models.execution import ExecutionOutput, ExecutionResult, ExecutionState
from command_toolkit.models.result import Err, Ok, Result

if TYPE_CHECKING:
    from command_toolkit.command import Command


async def run_checks(command: Command, context: Any) -> Result[bool, Any]:
    """Run the command's checks in declaration order.

    Stops at the first check that fails (``Err``) or rejects (``False``);
    later checks are never invoked.

    Returns:
        ``Ok(True)`` when every check passed, ``Ok(False)`` on the first
        rejection, or the first check's ``Err``.
    """
    for check in command.checks:
        verdict = await capture_check(check, context)
        if isinstance(verdict, Err):
            return verdict
        if not verdict.value:
            return Ok(False)
    return Ok(True)


async def execute(command: Command, context: Any) -> ExecutionResult:
    """Run checks, invoke the entry point and route its outcome."""
    verdict = await run_checks(command, context)

    if isinstance(verdict, Err):
        output = await _route_failure(command, context, verdict)
        return ExecutionResult(ExecutionState.CHECK_ERRORED, output)

    if not verdict.value:
        return ExecutionResult(ExecutionState.CHECK_FAILED, ExecutionOutput.not_executed())

    outcome = await capture(command.entry_point, context)
    if isinstance(outcome, Ok):
        return ExecutionResult(ExecutionState.COMMAND_FINISHED, ExecutionOutput.present(outcome))

    output = await _route_failure(command, context, outcome)
    return ExecutionResult(ExecutionState.COMMAND_ERRORED, output)


async def _route_failure(command: Command, context: Any, failure: Err[Any]) -> ExecutionOutput:
    if command.error_handler is None:
        return ExecutionOutput.present(failure)
    # Handler return values are discarded.
    await resolve(command.error_handler(context, failure.error))
    return ExecutionOutput.taken_by_error_handler()
