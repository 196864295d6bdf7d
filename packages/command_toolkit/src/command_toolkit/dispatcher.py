"""Dispatcher routing named invocations to registered commands.

The dispatcher is the framework layer around the execution engine. It owns
the global gate (the *before* hook) that runs ahead of any command and is the
only producer of ``BEFORE_HOOK_FAILED``, and the *after* hook that consumes
results the engine left for the caller. It also carries the ambient
concerns the engine stays free of: outcome logging and tracing.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from command_toolkit.command import CommandBuilder
from command_toolkit.config import load_settings
from command_toolkit.hooks.base import resolve
from command_toolkit.models.execution import ExecutionOutput, ExecutionResult, ExecutionState
from command_toolkit.models.result import Err
from command_toolkit.registry import CommandRegistry
from command_toolkit.telemetry import ExecutionSpan, command_scope

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from opentelemetry.trace import TracerProvider

    from command_toolkit.command import Command
    from command_toolkit.config import Settings
    from command_toolkit.hooks.base import AfterHook, BeforeHook, CheckHook, EntryPoint, ErrorHook
    from command_toolkit.models.argument import CommandArgument
    from command_toolkit.models.permissions import Permissions

logger = logging.getLogger(__name__)

_OUTCOME_LEVELS = {
    ExecutionState.COMMAND_FINISHED: logging.INFO,
    ExecutionState.CHECK_FAILED: logging.INFO,
    ExecutionState.BEFORE_HOOK_FAILED: logging.INFO,
    ExecutionState.CHECK_ERRORED: logging.WARNING,
    ExecutionState.COMMAND_ERRORED: logging.WARNING,
}


class Dispatcher:
    """Look up commands by name and execute them with framework hooks."""

    def __init__(
        self,
        registry: CommandRegistry | None = None,
        *,
        settings: Settings | None = None,
        before: BeforeHook | None = None,
        after: AfterHook | None = None,
        tracer_provider: TracerProvider | None = None,
    ) -> None:
        self.registry = registry if registry is not None else CommandRegistry()
        self._settings = settings if settings is not None else load_settings()
        self._before = before
        self._after = after
        self._tracer_provider = tracer_provider

    @property
    def settings(self) -> Settings:
        return self._settings

    def command(
        self,
        name: str,
        description: str = "",
        *,
        arguments: Iterable[CommandArgument] = (),
        checks: Iterable[CheckHook] = (),
        error_handler: ErrorHook | None = None,
        required_permissions: Permissions | None = None,
    ) -> Callable[[EntryPoint], Command]:
        """Build and register a command from the decorated entry point."""

        def decorator(entry_point: EntryPoint) -> Command:
            builder = (
                CommandBuilder(entry_point)
                .name(name)
                .description(description or (entry_point.__doc__ or "").strip())
                .checks(checks)
            )
            for argument in arguments:
                builder.add_argument(argument)
            if error_handler is not None:
                builder.error_handler(error_handler)
            if required_permissions is not None:
                builder.required_permissions(required_permissions)
            return self.registry.register(builder.build())

        return decorator

    async def dispatch(self, name: str, context: Any) -> ExecutionResult:
        """Execute the command registered under ``name``.

        Raises:
            CommandNotFoundError: If no command is registered under ``name``.
        """
        command = self.registry.require(name)
        turn = ExecutionSpan(
            command_name=name,
            interaction_id=getattr(context, "interaction_id", None),
            guild_id=getattr(context, "guild_id", None),
            user_id=getattr(context, "user_id", None),
            tracer_name=self._settings.tracer_name,
            tracer_provider=self._tracer_provider,
        )
        with command_scope(name), turn.span():
            logger.debug("Dispatching command '%s'", name)
            result = await self._run(command, context)
            turn.set_result(result)
            if self._settings.log_outcomes:
                _log_outcome(name, result)
        return result

    async def _run(self, command: Command, context: Any) -> ExecutionResult:
        if self._before is not None and not await resolve(self._before(context, command.name)):
            return ExecutionResult(
                ExecutionState.BEFORE_HOOK_FAILED, ExecutionOutput.not_executed()
            )

        result = await command.execute(context)
        if self._after is None or not result.output.is_present:
            return result

        await resolve(self._after(context, command.name, result.output.result))
        return result.with_output(ExecutionOutput.taken_by_after_hook())


def _log_outcome(name: str, result: ExecutionResult) -> None:
    level = _OUTCOME_LEVELS[result.state]
    if isinstance(result.result, Err):
        logger.log(
            level,
            "Command '%s' ended with state=%s: %s",
            name,
            result.state.value,
            result.error,
        )
        return
    logger.log(
        level,
        "Command '%s' ended with state=%s output=%s",
        name,
        result.state.value,
        result.output.kind.value,
    )
