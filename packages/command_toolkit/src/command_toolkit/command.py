"""Command definitions and their fluent builder."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Literal

from command_toolkit import execution
from command_toolkit.models.argument import CommandArgument

if TYPE_CHECKING:
    from collections.abc import Iterable

    from command_toolkit.hooks.base import CheckHook, EntryPoint, ErrorHook
    from command_toolkit.models.execution import ExecutionResult
    from command_toolkit.models.permissions import Permissions
    from command_toolkit.models.result import Result

CommandDetailLevel = Literal["name", "summary", "full"]


@dataclass(frozen=True)
class Command:
    """A command executed by the framework.

    Built once at registration time and never mutated afterwards, so a single
    instance can serve any number of concurrent executions.

    Attributes:
        name: Command name as registered with the platform.
        description: Human-readable description.
        arguments: Declared options, in wire order.
        entry_point: Business logic, called with the context.
        required_permissions: Permissions an external authorizer should
            enforce, or None for no restriction.
        checks: Guards run in order before the entry point.
        error_handler: Consumer of failure values; when None, failures are
            returned to the caller.
    """

    entry_point: EntryPoint
    name: str = ""
    description: str = ""
    arguments: tuple[CommandArgument, ...] = ()
    required_permissions: Permissions | None = None
    checks: tuple[CheckHook, ...] = ()
    error_handler: ErrorHook | None = field(default=None)

    async def run_checks(self, context: Any) -> Result[bool, Any]:
        """Run this command's checks against ``context``."""
        return await execution.run_checks(self, context)

    async def execute(self, context: Any) -> ExecutionResult:
        """Execute this command against ``context``."""
        return await execution.execute(self, context)

    def to_dict(self, detail_level: CommandDetailLevel = "full") -> dict[str, Any]:
        """Convert command metadata to dict with specified detail level."""
        payload: dict[str, Any] = {"name": self.name}
        if detail_level in ("summary", "full"):
            payload["description"] = self.description
            payload["required_permissions"] = (
                int(self.required_permissions) if self.required_permissions is not None else None
            )
        if detail_level == "full":
            payload["arguments"] = [argument.to_dict() for argument in self.arguments]
            payload["checks"] = len(self.checks)
            payload["has_error_handler"] = self.error_handler is not None
        return payload


class CommandBuilder:
    """Fluent builder producing an immutable ``Command``.

    No validation happens here; name uniqueness and non-empty metadata are
    the registry's concern.
    """

    def __init__(self, entry_point: EntryPoint) -> None:
        self._entry_point = entry_point
        self._name = ""
        self._description = ""
        self._arguments: list[CommandArgument] = []
        self._required_permissions: Permissions | None = None
        self._checks: list[CheckHook] = []
        self._error_handler: ErrorHook | None = None

    def name(self, name: str) -> CommandBuilder:
        """Set the command name."""
        self._name = name
        return self

    def description(self, description: str) -> CommandBuilder:
        """Set the command description."""
        self._description = description
        return self

    def add_argument(self, argument: CommandArgument) -> CommandBuilder:
        """Append an argument after the ones already added."""
        self._arguments.append(argument)
        return self

    def checks(self, checks: Iterable[CheckHook]) -> CommandBuilder:
        """Replace the check list."""
        self._checks = list(checks)
        return self

    def error_handler(self, handler: ErrorHook) -> CommandBuilder:
        """Set the error handler, replacing any previous one."""
        self._error_handler = handler
        return self

    def required_permissions(self, permissions: Permissions) -> CommandBuilder:
        """Set the permissions required to use this command."""
        self._required_permissions = permissions
        return self

    def build(self) -> Command:
        return Command(
            entry_point=self._entry_point,
            name=self._name,
            description=self._description,
            arguments=tuple(self._arguments),
            required_permissions=self._required_permissions,
            checks=tuple(self._checks),
            error_handler=self._error_handler,
        )
