"""Registry mapping command names to definitions."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from command_toolkit.errors import CommandNotFoundError, CommandRegistrationError

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from command_toolkit.command import Command, CommandDetailLevel


class CommandRegistry:
    """Registry for commands keyed by name."""

    def __init__(self, commands: Iterable[Command] = ()) -> None:
        self._commands: dict[str, Command] = {}
        for command in commands:
            self.register(command)

    def register(self, command: Command) -> Command:
        """Register a command, rejecting empty, padded or duplicate names."""
        if not command.name.strip():
            message = "Cannot register a command without a name"
            raise CommandRegistrationError(message)
        if command.name != command.name.strip():
            message = f"Command name has surrounding whitespace: {command.name!r}"
            raise CommandRegistrationError(message)
        if command.name in self._commands:
            message = f"Command already registered: {command.name}"
            raise CommandRegistrationError(message)
        self._commands[command.name] = command
        return command

    def unregister(self, name: str) -> Command:
        """Remove and return a registered command."""
        try:
            return self._commands.pop(name)
        except KeyError:
            raise CommandNotFoundError(name) from None

    def get(self, name: str) -> Command | None:
        """Get a registered command by name."""
        return self._commands.get(name)

    def require(self, name: str) -> Command:
        """Get a registered command by name, raising when it is unknown."""
        command = self._commands.get(name)
        if command is None:
            raise CommandNotFoundError(name)
        return command

    def names(self) -> list[str]:
        """Registered command names in registration order."""
        return list(self._commands)

    def list(self, detail_level: CommandDetailLevel = "summary") -> list[dict[str, Any]]:
        """List registered commands at the requested detail level."""
        return [command.to_dict(detail_level) for command in self._commands.values()]

    def __contains__(self, name: object) -> bool:
        return name in self._commands

    def __len__(self) -> int:
        return len(self._commands)

    def __iter__(self) -> Iterator[Command]:
        return iter(self._commands.values())
