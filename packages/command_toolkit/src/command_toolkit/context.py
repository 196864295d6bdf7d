"""Per-invocation context handed to checks, entry points and hooks.

The execution engine never looks inside a context; it only passes it along.
``CommandContext`` is the default shape used by the dispatcher and tests,
carrying shared application data, the inbound interaction payload and an
optional responder for delivering replies.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, Protocol, TypeVar

from command_toolkit.errors import ResponderMissingError

D = TypeVar("D")


class Responder(Protocol):
    """Delivery handle for interaction responses."""

    async def respond(self, content: str, *, ephemeral: bool = False) -> Any:
        """Send a response to the interaction being answered."""
        ...


@dataclass
class CommandContext(Generic[D]):
    """Context for one command invocation."""

    data: D
    command_name: str = ""
    interaction: dict[str, Any] = field(default_factory=dict)
    responder: Responder | None = None

    @property
    def interaction_id(self) -> str:
        return str(self.interaction.get("id", ""))

    @property
    def guild_id(self) -> str | None:
        guild_id = self.interaction.get("guild_id")
        return str(guild_id) if guild_id is not None else None

    @property
    def user_id(self) -> str | None:
        """Invoking user id, from the member object in guilds or the user object in DMs."""
        member = self.interaction.get("member") or {}
        user = member.get("user") or self.interaction.get("user") or {}
        user_id = user.get("id")
        return str(user_id) if user_id is not None else None

    async def respond(self, content: str, *, ephemeral: bool = False) -> Any:
        """Reply to the interaction through the attached responder."""
        if self.responder is None:
            msg = f"No responder attached to context for command '{self.command_name}'"
            raise ResponderMissingError(msg)
        return await self.responder.respond(content, ephemeral=ephemeral)
