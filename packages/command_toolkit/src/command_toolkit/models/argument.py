"""Argument descriptors declared by commands."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class ArgumentKind(str, Enum):
    """Value kinds an interaction option can carry."""

    STRING = "string"
    INTEGER = "integer"
    NUMBER = "number"
    BOOLEAN = "boolean"
    USER = "user"
    CHANNEL = "channel"
    ROLE = "role"
    MENTIONABLE = "mentionable"
    ATTACHMENT = "attachment"


@dataclass(frozen=True)
class CommandArgument:
    """Metadata describing one command option.

    Parsing and coercion of incoming values belongs to the argument layer;
    this descriptor only records what the command declares.
    """

    name: str
    description: str
    kind: ArgumentKind = ArgumentKind.STRING
    required: bool = True
    choices: tuple[Any, ...] = ()
    autocomplete: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Convert the descriptor to a plain mapping."""
        payload: dict[str, Any] = {
            "name": self.name,
            "description": self.description,
            "kind": self.kind.value,
            "required": self.required,
        }
        if self.choices:
            payload["choices"] = list(self.choices)
        if self.autocomplete:
            payload["autocomplete"] = True
        return payload
