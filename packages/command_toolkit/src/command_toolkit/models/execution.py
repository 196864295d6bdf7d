"""Terminal state and output location of a command execution."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any

from command_toolkit.models.result import Err, Ok, Result


class ExecutionState(str, Enum):
    """Why a command execution ended where it did.

    ``BEFORE_HOOK_FAILED`` belongs to the dispatcher's global gate; the
    execution engine itself never produces it.
    """

    CHECK_ERRORED = "check_errored"
    CHECK_FAILED = "check_failed"
    COMMAND_FINISHED = "command_finished"
    COMMAND_ERRORED = "command_errored"
    BEFORE_HOOK_FAILED = "before_hook_failed"

    @property
    def errored(self) -> bool:
        """True for states that carry a failure value."""
        return self in (ExecutionState.CHECK_ERRORED, ExecutionState.COMMAND_ERRORED)


class OutputKind(str, Enum):
    """Where the produced value physically ended up."""

    NOT_EXECUTED = "not_executed"
    PRESENT = "present"
    TAKEN_BY_AFTER_HOOK = "taken_by_after_hook"
    TAKEN_BY_ERROR_HANDLER_HOOK = "taken_by_error_handler_hook"


@dataclass(frozen=True)
class ExecutionOutput:
    """Location of a command's value; only PRESENT carries the result."""

    kind: OutputKind
    result: Result[Any, Any] | None = None

    def __post_init__(self) -> None:
        if self.kind is OutputKind.PRESENT and self.result is None:
            msg = "A PRESENT output requires a result"
            raise ValueError(msg)
        if self.kind is not OutputKind.PRESENT and self.result is not None:
            msg = f"A {self.kind.name} output cannot carry a result"
            raise ValueError(msg)

    @classmethod
    def not_executed(cls) -> ExecutionOutput:
        return cls(OutputKind.NOT_EXECUTED)

    @classmethod
    def present(cls, result: Result[Any, Any]) -> ExecutionOutput:
        return cls(OutputKind.PRESENT, result)

    @classmethod
    def taken_by_after_hook(cls) -> ExecutionOutput:
        return cls(OutputKind.TAKEN_BY_AFTER_HOOK)

    @classmethod
    def taken_by_error_handler(cls) -> ExecutionOutput:
        return cls(OutputKind.TAKEN_BY_ERROR_HANDLER_HOOK)

    @property
    def is_present(self) -> bool:
        return self.kind is OutputKind.PRESENT


@dataclass(frozen=True)
class ExecutionResult:
    """State and output of a single execution.

    Attributes:
        state: Terminal state, classifiable without inspecting the output.
        output: Where the produced value went; present only when no hook
            consumed it.
    """

    state: ExecutionState
    output: ExecutionOutput

    @property
    def result(self) -> Result[Any, Any] | None:
        """The Ok/Err value when the caller is its consumer, else None."""
        return self.output.result

    @property
    def finished(self) -> bool:
        return self.state is ExecutionState.COMMAND_FINISHED

    @property
    def value(self) -> Any:
        """The success value, or None when no Ok value is present."""
        result = self.output.result
        return result.value if isinstance(result, Ok) else None

    @property
    def error(self) -> Any:
        """The failure value, or None when no Err value is present."""
        result = self.output.result
        return result.error if isinstance(result, Err) else None

    def with_output(self, output: ExecutionOutput) -> ExecutionResult:
        """Return a copy with the output relocated, keeping the state."""
        return replace(self, output=output)
