"""OpenTelemetry spans around command dispatch."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from opentelemetry import trace as otel_trace
from opentelemetry.trace import Status, StatusCode, format_trace_id

from command_toolkit.config.settings import DEFAULT_TRACER_NAME

if TYPE_CHECKING:
    from collections.abc import Iterator

    from opentelemetry.trace import Span, TracerProvider

    from command_toolkit.models.execution import ExecutionResult

logger = logging.getLogger(__name__)


@dataclass
class ExecutionSpan:
    """Span wrapping a single command dispatch."""

    command_name: str
    interaction_id: str | None = None
    guild_id: str | None = None
    user_id: str | None = None
    tracer_name: str = DEFAULT_TRACER_NAME
    tracer_provider: TracerProvider | None = None
    trace_id: str | None = None
    _span: Span | None = field(default=None, repr=False)

    @contextmanager
    def span(self) -> Iterator[Span]:
        """Open the dispatch span, capturing the trace ID for log correlation."""
        tracer = otel_trace.get_tracer(self.tracer_name, tracer_provider=self.tracer_provider)
        attributes: dict[str, Any] = {"command.name": self.command_name}
        if self.interaction_id:
            attributes["interaction.id"] = self.interaction_id
        if self.guild_id:
            attributes["guild.id"] = self.guild_id
        if self.user_id:
            attributes["user.id"] = self.user_id

        with tracer.start_as_current_span("command.dispatch", attributes=attributes) as span:
            self._span = span
            ctx = span.get_span_context()
            if ctx.trace_id != 0:
                self.trace_id = format_trace_id(ctx.trace_id)
                logger.debug("Captured trace_id: %s", self.trace_id)
            try:
                yield span
            except Exception as e:
                span.set_status(Status(StatusCode.ERROR, str(e)))
                span.record_exception(e)
                raise

    def set_result(self, result: ExecutionResult) -> None:
        """Record the execution state and output location on the span."""
        if self._span is None:
            return
        self._span.set_attribute("command.state", result.state.value)
        self._span.set_attribute("command.output", result.output.kind.value)
        if result.state.errored:
            self._span.set_status(Status(StatusCode.ERROR, result.state.value))
        else:
            self._span.set_status(Status(StatusCode.OK))


def get_current_trace_id() -> str | None:
    """Get the current OpenTelemetry trace ID if available."""
    span = otel_trace.get_current_span()
    ctx = span.get_span_context()
    if ctx.trace_id == 0:
        return None
    return format_trace_id(ctx.trace_id)
