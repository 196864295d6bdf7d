"""Telemetry package for command observability.

Provides OpenTelemetry spans around dispatch and logging filters that
correlate records with the current command and trace.
"""

from command_toolkit.telemetry.logging_utils import (
    CommandContextFilter,
    command_scope,
    configure_logging,
    get_current_command,
    install_command_log_filter,
)
from command_toolkit.telemetry.tracing import (
    ExecutionSpan,
    get_current_trace_id,
)

__all__ = [
    "CommandContextFilter",
    "ExecutionSpan",
    "command_scope",
    "configure_logging",
    "get_current_command",
    "get_current_trace_id",
    "install_command_log_filter",
]
