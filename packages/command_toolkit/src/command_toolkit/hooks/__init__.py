"""Hooks package for command guards and failure handling.

Provides hook signatures and ready-made hooks:
- CooldownCheck: fallible guard limiting invocations per bucket
- LoggingErrorHandler: error hook that logs failure values

Checks return a verdict (``bool``, ``Ok(bool)``) or fail (``Err`` or a raised
exception); error hooks receive the context and the failure value.
"""

from command_toolkit.hooks.base import (
    AfterHook,
    BeforeHook,
    CheckHook,
    EntryPoint,
    ErrorHook,
    capture,
    capture_check,
    resolve,
)
from command_toolkit.hooks.cooldown import CooldownCheck, CooldownError, user_key
from command_toolkit.hooks.errors import LoggingErrorHandler

__all__ = [
    "AfterHook",
    "BeforeHook",
    "CheckHook",
    "CooldownCheck",
    "CooldownError",
    "EntryPoint",
    "ErrorHook",
    "LoggingErrorHandler",
    "capture",
    "capture_check",
    "resolve",
    "user_key",
]
