"""Hook signatures and invocation helpers.

Every hook is a plain callable. It may be a coroutine function or return a
value directly; ``resolve`` awaits the result only when it is awaitable.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar, Union

from command_toolkit.models.result import Err, Ok, Result, as_result

logger = logging.getLogger(__name__)

T = TypeVar("T")

MaybeAwaitable = Union[T, Awaitable[T]]

EntryPoint = Callable[[Any], MaybeAwaitable[Any]]
CheckHook = Callable[[Any], MaybeAwaitable[Union[bool, Result[bool, Any]]]]
ErrorHook = Callable[[Any, Any], MaybeAwaitable[Any]]
BeforeHook = Callable[[Any, str], MaybeAwaitable[bool]]
AfterHook = Callable[[Any, str, Result[Any, Any]], MaybeAwaitable[Any]]


async def resolve(value: MaybeAwaitable[T]) -> T:
    """Await ``value`` if it is awaitable, otherwise return it as is."""
    if inspect.isawaitable(value):
        return await value
    return value


async def capture(func: Callable[..., Any], *args: Any) -> Result[Any, Any]:
    """Call a hook and fold its return value or raised exception into a Result."""
    try:
        outcome = await resolve(func(*args))
    except Exception as exc:  # noqa: BLE001 - failures become Err values
        return Err(exc)
    return as_result(outcome)


async def capture_check(check: CheckHook, context: Any) -> Result[bool, Any]:
    """Run a check hook, normalizing its verdict to ``Ok(bool)`` or ``Err``."""
    outcome = await capture(check, context)
    if isinstance(outcome, Ok):
        if not isinstance(outcome.value, bool):
            logger.debug(
                "Check %r returned non-bool verdict %r; using its truthiness",
                check,
                outcome.value,
            )
        return Ok(bool(outcome.value))
    return outcome
