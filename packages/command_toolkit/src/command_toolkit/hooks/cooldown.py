"""Cooldown check limiting how often a command may run."""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from command_toolkit.models.result import Err, Ok, Result

KeyFunc = Callable[[Any], str]


@dataclass(frozen=True)
class CooldownError:
    """Failure value reported when a cooldown bucket is exhausted."""

    key: str
    retry_after: float

    def __str__(self) -> str:
        return f"rate-limited: retry after {self.retry_after:.2f}s"


def user_key(context: Any) -> str:
    """Bucket by invoking user, falling back to a shared bucket."""
    return getattr(context, "user_id", None) or "global"


class CooldownCheck:
    """Allow ``rate`` invocations per ``per`` seconds for each bucket key.

    Buckets are fixed windows that open on the first invocation for a key
    and are dropped once their window has elapsed.
    The check itself holds the cross-invocation state; one instance is
    meant to be shared by every execution of the command it guards.
    """

    def __init__(
        self,
        rate: int,
        per: float,
        *,
        key: KeyFunc = user_key,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if rate < 1:
            msg = "CooldownCheck.rate must be at least 1"
            raise ValueError(msg)
        if per <= 0:
            msg = "CooldownCheck.per must be positive"
            raise ValueError(msg)
        self._rate = rate
        self._per = per
        self._key = key
        self._clock = clock
        self._buckets: dict[str, tuple[float, int]] = {}

    def __call__(self, context: Any) -> Result[bool, CooldownError]:
        key = self._key(context)
        now = self._clock()
        self._evict_expired(now)
        window_start, used = self._buckets.get(key, (now, 0))
        if used >= self._rate:
            return Err(CooldownError(key=key, retry_after=self._per - (now - window_start)))
        self._buckets[key] = (window_start, used + 1)
        return Ok(True)

    def reset(self, key: str | None = None) -> None:
        """Clear one bucket, or all buckets when no key is given."""
        if key is None:
            self._buckets.clear()
        else:
            self._buckets.pop(key, None)

    def _evict_expired(self, now: float) -> None:
        # Buckets are kept in window-start order, so expired ones sit at the front.
        while self._buckets:
            key, (window_start, _) = next(iter(self._buckets.items()))
            if now - window_start < self._per:
                return
            del self._buckets[key]
