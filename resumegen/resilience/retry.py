from __future__ import annotations

import asyncio
import logging
import re
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Generic, Literal, TypeVar

from tenacity import (
    AsyncRetrying,
    before_sleep_log,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
    wait_fixed,
)

from resumegen.ai.types import ProviderError
from resumegen.resilience.errors import RemotePathError

logger = logging.getLogger(__name__)

T = TypeVar("T")

_TRANSIENT_STATUS_RE = re.compile(r"\b(?:429|5\d\d)\b")
_TRANSIENT_MARKERS = (
    "overloaded",
    "quota",
    "rate limit",
    "timeout",
    "timed out",
)


@dataclass(frozen=True)
class BackoffPolicy:
    kind: Literal["fixed", "exponential"] = "fixed"
    base_s: float = 1.0
    max_s: float = 8.0

    def wait(self):
        if self.kind == "exponential":
            return wait_exponential(multiplier=self.base_s, min=0, max=self.max_s)
        return wait_fixed(self.base_s)


@dataclass(frozen=True)
class RetryOutcome(Generic[T]):
    ok: bool
    value: T | None = None
    error: Exception | None = None
    attempts: int = 0


def is_transient(exc: BaseException) -> bool:
    if isinstance(exc, (asyncio.TimeoutError, TimeoutError)):
        return True
    if isinstance(exc, ProviderError):
        return exc.transient
    if isinstance(exc, RemotePathError):
        return False
    message = str(exc).lower()
    if _TRANSIENT_STATUS_RE.search(message):
        return True
    return any(marker in message for marker in _TRANSIENT_MARKERS)


async def with_retry(
    attempt: Callable[[], Awaitable[T]],
    *,
    is_transient: Callable[[BaseException], bool] = is_transient,
    max_attempts: int = 2,
    backoff: BackoffPolicy = BackoffPolicy(),
    sleep: Callable[[float], Awaitable[Any]] | None = None,
) -> RetryOutcome[T]:
    """Run ``attempt`` up to ``max_attempts`` times, retrying transient failures only.

    Never raises for attempt failures; the last error is returned in the outcome.
    """
    calls = 0

    async def counted() -> T:
        nonlocal calls
        calls += 1
        return await attempt()

    options: dict[str, Any] = {}
    if sleep is not None:
        options["sleep"] = sleep
    retrying = AsyncRetrying(
        stop=stop_after_attempt(max(1, max_attempts)),
        wait=backoff.wait(),
        retry=retry_if_exception(is_transient),
        before_sleep=before_sleep_log(logger, logging.WARNING),
        reraise=True,
        **options,
    )
    try:
        value = await retrying(counted)
    except Exception as exc:
        return RetryOutcome(ok=False, error=exc, attempts=calls)
    return RetryOutcome(ok=True, value=value, attempts=calls)
