"""Tri-state circuit breaker guarding every remote generation attempt.

State lives in an immutable ``BreakerState``; the module-level functions are
pure transitions and ``CircuitBreaker`` only swaps the current state. All
transitions happen synchronously around the single ``await`` in
``CircuitBreaker.call`` so cooperative tasks never interleave a
read-modify-write.
"""

from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass, replace
from enum import Enum
from typing import Awaitable, Callable, TypeVar

from resumegen.resilience.errors import CircuitOpenError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class BreakerStatus(str, Enum):
    CLOSED = "CLOSED"
    OPEN = "OPEN"
    HALF_OPEN = "HALF-OPEN"


class Permit(str, Enum):
    DENIED = "denied"
    NORMAL = "normal"
    TRIAL = "trial"


@dataclass(frozen=True)
class BreakerState:
    failure_threshold: int = 3
    cooldown_s: float = 60.0
    status: BreakerStatus = BreakerStatus.CLOSED
    failure_count: int = 0
    next_retry_at: float = 0.0
    trial_in_flight: bool = False


def acquire(state: BreakerState, now: float) -> tuple[BreakerState, Permit]:
    if state.status is BreakerStatus.CLOSED:
        return state, Permit.NORMAL
    if state.status is BreakerStatus.OPEN:
        if now < state.next_retry_at:
            return state, Permit.DENIED
        return replace(state, status=BreakerStatus.HALF_OPEN, trial_in_flight=True), Permit.TRIAL
    if state.trial_in_flight:
        return state, Permit.DENIED
    return replace(state, trial_in_flight=True), Permit.TRIAL


def record_success(state: BreakerState, permit: Permit) -> BreakerState:
    if permit is Permit.TRIAL:
        return replace(
            state,
            status=BreakerStatus.CLOSED,
            failure_count=0,
            trial_in_flight=False,
        )
    if state.status is BreakerStatus.CLOSED:
        return replace(state, failure_count=0)
    # A call admitted while CLOSED finished after the breaker tripped.
    return state


def record_failure(state: BreakerState, permit: Permit, now: float) -> BreakerState:
    failures = state.failure_count + 1
    if permit is Permit.TRIAL:
        return replace(
            state,
            status=BreakerStatus.OPEN,
            failure_count=failures,
            next_retry_at=now + state.cooldown_s,
            trial_in_flight=False,
        )
    if state.status is BreakerStatus.CLOSED and failures >= state.failure_threshold:
        return replace(
            state,
            status=BreakerStatus.OPEN,
            failure_count=failures,
            next_retry_at=now + state.cooldown_s,
        )
    return replace(state, failure_count=failures)


class CircuitBreaker:
    def __init__(
        self,
        failure_threshold: int = 3,
        cooldown_s: float = 60.0,
        *,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._state = BreakerState(failure_threshold=failure_threshold, cooldown_s=cooldown_s)
        self._clock = clock

    @property
    def state(self) -> BreakerState:
        return self._state

    def allows_attempt(self) -> bool:
        """True when ``call`` would currently run its coroutine."""
        _, permit = acquire(self._state, self._clock())
        return permit is not Permit.DENIED

    def is_open(self) -> bool:
        return not self.allows_attempt()

    def snapshot(self) -> dict[str, object]:
        now = self._clock()
        return {
            "status": self._state.status.value,
            "failure_count": self._state.failure_count,
            "failure_threshold": self._state.failure_threshold,
            "retry_in_s": max(0.0, round(self._state.next_retry_at - now, 3))
            if self._state.status is BreakerStatus.OPEN
            else 0.0,
        }

    async def call(self, fn: Callable[[], Awaitable[T]]) -> T:
        now = self._clock()
        self._state, permit = acquire(self._state, now)
        if permit is Permit.DENIED:
            raise CircuitOpenError(retry_in_s=max(0.0, self._state.next_retry_at - now))
        if permit is Permit.TRIAL:
            logger.info("ai_breaker_half_open trial_attempt=1")

        try:
            result = await fn()
        except (Exception, asyncio.CancelledError) as exc:
            previous = self._state.status
            self._state = record_failure(self._state, permit, self._clock())
            if self._state.status is BreakerStatus.OPEN and previous is not BreakerStatus.OPEN:
                logger.warning(
                    "ai_breaker_opened failures=%s cooldown_s=%s: %s",
                    self._state.failure_count,
                    self._state.cooldown_s,
                    exc,
                )
            raise

        if permit is Permit.TRIAL:
            logger.info("ai_breaker_closed after successful trial")
        self._state = record_success(self._state, permit)
        return result
