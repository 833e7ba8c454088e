"""Per-process call budget: minimum spacing between calls plus a daily ceiling."""

from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass, replace
from datetime import date
from typing import Awaitable, Callable

from resumegen.resilience.errors import QuotaExhaustedError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GovernorState:
    min_interval_s: float = 1.0
    daily_limit: int = 15
    last_call_at: float | None = None
    daily_count: int = 0
    reset_date: date | None = None


def roll_day(state: GovernorState, today: date) -> GovernorState:
    if state.reset_date == today:
        return state
    return replace(state, daily_count=0, reset_date=today)


def is_exhausted(state: GovernorState) -> bool:
    return state.daily_count >= state.daily_limit


def reserve(state: GovernorState, now: float) -> tuple[GovernorState, float]:
    """Claim the next slot; returns the new state and how long to wait first."""
    wait_s = 0.0
    if state.last_call_at is not None:
        wait_s = max(0.0, state.last_call_at + state.min_interval_s - now)
    return replace(state, last_call_at=now + wait_s, daily_count=state.daily_count + 1), wait_s


class QuotaGovernor:
    def __init__(
        self,
        daily_limit: int = 15,
        min_interval_s: float = 1.0,
        *,
        clock: Callable[[], float] = time.monotonic,
        today: Callable[[], date] = date.today,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        self._clock = clock
        self._today = today
        self._sleep = sleep
        self._state = GovernorState(
            min_interval_s=min_interval_s,
            daily_limit=daily_limit,
            reset_date=today(),
        )

    @property
    def state(self) -> GovernorState:
        return self._state

    def is_exhausted(self) -> bool:
        rolled = roll_day(self._state, self._today())
        if rolled is not self._state:
            logger.info("ai_quota_reset date=%s previous_count=%s", rolled.reset_date, self._state.daily_count)
            self._state = rolled
        return is_exhausted(self._state)

    async def reserve_slot(self) -> None:
        if self.is_exhausted():
            raise QuotaExhaustedError(self._state.daily_limit)
        # Commit before awaiting so a concurrent caller sees the claimed slot.
        self._state, wait_s = reserve(self._state, self._clock())
        if wait_s > 0:
            logger.debug("ai_rate_spacing wait_s=%.3f", wait_s)
            await self._sleep(wait_s)

    def snapshot(self) -> dict[str, object]:
        self.is_exhausted()
        return {
            "daily_count": self._state.daily_count,
            "daily_limit": self._state.daily_limit,
            "reset_date": self._state.reset_date.isoformat() if self._state.reset_date else None,
            "min_interval_s": self._state.min_interval_s,
        }
