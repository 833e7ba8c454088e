import asyncio
import unittest
from datetime import date, timedelta

from resumegen.resilience.errors import QuotaExhaustedError
from resumegen.resilience.governor import GovernorState, QuotaGovernor, reserve, roll_day


class FakeDay:
    def __init__(self, today: date):
        self.today = today

    def __call__(self) -> date:
        return self.today


class RecordedSleep:
    def __init__(self, clock):
        self.clock = clock
        self.waits: list[float] = []

    async def __call__(self, seconds: float) -> None:
        self.waits.append(seconds)
        self.clock.now += seconds


class ManualClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


class GovernorStateTests(unittest.TestCase):
    def test_reserve_spaces_calls_by_min_interval(self):
        state = GovernorState(min_interval_s=1.0, last_call_at=10.0)
        state, wait_s = reserve(state, now=10.25)
        self.assertAlmostEqual(wait_s, 0.75)
        self.assertAlmostEqual(state.last_call_at, 11.0)
        self.assertEqual(state.daily_count, 1)

    def test_roll_day_resets_once(self):
        day = date(2026, 3, 1)
        state = GovernorState(daily_count=15, reset_date=day)
        self.assertIs(roll_day(state, day), state)

        rolled = roll_day(state, day + timedelta(days=1))
        self.assertEqual(rolled.daily_count, 0)
        self.assertEqual(rolled.reset_date, day + timedelta(days=1))
        self.assertIs(roll_day(rolled, day + timedelta(days=1)), rolled)


class QuotaGovernorTests(unittest.IsolatedAsyncioTestCase):
    async def asyncSetUp(self):
        self.clock = ManualClock()
        self.day = FakeDay(date(2026, 3, 1))
        self.sleep = RecordedSleep(self.clock)
        self.governor = QuotaGovernor(
            daily_limit=15,
            min_interval_s=1.0,
            clock=self.clock,
            today=self.day,
            sleep=self.sleep,
        )

    async def test_sixteenth_reservation_is_exhausted(self):
        for _ in range(15):
            await self.governor.reserve_slot()
        self.assertTrue(self.governor.is_exhausted())
        with self.assertRaises(QuotaExhaustedError):
            await self.governor.reserve_slot()
        self.assertEqual(self.governor.state.daily_count, 15)

    async def test_next_day_resets_counter(self):
        for _ in range(15):
            await self.governor.reserve_slot()
        self.day.today = date(2026, 3, 2)

        self.assertFalse(self.governor.is_exhausted())
        await self.governor.reserve_slot()
        self.assertEqual(self.governor.state.daily_count, 1)
        self.assertEqual(self.governor.state.reset_date, date(2026, 3, 2))

    async def test_back_to_back_reservations_wait_for_interval(self):
        await self.governor.reserve_slot()
        self.clock.now += 0.4
        await self.governor.reserve_slot()
        self.assertEqual(len(self.sleep.waits), 1)
        self.assertAlmostEqual(self.sleep.waits[0], 0.6)

    async def test_concurrent_reservations_cannot_overdraw_last_slot(self):
        governor = QuotaGovernor(daily_limit=1, min_interval_s=0, clock=self.clock, today=self.day, sleep=self.sleep)
        results = await asyncio.gather(
            governor.reserve_slot(),
            governor.reserve_slot(),
            return_exceptions=True,
        )
        self.assertEqual(sum(isinstance(item, QuotaExhaustedError) for item in results), 1)
        self.assertEqual(governor.state.daily_count, 1)

    async def test_snapshot_exposes_counters(self):
        await self.governor.reserve_slot()
        snapshot = self.governor.snapshot()
        self.assertEqual(snapshot["daily_count"], 1)
        self.assertEqual(snapshot["daily_limit"], 15)
        self.assertEqual(snapshot["reset_date"], "2026-03-01")


if __name__ == "__main__":
    unittest.main()
