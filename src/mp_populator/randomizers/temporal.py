"""Randomizers – dates, times and durations."""
from __future__ import annotations

from datetime import UTC, date, datetime, time, timedelta
from typing import TYPE_CHECKING, Final

from mp_populator.config.parameters import DateRange, TimeRange
from mp_populator.randomizers.base import Randomizer

if TYPE_CHECKING:
    from mp_populator.engine.context import RandomizationContext

_MICROSECONDS_PER_SECOND: Final = 1_000_000


def _micros(value: time) -> int:
    return ((value.hour * 60 + value.minute) * 60 + value.second) * _MICROSECONDS_PER_SECOND + value.microsecond


class DateRandomizer(Randomizer[date]):
    def __init__(self, date_range: DateRange) -> None:
        self.date_range = date_range

    def generate(self, context: "RandomizationContext") -> date:
        span = (self.date_range.max - self.date_range.min).days
        return self.date_range.min + timedelta(days=context.random.randint(0, span))


class TimeRandomizer(Randomizer[time]):
    def __init__(self, time_range: TimeRange) -> None:
        self.time_range = time_range

    def generate(self, context: "RandomizationContext") -> time:
        micros = context.random.randint(_micros(self.time_range.min), _micros(self.time_range.max))
        seconds, microsecond = divmod(micros, _MICROSECONDS_PER_SECOND)
        minutes, second = divmod(seconds, 60)
        hour, minute = divmod(minutes, 60)
        return time(hour, minute, second, microsecond)


class DateTimeRandomizer(Randomizer[datetime]):
    """Timezone-aware UTC datetime combining a random date and time of day."""

    def __init__(self, date_range: DateRange, time_range: TimeRange) -> None:
        self._dates = DateRandomizer(date_range)
        self._times = TimeRandomizer(time_range)

    def generate(self, context: "RandomizationContext") -> datetime:
        day = self._dates.generate(context)
        return datetime.combine(day, self._times.generate(context), tzinfo=UTC)


class TimeDeltaRandomizer(Randomizer[timedelta]):
    def __init__(self, max_value: timedelta = timedelta(days=30)) -> None:
        self.max_value = max_value

    def generate(self, context: "RandomizationContext") -> timedelta:
        max_seconds = int(self.max_value.total_seconds())
        return timedelta(seconds=context.random.randint(0, max_seconds))


__all__ = ["DateRandomizer", "DateTimeRandomizer", "TimeDeltaRandomizer", "TimeRandomizer"]
