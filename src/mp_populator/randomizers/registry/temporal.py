"""Randomizer registries – built-in producers for temporal types."""
from __future__ import annotations

from datetime import date, datetime, time, timedelta

from mp_populator.config.parameters import Parameters
from mp_populator.randomizers.registry.base import TypeRandomizerRegistry
from mp_populator.randomizers.temporal import (
    DateRandomizer,
    DateTimeRandomizer,
    TimeDeltaRandomizer,
    TimeRandomizer,
)


class TemporalRandomizerRegistry(TypeRandomizerRegistry):
    """``date``/``datetime`` within ``date_range``, ``time`` within ``time_range``."""

    def init(self, parameters: Parameters) -> None:
        self._randomizers.clear()
        self.register(date, DateRandomizer(parameters.date_range))
        self.register(datetime, DateTimeRandomizer(parameters.date_range, parameters.time_range))
        self.register(time, TimeRandomizer(parameters.time_range))
        self.register(timedelta, TimeDeltaRandomizer())


__all__ = ["TemporalRandomizerRegistry"]
