"""Randomizers – numeric value producers."""
from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, Final

from mp_populator.randomizers.base import Randomizer

if TYPE_CHECKING:
    from mp_populator.engine.context import RandomizationContext

INT_MIN: Final = -(2**31)
INT_MAX: Final = 2**31 - 1


class BooleanRandomizer(Randomizer[bool]):
    def generate(self, context: "RandomizationContext") -> bool:
        return context.random.random() < 0.5  # noqa: PLR2004


class IntegerRandomizer(Randomizer[int]):
    """Uniform integer in ``[min_value, max_value]`` (signed 32-bit by default)."""

    def __init__(self, min_value: int = INT_MIN, max_value: int = INT_MAX) -> None:
        if min_value > max_value:
            raise ValueError(f"min_value ({min_value}) must be <= max_value ({max_value})")
        self.min_value = min_value
        self.max_value = max_value

    def generate(self, context: "RandomizationContext") -> int:
        return context.random.randint(self.min_value, self.max_value)


class FloatRandomizer(Randomizer[float]):
    def __init__(self, min_value: float = -1e6, max_value: float = 1e6) -> None:
        self.min_value = min_value
        self.max_value = max_value

    def generate(self, context: "RandomizationContext") -> float:
        return context.random.uniform(self.min_value, self.max_value)


class ComplexRandomizer(Randomizer[complex]):
    def __init__(self, component: FloatRandomizer | None = None) -> None:
        self._component = component or FloatRandomizer()

    def generate(self, context: "RandomizationContext") -> complex:
        return complex(self._component.generate(context), self._component.generate(context))


class DecimalRandomizer(Randomizer[Decimal]):
    """Decimal with a fixed number of fractional ``places``."""

    def __init__(self, places: int = 2, max_units: int = 10**8) -> None:
        self.places = places
        self.max_units = max_units

    def generate(self, context: "RandomizationContext") -> Decimal:
        units = context.random.randint(-self.max_units, self.max_units)
        return Decimal(units).scaleb(-self.places)


__all__ = [
    "BooleanRandomizer",
    "ComplexRandomizer",
    "DecimalRandomizer",
    "FloatRandomizer",
    "IntegerRandomizer",
]
