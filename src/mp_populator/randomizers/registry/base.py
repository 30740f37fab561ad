"""Randomizer registries – the RandomizerRegistry port."""
from __future__ import annotations

import abc
from typing import Any

from mp_populator.config.parameters import Parameters
from mp_populator.introspection.schema import FieldInfo
from mp_populator.introspection.types import strip_annotated
from mp_populator.randomizers.base import Randomizer, Resolution


class RandomizerRegistry(abc.ABC):
    """Port: a source of randomizers consulted by the populator.

    ``init`` is called once with the populator's parameters before any
    lookup. Lookups return a :class:`Randomizer`, the ``SKIP`` sentinel, or
    ``None`` when the registry has nothing for the field or type.
    """

    def init(self, parameters: Parameters) -> None:  # noqa: B027
        """Build parameter-dependent randomizers. No-op by default."""

    @abc.abstractmethod
    def get_randomizer(self, field: FieldInfo) -> Resolution: ...

    @abc.abstractmethod
    def get_randomizer_for_type(self, tp: Any) -> Resolution: ...


class TypeRandomizerRegistry(RandomizerRegistry):
    """Registry keyed by exact type; field lookups use the declared type."""

    def __init__(self) -> None:
        self._randomizers: dict[Any, Randomizer[Any]] = {}

    def register(self, tp: Any, randomizer: Randomizer[Any]) -> None:
        self._randomizers[strip_annotated(tp)] = randomizer

    def get_randomizer(self, field: FieldInfo) -> Resolution:
        return self.get_randomizer_for_type(field.type)

    def get_randomizer_for_type(self, tp: Any) -> Resolution:
        try:
            return self._randomizers.get(strip_annotated(tp))
        except TypeError:  # unhashable annotation
            return None

    def __len__(self) -> int:
        return len(self._randomizers)


__all__ = ["RandomizerRegistry", "TypeRandomizerRegistry"]
