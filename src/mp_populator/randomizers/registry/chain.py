"""Randomizer registries – RegistryChain (first match wins)."""
from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

from mp_populator.config.parameters import Parameters
from mp_populator.introspection.schema import FieldInfo
from mp_populator.randomizers.base import Resolution
from mp_populator.randomizers.registry.base import RandomizerRegistry


class RegistryChain:
    """Ordered, de-duplicated sequence of registries.

    The populator builds the chain as: custom randomizers, exclusions,
    caller registries, discovered registries, then the built-in producers as
    ``fallbacks``. The first registry that returns something other than
    ``None`` decides; later registries are not consulted.

    Fallbacks are kept apart so that a field can be looked up without them:
    a value set by the owner's constructor is kept in preference to a
    built-in producer, never in preference to a caller's randomizer.
    """

    def __init__(
        self,
        registries: Iterable[RandomizerRegistry],
        fallbacks: Iterable[RandomizerRegistry] = (),
    ) -> None:
        seen: list[RandomizerRegistry] = []
        self._primary = self._unique(registries, seen)
        self._fallbacks = self._unique(fallbacks, seen)

    @staticmethod
    def _unique(
        registries: Iterable[RandomizerRegistry], seen: list[RandomizerRegistry]
    ) -> tuple[RandomizerRegistry, ...]:
        unique: list[RandomizerRegistry] = []
        for registry in registries:
            if not any(registry is known for known in seen):
                seen.append(registry)
                unique.append(registry)
        return tuple(unique)

    def init(self, parameters: Parameters) -> None:
        for registry in self.registries:
            registry.init(parameters)

    def resolve(self, target: FieldInfo | Any, *, fallback: bool = True) -> Resolution:
        """Return the first randomizer (or ``SKIP``) for a field or a type.

        With ``fallback=False`` the built-in producers are not consulted.
        """
        registries = self.registries if fallback else self._primary
        for registry in registries:
            if isinstance(target, FieldInfo):
                found = registry.get_randomizer(target)
            else:
                found = registry.get_randomizer_for_type(target)
            if found is not None:
                return found
        return None

    @property
    def registries(self) -> tuple[RandomizerRegistry, ...]:
        return self._primary + self._fallbacks

    def __iter__(self) -> Iterator[RandomizerRegistry]:
        return iter(self.registries)

    def __len__(self) -> int:
        return len(self._primary) + len(self._fallbacks)


__all__ = ["RegistryChain"]
