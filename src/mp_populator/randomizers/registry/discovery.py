"""Randomizer registries – discovery of installed registries.

Third-party packages expose registries through the
``mp_populator.registries`` entry point group::

    [project.entry-points."mp_populator.registries"]
    money = "acme.testing:MoneyRandomizerRegistry"

Each entry point may name a :class:`RandomizerRegistry` instance, a
registry class, or a zero-argument factory returning one.
"""
from __future__ import annotations

import abc
from collections.abc import Iterable
from importlib import metadata
from typing import Any, Final

from mp_populator.kernel.errors import ConfigurationError
from mp_populator.observability.logging import get_logger
from mp_populator.randomizers.registry.base import RandomizerRegistry

ENTRY_POINT_GROUP: Final = "mp_populator.registries"

logger = get_logger(__name__)


class RegistryLoader(abc.ABC):
    """Port: supply additional registries when a populator is built."""

    @abc.abstractmethod
    def load(self) -> list[RandomizerRegistry]: ...


class StaticRegistryLoader(RegistryLoader):
    """Return an explicit list built by the host application."""

    def __init__(self, registries: Iterable[RandomizerRegistry] = ()) -> None:
        self._registries = list(registries)

    def load(self) -> list[RandomizerRegistry]:
        return list(self._registries)


class EntryPointRegistryLoader(RegistryLoader):
    """Instantiate registries advertised by installed distributions.

    Entry points are loaded in name order so that the resulting chain does
    not depend on installation order.
    """

    def __init__(self, group: str = ENTRY_POINT_GROUP) -> None:
        self._group = group

    def load(self) -> list[RandomizerRegistry]:
        registries: list[RandomizerRegistry] = []
        for entry_point in sorted(metadata.entry_points(group=self._group), key=lambda ep: ep.name):
            registries.append(self._instantiate(entry_point.name, entry_point.load()))
        if registries:
            logger.debug("registries.discovered", group=self._group, count=len(registries))
        return registries

    @staticmethod
    def _instantiate(name: str, target: Any) -> RandomizerRegistry:
        registry = target if isinstance(target, RandomizerRegistry) else None
        if registry is None and callable(target):
            registry = target()
        if not isinstance(registry, RandomizerRegistry):
            raise ConfigurationError(
                f"Entry point '{name}' does not provide a RandomizerRegistry (got {target!r})",
                detail={"entry_point": name},
            )
        return registry


__all__ = [
    "ENTRY_POINT_GROUP",
    "EntryPointRegistryLoader",
    "RegistryLoader",
    "StaticRegistryLoader",
]
