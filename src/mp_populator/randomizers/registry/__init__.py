"""Randomizer registries and the chain that orders them."""
from mp_populator.randomizers.registry.base import RandomizerRegistry, TypeRandomizerRegistry
from mp_populator.randomizers.registry.chain import RegistryChain
from mp_populator.randomizers.registry.custom import CustomRandomizerRegistry
from mp_populator.randomizers.registry.discovery import (
    EntryPointRegistryLoader,
    RegistryLoader,
    StaticRegistryLoader,
)
from mp_populator.randomizers.registry.exclusion import ExclusionRandomizerRegistry
from mp_populator.randomizers.registry.internal import InternalRandomizerRegistry
from mp_populator.randomizers.registry.temporal import TemporalRandomizerRegistry

__all__ = [
    "CustomRandomizerRegistry",
    "EntryPointRegistryLoader",
    "ExclusionRandomizerRegistry",
    "InternalRandomizerRegistry",
    "RandomizerRegistry",
    "RegistryChain",
    "RegistryLoader",
    "StaticRegistryLoader",
    "TemporalRandomizerRegistry",
    "TypeRandomizerRegistry",
]
