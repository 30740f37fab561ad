"""Randomizers – value producers and the registries that select them."""
from mp_populator.randomizers.base import (
    SKIP,
    FunctionRandomizer,
    Randomizer,
    TypeCheckedRandomizer,
    as_randomizer,
)
from mp_populator.randomizers.registry import (
    CustomRandomizerRegistry,
    EntryPointRegistryLoader,
    ExclusionRandomizerRegistry,
    InternalRandomizerRegistry,
    RandomizerRegistry,
    RegistryChain,
    RegistryLoader,
    StaticRegistryLoader,
    TemporalRandomizerRegistry,
    TypeRandomizerRegistry,
)

__all__ = [
    "SKIP",
    "CustomRandomizerRegistry",
    "EntryPointRegistryLoader",
    "ExclusionRandomizerRegistry",
    "FunctionRandomizer",
    "InternalRandomizerRegistry",
    "Randomizer",
    "RandomizerRegistry",
    "RegistryChain",
    "RegistryLoader",
    "StaticRegistryLoader",
    "TemporalRandomizerRegistry",
    "TypeCheckedRandomizer",
    "TypeRandomizerRegistry",
    "as_randomizer",
]
