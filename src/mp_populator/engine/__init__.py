"""Engine – the populator, its per-call context and its builder."""
from mp_populator.engine.builder import PopulatorBuilder, new_populator
from mp_populator.engine.context import ObjectPool, RandomizationContext
from mp_populator.engine.populator import Populator

__all__ = [
    "ObjectPool",
    "Populator",
    "PopulatorBuilder",
    "RandomizationContext",
    "new_populator",
]
