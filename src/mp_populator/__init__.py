"""
mp_populator – random population of structured types for test fixtures.

Import path convention::

    from mp_populator import PopulatorBuilder, field, new_populator
    from mp_populator.kernel.errors import ObjectGenerationError
    from mp_populator.randomizers import Randomizer, RandomizerRegistry
"""

from mp_populator.config import Parameters
from mp_populator.engine import Populator, PopulatorBuilder, RandomizationContext, new_populator
from mp_populator.fields import FieldDescriptor, field
from mp_populator.kernel.errors import (
    AmbiguousFieldDefinitionError,
    ConfigurationError,
    ObjectGenerationError,
)
from mp_populator.randomizers import Randomizer, RandomizerRegistry, as_randomizer

__version__ = "0.1.0"
__all__ = [
    "AmbiguousFieldDefinitionError",
    "ConfigurationError",
    "FieldDescriptor",
    "ObjectGenerationError",
    "Parameters",
    "Populator",
    "PopulatorBuilder",
    "RandomizationContext",
    "Randomizer",
    "RandomizerRegistry",
    "__version__",
    "as_randomizer",
    "field",
    "new_populator",
]
