"""Kernel error hierarchy: public re-export surface.

Hierarchy::

    BaseError
    ├── ConfigurationError              (configuration.py)
    │   ├── InvalidParameterValueError
    │   └── AmbiguousFieldDefinitionError
    └── ObjectGenerationError           (generation.py)
"""

from mp_populator.kernel.errors.base import BaseError
from mp_populator.kernel.errors.configuration import (
    AmbiguousFieldDefinitionError,
    ConfigurationError,
    InvalidParameterValueError,
)
from mp_populator.kernel.errors.generation import ObjectGenerationError

__all__ = [
    "AmbiguousFieldDefinitionError",
    "BaseError",
    "ConfigurationError",
    "InvalidParameterValueError",
    "ObjectGenerationError",
]
