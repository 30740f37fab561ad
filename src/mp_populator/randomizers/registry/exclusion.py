"""Randomizer registries – exclusions."""
from __future__ import annotations

import copy
from typing import Any

from mp_populator.fields.descriptor import FieldDescriptor
from mp_populator.introspection.schema import FieldInfo
from mp_populator.kernel.errors import AmbiguousFieldDefinitionError
from mp_populator.randomizers.base import SKIP, Resolution
from mp_populator.randomizers.registry.base import RandomizerRegistry


class ExclusionRandomizerRegistry(RandomizerRegistry):
    """Marks fields and types as "do not populate".

    Matching lookups return ``SKIP``: the populator leaves the field at its
    current value instead of searching further.
    """

    def __init__(self) -> None:
        self._descriptors: list[FieldDescriptor] = []

    def add(self, descriptor: FieldDescriptor) -> None:
        if descriptor.is_empty:
            raise AmbiguousFieldDefinitionError(
                descriptor, "Excluded field definition needs at least a name, a type or an owner"
            )
        if descriptor not in self._descriptors:
            self._descriptors.append(descriptor)

    def add_type(self, tp: Any) -> None:
        self.add(FieldDescriptor(type=tp))

    def is_excluded(self, field: FieldInfo) -> bool:
        return any(descriptor.matches(field) for descriptor in self._descriptors)

    def is_type_excluded(self, tp: Any) -> bool:
        return any(descriptor.matches_type(tp) for descriptor in self._descriptors)

    def get_randomizer(self, field: FieldInfo) -> Resolution:
        return SKIP if self.is_excluded(field) else None

    def get_randomizer_for_type(self, tp: Any) -> Resolution:
        return SKIP if self.is_type_excluded(tp) else None

    def copy(self) -> "ExclusionRandomizerRegistry":
        clone = copy.copy(self)
        clone._descriptors = list(self._descriptors)  # noqa: SLF001
        return clone

    def __len__(self) -> int:
        return len(self._descriptors)


__all__ = ["ExclusionRandomizerRegistry"]
