"""Randomizer registries – caller-registered randomizers per field and per type."""
from __future__ import annotations

import copy
from typing import Any

from mp_populator.fields.descriptor import FieldDescriptor
from mp_populator.introspection.schema import FieldInfo
from mp_populator.kernel.errors import AmbiguousFieldDefinitionError
from mp_populator.randomizers.base import Randomizer, Resolution, TypeCheckedRandomizer
from mp_populator.randomizers.registry.base import TypeRandomizerRegistry


class CustomRandomizerRegistry(TypeRandomizerRegistry):
    """Field-level randomizers first, then exact-type randomizers.

    Field-level entries are tried in registration order and the first
    matching descriptor wins.
    """

    def __init__(self) -> None:
        super().__init__()
        self._field_randomizers: dict[FieldDescriptor, Randomizer[Any]] = {}

    def register_field(self, descriptor: FieldDescriptor, randomizer: Randomizer[Any]) -> None:
        if descriptor.type is None:
            raise AmbiguousFieldDefinitionError(
                descriptor,
                f"Ambiguous field definition: {descriptor!r}. Field type is mandatory "
                f"to register a custom randomizer: {randomizer!r}",
            )
        self._field_randomizers[descriptor] = TypeCheckedRandomizer(randomizer, descriptor.type)

    def get_randomizer(self, field: FieldInfo) -> Resolution:
        for descriptor, randomizer in self._field_randomizers.items():
            if descriptor.matches(field):
                return randomizer
        return super().get_randomizer(field)

    def copy(self) -> "CustomRandomizerRegistry":
        clone = copy.copy(self)
        clone._randomizers = dict(self._randomizers)  # noqa: SLF001
        clone._field_randomizers = dict(self._field_randomizers)  # noqa: SLF001
        return clone

    def __len__(self) -> int:
        return len(self._field_randomizers) + super().__len__()


__all__ = ["CustomRandomizerRegistry"]
