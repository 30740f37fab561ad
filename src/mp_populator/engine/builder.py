"""Engine – PopulatorBuilder and the ``new_populator`` factory."""
from __future__ import annotations

import dataclasses
from collections.abc import Callable
from datetime import date, time
from typing import Any, TypeAlias

from mp_populator.config.parameters import DateRange, Parameters, TimeRange
from mp_populator.engine.populator import Populator
from mp_populator.fields.descriptor import FieldDescriptor, FieldDescriptorBuilder
from mp_populator.introspection.resolver import ConcreteTypeResolver, SubclassTypeResolver
from mp_populator.kernel.errors import InvalidParameterValueError
from mp_populator.randomizers.base import Randomizer, as_randomizer
from mp_populator.randomizers.registry.base import RandomizerRegistry
from mp_populator.randomizers.registry.chain import RegistryChain
from mp_populator.randomizers.registry.custom import CustomRandomizerRegistry
from mp_populator.randomizers.registry.discovery import EntryPointRegistryLoader, RegistryLoader
from mp_populator.randomizers.registry.exclusion import ExclusionRandomizerRegistry
from mp_populator.randomizers.registry.internal import InternalRandomizerRegistry
from mp_populator.randomizers.registry.temporal import TemporalRandomizerRegistry

FieldTarget: TypeAlias = FieldDescriptor | FieldDescriptorBuilder


def _descriptor(target: FieldTarget) -> FieldDescriptor:
    return target.get() if isinstance(target, FieldDescriptorBuilder) else target


class PopulatorBuilder:
    """Fluent configuration of a :class:`Populator`.

    Every method returns the builder itself; :meth:`build` validates the
    parameters and returns a new, independent populator::

        populator = (
            PopulatorBuilder()
            .seed(42)
            .collection_size(2, 4)
            .randomize(field("id").of_type(int), lambda: 42)
            .exclude(EmailAddress)
            .build()
        )

    Parameter values are only validated by :meth:`build` (except a negative
    minimum collection size, which is rejected straight away), so setters
    may be called in any order.
    """

    def __init__(self) -> None:
        self._custom = CustomRandomizerRegistry()
        self._exclusions = ExclusionRandomizerRegistry()
        self._user_registries: list[RandomizerRegistry] = []
        self._base = Parameters()
        self._overrides: dict[str, Any] = {}
        self._registry_loader: RegistryLoader = EntryPointRegistryLoader()
        self._type_resolver: ConcreteTypeResolver = SubclassTypeResolver()

    # ------------------------------------------------------------------
    # Randomizers and exclusions
    # ------------------------------------------------------------------

    def randomize(
        self,
        target: FieldTarget | Any,
        randomizer: Randomizer[Any] | Callable[..., Any],
    ) -> "PopulatorBuilder":
        """Use *randomizer* for a field (descriptor) or for every value of a type.

        Raises :class:`AmbiguousFieldDefinitionError` when a descriptor
        carries no type.
        """
        if isinstance(target, (FieldDescriptor, FieldDescriptorBuilder)):
            self._custom.register_field(_descriptor(target), as_randomizer(randomizer))
        else:
            self._custom.register(target, as_randomizer(randomizer))
        return self

    def exclude(self, *targets: FieldTarget | Any) -> "PopulatorBuilder":
        """Leave matching fields, or every field of the given types, unpopulated."""
        for target in targets:
            if isinstance(target, (FieldDescriptor, FieldDescriptorBuilder)):
                self._exclusions.add(_descriptor(target))
            else:
                self._exclusions.add_type(target)
        return self

    def register_registry(self, registry: RandomizerRegistry) -> "PopulatorBuilder":
        if not any(registry is known for known in self._user_registries):
            self._user_registries.append(registry)
        return self

    def registry_loader(self, loader: RegistryLoader) -> "PopulatorBuilder":
        self._registry_loader = loader
        return self

    def type_resolver(self, resolver: ConcreteTypeResolver) -> "PopulatorBuilder":
        self._type_resolver = resolver
        return self

    # ------------------------------------------------------------------
    # Parameters
    # ------------------------------------------------------------------

    def parameters(self, parameters: Parameters) -> "PopulatorBuilder":
        """Start from *parameters*; setters called before or after still win."""
        self._base = parameters
        return self

    def seed(self, seed: int) -> "PopulatorBuilder":
        return self._set(seed=seed)

    def min_collection_size(self, size: int) -> "PopulatorBuilder":
        if size < 0:
            raise InvalidParameterValueError("min_collection_size", size, "must be >= 0")
        return self._set(min_collection_size=size)

    def max_collection_size(self, size: int) -> "PopulatorBuilder":
        return self._set(max_collection_size=size)

    def collection_size(self, min_size: int, max_size: int) -> "PopulatorBuilder":
        return self.min_collection_size(min_size).max_collection_size(max_size)

    def min_string_length(self, length: int) -> "PopulatorBuilder":
        return self._set(min_string_length=length)

    def max_string_length(self, length: int) -> "PopulatorBuilder":
        return self._set(max_string_length=length)

    def string_length_range(self, min_length: int, max_length: int) -> "PopulatorBuilder":
        return self.min_string_length(min_length).max_string_length(max_length)

    def max_object_pool_size(self, size: int) -> "PopulatorBuilder":
        return self._set(max_object_pool_size=size)

    def max_randomization_depth(self, depth: int) -> "PopulatorBuilder":
        return self._set(max_randomization_depth=depth)

    def charset(self, charset: str) -> "PopulatorBuilder":
        return self._set(charset=charset)

    def date_range(self, min_date: date, max_date: date) -> "PopulatorBuilder":
        return self._set(date_range=DateRange(min_date, max_date))

    def time_range(self, min_time: time, max_time: time) -> "PopulatorBuilder":
        return self._set(time_range=TimeRange(min_time, max_time))

    def scan_for_concrete_types(self, enabled: bool = True) -> "PopulatorBuilder":
        return self._set(scan_for_concrete_types=enabled)

    def override_default_initialization(self, enabled: bool = True) -> "PopulatorBuilder":
        return self._set(override_default_initialization=enabled)

    def _set(self, **changes: Any) -> "PopulatorBuilder":
        self._overrides.update(changes)
        return self

    # ------------------------------------------------------------------
    # Build
    # ------------------------------------------------------------------

    def build(self) -> Populator:
        """Validate the parameters and assemble a new :class:`Populator`.

        Raises :class:`ConfigurationError` for invalid parameters.
        """
        parameters = dataclasses.replace(self._base, **self._overrides)
        exclusions = self._exclusions.copy()
        chain = RegistryChain(
            [self._custom.copy(), exclusions, *self._user_registries, *self._registry_loader.load()],
            fallbacks=[InternalRandomizerRegistry(), TemporalRandomizerRegistry()],
        )
        return Populator(parameters, chain, exclusions, self._type_resolver)


def new_populator(**parameters: Any) -> Populator:
    """Return a fresh populator with default registries.

    Keyword arguments are :class:`Parameters` fields::

        populator = new_populator(seed=7, max_collection_size=3)
    """
    return PopulatorBuilder().parameters(Parameters(**parameters)).build()


__all__ = ["PopulatorBuilder", "new_populator"]
