"""Unit tests for PopulatorBuilder, new_populator and reproducibility."""

from __future__ import annotations

import abc
import dataclasses
from datetime import date, time
from typing import Generic, Protocol, TypeVar

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from mp_populator import (
    ConfigurationError,
    Parameters,
    Populator,
    PopulatorBuilder,
    new_populator,
)
from mp_populator.introspection import StaticTypeResolver
from mp_populator.kernel.errors import InvalidParameterValueError
from mp_populator.randomizers import StaticRegistryLoader

T = TypeVar("T")
K = TypeVar("K")


@dataclasses.dataclass
class Item:
    sku: str
    quantity: int
    tags: list[str]


@dataclasses.dataclass
class Schedule:
    day: date
    at: time


class Shape(abc.ABC):
    @abc.abstractmethod
    def area(self) -> float: ...


@dataclasses.dataclass
class Circle(Shape):
    radius: float

    def area(self) -> float:
        return 3.14159 * self.radius**2


@dataclasses.dataclass
class Square(Shape):
    side: float

    def area(self) -> float:
        return self.side**2


class Greeter(Protocol):
    def greet(self) -> str: ...


@dataclasses.dataclass
class Drawing:
    shape: Shape | None = None
    greeter: Greeter | None = None


@dataclasses.dataclass
class Box(Generic[T]):
    content: T
    history: list[T]


@dataclasses.dataclass
class Pair(Generic[K, T]):
    key: K
    value: T


@dataclasses.dataclass
class Warehouse:
    boxes: list[Box[int]]
    labels: Pair[str, float]


def _builder() -> PopulatorBuilder:
    return PopulatorBuilder().registry_loader(StaticRegistryLoader())


# ---------------------------------------------------------------------------
# Builder parameters
# ---------------------------------------------------------------------------


class TestPopulatorBuilder:
    def test_defaults(self) -> None:
        populator = _builder().build()
        assert isinstance(populator, Populator)
        assert populator.parameters == Parameters()

    def test_setters_are_applied(self) -> None:
        populator = (
            _builder()
            .seed(5)
            .collection_size(2, 3)
            .string_length_range(4, 6)
            .max_object_pool_size(3)
            .max_randomization_depth(2)
            .charset("ascii")
            .scan_for_concrete_types()
            .override_default_initialization()
            .build()
        )
        params = populator.parameters
        assert params.seed == 5
        assert (params.min_collection_size, params.max_collection_size) == (2, 3)
        assert (params.min_string_length, params.max_string_length) == (4, 6)
        assert params.max_object_pool_size == 3
        assert params.max_randomization_depth == 2
        assert params.charset == "ascii"
        assert params.scan_for_concrete_types
        assert params.override_default_initialization

    def test_setters_win_over_base_parameters(self) -> None:
        populator = _builder().max_collection_size(2).parameters(Parameters(max_collection_size=9, seed=3)).build()
        assert populator.parameters.max_collection_size == 2
        assert populator.parameters.seed == 3

    def test_negative_min_collection_size_rejected_immediately(self) -> None:
        with pytest.raises(InvalidParameterValueError) as exc_info:
            PopulatorBuilder().min_collection_size(-1)
        assert exc_info.value.parameter == "min_collection_size"

    def test_inverted_collection_range_rejected_on_build(self) -> None:
        builder = _builder().min_collection_size(5).max_collection_size(2)
        with pytest.raises(ConfigurationError):
            builder.build()

    def test_unknown_charset_rejected(self) -> None:
        with pytest.raises(ConfigurationError):
            _builder().charset("no-such-charset").build()

    def test_date_and_time_ranges(self) -> None:
        populator = (
            _builder()
            .seed(4)
            .date_range(date(2020, 1, 1), date(2020, 1, 31))
            .time_range(time(9, 0), time(17, 0))
            .build()
        )
        for schedule in populator.populate_many(Schedule, 20):
            assert date(2020, 1, 1) <= schedule.day <= date(2020, 1, 31)
            assert time(9, 0) <= schedule.at <= time(17, 0)

    def test_ascii_charset_strings(self) -> None:
        populator = _builder().seed(4).charset("ascii").build()
        assert all(item.sku.isascii() for item in populator.populate_many(Item, 10))

    def test_built_populators_are_independent(self) -> None:
        builder = _builder().seed(1)
        first = builder.build()
        builder.max_collection_size(1)
        second = builder.build()
        assert first.parameters.max_collection_size == 5
        assert second.parameters.max_collection_size == 1

    def test_new_populator_keyword_parameters(self) -> None:
        populator = new_populator(seed=8, max_string_length=3)
        assert populator.seed == 8
        assert len(populator.populate(str)) <= 3

    def test_new_populator_rejects_invalid_values(self) -> None:
        with pytest.raises(ConfigurationError):
            new_populator(max_object_pool_size=0)


# ---------------------------------------------------------------------------
# Reproducibility
# ---------------------------------------------------------------------------


class TestDeterminism:
    def test_same_seed_same_objects(self) -> None:
        first = new_populator(seed=1234).populate_many(Item, 5)
        second = new_populator(seed=1234).populate_many(Item, 5)
        assert first == second

    def test_different_seeds_differ(self) -> None:
        assert new_populator(seed=1).populate(Item) != new_populator(seed=2).populate(Item)

    def test_unseeded_populator_reports_seed(self) -> None:
        populator = new_populator()
        replay = new_populator(seed=populator.seed)
        assert populator.populate(Item) == replay.populate(Item)

    @settings(max_examples=25, deadline=None)
    @given(seed=st.integers(min_value=0, max_value=2**32), size=st.integers(min_value=0, max_value=6))
    def test_fixed_collection_size(self, seed: int, size: int) -> None:
        populator = new_populator(seed=seed, min_collection_size=size, max_collection_size=size)
        assert len(populator.populate(Item).tags) == size

    @settings(max_examples=25, deadline=None)
    @given(
        seed=st.integers(min_value=0, max_value=2**32),
        lengths=st.tuples(st.integers(0, 10), st.integers(0, 10)).map(sorted),
    )
    def test_string_length_bounds(self, seed: int, lengths: list[int]) -> None:
        low, high = lengths
        populator = new_populator(seed=seed, min_string_length=low, max_string_length=high)
        assert low <= len(populator.populate(str)) <= high


# ---------------------------------------------------------------------------
# Abstract types and generics
# ---------------------------------------------------------------------------


class TestAbstractTypes:
    def test_abstract_field_left_none_without_scanning(self) -> None:
        drawing = new_populator(seed=2).populate(Drawing)
        assert drawing.shape is None
        assert drawing.greeter is None

    def test_scanning_finds_subclasses(self) -> None:
        populator = _builder().seed(2).scan_for_concrete_types().build()
        shapes = {type(populator.populate(Drawing).shape) for _ in range(30)}
        assert shapes == {Circle, Square}

    def test_protocol_without_implementations_stays_none(self) -> None:
        populator = _builder().seed(2).scan_for_concrete_types().build()
        assert populator.populate(Drawing).greeter is None

    def test_static_resolver(self) -> None:
        populator = (
            _builder()
            .seed(2)
            .scan_for_concrete_types()
            .type_resolver(StaticTypeResolver({Shape: [Square]}))
            .build()
        )
        shape = populator.populate(Shape)
        assert isinstance(shape, Square)
        assert shape.side != 0.0


class TestGenerics:
    def test_typevars_substituted(self) -> None:
        populator = new_populator(seed=6, min_collection_size=1, max_collection_size=3)
        warehouse = populator.populate(Warehouse)
        for box in warehouse.boxes:
            assert isinstance(box.content, int)
            assert all(isinstance(entry, int) for entry in box.history)
        assert isinstance(warehouse.labels.key, str)
        assert isinstance(warehouse.labels.value, float)

    def test_top_level_parameterised_generic(self) -> None:
        box = new_populator(seed=6).populate(Box[str])
        assert isinstance(box.content, str)

    def test_unparameterised_generic_leaves_typevars_none(self) -> None:
        box = new_populator(seed=6).populate(Box)
        assert box.content is None
        assert box.history == [] or all(entry is None for entry in box.history)
