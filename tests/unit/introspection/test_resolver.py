"""Unit tests for concrete type resolvers."""

from __future__ import annotations

import abc

from mp_populator.introspection import NoopTypeResolver, StaticTypeResolver, SubclassTypeResolver


class Vehicle(abc.ABC):
    @abc.abstractmethod
    def wheels(self) -> int: ...


class Car(Vehicle):
    def wheels(self) -> int:
        return 4


class MotorVehicle(Vehicle, abc.ABC):
    @abc.abstractmethod
    def engine(self) -> str: ...


class Truck(MotorVehicle):
    def wheels(self) -> int:
        return 6

    def engine(self) -> str:
        return "diesel"


class PickupTruck(Truck):
    pass


class TestSubclassTypeResolver:
    def test_finds_concrete_descendants(self) -> None:
        found = SubclassTypeResolver().find_concrete_types_of(Vehicle)
        assert set(found) == {Car, Truck, PickupTruck}

    def test_skips_abstract_intermediates(self) -> None:
        assert MotorVehicle not in SubclassTypeResolver().find_concrete_types_of(Vehicle)

    def test_leaf_has_no_candidates(self) -> None:
        assert SubclassTypeResolver().find_concrete_types_of(PickupTruck) == []


class TestStaticTypeResolver:
    def test_lookup(self) -> None:
        resolver = StaticTypeResolver({Vehicle: [Car]})
        assert resolver.find_concrete_types_of(Vehicle) == [Car]
        assert resolver.find_concrete_types_of(MotorVehicle) == []

    def test_register_deduplicates(self) -> None:
        resolver = StaticTypeResolver()
        resolver.register(Vehicle, Car, Truck)
        resolver.register(Vehicle, Car)
        assert resolver.find_concrete_types_of(Vehicle) == [Car, Truck]

    def test_returns_copy(self) -> None:
        resolver = StaticTypeResolver({Vehicle: [Car]})
        resolver.find_concrete_types_of(Vehicle).append(Truck)
        assert resolver.find_concrete_types_of(Vehicle) == [Car]


class TestNoopTypeResolver:
    def test_finds_nothing(self) -> None:
        assert NoopTypeResolver().find_concrete_types_of(Vehicle) == []
