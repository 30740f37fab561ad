"""Unit tests for recursion depth limits and object pooling."""

from __future__ import annotations

import dataclasses
import random

import pytest

from mp_populator import Parameters, new_populator
from mp_populator.engine import ObjectPool, RandomizationContext


@dataclasses.dataclass
class Node:
    value: int
    children: list[Node] = dataclasses.field(default_factory=list)


@dataclasses.dataclass
class Chain:
    label: str
    next: Chain | None = None


@dataclasses.dataclass
class Husband:
    name: str
    wife: Wife | None = None


@dataclasses.dataclass
class Wife:
    name: str
    husband: Husband | None = None


@dataclasses.dataclass
class Leaf:
    value: int


@dataclasses.dataclass
class Tree:
    leaves: list[Leaf]


def _chain_length(chain: Chain | None) -> int:
    length = 0
    while chain is not None:
        length += 1
        chain = chain.next
    return length


# ---------------------------------------------------------------------------
# Depth limit
# ---------------------------------------------------------------------------


class TestRandomizationDepth:
    def test_node_example(self) -> None:
        populator = new_populator(seed=3, min_collection_size=2, max_collection_size=2, max_randomization_depth=1)
        node = populator.populate(Node)
        assert len(node.children) == 2
        for child in node.children:
            assert isinstance(child, Node)
            assert child.children == []

    def test_values_populated_at_depth_limit(self) -> None:
        populator = new_populator(seed=3, min_collection_size=2, max_collection_size=2, max_randomization_depth=1)
        node = populator.populate(Node)
        assert all(isinstance(child.value, int) for child in node.children)

    @pytest.mark.parametrize("depth", [0, 1, 2, 5])
    def test_self_reference_terminates_at_limit(self, depth: int) -> None:
        populator = new_populator(seed=11, max_randomization_depth=depth)
        chain = populator.populate(Chain)
        assert _chain_length(chain) == depth + 1

    def test_default_depth_terminates(self) -> None:
        chain = new_populator(seed=11).populate(Chain)
        assert _chain_length(chain) == 21

    def test_mutual_reference_terminates(self) -> None:
        populator = new_populator(seed=8, max_randomization_depth=3)
        husband = populator.populate(Husband)
        assert husband.wife is not None
        assert husband.wife.husband is not None
        assert husband.wife.husband.wife is not None
        assert husband.wife.husband.wife.husband is None

    def test_zero_depth_leaves_containers_empty(self) -> None:
        populator = new_populator(seed=8, max_randomization_depth=0)
        node = populator.populate(Node)
        assert isinstance(node.value, int)
        assert node.children == []


# ---------------------------------------------------------------------------
# Object pool
# ---------------------------------------------------------------------------


class TestObjectPool:
    def test_add_until_full(self) -> None:
        pool = ObjectPool(max_size=2)
        pool.add(Leaf, Leaf(1))
        assert not pool.is_full(Leaf)
        pool.add(Leaf, Leaf(2))
        pool.add(Leaf, Leaf(3))
        assert pool.is_full(Leaf)
        assert pool.count(Leaf) == 2

    def test_pick_among_first_instances(self) -> None:
        pool = ObjectPool(max_size=2)
        first, second, third = Leaf(1), Leaf(2), Leaf(3)
        for leaf in (first, second, third):
            pool.add(Leaf, leaf)
        rng = random.Random(0)
        assert {id(pool.pick(Leaf, rng)) for _ in range(50)} <= {id(first), id(second)}

    def test_types_are_independent(self) -> None:
        pool = ObjectPool(max_size=1)
        pool.add(Leaf, Leaf(1))
        assert not pool.is_full(Node)
        assert len(pool) == 1


class TestPoolReuse:
    def test_distinct_instances_capped(self) -> None:
        populator = new_populator(
            seed=21, min_collection_size=30, max_collection_size=30, max_object_pool_size=4
        )
        tree = populator.populate(Tree)
        assert len(tree.leaves) == 30
        assert len({id(leaf) for leaf in tree.leaves}) == 4

    def test_pool_not_shared_between_calls(self) -> None:
        populator = new_populator(seed=21, max_object_pool_size=1)
        first, second = populator.populate(Leaf), populator.populate(Leaf)
        assert first is not second


class TestRandomizationContext:
    def test_descend_restores_depth(self) -> None:
        ctx = RandomizationContext.create(Parameters(max_randomization_depth=1), random.Random(0))
        with ctx.descend():
            with ctx.descend():
                assert ctx.has_exceeded_depth
                assert ctx.remaining_depth == -1
        assert ctx.depth == 0

    def test_field_path(self) -> None:
        ctx = RandomizationContext.create(Parameters(), random.Random(0), frozenset({"address.city"}))
        with ctx.enter_field("address"), ctx.enter_field("city"):
            assert ctx.path == "address.city"
            assert ctx.is_path_excluded
        assert ctx.path == ""
