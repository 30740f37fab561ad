"""Engine – per-call RandomizationContext and ObjectPool."""
from __future__ import annotations

import dataclasses
import random
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from mp_populator.config.parameters import Parameters


class ObjectPool:
    """Bounded per-type store of already generated objects.

    Once ``max_size`` instances of a type are pooled, further requests for
    that type are served by a uniform choice among them.
    """

    def __init__(self, max_size: int) -> None:
        self._max_size = max_size
        self._objects: dict[Any, list[Any]] = {}

    def add(self, tp: Any, obj: Any) -> None:
        pooled = self._objects.setdefault(tp, [])
        if len(pooled) < self._max_size:
            pooled.append(obj)

    def is_full(self, tp: Any) -> bool:
        return len(self._objects.get(tp, ())) >= self._max_size

    def pick(self, tp: Any, rng: random.Random) -> Any:
        return rng.choice(self._objects[tp])

    def count(self, tp: Any) -> int:
        return len(self._objects.get(tp, ()))

    def __len__(self) -> int:
        return sum(len(pooled) for pooled in self._objects.values())


@dataclasses.dataclass
class RandomizationContext:
    """State of one top-level ``populate`` call.

    Randomizers receive it to draw from ``random`` and to inspect the
    current ``depth`` or dotted field ``path``.
    """

    parameters: Parameters
    random: random.Random
    pool: ObjectPool
    excluded_paths: frozenset[str] = frozenset()
    depth: int = 0
    _path: list[str] = dataclasses.field(default_factory=list, repr=False)

    @classmethod
    def create(
        cls,
        parameters: Parameters,
        rng: random.Random,
        excluded_paths: frozenset[str] = frozenset(),
    ) -> "RandomizationContext":
        return cls(
            parameters=parameters,
            random=rng,
            pool=ObjectPool(parameters.max_object_pool_size),
            excluded_paths=excluded_paths,
        )

    @property
    def path(self) -> str:
        return ".".join(self._path)

    @property
    def remaining_depth(self) -> int:
        return self.parameters.max_randomization_depth - self.depth

    @property
    def has_exceeded_depth(self) -> bool:
        return self.depth > self.parameters.max_randomization_depth

    @property
    def is_path_excluded(self) -> bool:
        return bool(self.excluded_paths) and self.path in self.excluded_paths

    @contextmanager
    def descend(self) -> Iterator["RandomizationContext"]:
        self.depth += 1
        try:
            yield self
        finally:
            self.depth -= 1

    @contextmanager
    def enter_field(self, name: str) -> Iterator["RandomizationContext"]:
        self._path.append(name)
        try:
            yield self
        finally:
            self._path.pop()


__all__ = ["ObjectPool", "RandomizationContext"]
