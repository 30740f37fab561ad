"""Randomizers – identifiers, paths and enumerations."""
from __future__ import annotations

import enum
import uuid
from pathlib import PurePosixPath
from typing import TYPE_CHECKING, Any

from mp_populator.randomizers.base import Randomizer

if TYPE_CHECKING:
    from mp_populator.engine.context import RandomizationContext

_PATH_ALPHABET = "abcdefghijklmnopqrstuvwxyz0123456789_-"


class UUIDRandomizer(Randomizer[uuid.UUID]):
    """Version 4 UUID drawn from the context's random source (unlike :func:`uuid.uuid4`)."""

    def generate(self, context: "RandomizationContext") -> uuid.UUID:
        return uuid.UUID(int=context.random.getrandbits(128), version=4)


class PathRandomizer(Randomizer[Any]):
    """Relative path of one to three lowercase segments, built with *path_type*."""

    def __init__(self, path_type: type = PurePosixPath) -> None:
        self.path_type = path_type

    def generate(self, context: "RandomizationContext") -> Any:
        rng = context.random
        segments = ["".join(rng.choices(_PATH_ALPHABET, k=rng.randint(1, 12))) for _ in range(rng.randint(1, 3))]
        return self.path_type(*segments)


class EnumRandomizer(Randomizer[Any]):
    """Uniform choice among the members of an :class:`enum.Enum`."""

    def __init__(self, enum_type: type[enum.Enum]) -> None:
        self.enum_type = enum_type
        self._members = list(enum_type)

    def generate(self, context: "RandomizationContext") -> Any:
        if not self._members:
            return None
        return context.random.choice(self._members)


class ConstantRandomizer(Randomizer[Any]):
    def __init__(self, value: Any) -> None:
        self.value = value

    def generate(self, context: "RandomizationContext") -> Any:
        return self.value


__all__ = ["ConstantRandomizer", "EnumRandomizer", "PathRandomizer", "UUIDRandomizer"]
