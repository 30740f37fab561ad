"""Randomizer registries – built-in producers for well-known value types."""
from __future__ import annotations

import enum
import pathlib
import uuid
from decimal import Decimal
from typing import Any

from mp_populator.config.parameters import Parameters
from mp_populator.introspection.types import strip_annotated
from mp_populator.randomizers.base import Resolution
from mp_populator.randomizers.misc import ConstantRandomizer, EnumRandomizer, PathRandomizer, UUIDRandomizer
from mp_populator.randomizers.numbers import (
    BooleanRandomizer,
    ComplexRandomizer,
    DecimalRandomizer,
    FloatRandomizer,
    IntegerRandomizer,
)
from mp_populator.randomizers.registry.base import TypeRandomizerRegistry
from mp_populator.randomizers.text import BytesRandomizer, StringRandomizer


class InternalRandomizerRegistry(TypeRandomizerRegistry):
    """Numbers, text, identifiers, paths and enumerations."""

    def init(self, parameters: Parameters) -> None:
        self._randomizers.clear()
        self.register(bool, BooleanRandomizer())
        self.register(int, IntegerRandomizer())
        self.register(float, FloatRandomizer())
        self.register(complex, ComplexRandomizer())
        self.register(Decimal, DecimalRandomizer())
        self.register(
            str,
            StringRandomizer.for_charset(
                parameters.charset, parameters.min_string_length, parameters.max_string_length
            ),
        )
        self.register(bytes, BytesRandomizer(parameters.min_string_length, parameters.max_string_length))
        self.register(
            bytearray,
            BytesRandomizer(parameters.min_string_length, parameters.max_string_length, mutable=True),
        )
        self.register(uuid.UUID, UUIDRandomizer())
        self.register(pathlib.Path, PathRandomizer(pathlib.Path))
        self.register(pathlib.PurePath, PathRandomizer(pathlib.PurePosixPath))
        self.register(pathlib.PurePosixPath, PathRandomizer(pathlib.PurePosixPath))
        self.register(type(None), ConstantRandomizer(None))

    def get_randomizer_for_type(self, tp: Any) -> Resolution:
        tp = strip_annotated(tp)
        if isinstance(tp, type) and issubclass(tp, enum.Enum):
            return EnumRandomizer(tp)
        return super().get_randomizer_for_type(tp)


__all__ = ["InternalRandomizerRegistry"]
