"""Config – immutable populator ``Parameters``."""
from __future__ import annotations

import codecs
import dataclasses
from datetime import date, time
from typing import Any, Final

from mp_populator.kernel.errors import InvalidParameterValueError

DEFAULT_MIN_COLLECTION_SIZE: Final = 1
DEFAULT_MAX_COLLECTION_SIZE: Final = 5
DEFAULT_MIN_STRING_LENGTH: Final = 1
DEFAULT_MAX_STRING_LENGTH: Final = 128
DEFAULT_MAX_OBJECT_POOL_SIZE: Final = 10
DEFAULT_MAX_RANDOMIZATION_DEPTH: Final = 20
DEFAULT_CHARSET: Final = "utf-8"


@dataclasses.dataclass(frozen=True)
class DateRange:
    """Inclusive range of calendar dates."""

    min: date = date(2010, 1, 1)
    max: date = date(2030, 12, 31)

    def __post_init__(self) -> None:
        if self.min > self.max:
            raise InvalidParameterValueError("date_range", (self.min, self.max), "min must be <= max")


@dataclasses.dataclass(frozen=True)
class TimeRange:
    """Inclusive range of wall-clock times."""

    min: time = time.min
    max: time = time.max

    def __post_init__(self) -> None:
        if self.min > self.max:
            raise InvalidParameterValueError("time_range", (self.min, self.max), "min must be <= max")


@dataclasses.dataclass(frozen=True)
class Parameters:
    """Generation parameters, fixed for the lifetime of a populator.

    ``seed=None`` lets the populator pick a time-based seed; set it to get
    reproducible object graphs.
    """

    seed: int | None = None
    min_collection_size: int = DEFAULT_MIN_COLLECTION_SIZE
    max_collection_size: int = DEFAULT_MAX_COLLECTION_SIZE
    min_string_length: int = DEFAULT_MIN_STRING_LENGTH
    max_string_length: int = DEFAULT_MAX_STRING_LENGTH
    max_object_pool_size: int = DEFAULT_MAX_OBJECT_POOL_SIZE
    max_randomization_depth: int = DEFAULT_MAX_RANDOMIZATION_DEPTH
    charset: str = DEFAULT_CHARSET
    date_range: DateRange = dataclasses.field(default_factory=DateRange)
    time_range: TimeRange = dataclasses.field(default_factory=TimeRange)
    scan_for_concrete_types: bool = False
    override_default_initialization: bool = False

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        for name in (
            "min_collection_size",
            "max_collection_size",
            "min_string_length",
            "max_string_length",
            "max_randomization_depth",
        ):
            value = getattr(self, name)
            if value < 0:
                raise InvalidParameterValueError(name, value, "must be >= 0")
        if self.min_collection_size > self.max_collection_size:
            raise InvalidParameterValueError(
                "min_collection_size",
                self.min_collection_size,
                f"must be <= max_collection_size ({self.max_collection_size})",
            )
        if self.min_string_length > self.max_string_length:
            raise InvalidParameterValueError(
                "min_string_length",
                self.min_string_length,
                f"must be <= max_string_length ({self.max_string_length})",
            )
        if self.max_object_pool_size < 1:
            raise InvalidParameterValueError("max_object_pool_size", self.max_object_pool_size, "must be >= 1")
        try:
            codecs.lookup(self.charset)
        except LookupError as exc:
            raise InvalidParameterValueError("charset", self.charset, "unknown encoding", cause=exc) from exc

    def replace(self, **changes: Any) -> "Parameters":
        """Return a validated copy with *changes* applied."""
        return dataclasses.replace(self, **changes)


__all__ = ["DateRange", "Parameters", "TimeRange"]
