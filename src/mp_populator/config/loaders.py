"""Config – ParametersLoader port and EnvParametersLoader."""
from __future__ import annotations

import abc
import dataclasses
import os
from collections.abc import Mapping
from datetime import date, time
from typing import Any

from mp_populator.config.parameters import DateRange, Parameters, TimeRange
from mp_populator.kernel.errors import InvalidParameterValueError

_RANGE_SEPARATOR = ".."


class ParametersLoader(abc.ABC):
    """Port: load populator parameters from an external source."""

    @abc.abstractmethod
    def load(self) -> Parameters: ...


class EnvParametersLoader(ParametersLoader):
    """Load :class:`Parameters` from environment variables.

    Each field maps to ``{PREFIX}_{FIELD}`` (``MP_POPULATOR_SEED``,
    ``MP_POPULATOR_MAX_COLLECTION_SIZE``, ...). Ranges are written as
    ``min..max`` in ISO format, e.g. ``2020-01-01..2020-12-31``. Unset
    variables keep their defaults.
    """

    def __init__(self, prefix: str = "MP_POPULATOR", environ: Mapping[str, str] | None = None) -> None:
        self._prefix = prefix.upper().rstrip("_")
        self._environ = environ

    def load(self) -> Parameters:
        environ = os.environ if self._environ is None else self._environ
        kwargs: dict[str, Any] = {}
        for field in dataclasses.fields(Parameters):
            env_key = f"{self._prefix}_{field.name}".upper()
            raw = environ.get(env_key)
            if raw is None or not raw.strip():
                continue
            try:
                kwargs[field.name] = self._coerce(field.name, raw.strip())
            except ValueError as exc:
                raise InvalidParameterValueError(env_key, raw, str(exc), cause=exc) from exc
        return Parameters(**kwargs)

    def _coerce(self, name: str, value: str) -> Any:  # noqa: PLR0911
        if name == "charset":
            return value
        if name == "date_range":
            low, high = self._split(value)
            return DateRange(date.fromisoformat(low), date.fromisoformat(high))
        if name == "time_range":
            low, high = self._split(value)
            return TimeRange(time.fromisoformat(low), time.fromisoformat(high))
        if name in ("scan_for_concrete_types", "override_default_initialization"):
            return value.lower() in ("1", "true", "yes", "on")
        return int(value)

    @staticmethod
    def _split(value: str) -> tuple[str, str]:
        low, sep, high = value.partition(_RANGE_SEPARATOR)
        if not sep:
            raise ValueError(f"expected 'min{_RANGE_SEPARATOR}max'")
        return low.strip(), high.strip()


__all__ = ["EnvParametersLoader", "ParametersLoader"]
