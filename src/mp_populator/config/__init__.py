"""Config – populator parameters and their loaders."""

from mp_populator.config.loaders import EnvParametersLoader, ParametersLoader
from mp_populator.config.parameters import DateRange, Parameters, TimeRange

__all__ = [
    "DateRange",
    "EnvParametersLoader",
    "Parameters",
    "ParametersLoader",
    "TimeRange",
]
