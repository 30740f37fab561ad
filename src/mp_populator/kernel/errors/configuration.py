"""Configuration errors: raised while building a populator, never while populating."""

from __future__ import annotations

from typing import Any

from mp_populator.kernel.errors.base import BaseError


class ConfigurationError(BaseError):
    """Parameters or registrations are invalid."""

    default_code = "configuration_error"


class InvalidParameterValueError(ConfigurationError):
    """A parameter value is present but semantically invalid."""

    default_code = "invalid_parameter_value"

    def __init__(self, parameter: str, value: object, reason: str, **kwargs: Any) -> None:
        super().__init__(
            f"Parameter '{parameter}' has invalid value {value!r}: {reason}",
            detail={"parameter": parameter, "reason": reason},
            **kwargs,
        )
        self.parameter = parameter
        self.value = value
        self.reason = reason


class AmbiguousFieldDefinitionError(ConfigurationError):
    """A randomizer or exclusion was registered for an under-specified field."""

    default_code = "ambiguous_field_definition"

    def __init__(self, definition: object, message: str | None = None, **kwargs: Any) -> None:
        super().__init__(
            message or f"Ambiguous field definition: {definition!r}",
            detail={"definition": repr(definition)},
            **kwargs,
        )
        self.definition = definition


__all__ = [
    "AmbiguousFieldDefinitionError",
    "ConfigurationError",
    "InvalidParameterValueError",
]
