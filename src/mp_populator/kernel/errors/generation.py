"""Generation errors: failures while instantiating or populating an object."""

from __future__ import annotations

from typing import Any

from mp_populator.kernel.errors.base import BaseError


def _type_name(tp: Any) -> str:
    return getattr(tp, "__qualname__", None) or repr(tp)


class ObjectGenerationError(BaseError):
    """Instantiating a type, accessing one of its fields, or producing a
    field value failed.

    ``target_type`` and ``field_name`` identify where generation stopped;
    ``field_name`` is ``None`` when the type itself could not be built.
    """

    default_code = "object_generation_error"

    def __init__(
        self,
        target_type: Any,
        field_name: str | None = None,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        where = _type_name(target_type)
        if field_name is not None:
            where = f"{where}.{field_name}"
        super().__init__(
            message or f"Unable to generate a random value for {where}",
            detail={"target_type": _type_name(target_type), "field_name": field_name},
            **kwargs,
        )
        self.target_type = target_type
        self.field_name = field_name


__all__ = ["ObjectGenerationError"]
