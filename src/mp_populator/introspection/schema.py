"""Introspection – per-class field schemas.

A :class:`TypeSchema` lists the populatable fields of a class in declared
order (base classes first) and knows how to construct or update instances of
it. Three shapes are supported:

* dataclasses – every field from :func:`dataclasses.fields`, built by calling
  the constructor with generated values (``InitVar`` arguments included) so
  ``__post_init__`` still runs;
* ``NamedTuple`` classes – built from keyword arguments, never updated;
* plain annotated classes – public annotated attributes, instantiated with no
  arguments and then assigned.
"""
from __future__ import annotations

import dataclasses
import enum
import functools
import inspect
import typing
from typing import Any

from mp_populator.introspection.types import is_class_var, type_name, zero_value
from mp_populator.kernel.errors import ObjectGenerationError

_NO_DEFAULT: Any = object()


class TypeKind(enum.Enum):
    DATACLASS = "dataclass"
    NAMED_TUPLE = "named_tuple"
    CLASS = "class"


@dataclasses.dataclass(frozen=True)
class FieldInfo:
    """A populatable field of ``owner``.

    ``owner`` is the class being populated; ``declared_in`` is the class of
    its MRO that first annotated the field.
    """

    name: str
    type: Any
    owner: type
    declared_in: type
    init: bool = True
    default: Any = _NO_DEFAULT
    default_factory: Any = _NO_DEFAULT

    @property
    def generic_args(self) -> tuple[Any, ...]:
        return typing.get_args(self.type)

    @property
    def has_default(self) -> bool:
        return self.default is not _NO_DEFAULT or self.default_factory is not _NO_DEFAULT

    def initial_value(self) -> Any:
        """Value the owner's constructor would assign, or the zero value."""
        if self.default is not _NO_DEFAULT:
            return self.default
        if self.default_factory is not _NO_DEFAULT:
            return self.default_factory()
        return zero_value(self.type)

    def with_type(self, tp: Any) -> "FieldInfo":
        return self if tp is self.type else dataclasses.replace(self, type=tp)


@dataclasses.dataclass(frozen=True)
class TypeSchema:
    """How to build and update instances of ``type``.

    ``init_vars`` are the ``InitVar`` pseudo-fields of a dataclass: passed to
    the constructor, never stored on the instance.
    """

    type: type
    kind: TypeKind
    fields: tuple[FieldInfo, ...]
    frozen: bool = False
    init_vars: tuple[FieldInfo, ...] = ()

    def instantiate(self) -> Any:
        """Create a bare instance through the no-argument constructor."""
        return self.type()

    def build(self, values: dict[str, Any], init_values: dict[str, Any] | None = None) -> Any:
        """Construct an instance from a complete ``{field: value}`` mapping.

        *init_values* supplies the dataclass ``InitVar`` arguments.
        """
        if self.kind is TypeKind.CLASS:
            instance = self.instantiate()
            self.assign(instance, values)
            return instance
        if self.kind is TypeKind.NAMED_TUPLE:
            return self.type(**values)
        kwargs = {f.name: values[f.name] for f in self.fields if f.init}
        kwargs.update(init_values or {})
        instance = self.type(**kwargs)
        self.assign(instance, {f.name: values[f.name] for f in self.fields if not f.init})
        return instance

    def assign(self, instance: Any, values: dict[str, Any]) -> None:
        if self.kind is TypeKind.NAMED_TUPLE:
            raise TypeError(f"{type_name(self.type)} is an immutable named tuple")
        setter = object.__setattr__ if self.frozen else setattr
        for name, value in values.items():
            setter(instance, name, value)


def _declaring_classes(cls: type) -> dict[str, type]:
    declared: dict[str, type] = {}
    for klass in reversed(cls.__mro__):
        if klass is object:
            continue
        for name in inspect.get_annotations(klass):
            declared.setdefault(name, klass)
    return declared


def _is_named_tuple(cls: type) -> bool:
    return issubclass(cls, tuple) and hasattr(cls, "_fields")


def _dataclass_field(
    cls: type, f: dataclasses.Field[Any], hints: dict[str, Any], declared: dict[str, type]
) -> FieldInfo:
    tp = hints.get(f.name, Any)
    if isinstance(tp, dataclasses.InitVar):
        tp = tp.type
    return FieldInfo(
        name=f.name,
        type=tp,
        owner=cls,
        declared_in=declared.get(f.name, cls),
        init=f.init,
        default=_NO_DEFAULT if f.default is dataclasses.MISSING else f.default,
        default_factory=_NO_DEFAULT if f.default_factory is dataclasses.MISSING else f.default_factory,
    )


@functools.cache
def describe(cls: type) -> TypeSchema:
    """Return the (cached) schema of *cls*.

    Raises :class:`ObjectGenerationError` when the annotations of *cls*
    cannot be resolved.
    """
    try:
        hints = typing.get_type_hints(cls, include_extras=True)
    except Exception as exc:
        raise ObjectGenerationError(
            cls, message=f"Cannot resolve the annotations of {type_name(cls)}: {exc}", cause=exc
        ) from exc
    declared = _declaring_classes(cls)

    if dataclasses.is_dataclass(cls):
        fields = tuple(_dataclass_field(cls, f, hints, declared) for f in dataclasses.fields(cls))
        init_vars = tuple(
            _dataclass_field(cls, f, hints, declared)
            for f in cls.__dataclass_fields__.values()
            if f._field_type is dataclasses._FIELD_INITVAR  # type: ignore[attr-defined]  # noqa: SLF001
        )
        params = getattr(cls, "__dataclass_params__", None)
        return TypeSchema(
            cls, TypeKind.DATACLASS, fields, frozen=bool(params and params.frozen), init_vars=init_vars
        )

    if _is_named_tuple(cls):
        defaults = getattr(cls, "_field_defaults", {})
        fields = tuple(
            FieldInfo(
                name=name,
                type=hints.get(name, Any),
                owner=cls,
                declared_in=cls,
                default=defaults.get(name, _NO_DEFAULT),
            )
            for name in cls._fields  # type: ignore[attr-defined]
        )
        return TypeSchema(cls, TypeKind.NAMED_TUPLE, fields, frozen=True)

    fields = tuple(
        FieldInfo(name=name, type=hints[name], owner=cls, declared_in=owner)
        for name, owner in declared.items()
        if not name.startswith("_") and name in hints and not is_class_var(hints[name])
    )
    return TypeSchema(cls, TypeKind.CLASS, fields)


__all__ = ["FieldInfo", "TypeKind", "TypeSchema", "describe"]
