"""Fields – FieldDescriptor and its fluent builder."""
from __future__ import annotations

import dataclasses
from typing import Any

from mp_populator.introspection.schema import FieldInfo
from mp_populator.introspection.types import is_assignable, type_name


@dataclasses.dataclass(frozen=True, eq=False)
class FieldDescriptor:
    """Identifies a field, or every field of a type, for custom behaviour.

    Any attribute left as ``None`` acts as a wildcard. A descriptor with only
    ``type`` set is *type-only*: it matches every field whose declared type
    is assignable to ``type``.

    Example::

        FieldDescriptor(name="id", type=int, owner=Person)
        FieldDescriptor(type=EmailAddress)
    """

    name: str | None = None
    type: Any = None
    owner: type | None = None
    generic_args: tuple[Any, ...] | None = None

    @classmethod
    def for_field(cls, field_info: FieldInfo) -> "FieldDescriptor":
        return cls(
            name=field_info.name,
            type=field_info.type,
            owner=field_info.owner,
            generic_args=field_info.generic_args or None,
        )

    @property
    def is_type_only(self) -> bool:
        return self.name is None and self.owner is None and self.type is not None

    @property
    def is_empty(self) -> bool:
        return self.name is None and self.owner is None and self.type is None

    def matches(self, field_info: FieldInfo) -> bool:
        """True when every attribute set on this descriptor agrees with *field_info*."""
        if self.owner is not None and not issubclass(field_info.owner, self.owner):
            return False
        if self.name is not None and self.name != field_info.name:
            return False
        if self.type is not None and not is_assignable(self.type, field_info.type):
            return False
        return self.generic_args is None or self.generic_args == field_info.generic_args

    def matches_type(self, tp: Any) -> bool:
        """True for a type-only descriptor whose type accepts *tp*."""
        return self.is_type_only and is_assignable(self.type, tp)

    def _key(self) -> tuple[Any, ...]:
        if self.owner is not None and self.name is not None:
            return ("field", self.owner, self.name)
        if self.is_type_only:
            return ("type", self.type)
        return ("partial", self.owner, self.name, self.type, self.generic_args)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FieldDescriptor):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        parts = []
        if self.owner is not None:
            parts.append(f"owner={type_name(self.owner)}")
        if self.name is not None:
            parts.append(f"name={self.name!r}")
        if self.type is not None:
            parts.append(f"type={type_name(self.type)}")
        if self.generic_args is not None:
            parts.append(f"generic_args={self.generic_args!r}")
        return f"FieldDescriptor({', '.join(parts)})"


class FieldDescriptorBuilder:
    """Fluent construction of a :class:`FieldDescriptor`.

    Example::

        field().named("id").of_type(int).in_class(Person).get()
    """

    def __init__(self) -> None:
        self._name: str | None = None
        self._type: Any = None
        self._owner: type | None = None
        self._generic_args: tuple[Any, ...] | None = None

    def named(self, name: str) -> "FieldDescriptorBuilder":
        self._name = name
        return self

    def of_type(self, tp: Any) -> "FieldDescriptorBuilder":
        self._type = tp
        return self

    def in_class(self, owner: type) -> "FieldDescriptorBuilder":
        self._owner = owner
        return self

    def with_generic_args(self, *args: Any) -> "FieldDescriptorBuilder":
        self._generic_args = args
        return self

    def get(self) -> FieldDescriptor:
        return FieldDescriptor(
            name=self._name,
            type=self._type,
            owner=self._owner,
            generic_args=self._generic_args,
        )


def field(name: str | None = None) -> FieldDescriptorBuilder:
    """Start building a field descriptor, optionally already named."""
    builder = FieldDescriptorBuilder()
    if name is not None:
        builder.named(name)
    return builder


__all__ = ["FieldDescriptor", "FieldDescriptorBuilder", "field"]
