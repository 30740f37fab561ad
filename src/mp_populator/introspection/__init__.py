"""Introspection – field schemas and type classification for populated classes."""
from mp_populator.introspection.resolver import (
    ConcreteTypeResolver,
    NoopTypeResolver,
    StaticTypeResolver,
    SubclassTypeResolver,
)
from mp_populator.introspection.schema import FieldInfo, TypeKind, TypeSchema, describe
from mp_populator.introspection.types import (
    container_kind,
    is_abstract,
    is_assignable,
    is_zero,
    strip_annotated,
    zero_value,
)

__all__ = [
    "ConcreteTypeResolver",
    "FieldInfo",
    "NoopTypeResolver",
    "StaticTypeResolver",
    "SubclassTypeResolver",
    "TypeKind",
    "TypeSchema",
    "container_kind",
    "describe",
    "is_abstract",
    "is_assignable",
    "is_zero",
    "strip_annotated",
    "zero_value",
]
