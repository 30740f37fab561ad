"""Introspection – classification helpers for annotations.

These helpers work on runtime annotations as returned by
:func:`typing.get_type_hints`: plain classes, ``list[int]``-style generic
aliases, ``X | None`` unions, ``Literal`` and ``Annotated`` forms.
"""
from __future__ import annotations

import collections
import collections.abc as abc
import inspect
import types
import typing
from decimal import Decimal
from typing import Annotated, Any, Final, Literal, TypeVar, Union, get_args, get_origin

_CONTAINER_KINDS: Final[dict[Any, str]] = {
    list: "list",
    abc.Sequence: "list",
    abc.MutableSequence: "list",
    abc.Collection: "list",
    abc.Iterable: "list",
    collections.deque: "deque",
    set: "set",
    abc.Set: "set",
    abc.MutableSet: "set",
    frozenset: "frozenset",
    dict: "dict",
    abc.Mapping: "dict",
    abc.MutableMapping: "dict",
    collections.OrderedDict: "ordered_dict",
    tuple: "tuple",
}

_CONTAINER_FACTORIES: Final[dict[str, Any]] = {
    "list": list,
    "deque": collections.deque,
    "set": set,
    "frozenset": frozenset,
    "dict": dict,
    "ordered_dict": collections.OrderedDict,
    "tuple": tuple,
    "fixed_tuple": tuple,
}

_SCALAR_ZEROS: Final[dict[Any, Any]] = {
    bool: False,
    int: 0,
    float: 0.0,
    complex: 0j,
    Decimal: Decimal(0),
    str: "",
    bytes: b"",
}

_NUMBERS: Final = (int, float, complex, Decimal)

_ZERO_COMPARABLE: Final = (
    int,
    float,
    complex,
    Decimal,
    str,
    bytes,
    bytearray,
    list,
    tuple,
    set,
    frozenset,
    dict,
    collections.deque,
)


def strip_annotated(tp: Any) -> Any:
    """Return the underlying type of ``Annotated[X, ...]`` (``X``), else *tp*."""
    while get_origin(tp) is Annotated:
        tp = get_args(tp)[0]
    return tp


def is_union(tp: Any) -> bool:
    return get_origin(tp) in (Union, types.UnionType)


def non_none_args(tp: Any) -> tuple[Any, ...]:
    """Members of a union other than ``None``."""
    return tuple(arg for arg in get_args(tp) if arg is not type(None))


def is_literal(tp: Any) -> bool:
    return get_origin(tp) is Literal


def is_protocol(tp: Any) -> bool:
    return isinstance(tp, type) and bool(getattr(tp, "_is_protocol", False))


def is_abstract(tp: Any) -> bool:
    """True for ABCs with abstract members and for ``Protocol`` classes."""
    return isinstance(tp, type) and (inspect.isabstract(tp) or is_protocol(tp))


def container_kind(tp: Any) -> tuple[str, tuple[Any, ...]] | None:
    """Classify *tp* as a container.

    Returns ``(kind, args)`` where *kind* is one of ``list``, ``deque``,
    ``set``, ``frozenset``, ``dict``, ``ordered_dict``, ``tuple`` (variable
    length, ``tuple[X, ...]``) or ``fixed_tuple`` (``tuple[A, B]``), and
    *args* are the element (or key/value) types. ``None`` when *tp* is not a
    container.
    """
    tp = strip_annotated(tp)
    origin = get_origin(tp) or tp
    try:
        kind = _CONTAINER_KINDS.get(origin)
    except TypeError:  # unhashable annotation objects are never containers
        return None
    if kind is None:
        return None
    args = get_args(tp)
    if kind == "tuple":
        if len(args) == 2 and args[1] is Ellipsis:  # noqa: PLR2004
            return "tuple", (args[0],)
        if args:
            return "fixed_tuple", () if args == ((),) else args
    return kind, args


def container_factory(kind: str) -> Any:
    return _CONTAINER_FACTORIES[kind]


def zero_value(tp: Any) -> Any:
    """Return the default/empty value for *tp*.

    Scalars get their falsy value, containers an empty instance, and every
    other type (including structured classes and optionals) ``None``.
    """
    tp = strip_annotated(tp)
    if is_union(tp) or tp is Any:
        return None
    kind = container_kind(tp)
    if kind is not None:
        return container_factory(kind[0])()
    if tp is bytearray:
        return bytearray()
    try:
        return _SCALAR_ZEROS.get(tp)
    except TypeError:
        return None


def is_zero(value: Any, tp: Any) -> bool:
    """True when *value* is ``None`` or equals the zero value of *tp*.

    Numbers compare by value across numeric types, so ``0`` is the zero of a
    ``float`` or ``Decimal`` field. ``bool`` stays apart: ``False`` is not the
    zero of an ``int`` field and ``0`` is not the zero of a ``bool`` one.
    """
    if value is None:
        return True
    if not isinstance(value, _ZERO_COMPARABLE):
        return False
    if container_kind(tp) is not None:
        return isinstance(value, abc.Sized) and len(value) == 0
    zero = zero_value(tp)
    if zero is None:
        return False
    if isinstance(value, bool) or isinstance(zero, bool):
        return value is False and zero is False
    if isinstance(zero, _NUMBERS):
        return isinstance(value, _NUMBERS) and value == 0
    return type(value) is type(zero) and value == zero


def is_assignable(target: Any, candidate: Any) -> bool:
    """True when a value declared as *candidate* can stand where *target* is expected.

    Classes follow ``issubclass``; optionals are assignable when every
    non-``None`` member is; generic aliases must compare equal unless the
    target is their bare origin class (``list`` accepts ``list[int]``).
    """
    target = strip_annotated(target)
    candidate = strip_annotated(candidate)
    if target is candidate or target == candidate or target is Any:
        return True
    if is_union(candidate):
        members = non_none_args(candidate)
        return bool(members) and all(is_assignable(target, member) for member in members)
    if get_origin(target) is not None or is_protocol(target):
        return False
    candidate_cls = get_origin(candidate) or candidate
    return isinstance(target, type) and isinstance(candidate_cls, type) and issubclass(candidate_cls, target)


def typevar_map(tp: Any) -> dict[Any, Any]:
    """Map the type parameters of a parameterised generic class to its arguments."""
    origin = get_origin(tp)
    if origin is None:
        return {}
    params = getattr(origin, "__parameters__", ())
    return dict(zip(params, get_args(tp), strict=False))


def substitute_typevars(tp: Any, mapping: dict[Any, Any]) -> Any:
    """Replace type variables inside *tp* using *mapping*."""
    if not mapping:
        return tp
    if isinstance(tp, TypeVar):
        return mapping.get(tp, tp)
    origin = get_origin(tp)
    args = get_args(tp)
    if origin is None or not args or origin in (Annotated, Literal, abc.Callable):
        return tp
    new_args = tuple(substitute_typevars(arg, mapping) for arg in args)
    if new_args == args:
        return tp
    if is_union(tp):
        return Union[new_args]  # noqa: UP007
    return origin[new_args]


def type_name(tp: Any) -> str:
    return getattr(tp, "__qualname__", None) or repr(tp)


def is_class_var(tp: Any) -> bool:
    return tp is typing.ClassVar or get_origin(tp) is typing.ClassVar


__all__ = [
    "container_factory",
    "container_kind",
    "is_abstract",
    "is_assignable",
    "is_class_var",
    "is_literal",
    "is_protocol",
    "is_union",
    "is_zero",
    "non_none_args",
    "strip_annotated",
    "substitute_typevars",
    "type_name",
    "typevar_map",
    "zero_value",
]
