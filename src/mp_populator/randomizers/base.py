"""Randomizers – the Randomizer contract and callable adapters."""
from __future__ import annotations

import abc
import inspect
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Final, Generic, TypeAlias, TypeVar

from mp_populator.introspection.types import is_union, non_none_args, strip_annotated, type_name
from mp_populator.kernel.errors import ConfigurationError

if TYPE_CHECKING:
    from mp_populator.engine.context import RandomizationContext

T = TypeVar("T")


class Randomizer(abc.ABC, Generic[T]):
    """Produces one random value per call.

    Implementations draw every random decision from ``context.random`` so
    that a seeded populator yields reproducible values.
    """

    @abc.abstractmethod
    def generate(self, context: "RandomizationContext") -> T: ...

    def __call__(self, context: "RandomizationContext") -> T:
        return self.generate(context)


class FunctionRandomizer(Randomizer[T]):
    """Adapts a plain callable.

    Zero-argument callables are used as suppliers (``lambda: 42``);
    one-argument callables receive the :class:`RandomizationContext`.
    """

    def __init__(self, fn: Callable[..., T], *, takes_context: bool) -> None:
        self._fn = fn
        self._takes_context = takes_context

    def generate(self, context: "RandomizationContext") -> T:
        if self._takes_context:
            return self._fn(context)
        return self._fn()

    def __repr__(self) -> str:
        return f"FunctionRandomizer({self._fn!r})"


class TypeCheckedRandomizer(Randomizer[T]):
    """Rejects values that are not instances of the declared field type.

    ``None`` is always accepted. Typing constructs other than optionals of
    plain classes are not checked.
    """

    def __init__(self, delegate: Randomizer[T], expected: Any) -> None:
        self._delegate = delegate
        self._expected = _runtime_classes(expected)
        self._expected_repr = type_name(expected)

    def generate(self, context: "RandomizationContext") -> T:
        value = self._delegate.generate(context)
        if value is not None and self._expected and not isinstance(value, self._expected):
            raise TypeError(
                f"randomizer {self._delegate!r} produced {type(value).__qualname__}, "
                f"expected {self._expected_repr}"
            )
        return value

    def __repr__(self) -> str:
        return f"TypeCheckedRandomizer({self._delegate!r}, {self._expected_repr})"


def _runtime_classes(tp: Any) -> tuple[type, ...]:
    tp = strip_annotated(tp)
    members = non_none_args(tp) if is_union(tp) else (tp,)
    if all(isinstance(member, type) for member in members):
        return tuple(members)
    return ()


def _takes_context(fn: Callable[..., Any]) -> bool:
    try:
        signature = inspect.signature(fn)
    except (TypeError, ValueError):
        return False
    positional = [
        p
        for p in signature.parameters.values()
        if p.kind in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD) and p.default is p.empty
    ]
    return bool(positional) or any(p.kind is p.VAR_POSITIONAL for p in signature.parameters.values())


def as_randomizer(candidate: Randomizer[T] | Callable[..., T]) -> Randomizer[T]:
    """Coerce *candidate* into a :class:`Randomizer`."""
    if isinstance(candidate, Randomizer):
        return candidate
    if not callable(candidate):
        raise ConfigurationError(f"Randomizer must be callable, got {candidate!r}")
    return FunctionRandomizer(candidate, takes_context=_takes_context(candidate))


class _Skip:
    """Sentinel returned by exclusion lookups: leave the value untouched."""

    _instance: "_Skip | None" = None

    def __new__(cls) -> "_Skip":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "SKIP"

    def __bool__(self) -> bool:
        return False


SKIP: Final = _Skip()

Resolution: TypeAlias = Randomizer[Any] | _Skip | None


__all__ = [
    "SKIP",
    "FunctionRandomizer",
    "Randomizer",
    "Resolution",
    "TypeCheckedRandomizer",
    "as_randomizer",
]
