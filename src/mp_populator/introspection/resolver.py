"""Introspection – ConcreteTypeResolver port and its variants.

Used when a field is typed with an abstract class or a ``Protocol`` and
``scan_for_concrete_types`` is enabled: the populator asks the resolver for
candidate implementations and picks one of them.
"""
from __future__ import annotations

import abc
from collections.abc import Iterable, Mapping
from typing import Any

from mp_populator.introspection.types import is_abstract


class ConcreteTypeResolver(abc.ABC):
    """Port: find concrete implementations of an abstract type."""

    @abc.abstractmethod
    def find_concrete_types_of(self, tp: type) -> list[type]: ...


class NoopTypeResolver(ConcreteTypeResolver):
    """Never finds anything; abstract fields stay at their default."""

    def find_concrete_types_of(self, tp: type) -> list[type]:
        return []


class StaticTypeResolver(ConcreteTypeResolver):
    """Resolve from an explicit ``{abstract: [implementations]}`` table.

    Example::

        resolver = StaticTypeResolver({Shape: [Circle, Square]})
    """

    def __init__(self, implementations: Mapping[type, Iterable[type]] | None = None) -> None:
        self._implementations: dict[type, list[type]] = {
            base: list(impls) for base, impls in (implementations or {}).items()
        }

    def register(self, base: type, *implementations: type) -> None:
        known = self._implementations.setdefault(base, [])
        known.extend(impl for impl in implementations if impl not in known)

    def find_concrete_types_of(self, tp: type) -> list[type]:
        return list(self._implementations.get(tp, []))


class SubclassTypeResolver(ConcreteTypeResolver):
    """Walk ``__subclasses__()`` recursively and keep the concrete classes.

    Only subclasses that have been imported are visible, and structural
    ``Protocol`` implementations (which do not subclass) are not found.
    """

    def find_concrete_types_of(self, tp: type) -> list[type]:
        found: list[type] = []
        seen: set[Any] = set()
        pending = list(_subclasses(tp))
        while pending:
            candidate = pending.pop(0)
            if candidate in seen:
                continue
            seen.add(candidate)
            if not is_abstract(candidate):
                found.append(candidate)
            pending.extend(_subclasses(candidate))
        return found


def _subclasses(tp: type) -> list[type]:
    subclasses = getattr(tp, "__subclasses__", None)
    if subclasses is None:
        return []
    return list(subclasses()) if tp is not type else []


__all__ = [
    "ConcreteTypeResolver",
    "NoopTypeResolver",
    "StaticTypeResolver",
    "SubclassTypeResolver",
]
