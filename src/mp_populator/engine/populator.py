"""Engine – the Populator.

Resolution order for every field of a structured type:

1. per-call path exclusions and registered exclusions leave the field as is;
2. a custom, caller or discovered registry supplies a randomizer;
3. a value already set by the type's own constructor is kept unless
   ``override_default_initialization`` is on;
4. the built-in producers generate the declared type, or it is classified
   (optional, literal, container, abstract, structured) and generated
   recursively.

Nested structured values and container elements live one level deeper than
their owner; past ``max_randomization_depth`` they collapse to their zero
value (``None`` or an empty container), which is what terminates cyclic
type graphs.
"""
from __future__ import annotations

import random
import time
from collections.abc import Iterable, Iterator
from typing import Any, Final, TypeVar, get_args, get_origin

from mp_populator.config.parameters import Parameters
from mp_populator.engine.context import RandomizationContext
from mp_populator.introspection.resolver import ConcreteTypeResolver, NoopTypeResolver
from mp_populator.introspection.schema import FieldInfo, TypeKind, TypeSchema, describe
from mp_populator.introspection.types import (
    container_factory,
    container_kind,
    is_abstract,
    is_literal,
    is_union,
    is_zero,
    non_none_args,
    strip_annotated,
    substitute_typevars,
    type_name,
    typevar_map,
    zero_value,
)
from mp_populator.kernel.errors import ObjectGenerationError
from mp_populator.observability.logging import get_logger
from mp_populator.randomizers.base import SKIP
from mp_populator.randomizers.registry.chain import RegistryChain
from mp_populator.randomizers.registry.exclusion import ExclusionRandomizerRegistry

T = TypeVar("T")

# Sets and mappings retry duplicate draws up to this many times per element.
_UNIQUE_ATTEMPTS_PER_ELEMENT: Final = 10

logger = get_logger(__name__)


class Populator:
    """Generates fully populated instances of structured types.

    Build one with :class:`~mp_populator.engine.builder.PopulatorBuilder` or
    :func:`~mp_populator.engine.builder.new_populator`. Registries and
    parameters are fixed after construction; the random source is shared by
    every call, so one seeded populator produces a reproducible sequence of
    objects.
    """

    def __init__(
        self,
        parameters: Parameters,
        registries: RegistryChain,
        exclusions: ExclusionRandomizerRegistry,
        type_resolver: ConcreteTypeResolver | None = None,
    ) -> None:
        self._parameters = parameters
        self._chain = registries
        self._exclusions = exclusions
        self._type_resolver = type_resolver or NoopTypeResolver()
        self._seed = parameters.seed if parameters.seed is not None else time.time_ns()
        self._random = random.Random(self._seed)
        self._chain.init(parameters)
        logger.info(
            "populator.built",
            seed=self._seed,
            seeded=parameters.seed is not None,
            registries=len(self._chain),
        )

    @property
    def parameters(self) -> Parameters:
        return self._parameters

    @property
    def seed(self) -> int:
        """The effective seed, time-based when none was configured."""
        return self._seed

    @property
    def registries(self) -> RegistryChain:
        return self._chain

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def populate(
        self,
        target_type: type[T],
        context: RandomizationContext | None = None,
        *,
        exclude: Iterable[str] = (),
    ) -> T:
        """Generate a new, fully populated instance of *target_type*.

        *target_type* may be a class or an annotation such as ``list[int]``.
        *exclude* lists dotted field paths (``"address.city"``) left at their
        default for this call. Pass *context* when calling from inside a
        randomizer so that depth and pooling carry over.

        Raises :class:`ObjectGenerationError` when any part of the object
        graph cannot be generated.
        """
        ctx = self._context(context, exclude)
        try:
            return self._generate(target_type, ctx, reuse=False)
        except ObjectGenerationError:
            raise
        except Exception as exc:
            raise ObjectGenerationError(target_type, cause=exc) from exc

    def populate_instance(
        self,
        instance: T,
        context: RandomizationContext | None = None,
        *,
        exclude: Iterable[str] = (),
    ) -> T:
        """Populate the fields of an existing *instance* in place and return it.

        Values set by the instance's constructor are kept unless
        ``override_default_initialization`` is enabled.
        """
        ctx = self._context(context, exclude)
        return self._populate_structured(type(instance), ctx, instance=instance, reuse=False)

    def populate_many(self, target_type: type[T], count: int, *, exclude: Iterable[str] = ()) -> list[T]:
        """Generate *count* independent instances of *target_type*."""
        if count < 0:
            raise ValueError(f"count must be >= 0, got {count}")
        excluded = tuple(exclude)
        return [self.populate(target_type, exclude=excluded) for _ in range(count)]

    def iter_populate(self, target_type: type[T], *, exclude: Iterable[str] = ()) -> Iterator[T]:
        """Endless stream of independently populated instances."""
        excluded = tuple(exclude)
        while True:
            yield self.populate(target_type, exclude=excluded)

    def new_context(self, exclude: Iterable[str] = ()) -> RandomizationContext:
        return RandomizationContext.create(self._parameters, self._random, frozenset(exclude))

    # ------------------------------------------------------------------
    # Generation
    # ------------------------------------------------------------------

    def _context(self, context: RandomizationContext | None, exclude: Iterable[str]) -> RandomizationContext:
        if context is None:
            return self.new_context(exclude)
        excluded = frozenset(exclude)
        if excluded:
            context.excluded_paths = context.excluded_paths | excluded
        return context

    def _generate(self, tp: Any, ctx: RandomizationContext, *, reuse: bool = True) -> Any:
        tp = strip_annotated(tp)
        resolved = self._chain.resolve(tp)
        if resolved is SKIP:
            return zero_value(tp)
        if resolved is not None:
            return resolved.generate(ctx)
        if tp is Any or tp is None or isinstance(tp, TypeVar):
            return None
        if is_union(tp):
            members = non_none_args(tp)
            return self._generate(ctx.random.choice(members), ctx, reuse=reuse) if members else None
        if is_literal(tp):
            values = get_args(tp)
            return ctx.random.choice(values) if values else None
        container = container_kind(tp)
        if container is not None:
            return self._populate_container(tp, container[0], container[1], ctx)
        origin = get_origin(tp) or tp
        if not isinstance(origin, type):
            raise ObjectGenerationError(tp, message=f"Unsupported type annotation: {tp!r}")
        if is_abstract(origin):
            return self._populate_abstract(origin, ctx, reuse=reuse)
        return self._populate_structured(tp, ctx, reuse=reuse)

    def _populate_container(self, tp: Any, kind: str, args: tuple[Any, ...], ctx: RandomizationContext) -> Any:
        """Generate a container with a size drawn from the collection bounds.

        Sets and mappings stop after a bounded number of duplicate draws, so
        when the element (or key) type has fewer distinct values than the
        drawn size the result is smaller than ``min_collection_size``:
        ``set[bool]`` never holds more than two elements.
        """
        factory = container_factory(kind)
        if not args or ctx.has_exceeded_depth:
            return factory()
        if any(self._exclusions.is_type_excluded(arg) for arg in args):
            return factory()
        if kind == "fixed_tuple":
            return tuple(self._generate(arg, ctx) for arg in args)

        params = self._parameters
        size = ctx.random.randint(params.min_collection_size, params.max_collection_size)
        attempts = size * _UNIQUE_ATTEMPTS_PER_ELEMENT
        if kind in ("dict", "ordered_dict"):
            if len(args) != 2:  # noqa: PLR2004
                raise ObjectGenerationError(tp, message=f"Mapping annotation needs key and value types: {tp!r}")
            key_type, value_type = args
            entries = factory()
            while len(entries) < size and attempts > 0:
                attempts -= 1
                key = self._generate(key_type, ctx)
                entries[key] = self._generate(value_type, ctx)
            return entries
        if kind in ("set", "frozenset"):
            items: set[Any] = set()
            while len(items) < size and attempts > 0:
                attempts -= 1
                items.add(self._generate(args[0], ctx))
            return factory(items)
        return factory(self._generate(args[0], ctx) for _ in range(size))

    def _populate_abstract(self, tp: type, ctx: RandomizationContext, *, reuse: bool) -> Any:
        if not self._parameters.scan_for_concrete_types:
            return None
        candidates = sorted(
            set(self._type_resolver.find_concrete_types_of(tp)),
            key=lambda cls: (cls.__module__, cls.__qualname__),
        )
        if not candidates:
            logger.debug("populate.no_concrete_type", target=type_name(tp))
            return None
        return self._generate(ctx.random.choice(candidates), ctx, reuse=reuse)

    def _populate_structured(
        self,
        tp: Any,
        ctx: RandomizationContext,
        *,
        instance: Any = None,
        reuse: bool = True,
    ) -> Any:
        if instance is None:
            if ctx.has_exceeded_depth:
                return None
            if reuse and ctx.pool.is_full(tp):
                return ctx.pool.pick(tp, ctx.random)

        origin = get_origin(tp) or tp
        schema = describe(origin)
        if instance is not None and schema.kind is TypeKind.NAMED_TUPLE:
            raise ObjectGenerationError(origin, message=f"Cannot populate immutable {type_name(origin)} in place")
        target = instance
        if target is None and schema.kind is TypeKind.CLASS:
            target = self._instantiate(schema)

        typevars = typevar_map(tp)
        values: dict[str, Any] = {}
        changed: dict[str, Any] = {}
        for declared in schema.fields:
            field_info = declared.with_type(substitute_typevars(declared.type, typevars))
            current = self._current_value(target, field_info)
            with ctx.enter_field(field_info.name), ctx.descend():
                value = self._populate_field(field_info, current, ctx)
            values[field_info.name] = value
            if value is not current:
                changed[field_info.name] = value

        init_values: dict[str, Any] = {}
        if target is None:
            for declared in schema.init_vars:
                field_info = declared.with_type(substitute_typevars(declared.type, typevars))
                current = self._current_value(None, field_info)
                with ctx.enter_field(field_info.name), ctx.descend():
                    init_values[field_info.name] = self._populate_field(field_info, current, ctx)

        try:
            if target is None:
                target = schema.build(values, init_values)
            elif changed:
                schema.assign(target, changed)
        except Exception as exc:
            raise ObjectGenerationError(
                origin, message=f"Unable to build {type_name(origin)}: {exc}", cause=exc
            ) from exc
        ctx.pool.add(tp, target)
        return target

    def _populate_field(self, field_info: FieldInfo, current: Any, ctx: RandomizationContext) -> Any:
        if ctx.is_path_excluded or self._exclusions.is_excluded(field_info):
            return current
        try:
            resolved = self._chain.resolve(field_info, fallback=False)
            if resolved is SKIP:
                return current
            if resolved is not None:
                return resolved.generate(ctx)
            if not self._parameters.override_default_initialization and not is_zero(current, field_info.type):
                return current
            return self._generate(field_info.type, ctx)
        except ObjectGenerationError:
            raise
        except Exception as exc:
            logger.warning(
                "populate.field_failed",
                owner=type_name(field_info.owner),
                field=field_info.name,
                path=ctx.path,
                exc_info=True,
            )
            error = ObjectGenerationError(field_info.owner, field_info.name, cause=exc)
            error.detail["path"] = ctx.path
            raise error from exc

    @staticmethod
    def _instantiate(schema: TypeSchema) -> Any:
        try:
            return schema.instantiate()
        except Exception as exc:
            raise ObjectGenerationError(
                schema.type,
                message=f"{type_name(schema.type)} has no usable no-argument constructor: {exc}",
                cause=exc,
            ) from exc

    @staticmethod
    def _current_value(target: Any, field_info: FieldInfo) -> Any:
        try:
            if target is None:
                return field_info.initial_value()
            return getattr(target, field_info.name, zero_value(field_info.type))
        except Exception as exc:
            raise ObjectGenerationError(field_info.owner, field_info.name, cause=exc) from exc


__all__ = ["Populator"]
