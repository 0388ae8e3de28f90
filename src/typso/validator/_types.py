"""Type descriptors for typso.

A descriptor states what a valid value looks like for one field or argument.
Descriptors are a closed set of frozen dataclasses, built through the named
constructors (``primitive``, ``instance_of``, ``array_of``, ``predicate``,
``one_of``) or coerced once from the shorthand shapes accepted by
``descriptor``.
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field, replace
from typing import Any, Union

from .kinds import MISSING, PRIMITIVE_KINDS

ARRAY_MARKER = "array"


def _require_kind(kind: Any) -> str:
    if not isinstance(kind, str) or kind not in PRIMITIVE_KINDS:
        expected = ", ".join(sorted(PRIMITIVE_KINDS))
        raise ValueError(f"Unknown primitive kind: {kind!r}. Expected one of: {expected}")
    return kind


@dataclass(frozen=True)
class Primitive:
    """Value's primitive kind must equal ``kind``."""

    kind: str
    default: Any = field(default=MISSING, compare=False)


@dataclass(frozen=True)
class Instance:
    """Value must be an instance of ``cls``."""

    cls: type
    default: Any = field(default=MISSING, compare=False)


@dataclass(frozen=True)
class ArrayOf:
    """Value must be a sequence whose every element has primitive kind ``element_kind``."""

    element_kind: str
    default: Any = field(default=MISSING, compare=False)


@dataclass(frozen=True)
class Predicate:
    """``func(value)`` must return a truthy result."""

    func: Callable[[Any], Any]
    message: str | None = None
    default: Any = field(default=MISSING, compare=False)


@dataclass(frozen=True)
class UnionOf:
    """Value's primitive kind must be one of ``kinds``."""

    kinds: tuple[str, ...]
    default: Any = field(default=MISSING, compare=False)


TypeDescriptor = Union[Primitive, Instance, ArrayOf, Predicate, UnionOf]

DESCRIPTOR_TYPES = (Primitive, Instance, ArrayOf, Predicate, UnionOf)


def primitive(kind: str, default: Any = MISSING) -> Primitive:
    return Primitive(_require_kind(kind), default=default)


def instance_of(cls: type, default: Any = MISSING) -> Instance:
    if not isinstance(cls, type):
        raise TypeError(f"instance_of() expects a class, got {type(cls).__name__}")
    return Instance(cls, default=default)


def array_of(element_kind: str, default: Any = MISSING) -> ArrayOf:
    return ArrayOf(_require_kind(element_kind), default=default)


def predicate(
    func: Callable[[Any], Any], message: str | None = None, default: Any = MISSING
) -> Predicate:
    if not callable(func):
        raise TypeError(f"predicate() expects a callable, got {type(func).__name__}")
    return Predicate(func, message=message, default=default)


def one_of(*kinds: str, default: Any = MISSING) -> UnionOf:
    if not kinds:
        raise ValueError("one_of() requires at least one kind")
    return UnionOf(tuple(_require_kind(k) for k in kinds), default=default)


def descriptor(spec: Any) -> TypeDescriptor:
    """Coerce a shorthand shape into a type descriptor.

    Accepted shapes:
        - an existing descriptor, returned as is
        - a kind name: ``"string"``
        - an array pair: ``("array", "number")`` or ``["array", "number"]``
        - a list or tuple of kind names, as a union: ``["string", "number"]``
        - a class, as an instance check: ``datetime``
        - any other callable, as a predicate: ``lambda v: v > 0``
        - a mapping: ``{"type": "string", "default": "x"}``,
          ``{"type": "array", "items": "number"}``,
          ``{"type": ["string", "number"]}``

    Raises:
        ValueError: If a kind name is unknown or a mapping has no type
        TypeError: If the shape is not recognized
    """
    if isinstance(spec, DESCRIPTOR_TYPES):
        return spec
    if isinstance(spec, str):
        return primitive(spec)
    if isinstance(spec, (list, tuple)):
        if len(spec) == 2 and spec[0] == ARRAY_MARKER:
            return array_of(spec[1])
        return one_of(*spec)
    # Classes are callable too; they always mean an instance check
    if isinstance(spec, type):
        return instance_of(spec)
    if callable(spec):
        return predicate(spec)
    if isinstance(spec, Mapping):
        return _from_mapping(spec)
    raise TypeError(f"Unsupported type descriptor: {spec!r}")


def _from_mapping(spec: Mapping[str, Any]) -> TypeDescriptor:
    if "type" not in spec:
        raise ValueError(f"Descriptor mapping is missing 'type': {dict(spec)!r}")

    kind = spec["type"]
    default = spec.get("default", MISSING)

    if kind == ARRAY_MARKER:
        if "items" not in spec:
            raise ValueError("Array descriptor mapping is missing 'items'")
        return array_of(spec["items"], default=default)
    if isinstance(kind, (list, tuple)):
        return one_of(*kind, default=default)
    return primitive(kind, default=default)


def default_of(spec: Any) -> Any:
    """Return the default carried by a descriptor or descriptor shape, or MISSING."""
    if isinstance(spec, DESCRIPTOR_TYPES):
        return spec.default
    if isinstance(spec, Mapping):
        return spec.get("default", MISSING)
    return getattr(spec, "default", MISSING)


def with_default(spec: Any, default: Any) -> TypeDescriptor:
    """Return a copy of a descriptor carrying ``default``."""
    return replace(descriptor(spec), default=default)
