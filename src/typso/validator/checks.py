"""Pure check functions.

Each check is a generator that yields a ``Failure`` for every problem it
finds and never raises for a failed check. Failures are produced lazily, so a
consumer that stops at the first one also stops the traversal: later
elements, fields and predicates are not evaluated.
"""

from collections.abc import Callable, Iterable, Iterator, Mapping
from datetime import date
from decimal import Decimal
from typing import Any

import numpy as np

from ._types import (
    ArrayOf,
    Instance,
    Predicate,
    Primitive,
    TypeDescriptor,
    UnionOf,
    descriptor,
)
from .errors import Failure, FailureKind
from .kinds import MISSING, as_list, is_sequence, kind_of

Failures = Iterator[Failure]


def check_type(value: Any, kind: str, message: str | None = None) -> Failures:
    actual = kind_of(value)
    if actual != kind:
        yield _fail(
            FailureKind.TYPE_KIND_MISMATCH,
            message,
            f"Expected {kind} but received {actual}",
        )


def check_instance(value: Any, cls: type, message: str | None = None) -> Failures:
    if not isinstance(value, cls):
        name = getattr(cls, "__name__", repr(cls))
        yield _fail(FailureKind.INSTANCE_MISMATCH, message, f"Expected instance of {name}")


def check_array(value: Any, element_kind: str, message: str | None = None) -> Failures:
    if not is_sequence(value):
        yield Failure.default(FailureKind.NOT_AN_ARRAY, "Expected an array")
        return
    for item in as_list(value):
        yield from check_type(item, element_kind, message)


def check_union(value: Any, kinds: Iterable[str], message: str | None = None) -> Failures:
    kinds = list(kinds)
    actual = kind_of(value)
    if actual not in kinds:
        yield _fail(
            FailureKind.UNION_MISMATCH,
            message,
            f"Expected one of [{', '.join(kinds)}] but received {actual}",
        )


def check_object(value: Any, schema: Mapping[str, Any]) -> Failures:
    """Check each field declared in ``schema``; undeclared fields are ignored."""
    if value is None or is_sequence(value) or kind_of(value) != "object":
        yield Failure.default(FailureKind.NOT_AN_OBJECT, "Expected an object")
        return

    for key, spec in schema.items():
        for failure in check_field(_lookup(value, key), spec):
            yield failure.within(key)


def check_date(value: Any) -> Failures:
    if not isinstance(value, (date, np.datetime64)):
        yield Failure.default(FailureKind.TYPE_MISMATCH, "Expected a date")


def check_boolean(value: Any) -> Failures:
    return check_type(value, "boolean")


def check_custom(
    value: Any, func: Callable[[Any], Any], message: str | None = None
) -> Failures:
    if not func(value):
        yield _fail(FailureKind.VALIDATION_FAILED, message, "Custom validation failed")


def check_not_nan(value: Any) -> Failures:
    if isinstance(value, Decimal):
        is_nan = value.is_nan()
    else:
        # NaN is the only number that is not equal to itself
        is_nan = kind_of(value) == "number" and value != value
    if is_nan:
        yield Failure.default(FailureKind.NOT_A_NUMBER, "Value should not be NaN")


def check_range(value: Any, minimum: Any, maximum: Any) -> Failures:
    if value < minimum or value > maximum:
        yield Failure.default(
            FailureKind.RANGE_VIOLATION, f"Value should be between {minimum} and {maximum}"
        )


def check_length(value: Any, min_length: int, max_length: int) -> Failures:
    length = len(value)
    if length < min_length or length > max_length:
        yield Failure.default(
            FailureKind.LENGTH_VIOLATION,
            f"Length should be between {min_length} and {max_length}",
        )


def check_field(value: Any, spec: Any) -> Failures:
    """Dispatch a value to the check matching its descriptor."""
    desc: TypeDescriptor = descriptor(spec)

    if isinstance(desc, Primitive):
        return check_type(value, desc.kind)
    if isinstance(desc, ArrayOf):
        return check_array(value, desc.element_kind)
    if isinstance(desc, UnionOf):
        return check_union(value, desc.kinds)
    if isinstance(desc, Predicate):
        return check_custom(value, desc.func, desc.message)
    if isinstance(desc, Instance):
        return check_instance(value, desc.cls)
    raise TypeError(f"Unsupported type descriptor: {desc!r}")


def _lookup(value: Any, key: str) -> Any:
    if isinstance(value, Mapping):
        return value.get(key, MISSING)
    return getattr(value, key, MISSING)


def _fail(kind: FailureKind, message: str | None, detail: str) -> Failure:
    if message:
        return Failure(kind, message)
    return Failure.default(kind, detail)
