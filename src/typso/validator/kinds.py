"""Runtime kind classification for typso.

Every value has exactly one primitive kind, the typso analogue of a
``typeof`` check:

- ``undefined``: the ``MISSING`` sentinel (absent key or attribute)
- ``null``: ``None``
- ``boolean``: ``bool`` and numpy booleans
- ``number``: any other ``numbers.Number`` and numpy numbers
- ``string``: ``str``
- ``function``: any other callable, classes included
- ``object``: everything else (mappings, sequences, instances)
"""

import numbers
from typing import Any, Literal

import numpy as np
import pandas as pd

PrimitiveKind = Literal["string", "number", "boolean", "function", "object", "null", "undefined"]

PRIMITIVE_KINDS: frozenset[str] = frozenset(
    {"string", "number", "boolean", "function", "object", "null", "undefined"}
)


class _Missing:
    """Sentinel type for absent values."""

    _instance = None

    def __new__(cls) -> "_Missing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> "_Missing":
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> "_Missing":
        return self

    def __reduce__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()


def kind_of(value: Any) -> str:
    """Return the primitive kind name of a value."""
    if value is MISSING:
        return "undefined"
    if value is None:
        return "null"
    # bool is a Number subclass, so it must be tested first
    if isinstance(value, (bool, np.bool_)):
        return "boolean"
    if isinstance(value, (numbers.Number, np.number)):
        return "number"
    if isinstance(value, str):
        return "string"
    if callable(value):
        return "function"
    return "object"


def is_sequence(value: Any) -> bool:
    """Whether a value is a sequence container (never a string or bytes)."""
    return isinstance(value, (list, tuple, np.ndarray, pd.Series))


def as_list(value: Any) -> list[Any]:
    """Convert a sequence container to a plain list of Python values."""
    if isinstance(value, (np.ndarray, pd.Series)):
        return value.tolist()
    return list(value)
