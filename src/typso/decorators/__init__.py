"""High-level helpers built on the typso validator.

Example:
    >>> from typso.decorators import enforce_types, load_schema_from_file
    >>>
    >>> @enforce_types(["number", "number"], return_type="number")
    ... def add(x, y):
    ...     return x + y
    >>>
    >>> schema = load_schema_from_file("schemas/user.yaml")
"""

from .enforce import enforce_types
from .loaders import load_schema, load_schema_from_file

__all__ = [
    "enforce_types",
    "load_schema",
    "load_schema_from_file",
]
