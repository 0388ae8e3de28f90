"""Default filling for schema-described data."""

import copy
from collections.abc import Mapping, MutableMapping
from typing import Any

from ._types import default_of
from .kinds import MISSING


def normalize(
    schema: Mapping[str, Any], data: MutableMapping[str, Any]
) -> MutableMapping[str, Any]:
    """Fill schema defaults into ``data`` for every absent field.

    A field is absent when its key is missing from ``data`` or holds
    ``MISSING``. Defaults are deep-copied so filled values never alias the
    schema. ``data`` is modified in place and returned. No validation is done.

    Args:
        schema: Mapping of field name to descriptor (or descriptor shape)
        data: The mapping to fill

    Returns:
        ``data``, with defaults applied

    Example:
        >>> schema = {"role": {"type": "string", "default": "user"}}
        >>> normalize(schema, {"name": "Alice"})
        {'name': 'Alice', 'role': 'user'}
    """
    for key, spec in schema.items():
        default = default_of(spec)
        if default is MISSING:
            continue
        if data.get(key, MISSING) is MISSING:
            data[key] = copy.deepcopy(default)
    return data
