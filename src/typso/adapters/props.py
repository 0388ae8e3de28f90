"""Prop checking for UI components.

A component is any callable taking its props as keyword arguments. Each
declared prop is checked with the validator's field dispatch; the literal
descriptor ``"optional"`` marks a prop that may be absent and is not checked.
"""

import logging
from collections.abc import Mapping
from functools import wraps
from typing import Any, Callable

from typso.validator import MISSING, Failure, FailureKind, Validator, get_validator

logger = logging.getLogger(__name__)

OPTIONAL = "optional"


def check_props(
    props: Mapping[str, Any],
    prop_types: Mapping[str, Any],
    default_props: Mapping[str, Any] | None = None,
    validator: Validator | None = None,
) -> None:
    """Check component props against their declared types.

    A prop that is None or absent takes its default. A prop still absent
    after that is reported as missing unless it is declared ``"optional"``.

    Args:
        props: Props passed to the component
        prop_types: Mapping of prop name to descriptor, or ``"optional"``
        default_props: Fallback values for absent props
        validator: Validator to use; defaults to the process default

    Raises:
        ValidationError: On the first failure, unless the validator is warn-only
    """
    validator = validator or get_validator()
    default_props = default_props or {}

    for key, expected in prop_types.items():
        value = props.get(key)
        if value is None:
            value = default_props.get(key, MISSING)

        if expected == OPTIONAL:
            continue

        if value is MISSING:
            validator.report(
                Failure.default(
                    FailureKind.MISSING_REQUIRED_FIELD, f"Prop '{key}' is required but missing."
                )
            )
        elif value is not None:
            validator.check_field(value, expected)


def with_prop_types(
    component: Callable[..., Any],
    prop_types: Mapping[str, Any],
    default_props: Mapping[str, Any] | None = None,
    validator: Validator | None = None,
) -> Callable[..., Any]:
    """Wrap a component so its props are checked before every render.

    The wrapped component receives the props unchanged.

    Example:
        >>> Greeting = with_prop_types(render_greeting, {"name": "string", "title": "optional"})
        >>> Greeting(name="Alice")
    """

    @wraps(component)
    def wrapper(**props: Any) -> Any:
        logger.debug(f"Checking props for {getattr(component, '__name__', component)!r}")
        check_props(props, prop_types, default_props, validator)
        return component(**props)

    return wrapper
