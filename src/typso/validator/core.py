"""Core validation logic for typso.

The pure checks in ``checks`` only describe failures. ``Validator`` is the
single policy layer that decides what a failure does: raise
``ValidationError`` at the first one, or (warn-only) log every one and
return normally.
"""

import logging
import threading
from collections.abc import Callable, Iterable, Mapping
from typing import Any

from . import checks
from .config import ValidationConfig
from .errors import CheckResult, Failure, ValidationError

logger = logging.getLogger(__name__)


class Validator:
    """Runs checks against one immutable ``ValidationConfig``.

    Validators hold no mutable state, so independent contexts (for example
    concurrent requests with different policies) each get their own instance.

    Example:
        >>> validator = Validator(ValidationConfig(raise_on_failure=False))
        >>> validator.check_type("25", "number")  # logged, not raised
    """

    def __init__(self, config: ValidationConfig | None = None):
        self.config = config or ValidationConfig()

    def with_config(self, **updates: Any) -> "Validator":
        """Return a new validator whose config is updated with ``updates``."""
        return Validator(self.config.model_copy(update=updates))

    def __repr__(self) -> str:
        return f"Validator(strict={self.config.strict}, warn_only={self.config.warn_only})"

    def report(self, failure: Failure) -> None:
        """Raise or log a single failure according to the config.

        Raises:
            ValidationError: If the config raises on failure
        """
        if self.config.raise_on_failure:
            raise ValidationError.from_failure(failure)
        logger.warning(failure.message)

    def enforce(self, failures: Iterable[Failure]) -> None:
        """Apply the policy to a lazy stream of failures."""
        for failure in failures:
            self.report(failure)

    def check_type(self, value: Any, kind: str, message: str | None = None) -> None:
        self.enforce(checks.check_type(value, kind, message))

    def check_instance(self, value: Any, cls: type, message: str | None = None) -> None:
        self.enforce(checks.check_instance(value, cls, message))

    def check_array(self, value: Any, element_kind: str, message: str | None = None) -> None:
        self.enforce(checks.check_array(value, element_kind, message))

    def check_union(self, value: Any, kinds: Iterable[str], message: str | None = None) -> None:
        self.enforce(checks.check_union(value, kinds, message))

    def check_object(self, value: Any, schema: Mapping[str, Any]) -> None:
        self.enforce(checks.check_object(value, schema))

    def check_date(self, value: Any) -> None:
        self.enforce(checks.check_date(value))

    def check_boolean(self, value: Any) -> None:
        self.enforce(checks.check_boolean(value))

    def check_custom(
        self, value: Any, func: Callable[[Any], Any], message: str | None = None
    ) -> None:
        self.enforce(checks.check_custom(value, func, message))

    def check_not_nan(self, value: Any) -> None:
        self.enforce(checks.check_not_nan(value))

    def check_range(self, value: Any, minimum: Any, maximum: Any) -> None:
        self.enforce(checks.check_range(value, minimum, maximum))

    def check_length(self, value: Any, min_length: int, max_length: int) -> None:
        self.enforce(checks.check_length(value, min_length, max_length))

    def check_field(self, value: Any, spec: Any) -> None:
        self.enforce(checks.check_field(value, spec))

    def evaluate(self, value: Any, spec: Any) -> CheckResult:
        """Check a value against a descriptor and collect every failure.

        Unlike the ``check_*`` methods this never raises or logs for a failed
        check; the config is not consulted.
        """
        return CheckResult(tuple(checks.check_field(value, spec)))

    def evaluate_object(self, value: Any, schema: Mapping[str, Any]) -> CheckResult:
        """Check an object against a schema and collect every failure."""
        return CheckResult(tuple(checks.check_object(value, schema)))


# Process-wide default validator used by the module-level functions
_default_lock = threading.Lock()
_default_validator = Validator()


def get_validator() -> Validator:
    """Return the process default validator."""
    return _default_validator


def reset_validator(config: ValidationConfig | None = None) -> Validator:
    """Install a fresh default validator (defaults: strict, raising)."""
    global _default_validator
    with _default_lock:
        _default_validator = Validator(config)
        return _default_validator


def _update_default(**updates: Any) -> Validator:
    global _default_validator
    with _default_lock:
        _default_validator = _default_validator.with_config(**updates)
        logger.debug(f"Default validator is now {_default_validator!r}")
        return _default_validator


def set_mode(strict: bool = True) -> Validator:
    """Set the reserved strict flag on the default validator."""
    return _update_default(strict=strict)


def set_warn_only(enabled: bool = False) -> Validator:
    """Make the default validator log failures instead of raising them."""
    return _update_default(raise_on_failure=not enabled)


def check_type(value: Any, kind: str, message: str | None = None) -> None:
    get_validator().check_type(value, kind, message)


def check_instance(value: Any, cls: type, message: str | None = None) -> None:
    get_validator().check_instance(value, cls, message)


def check_array(value: Any, element_kind: str, message: str | None = None) -> None:
    get_validator().check_array(value, element_kind, message)


def check_union(value: Any, kinds: Iterable[str], message: str | None = None) -> None:
    get_validator().check_union(value, kinds, message)


def check_object(value: Any, schema: Mapping[str, Any]) -> None:
    get_validator().check_object(value, schema)


def check_date(value: Any) -> None:
    get_validator().check_date(value)


def check_boolean(value: Any) -> None:
    get_validator().check_boolean(value)


def check_custom(value: Any, func: Callable[[Any], Any], message: str | None = None) -> None:
    get_validator().check_custom(value, func, message)


def check_not_nan(value: Any) -> None:
    get_validator().check_not_nan(value)


def check_range(value: Any, minimum: Any, maximum: Any) -> None:
    get_validator().check_range(value, minimum, maximum)


def check_length(value: Any, min_length: int, max_length: int) -> None:
    get_validator().check_length(value, min_length, max_length)


def check_field(value: Any, spec: Any) -> None:
    get_validator().check_field(value, spec)
