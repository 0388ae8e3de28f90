"""Function argument and return type enforcement."""

import inspect
from collections.abc import Mapping, Sequence
from functools import wraps
from typing import Any, Callable, TypeVar

from typso.validator import Validator, descriptor, get_validator

T = TypeVar("T", bound=Callable[..., Any])


class enforce_types:
    """Check a function's arguments and return value on every call.

    Parameter types are either a list matched to arguments by position, or
    a mapping keyed by parameter name. Arguments without a declared type are
    not checked. Works with both sync and async functions.

    Examples:
        @enforce_types(["number", "number"], return_type="number")
        def add(x, y):
            return x + y

        @enforce_types({"user": User, "tags": ("array", "string")})
        async def tag(user, tags):
            ...
    """

    def __init__(
        self,
        param_types: Sequence[Any] | Mapping[str, Any],
        return_type: Any = None,
        validator: Validator | None = None,
    ):
        """Initialize the decorator.

        Args:
            param_types: Descriptors by position (list) or by parameter name (mapping)
            return_type: Optional descriptor for the return value
            validator: Validator to use; defaults to the process default at call time
        """
        if isinstance(param_types, Mapping):
            self.param_types: list[Any] | dict[str, Any] = {
                name: descriptor(spec) for name, spec in param_types.items()
            }
        else:
            self.param_types = [descriptor(spec) for spec in param_types]
        self.return_type = descriptor(return_type) if return_type is not None else None
        self._validator = validator

    @property
    def validator(self) -> Validator:
        return self._validator or get_validator()

    def __call__(self, func: T) -> T:
        """Apply enforcement to the decorated function."""
        sig = inspect.signature(func)
        if isinstance(self.param_types, dict):
            unknown = set(self.param_types) - set(sig.parameters)
            if unknown:
                raise TypeError(f"{func.__name__}() has no parameters named: {sorted(unknown)}")

        if inspect.iscoroutinefunction(func):

            @wraps(func)
            async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
                self._check_arguments(sig, args, kwargs)
                result = await func(*args, **kwargs)
                return self._check_result(result)

            return async_wrapper  # type: ignore[return-value]

        @wraps(func)
        def sync_wrapper(*args: Any, **kwargs: Any) -> Any:
            self._check_arguments(sig, args, kwargs)
            result = func(*args, **kwargs)
            return self._check_result(result)

        return sync_wrapper  # type: ignore[return-value]

    def _check_arguments(self, sig: inspect.Signature, args: tuple, kwargs: dict) -> None:
        validator = self.validator

        if isinstance(self.param_types, dict):
            bound = sig.bind(*args, **kwargs)
            for name, spec in self.param_types.items():
                if name in bound.arguments:
                    validator.check_field(bound.arguments[name], spec)
            return

        names = [
            p.name
            for p in sig.parameters.values()
            if p.kind in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD)
        ]
        for index, spec in enumerate(self.param_types):
            if index < len(args):
                validator.check_field(args[index], spec)
            elif index < len(names) and names[index] in kwargs:
                validator.check_field(kwargs[names[index]], spec)

    def _check_result(self, result: Any) -> Any:
        if self.return_type is not None:
            self.validator.check_field(result, self.return_type)
        return result
