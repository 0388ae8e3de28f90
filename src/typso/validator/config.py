"""Validation configuration for typso."""

import os
from typing import Any

from typso.models import TypsoBaseModel

STRICT_ENV = "TYPSO_STRICT"
WARN_ONLY_ENV = "TYPSO_WARN_ONLY"


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes")


class ValidationConfig(TypsoBaseModel):
    """Immutable policy consumed by every check.

    Attributes:
        strict: Reserved for stricter null/absent handling. No check reads it yet.
        raise_on_failure: Raise ``ValidationError`` on the first failure. When
            False (warn-only), failures are logged and the check returns normally.

    Example:
        >>> ValidationConfig(raise_on_failure=False).warn_only
        True
    """

    strict: bool = True
    raise_on_failure: bool = True

    @property
    def warn_only(self) -> bool:
        return not self.raise_on_failure

    @classmethod
    def from_dict(cls, config: dict[str, Any]) -> "ValidationConfig":
        """Create config from a dictionary such as a parsed YAML section.

        Accepts either ``warn_only`` or ``raise_on_failure``; ``warn_only`` wins
        when both are given.
        """
        raise_on_failure = config.get("raise_on_failure", True)
        if "warn_only" in config:
            raise_on_failure = not config["warn_only"]
        return cls(strict=config.get("strict", True), raise_on_failure=raise_on_failure)

    @classmethod
    def from_env(cls) -> "ValidationConfig":
        """Create config from ``TYPSO_STRICT`` and ``TYPSO_WARN_ONLY``."""
        return cls(
            strict=_env_flag(STRICT_ENV, True),
            raise_on_failure=not _env_flag(WARN_ONLY_ENV, False),
        )
