"""Failure records and the exception raised for validation failures."""

from dataclasses import dataclass
from enum import Enum


class FailureKind(Enum):
    """Labels for every way a check can fail."""

    TYPE_KIND_MISMATCH = "TypeKindMismatch"
    INSTANCE_MISMATCH = "InstanceMismatch"
    NOT_AN_ARRAY = "NotAnArray"
    UNION_MISMATCH = "UnionMismatch"
    NOT_AN_OBJECT = "NotAnObject"
    TYPE_MISMATCH = "TypeMismatch"
    VALIDATION_FAILED = "ValidationFailed"
    NOT_A_NUMBER = "NotANumber"
    RANGE_VIOLATION = "RangeViolation"
    LENGTH_VIOLATION = "LengthViolation"
    MISSING_REQUIRED_FIELD = "MissingRequiredField"


@dataclass(frozen=True)
class Failure:
    """A single failed check.

    Attributes:
        kind: What went wrong
        message: Human-readable description, reported verbatim
    """

    kind: FailureKind
    message: str

    @classmethod
    def default(cls, kind: FailureKind, detail: str) -> "Failure":
        """Build a failure whose message is prefixed with its kind label."""
        return cls(kind, f"{kind.value}: {detail}")

    def within(self, field: str) -> "Failure":
        """Return a copy of this failure attributed to an object field."""
        return Failure(self.kind, f"Field '{field}': {self.message}")


@dataclass(frozen=True)
class CheckResult:
    """Outcome of running a check to completion without raising."""

    failures: tuple[Failure, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.failures

    @property
    def messages(self) -> list[str]:
        return [f.message for f in self.failures]

    def __bool__(self) -> bool:
        return self.ok


class ValidationError(ValueError):
    """Raised when a check fails and the validator raises on failure.

    Attributes:
        kind: The failure kind
        message: The failure message
    """

    def __init__(self, kind: FailureKind, message: str):
        self.kind = kind
        self.message = message
        super().__init__(message)

    @classmethod
    def from_failure(cls, failure: Failure) -> "ValidationError":
        return cls(failure.kind, failure.message)
