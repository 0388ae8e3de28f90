"""Tests for the Validator policy layer and the process default validator."""

import logging

import pytest

from typso.validator import (
    Failure,
    FailureKind,
    ValidationConfig,
    ValidationError,
    Validator,
    check_array,
    check_object,
    check_type,
    get_validator,
    set_mode,
    set_warn_only,
)

CORE_LOGGER = "typso.validator.core"


def warning_messages(caplog):
    return [r.getMessage() for r in caplog.records if r.levelno == logging.WARNING]


class TestDefaultValidator:
    """Test the process default validator and its mode setters."""

    def test_initial_mode(self):
        config = get_validator().config
        assert config.strict is True
        assert config.warn_only is False

    def test_warn_only_logs_and_returns(self, caplog):
        set_warn_only(True)

        with caplog.at_level(logging.WARNING, logger=CORE_LOGGER):
            assert check_type(42, "string") is None

        assert warning_messages(caplog) == [
            "TypeKindMismatch: Expected string but received number"
        ]

    def test_switching_back_restores_raising(self, caplog):
        set_warn_only(True)
        with caplog.at_level(logging.WARNING, logger=CORE_LOGGER):
            check_type(42, "string")

        set_warn_only(False)
        with pytest.raises(ValidationError):
            check_type(42, "string")

        assert len(warning_messages(caplog)) == 1

    def test_switch_only_affects_later_calls(self):
        before = get_validator()
        set_warn_only(True)

        # A validator obtained before the switch keeps its own policy
        with pytest.raises(ValidationError):
            before.check_type(42, "string")

        get_validator().check_type(42, "string")

    def test_set_mode_keeps_warn_only(self):
        set_warn_only(True)
        set_mode(False)

        config = get_validator().config
        assert config.strict is False
        assert config.warn_only is True

    def test_strict_flag_is_not_enforced(self):
        set_mode(False)

        with pytest.raises(ValidationError):
            check_type(42, "string")
        check_type(None, "null")

    def test_warn_only_visits_every_array_element(self, caplog):
        set_warn_only(True)

        with caplog.at_level(logging.WARNING, logger=CORE_LOGGER):
            check_array([1, "a", None, 2], "number")

        assert warning_messages(caplog) == [
            "TypeKindMismatch: Expected number but received string",
            "TypeKindMismatch: Expected number but received null",
        ]

    def test_warn_only_not_an_array_skips_elements(self, caplog):
        set_warn_only(True)

        with caplog.at_level(logging.WARNING, logger=CORE_LOGGER):
            check_array("abc", "string")

        assert warning_messages(caplog) == ["NotAnArray: Expected an array"]

    def test_warn_only_visits_every_object_field(self, caplog):
        calls = []

        def tracked(value):
            calls.append(value)
            return False

        set_warn_only(True)
        with caplog.at_level(logging.WARNING, logger=CORE_LOGGER):
            check_object({"a": 1, "b": 2}, {"a": "string", "b": tracked})

        assert calls == [2]
        assert warning_messages(caplog) == [
            "Field 'a': TypeKindMismatch: Expected string but received number",
            "Field 'b': ValidationFailed: Custom validation failed",
        ]


class TestValidatorInstances:
    """Test independent validator contexts."""

    def test_independent_configs(self, caplog):
        lenient = Validator(ValidationConfig(raise_on_failure=False))

        with caplog.at_level(logging.WARNING, logger=CORE_LOGGER):
            lenient.check_type(42, "string")

        with pytest.raises(ValidationError):
            Validator().check_type(42, "string")
        with pytest.raises(ValidationError):
            get_validator().check_type(42, "string")

    def test_with_config_returns_new_validator(self):
        original = Validator()
        lenient = original.with_config(raise_on_failure=False)

        assert lenient is not original
        assert lenient.config.warn_only is True
        assert original.config.warn_only is False

    def test_report(self, caplog):
        failure = Failure(FailureKind.RANGE_VIOLATION, "too big")

        with pytest.raises(ValidationError, match="^too big$") as exc_info:
            Validator().report(failure)
        assert exc_info.value.kind is FailureKind.RANGE_VIOLATION

        with caplog.at_level(logging.WARNING, logger=CORE_LOGGER):
            Validator(ValidationConfig(raise_on_failure=False)).report(failure)
        assert warning_messages(caplog) == ["too big"]

    def test_repr(self):
        assert repr(Validator()) == "Validator(strict=True, warn_only=False)"


class TestEvaluate:
    """Test result-returning evaluation."""

    def test_collects_every_failure(self):
        result = Validator().evaluate([1, "a", None], ("array", "number"))

        assert not result.ok
        assert [f.kind for f in result.failures] == [FailureKind.TYPE_KIND_MISMATCH] * 2
        assert result.messages == [
            "TypeKindMismatch: Expected number but received string",
            "TypeKindMismatch: Expected number but received null",
        ]

    def test_success(self):
        result = Validator().evaluate_object({"name": "Alice"}, {"name": "string"})

        assert result.ok
        assert bool(result) is True
        assert result.failures == ()

    def test_object_failures(self):
        result = Validator().evaluate_object(
            {"name": 1, "age": "x"}, {"name": "string", "age": "number"}
        )

        assert result.messages == [
            "Field 'name': TypeKindMismatch: Expected string but received number",
            "Field 'age': TypeKindMismatch: Expected number but received string",
        ]

    def test_evaluate_neither_raises_nor_logs(self, caplog):
        set_warn_only(True)

        with caplog.at_level(logging.WARNING, logger=CORE_LOGGER):
            result = get_validator().evaluate(42, "string")

        assert not result.ok
        assert warning_messages(caplog) == []
