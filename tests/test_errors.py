"""Error records, the Result type and the failure collection."""
from __future__ import annotations

import pytest

from dataverify.errors import (
    AppError,
    DataVerifyError,
    Err,
    ErrorCode,
    NoActiveTargetError,
    Ok,
    ReentrantEvaluationError,
    from_exception,
    try_result,
)
from dataverify.modes import ValidationMode
from dataverify.validation import (
    CollectAllAccumulator,
    ErrorCollection,
    FailFastAccumulator,
    ValidationError,
    create_accumulator,
)


class TestAppError:
    def test_str_names_the_code(self):
        error = AppError(code=ErrorCode.E4010_RULE_EXECUTION_FAILED, message="boom")

        assert str(error) == "[E4010_RULE_EXECUTION_FAILED] boom"
        assert error.metadata == {}
        assert error.context.origin == ""

    def test_code_names_carry_their_number(self):
        for code in ErrorCode:
            assert code.name.startswith(f"E{code.value}_")
            assert code.value % 1000 != 0


class TestResult:
    def test_ok(self):
        outcome = Ok(3)
        assert outcome.is_ok() and not outcome.is_err()
        assert outcome.unwrap() == 3

    def test_err(self):
        outcome = Err(AppError(code=ErrorCode.E9001_UNEXPECTED_ERROR, message="x"))
        assert outcome.is_err() and not outcome.is_ok()
        assert outcome.unwrap_err().message == "x"
        with pytest.raises(ValueError, match="E9001_UNEXPECTED_ERROR"):
            outcome.unwrap()

    def test_try_result_passes_values_through(self):
        assert try_result(lambda: True).unwrap() is True

    def test_try_result_wraps_exceptions(self):
        outcome = try_result(lambda: 1 / 0, code=ErrorCode.E4010_RULE_EXECUTION_FAILED, origin="rule")

        error = outcome.unwrap_err()
        assert error.code is ErrorCode.E4010_RULE_EXECUTION_FAILED
        assert error.metadata["exception_type"] == "ZeroDivisionError"
        assert isinstance(error.cause, ZeroDivisionError)
        assert error.context.origin == "rule"

    def test_from_exception_message_defaults_to_type(self):
        assert from_exception(KeyError()).unwrap_err().message == "KeyError"


class TestExceptions:
    def test_carry_their_record(self):
        exc = NoActiveTargetError("email")

        assert isinstance(exc, DataVerifyError)
        assert exc.code is ErrorCode.E1001_NO_ACTIVE_TARGET
        assert exc.error.metadata == {"operation": "email"}
        assert "field()" in str(exc)

    def test_reentrant_is_runtime_error(self):
        assert isinstance(ReentrantEvaluationError(), RuntimeError)


def _error(field: str, test: str = "required") -> ValidationError:
    return ValidationError(field=field, test=test, message=f"{field} {test}")


class TestErrorCollection:
    def test_lookups(self):
        errors = ErrorCollection([_error("a"), _error("b"), _error("a", "email")])

        assert errors.first().field == "a"
        assert errors.last().test == "email"
        assert errors.first_for("a").test == "required"
        assert [e.test for e in errors.for_field("a")] == ["required", "email"]
        assert errors.has_errors_for("b")
        assert not errors.has_errors_for("c")
        assert errors.fields() == ["a", "b"]
        assert list(errors.group_by_field()) == ["a", "b"]
        assert errors[1].field == "b"

    def test_empty(self):
        errors = ErrorCollection()
        assert errors.is_empty
        assert errors.first() is None
        assert errors.first_for("a") is None
        assert errors.to_dicts() == []

    def test_display_name_and_str(self):
        error = ValidationError(field="email", test="email", message="bad", alias="Email")
        assert error.display_name == "Email"
        assert str(error) == "email: bad"


class TestAccumulators:
    def test_fail_fast_keeps_the_first(self):
        accumulator = create_accumulator(ValidationMode.FAIL_FAST)

        assert isinstance(accumulator, FailFastAccumulator)
        assert accumulator.add_error(_error("a")) is False
        assert accumulator.add_error(_error("b")) is False
        assert [e.field for e in accumulator.get_errors()] == ["a"]

    def test_collect_all(self):
        accumulator = create_accumulator(ValidationMode.COLLECT_ALL)

        assert isinstance(accumulator, CollectAllAccumulator)
        assert accumulator.add_error(_error("a")) is True
        assert accumulator.add_error(_error("b")) is True
        assert len(accumulator.to_collection()) == 2

    def test_collect_all_has_no_cap(self):
        accumulator = create_accumulator(ValidationMode.COLLECT_ALL)

        assert all(accumulator.add_error(_error(str(i))) for i in range(50))
        assert len(accumulator.get_errors()) == 50
        with pytest.raises(TypeError):
            create_accumulator(ValidationMode.COLLECT_ALL, max_errors=0)
