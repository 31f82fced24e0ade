"""Tests for the Result type, its constructors and error normalization.

Validates:
- success/failure record shapes
- error normalization from exceptions, records and mappings
- opt-in extraction and structural equality
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from railkit import (
    UNKNOWN_ERROR,
    ErrorName,
    Result,
    SerializableError,
    UnwrapError,
    failure,
    normalize_error,
    success,
)


class CodedError(Exception):
    """Exception carrying the optional record fields as attributes."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.code = "E42"
        self.hint = "try again"


# ═════════════════════════════════════════════════════════════════════════════
# Constructors
# ═════════════════════════════════════════════════════════════════════════════


def test_success_sets_data_and_clears_error() -> None:
    data = {"id": 1, "name": "test"}
    result = success(data)

    assert result.data is data
    assert result.error is None
    assert result.is_success()
    assert not result.is_failure()


def test_failure_without_error_record_rejected() -> None:
    with pytest.raises(TypeError):
        Result(None, is_success=False)
    with pytest.raises(TypeError):
        Result("x", is_success=False)


def test_success_with_none_payload_is_still_success() -> None:
    result = success(None)

    assert result.is_success()
    assert result.to_dict() == {"data": None, "error": None}


def test_failure_from_exception() -> None:
    result: Result[int] = failure(ValueError("test error"))

    assert result.data is None
    assert result.is_failure()
    assert result.error is not None
    assert result.error.name == "ValueError"
    assert result.error.message == "test error"


def test_failure_without_error_uses_default() -> None:
    assert failure().to_dict() == {
        "data": None,
        "error": {"name": "Unknown error", "message": "Unknown error"},
    }
    assert failure(None).error is UNKNOWN_ERROR


# ═════════════════════════════════════════════════════════════════════════════
# Error Normalization
# ═════════════════════════════════════════════════════════════════════════════


def test_normalize_copies_optional_attributes() -> None:
    error = normalize_error(CodedError("boom"))

    assert error == SerializableError(name="CodedError", message="boom", code="E42", hint="try again")
    assert error.details is None


def test_normalize_drops_traceback() -> None:
    try:
        raise RuntimeError("deep")
    except RuntimeError as e:
        error = normalize_error(e)

    assert error.to_dict() == {"name": "RuntimeError", "message": "deep"}


def test_normalize_returns_record_unchanged() -> None:
    error = SerializableError.create("E", "bad", code="X")

    assert normalize_error(error) is error
    assert failure(error).error is error


def test_normalize_mapping_keeps_known_keys_only() -> None:
    error = normalize_error({"name": "E", "message": "bad", "details": "row 3", "stack": "..."})

    assert error.to_dict() == {"name": "E", "message": "bad", "details": "row 3"}


def test_normalize_mapping_fills_missing_fields() -> None:
    error = normalize_error({"code": 404})

    assert error.name == ErrorName.UNKNOWN
    assert error.message == ErrorName.UNKNOWN
    assert error.code == "404"


def test_normalize_arbitrary_value() -> None:
    assert normalize_error("plain text") == SerializableError(name="str", message="plain text")


class UnprintableError(Exception):
    """Exception whose __str__ and optional fields blow up."""

    def __str__(self) -> str:
        raise RuntimeError("no str")

    @property
    def code(self) -> str:
        raise RuntimeError("no code")


class Unprintable:
    def __str__(self) -> str:
        raise RuntimeError("no str")


class BrokenMapping(dict[str, object]):
    def get(self, key: str, default: object = None) -> object:
        raise KeyError(key)


def test_normalize_survives_failing_str_and_attributes() -> None:
    error = normalize_error(UnprintableError())

    assert error == SerializableError(name="UnprintableError", message="UnprintableError")
    assert error.code is None


def test_failure_never_raises_on_unprintable_values() -> None:
    assert failure(UnprintableError()).is_failure()
    assert failure(Unprintable()).error == SerializableError(name="Unprintable", message="Unprintable")
    assert failure(BrokenMapping()).error == UNKNOWN_ERROR


def test_serializable_error_is_frozen() -> None:
    error = SerializableError(name="E", message="bad")

    with pytest.raises(ValidationError):
        error.name = "other"  # type: ignore[misc]


# ═════════════════════════════════════════════════════════════════════════════
# Extraction & Matching
# ═════════════════════════════════════════════════════════════════════════════


def test_unwrap_on_failure_raises() -> None:
    result: Result[int] = failure(KeyError("k"))

    with pytest.raises(UnwrapError) as info:
        result.unwrap()
    assert info.value.result is result
    assert result.unwrap_or(7) == 7


def test_unwrap_error_on_success_raises() -> None:
    with pytest.raises(UnwrapError):
        success(1).unwrap_error()


def test_match_dispatches_by_variant() -> None:
    assert success(2).match(success=lambda x: x * 10, failure=lambda e: e.name) == 20
    assert failure(TypeError("t")).match(success=lambda x: x, failure=lambda e: e.name) == "TypeError"


def test_result_unpacks_as_pair() -> None:
    data, error = success(5)
    assert (data, error) == (5, None)

    data, error = failure()
    assert data is None
    assert error == UNKNOWN_ERROR


def test_structural_pattern_matching() -> None:
    match success(3):
        case Result(value, None):
            matched = value
        case _:
            matched = None
    assert matched == 3


# ═════════════════════════════════════════════════════════════════════════════
# Equality & Records
# ═════════════════════════════════════════════════════════════════════════════


def test_structural_equality() -> None:
    assert success([1, 2]) == success([1, 2])
    assert failure(ValueError("x")) == failure({"name": "ValueError", "message": "x"})
    assert success(None) != failure()
    assert bool(success(0)) is True
    assert bool(failure()) is False


def test_from_dict_rebuilds_both_variants() -> None:
    assert Result.from_dict({"data": [1], "error": None}) == success([1])
    assert Result.from_dict({"data": None, "error": {"name": "E", "message": "m"}}) == failure(
        SerializableError(name="E", message="m")
    )


def test_from_dict_rejects_wrong_shape() -> None:
    with pytest.raises(ValueError):
        Result.from_dict({"payload": 1})
