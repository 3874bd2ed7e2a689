"""Tests for the application exception hierarchy."""

from src.exceptions import AppError, ConfigurationError, DataValidationError


def test_subclasses_carry_codes_and_context():
    err = DataValidationError("bad row", context={"row": 3})
    assert isinstance(err, AppError)
    assert err.code == "DATA_VALIDATION_ERROR"
    assert str(err) == "DATA_VALIDATION_ERROR: bad row"
    assert err.to_dict() == {
        "error_code": "DATA_VALIDATION_ERROR",
        "message": "bad row",
        "context": {"row": 3},
        "is_transient": False,
    }
    assert ConfigurationError("nope").context == {}
