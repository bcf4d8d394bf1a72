"""Unit tests for console exceptions."""

import pytest

from modules.core.exceptions import (
    ConfigurationError,
    ConsoleError,
    FetchFailure,
    InputReadFailure,
    MalformedEnvelope,
    MalformedField,
)


@pytest.mark.parametrize(
    "error, code",
    [
        (ConfigurationError(), "CFG_INVALID"),
        (FetchFailure(), "API_FETCH_FAILED"),
        (MalformedEnvelope(), "DATA_MALFORMED_ENVELOPE"),
        (MalformedField("active agents"), "DATA_MALFORMED_FIELD"),
        (InputReadFailure(), "IO_INPUT_READ_FAILED"),
    ],
)
def test_codes_and_base_class(error, code):
    assert isinstance(error, ConsoleError)
    assert error.code == code
    assert str(error) == error.message


def test_malformed_field_names_the_field():
    error = MalformedField("agents versions count")

    assert error.field_name == "agents versions count"
    assert "agents versions count" in error.message


def test_fetch_failure_keeps_status():
    assert FetchFailure("bad", status_code=503).status_code == 503
