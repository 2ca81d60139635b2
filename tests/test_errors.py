import pytest

from entiqon.errors import CausableError, ProcessStageError


def test_causable_error_is_exception():
    err = CausableError("cause", "reason")
    with pytest.raises(Exception) as info:
        raise err
    assert info.value is err
    assert info.value.cause == "cause"
    assert str(info.value) == "reason"


def test_new_causable_error():
    err = CausableError("Database", "Connection failed")
    assert err.cause == "Database"
    assert err.reason == "Connection failed"
    assert str(err) == "Connection failed"


def test_causable_error_empty_fields():
    err = CausableError("", "")
    assert err.cause == ""
    assert err.reason == ""
    assert str(err) == ""


def test_process_stage_error_example():
    err = ProcessStageError("Init", "Loader", "Failed to load resource", Exception("file not found"))
    assert str(err) == "[Loader] at stage Init: Failed to load resource: file not found"


def test_process_stage_error_basic():
    wrapped = Exception("file not found")
    err = ProcessStageError("Init", "Loader", "Failed to load resource", wrapped)

    assert isinstance(err, CausableError)
    assert err.stage == "Init"
    assert err.cause == "Loader"
    assert err.reason == "Failed to load resource"
    assert err.err is wrapped
    assert err.__cause__ is wrapped
    assert str(err) == "[Loader] at stage Init: Failed to load resource: file not found"


def test_process_stage_error_no_wrapped():
    err = ProcessStageError("Parse", "Parser", "Syntax error", None)
    assert str(err) == "[Parser] at stage Parse: Syntax error"
    assert err.err is None
    assert err.__cause__ is None


def test_process_stage_error_caught_as_causable():
    err = ProcessStageError("Parse", "Parser", "Syntax error", None)
    with pytest.raises(CausableError) as info:
        raise err
    assert info.value is err
    assert info.value.cause == "Parser"
    assert info.value.reason == "Syntax error"
    assert str(info.value) == "[Parser] at stage Parse: Syntax error"