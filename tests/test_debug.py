import pytest

from zonekit.debug import CrabError, enable_log, enable_warnings, error, log_enabled, warn


@pytest.fixture
def warnings_on():
    enable_warnings(True)
    yield
    enable_warnings(False)


def test_error_raises_with_formatted_message():
    with pytest.raises(CrabError) as info:
        error("value ", 42, " is bad")
    assert str(info.value) == "CRAB ERROR: value 42 is bad\n"


def test_error_is_runtime_error():
    with pytest.raises(RuntimeError):
        error("x")


def test_warn_silent_when_disabled(capsys):
    enable_warnings(False)
    warn("nothing to see")
    assert capsys.readouterr().err == ""


def test_warn_writes_to_stderr(capsys, warnings_on):
    warn("Unhandled constraint ", 3)
    captured = capsys.readouterr()
    assert captured.err == "CRAB WARNING: Unhandled constraint 3\n"
    assert captured.out == ""


def test_log_tags():
    assert log_enabled("zones-split-unique-tag") is False
    enable_log("zones-split-unique-tag")
    assert log_enabled("zones-split-unique-tag") is True
    assert log_enabled("another-unused-tag") is False