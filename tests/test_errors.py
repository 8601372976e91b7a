import warnings
from unittest import mock

import pytest

from gamecore.errors import (
    FatalError,
    MsgSeverityLevel,
    RecoverableWarning,
    debugger_printf,
    error_and_die,
    error_recoverable,
    fatal_error,
    find_start_of_file_name,
    guarantee_or_die,
    guarantee_recoverable,
    is_debugger_available,
    recoverable_warning,
)


@pytest.mark.parametrize(
    "path, expected",
    [
        ("C:\\dir\\file.cpp", "file.cpp"),
        ("a/b/c.py", "c.py"),
        ("plain", "plain"),
        ("mixed/dir\\name.hpp", "name.hpp"),
        ("dir/", ""),
    ],
)
def test_find_start_of_file_name(path, expected):
    assert find_start_of_file_name(path) == expected


def test_find_start_of_file_name_none():
    assert find_start_of_file_name(None) is None


def test_is_debugger_available_follows_trace():
    with mock.patch("sys.gettrace", return_value=lambda *a: None):
        assert is_debugger_available() is True
    with mock.patch("sys.gettrace", return_value=None):
        assert is_debugger_available() is False


def test_debugger_printf_writes_formatted(capsys):
    debugger_printf("%s-%d", "a", 1)
    assert capsys.readouterr().out == "a-1"


def test_fatal_error_with_reason(capsys):
    with pytest.raises(FatalError) as info:
        fatal_error("src/Game.cpp", "Update", 12, "bad state")
    err = info.value
    assert str(err) == "bad state"
    assert err.line_num == 12
    assert err.severity is MsgSeverityLevel.FATAL
    assert err.title.endswith(":: Error")
    out = capsys.readouterr().out
    assert "src/Game.cpp(12): bad state" in out
    assert "RUN-TIME FATAL ERROR on line 12 of Game.cpp, in Update()" in out


def test_fatal_error_condition_default_message():
    with pytest.raises(FatalError) as info:
        fatal_error("f.cpp", "fn", 3, "", "x > 0")
    assert info.value.message == 'ERROR: "x > 0" is false!'
    assert "x > 0" in info.value.details


def test_fatal_error_unspecified():
    with pytest.raises(FatalError) as info:
        fatal_error("f.cpp", "fn", 3)
    assert info.value.message == "Unspecified fatal error"
    assert "unconditional error" in info.value.details


def test_recoverable_warning_is_issued(capsys):
    with pytest.warns(RecoverableWarning) as record:
        result = recoverable_warning("a/b.cpp", "fn", 7, "careful")
    assert str(record[0].message) == "careful"
    assert result.message == "careful"
    assert result.severity is MsgSeverityLevel.WARNING
    assert "RUN-TIME RECOVERABLE WARNING on line 7 of b.cpp, in fn()" in capsys.readouterr().out


def test_recoverable_warning_condition_default():
    with pytest.warns(RecoverableWarning):
        result = recoverable_warning("a.cpp", "fn", 1, "", "ok")
    assert result.message == 'WARNING: "ok" is false!'


def test_recoverable_warning_unspecified():
    with pytest.warns(RecoverableWarning):
        result = recoverable_warning("a.cpp", "fn", 1)
    assert result.message == "Unspecified warning"


def test_error_and_die_reports_caller():
    with pytest.raises(FatalError) as info:
        error_and_die("boom")
    assert info.value.function_name == "test_error_and_die_reports_caller"
    assert info.value.file_path.endswith("test_errors.py")
    assert info.value.line_num > 0


def test_error_recoverable_reports_caller():
    with pytest.warns(RecoverableWarning):
        result = error_recoverable("hmm")
    assert result.function_name == "test_error_recoverable_reports_caller"


def test_guarantee_or_die_raises_on_false():
    with pytest.raises(FatalError) as info:
        guarantee_or_die(1 > 2)
    assert info.value.message.startswith('ERROR: "')
    assert "guarantee_or_die(" in info.value.condition_text


def test_guarantee_or_die_true_passes_value_through():
    assert guarantee_or_die(True, "fine") is None


def test_guarantee_recoverable_true_issues_nothing():
    with warnings.catch_warnings(record=True) as record:
        warnings.simplefilter("always")
        result = guarantee_recoverable(True, "fine")
    assert result is None
    assert len(record) == 0


def test_guarantee_recoverable_false_warns():
    with pytest.warns(RecoverableWarning):
        result = guarantee_recoverable(False, "off")
    assert result.message == "off"
    assert result.function_name == "test_guarantee_recoverable_false_warns"