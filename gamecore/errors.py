"""Fatal errors, recoverable warnings and debugger output."""

from __future__ import annotations

import enum
import inspect
import sys
import warnings

from .string_utils import DEFAULT_MAX_LENGTH, stringf

_APP_NAME = "Unnamed Application"
_DETAILS_HEADER = "\n---------- Debugging Details Follow ----------\n"
_FATAL_BANNER = "=" * 78
_WARNING_BANNER = "-" * 78


class MsgSeverityLevel(enum.Enum):
    """How serious a reported message is."""

    INFORMATION = enum.auto()
    QUESTION = enum.auto()
    WARNING = enum.auto()
    FATAL = enum.auto()


class _Diagnostic:
    """Shared fields of fatal errors and recoverable warnings."""

    severity = MsgSeverityLevel.INFORMATION

    def __init__(
        self,
        message: str,
        *,
        title: str = "",
        details: str = "",
        file_path: str | None = None,
        function_name: str | None = None,
        line_num: int = 0,
        condition_text: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.title = title
        self.details = details
        self.file_path = file_path
        self.function_name = function_name
        self.line_num = line_num
        self.condition_text = condition_text


class FatalError(_Diagnostic, Exception):
    """A condition that must never happen; execution cannot continue."""

    severity = MsgSeverityLevel.FATAL


class RecoverableWarning(_Diagnostic, UserWarning):
    """A condition that should not happen, but execution may continue."""

    severity = MsgSeverityLevel.WARNING


def is_debugger_available() -> bool:
    """Return True when a trace function (a debugger) is installed."""
    return sys.gettrace() is not None


def debugger_printf(fmt: str, *args: object) -> None:
    """Write a printf-formatted message to standard output."""
    sys.stdout.write(stringf(fmt, *args, max_length=DEFAULT_MAX_LENGTH))
    sys.stdout.flush()


def find_start_of_file_name(file_path: str | None) -> str | None:
    """Return the part of ``file_path`` after its last slash or backslash."""
    if file_path is None:
        return None
    cut = max(file_path.rfind("/"), file_path.rfind("\\"))
    return file_path[cut + 1 :]


def _condition_details(kind: str, condition_text, function_name, line_num, file_name) -> str:
    if condition_text:
        return (
            f"\nThis {kind} was triggered by a run-time condition check:\n"
            f"  {condition_text}\n  from {function_name}(), line {line_num} in {file_name}\n"
        )
    return (
        f"\nThis was an unconditional {kind} triggered by reaching\n"
        f" line {line_num} of {file_name}, in {function_name}()\n"
    )


def _print_report(banner: str, heading: str, file_path, function_name, line_num, message) -> None:
    file_name = find_start_of_file_name(file_path)
    debugger_printf("\n%s\n", banner)
    debugger_printf("%s on line %i of %s, in %s()\n", heading, line_num, file_name, function_name)
    debugger_printf("%s(%d): %s\n", file_path, line_num, message)
    debugger_printf("%s\n\n", banner)


def fatal_error(
    file_path: str | None,
    function_name: str | None,
    line_num: int,
    reason: str = "",
    condition_text: str | None = None,
) -> None:
    """Report a fatal error and raise :class:`FatalError`."""
    if reason:
        message = reason
    elif condition_text:
        message = f'ERROR: "{condition_text}" is false!'
    else:
        message = "Unspecified fatal error"

    file_name = find_start_of_file_name(file_path)
    details = message + _DETAILS_HEADER + _condition_details(
        "error", condition_text, function_name, line_num, file_name
    )
    _print_report(_FATAL_BANNER, "RUN-TIME FATAL ERROR", file_path, function_name, line_num, message)
    raise FatalError(
        message,
        title=f"{_APP_NAME} :: Error",
        details=details,
        file_path=file_path,
        function_name=function_name,
        line_num=line_num,
        condition_text=condition_text,
    )


def recoverable_warning(
    file_path: str | None,
    function_name: str | None,
    line_num: int,
    reason: str = "",
    condition_text: str | None = None,
) -> RecoverableWarning:
    """Report a recoverable problem as a :class:`RecoverableWarning` and continue."""
    if reason:
        message = reason
    elif condition_text:
        message = f'WARNING: "{condition_text}" is false!'
    else:
        message = "Unspecified warning"

    file_name = find_start_of_file_name(file_path)
    details = message + _DETAILS_HEADER + _condition_details(
        "warning", condition_text, function_name, line_num, file_name
    )
    _print_report(
        _WARNING_BANNER, "RUN-TIME RECOVERABLE WARNING", file_path, function_name, line_num, message
    )
    warning = RecoverableWarning(
        message,
        title=f"{_APP_NAME} :: Warning",
        details=details,
        file_path=file_path,
        function_name=function_name,
        line_num=line_num,
        condition_text=condition_text,
    )
    warnings.warn(warning, stacklevel=2)
    return warning


def _caller_info() -> tuple[str, str, int, str | None]:
    """File, function, line and source text of the caller of a public helper."""
    frame = inspect.currentframe()
    try:
        target = frame.f_back.f_back if frame is not None and frame.f_back is not None else None
        if target is None:
            return "<unknown>", "<unknown>", 0, None
        info = inspect.getframeinfo(target, context=1)
        source = info.code_context[0].strip() if info.code_context else None
        return info.filename, info.function, info.lineno, source
    finally:
        del frame


def error_and_die(message: str = "") -> None:
    """Raise a :class:`FatalError` located at the caller."""
    file_path, function_name, line_num, _ = _caller_info()
    fatal_error(file_path, function_name, line_num, message)


def error_recoverable(message: str = "") -> RecoverableWarning:
    """Issue a :class:`RecoverableWarning` located at the caller."""
    file_path, function_name, line_num, _ = _caller_info()
    return recoverable_warning(file_path, function_name, line_num, message)


def guarantee_or_die(condition: object, message: str = "") -> None:
    """Raise a :class:`FatalError` if ``condition`` is false."""
    if condition:
        return
    file_path, function_name, line_num, source = _caller_info()
    fatal_error(file_path, function_name, line_num, message, source or repr(condition))


def guarantee_recoverable(condition: object, message: str = "") -> RecoverableWarning | None:
    """Issue a :class:`RecoverableWarning` if ``condition`` is false."""
    if condition:
        return None
    file_path, function_name, line_num, source = _caller_info()
    return recoverable_warning(file_path, function_name, line_num, message, source or repr(condition))