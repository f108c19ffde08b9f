"""Diagnostic reporting helpers that print a one-line error to stderr and optionally exit.

Functions that report "the current error number" take it from the OSError being
handled at the call site (the exception active in an ``except`` block). Outside
such a block the error number is 0.
"""

from __future__ import annotations

import errno as _errno
import os
import sys
from typing import NoReturn

__all__ = [
    "format_error",
    "err_msg",
    "err_exit",
    "err_exit_immediate",
    "err_exit_en",
    "fatal",
    "usage_err",
    "cmd_line_err",
]

EXIT_FAILURE = 1
_BUF_SIZE = 1007
_UNKNOWN = "?UNKNOWN?"


def _current_errno() -> int:
    exc = sys.exc_info()[1]
    if isinstance(exc, OSError) and exc.errno is not None:
        return exc.errno
    return 0


def _error_name(err: int) -> str:
    if err > 0:
        return _errno.errorcode.get(err, _UNKNOWN)
    return _UNKNOWN


def format_error(message: str, err: int | None) -> str:
    """Build the error line for *message*; *err* of None omits the error-number part."""
    if err is None:
        err_text = ":"
    else:
        err_text = f" [{_error_name(err)} {os.strerror(err)}]"
    line = f"ERROR {err_text} {message}\n"
    return line[: _BUF_SIZE - 1]


def _output_error(err: int | None, flush_stdout: bool, fmt: str, args: tuple) -> None:
    line = format_error(fmt % args, err)
    if flush_stdout:
        sys.stdout.flush()
    sys.stderr.write(line)
    sys.stderr.flush()


def _terminate(clean_exit: bool) -> NoReturn:
    if os.environ.get("EF_DUMPCORE"):
        os.abort()
    if clean_exit:
        sys.exit(EXIT_FAILURE)
    os._exit(EXIT_FAILURE)
    raise SystemExit(EXIT_FAILURE)  # only reached if os._exit is intercepted


def err_msg(fmt: str, *args: object) -> None:
    """Report the current error number and message without exiting."""
    _output_error(_current_errno(), True, fmt, args)


def err_exit(fmt: str, *args: object) -> NoReturn:
    """Report the current error number and message, then exit with failure."""
    _output_error(_current_errno(), True, fmt, args)
    _terminate(True)


def err_exit_immediate(fmt: str, *args: object) -> NoReturn:
    """Like err_exit, but skips flushing stdout and leaves without cleanup."""
    _output_error(_current_errno(), False, fmt, args)
    _terminate(False)


def err_exit_en(errnum: int, fmt: str, *args: object) -> NoReturn:
    """Report the given error number and message, then exit with failure."""
    _output_error(errnum, True, fmt, args)
    _terminate(True)


def fatal(fmt: str, *args: object) -> NoReturn:
    """Report a message with no error number, then exit with failure."""
    _output_error(None, True, fmt, args)
    _terminate(True)


def _prefixed_exit(prefix: str, fmt: str, args: tuple) -> NoReturn:
    sys.stdout.flush()
    sys.stderr.write(prefix + fmt % args)
    sys.stderr.flush()
    sys.exit(EXIT_FAILURE)


def usage_err(fmt: str, *args: object) -> NoReturn:
    """Print a usage message to stderr and exit with failure."""
    _prefixed_exit("Usage: ", fmt, args)


def cmd_line_err(fmt: str, *args: object) -> NoReturn:
    """Print a command-line usage error to stderr and exit with failure."""
    _prefixed_exit("Command-line usage error: ", fmt, args)