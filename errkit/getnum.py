"""Strict parsing of integer command-line arguments."""

from __future__ import annotations

import enum
import string
from itertools import takewhile

__all__ = ["NumFlag", "NumberError", "parse_number", "get_long", "get_int"]

_LONG_MIN = -(2**63)
_LONG_MAX = 2**63 - 1
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_WHITESPACE = " \t\n\v\f\r"
_DIGITS = string.digits + string.ascii_lowercase


class NumFlag(enum.IntFlag):
    """Constraints and base selection for number parsing."""

    NONE = 0
    NONNEG = 0o1
    GT_0 = 0o2
    ANY_BASE = 0o100
    BASE_8 = 0o200
    BASE_16 = 0o400


class NumberError(ValueError):
    """Raised when an argument is not an acceptable number."""

    def __init__(self, func_name: str, message: str, arg: str | None, name: str | None):
        self.func_name = func_name
        self.message = message
        self.arg = arg
        self.name = name
        text = f"{func_name} error"
        if name is not None:
            text += f" (in {name})"
        text += f": {message}"
        if arg:
            text += f"\n        offending text: {arg}"
        super().__init__(text)


def _base_for(flags: int) -> int:
    if flags & NumFlag.ANY_BASE:
        return 0
    if flags & NumFlag.BASE_8:
        return 8
    if flags & NumFlag.BASE_16:
        return 16
    return 10


def _strtol(text: str, base: int) -> tuple[int, bool, bool]:
    """Parse like strtol: return (value, overflowed, whole text consumed)."""
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest and rest[0] in "+-":
        sign = -1 if rest[0] == "-" else 1
        rest = rest[1:]
    if base in (0, 16) and rest[:2].lower() == "0x" and rest[2:3].lower() in string.hexdigits[:16] and rest[2:3]:
        rest = rest[2:]
        base = 16
    elif base == 0:
        base = 8 if rest.startswith("0") else 10
    valid = set(_DIGITS[:base])
    digits = "".join(takewhile(lambda c: c.lower() in valid, rest))
    if not digits:
        return 0, False, False
    value = sign * int(digits, base)
    overflow = not _LONG_MIN <= value <= _LONG_MAX
    if overflow:
        value = _LONG_MAX if sign > 0 else _LONG_MIN
    return value, overflow, len(digits) == len(rest)


def parse_number(func_name: str, arg: str | None, flags: int = 0, name: str | None = None) -> int:
    """Parse *arg* as a long integer under *flags*, raising NumberError on failure."""
    if not arg:
        raise NumberError(func_name, "null or empty string", arg, name)
    value, overflow, complete = _strtol(arg, _base_for(flags))
    if overflow:
        raise NumberError(func_name, "strtol() failed", arg, name)
    if not complete:
        raise NumberError(func_name, "nonnumeric characters", arg, name)
    if flags & NumFlag.NONNEG and value < 0:
        raise NumberError(func_name, "negative value not allowed", arg, name)
    if flags & NumFlag.GT_0 and value <= 0:
        raise NumberError(func_name, "value must be > 0", arg, name)
    return value


def get_long(arg: str | None, flags: int = 0, name: str | None = None) -> int:
    """Parse *arg* as a 64-bit signed integer."""
    return parse_number("getLong", arg, flags, name)


def get_int(arg: str | None, flags: int = 0, name: str | None = None) -> int:
    """Parse *arg* as a 32-bit signed integer."""
    value = parse_number("getInt", arg, flags, name)
    if not _INT_MIN <= value <= _INT_MAX:
        raise NumberError("getInt", "integer out of range", arg, name)
    return value