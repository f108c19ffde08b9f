# errkit

Small helpers for command-line programs that need consistent error
reporting and strict parsing of numeric arguments. Requires Python 3.10 or
later and has no third-party dependencies.

## Error reporting

`errkit.errors` writes messages to standard error in one fixed shape:

```
ERROR  [ENOENT No such file or directory] could not open config
```

The "current error" is the error number of the `OSError` being handled at
the call site, so these functions are meant to be called inside an
`except OSError:` block. Outside such a block the error number is 0, which
is shown as `?UNKNOWN?`.

- `err_msg(fmt, *args)` flushes standard output, reports the current error
  and returns.
- `err_exit(fmt, *args)` flushes standard output, reports the current error
  and exits with status 1 (via `SystemExit`).
- `err_exit_immediate(fmt, *args)` reports the current error and leaves the
  process at once with status 1, without flushing standard output or
  running exit handlers.
- `err_exit_en(errnum, fmt, *args)` reports the given error number and
  exits with status 1.
- `fatal(fmt, *args)` reports a message without an error number, in the
  shape `ERROR : message`, and exits with status 1.
- `usage_err(fmt, *args)` writes `Usage: ` followed by the message, and
  `cmd_line_err(fmt, *args)` writes `Command-line usage error: ` followed by
  the message; both exit with status 1. No newline is added.
- `format_error(message, err)` builds the report line without printing it.
  Passing `None` for `err` leaves out the error-number part.

Messages use `%`-style formatting:

```python
from errkit.errors import err_exit

try:
    open(path)
except OSError:
    err_exit("cannot open %s", path)
```

If the `EF_DUMPCORE` environment variable is set to a non-empty value, the
functions that report an error and exit abort the process instead, so that
it dumps core.

## Numeric arguments

`errkit.getnum` parses integers strictly:

```python
from errkit.getnum import NumFlag, get_int, get_long

port = get_int("8080", NumFlag.GT_0, "port")
mask = get_long("0x1f", NumFlag.ANY_BASE, "mask")
```

Flags (combine them with `|`):

- `NumFlag.NONNEG`: the value must be zero or more.
- `NumFlag.GT_0`: the value must be greater than zero.
- `NumFlag.ANY_BASE`: the base is taken from the prefix (`0x` for
  hexadecimal, a leading `0` for octal, decimal otherwise).
- `NumFlag.BASE_8` and `NumFlag.BASE_16`: the value is octal or
  hexadecimal; in base 16 an optional `0x` prefix is accepted.

Decimal is the default. Leading whitespace and a sign are allowed; any
other trailing or stray characters are rejected.

Invalid input raises `NumberError`, a `ValueError` subclass with the
attributes `func_name`, `message`, `arg` and `name`. Its text reads, for
example:

```
getInt error (in port): value must be > 0
        offending text: 0
```

The reasons are: `null or empty string`, `strtol() failed` (outside the
64-bit signed range), `nonnumeric characters`, `negative value not allowed`,
`value must be > 0`, and, from `get_int` only, `integer out of range`
(outside the 32-bit signed range).

`parse_number(func_name, arg, flags, name)` is the shared parser behind
`get_long` and `get_int`; it reports errors under the given function name.

## Demo

```
errkit-demo
```

The demo tries to open a file named `aa` in the current directory. If it
cannot, it reports the failure with `err_exit` and exits with status 1;
otherwise it closes the file and exits with status 0.

## Tests

```
pip install -e .[test]
pytest
```