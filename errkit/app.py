"""Command that opens the file "aa" and reports the failure if it cannot."""

from __future__ import annotations

import os

from errkit.errors import err_exit

TARGET = "aa"


def main(argv: list[str] | None = None) -> int:
    """Open the target file read-only; exit with an error report on failure."""
    try:
        fd = os.open(TARGET, os.O_RDONLY)
    except OSError:
        err_exit("")
    os.close(fd)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())