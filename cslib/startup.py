"""Running a program's main function with library error reporting."""

from __future__ import annotations

import sys
from collections.abc import Callable, Sequence
from typing import Any

EXIT_FAILURE = 1


class ErrorException(Exception):
    """An error reported by the library, carrying a plain message."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


def describe_exception(exc: BaseException) -> str:
    """Return the banner printed when an exception escapes the program."""
    return (
        "\n ***\n"
        " *** CSLIB \n"
        " *** An exception occurred during program execution: \n"
        " *** " + str(exc) + "\n ***\n\n"
    )


def main_wrapper(
    main: Callable[[list[str]], Any], argv: Sequence[str] | None = None
) -> int:
    """Call main(argv) and turn library errors into an exit status.

    An ErrorException is reported on standard error as "Error: <message>" and
    gives a failing status; any other exception is described and re-raised.
    """
    args = list(sys.argv if argv is None else argv)
    try:
        result = main(args)
    except ErrorException as exc:
        sys.stderr.write("Error: " + exc.message + "\n")
        return EXIT_FAILURE
    except Exception as exc:
        sys.stderr.write(describe_exception(exc))
        raise
    return 0 if result is None else int(result)