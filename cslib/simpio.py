"""Console prompts that read whole lines and check numeric input."""

from __future__ import annotations

import re
import sys

_INT_RE = re.compile(r"\s*[+-]?\d+\s*")
_REAL_RE = re.compile(r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?\s*")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


def _read_line() -> str | None:
    line = sys.stdin.readline()
    if line == "":
        return None
    return line[:-1] if line.endswith("\n") else line


def _parse_int(line: str) -> int | None:
    if not _INT_RE.fullmatch(line):
        return None
    value = int(line)
    if not _INT_MIN <= value <= _INT_MAX:
        return None
    return value


def _parse_real(line: str) -> float | None:
    if not _REAL_RE.fullmatch(line):
        return None
    return float(line)


def _prompt_until(prompt: str, parse, complaint: str, fallback: str):
    while True:
        sys.stdout.write(prompt)
        sys.stdout.flush()
        line = _read_line()
        if line is None:
            raise EOFError("end of input while reading a value")
        value = parse(line)
        if value is not None:
            return value
        sys.stdout.write(complaint + "\n")
        if prompt == "":
            prompt = fallback


def get_integer(prompt: str = "") -> int:
    """Read lines until one holds a single integer, and return it."""
    return _prompt_until(
        prompt, _parse_int, "Illegal integer format. Try again.", "Enter an integer: "
    )


def get_real(prompt: str = "") -> float:
    """Read lines until one holds a single number, and return it."""
    return _prompt_until(
        prompt, _parse_real, "Illegal numeric format. Try again.", "Enter a number: "
    )


def get_line(prompt: str = "") -> str:
    """Print the prompt and return the next input line without its newline."""
    sys.stdout.write(prompt)
    sys.stdout.flush()
    line = _read_line()
    return "" if line is None else line