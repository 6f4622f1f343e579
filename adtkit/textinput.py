"""Line-oriented reading of simple values from a text stream.

Every reader consumes one line (at most a fixed number of characters),
drops a trailing newline and converts the text. Leading or trailing
spaces are not accepted in numeric formats.
"""

from __future__ import annotations

import sys
from typing import TextIO

_LINE_LIMIT = 19
_DIGITS = frozenset("0123456789")

__all__ = [
    "InputFormatError",
    "read_integer",
    "read_double",
    "read_char",
    "read_string",
    "split_string",
    "is_integer_format",
    "is_double_format",
]


class InputFormatError(ValueError):
    """Raised when a line read from input does not have the expected format."""


def _read_line(stream: TextIO | None, limit: int) -> str:
    source = sys.stdin if stream is None else stream
    line = source.readline(limit)
    if line == "" and limit > 0:
        raise EOFError("end of input reached")
    return line[:-1] if line.endswith("\n") else line


def is_integer_format(text: str) -> bool:
    """Return True if text is an optional leading '-' followed only by digits."""
    body = text[1:] if text.startswith("-") else text
    return all(c in _DIGITS for c in body)


def is_double_format(text: str) -> bool:
    """Return True if text is an optional '-', digits and at most one '.'."""
    body = text[1:] if text.startswith("-") else text
    if body.count(".") > 1:
        return False
    return all(c in _DIGITS or c == "." for c in body)


def _leading_integer(text: str) -> int:
    negative = text.startswith("-")
    digits = text[1:] if negative else text
    if not digits:
        return 0
    value = int(digits)
    return -value if negative else value


def _leading_double(text: str) -> float:
    negative = text.startswith("-")
    body = text[1:] if negative else text
    if not any(c in _DIGITS for c in body):
        return -0.0 if negative else 0.0
    value = float(body)
    return -value if negative else value


def read_integer(stream: TextIO | None = None) -> int:
    """Read one line and return it as an integer.

    An empty line or a lone '-' reads as 0.
    """
    text = _read_line(stream, _LINE_LIMIT)
    if not is_integer_format(text):
        raise InputFormatError(f"not an integer: {text!r}")
    return _leading_integer(text)


def read_double(stream: TextIO | None = None) -> float:
    """Read one line and return it as a float.

    Lines made only of an optional sign and a dot read as 0.0.
    """
    text = _read_line(stream, _LINE_LIMIT)
    if not is_double_format(text):
        raise InputFormatError(f"not a decimal number: {text!r}")
    return _leading_double(text)


def read_char(stream: TextIO | None = None) -> str:
    """Read one line and return its first character."""
    text = _read_line(stream, _LINE_LIMIT)
    if not text:
        raise InputFormatError("no character was read")
    return text[0]


def read_string(max_chars: int, stream: TextIO | None = None) -> str:
    """Read at most max_chars - 1 characters of one line, without the newline."""
    if max_chars < 1:
        raise ValueError("max_chars must be at least 1")
    if max_chars == 1:
        return ""
    return _read_line(stream, max_chars - 1)


def split_string(string: str, n_tokens: int, delim: str) -> list[str | None]:
    """Split string on the first character of delim into n_tokens slots.

    A delimiter at the very end does not start a new token. Missing
    tokens are filled with None. More tokens than n_tokens is an error.
    """
    if not delim:
        raise ValueError("delimiter must not be empty")
    if n_tokens < 1:
        raise ValueError("n_tokens must be at least 1")
    separator = delim[0]
    tokens: list[str | None] = list(string.split(separator))
    if string.endswith(separator):
        tokens.pop()
    if len(tokens) > n_tokens:
        raise ValueError(
            f"string holds {len(tokens)} tokens, more than the {n_tokens} requested"
        )
    tokens.extend([None] * (n_tokens - len(tokens)))
    return tokens