"""Console input: line reading and the guess / feedback text formats."""

from __future__ import annotations

import re
import sys
from typing import TextIO

from torovaca_env import Code, Feedback, InvalidFormat

FEEDBACK_PATTERN = re.compile(r"^(\d)t(\d)v$", re.ASCII)


class InputStreamFailure(EOFError):
    """The console input stream closed while a line was expected."""


def parse_guess(text: str) -> Code:
    """Parse a bare decimal integer and validate it as a Code."""
    text = text.strip()
    if not (text.isascii() and text.isdecimal()):
        raise InvalidFormat(f"{text!r} is not a number")
    return Code.from_integer(int(text))


def parse_feedback(text: str) -> Feedback:
    """Parse ``<digit>T<digit>V`` (case-insensitive) into a Feedback."""
    m = FEEDBACK_PATTERN.match(text.strip().lower())
    if m is None:
        raise InvalidFormat(f"{text.strip()!r} does not look like 1T2V")
    return Feedback(int(m.group(1)), int(m.group(2)))


class Console:
    """Blocking line-oriented terminal I/O.

    Parameters
    ----------
    stdin, stdout : TextIO or None
        Streams to use; None means the process streams at call time.
    """

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self._stdin = stdin
        self._stdout = stdout

    def read_line(self, prompt: str = "") -> str:
        """Print *prompt* (no newline) and return the next input line.

        Raises
        ------
        InputStreamFailure
            If the input stream is exhausted.
        """
        out = self._stdout or sys.stdout
        if prompt:
            out.write(prompt)
            out.flush()
        line = (self._stdin or sys.stdin).readline()
        if not line:
            raise InputStreamFailure("input stream closed")
        return line.rstrip("\n")

    def pause(self) -> None:
        print("Press 'Enter' to continue...", file=self._stdout or sys.stdout)
        self.read_line()
