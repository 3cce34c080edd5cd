"""Line- and word-oriented terminal input and output."""

from __future__ import annotations

import re
import sys
from typing import TextIO

_WORD_PATTERN = re.compile(r"\S+")


class Console:
    """Reads whitespace-separated words or whole lines and writes text.

    Word reads consume only the word; the rest of the current line stays
    pending, so a following ``read_line`` returns that remainder.
    """

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self._stdin = stdin if stdin is not None else sys.stdin
        self._stdout = stdout if stdout is not None else sys.stdout
        self._rest: str | None = None

    def _next_line(self) -> str:
        line = self._stdin.readline()
        if line == "":
            raise EOFError("no more input")
        return line

    def read_token(self) -> str:
        """Return the next whitespace-delimited word, skipping blank lines."""
        while True:
            if self._rest is None:
                self._rest = self._next_line()
            stripped = self._rest.lstrip()
            if stripped:
                break
            self._rest = None
        match = _WORD_PATTERN.match(stripped)
        assert match is not None
        self._rest = stripped[match.end():]
        return match.group()

    def read_line(self) -> str:
        """Return the rest of the current line, or the next line, without its newline."""
        if self._rest is not None:
            line, self._rest = self._rest, None
        else:
            line = self._next_line()
        return line.rstrip("\r\n")

    def read_int(self) -> int:
        """Read a word and parse it as an integer; raises ValueError if it is not one."""
        return int(self.read_token())

    def read_float(self) -> float:
        """Read a word and parse it as a float; raises ValueError if it is not one."""
        return float(self.read_token())

    def write(self, text: str) -> None:
        """Write text to the output and flush it."""
        self._stdout.write(text)
        self._stdout.flush()