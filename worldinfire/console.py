"""Terminal input and output for the game, with word-at-a-time reading."""

from __future__ import annotations

import re
import sys
import time
from collections import deque
from typing import TextIO

_LEADING_INT = re.compile(r"[+-]?\d+")


class GameOver(Exception):
    """Raised when the story ends and the game must stop."""


class Console:
    """Reads whitespace-separated words and writes story lines.

    ``delay`` scales every pause; a delay of 0 makes pauses instant.
    """

    def __init__(
        self,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        delay: float = 1.0,
    ) -> None:
        if delay < 0:
            raise ValueError("delay must not be negative")
        self._stdin = stdin if stdin is not None else sys.stdin
        self._stdout = stdout if stdout is not None else sys.stdout
        self.delay = delay
        self._pending: deque[str] = deque()

    def read_word(self) -> str:
        """Return the next whitespace-delimited word of input.

        Raises EOFError when the input is exhausted.
        """
        while not self._pending:
            line = self._stdin.readline()
            if not line:
                raise EOFError("no more input")
            self._pending.extend(line.split())
        return self._pending.popleft()

    def read_int(self) -> int:
        """Read an integer from the input.

        A word that does not start with a number reads as 0. When a word
        starts with a number followed by other text, the rest is kept for
        the next read.
        """
        word = self.read_word()
        match = _LEADING_INT.match(word)
        if match is None:
            return 0
        rest = word[match.end():]
        if rest:
            self._pending.appendleft(rest)
        return int(match.group())

    def say(self, text: str) -> None:
        """Write a line of text."""
        self._stdout.write(text + "\n")
        self._stdout.flush()

    def pause(self, seconds: float) -> None:
        """Wait for ``seconds`` scaled by the console's delay."""
        wait = seconds * self.delay
        if wait > 0:
            time.sleep(wait)