"""Line and character I/O over the operator's terminal."""

from __future__ import annotations

import sys
from contextlib import contextmanager
from typing import Iterator, TextIO


class Terminal:
    """Thin wrapper over text streams with a scoped raw-mode switch."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self._stdin = stdin or sys.stdin
        self._stdout = stdout or sys.stdout

    def write(self, text: str) -> None:
        self._stdout.write(text)
        self._stdout.flush()

    def read_line(self, prompt: str) -> str:
        """Prompt and return one line without its terminator."""

        self.write(prompt)
        line = self._stdin.readline()
        if line == "":
            raise EOFError("input stream closed")
        return line.rstrip("\r\n")

    def read_char(self) -> str:
        """Return the next character, or an empty string at end of stream."""

        return self._stdin.read(1)

    def is_interactive(self) -> bool:
        try:
            return self._stdin.isatty()
        except ValueError:
            return False

    @contextmanager
    def raw_mode(self) -> Iterator[None]:
        """Switch the input TTY to raw mode and restore it on every exit path."""

        if not self.is_interactive():
            yield
            return

        import termios
        import tty

        fd = self._stdin.fileno()
        saved = termios.tcgetattr(fd)
        try:
            tty.setraw(fd)
            yield
        finally:
            termios.tcsetattr(fd, termios.TCSADRAIN, saved)
