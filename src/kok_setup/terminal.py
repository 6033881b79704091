"""Line-oriented terminal I/O for the setup wizard."""

import os
import sys
from typing import TextIO

from kok_setup.constants import COLORS, RESET

YES_ANSWERS = frozenset({"y", "yes"})


def supports_color(stream: TextIO) -> bool:
    """Return whether ANSI color output should be used on stream."""
    if os.getenv("NO_COLOR") is not None:
        return False
    if os.getenv("TERM", "").lower() == "dumb":
        return False
    return hasattr(stream, "isatty") and stream.isatty()


class Terminal:
    """Print colored status lines and read one-line answers.

    Every prompt blocks until a full line arrives on ``stdin``. Answers are
    returned with surrounding whitespace stripped.
    """

    def __init__(
        self,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        color: bool | None = None,
    ) -> None:
        self._stdin = stdin if stdin is not None else sys.stdin
        self._stdout = stdout if stdout is not None else sys.stdout
        self._color = supports_color(self._stdout) if color is None else color

    def log(self, message: str, color: str = "reset") -> None:
        if self._color:
            message = f"{COLORS[color]}{message}{RESET}"
        print(message, file=self._stdout)

    def ask(self, question: str) -> str:
        print(question, end="", file=self._stdout, flush=True)
        line = self._stdin.readline()
        if not line:
            raise EOFError("input closed while waiting for an answer")
        return line.strip()

    def confirm(self, question: str) -> bool:
        """Ask a y/n question; only 'y' or 'yes' (any case) count as yes."""
        return self.ask(question).lower() in YES_ANSWERS
