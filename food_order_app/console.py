"""Line-based console input and output."""

import sys
from typing import Optional, TextIO


class Console:
    """
    Reads one value per prompt and writes lines of text.

    Streams default to sys.stdin / sys.stdout, looked up on each call so
    redirected streams are honored.
    """

    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None):
        self._stdin = stdin
        self._stdout = stdout

    @property
    def stdin(self) -> TextIO:
        return self._stdin if self._stdin is not None else sys.stdin

    @property
    def stdout(self) -> TextIO:
        return self._stdout if self._stdout is not None else sys.stdout

    def say(self, text: str = "") -> None:
        self.stdout.write(f"{text}\n")
        self.stdout.flush()

    def ask(self, prompt: str) -> Optional[str]:
        """
        Print a prompt and read the answer.

        Returns:
            The line without its line ending, or None at end of input
        """
        self.say(prompt)
        return self.read()

    def read(self) -> Optional[str]:
        """Read one line without its line ending, or None at end of input."""
        line = self.stdin.readline()
        if line == "":
            return None
        return line.rstrip("\r\n")
