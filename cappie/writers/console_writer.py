"""Console writer"""

import sys
from typing import Optional, TextIO

from cappie.writers.base_writer import BaseWriter


class ConsoleWriter(BaseWriter):
    """Write lines to stdout or stderr."""

    def __init__(self, stream: Optional[TextIO] = None, use_stderr: bool = False):
        """
        Initialize console writer.

        Args:
            stream: Output stream (default: sys.stdout, or sys.stderr)
            use_stderr: Write to stderr instead of stdout
        """
        self._stream = stream
        self.use_stderr = use_stderr

    @property
    def stream(self) -> TextIO:
        """Target stream, resolved at write time unless set explicitly."""
        if self._stream is not None:
            return self._stream
        return sys.stderr if self.use_stderr else sys.stdout

    def write(self, line: str) -> None:
        """Write line followed by a newline."""
        try:
            stream = self.stream
            stream.write(line + "\n")
            stream.flush()
        except (OSError, ValueError):
            # Closed or broken stream: the line is dropped
            return

    def flush(self) -> None:
        """Flush stream."""
        try:
            self.stream.flush()
        except (OSError, ValueError):
            return

    def __repr__(self) -> str:
        target = "stderr" if self.use_stderr else "stdout"
        if self._stream is not None:
            target = "stream"
        return f"ConsoleWriter({target})"
