"""
Base writer interface
"""

from abc import ABC, abstractmethod


class BaseWriter(ABC):
    """
    Abstract base class for log writers.

    A writer delivers one finished line to a destination. Delivery is
    best-effort: write() never raises for I/O problems.
    """

    @abstractmethod
    def write(self, line: str) -> None:
        """
        Write one formatted line.

        Args:
            line: Formatted log line without trailing newline
        """
        pass

    def flush(self) -> None:
        """Flush buffered output, if any."""

    def __call__(self, line: str) -> None:
        """Allow writers to be callable."""
        self.write(line)
