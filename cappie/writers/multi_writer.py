"""Fan-out writer"""

import sys
from typing import Iterable, List, Optional

from cappie.writers.base_writer import BaseWriter


class MultiWriter(BaseWriter):
    """
    Write every line to several writers, in order.

    Example:
        writer = (MultiWriter()
            .add_writer(ConsoleWriter())
            .add_writer(FileWriter("app.log")))
    """

    def __init__(self, writers: Optional[Iterable[BaseWriter]] = None):
        self._writers: List[BaseWriter] = list(writers or ())

    def add_writer(self, writer: BaseWriter) -> "MultiWriter":
        """Append a child writer."""
        self._writers.append(writer)
        return self

    @property
    def writers(self) -> List[BaseWriter]:
        """Child writers in write order."""
        return list(self._writers)

    def write(self, line: str) -> None:
        """Write line to every child; a failing child does not stop the rest."""
        for writer in self._writers:
            try:
                writer.write(line)
            except Exception as e:
                print(f"Writer error: {e}", file=sys.stderr)

    def flush(self) -> None:
        for writer in self._writers:
            if hasattr(writer, "flush"):
                try:
                    writer.flush()
                except Exception as e:
                    print(f"Writer error: {e}", file=sys.stderr)

    def __len__(self) -> int:
        return len(self._writers)

    def __repr__(self) -> str:
        return f"MultiWriter({self._writers!r})"
