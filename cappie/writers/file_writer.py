"""File writer"""

from pathlib import Path
from typing import Union

from cappie.writers.base_writer import BaseWriter


class FileWriter(BaseWriter):
    """
    Append lines to a file.

    The file is opened, appended to and closed on every write; no handle
    is kept between calls. Concurrent writers get no ordering guarantee.
    """

    def __init__(self, filepath: Union[str, Path], encoding: str = "utf-8"):
        """
        Initialize file writer.

        Args:
            filepath: Path to log file (created on first write)
            encoding: File encoding (default: 'utf-8')
        """
        self.filepath = Path(filepath)
        self.encoding = encoding

    def write(self, line: str) -> None:
        """Append line followed by a newline."""
        try:
            self.filepath.parent.mkdir(parents=True, exist_ok=True)
            with open(self.filepath, "a", encoding=self.encoding) as f:
                f.write(line + "\n")
        except (OSError, ValueError):
            # Delivery is at most once; an unwritable file or an
            # unencodable line drops the line
            return

    def __repr__(self) -> str:
        return f"FileWriter('{self.filepath}')"
