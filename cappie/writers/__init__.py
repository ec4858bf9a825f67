"""Writers module - Log output sinks"""

from cappie.writers.base_writer import BaseWriter
from cappie.writers.console_writer import ConsoleWriter
from cappie.writers.file_writer import FileWriter
from cappie.writers.multi_writer import MultiWriter

__all__ = ["BaseWriter", "ConsoleWriter", "FileWriter", "MultiWriter"]
