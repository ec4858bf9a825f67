"""
JSON formatter for structured logging

Formats each log event as a single-line JSON object
"""

import json
from datetime import datetime
from typing import Any, Mapping

from cappie.core.log_level import LogLevel
from cappie.formatters.base_formatter import BaseFormatter


class JSONFormatter(BaseFormatter):
    """
    Format log events as newline-delimited JSON.

    Produces structured log output suitable for log aggregation systems.
    The reserved keys ``level``, ``time``, ``name`` and ``msg`` come
    first; fields are flattened into the same object afterwards, so a
    field with a reserved name replaces the reserved value.

    Example output:
        {"level":30,"time":"2025-06-21T12:34:56.000123+00:00","name":"api","msg":"user created","user_id":42}
    """

    def __init__(self, ensure_ascii: bool = False):
        """
        Initialize JSON formatter.

        Args:
            ensure_ascii: Escape non-ASCII characters
        """
        self.ensure_ascii = ensure_ascii

    def format(
        self,
        level: LogLevel,
        message: str,
        fields: Mapping[str, Any],
        timestamp: datetime,
        logger_name: str
    ) -> str:
        """
        Format log event as JSON.

        Returns:
            JSON string, or an empty string if a field value cannot be
            serialized
        """
        log_dict = {
            "level": int(level),
            "time": timestamp.isoformat(),
            "name": logger_name,
            "msg": message,
        }
        log_dict.update(fields)

        try:
            return json.dumps(
                log_dict,
                separators=(",", ":"),
                ensure_ascii=self.ensure_ascii,
                allow_nan=False,
            )
        except (TypeError, ValueError):
            return ""

    def __repr__(self) -> str:
        """String representation."""
        return f"JSONFormatter(ensure_ascii={self.ensure_ascii})"
