"""
Timestamp formatting with strftime-style tokens

Only a fixed set of tokens is interpreted; every other ``%x`` sequence
is copied to the output unchanged, so the result never depends on the
platform's strftime behaviour for unknown directives.
"""

from datetime import datetime
from typing import Callable, Dict

_SIMPLE_TOKENS = "YmdHMSybBaAjIpzZ"

_COMPOSITE_TOKENS: Dict[str, str] = {
    "F": "%Y-%m-%d",
    "T": "%H:%M:%S",
    "D": "%m/%d/%y",
    "R": "%H:%M",
}

_LITERAL_TOKENS: Dict[str, str] = {
    "%": "%",
    "n": "\n",
    "t": "\t",
}


def _fraction(timestamp: datetime, digits: int) -> str:
    nanos = f"{timestamp.microsecond:06d}000"
    return nanos[:digits]


_SPECIAL_TOKENS: Dict[str, Callable[[datetime], str]] = {
    "e": lambda ts: f"{ts.day:>2}",
    "s": lambda ts: str(int(ts.timestamp())),
    "f": lambda ts: _fraction(ts, 6),
}


def _expand(timestamp: datetime, token: str) -> str:
    if token in _SIMPLE_TOKENS:
        return timestamp.strftime("%" + token)
    if token in _COMPOSITE_TOKENS:
        return timestamp.strftime(_COMPOSITE_TOKENS[token])
    if token in _LITERAL_TOKENS:
        return _LITERAL_TOKENS[token]
    return _SPECIAL_TOKENS[token](timestamp)


def format_timestamp(timestamp: datetime, time_format: str) -> str:
    """
    Format a timestamp.

    Args:
        timestamp: Time to format
        time_format: Pattern such as ``"%H:%M:%S"``. Besides the usual
            date/time tokens, fractional seconds are available as
            ``%f`` (microseconds), ``%3f``/``%6f``/``%9f`` and the
            dot-prefixed ``%.3f``/``%.6f``/``%.9f``/``%.f``.

    Returns:
        Formatted timestamp

    Example:
        format_timestamp(ts, "%Y-%m-%dT%H:%M:%S%.3fZ")
        # "2025-06-21T12:34:56.789Z"
    """
    out = []
    i = 0
    length = len(time_format)

    while i < length:
        char = time_format[i]
        if char != "%" or i + 1 >= length:
            out.append(char)
            i += 1
            continue

        token = time_format[i + 1]

        # Fractional seconds: %3f %6f %9f %.3f %.6f %.9f %.f
        if token == "." or token in "369":
            dot = token == "."
            j = i + 2 if dot else i + 1
            digits = 6
            if j < length and time_format[j] in "369":
                digits = int(time_format[j])
                j += 1
            if j < length and time_format[j] == "f":
                out.append(("." if dot else "") + _fraction(timestamp, digits))
                i = j + 1
                continue
            out.append("%" + token)
            i += 2
            continue

        if (token in _SIMPLE_TOKENS or token in _COMPOSITE_TOKENS
                or token in _LITERAL_TOKENS or token in _SPECIAL_TOKENS):
            out.append(_expand(timestamp, token))
        else:
            out.append("%" + token)
        i += 2

    return "".join(out)
