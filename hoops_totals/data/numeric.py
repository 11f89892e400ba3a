"""Tolerant parsing of the string-typed fields found in scraped box scores.

Season files store every box-score number as a string, and older records
omit optional fields (blocks, steals, turnovers, fouls) entirely. These
helpers never raise: anything missing, malformed or out of float range
degrades to zero.
"""

from __future__ import annotations

import math
import re

_INT_RE = re.compile(r"^\s*([+-]?\d+)")
_FLOAT_RE = re.compile(r"^\s*([+-]?(?:\d+(?:\.\d*)?|\.\d+))")


def parse_int(value) -> int:
    """Parse the leading integer of ``value``.

    Examples::

        >>> parse_int("42")
        42
        >>> parse_int("12.7")
        12
        >>> parse_int(None)
        0
        >>> parse_int("n/a")
        0
    """
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return _bounded(value)
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else 0
    match = _INT_RE.match(str(value))
    if not match:
        return 0
    try:
        number = int(match.group(1))
    except ValueError:
        # digit strings past the interpreter's int conversion limit
        return 0
    return _bounded(number)


def parse_pct(value) -> float:
    """Parse a percentage string such as ``"47.5%"`` into ``47.5``."""
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        return _finite(value, 0.0)
    match = _FLOAT_RE.match(str(value).replace("%", ""))
    if not match:
        return 0.0
    return _finite(match.group(1), 0.0)


def parse_float(value, default: float = 0.0) -> float:
    """Parse a float, returning ``default`` when the value is unusable."""
    if value is None or isinstance(value, bool):
        return default
    return _finite(value, default)


def _finite(value, default: float) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return default
    return number if math.isfinite(number) else default


def _bounded(number: int) -> int:
    # Counts too large for a float cannot take part in any rate or average.
    try:
        float(number)
    except OverflowError:
        return 0
    return number
