"""Value recognizers for type inference.

Each recognizer is a pure predicate ``value -> bool``. Catalogs refer to
recognizers by registry key (see ``RECOGNIZERS``) so dialect files can be
plain YAML.

The integer family is mutually exclusive: ``integer`` rejects
values that already fit ``smallint``, ``bigint`` rejects values that fit
``integer`` and ``numeric`` rejects values that fit ``bigint``. Each value
therefore lands on exactly one rank of the family.
"""

from __future__ import annotations

import math
import re
from collections.abc import Callable
from datetime import datetime

Recognizer = Callable[[str], bool]

SMALLINT_MIN, SMALLINT_MAX = -(2**15), 2**15 - 1
INTEGER_MIN, INTEGER_MAX = -(2**31), 2**31 - 1
BIGINT_MIN, BIGINT_MAX = -(2**63), 2**63 - 1

BOOLEAN_VALUES = frozenset({"true", "false", "t", "f"})

_INT_RE = re.compile(r"[+-]?[0-9]+")
_INFINITY_RE = re.compile(r"[+-]?(inf|infinity)", re.IGNORECASE)

_FRACTION = r"(?:\.(?P<fraction>[0-9]{1,9}))?"
_LOCAL_TIMESTAMP_RE = re.compile(
    r"(?P<year>[0-9]{4})-(?P<month>[0-9]{2})-(?P<day>[0-9]{2})[ T]"
    r"(?P<hour>[0-9]{2}):(?P<minute>[0-9]{2}):(?P<second>[0-9]{2})" + _FRACTION
)
_RFC3339_RE = re.compile(
    r"(?P<year>[0-9]{4})-(?P<month>[0-9]{2})-(?P<day>[0-9]{2})T"
    r"(?P<hour>[0-9]{2}):(?P<minute>[0-9]{2}):(?P<second>[0-9]{2})" + _FRACTION +
    r"(?P<offset>Z|[+-](?P<off_hour>[0-9]{2}):(?P<off_minute>[0-9]{2}))"
)

# Tried in order; the first match wins for day/month-ambiguous values.
DATE_FORMATS: list[tuple[str, re.Pattern[str], str]] = [
    ("iso", re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}"), "%Y-%m-%d"),
    ("us", re.compile(r"[0-9]{2}/[0-9]{2}/[0-9]{4}"), "%m/%d/%Y"),
    ("european", re.compile(r"[0-9]{2}/[0-9]{2}/[0-9]{4}"), "%d/%m/%Y"),
]


def _parse_int(value: str) -> int | None:
    if not _INT_RE.fullmatch(value):
        return None
    # More than 19 significant digits never fits in 64 bits.
    digits = value.lstrip("+-").lstrip("0") or "0"
    if len(digits) > 19:
        return None
    number = int(digits)
    return -number if value.startswith("-") else number


def _in_range(value: str, low: int, high: int) -> bool:
    number = _parse_int(value)
    return number is not None and low <= number <= high


def is_boolean(value: str) -> bool:
    """Explicit boolean literals only; 1/0 and yes/no are not booleans."""
    return value.strip().lower() in BOOLEAN_VALUES


def is_smallint(value: str) -> bool:
    return _in_range(value, SMALLINT_MIN, SMALLINT_MAX)


def is_integer(value: str) -> bool:
    """Signed 32-bit integer."""
    return _in_range(value, INTEGER_MIN, INTEGER_MAX)


def is_bigint(value: str) -> bool:
    """Signed 64-bit integer."""
    return _in_range(value, BIGINT_MIN, BIGINT_MAX)


def is_float(value: str) -> bool:
    """Parses as a double-precision number.

    Rejects surrounding whitespace and ``_`` separators, and finite-looking
    text that overflows to infinity.
    """
    if not value or value != value.strip() or "_" in value:
        return False
    try:
        number = float(value)
    except ValueError:
        return False
    if math.isinf(number) and not _INFINITY_RE.fullmatch(value):
        return False
    return True


def is_integer_type(value: str) -> bool:
    return is_integer(value) and not is_smallint(value)


def is_bigint_type(value: str) -> bool:
    return is_bigint(value) and not is_integer(value)


def is_numeric_type(value: str) -> bool:
    return is_float(value) and not is_bigint(value)


def _valid_clock(match: re.Match[str]) -> datetime | None:
    fraction = match.group("fraction") or "0"
    try:
        return datetime(
            int(match.group("year")),
            int(match.group("month")),
            int(match.group("day")),
            int(match.group("hour")),
            int(match.group("minute")),
            int(match.group("second")),
            int(fraction.ljust(6, "0")[:6]),
        )
    except ValueError:
        return None


def is_timestamp(value: str) -> bool:
    """``YYYY-MM-DD HH:MM:SS``, ``YYYY-MM-DDTHH:MM:SS`` (optionally with
    fractional seconds) or RFC3339 with a ``Z``/``±HH:MM`` offset."""
    match = _LOCAL_TIMESTAMP_RE.fullmatch(value)
    if match:
        return _valid_clock(match) is not None

    match = _RFC3339_RE.fullmatch(value)
    if not match or _valid_clock(match) is None:
        return False
    if match.group("offset") == "Z":
        return True
    return int(match.group("off_hour")) <= 23 and int(match.group("off_minute")) <= 59


def match_date_format(value: str) -> str | None:
    """Name of the first date format that parses ``value``.

    ISO is tried first, then US (month first), then European (day first),
    so ``03/04/2024`` is read as March 4th.
    """
    for name, shape, fmt in DATE_FORMATS:
        if not shape.fullmatch(value):
            continue
        try:
            datetime.strptime(value, fmt)
        except ValueError:
            continue
        return name
    return None


def is_date(value: str) -> bool:
    return match_date_format(value) is not None


def bounded_text(max_length: int) -> Recognizer:
    """Recognizer for text of at most ``max_length`` characters."""

    def recognize(value: str) -> bool:
        return len(value) <= max_length

    return recognize


def always(value: str) -> bool:
    return True


# Registry keys used by dialect catalogs. Bounded text is built per catalog
# from its max_length, so it is registered as a factory.
RECOGNIZERS: dict[str, Recognizer] = {
    "boolean": is_boolean,
    "smallint": is_smallint,
    "integer": is_integer_type,
    "bigint": is_bigint_type,
    "numeric": is_numeric_type,
    "timestamp": is_timestamp,
    "date": is_date,
    "any": always,
}

RECOGNIZER_FACTORIES: dict[str, Callable[[int], Recognizer]] = {
    "bounded_text": bounded_text,
}
