"""
Field decoding for ABO records.

Pure functions turning a fixed-width slice into a date, an amount or a
trimmed string. None of them raise: malformed input decodes to None (dates),
zero (amounts) or an empty string, and parsing of the document continues.
"""

from __future__ import annotations

import re
from decimal import Decimal

from .models import AboDate

# Characters removed from both ends of fields and lines
TRIM_CHARS = " \t\n\r\0\x0b"

ZERO_AMOUNT = Decimal("0.00")

_DATE_PATTERN = re.compile(r"[0-9]{6}")
_DIGITS_PATTERN = re.compile(r"[0-9]+")


def slice_field(line: str, start: int, width: int) -> str:
    """
    Cut `width` characters at `start`.

    Lines shorter than the field yield an undersized or empty slice.
    """
    return line[start : start + width]


def decode_text(raw: str) -> str:
    """Trim ASCII whitespace from both ends."""
    return raw.strip(TRIM_CHARS)


def decode_date(raw: str) -> AboDate:
    """
    Decode a DDMMYY date.

    The year is always 20YY. Day must be 1-31 and month 1-12; there is no
    day-of-month check against the calendar, so "310225" gives "2025-02-31".

    Args:
        raw: 6-character slice

    Returns:
        "YYYY-MM-DD" or None if the slice is not a date
    """
    value = raw.strip(TRIM_CHARS)
    if not _DATE_PATTERN.fullmatch(value):
        return None

    day = value[:2]
    month = value[2:4]
    year = value[4:6]

    if not (1 <= int(day) <= 31) or not (1 <= int(month) <= 12):
        return None

    return f"20{year}-{month}-{day}"


def decode_amount(raw: str) -> Decimal:
    """
    Decode an unsigned amount in minor units (last two digits are decimals).

    The sign lives in a separate one-character field next to the amount.

    Args:
        raw: Amount slice, e.g. "000000095000"

    Returns:
        Decimal with two places; zero for empty or non-numeric input
    """
    value = raw.strip(TRIM_CHARS).lstrip("0")
    if not value or not _DIGITS_PATTERN.fullmatch(value):
        return ZERO_AMOUNT

    return Decimal(int(value)).scaleb(-2)
