"""
Format detection for ABO documents.

Decides whether 075 transaction records use the basic or the extended layout.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from .fields import TRIM_CHARS
from .models import TRANSACTION_RECORD, Format

logger = logging.getLogger(__name__)

# Basic 075 records are 128 characters, extended ones run to 1700+
EXTENDED_MIN_LENGTH = 500


def detect_format(lines: Iterable[str]) -> Format:
    """
    Detect the 075 layout of a document.

    Only the first transaction line is looked at: longer than 500 characters
    after trimming means extended, anything else basic. Documents without
    transactions are basic. The result holds for the whole document.

    Args:
        lines: Document lines, untrimmed

    Returns:
        Format enum value
    """
    for line_no, line in enumerate(lines, start=1):
        line = line.strip(TRIM_CHARS)
        if not line or line[:3] != TRANSACTION_RECORD:
            continue

        fmt = Format.EXTENDED if len(line) > EXTENDED_MIN_LENGTH else Format.BASIC
        logger.debug("Detected %s format from line %d (%d chars)", fmt.value, line_no, len(line))
        return fmt

    logger.debug("No transaction records, assuming basic format")
    return Format.BASIC
