"""
Encoding handling for ABO files.

ABO files come from Czech and Slovak banks, usually encoded in:
- Windows-1250 (default)
- ISO-8859-2
- UTF-8, sometimes with BOM

Field offsets count characters of the legacy single-byte encoding, so the
data has to be decoded before slicing and a BOM must never reach the decoder.
Automatic detection uses charset-normalizer.
"""

from __future__ import annotations

import codecs
import logging

from charset_normalizer import from_bytes

from .errors import AboResourceError, ParserError
from .models import ParserConfig

logger = logging.getLogger(__name__)

UTF8_BOM = b"\xef\xbb\xbf"
TEXT_BOM = "\ufeff"

AUTO_ENCODING = "auto"
DEFAULT_ENCODING = "cp1250"

# Size of data to use for encoding detection (8KB is usually sufficient)
DETECTION_SAMPLE_SIZE = 8192


def strip_bom(text: str) -> str:
    """Remove a leading byte-order mark from decoded text."""
    if text.startswith(TEXT_BOM):
        return text[len(TEXT_BOM) :]
    return text


def detect_encoding(data: bytes, fallback: str = DEFAULT_ENCODING) -> str:
    """
    Detect encoding of ABO file data.

    Detection priority:
    1. UTF-8 BOM (explicit marker)
    2. charset-normalizer detection
    3. Fallback encoding (Windows-1250 unless told otherwise)

    Args:
        data: File content
        fallback: Encoding to use when detection gives no answer

    Returns:
        Python codec name, e.g. "utf-8", "cp1250", "iso8859_2"
    """
    if data.startswith(UTF8_BOM):
        return "utf-8"

    results = from_bytes(data[:DETECTION_SAMPLE_SIZE])
    best = results.best() if results else None

    if best is None:
        logger.debug("Encoding detection gave no result, using %s", fallback)
        return fallback

    encoding = best.encoding.lower()

    # Pure ASCII files decode the same in every candidate
    if encoding in ("ascii", "utf_8", "utf-8", "utf8"):
        return "utf-8"

    return encoding


def resolve_encoding(name: str) -> str:
    """
    Canonical codec name for an encoding label.

    Raises:
        AboResourceError: If Python has no codec of that name
    """
    try:
        return codecs.lookup(name).name
    except LookupError:
        raise AboResourceError(
            ParserError.fatal(
                code="ABO-ENC-001",
                title="Unknown encoding",
                message=f"Unknown source encoding: '{name}'",
                context={"encoding": name},
            )
        ) from None


def decode_input(data: bytes, config: ParserConfig | None = None) -> tuple[str, str]:
    """
    Turn raw file bytes into text for the decoder.

    A leading UTF-8 BOM is stripped and marks the data as UTF-8. Otherwise
    the bytes are converted from the configured source encoding; with
    conversion disabled they are taken as UTF-8. Bytes the encoding cannot
    map are dropped.

    Args:
        data: Raw file content
        config: Parser configuration

    Returns:
        Tuple of (text, encoding used)

    Raises:
        AboResourceError: If the configured encoding is unknown
    """
    if config is None:
        config = ParserConfig()

    if data.startswith(UTF8_BOM):
        data = data[len(UTF8_BOM) :]
        encoding = "utf-8"
    elif not config.convert_encoding:
        encoding = "utf-8"
    elif config.source_encoding.lower() == AUTO_ENCODING:
        encoding = resolve_encoding(detect_encoding(data))
    else:
        encoding = resolve_encoding(config.source_encoding)

    logger.debug("Decoding %d bytes as %s", len(data), encoding)

    # UTF-16 or UTF-8 detected data may still decode to a leading BOM
    return strip_bom(data.decode(encoding, errors="ignore")), encoding
