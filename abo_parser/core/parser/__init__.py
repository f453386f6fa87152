"""
ABO Parser Core.

Public API for parsing ABO bank statement files.

Usage:
    from abo_parser.core.parser import parse_file, ParsedDocument

    document = parse_file("statement.abo")
    print(f"Format: {document.format.value}")

    for transaction in document.transactions:
        print(f"{transaction.valuation_date}: {transaction.amount}")

API Functions:
    parse_file(path, config) -> ParsedDocument
    parse_bytes(data, config) -> ParsedDocument
    parse_stream(stream, config) -> ParsedDocument
    parse_text(text) -> ParsedDocument
    detect_format(lines) -> Format
    detect_encoding(data) -> str
    decode_date(raw) / decode_amount(raw) / decode_text(raw)
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import BinaryIO

from .detector import detect_format
from .encoding import decode_input, detect_encoding, strip_bom
from .errors import AboResourceError, Location, ParserError, Severity
from .fields import TRIM_CHARS, decode_amount, decode_date, decode_text
from .layout import RecordLayouts, get_layouts
from .models import (
    STATEMENT_RECORD,
    TRANSACTION_RECORD,
    BasicTransaction,
    ExtendedTransaction,
    Format,
    ParsedDocument,
    ParserConfig,
    RawRecord,
    Statement,
    Transaction,
)
from .records import (
    decode_basic_transaction,
    decode_extended_transaction,
    decode_statement,
    decode_transaction,
)

logger = logging.getLogger(__name__)


def parse_file(
    path: Path | str,
    config: ParserConfig | None = None,
    *,
    max_bytes: int | None = None,
) -> ParsedDocument:
    """
    Parse an ABO file.

    Args:
        path: Path to the ABO file
        config: Encoding settings (Windows-1250 conversion by default)
        max_bytes: Maximum bytes to read (None = unlimited)

    Returns:
        ParsedDocument with statements, transactions and raw records

    Raises:
        FileNotFoundError: If file does not exist
        AboResourceError: If the file cannot be read or decoded
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    try:
        with path.open("rb") as f:
            data = f.read(max_bytes + 1) if max_bytes is not None and max_bytes > 0 else f.read()
    except OSError as e:
        raise AboResourceError(
            ParserError.fatal(
                code="ABO-IO-002",
                title="Unreadable input",
                message=f"Unable to read file: {path}",
                location=Location(file=str(path)),
                context={"reason": str(e)},
            )
        ) from e

    return parse_bytes(data, config, filename=str(path), max_bytes=max_bytes)


def parse_bytes(
    data: bytes,
    config: ParserConfig | None = None,
    *,
    filename: str = "<bytes>",
    max_bytes: int | None = None,
) -> ParsedDocument:
    """
    Parse ABO data from bytes.

    Args:
        data: Raw file content
        config: Encoding settings
        filename: Optional filename for error messages
        max_bytes: Maximum accepted size (None = unlimited)

    Returns:
        ParsedDocument

    Raises:
        AboResourceError: If the input is too large or the encoding is unknown
    """
    if max_bytes is not None and max_bytes > 0 and len(data) > max_bytes:
        raise AboResourceError(
            ParserError.fatal(
                code="ABO-IO-001",
                title="Input too large",
                message=f"Input exceeds maximum size of {max_bytes} bytes",
                location=Location(file=filename),
                context={"max_bytes": max_bytes, "size": len(data)},
            )
        )

    text, encoding = decode_input(data, config)
    return parse_text(text, encoding=encoding)


def parse_stream(
    stream: BinaryIO,
    config: ParserConfig | None = None,
    *,
    filename: str = "<stream>",
    max_bytes: int | None = None,
) -> ParsedDocument:
    """
    Parse ABO data from a binary stream.

    Args:
        stream: Binary file-like object (e.g. sys.stdin.buffer)
        config: Encoding settings
        filename: Optional filename for error messages
        max_bytes: Maximum accepted size (None = unlimited)

    Returns:
        ParsedDocument
    """
    data = stream.read(max_bytes + 1) if max_bytes is not None and max_bytes > 0 else stream.read()

    return parse_bytes(data, config, filename=filename, max_bytes=max_bytes)


def parse_text(
    text: str,
    *,
    encoding: str | None = None,
    layouts: RecordLayouts | None = None,
) -> ParsedDocument:
    """
    Parse decoded ABO content.

    Never fails on malformed content: unknown record types are kept as raw
    records only, and bad dates or amounts decode to None or zero.

    Args:
        text: Document text
        encoding: Encoding the text was decoded from, kept on the result
        layouts: Optional layouts (defaults to record_layouts.yaml)

    Returns:
        ParsedDocument
    """
    if layouts is None:
        layouts = get_layouts()

    # Only LF ends a line; CR is trimmed away as trailing whitespace
    lines = strip_bom(text).split("\n")

    # Phase 1: detection pass
    fmt = detect_format(lines)

    # Phase 2: decode pass
    statements: list[Statement] = []
    transactions: list[BasicTransaction | ExtendedTransaction] = []
    raw_records: list[RawRecord] = []

    for line_no, line in enumerate(lines, start=1):
        line = line.strip(TRIM_CHARS)
        if not line:
            continue

        record_type = line[:3]
        raw_records.append(RawRecord(line_number=line_no, record_type=record_type, content=line))

        if record_type == STATEMENT_RECORD:
            statements.append(decode_statement(line, layouts))
        elif record_type == TRANSACTION_RECORD:
            transactions.append(decode_transaction(line, fmt, layouts))

    logger.debug(
        "Parsed %d records: %d statements, %d transactions (%s)",
        len(raw_records),
        len(statements),
        len(transactions),
        fmt.value,
    )

    return ParsedDocument(
        format=fmt,
        statements=statements,
        transactions=transactions,
        raw_records=raw_records,
        encoding=encoding,
    )


# =============================================================================
# Public API Exports
# =============================================================================

__all__ = [
    "AboResourceError",
    "BasicTransaction",
    "ExtendedTransaction",
    # Enums
    "Format",
    "Location",
    # Models
    "ParsedDocument",
    "ParserConfig",
    "ParserError",
    "RawRecord",
    "RecordLayouts",
    "Severity",
    "Statement",
    "Transaction",
    "decode_amount",
    "decode_basic_transaction",
    "decode_date",
    "decode_extended_transaction",
    "decode_input",
    "decode_statement",
    "decode_text",
    "decode_transaction",
    "detect_encoding",
    "detect_format",
    "get_layouts",
    # Main functions
    "parse_bytes",
    "parse_file",
    "parse_stream",
    "parse_text",
]
