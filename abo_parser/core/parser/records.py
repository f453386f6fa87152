"""
Record decoding for ABO documents.

Maps fixed offsets of 074 and 075 lines to named, typed fields. Decoders
never fail on short lines: missing trailing fields come out empty or None.
"""

from __future__ import annotations

from typing import Any

from .fields import decode_amount, decode_date, decode_text, slice_field
from .layout import FieldSpec, RecordLayouts, get_layouts
from .models import (
    STATEMENT_RECORD,
    TRANSACTION_RECORD,
    BasicTransaction,
    ExtendedTransaction,
    Format,
    Statement,
)

_DECODERS = {
    "text": decode_text,
    "date": decode_date,
    "amount": decode_amount,
}


def _decode_field(line: str, spec: FieldSpec) -> Any:
    """Slice a field out of the line and convert it to its type."""
    return _DECODERS[spec.type](slice_field(line, spec.start, spec.width))


def decode_statement(line: str, layouts: RecordLayouts | None = None) -> Statement:
    """
    Decode an account statement record (074).

    Args:
        line: Trimmed line, starting with the record tag
        layouts: Optional layouts (defaults to record_layouts.yaml)

    Returns:
        Statement with balances and turnovers
    """
    if layouts is None:
        layouts = get_layouts()

    values = {spec.name: _decode_field(line, spec) for spec in layouts.statement.fields}
    return Statement(record_type=STATEMENT_RECORD, raw_line=line, **values)


def _decode_transaction_fields(line: str, layouts: RecordLayouts) -> dict[str, Any]:
    return {spec.name: _decode_field(line, spec) for spec in layouts.transaction.fields}


def decode_basic_transaction(
    line: str, layouts: RecordLayouts | None = None
) -> BasicTransaction:
    """Decode a transaction record (075) in the basic layout."""
    if layouts is None:
        layouts = get_layouts()

    return BasicTransaction(
        record_type=TRANSACTION_RECORD,
        format=Format.BASIC,
        raw_line=line,
        **_decode_transaction_fields(line, layouts),
    )


def decode_extended_transaction(
    line: str, layouts: RecordLayouts | None = None
) -> ExtendedTransaction:
    """
    Decode a transaction record (075) in the extended layout.

    The shared prefix uses the basic offsets. Extension fields are read in
    order from offset 128, each only if the line covers its full width.
    The first field that does not fit ends decoding; it and all later
    fields stay unset.

    Args:
        line: Trimmed line, starting with the record tag
        layouts: Optional layouts (defaults to record_layouts.yaml)

    Returns:
        ExtendedTransaction with as many extension fields as the line holds
    """
    if layouts is None:
        layouts = get_layouts()

    values = _decode_transaction_fields(line, layouts)

    for spec in layouts.extension.positioned():
        if len(line) < spec.end:
            break
        values[spec.name] = _decode_field(line, spec)

    return ExtendedTransaction(
        record_type=TRANSACTION_RECORD,
        format=Format.EXTENDED,
        raw_line=line,
        **values,
    )


def decode_transaction(
    line: str, fmt: Format, layouts: RecordLayouts | None = None
) -> BasicTransaction | ExtendedTransaction:
    """Decode a 075 line in the layout detected for its document."""
    if fmt is Format.EXTENDED:
        return decode_extended_transaction(line, layouts)
    return decode_basic_transaction(line, layouts)
