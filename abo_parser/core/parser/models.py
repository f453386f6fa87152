"""
Parser data models.

Core data models for ABO document parsing.

CRITICAL DESIGN DECISIONS:
- account numbers and symbols are ALWAYS strings (preserve leading zeros)
- amounts are Decimal (exact minor units), serialized to JSON as numbers
- dates are "YYYY-MM-DD" strings or None; validation is lenient (31 February
  passes), which datetime.date cannot represent
- All models are frozen (immutable) for safety
- Transactions are a tagged union on `format`; extension fields of the
  extended layout are left unset when the line is too short for them
"""

from __future__ import annotations

from decimal import Decimal
from enum import Enum
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, Field, PlainSerializer

# =============================================================================
# Field Types
# =============================================================================

Amount = Annotated[
    Decimal,
    PlainSerializer(float, return_type=float, when_used="json"),
]

AboDate = Union[str, None]

STATEMENT_RECORD = "074"
TRANSACTION_RECORD = "075"


# =============================================================================
# Enums
# =============================================================================


class Format(Enum):
    """Layout of 075 transaction records in a document."""

    BASIC = "basic"  # 128 characters
    EXTENDED = "extended"  # 500+ characters


# =============================================================================
# Configuration
# =============================================================================


class ParserConfig(BaseModel, frozen=True):
    """Input normalization settings."""

    source_encoding: str = Field(
        default="cp1250",
        description="Legacy encoding of the raw bytes, or 'auto' to detect it",
    )
    convert_encoding: bool = Field(
        default=True,
        description="Convert from source_encoding; when off, bytes are taken as UTF-8",
    )

    model_config = {"frozen": True}


# =============================================================================
# Records
# =============================================================================


class RawRecord(BaseModel, frozen=True):
    """One non-empty input line, whether or not its type is known."""

    line_number: int = Field(ge=1, serialization_alias="line")
    record_type: str = Field(max_length=3, serialization_alias="type")
    content: str

    model_config = {"frozen": True}


class Statement(BaseModel, frozen=True):
    """Account statement record (074)."""

    record_type: Literal["074"] = STATEMENT_RECORD
    account_number: str
    account_name: str
    old_balance_date: AboDate
    old_balance: Amount
    old_balance_sign: str
    new_balance: Amount
    new_balance_sign: str
    debit_turnover: Amount
    debit_turnover_sign: str
    credit_turnover: Amount
    credit_turnover_sign: str
    statement_number: str
    accounting_date: AboDate
    raw_line: str

    model_config = {"frozen": True}


class _TransactionFields(BaseModel, frozen=True):
    """Fields shared by both 075 layouts."""

    record_type: Literal["075"] = TRANSACTION_RECORD
    account_number: str
    counter_account: str
    document_number: str
    amount: Amount
    accounting_code: str
    variable_symbol: str
    constant_symbol: str
    specific_symbol: str
    valuation_date: AboDate
    additional_info: str
    change_code: str
    data_type: str
    due_date: AboDate
    raw_line: str

    model_config = {"frozen": True}


class BasicTransaction(_TransactionFields, frozen=True):
    """Transaction record (075) in the basic layout."""

    format: Literal[Format.BASIC] = Format.BASIC


class ExtendedTransaction(_TransactionFields, frozen=True):
    """
    Transaction record (075) in the extended layout.

    Extension fields are only set when the physical line covers them.
    Use `model_fields_set` to tell an absent field from an empty one.
    """

    format: Literal[Format.EXTENDED] = Format.EXTENDED

    message_for_recipient: str | None = None
    message_for_recipient_2: str | None = None
    message_for_recipient_3: str | None = None
    message_for_recipient_4: str | None = None
    message_for_sender: str | None = None
    debited_date: AboDate = None
    item_description: str | None = None
    identification_reference: str | None = None
    amount_iso: Amount | None = None
    currency_iso: str | None = None
    counter_account_name: str | None = None


Transaction = Annotated[
    Union[BasicTransaction, ExtendedTransaction],
    Field(discriminator="format"),
]


# =============================================================================
# Parse Result Model
# =============================================================================


class ParsedDocument(BaseModel, frozen=True):
    """
    Result of parsing an ABO document.

    Invariants:
    - len(statements) + len(transactions) <= len(raw_records)
    - every transaction carries the document's format
    """

    format: Format = Field(serialization_alias="format_version")
    statements: list[Statement] = Field(default_factory=list)
    transactions: list[Transaction] = Field(default_factory=list)
    raw_records: list[RawRecord] = Field(default_factory=list)

    # Encoding the bytes were decoded from, None for text input
    encoding: str | None = Field(default=None, exclude=True)

    model_config = {"frozen": True}

    def to_dict(self) -> dict[str, Any]:
        """
        Plain nested mapping, ready for JSON.

        Unset extension fields of extended transactions are omitted.
        """
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)

    def to_json(self, indent: int | None = 2) -> str:
        """Serialize to a JSON string."""
        return self.model_dump_json(indent=indent, by_alias=True, exclude_unset=True)
