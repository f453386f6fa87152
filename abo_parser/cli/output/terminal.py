"""
Terminal output adapter.

Renders a readable overview of a parsed document with ANSI colors.
"""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, TextIO

from abo_parser.cli.output.base import OutputAdapter, OutputFormat

if TYPE_CHECKING:
    from abo_parser.core.parser.models import ParsedDocument, Statement

# Accounting codes of 075 records
DEBIT_CODE = "1"
CREDIT_CODE = "2"
REVERSAL_CODES = ("4", "5")


def _format_amount(amount: Decimal, sign: str = "+") -> str:
    """Format an amount with its sign field, e.g. '-1 500.00'."""
    prefix = "-" if sign == "-" else ""
    return f"{prefix}{amount:,.2f}".replace(",", " ")


class TerminalOutput(OutputAdapter):
    """Terminal output with ANSI colors."""

    format = OutputFormat.TERMINAL

    def __init__(self, stream: TextIO | None = None, color: bool = True):
        super().__init__(stream=stream, color=color)
        self._use_color = color and self._is_tty()

    def _is_tty(self) -> bool:
        """Check if output is a TTY."""
        return hasattr(self.stream, "isatty") and self.stream.isatty()

    def render_document(self, document: ParsedDocument) -> str:
        """Render document overview."""
        lines: list[str] = []

        lines.append(self._style(f"ABO document ({document.format.value} format)", "bold"))
        if document.encoding:
            lines.append(f"Encoding: {document.encoding}")
        lines.append(
            f"Records: {len(document.raw_records)} "
            f"({len(document.statements)} statement(s), "
            f"{len(document.transactions)} transaction(s))"
        )

        unknown = len(document.raw_records) - len(document.statements) - len(document.transactions)
        if unknown:
            lines.append(self._style(f"{unknown} record(s) of unknown type", "yellow"))

        for statement in document.statements:
            lines.append("")
            lines.extend(self._format_statement(statement))

        if document.transactions:
            codes = [t.accounting_code for t in document.transactions]
            reversals = sum(codes.count(c) for c in REVERSAL_CODES)
            lines.append("")
            lines.append(
                f"Transactions: {codes.count(DEBIT_CODE)} debit(s), "
                f"{codes.count(CREDIT_CODE)} credit(s), {reversals} reversal(s)"
            )

        return "\n".join(lines)

    def _format_statement(self, statement: Statement) -> list[str]:
        """Format one 074 record."""
        title = f"Statement {statement.statement_number or '?'}: {statement.account_number}"
        if statement.account_name:
            title += f" ({statement.account_name})"

        return [
            self._style(title, "bold"),
            f"  Old balance: {_format_amount(statement.old_balance, statement.old_balance_sign)}"
            f" ({statement.old_balance_date or 'no date'})",
            f"  New balance: {_format_amount(statement.new_balance, statement.new_balance_sign)}"
            f" ({statement.accounting_date or 'no date'})",
            "  Debit: "
            + self._style(
                _format_amount(statement.debit_turnover, statement.debit_turnover_sign), "red"
            ),
            "  Credit: "
            + self._style(
                _format_amount(statement.credit_turnover, statement.credit_turnover_sign), "green"
            ),
        ]

    def _style(self, text: str, style: str) -> str:
        """Apply style to text if colors are enabled."""
        if not self._use_color:
            return text

        # ANSI color codes
        codes = {
            "bold": "\033[1m",
            "dim": "\033[2m",
            "red": "\033[31m",
            "green": "\033[32m",
            "yellow": "\033[33m",
        }
        reset = "\033[0m"

        code = codes.get(style, "")
        if code:
            return f"{code}{text}{reset}"
        return text
