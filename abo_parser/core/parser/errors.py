"""
Parser error models.

Field-level problems never become errors: the decoders fall back to sentinel
values. What remains are resource errors (unreadable input, unknown encoding,
oversized input), which are reported with codes from the ABO-XXX-NNN taxonomy.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class Severity(Enum):
    """Error severity levels."""

    FATAL = "fatal"  # Cannot continue parsing


class Location(BaseModel, frozen=True):
    """Error location in input."""

    file: str | None = None
    line_no: int | None = None

    def __str__(self) -> str:
        """Format location for display."""
        parts = []
        if self.file:
            parts.append(self.file)
        if self.line_no is not None:
            parts.append(f"line {self.line_no}")
        return ", ".join(parts) if parts else "<unknown>"


class ParserError(BaseModel, frozen=True):
    """
    Structured parser error.

    Error domains:
    - ABO-IO-*: Reading input
    - ABO-ENC-*: Encoding conversion
    """

    code: str = Field(
        pattern=r"^ABO-[A-Z]{2,5}-\d{3}$",
        description="Error code, e.g., 'ABO-ENC-001'",
    )
    severity: Severity
    title: str = Field(description="Short error title")
    message: str = Field(description="Detailed error message")
    location: Location = Field(
        default_factory=Location,
        description="Where the error occurred",
    )
    context: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional context (encoding, sizes, etc.)",
    )

    @classmethod
    def fatal(
        cls,
        code: str,
        title: str,
        message: str,
        *,
        location: Location | None = None,
        context: dict[str, Any] | None = None,
    ) -> ParserError:
        """Create a FATAL severity error."""
        return cls(
            code=code,
            severity=Severity.FATAL,
            title=title,
            message=message,
            location=location or Location(),
            context=context or {},
        )

    def __str__(self) -> str:
        """Format error for display."""
        return f"[{self.code}] {self.severity.value.upper()}: {self.title} - {self.message}"


class AboResourceError(Exception):
    """
    Raised when input cannot be turned into text for the decoder.

    Carries the structured ParserError so callers can report code and context.
    """

    def __init__(self, error: ParserError) -> None:
        super().__init__(str(error))
        self.error = error

    @property
    def code(self) -> str:
        return self.error.code
