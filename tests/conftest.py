"""
Pytest configuration and fixtures for abo-parser tests.

Provides fixtures for:
- Golden test files (ABO samples)
- Line builders for 074 and 075 records
- Large file generation
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Callable

import pytest

if TYPE_CHECKING:
    from collections.abc import Iterator

# =============================================================================
# Path Fixtures
# =============================================================================

FIXTURES_DIR = Path(__file__).parent / "fixtures"
GOLDEN_DIR = FIXTURES_DIR / "golden"


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the fixtures directory path."""
    return FIXTURES_DIR


@pytest.fixture
def golden_dir() -> Path:
    """Return the golden files directory path."""
    return GOLDEN_DIR


# =============================================================================
# Golden File Fixtures
# =============================================================================


@pytest.fixture
def basic_format(golden_dir: Path) -> Path:
    """One statement and two basic transactions, CRLF line endings."""
    return golden_dir / "basic_format.abo"


@pytest.fixture
def extended_format(golden_dir: Path) -> Path:
    """One statement and one 578-character extended transaction."""
    return golden_dir / "extended_format.abo"


@pytest.fixture
def empty_file(golden_dir: Path) -> Path:
    """Blank and whitespace-only lines."""
    return golden_dir / "empty.abo"


@pytest.fixture
def malformed_file(golden_dir: Path) -> Path:
    """Unknown record types, a short 074 line and a blank line."""
    return golden_dir / "malformed.abo"


# =============================================================================
# Line Builders
# =============================================================================


def build_statement(
    account: str = "0000000123456789",
    name: str = "Test Account Name",
    old_date: str = "010825",
    old_balance: int = 10_000_000,
    new_balance: int = 9_500_000,
    debit: int = 650_000,
    credit: int = 150_000,
    number: str = "001",
    accounting_date: str = "210825",
    sign: str = "+",
) -> str:
    """Build a 130-character 074 line; amounts in minor units."""
    return (
        f"074{account:>16}{name:<20}00{old_date}"
        f"{old_balance:014d}{sign}{new_balance:014d}{sign}"
        f"{debit:014d}{sign}{credit:014d}{sign}"
        f"{number}{accounting_date}{'0' * 14}"
    )


def build_transaction(
    amount: int = 50_000,
    account: str = "0000000123456789",
    counter_account: str = "0000009876543210",
    document: str = "0000000000001",
    code: str = "1",
    variable_symbol: str = "0000001234",
    constant_symbol: str = "0000000308",
    specific_symbol: str = "0000000000",
    valuation_date: str = "200825",
    info: str = "Payment one",
    change_code: str = "0",
    data_type: str = "1101",
    due_date: str = "200825",
) -> str:
    """Build a 128-character basic 075 line; amount in minor units."""
    return (
        f"075{account:>16}{counter_account:>16}{document:>13}{amount:012d}{code}"
        f"{variable_symbol:>10}{constant_symbol:>10}{specific_symbol:>10}"
        f"{valuation_date}{info:<20}{change_code}{data_type}{due_date}"
    )


def build_extension(
    messages: tuple[str, str, str, str] = ("Rent for August", "Flat 12", "Second floor", "Contract"),
    sender: str = "Sender note",
    debited_date: str = "210825",
    item: str = "Monthly rent",
    reference: str = "REF1234567890123",
    amount_iso: int = 100_000,
    currency: str = "CZK",
    counter_name: str = "Property Management s.r.o.",
) -> str:
    """Build the 275-character extension block of an extended 075 line."""
    return (
        "".join(f"{m:<35}" for m in messages)
        + f"{sender:<35}{debited_date}{item:<25}{reference:>16}"
        + f"{amount_iso:015d}{currency}{counter_name:<35}"
    )


# Opaque extended tail that pushes a line past the 500-character threshold
EXTENDED_TAIL = "".join(f"EXTENDEDTAIL{i:02d}-0123456789ABCDEFGHIJ" for i in range(1, 6))


@pytest.fixture
def make_statement() -> Callable[..., str]:
    """Builder for 074 lines."""
    return build_statement


@pytest.fixture
def make_transaction() -> Callable[..., str]:
    """Builder for basic 075 lines."""
    return build_transaction


@pytest.fixture
def make_extension() -> Callable[..., str]:
    """Builder for the extension block of extended 075 lines."""
    return build_extension


@pytest.fixture
def extended_line() -> str:
    """A complete extended 075 line (578 characters)."""
    return build_transaction(amount=100_000) + build_extension() + EXTENDED_TAIL


# =============================================================================
# Large File Fixtures
# =============================================================================


@pytest.fixture(scope="session")
def large_file_1k(tmp_path_factory: pytest.TempPathFactory) -> Iterator[Path]:
    """Generate a 1000 transaction ABO file."""
    tmp_dir = tmp_path_factory.mktemp("large")
    file_path = tmp_dir / "large_1k.abo"

    _generate_large_abo_file(file_path, num_rows=1000)

    yield file_path


def _generate_large_abo_file(path: Path, num_rows: int) -> None:
    """
    Generate a large ABO file.

    Transaction i carries an amount of i units (i * 100 minor units).
    """
    lines = [build_statement()]
    lines.extend(build_transaction(amount=i * 100) for i in range(num_rows))

    # Write with Windows line endings
    content = "\r\n".join(lines) + "\r\n"
    path.write_bytes(content.encode("cp1250"))
