"""Tests for field decoding."""

from decimal import Decimal

import pytest

from abo_parser.core.parser import decode_amount, decode_date, decode_text
from abo_parser.core.parser.fields import slice_field


class TestDecodeDate:
    """Tests for decode_date function."""

    def test_valid_date(self) -> None:
        """Test DDMMYY is mapped to YYYY-MM-DD."""
        assert decode_date("210825") == "2025-08-21"

    def test_year_is_always_2000s(self) -> None:
        """Test two-digit years are never rolled back into the 1900s."""
        assert decode_date("010199") == "2099-01-01"

    def test_day_and_month_out_of_range(self) -> None:
        """Test day 32 / month 23 is invalid."""
        assert decode_date("320230") is None

    def test_month_13(self) -> None:
        """Test month above 12 is invalid."""
        assert decode_date("011325") is None

    def test_zero_day(self) -> None:
        """Test day 00 is invalid."""
        assert decode_date("000825") is None

    def test_impossible_calendar_date_is_accepted(self) -> None:
        """Test 31 February passes the lenient range check."""
        assert decode_date("310225") == "2025-02-31"

    def test_surrounding_whitespace(self) -> None:
        """Test whitespace is trimmed before validation."""
        assert decode_date(" 210825\t") == "2025-08-21"

    @pytest.mark.parametrize("raw", ["", "      ", "21082", "2108250", "21O825", "2108-5"])
    def test_malformed(self, raw: str) -> None:
        """Test wrong length and non-digits give None."""
        assert decode_date(raw) is None

    def test_unicode_digits_rejected(self) -> None:
        """Test only ASCII digits count."""
        assert decode_date("٢١٠٨٢٥") is None


class TestDecodeAmount:
    """Tests for decode_amount function."""

    def test_zero(self) -> None:
        """Test all zeros."""
        assert decode_amount("000000000000") == Decimal("0")

    def test_fraction(self) -> None:
        """Test last two digits are minor units."""
        assert decode_amount("000000000050") == Decimal("0.50")

    def test_maximum_twelve_digits(self) -> None:
        """Test the largest 12-digit amount is exact."""
        assert decode_amount("999999999999") == Decimal("9999999999.99")

    def test_fourteen_digit_balance(self) -> None:
        """Test statement balances (14 digits) are exact."""
        assert decode_amount("99999999999999") == Decimal("999999999999.99")

    def test_non_digit_content(self) -> None:
        """Test letters inside the field give zero."""
        assert decode_amount("0000ABCDEF00") == Decimal("0")

    def test_two_decimal_places(self) -> None:
        """Test the result always carries two places."""
        assert str(decode_amount("000000950000")) == "9500.00"
        assert str(decode_amount("000000000000")) == "0.00"

    def test_whitespace(self) -> None:
        """Test padding is trimmed."""
        assert decode_amount("  12345 ") == Decimal("123.45")

    @pytest.mark.parametrize("raw", ["", "   ", "-0000100", "12 34", "1.50"])
    def test_malformed(self, raw: str) -> None:
        """Test empty and non-numeric input give zero."""
        assert decode_amount(raw) == Decimal("0")


class TestDecodeText:
    """Tests for decode_text function."""

    def test_trims_spaces_and_tabs(self) -> None:
        """Test both ends are trimmed."""
        assert decode_text(" \tTest Account\t  ") == "Test Account"

    def test_keeps_inner_whitespace(self) -> None:
        """Test spaces inside the value survive."""
        assert decode_text("A  B") == "A  B"

    def test_keeps_non_ascii(self) -> None:
        """Test Czech characters pass through unchanged."""
        assert decode_text("Účet Žluťoučký   ") == "Účet Žluťoučký"


class TestSliceField:
    """Tests for slice_field function."""

    def test_in_range(self) -> None:
        """Test a normal slice."""
        assert slice_field("074ABCDEF", 3, 3) == "ABC"

    def test_undersized(self) -> None:
        """Test a slice running past the end is cut short."""
        assert slice_field("074short", 3, 16) == "short"

    def test_past_end(self) -> None:
        """Test a slice starting past the end is empty."""
        assert slice_field("074", 41, 6) == ""
