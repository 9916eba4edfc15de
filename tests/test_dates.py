"""Tests for DD-MMM-YYYY date normalisation."""
import pytest

from core.dates import DATE_HINT, MONTHS, display_date, to_dmmmyyyy, validate_dmmmyyyy


class TestCanonicalInput:
    """Values already in DD-MMM-YYYY shape are re-validated, not re-parsed."""

    @pytest.mark.parametrize("value", ["28-AUG-2025", "01-JAN-1900", "31-DEC-2100", "30-APR-2024"])
    def test_idempotent(self, value):
        assert to_dmmmyyyy(value) == value
        assert to_dmmmyyyy(to_dmmmyyyy(value)) == value

    def test_month_case_insensitive(self):
        assert to_dmmmyyyy("28-aug-2025") == "28-AUG-2025"
        assert to_dmmmyyyy("05-Mar-2024") == "05-MAR-2024"

    def test_surrounding_whitespace(self):
        assert to_dmmmyyyy("  28-AUG-2025 ") == "28-AUG-2025"

    def test_every_month_abbreviation(self):
        for mon in MONTHS:
            assert to_dmmmyyyy(f"15-{mon}-2025") == f"15-{mon}-2025"

    @pytest.mark.parametrize("value", [
        "31-FEB-2025",  # February capped
        "30-FEB-2024",
        "31-APR-2025",  # 30-day months
        "31-JUN-2025",
        "31-SEP-2025",
        "31-NOV-2025",
        "00-JAN-2025",
        "32-JAN-2025",
        "15-XYZ-2025",
        "15-JAN-1899",
        "15-JAN-2101",
        "٢٨-AUG-٢٠٢٥",  # Arabic-Indic digits
        "２８-AUG-２０２５",  # fullwidth digits
    ])
    def test_invalid(self, value):
        assert to_dmmmyyyy(value) == ""

    def test_output_digits_are_ascii(self):
        for value in ("28-AUG-2025", "٢٨-AUG-٢٠٢٥", "2025-08-28"):
            out = to_dmmmyyyy(value)
            assert out == "" or (out.isascii() and out[:2].isdigit() and out[-4:].isdigit())

    def test_feb_29_accepted_without_leap_check(self):
        assert to_dmmmyyyy("29-FEB-2025") == "29-FEB-2025"
        assert to_dmmmyyyy("29-FEB-2024") == "29-FEB-2024"


class TestGenericInput:
    """Other calendar date spellings are converted to canonical form."""

    def test_iso_date(self):
        assert to_dmmmyyyy("2025-08-28") == "28-AUG-2025"

    @pytest.mark.parametrize("value", [
        "2025/08/28",
        "08/28/2025",
        "28 Aug 2025",
        "28 August 2025",
        "Aug 28, 2025",
        "August 28, 2025",
        "2025-08-28T09:30:00",
        "28-Aug-2025",
    ])
    def test_generic_formats(self, value):
        assert to_dmmmyyyy(value) == "28-AUG-2025"

    def test_single_digit_day_is_padded(self):
        assert to_dmmmyyyy("8-AUG-2025") == "08-AUG-2025"
        assert to_dmmmyyyy("2025-01-05") == "05-JAN-2025"

    def test_round_trip(self):
        out = to_dmmmyyyy("2024-02-29")
        assert out == "29-FEB-2024"
        assert to_dmmmyyyy(out) == out

    def test_non_calendar_date_rejected(self):
        assert to_dmmmyyyy("2025-02-30") == ""
        assert to_dmmmyyyy("2025-13-01") == ""

    def test_year_range_applies(self):
        assert to_dmmmyyyy("1850-01-01") == ""
        assert to_dmmmyyyy("2200-01-01") == ""

    @pytest.mark.parametrize("value", ["", "   ", None, "tomorrow", "28/AUG", "hello world"])
    def test_garbage_is_blank(self, value):
        assert to_dmmmyyyy(value) == ""


class TestValidation:
    def test_valid_returns_none(self):
        assert validate_dmmmyyyy("28-AUG-2025") is None
        assert validate_dmmmyyyy("2025-08-28") is None

    def test_invalid_returns_hint(self):
        assert validate_dmmmyyyy("31-FEB-2025") == DATE_HINT
        assert "28-AUG-2025" in DATE_HINT

    def test_display_date_falls_back_to_raw(self):
        assert display_date("2025-08-28") == "28-AUG-2025"
        assert display_date("next week") == "next week"
        assert display_date(None) == ""
