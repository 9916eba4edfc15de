import re
from datetime import datetime
from typing import Optional

# Month map for DD-MMM-YYYY
MONTHS = ["JAN", "FEB", "MAR", "APR", "MAY", "JUN", "JUL", "AUG", "SEP", "OCT", "NOV", "DEC"]

# February is capped at 29 without a leap-year check
MONTH_DAYS = [31, 29, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31]

MIN_YEAR, MAX_YEAR = 1900, 2100

DATE_HINT = "Use DD-MMM-YYYY (e.g., 28-AUG-2025)"

CANONICAL = re.compile(r"^([0-9]{2})-([A-Za-z]{3})-([0-9]{4})$")

GENERIC_FORMATS = (
    "%Y-%m-%d",
    "%Y/%m/%d",
    "%m/%d/%Y",
    "%d-%b-%Y",
    "%d %b %Y",
    "%d %B %Y",
    "%b %d %Y",
    "%b %d, %Y",
    "%B %d %Y",
    "%B %d, %Y",
)


def _canonical(day: int, month: int, year: int) -> str:
    return f"{day:02d}-{MONTHS[month - 1]}-{year:04d}"


def _parse_generic(text: str) -> Optional[datetime]:
    for fmt in GENERIC_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        return None


def to_dmmmyyyy(value: Optional[str]) -> str:
    text = (value or "").strip()
    if not text:
        return ""

    m = CANONICAL.match(text)
    if m:
        dd, mon, yyyy = m.groups()
        mon = mon.upper()
        if mon not in MONTHS:
            return ""
        day, year = int(dd), int(yyyy)
        idx = MONTHS.index(mon)
        if 1 <= day <= MONTH_DAYS[idx] and MIN_YEAR <= year <= MAX_YEAR:
            return f"{dd}-{mon}-{yyyy}"
        return ""

    parsed = _parse_generic(text)
    if parsed is None or not (MIN_YEAR <= parsed.year <= MAX_YEAR):
        return ""
    return _canonical(parsed.day, parsed.month, parsed.year)


def validate_dmmmyyyy(value: Optional[str]) -> Optional[str]:
    return None if to_dmmmyyyy(value) else DATE_HINT


def display_date(value: Optional[str]) -> str:
    # preview is best effort: show what was typed when it can't be normalised
    return to_dmmmyyyy(value) or (value or "")
