"""Date parsing and display formatting for station and platform payloads."""

from datetime import date, timedelta

MISSING_DATE_MARKERS = {"", "N/A", "-"}

SHORT_MONTHS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

# Month names used in the station order tables
LONG_MONTHS = (
    "Jan.", "Feb.", "Mar.", "Apr.", "May", "June",
    "July", "Aug.", "Sept.", "Oct.", "Nov.", "Dec.",
)

# Two-digit years at or above this pivot are 19xx, below it 20xx
CENTURY_PIVOT = 50


def expand_year(year: int) -> int:
    """Expand a 2-digit year using the fixed 50 pivot (73 -> 1973, 24 -> 2024)."""
    if year >= 100:
        return year
    return 1900 + year if year >= CENTURY_PIVOT else 2000 + year


def parse_mdy(value: str | None) -> date | None:
    """Parse a station date in MM/DD/YY form.

    Returns None for the "N/A" / "-" / empty markers and for anything that
    is not a real calendar date (month 13, day 32, Feb 30). Never raises.
    """
    if value is None:
        return None
    text = str(value).strip()
    if text in MISSING_DATE_MARKERS:
        return None

    parts = text.split("/")
    if len(parts) != 3 or not all(p.isdigit() for p in parts):
        return None
    # Month and day take one or two digits, the year two or four
    if len(parts[0]) > 2 or len(parts[1]) > 2 or len(parts[2]) not in (2, 4):
        return None

    try:
        month, day, year = (int(p) for p in parts)
        return date(expand_year(year), month, day)
    except (ValueError, OverflowError):
        return None


def parse_week_start(value: str | None) -> date | None:
    """Parse a platform week-start date.

    Ad platforms send ISO dates (2025-01-13); station-style MM/DD/YY is
    accepted as a fallback.
    """
    if value is None:
        return None
    text = str(value).strip()
    if text[4:5] != "-":
        return parse_mdy(text)
    try:
        # Some exports append a time part
        return date.fromisoformat(text[:10])
    except ValueError:
        return None


def to_monday(day: date) -> date:
    """Roll a date back to the Monday of its week (Sunday goes back 6 days)."""
    return day - timedelta(days=day.weekday())


def format_week_label(day: date) -> str:
    """Display label for a week bucket, e.g. "Jan 13"."""
    return f"{SHORT_MONTHS[day.month - 1]} {day.day}"


def format_month_label(day: date) -> str:
    """Display label for a month bucket, e.g. "Jan 2025"."""
    return f"{SHORT_MONTHS[day.month - 1]} {day.year}"


def ordinal_suffix(day: int) -> str:
    if day in (1, 21, 31):
        return "st"
    if day in (2, 22):
        return "nd"
    if day in (3, 23):
        return "rd"
    return "th"


def format_long_date(value: str | None) -> str | None:
    """Format "01/08/24" as "Jan. 8th 2024".

    Missing markers and unparseable strings are returned unchanged.
    """
    parsed = parse_mdy(value)
    if parsed is None:
        return value
    return f"{LONG_MONTHS[parsed.month - 1]} {parsed.day}{ordinal_suffix(parsed.day)} {parsed.year}"
