"""Week and month bucket generation for the overview grid."""

from datetime import date, timedelta
from typing import Literal

from ..ingestion.dates import format_month_label, format_week_label, to_monday
from .models import WeekBucket

Period = Literal["weekly", "monthly"]

DEFAULT_WEEK_COUNT = 12


def generate_week_buckets(
    count: int = DEFAULT_WEEK_COUNT,
    today: date | None = None,
) -> list[WeekBucket]:
    """Last `count` Monday-aligned weeks, oldest first, ending with this week.

    Args:
        count: Number of weeks
        today: Reference day (defaults to date.today())

    Returns:
        Contiguous buckets, each starting on a Monday.
    """
    if count < 1:
        raise ValueError(f"count must be >= 1, got {count}")
    today = today or date.today()

    buckets = []
    for i in range(count - 1, -1, -1):
        start = to_monday(today - timedelta(days=7 * i))
        buckets.append(WeekBucket(start=start, label=format_week_label(start)))
    return buckets


def month_starts(count: int, today: date) -> list[date]:
    """First day of each of the last `count` months, oldest first."""
    starts = []
    for i in range(count - 1, -1, -1):
        months = today.year * 12 + (today.month - 1) - i
        starts.append(date(months // 12, months % 12 + 1, 1))
    return starts


def generate_week_labels(
    period: Period = "weekly",
    count: int = DEFAULT_WEEK_COUNT,
    today: date | None = None,
) -> list[str]:
    """Display labels for the last `count` periods, oldest first.

    weekly: "Jan 13" for the Monday of each week.
    monthly: "Jan 2025" for each month up to the current one.
    """
    if count < 1:
        raise ValueError(f"count must be >= 1, got {count}")
    today = today or date.today()

    if period == "weekly":
        return [b.label for b in generate_week_buckets(count, today)]
    if period == "monthly":
        return [format_month_label(d) for d in month_starts(count, today)]
    raise ValueError(f"Unsupported period: {period}")
