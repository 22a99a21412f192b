"""Output models for aggregation and summaries."""

from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Literal


@dataclass(frozen=True)
class WeekBucket:
    """A Monday-aligned week window [start, start + 7 days).

    Buckets are matched by start date; label is for display only, since
    two weeks a year apart can share a label.
    """

    start: date
    label: str

    @property
    def end(self) -> date:
        """Exclusive end of the window."""
        return self.start + timedelta(days=7)

    def contains(self, day: date) -> bool:
        return self.start <= day < self.end


@dataclass(frozen=True)
class OrderSummary:
    """Roll-up of one station's orders."""

    total_ads: int
    order_count: int
    start: str | None  # Earliest dateRange.start, as sent
    end: str | None  # Latest dateRange.end, as sent


@dataclass(frozen=True)
class StationSummary:
    """Per-station view: its orders plus their roll-up."""

    key: str
    label: str
    region: str
    summary: OrderSummary
    order_numbers: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class RegionOverview:
    """Totals across the stations of one DMA."""

    region: str
    station_count: int  # Stations with at least one order
    order_count: int  # Unique order numbers
    total_ads: int


@dataclass(frozen=True)
class SeriesTrend:
    """Headline numbers for one chart series."""

    name: str
    total: float
    latest: float
    wow_change: float | None  # (last - previous) / previous
    direction: Literal["increasing", "decreasing", "stable"]
