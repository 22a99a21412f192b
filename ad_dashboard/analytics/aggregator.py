"""Weekly aggregation of station airings and campaign spend."""

import logging
from collections.abc import Iterable
from typing import Any

import polars as pl

from ..ingestion.dates import parse_week_start, to_monday
from ..ingestion.enricher import add_week_start, daily_records_frame
from ..ingestion.normalizer import Payload, orders_from_payloads
from ..models.broadcast import Order
from ..models.campaign import Campaign
from ..models.chart_data import AggregatedSeries
from .models import WeekBucket

logger = logging.getLogger(__name__)

DEFAULT_TOP_CAMPAIGNS = 5


def sum_ads_in_buckets(daily: pl.DataFrame, buckets: list[WeekBucket]) -> list[int]:
    """Sum ad_count of a daily frame into each bucket's [start, end) window."""
    totals = []
    for bucket in buckets:
        in_week = daily.filter(
            (pl.col("date") >= bucket.start) & (pl.col("date") < bucket.end)
        )
        totals.append(int(in_week["ad_count"].sum()))
    return totals


def aggregate_by_week(
    payloads: Iterable[Payload] | None,
    buckets: list[WeekBucket],
) -> list[int]:
    """Total ads aired per week bucket across every order of every payload.

    Args:
        payloads: Station payloads; None entries contribute nothing
        buckets: Week buckets from generate_week_buckets()

    Returns:
        One total per bucket, 0 where nothing aired.
    """
    daily = daily_records_frame(orders_from_payloads(payloads))
    return sum_ads_in_buckets(daily, buckets)


def weekly_airings(orders: list[Order]) -> list[dict[str, Any]]:
    """Full weekly history of a station, not limited to the overview window.

    Returns:
        [{"week": date, "ads": int, "orders": int}, ...] sorted by week.
    """
    daily = add_week_start(daily_records_frame(orders))
    weekly = (
        daily.group_by("week_start")
        .agg(
            pl.col("ad_count").sum().alias("ads"),
            pl.col("order_number").n_unique().alias("orders"),
        )
        .sort("week_start")
    )
    return [
        {"week": row["week_start"], "ads": row["ads"], "orders": row["orders"]}
        for row in weekly.to_dicts()
    ]


def top_campaigns(campaigns: list[Campaign], top_n: int) -> list[Campaign]:
    """Highest-spend campaigns first. Ties keep their input order."""
    return sorted(campaigns, key=lambda c: c.spend, reverse=True)[:top_n]


def build_campaign_series(
    campaigns: list[Campaign],
    buckets: list[WeekBucket],
    top_n: int = DEFAULT_TOP_CAMPAIGNS,
    prefix: str = "",
) -> list[AggregatedSeries]:
    """Weekly spend series for the top `top_n` campaigns by spend.

    Each breakdown entry is placed in the bucket whose Monday matches the
    entry's week, compared by date rather than by label. A later entry for
    the same bucket overwrites an earlier one. Entries outside the window
    or with unparseable weeks are dropped.

    prefix is prepended to each campaign name (e.g. "Google: ").
    """
    index_by_start = {b.start: i for i, b in enumerate(buckets)}

    series = []
    for campaign in top_campaigns(campaigns, top_n):
        points = [0.0] * len(buckets)
        for entry in campaign.weekly_breakdown:
            week = parse_week_start(entry.week)
            if week is None:
                logger.debug("Campaign %s: unparseable week %r", campaign.id, entry.week)
                continue
            index = index_by_start.get(to_monday(week))
            if index is not None:
                points[index] = entry.spend
        name = f"{prefix}{campaign.name or campaign.id}"
        series.append(AggregatedSeries(name=name, points=points, kind="column"))
    return series
