"""Flatten orders into a Polars frame of daily airings."""

import logging

import polars as pl

from ..models.broadcast import Order
from .dates import parse_mdy

logger = logging.getLogger(__name__)

DAILY_SCHEMA = {"date": pl.Date, "ad_count": pl.Int64, "order_number": pl.Utf8}


def daily_records_frame(orders: list[Order]) -> pl.DataFrame:
    """One row per daily record with a parseable date, sorted by date.

    Records whose date does not parse are dropped.
    """
    rows = []
    dropped = 0
    for order in orders:
        for record in order.daily_breakdown:
            parsed = parse_mdy(record.date)
            if parsed is None:
                dropped += 1
                continue
            rows.append(
                {
                    "date": parsed,
                    "ad_count": record.ad_count,
                    "order_number": order.order_number,
                }
            )

    if dropped:
        logger.debug("Dropped %d daily record(s) with unparseable dates", dropped)

    return pl.DataFrame(rows, schema=DAILY_SCHEMA).sort("date")


def add_week_start(daily: pl.DataFrame) -> pl.DataFrame:
    """Tag each airing with the Monday of its week, the key week buckets use."""
    return daily.with_columns(pl.col("date").dt.truncate("1w").alias("week_start"))
