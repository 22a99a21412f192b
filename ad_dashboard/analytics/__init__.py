"""Analytics module: week buckets, aggregation and summaries."""

from .aggregator import aggregate_by_week, build_campaign_series, weekly_airings
from .assembly import assemble_chart_data, present_regions
from .models import OrderSummary, RegionOverview, SeriesTrend, StationSummary, WeekBucket
from .stats import detect_series_trend, detect_trend
from .summary import summarize_orders, summarize_region
from .weeks import generate_week_buckets, generate_week_labels

__all__ = [
    "OrderSummary",
    "RegionOverview",
    "SeriesTrend",
    "StationSummary",
    "WeekBucket",
    "aggregate_by_week",
    "assemble_chart_data",
    "build_campaign_series",
    "detect_series_trend",
    "detect_trend",
    "generate_week_buckets",
    "generate_week_labels",
    "present_regions",
    "summarize_orders",
    "summarize_region",
    "weekly_airings",
]
