from .dates import format_long_date, parse_mdy, parse_week_start
from .enricher import add_week_start, daily_records_frame
from .normalizer import coerce_campaigns, coerce_orders, orders_from_payloads

__all__ = [
    "add_week_start",
    "coerce_campaigns",
    "coerce_orders",
    "daily_records_frame",
    "format_long_date",
    "orders_from_payloads",
    "parse_mdy",
    "parse_week_start",
]
