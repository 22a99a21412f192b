"""Roll-ups of station orders for the overview cards."""

from collections.abc import Mapping

from ..ingestion.dates import parse_mdy
from ..models.broadcast import Order
from .models import OrderSummary, RegionOverview


def summarize_orders(orders: list[Order]) -> OrderSummary:
    """Total ads, order count and overall flight dates of a station.

    Flight dates are compared as parsed dates but reported as the original
    strings. Orders without a parseable date range are left out of the
    range and still count toward the totals.
    """
    earliest: tuple | None = None
    latest: tuple | None = None

    for order in orders:
        if order.date_range is None:
            continue
        start = parse_mdy(order.date_range.start)
        end = parse_mdy(order.date_range.end)
        if start is not None and (earliest is None or start < earliest[0]):
            earliest = (start, order.date_range.start)
        if end is not None and (latest is None or end > latest[0]):
            latest = (end, order.date_range.end)

    return OrderSummary(
        total_ads=sum(o.total_ads for o in orders),
        order_count=len(orders),
        start=earliest[1] if earliest else None,
        end=latest[1] if latest else None,
    )


def summarize_region(region: str, stations: Mapping[str, list[Order]]) -> RegionOverview:
    """Station count, unique orders and total ads across a region's stations.

    Args:
        region: Region display name
        stations: Station key -> its orders
    """
    active = {key: orders for key, orders in stations.items() if orders}
    order_numbers = {o.order_number for orders in active.values() for o in orders}
    return RegionOverview(
        region=region,
        station_count=len(active),
        order_count=len(order_numbers),
        total_ads=sum(o.total_ads for orders in active.values() for o in orders),
    )
