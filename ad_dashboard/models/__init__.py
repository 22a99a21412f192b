from .broadcast import DailyRecord, DateRange, Order
from .campaign import Campaign, WeeklySpend
from .chart_data import AggregatedSeries, ChartData

__all__ = [
    "AggregatedSeries",
    "Campaign",
    "ChartData",
    "DailyRecord",
    "DateRange",
    "Order",
    "WeeklySpend",
]
