from .charts import create_airings_chart, create_overview_chart
from .formatting import format_compact, format_currency, format_number, format_pct
from .navigation import (
    DEFAULT_TIME_RANGE,
    SLIDES,
    TIME_RANGES,
    SlideState,
    available_time_ranges,
    go_home,
    navigate,
    slide_for_series,
)

__all__ = [
    "DEFAULT_TIME_RANGE",
    "SLIDES",
    "SlideState",
    "TIME_RANGES",
    "available_time_ranges",
    "create_airings_chart",
    "create_overview_chart",
    "format_compact",
    "format_currency",
    "format_number",
    "format_pct",
    "go_home",
    "navigate",
    "slide_for_series",
]
