"""Statistical helpers using scipy for series trends."""

from typing import Literal

import numpy as np
from scipy import stats

from ..models.chart_data import AggregatedSeries
from .models import SeriesTrend


# Fewer weeks than this never count as a trend
MIN_TREND_WEEKS = 3


def detect_trend(
    points: list[float] | np.ndarray,
    max_p: float = 0.05,
    min_abs_r: float = 0.3,
) -> Literal["increasing", "decreasing", "stable"]:
    """Direction of a weekly spend or airings series.

    A straight line is fitted through the points against their week index.
    The series is "increasing" or "decreasing" only when the fit is both
    significant (p below max_p) and reasonably tight (|r| above min_abs_r);
    short or flat series are "stable".
    """
    weekly = np.asarray(points, dtype=float)
    # linregress is undefined for a flat line
    if weekly.size < MIN_TREND_WEEKS or np.ptp(weekly) == 0:
        return "stable"

    fit = stats.linregress(np.arange(weekly.size), weekly)
    if fit.pvalue >= max_p or abs(fit.rvalue) <= min_abs_r:
        return "stable"
    return "increasing" if fit.slope > 0 else "decreasing"


def week_over_week(values: list[float]) -> float | None:
    """Change of the last point relative to the one before it.

    None when there are fewer than two points or the previous week is 0.
    """
    if len(values) < 2 or values[-2] == 0:
        return None
    return float((values[-1] - values[-2]) / values[-2])


def detect_series_trend(series: AggregatedSeries) -> SeriesTrend:
    """Total, latest value, WoW change and trend direction of one series."""
    points = list(series.points)
    return SeriesTrend(
        name=series.name,
        total=float(sum(points)),
        latest=float(points[-1]) if points else 0.0,
        wow_change=week_over_week(points),
        direction=detect_trend(points),
    )
