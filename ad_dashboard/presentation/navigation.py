"""Slide navigation state for the dashboard panels."""

from dataclasses import dataclass, replace

SLIDES = ("welcome", "google", "facebook", "tvradio", "syracuse", "albany", "montreal")
HOME_SLIDE = "welcome"


@dataclass(frozen=True)
class SlideState:
    """Which panel is showing and the one it was reached from."""

    current: str = HOME_SLIDE
    previous: str | None = None

    @property
    def is_home(self) -> bool:
        return self.current == HOME_SLIDE


def navigate(state: SlideState, target: str) -> SlideState:
    """Move to target. Navigating to the current slide returns state unchanged."""
    if target not in SLIDES:
        raise ValueError(f"Unknown slide {target!r}. Available: {list(SLIDES)}")
    if target == state.current:
        return state
    return replace(state, current=target, previous=state.current)


def go_home(state: SlideState) -> SlideState:
    return navigate(state, HOME_SLIDE)


def slide_for_series(series_name: str) -> str:
    """Panel that details a clicked overview series."""
    if "Google" in series_name:
        return "google"
    if "Meta" in series_name:
        return "facebook"
    return "tvradio"


# Campaign drill-down windows: label -> days (-1 = all time)
TIME_RANGES = {
    "Last Month": 30,
    "Last 3 Months": 90,
    "Last 12 Months": 365,
    "All Time": -1,
}
DEFAULT_TIME_RANGE = "Last Month"


def available_time_ranges(age_in_days: int | None) -> list[str]:
    """Windows worth offering for a campaign of the given age.

    Windows longer than the campaign has run are hidden; "Last Month" and
    "All Time" are always offered. Unknown age offers everything.
    """
    if age_in_days is None:
        return list(TIME_RANGES)
    return [
        label
        for label, days in TIME_RANGES.items()
        if days in (-1, 30) or age_in_days >= days
    ]
