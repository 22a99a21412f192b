"""ChartData - the weekly grid handed to the presentation layer."""

import json
from dataclasses import dataclass, field
from typing import Any, Literal

SeriesKind = Literal["column", "line"]


@dataclass(frozen=True)
class AggregatedSeries:
    """One named series with a value per week bucket.

    kind tells the chart how to draw it: spend is drawn as columns,
    ads aired as lines.
    """

    name: str
    points: list[float]
    kind: SeriesKind = "line"

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "type": self.kind, "points": list(self.points)}


@dataclass
class ChartData:
    """Aligned weekly grid for the overview chart.

    Every series has exactly one point per week label, in label order.
    """

    week_labels: list[str]
    series: list[AggregatedSeries] = field(default_factory=list)

    def __post_init__(self) -> None:
        size = len(self.week_labels)
        for s in self.series:
            if len(s.points) != size:
                raise ValueError(
                    f"Series {s.name!r} has {len(s.points)} points, expected {size}"
                )

    def series_names(self) -> list[str]:
        return [s.name for s in self.series]

    def get_series(self, name: str) -> AggregatedSeries | None:
        return next((s for s in self.series if s.name == name), None)

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dict."""
        return {
            "weekLabels": list(self.week_labels),
            "series": [s.to_dict() for s in self.series],
        }

    def to_json(self, indent: int = 2) -> str:
        """Serialize to JSON string."""
        return json.dumps(self.to_dict(), indent=indent, default=str)
