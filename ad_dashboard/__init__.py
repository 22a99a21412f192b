"""Ad dashboard: webhook sources, weekly aggregation and chart assembly."""

__version__ = "0.3.0"
