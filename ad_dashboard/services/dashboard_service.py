"""Dashboard service - orchestrates fetching, aggregation and summaries."""

import logging
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import Any

from ..analytics import (
    RegionOverview,
    SeriesTrend,
    StationSummary,
    assemble_chart_data,
    detect_series_trend,
    summarize_orders,
    summarize_region,
)
from ..config.settings import DashboardSettings, load_settings
from ..exceptions import FetchError
from ..ingestion.normalizer import coerce_campaigns, coerce_orders
from ..models.broadcast import Order
from ..models.campaign import Campaign
from ..models.chart_data import ChartData
from .fetcher import WebhookFetcher

logger = logging.getLogger(__name__)

GOOGLE_SOURCE = "google_ads"
META_SOURCE = "meta_ads"


@dataclass
class DashboardOutput:
    """Everything the dashboard renders for one load."""

    chart_data: ChartData
    stations: list[StationSummary]
    regions: list[RegionOverview]
    station_orders: dict[str, list[Order]]
    campaigns: dict[str, list[Campaign]]
    trends: list[SeriesTrend] = field(default_factory=list)
    errors: dict[str, dict[str, Any]] = field(default_factory=dict)


class DashboardService:
    """Service for building the dashboard from the webhook sources.

    Orchestrates:
    1. Fetching every registered source (failures become None)
    2. Coercing station and campaign payloads
    3. Assembling the weekly overview grid
    4. Station, region and series summaries

    Usage:
        service = DashboardService()
        output = service.load_dashboard()
        summary = service.generate_summary_dict(output)
    """

    def __init__(
        self,
        settings: DashboardSettings | None = None,
        fetcher: WebhookFetcher | None = None,
        registry_path: Path | None = None,
    ):
        """Initialize service with the source registry.

        Args:
            settings: Pre-loaded settings. Loaded from registry_path otherwise.
            fetcher: Webhook fetcher (defaults to one built from settings)
            registry_path: Path to sources.yaml. Defaults to bundled config.
        """
        self.settings = settings or load_settings(registry_path)
        self.fetcher = fetcher or WebhookFetcher(self.settings)

    def load_dashboard(self, today: date | None = None) -> DashboardOutput:
        """Fetch all sources and build the dashboard output."""
        report = self.fetcher.fetch_all()
        if report.failed:
            logger.info("Building dashboard without: %s", ", ".join(report.failed))
        return self.build_output(report.payloads, today=today, errors=report.errors)

    def build_output(
        self,
        payloads: dict[str, dict[str, Any] | None],
        today: date | None = None,
        errors: dict[str, FetchError] | None = None,
    ) -> DashboardOutput:
        """Build the dashboard from already resolved payloads.

        Args:
            payloads: Source key -> payload, None (or missing) for failed sources
            today: Reference day for the week grid
            errors: Fetch errors to surface alongside the data
        """
        station_orders: dict[str, list[Order]] = {}
        stations: list[StationSummary] = []
        regions: list[RegionOverview] = []
        tv_radio: dict[str, dict[str, dict[str, Any] | None]] = {}

        for region, keys in self.settings.stations_by_region().items():
            region_name = self.settings.regions[region]
            tv_radio[region] = {key: payloads.get(key) for key in keys}

            region_orders: dict[str, list[Order]] = {}
            for key in keys:
                if payloads.get(key) is None:
                    continue
                orders = coerce_orders(payloads[key])
                station_orders[key] = orders
                region_orders[key] = orders
                stations.append(
                    StationSummary(
                        key=key,
                        label=self.settings.sources[key].label,
                        region=region_name,
                        summary=summarize_orders(orders),
                        order_numbers=[o.order_number for o in orders],
                    )
                )
            if region_orders:
                regions.append(summarize_region(region_name, region_orders))

        chart_data = assemble_chart_data(
            google=payloads.get(GOOGLE_SOURCE),
            meta=payloads.get(META_SOURCE),
            tv_radio=tv_radio,
            count=self.settings.week_count,
            today=today,
            top_n=self.settings.top_campaigns,
            region_names=self.settings.regions,
        )

        campaigns = {
            key: coerce_campaigns(payloads.get(key))
            for key in self.settings.campaign_sources()
        }

        return DashboardOutput(
            chart_data=chart_data,
            stations=stations,
            regions=regions,
            station_orders=station_orders,
            campaigns=campaigns,
            trends=[detect_series_trend(s) for s in chart_data.series],
            errors={key: e.to_dict() for key, e in (errors or {}).items()},
        )

    def generate_summary_dict(self, output: DashboardOutput) -> dict[str, Any]:
        """Convert DashboardOutput to JSON-serializable dictionary.

        Args:
            output: DashboardOutput from load_dashboard() or build_output()

        Returns:
            Dictionary with the chart grid plus station, region and campaign views
        """
        chart = output.chart_data.to_dict()
        return {
            "weekLabels": chart["weekLabels"],
            "series": chart["series"],
            "regions": [
                {
                    "region": r.region,
                    "stations": r.station_count,
                    "orders": r.order_count,
                    "total_ads": r.total_ads,
                }
                for r in output.regions
            ],
            "stations": [
                {
                    "station": s.label,
                    "region": s.region,
                    "total_ads": s.summary.total_ads,
                    "orders": s.summary.order_count,
                    "date_range": {"start": s.summary.start, "end": s.summary.end},
                }
                for s in output.stations
            ],
            "campaigns": {
                key: [
                    {
                        "id": c.id,
                        "name": c.name,
                        "spend": round(c.spend, 2),
                        "daily_budget": round(c.budget, 2),
                        "impressions": c.impressions,
                        "clicks": c.clicks,
                        "ctr_pct": c.ctr,
                        "cpc": c.cost_per_click,
                    }
                    for c in campaigns
                ]
                for key, campaigns in output.campaigns.items()
            },
            "trends": [
                {
                    "series": t.name,
                    "total": round(t.total, 2),
                    "latest": round(t.latest, 2),
                    "wow_change_pct": (
                        round(t.wow_change * 100, 2) if t.wow_change is not None else None
                    ),
                    "direction": t.direction,
                }
                for t in output.trends
            ],
            "errors": output.errors,
        }
