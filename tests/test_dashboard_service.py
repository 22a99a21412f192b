"""Tests for settings loading and the dashboard service."""

import json
from datetime import date
from pathlib import Path

import pytest

from ad_dashboard.config import DEFAULT_REGISTRY_PATH, load_settings
from ad_dashboard.exceptions import FetchError, SourceConfigError
from ad_dashboard.services import DashboardOutput, DashboardService, FetchReport

TODAY = date(2025, 1, 15)


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def payloads() -> dict:
    """Resolved payloads with one failed station (wkrl)."""
    return {
        "wtla": {
            "orders": [
                {
                    "orderNumber": "W-1",
                    "dateRange": {"start": "12/30/24", "end": "01/19/25"},
                    "totalAds": 6,
                    "dailyBreakdown": [
                        {"date": "01/01/25", "adCount": 3},
                        {"date": "01/14/25", "adCount": 3},
                    ],
                }
            ],
            "summary": {"totalAds": 6, "orderCount": 1},
        },
        "wkrl": None,
        "wktw": {
            "orders": {
                "k": {
                    "orderNumber": "W-1",
                    "dateRange": {"start": "01/06/25", "end": "01/12/25"},
                    "totalAds": 2,
                    "dailyBreakdown": [{"date": "01/07/25", "adCount": 2}],
                }
            }
        },
        "google_ads": {
            "campaigns": [
                {
                    "id": "g1",
                    "name": "Brand",
                    "spend": 500,
                    "budget": 25,
                    "weeklyBreakdown": [{"week": "2025-01-13", "spend": 100}],
                }
            ]
        },
        "meta_ads": None,
    }


@pytest.fixture
def service() -> DashboardService:
    return DashboardService()


# =============================================================================
# SETTINGS
# =============================================================================


class TestSettings:
    """Tests for load_settings()."""

    def test_bundled_registry(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("AD_DASHBOARD_WEBHOOK_URL", raising=False)
        settings = load_settings(DEFAULT_REGISTRY_PATH)
        assert settings.url_for(settings.source("wtla").path).endswith("/webhook/wtla-data")
        assert settings.stations_by_region() == {
            "syracuse": ["wtla", "wkrl", "wktw", "wzun"],
            "albany": [],
            "montreal": [],
        }
        assert settings.campaign_sources() == ["google_ads", "meta_ads"]

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("AD_DASHBOARD_WEBHOOK_URL", "http://localhost:5678/webhook/")
        settings = load_settings()
        assert settings.url_for("wtla-data") == "http://localhost:5678/webhook/wtla-data"

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(SourceConfigError, match="Failed to load registry"):
            load_settings(tmp_path / "nope.yaml")

    def test_unknown_region(self, tmp_path: Path) -> None:
        registry = tmp_path / "sources.yaml"
        registry.write_text(
            "base_url: http://x\n"
            "regions: {syracuse: Syracuse}\n"
            "sources:\n"
            "  wabc: {label: WABC, path: wabc, kind: orders, region: nyc}\n"
        )
        with pytest.raises(SourceConfigError, match="unknown region"):
            load_settings(registry)

    def test_bad_kind(self, tmp_path: Path) -> None:
        registry = tmp_path / "sources.yaml"
        registry.write_text(
            "base_url: http://x\n"
            "sources:\n"
            "  tiktok: {label: TikTok, path: tt, kind: videos}\n"
        )
        with pytest.raises(SourceConfigError, match="Invalid registry"):
            load_settings(registry)


# =============================================================================
# SERVICE
# =============================================================================


class TestBuildOutput:
    """Tests for DashboardService.build_output()."""

    def test_returns_output(self, service: DashboardService, payloads: dict) -> None:
        assert isinstance(service.build_output(payloads, today=TODAY), DashboardOutput)

    def test_chart_series(self, service: DashboardService, payloads: dict) -> None:
        """Failed Meta source contributes nothing; Syracuse line sums loaded stations."""
        output = service.build_output(payloads, today=TODAY)
        chart = output.chart_data
        assert chart.series_names() == ["Google: Brand", "Syracuse/Rochester Ads"]
        assert chart.get_series("Google: Brand").points[-1] == 100
        assert chart.get_series("Syracuse/Rochester Ads").points[9:] == [3, 2, 3]

    def test_station_summaries(self, service: DashboardService, payloads: dict) -> None:
        output = service.build_output(payloads, today=TODAY)
        assert [s.label for s in output.stations] == ["WTLA", "WKTW"]
        assert output.stations[0].summary.total_ads == 6
        assert output.stations[1].summary.start == "01/06/25"
        assert set(output.station_orders) == {"wtla", "wktw"}

    def test_region_overview(self, service: DashboardService, payloads: dict) -> None:
        """Regions without stations are not listed; shared order numbers count once."""
        output = service.build_output(payloads, today=TODAY)
        assert len(output.regions) == 1
        region = output.regions[0]
        assert region.region == "Syracuse/Rochester Ads"
        assert region.station_count == 2
        assert region.order_count == 1
        assert region.total_ads == 8

    def test_campaigns_and_trends(self, service: DashboardService, payloads: dict) -> None:
        output = service.build_output(payloads, today=TODAY)
        assert [c.name for c in output.campaigns["google_ads"]] == ["Brand"]
        assert output.campaigns["meta_ads"] == []
        assert [t.name for t in output.trends] == output.chart_data.series_names()

    def test_nothing_loaded(self, service: DashboardService) -> None:
        output = service.build_output({}, today=TODAY)
        assert output.chart_data.series == []
        assert output.stations == []
        assert output.regions == []

    def test_errors_surface(self, service: DashboardService, payloads: dict) -> None:
        errors = {"wkrl": FetchError("wkrl", "http_error", "HTTP error", status_code=500)}
        output = service.build_output(payloads, today=TODAY, errors=errors)
        assert output.errors["wkrl"]["type"] == "http_error"
        assert output.errors["wkrl"]["code"] == 500


class TestLoadDashboard:
    """Tests for DashboardService.load_dashboard()."""

    def test_uses_fetcher(self, payloads: dict) -> None:
        class StubFetcher:
            def fetch_all(self) -> FetchReport:
                return FetchReport(payloads=payloads)

        service = DashboardService(fetcher=StubFetcher())
        output = service.load_dashboard(today=TODAY)
        assert output.chart_data.series_names()[0] == "Google: Brand"


class TestSummaryDict:
    """Tests for generate_summary_dict()."""

    def test_json_serializable(self, service: DashboardService, payloads: dict) -> None:
        output = service.build_output(payloads, today=TODAY)
        summary = service.generate_summary_dict(output)
        text = json.dumps(summary)
        assert "weekLabels" in text

    def test_shape(self, service: DashboardService, payloads: dict) -> None:
        summary = service.generate_summary_dict(service.build_output(payloads, today=TODAY))
        assert summary["weekLabels"][-1] == "Jan 13"
        assert summary["series"][1]["type"] == "line"
        assert summary["stations"][0] == {
            "station": "WTLA",
            "region": "Syracuse/Rochester Ads",
            "total_ads": 6,
            "orders": 1,
            "date_range": {"start": "12/30/24", "end": "01/19/25"},
        }
        assert summary["campaigns"]["google_ads"][0]["daily_budget"] == 25
        assert summary["regions"][0]["total_ads"] == 8
