"""Webhook fetcher - one parametrized fetch-and-validate path for every source."""

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Any

import requests

from ..analytics.summary import summarize_orders
from ..config.settings import DashboardSettings, SourceSpec
from ..exceptions import FetchError, SourceConfigError
from ..ingestion.normalizer import coerce_orders

logger = logging.getLogger(__name__)

JSON_HEADERS = {"Accept": "application/json"}


@dataclass
class FetchReport:
    """Outcome of fetching several sources; failed sources map to None."""

    payloads: dict[str, dict[str, Any] | None] = field(default_factory=dict)
    errors: dict[str, FetchError] = field(default_factory=dict)

    @property
    def failed(self) -> list[str]:
        return sorted(self.errors)


class WebhookFetcher:
    """Fetches and validates source payloads from the webhook backend.

    Usage:
        fetcher = WebhookFetcher(load_settings())
        payload = fetcher.fetch("wtla")
        report = fetcher.fetch_all()
    """

    def __init__(self, settings: DashboardSettings, session: requests.Session | None = None):
        self.settings = settings
        self.session = session or requests.Session()

    def _get_json(self, key: str, url: str, params: dict[str, Any] | None = None) -> Any:
        """GET url and decode its JSON body, mapping failures to FetchError."""
        try:
            response = self.session.get(
                url,
                params=params,
                headers=JSON_HEADERS,
                timeout=self.settings.timeout,
                verify=True,
            )
        except requests.RequestException as e:
            raise FetchError(key, "network_error", f"Network error: {e}") from e

        if response.status_code != 200:
            raise FetchError(key, "http_error", "HTTP error", status_code=response.status_code)

        try:
            return response.json()
        except ValueError as e:
            raise FetchError(
                key,
                "json_error",
                f"JSON error: {e}",
                details={"raw_response": response.text[:500]},
            ) from e

    def fetch(self, key: str) -> dict[str, Any]:
        """Fetch one source and validate it for its kind.

        Station sources come back as {"orders": [...], "summary": {...}} with
        the object-of-orders converted to a list. Campaign sources are
        returned as sent.

        Raises:
            SourceConfigError: Unknown source key
            FetchError: Network, HTTP, JSON or structure failure
        """
        spec = self.settings.source(key)
        data = self._get_json(key, self.settings.url_for(spec.path))
        logger.debug("Fetched %s from %s", key, spec.path)

        if spec.kind == "orders":
            return self._validate_orders(key, spec, data)
        return self._validate_campaigns(key, data)

    def _validate_orders(self, key: str, spec: SourceSpec, data: Any) -> dict[str, Any]:
        if not isinstance(data, dict) or "orders" not in data:
            raise FetchError(key, "invalid_structure", "No orders found in response")

        orders = data["orders"]
        if isinstance(orders, dict):
            orders = list(orders.values())
        if not isinstance(orders, list):
            raise FetchError(key, "invalid_structure", "Orders is neither a list nor an object")
        if not orders:
            raise FetchError(key, "no_orders", "Orders array is empty")

        for order in orders:
            if not isinstance(order, dict) or any(f not in order for f in spec.required_fields):
                raise FetchError(key, "invalid_order_structure", "Invalid order structure")

        summary = summarize_orders(coerce_orders({"orders": orders}))
        return {
            "orders": orders,
            "summary": {
                "totalAds": summary.total_ads,
                "orderCount": summary.order_count,
                "dateRange": {"start": summary.start, "end": summary.end},
            },
        }

    def _validate_campaigns(self, key: str, data: Any) -> dict[str, Any]:
        if not isinstance(data, dict) or "campaigns" not in data:
            raise FetchError(key, "invalid_structure", "No campaigns found in response")
        return data

    def fetch_all(self, keys: list[str] | None = None, max_workers: int = 6) -> FetchReport:
        """Fetch several sources concurrently.

        A source that fails is logged and mapped to None so the rest still
        render.

        Args:
            keys: Source keys (defaults to every registered source)
            max_workers: Thread pool size
        """
        keys = list(keys) if keys is not None else list(self.settings.sources)
        for key in keys:
            self.settings.source(key)  # fail fast on unknown keys

        report = FetchReport()
        if not keys:
            return report

        with ThreadPoolExecutor(max_workers=min(max_workers, len(keys))) as pool:
            futures = {key: pool.submit(self.fetch, key) for key in keys}
            for key, future in futures.items():
                try:
                    report.payloads[key] = future.result()
                except FetchError as e:
                    logger.warning("Source %s unavailable: %s", key, e)
                    report.payloads[key] = None
                    report.errors[key] = e
        return report

    def fetch_campaign_detail(
        self,
        key: str,
        campaign_id: str,
        days: int = 30,
    ) -> dict[str, Any]:
        """Fetch per-campaign metrics (Google) or ad sets (Meta).

        Args:
            key: Platform source key with a detail endpoint
            campaign_id: Campaign ID
            days: Look-back window; the endpoint's all-time sentinel omits it

        Raises:
            ValueError: Empty campaign_id
            SourceConfigError: No detail endpoint for key
            FetchError: Network, HTTP or JSON failure
        """
        campaign_id = str(campaign_id).strip()
        if not campaign_id:
            raise ValueError("Campaign ID required")

        endpoint = self.settings.detail_endpoints.get(key)
        if endpoint is None:
            raise SourceConfigError(f"No detail endpoint configured for {key!r}")

        params: dict[str, Any] = {"campaign_id": campaign_id}
        if endpoint.all_time_days is None or days != endpoint.all_time_days:
            params["days"] = days

        logger.debug("Fetching %s detail for campaign %s (%s days)", key, campaign_id, days)
        return self._get_json(key, self.settings.url_for(endpoint.path), params=params)
