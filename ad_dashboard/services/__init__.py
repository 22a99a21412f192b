from .dashboard_service import DashboardOutput, DashboardService
from .fetcher import FetchReport, WebhookFetcher

__all__ = ["DashboardOutput", "DashboardService", "FetchReport", "WebhookFetcher"]
