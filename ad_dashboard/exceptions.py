"""Custom exceptions for the dashboard data layer."""

from typing import Any


class DashboardError(Exception):
    """Base exception for dashboard errors."""

    pass


class SourceConfigError(DashboardError):
    """Failed to load or resolve the source registry."""

    pass


class FetchError(DashboardError):
    """A webhook request did not yield a usable payload.

    error_type is one of: network_error, http_error, json_error,
    invalid_structure, no_orders, invalid_order_structure.
    """

    def __init__(
        self,
        source: str,
        error_type: str,
        message: str,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ):
        self.source = source
        self.error_type = error_type
        self.status_code = status_code
        self.details = details or {}
        suffix = f" (HTTP {status_code})" if status_code is not None else ""
        super().__init__(f"[{source}] {error_type}: {message}{suffix}")

    def to_dict(self) -> dict[str, Any]:
        """JSON-serializable error body."""
        body: dict[str, Any] = {"type": self.error_type, "message": str(self)}
        if self.status_code is not None:
            body["code"] = self.status_code
        return body
