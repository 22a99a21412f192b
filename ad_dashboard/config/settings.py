"""Source registry and dashboard settings.

The registry lives in sources.yaml next to this module. The webhook base
URL can be overridden with AD_DASHBOARD_WEBHOOK_URL (a .env file is
honoured).
"""

import logging
import os
from pathlib import Path
from typing import Any, Literal, Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, model_validator

from ..exceptions import SourceConfigError

logger = logging.getLogger(__name__)

DEFAULT_REGISTRY_PATH = Path(__file__).parent / "sources.yaml"
WEBHOOK_URL_ENV = "AD_DASHBOARD_WEBHOOK_URL"


class SourceSpec(BaseModel):
    """One webhook-backed data source."""

    label: str
    path: str
    kind: Literal["orders", "campaigns"]
    region: Optional[str] = None
    required_fields: list[str] = Field(default_factory=list)


class DetailEndpoint(BaseModel):
    """Per-campaign drill-down endpoint of a platform source."""

    path: str
    # Sentinel "days" value meaning all time; the parameter is then omitted
    all_time_days: Optional[int] = None


class DashboardSettings(BaseModel):
    """Validated contents of the source registry."""

    base_url: str
    timeout: float = 30
    top_campaigns: int = Field(default=5, ge=1)
    week_count: int = Field(default=12, ge=1)
    regions: dict[str, str] = Field(default_factory=dict)
    sources: dict[str, SourceSpec]
    detail_endpoints: dict[str, DetailEndpoint] = Field(default_factory=dict)

    @model_validator(mode="after")
    def _check_references(self) -> "DashboardSettings":
        for key, spec in self.sources.items():
            if spec.region is not None and spec.region not in self.regions:
                raise ValueError(f"Source {key!r} references unknown region {spec.region!r}")
        for key in self.detail_endpoints:
            if key not in self.sources:
                raise ValueError(f"Detail endpoint for unknown source {key!r}")
        return self

    def source(self, key: str) -> SourceSpec:
        try:
            return self.sources[key]
        except KeyError:
            raise SourceConfigError(
                f"Unknown source {key!r}. Available: {sorted(self.sources)}"
            ) from None

    def url_for(self, path: str) -> str:
        return f"{self.base_url.rstrip('/')}/{path.lstrip('/')}"

    def stations_by_region(self) -> dict[str, list[str]]:
        """Region key -> its station source keys, in registry order."""
        grouped: dict[str, list[str]] = {region: [] for region in self.regions}
        for key, spec in self.sources.items():
            if spec.kind == "orders" and spec.region is not None:
                grouped[spec.region].append(key)
        return grouped

    def campaign_sources(self) -> list[str]:
        return [key for key, spec in self.sources.items() if spec.kind == "campaigns"]


def _read_registry(path: Path) -> dict[str, Any]:
    try:
        with open(path) as f:
            return yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise SourceConfigError(f"Failed to load registry from {path}: {e}") from e


def load_settings(path: Path | None = None) -> DashboardSettings:
    """Load and validate the source registry.

    Raises:
        SourceConfigError: If the file cannot be read or does not validate
    """
    path = path or DEFAULT_REGISTRY_PATH
    raw = _read_registry(path)

    load_dotenv()
    override = os.getenv(WEBHOOK_URL_ENV)
    if override:
        logger.info("Using webhook base URL from %s", WEBHOOK_URL_ENV)
        raw["base_url"] = override

    try:
        return DashboardSettings.model_validate(raw)
    except ValidationError as e:
        raise SourceConfigError(f"Invalid registry {path}: {e}") from e
