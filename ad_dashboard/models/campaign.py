"""Pydantic models for ad-platform campaign payloads."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class WeeklySpend(BaseModel):
    """Spend for one platform week; week is the week-start date string."""

    model_config = ConfigDict(coerce_numbers_to_str=True, frozen=True)

    week: Optional[str] = None
    spend: float = 0.0


class Campaign(BaseModel):
    """Campaign row from the Google Ads or Meta Ads webhook.

    ctr is a percentage as sent by the platform (2.5 = 2.5%).
    budget is the daily budget.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        coerce_numbers_to_str=True,
        frozen=True,
        extra="ignore",
    )

    id: str
    name: str = ""
    status: Optional[str] = None
    spend: float = 0.0
    budget: float = 0.0
    impressions: int = 0
    clicks: int = 0
    ctr: Optional[float] = None
    avg_cpc: Optional[float] = Field(default=None, alias="avgCpc")
    cpc: Optional[float] = None
    age_in_days: Optional[int] = Field(default=None, alias="ageInDays")
    weekly_breakdown: list[WeeklySpend] = Field(
        default_factory=list, alias="weeklyBreakdown"
    )

    @property
    def cost_per_click(self) -> float | None:
        """Google sends avgCpc, Meta sends cpc."""
        return self.avg_cpc if self.avg_cpc is not None else self.cpc
