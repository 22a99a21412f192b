"""Pydantic models for broadcast station payloads."""

import logging
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

logger = logging.getLogger(__name__)


class DailyRecord(BaseModel):
    """One day of airings for one order.

    Dates stay as the raw MM/DD/YY strings the stations send; they are
    parsed during aggregation so a bad date drops a record, not an order.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        coerce_numbers_to_str=True,
        frozen=True,
        extra="ignore",
    )

    date: Optional[str] = None
    ad_count: int = Field(default=0, ge=0, alias="adCount")
    ad_ids: list[str] = Field(default_factory=list, alias="adIDs")


class DateRange(BaseModel):
    """Flight dates of an order, raw MM/DD/YY strings."""

    model_config = ConfigDict(coerce_numbers_to_str=True, frozen=True)

    start: Optional[str] = None
    end: Optional[str] = None


class Order(BaseModel):
    """A station order with its daily breakdown.

    total_ads is expected to equal the sum of the daily ad counts, but
    stations do not guarantee it and nothing here enforces it.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        coerce_numbers_to_str=True,
        frozen=True,
        extra="ignore",
    )

    order_number: str = Field(alias="orderNumber")
    date_range: Optional[DateRange] = Field(default=None, alias="dateRange")
    total_ads: int = Field(default=0, ge=0, alias="totalAds")
    daily_breakdown: list[DailyRecord] = Field(
        default_factory=list, alias="dailyBreakdown"
    )

    @field_validator("daily_breakdown", mode="before")
    @classmethod
    def drop_bad_records(cls, value: Any) -> Any:
        """Validate daily records one at a time so a bad day drops only itself."""
        if value is None:
            return []
        if not isinstance(value, list):
            return value

        records = []
        for i, raw in enumerate(value):
            try:
                records.append(DailyRecord.model_validate(raw))
            except ValidationError as e:
                logger.warning("Dropping daily record #%d: %d validation error(s)", i, e.error_count())
        return records
