"""Assemble the overview chart from all sources."""

from collections.abc import Mapping
from datetime import date

from ..ingestion.normalizer import Payload, coerce_campaigns
from ..models.chart_data import AggregatedSeries, ChartData
from .aggregator import DEFAULT_TOP_CAMPAIGNS, aggregate_by_week, build_campaign_series
from .weeks import DEFAULT_WEEK_COUNT, generate_week_buckets

GOOGLE_PREFIX = "Google: "
META_PREFIX = "Meta: "

RegionPayloads = Mapping[str, Mapping[str, Payload] | None]


def present_regions(tv_radio: RegionPayloads | None) -> dict[str, list[Payload]]:
    """Regions with at least one station payload, in input order.

    A region that is None, empty, or whose stations all failed to load is
    left out.
    """
    present: dict[str, list[Payload]] = {}
    for region, stations in (tv_radio or {}).items():
        if not stations:
            continue
        payloads = [p for p in stations.values() if p is not None]
        if payloads:
            present[region] = payloads
    return present


def assemble_chart_data(
    google: Payload,
    meta: Payload,
    tv_radio: RegionPayloads | None,
    count: int = DEFAULT_WEEK_COUNT,
    today: date | None = None,
    top_n: int = DEFAULT_TOP_CAMPAIGNS,
    region_names: Mapping[str, str] | None = None,
) -> ChartData:
    """Build the aligned weekly grid for the overview chart.

    Series order: Google campaign spend, Meta campaign spend, then one
    ads-aired line per region present in tv_radio.

    Args:
        google: Google Ads payload ({campaigns: [...]}) or None
        meta: Meta Ads payload ({campaigns: [...]}) or None
        tv_radio: region -> station -> station payload (or None)
        count: Number of weeks
        today: Reference day (defaults to date.today())
        top_n: Campaigns per platform
        region_names: region key -> series name (defaults to the key)

    Returns:
        ChartData with one point per week in every series.
    """
    buckets = generate_week_buckets(count, today)
    region_names = region_names or {}

    series: list[AggregatedSeries] = []
    series.extend(
        build_campaign_series(coerce_campaigns(google), buckets, top_n, prefix=GOOGLE_PREFIX)
    )
    series.extend(
        build_campaign_series(coerce_campaigns(meta), buckets, top_n, prefix=META_PREFIX)
    )

    for region, payloads in present_regions(tv_radio).items():
        series.append(
            AggregatedSeries(
                name=region_names.get(region, region),
                points=aggregate_by_week(payloads, buckets),
                kind="line",
            )
        )

    return ChartData(week_labels=[b.label for b in buckets], series=series)
