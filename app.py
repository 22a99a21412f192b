"""Streamlit UI for the marketing ad dashboard."""

import logging

import streamlit as st

from ad_dashboard.analytics import weekly_airings
from ad_dashboard.exceptions import DashboardError
from ad_dashboard.ingestion import format_long_date
from ad_dashboard.presentation import (
    DEFAULT_TIME_RANGE,
    TIME_RANGES,
    SlideState,
    available_time_ranges,
    create_airings_chart,
    create_overview_chart,
    format_compact,
    format_currency,
    format_number,
    format_pct,
    go_home,
    navigate,
    slide_for_series,
)
from ad_dashboard.services import DashboardOutput, DashboardService

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

# Page config
st.set_page_config(
    page_title="Ad Dashboard",
    page_icon="📊",
    layout="wide",
)

REGION_SLIDES = {"syracuse": "Syracuse/Rochester", "albany": "Albany DMA", "montreal": "Montreal/Plattsburgh"}


@st.cache_resource
def get_service() -> DashboardService:
    return DashboardService()


def get_slide() -> SlideState:
    return st.session_state.setdefault("slide", SlideState())


def set_slide(state: SlideState) -> None:
    if state != st.session_state.get("slide"):
        st.session_state["slide"] = state
        # A stale chart selection would navigate again on the next run
        st.session_state.pop("overview_chart", None)
        st.rerun()


def render_back_button(state: SlideState) -> None:
    if st.button("← Back to overview"):
        set_slide(go_home(state))


def render_welcome(state: SlideState, output: DashboardOutput) -> None:
    """Overview chart, trend tiles and channel cards."""
    st.header("Marketing Performance Overview")

    if output.errors:
        st.warning(
            "Some sources could not be loaded: " + ", ".join(sorted(output.errors))
        )

    if not output.chart_data.series:
        st.info("No chart data available")
    else:
        fig = create_overview_chart(output.chart_data)
        event = st.plotly_chart(
            fig, use_container_width=True, on_select="rerun", key="overview_chart"
        )
        points = event.selection.points if event and event.selection else []
        if points:
            series = output.chart_data.series[points[0]["curve_number"]]
            set_slide(navigate(state, slide_for_series(series.name)))

        st.caption("Click any data point to view detailed analytics | Click legend items to show/hide channels")

    if output.trends:
        cols = st.columns(min(len(output.trends), 4))
        for i, trend in enumerate(output.trends):
            is_spend = output.chart_data.series[i].kind == "column"
            latest = format_currency(trend.latest) if is_spend else format_number(trend.latest)
            delta = format_pct(trend.wow_change * 100, 1) if trend.wow_change is not None else None
            with cols[i % len(cols)]:
                st.metric(trend.name, latest, delta=delta, help=f"Trend: {trend.direction}")

    st.divider()

    col1, col2, col3 = st.columns(3)
    with col1:
        if st.button("🔍 Google Ads", use_container_width=True):
            set_slide(navigate(state, "google"))
    with col2:
        if st.button("📘 Facebook Ads", use_container_width=True):
            set_slide(navigate(state, "facebook"))
    with col3:
        if st.button("📺 TV / Radio", use_container_width=True):
            set_slide(navigate(state, "tvradio"))


def render_campaigns(state: SlideState, service: DashboardService, output: DashboardOutput, key: str, title: str) -> None:
    """Campaign cards plus a drill-down for the selected campaign."""
    render_back_button(state)
    st.header(title)

    campaigns = output.campaigns.get(key, [])
    if not campaigns:
        st.info("No campaigns found")
        return

    col1, col2 = st.columns(2)
    with col1:
        st.metric("Active Campaigns", len(campaigns))
    with col2:
        st.metric("Total Daily Budget", format_currency(sum(c.budget for c in campaigns)) + "/day")

    st.dataframe(
        [
            {
                "Campaign": c.name,
                "Daily Budget": format_currency(c.budget),
                "Total Spent": format_currency(c.spend),
                "Impressions": format_compact(c.impressions),
                "Clicks": format_number(c.clicks),
                "CTR": format_pct(c.ctr),
                "Avg CPC": format_currency(c.cost_per_click, 2),
            }
            for c in campaigns
        ],
        use_container_width=True,
        hide_index=True,
    )

    st.subheader("Campaign Detail")
    by_name = {f"{c.name} ({c.id})": c for c in campaigns}
    selected = by_name[st.selectbox("Campaign", options=list(by_name), key=f"{key}_campaign")]
    ranges = available_time_ranges(selected.age_in_days)
    range_label = st.radio(
        "Time range",
        ranges,
        index=ranges.index(DEFAULT_TIME_RANGE),
        horizontal=True,
        key=f"{key}_range",
    )

    try:
        detail = service.fetcher.fetch_campaign_detail(key, selected.id, TIME_RANGES[range_label])
    except (DashboardError, ValueError) as e:
        st.error(f"Error loading campaign detail: {e}")
        return

    rows = detail.get("adsets") if isinstance(detail, dict) else None
    if rows is not None:
        st.metric("Ad Sets", detail.get("totalAdSets", len(rows)))
        if rows:
            st.dataframe(rows, use_container_width=True, hide_index=True)
        else:
            st.info("No active ad sets found")
    else:
        st.json(detail)


def render_orders(output: DashboardOutput, station_key: str) -> None:
    """Collapsible per-order tables of one station."""
    orders = output.station_orders.get(station_key, [])
    if not orders:
        st.info("No data available")
        return

    weekly = weekly_airings(orders)
    if weekly:
        st.plotly_chart(create_airings_chart(weekly, "Ads Aired per Week"), use_container_width=True)

    for order in orders:
        date_range = order.date_range
        start = format_long_date(date_range.start) if date_range else "-"
        end = format_long_date(date_range.end) if date_range else "-"
        with st.expander(f"{order.order_number} | {start} - {end} | Total Ads: {order.total_ads}"):
            if not order.daily_breakdown:
                st.caption("No daily data available")
                continue
            st.dataframe(
                [
                    {
                        "Date Aired": format_long_date(day.date),
                        "# of Ads Ran": day.ad_count,
                        "Ad-ID": ", ".join(day.ad_ids) if day.ad_ids else "-",
                    }
                    for day in order.daily_breakdown
                ],
                use_container_width=True,
                hide_index=True,
            )


def render_tvradio(state: SlideState, output: DashboardOutput) -> None:
    render_back_button(state)
    st.header("TV / Radio")

    overviews = {r.region: r for r in output.regions}
    cols = st.columns(len(REGION_SLIDES))
    for col, (slide, name) in zip(cols, REGION_SLIDES.items()):
        with col:
            overview = next((o for region, o in overviews.items() if region.startswith(name)), None)
            if overview:
                st.metric(name, f"{format_number(overview.total_ads)} ads")
            else:
                st.metric(name, "No data yet")
            if st.button(f"Open {name}", use_container_width=True, key=f"open_{slide}"):
                set_slide(navigate(state, slide))


def render_region(state: SlideState, output: DashboardOutput, slide: str) -> None:
    if st.button("← Back to TV / Radio"):
        set_slide(navigate(state, "tvradio"))

    name = REGION_SLIDES[slide]
    st.header(name)

    overview = next((r for r in output.regions if r.region.startswith(name)), None)
    if overview is None:
        st.info(f"{name} data not yet available")
        return

    col1, col2, col3 = st.columns(3)
    with col1:
        st.metric("Stations", overview.station_count)
    with col2:
        st.metric("Orders", overview.order_count)
    with col3:
        st.metric("Total Ads", format_number(overview.total_ads))

    stations = [s for s in output.stations if s.region == overview.region]
    tabs = st.tabs([s.label for s in stations])
    for tab, station in zip(tabs, stations):
        with tab:
            summary = station.summary
            c1, c2 = st.columns(2)
            with c1:
                st.metric("Total Ads", format_number(summary.total_ads))
            with c2:
                if summary.start and summary.end:
                    st.metric("Date Range", f"{format_long_date(summary.start)} - {format_long_date(summary.end)}")
                else:
                    st.metric("Date Range", "-")
            render_orders(output, station.key)


def main():
    st.title("📊 Ad Dashboard")

    try:
        service = get_service()
    except DashboardError as e:
        st.error(f"Error loading configuration: {e}")
        return

    with st.sidebar:
        refresh = st.button("🔄 Refresh data", type="primary", use_container_width=True)

    if refresh or "dashboard_output" not in st.session_state:
        with st.spinner("Loading chart data..."):
            st.session_state["dashboard_output"] = service.load_dashboard()

    output: DashboardOutput = st.session_state["dashboard_output"]
    state = get_slide()

    if state.current == "welcome":
        render_welcome(state, output)
    elif state.current == "google":
        render_campaigns(state, service, output, "google_ads", "Google Ads")
    elif state.current == "facebook":
        render_campaigns(state, service, output, "meta_ads", "Facebook Ads")
    elif state.current == "tvradio":
        render_tvradio(state, output)
    else:
        render_region(state, output, state.current)


if __name__ == "__main__":
    main()
