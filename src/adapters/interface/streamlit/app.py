"""Streamlit dashboard entry point."""

from collections.abc import Sequence
from datetime import date
from decimal import Decimal

import streamlit as st
import altair as alt

from src.application.services.store import NetWorthStore
from src.application.use_cases.get_net_worth_summary import (
    GetNetWorthSummaryUseCase,
    NetWorthSummary,
)
from src.application.use_cases.get_asset_category_breakdown import (
    AssetCategoryAmount,
    AssetCategoryBreakdown,
    GetAssetCategoryBreakdownUseCase,
)
from src.application.use_cases.get_net_worth_trend import (
    GetNetWorthTrendUseCase,
    NetWorthTrend,
)
from src.domain.constants import (
    HISTORY_ALL,
    TRANSACTION_BUY,
    TRANSACTION_MOVE,
    TRANSACTION_SELL,
    TRANSACTION_TYPES,
    TRANSACTION_UPDATE,
)
from src.domain.errors import TrackerError
from src.domain.models import (
    Asset,
    AssetDraft,
    HistorySeries,
    Transaction,
    TransactionDraft,
)
from src.infrastructure.container import build_store
from src.infrastructure.logging.logger import get_usage_logger


@st.cache_resource(show_spinner=False)
def _load_store() -> NetWorthStore:
    """Store shared across Streamlit reruns of this process."""
    return build_store()


def _format_currency(value: Decimal, currency_code: str) -> str:
    """Format currency values for display."""
    symbol = "€" if currency_code == "EUR" else currency_code
    return f"{value:,.2f} {symbol}"


def _format_delta(value: Decimal) -> str:
    """Format delta values for display."""
    sign = "+" if value >= 0 else ""
    return f"{sign}{value:,.2f}"


def _format_trend(trend: NetWorthTrend) -> str | None:
    """Format the monthly change with its percentage, when available."""
    if trend.percent_change is None:
        return None
    sign = "+" if trend.percent_change >= 0 else ""
    return (
        f"{_format_delta(trend.difference)} "
        f"({sign}{trend.percent_change:.2f}%)"
    )


def _asset_label(assets: Sequence[Asset], asset_id: str) -> str:
    """Return a display name for an asset id."""
    if asset_id == HISTORY_ALL:
        return "All assets"
    for asset in assets:
        if asset.id == asset_id:
            return asset.name
    return "—"


def _render_summary(
    summary: NetWorthSummary,
    trend: NetWorthTrend,
) -> None:
    """Render the headline metrics."""
    currency_code = summary.currency_code
    assets_col, liabilities_col, net_worth_col = st.columns(3)
    assets_col.metric(
        "Assets",
        _format_currency(summary.asset_total, currency_code),
    )
    liabilities_col.metric(
        "Liabilities",
        _format_currency(summary.liability_total, currency_code),
    )
    net_worth_col.metric(
        "Net Worth",
        _format_currency(summary.net_worth, currency_code),
        _format_trend(trend),
    )


def _prepare_history_chart_data(
    history: HistorySeries,
    currency_code: str,
) -> list[dict[str, str | float]]:
    """Convert a history series into Altair-ready rows."""
    return [
        {
            "date": label,
            "value": float(value),
            "value_label": _format_currency(value, currency_code),
        }
        for label, value in history.points()
    ]


def _render_history_chart(
    history: HistorySeries,
    currency_code: str,
    title: str,
) -> None:
    """Render the value history as a line chart."""
    data = _prepare_history_chart_data(history, currency_code)
    chart = alt.Chart(alt.Data(values=data)).mark_line(
        point=True,
        interpolate="monotone",
        color="#1b9aaa",
    ).encode(
        x=alt.X("date:T", title=None),
        y=alt.Y("value:Q", title=None),
        tooltip=[
            alt.Tooltip("date:T"),
            alt.Tooltip("value_label:N"),
        ],
    ).properties(
        height=320,
    ).configure_view(
        stroke=None
    )
    st.subheader(title)
    st.altair_chart(chart, width="stretch")


def _render_asset_category_chart(
    breakdown: AssetCategoryBreakdown,
    title: str,
    max_categories: int = 6,
    chart_size: int = 300,
    show_legend: bool = True,
    legend_columns: int = 3,
    palette: Sequence[str] | None = None,
) -> None:
    """Render a donut chart of asset amounts by category.

    Args:
        breakdown: Aggregated asset totals by category.
        title: Chart title to display above the donut.
        max_categories: Maximum categories before grouping into Other.
        chart_size: Width/height for the chart canvas.
        show_legend: Whether to display the legend.
        legend_columns: Column count when legend is shown.
        palette: Optional color palette override.
    """
    if not breakdown.categories:
        st.info("No asset amounts available for the chart.")
        return
    inner_radius = chart_size * 0.4
    data, _ = _prepare_donut_chart_data(
        breakdown,
        max_categories=max_categories,
    )

    palette_scale = list(
        palette
        or [
            "#1b9aaa",
            "#2e7d32",
            "#f4a261",
            "#e76f51",
            "#457b9d",
            "#f6c453",
            "#6c8ead",
            "#a0c4ff",
        ]
    )
    legend = (
        alt.Legend(
            orient="bottom",
            title=None,
            direction="horizontal",
            columns=legend_columns,
            labelLimit=180,
        )
        if show_legend
        else None
    )

    hover = alt.selection_point(
        name="hover",
        fields=["category"],
        on="view:mouseover",
        clear="view:mouseout",
        empty=False,
    )

    base = alt.Chart(alt.Data(values=data)).mark_arc(
        innerRadius=inner_radius,
        cornerRadius=8,
        padAngle=0.02,
        stroke="#0f1115",
        strokeWidth=2,
    ).encode(
        theta=alt.Theta("amount:Q"),
        color=alt.Color(
            "category:N",
            scale=alt.Scale(range=palette_scale),
            legend=legend,
        ),
        opacity=alt.condition(
            hover,
            alt.value(1.0),
            alt.value(0.25),
        ),
        order=alt.Order("amount:Q", sort="descending"),
        tooltip=[
            alt.Tooltip("category:N"),
            alt.Tooltip("amount_label:N"),
            alt.Tooltip("share_label:N"),
        ],
    )

    hover_text = alt.Chart(alt.Data(values=data)).transform_filter(
        hover
    ).mark_text(
        align="center",
        baseline="middle",
        fontSize=16,
        fontWeight="bold",
        color="#f5f7ff",
    ).encode(
        text="amount_label:N"
    )

    chart = alt.layer(base, hover_text).add_params(hover).properties(
        width=chart_size,
        height=chart_size,
    ).configure_view(
        stroke=None
    ).configure_legend(
        labelColor="#e7ecf3"
    )
    st.subheader(title)
    st.altair_chart(chart, width="stretch")


def _prepare_donut_chart_data(
    breakdown: AssetCategoryBreakdown,
    max_categories: int = 6,
) -> tuple[list[dict[str, str | float]], Decimal]:
    """Prepare donut chart data with a Top-N + Other grouping.

    Args:
        breakdown: Aggregated asset totals by category.
        max_categories: Maximum categories to keep before grouping into Other.

    Returns:
        Tuple with Altair-ready chart data and the total amount.
    """
    sorted_items = sorted(
        breakdown.categories,
        key=lambda item: item.amount,
        reverse=True,
    )
    top_items = sorted_items[:max_categories]
    other_items = sorted_items[max_categories:]
    other_amount = sum(
        (item.amount for item in other_items),
        start=Decimal("0"),
    )
    if other_items and other_amount != 0:
        top_items = [
            *top_items,
            AssetCategoryAmount(
                category="Other",
                amount=other_amount,
                asset_count=sum(item.asset_count for item in other_items),
            ),
        ]
    total_amount = sum(
        (item.amount for item in sorted_items),
        start=Decimal("0"),
    )
    data: list[dict[str, str | float]] = []
    for item in top_items:
        share = (
            (item.amount / total_amount) * Decimal("100")
            if total_amount
            else Decimal("0")
        )
        data.append(
            {
                "category": item.category,
                "amount": float(item.amount),
                "amount_label": _format_currency(
                    item.amount,
                    breakdown.currency_code,
                ),
                "share_label": f"{share:.1f}%",
            }
        )
    return data, total_amount


def _asset_rows(
    store: NetWorthStore,
    assets: Sequence[Asset],
    currency_code: str,
) -> list[dict[str, str]]:
    """Build table rows for the assets page."""
    rows = []
    for asset in assets:
        cost_basis = store.cost_basis(asset.id)
        rows.append(
            {
                "Name": asset.name,
                "Category": asset.category or "—",
                "Quantity": f"{asset.quantity:,}",
                "Value": _format_currency(asset.current_value, currency_code),
                "Gain": _format_delta(asset.current_value - cost_basis),
            }
        )
    return rows


def _transaction_rows(
    transactions: Sequence[Transaction],
    assets: Sequence[Asset],
    currency_code: str,
) -> list[dict[str, str]]:
    """Build table rows for the transactions page."""
    return [
        {
            "Date": transaction.date.isoformat(),
            "Asset": _asset_label(assets, transaction.asset_id),
            "Type": transaction.type,
            "Amount": _format_currency(transaction.amount, currency_code),
            "Quantity": f"{transaction.quantity:,}",
            "Notes": transaction.notes,
        }
        for transaction in transactions
    ]


def _render_dashboard(store: NetWorthStore) -> None:
    """Render metrics, history, and the category breakdown."""
    assets = store.state.assets
    selection = st.sidebar.selectbox(
        "History",
        options=[HISTORY_ALL] + [asset.id for asset in assets],
        format_func=lambda asset_id: _asset_label(assets, asset_id),
    )
    summary = GetNetWorthSummaryUseCase(store).execute()
    trend = GetNetWorthTrendUseCase(store).execute(selection)
    _render_summary(summary, trend)

    history = store.get_history(selection)
    _render_history_chart(
        history,
        summary.currency_code,
        f"History: {_asset_label(assets, selection)}",
    )

    breakdown = GetAssetCategoryBreakdownUseCase(store).execute()
    _render_asset_category_chart(
        breakdown,
        f"Assets by Category ({summary.currency_code})",
        max_categories=6,
        chart_size=400,
        show_legend=True,
        legend_columns=3,
    )


def _render_assets(store: NetWorthStore) -> None:
    """Render the assets table and the creation form."""
    currency_code = store.state.settings.currency
    st.subheader("Assets")
    show_all = st.checkbox("Include empty assets", value=False)
    assets = store.state.assets if show_all else store.held_assets()
    st.caption(f"{len(assets)} assets shown")
    st.dataframe(
        _asset_rows(store, assets, currency_code),
        width="stretch",
        hide_index=True,
    )

    with st.form("add_asset", clear_on_submit=True):
        st.markdown("**Add asset**")
        name = st.text_input("Name")
        category = st.text_input("Category")
        initial_value = st.number_input("Initial value", value=0.0, step=100.0)
        initial_quantity = st.number_input(
            "Initial quantity",
            value=0.0,
            step=1.0,
        )
        submitted = st.form_submit_button("Add")
    if submitted:
        try:
            asset = store.add_asset_with_initial_balance(
                AssetDraft(name=name, category=category),
                initial_value=str(initial_value),
                initial_quantity=str(initial_quantity),
            )
        except TrackerError as exc:
            st.error(str(exc))
            return
        get_usage_logger().info(f"Asset created from dashboard: {asset.id}")
        st.success(f"Added {asset.name}")


def _render_transactions(store: NetWorthStore) -> None:
    """Render the transactions table and the entry form."""
    assets = store.state.assets
    currency_code = store.state.settings.currency
    st.subheader("Transactions")
    asset_filter = st.selectbox(
        "Asset",
        options=[None] + [asset.id for asset in assets],
        format_func=lambda asset_id: (
            "All" if asset_id is None else _asset_label(assets, asset_id)
        ),
    )
    type_filter = st.selectbox("Type", options=["All", *TRANSACTION_TYPES])
    query = st.text_input("Search notes", placeholder="Type to filter")
    transactions = store.filter_transactions(
        asset_id=asset_filter,
        transaction_type=None if type_filter == "All" else type_filter,
        search=query,
    )
    st.caption(f"{len(transactions)} transactions shown")
    st.dataframe(
        _transaction_rows(transactions, assets, currency_code),
        width="stretch",
        hide_index=True,
        height=420,
    )

    if not assets:
        st.warning("No assets yet. Add one first.")
        return
    asset_ids = [asset.id for asset in assets]
    with st.form("add_transaction", clear_on_submit=True):
        st.markdown("**Add transaction**")
        transaction_type = st.selectbox(
            "Type",
            options=[
                TRANSACTION_BUY,
                TRANSACTION_SELL,
                TRANSACTION_UPDATE,
                TRANSACTION_MOVE,
            ],
        )
        asset_id = st.selectbox(
            "Asset",
            options=asset_ids,
            format_func=lambda value: _asset_label(assets, value),
        )
        from_asset_id = st.selectbox(
            "From asset (move only)",
            options=[None] + asset_ids,
            format_func=lambda value: (
                "—" if value is None else _asset_label(assets, value)
            ),
        )
        when = st.date_input("Date", value=date.today())
        amount = st.number_input("Amount", value=0.0, step=10.0)
        quantity = st.number_input("Quantity", value=0.0, step=1.0)
        notes = st.text_input("Notes")
        submitted = st.form_submit_button("Record")
    if submitted:
        draft = TransactionDraft(
            asset_id=asset_id,
            type=transaction_type,
            date=when,
            amount=Decimal(str(amount)),
            quantity=Decimal(str(quantity)),
            from_asset_id=from_asset_id,
            notes=notes,
        )
        try:
            recorded = store.add_transaction(draft)
        except TrackerError as exc:
            st.error(str(exc))
            return
        get_usage_logger().info(
            f"Recorded {len(recorded)} transaction(s) from dashboard"
        )
        st.success(f"Recorded {transaction_type}")


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Net Worth Tracker", layout="wide")
    st.title("Net Worth Tracker")

    page = st.sidebar.selectbox(
        "Page",
        ["Dashboard", "Assets", "Transactions"],
    )
    store = _load_store()
    if page == "Dashboard":
        _render_dashboard(store)
    elif page == "Assets":
        _render_assets(store)
    else:
        _render_transactions(store)


if __name__ == "__main__":  # pragma: no cover
    main()
