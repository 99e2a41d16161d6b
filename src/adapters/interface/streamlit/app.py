"""Streamlit dashboard entry point."""

from collections.abc import Sequence
from datetime import date, timedelta
from decimal import Decimal

import streamlit as st
import altair as alt

from src.application.ports.possessions_repository import (
    PossessionsRepositoryPort,
)
from src.application.use_cases.close_possession import ClosePossessionUseCase
from src.application.use_cases.create_possession import (
    CreatePossessionUseCase,
)
from src.application.use_cases.get_patrimony_range import (
    GetPatrimonyRangeUseCase,
    PatrimonyRange,
)
from src.application.use_cases.get_patrimony_series import (
    GetPatrimonySeriesUseCase,
    PatrimonySeries,
)
from src.application.use_cases.get_patrimony_summary import (
    GetPatrimonySummaryUseCase,
    PatrimonySummary,
)
from src.application.use_cases.remove_possession import (
    RemovePossessionUseCase,
)
from src.domain.errors import PatrimonyError
from src.domain.models.patrimony import PossessionValuation
from src.infrastructure.container import (
    build_possessions_repository,
    build_settings,
)
from src.infrastructure.logging.logger import get_usage_logger
from src.infrastructure.settings import LedgerSettings

_CURRENCY_SYMBOLS = {"MGA": "Ar", "EUR": "€", "USD": "$"}


@st.cache_resource(show_spinner=False)
def _get_settings() -> LedgerSettings:
    """Settings shared by every session of the server process."""
    return build_settings()


@st.cache_resource(show_spinner=False)
def _get_repository() -> PossessionsRepositoryPort:
    """Possession ledger shared by every session of the server process."""
    return build_possessions_repository(settings=_get_settings())


def _fetch_patrimony_summary(
    repository: PossessionsRepositoryPort,
    as_of: date,
    currency_code: str,
) -> PatrimonySummary:
    """Compute the patrimony summary at a date."""
    use_case = GetPatrimonySummaryUseCase(
        repository,
        currency_code=currency_code,
    )
    return use_case.execute(as_of)


def _fetch_patrimony_range(
    repository: PossessionsRepositoryPort,
    start_date: date,
    end_date: date,
    currency_code: str,
) -> PatrimonyRange:
    """Compute the range figure for the selected dates."""
    use_case = GetPatrimonyRangeUseCase(
        repository,
        currency_code=currency_code,
    )
    return use_case.execute(start_date, end_date)


def _fetch_patrimony_series(
    repository: PossessionsRepositoryPort,
    start_date: date,
    end_date: date,
    step_days: int,
    currency_code: str,
) -> PatrimonySeries:
    """Sample the patrimony between the selected dates."""
    use_case = GetPatrimonySeriesUseCase(
        repository,
        currency_code=currency_code,
    )
    return use_case.execute(start_date, end_date, step_days=step_days)


def _format_currency(value: Decimal, currency_code: str) -> str:
    """Format currency values for display."""
    symbol = _CURRENCY_SYMBOLS.get(currency_code, currency_code)
    return f"{value:,.2f} {symbol}"


def _format_delta(value: Decimal) -> str:
    """Format delta values for display."""
    sign = "+" if value >= 0 else ""
    return f"{sign}{value:,.2f}"


def _format_delta_with_percent(
    delta: Decimal,
    baseline: Decimal,
) -> str:
    """Format delta value with percentage change."""
    if baseline == 0:
        return _format_delta(delta)
    percent = (delta / baseline) * Decimal("100")
    sign = "+" if percent >= 0 else ""
    return f"{_format_delta(delta)} ({sign}{percent:.2f}%)"


def _build_possession_rows(
    summary: PatrimonySummary,
) -> list[dict[str, str]]:
    """Build the possessions table rows for the summary date."""
    currency_code = summary.currency_code
    return [
        {
            "Label": item.label,
            "Owner": item.owner or "—",
            "Initial value": _format_currency(
                item.initial_value,
                currency_code,
            ),
            "Start date": item.start_date.isoformat(),
            "End date": item.end_date.isoformat() if item.end_date else "—",
            "Mode": item.mode.value,
            "Current value": _format_currency(
                item.current_value,
                currency_code,
            ),
            "Status": "Active" if item.is_active else "Closed",
        }
        for item in summary.valuations
    ]


def _prepare_series_chart_data(
    series: PatrimonySeries,
) -> list[dict[str, str | float]]:
    """Prepare Altair-ready points for the patrimony line chart."""
    return [
        {
            "date": point.date.isoformat(),
            "total": float(point.total),
            "total_label": _format_currency(
                point.total,
                series.currency_code,
            ),
        }
        for point in series.points
    ]


def _prepare_possession_chart_data(
    summary: PatrimonySummary,
    max_items: int = 12,
) -> list[dict[str, str | float]]:
    """Prepare bar chart data, largest values first.

    Args:
        summary: Patrimony summary holding per-possession values.
        max_items: Maximum bars before grouping the rest into Other.

    Returns:
        Altair-ready rows with label, value and status.
    """
    ranked = sorted(
        summary.valuations,
        key=lambda item: item.current_value,
        reverse=True,
    )
    data: list[dict[str, str | float]] = [
        {
            "label": item.label,
            "value": float(item.current_value),
            "value_label": _format_currency(
                item.current_value,
                summary.currency_code,
            ),
            "status": "Active" if item.is_active else "Closed",
        }
        for item in ranked[:max_items]
    ]
    others = ranked[max_items:]
    other_amount = sum(
        (item.current_value for item in others),
        start=Decimal("0"),
    )
    if others and other_amount != 0:
        data.append(
            {
                "label": "Other",
                "value": float(other_amount),
                "value_label": _format_currency(
                    other_amount,
                    summary.currency_code,
                ),
                "status": "Mixed",
            }
        )
    return data


def _render_series_chart(
    series: PatrimonySeries,
    title: str,
    chart_height: int = 360,
) -> None:
    """Render a line chart of the patrimony over time."""
    st.subheader(title)
    if not series.points:
        st.info("No patrimony points available for the chart.")
        return
    chart = alt.Chart(
        alt.Data(values=_prepare_series_chart_data(series))
    ).mark_line(
        point=True,
        color="#1b9aaa",
    ).encode(
        x=alt.X("date:T", title=None),
        y=alt.Y("total:Q", title=series.currency_code),
        tooltip=[
            alt.Tooltip("date:T"),
            alt.Tooltip("total_label:N"),
        ],
    ).properties(
        height=chart_height,
    )
    st.altair_chart(chart, width="stretch")


def _render_possession_chart(
    summary: PatrimonySummary,
    title: str,
    chart_height: int = 360,
    palette: Sequence[str] | None = None,
) -> None:
    """Render a bar chart of possession values at the summary date."""
    st.subheader(title)
    data = _prepare_possession_chart_data(summary)
    if not data:
        st.info("No possession values available for the chart.")
        return
    palette_scale = list(palette or ["#2e7d32", "#e76f51", "#457b9d"])
    chart = alt.Chart(alt.Data(values=data)).mark_bar(
        cornerRadiusTopLeft=4,
        cornerRadiusTopRight=4,
    ).encode(
        x=alt.X("label:N", sort="-y", title=None),
        y=alt.Y("value:Q", title=summary.currency_code),
        color=alt.Color(
            "status:N",
            scale=alt.Scale(
                domain=["Active", "Closed", "Mixed"],
                range=palette_scale,
            ),
            legend=alt.Legend(orient="bottom", title=None),
        ),
        tooltip=[
            alt.Tooltip("label:N"),
            alt.Tooltip("value_label:N"),
            alt.Tooltip("status:N"),
        ],
    ).properties(
        height=chart_height,
    )
    st.altair_chart(chart, width="stretch")


def _render_dashboard(
    repository: PossessionsRepositoryPort,
    currency_code: str,
) -> None:
    """Render the patrimony figures and charts."""
    today = date.today()
    start_date = st.sidebar.date_input(
        "Start date",
        value=today - timedelta(days=365),
    )
    end_date = st.sidebar.date_input("End date", value=today)
    step_days = int(
        st.sidebar.number_input(
            "Step (days)",
            min_value=1,
            value=30,
            step=1,
        )
    )

    summary = _fetch_patrimony_summary(repository, end_date, currency_code)
    if not summary.valuations:
        st.info("No possessions recorded yet. Add one under Possessions.")
        return

    range_result = _fetch_patrimony_range(
        repository,
        start_date,
        end_date,
        currency_code,
    )
    series = _fetch_patrimony_series(
        repository,
        start_date,
        end_date,
        step_days,
        currency_code,
    )
    baseline = series.points[0].total

    total_col, active_col = st.columns(2)
    total_col.metric(
        f"Patrimony on {range_result.end_date.isoformat()}",
        _format_currency(range_result.total, currency_code),
        _format_delta_with_percent(series.change, baseline),
    )
    active_col.metric(
        "Active possessions",
        f"{summary.active_count}/{len(summary.valuations)}",
    )

    chart_left, chart_right = st.columns(2)
    with chart_left:
        _render_series_chart(series, "Patrimony over time")
    with chart_right:
        _render_possession_chart(summary, "Value by possession")


def _render_create_form(repository: PossessionsRepositoryPort) -> None:
    """Render the form registering a new possession."""
    st.subheader("New possession")
    with st.form("create_possession", clear_on_submit=True):
        label = st.text_input("Label")
        owner = st.text_input("Owner")
        initial_value = st.number_input(
            "Initial value",
            min_value=0.0,
            value=0.0,
            step=1000.0,
        )
        start_date = st.date_input("Start date", value=date.today())
        rate = st.number_input(
            "Annual depreciation rate (%)",
            min_value=0.0,
            value=0.0,
            step=1.0,
        )
        uses_day_count = st.checkbox("Accrue a constant amount every 30 days")
        constant_value = st.number_input(
            "Amount per 30-day period",
            value=0.0,
            step=1000.0,
        )
        submitted = st.form_submit_button("Create")

    if not submitted:
        return
    record = {
        "label": label,
        "owner": owner,
        "initial_value": str(initial_value),
        "start_date": start_date,
        "depreciation_rate_percent": str(rate) if rate else None,
        "constant_per_period_value": (
            str(constant_value) if uses_day_count else None
        ),
        "uses_day_count": uses_day_count,
    }
    possession = CreatePossessionUseCase(repository).execute(record)
    get_usage_logger().info(f"User created possession '{possession.label}'")
    st.success(f"Possession '{possession.label}' created.")


def _render_close_controls(
    repository: PossessionsRepositoryPort,
    valuations: Sequence[PossessionValuation],
) -> None:
    """Render the close and remove actions."""
    st.subheader("Close or remove")
    labels = [item.label for item in valuations]
    label = st.selectbox("Possession", options=labels)
    close_date = st.date_input("Close date", value=date.today())
    close_col, remove_col = st.columns(2)
    if close_col.button("Close"):
        updated = ClosePossessionUseCase(repository).execute(label, close_date)
        get_usage_logger().info(
            f"User closed possession '{label}' on {updated.end_date}"
        )
        st.success(f"Possession '{label}' closed on {updated.end_date}.")
    if remove_col.button("Remove"):
        RemovePossessionUseCase(repository).execute(label)
        get_usage_logger().info(f"User removed possession '{label}'")
        st.success(f"Possession '{label}' removed.")


def _render_possessions_page(
    repository: PossessionsRepositoryPort,
    currency_code: str,
) -> None:
    """Render the possessions table and the ledger actions."""
    as_of = st.sidebar.date_input("Valuation date", value=date.today())
    summary = _fetch_patrimony_summary(repository, as_of, currency_code)

    st.subheader("Possessions")
    if summary.valuations:
        st.caption(
            f"{len(summary.valuations)} possessions, "
            f"{summary.active_count} active on {summary.as_of.isoformat()}"
        )
        st.dataframe(
            _build_possession_rows(summary),
            width="stretch",
            hide_index=True,
        )
        st.metric(
            "Patrimony",
            _format_currency(summary.total, currency_code),
        )
    else:
        st.info("No possessions recorded yet.")

    _render_create_form(repository)
    if summary.valuations:
        _render_close_controls(repository, summary.valuations)


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Patrimony Dashboard", layout="wide")
    st.title("Patrimony Dashboard")

    page = st.sidebar.selectbox("Page", ["Dashboard", "Possessions"])

    try:
        settings = _get_settings()
        repository = _get_repository()
        if page == "Dashboard":
            _render_dashboard(repository, settings.currency_code)
        else:
            _render_possessions_page(repository, settings.currency_code)
    except PatrimonyError as exc:
        st.error(str(exc))


if __name__ == "__main__":  # pragma: no cover
    main()
