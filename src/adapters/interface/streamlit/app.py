"""Streamlit dashboard entry point."""

from collections.abc import Sequence
from datetime import date, timedelta
from decimal import Decimal
from importlib import import_module

import streamlit as st
import altair as alt

from src.application.use_cases.compare_loans import (
    CompareLoansUseCase,
    PayoffCalculatorUseCase,
)
from src.application.use_cases.get_balance_sheet import GetBalanceSheetUseCase
from src.application.use_cases.get_balance_sheet_comparison import (
    BalanceSheetComparison,
    GetBalanceSheetComparisonUseCase,
)
from src.application.use_cases.get_dashboard_metrics import (
    DashboardMetrics,
    GetDashboardMetricsUseCase,
)
from src.application.use_cases.get_loan_schedule import (
    GetLoanScheduleUseCase,
    LoanSchedule,
)
from src.domain.constants import (
    CERTAINTY_FILTERS,
    FALLBACK_EXCHANGE_RATES,
    MONTHS_PER_PAYMENT,
)
from src.domain.models import (
    BalanceSheetSnapshot,
    CertaintySummary,
    LiabilityRecord,
    LoanComparison,
    LoanScenario,
    PayoffScenario,
)
from src.domain.services.metrics import percentage_of
from src.infrastructure.container import (
    build_database_adapter,
    build_market_data,
    build_records_repository,
    build_settings,
    build_snapshot_repository,
)
from src.infrastructure.settings import WealthSettings

CERTAINTY_FILTER_LABELS = {
    "all": "All",
    "confirmed": "Confirmed only",
    "exclude_optional": "Exclude optional",
}
RECOMMENDATION_LABELS = {
    "refinance": "Refinance",
    "worth_it": "Worth it",
    "consider": "Consider",
    "not_recommended": "Not recommended",
}


def _check_altair_dependencies() -> tuple[bool, str | None]:
    """Check that the libraries Altair renders through are usable.

    Returns:
        tuple[bool, str | None]: Status and an error message when broken.
    """
    try:
        numpy = import_module("numpy")
        pandas = import_module("pandas")
    except ImportError as exc:
        return False, f"Charts unavailable: {exc}"
    if not hasattr(numpy, "ndarray"):
        return False, "Charts unavailable: numpy installation is incomplete."
    if not hasattr(pandas, "Timestamp"):
        return False, "Charts unavailable: pandas installation is incomplete."
    return True, None


def _build_balance_sheet_use_case() -> GetBalanceSheetUseCase:
    settings = build_settings()
    adapter = build_database_adapter()
    return GetBalanceSheetUseCase(
        records_repository=build_records_repository(adapter),
        market_data=build_market_data(adapter, settings),
        reference_currency=settings.reference_currency,
    )


def _fetch_balance_sheet(
    entity_filter: str | None,
    certainty_filter: str,
    viewer_party_id: str | None,
    as_of: date,
    display_currency: str | None = None,
) -> BalanceSheetSnapshot:
    """Fetch the balance sheet for the selected view."""
    use_case = _build_balance_sheet_use_case()
    return use_case.execute(
        entity_filter=entity_filter,
        certainty_filter=certainty_filter,
        viewer_party_id=viewer_party_id,
        as_of=as_of,
        display_currency=display_currency,
    )


@st.cache_data(show_spinner=False)
def _load_balance_sheet(
    entity_filter: str | None,
    certainty_filter: str,
    viewer_party_id: str | None,
    as_of: date,
    display_currency: str | None = None,
) -> BalanceSheetSnapshot:
    """Cached wrapper around _fetch_balance_sheet."""
    return _fetch_balance_sheet(
        entity_filter,
        certainty_filter,
        viewer_party_id,
        as_of,
        display_currency,
    )


def _fetch_dashboard_metrics(
    monthly_income: Decimal,
    income_currency: str,
) -> DashboardMetrics:
    """Fetch equity, debt-to-income and currency exposure."""
    settings = build_settings()
    adapter = build_database_adapter()
    use_case = GetDashboardMetricsUseCase(
        records_repository=build_records_repository(adapter),
        market_data=build_market_data(adapter, settings),
        reference_currency=settings.reference_currency,
    )
    return use_case.execute(
        monthly_income=monthly_income,
        income_currency=income_currency,
    )


@st.cache_data(show_spinner=False)
def _load_dashboard_metrics(
    monthly_income: Decimal,
    income_currency: str,
) -> DashboardMetrics:
    """Cached wrapper around _fetch_dashboard_metrics."""
    return _fetch_dashboard_metrics(monthly_income, income_currency)


def _fetch_liabilities() -> list[LiabilityRecord]:
    """Fetch liabilities for the loans page."""
    return build_records_repository().fetch_liabilities()


@st.cache_data(show_spinner=False)
def _load_liabilities() -> list[LiabilityRecord]:
    """Cached wrapper around _fetch_liabilities."""
    return _fetch_liabilities()


def _fetch_comparison(compare_date: date) -> BalanceSheetComparison:
    """Fetch the comparison against the snapshot at compare_date."""
    use_case = GetBalanceSheetComparisonUseCase(
        balance_sheet_use_case=_build_balance_sheet_use_case(),
        snapshot_repository=build_snapshot_repository(),
    )
    return use_case.execute(compare_date=compare_date)


@st.cache_data(show_spinner=False)
def _load_comparison(compare_date: date) -> BalanceSheetComparison:
    """Cached wrapper around _fetch_comparison."""
    return _fetch_comparison(compare_date)


def _display_currency_options(settings: WealthSettings) -> list[str]:
    """Return switchable currencies, the configured display one first."""
    options = [settings.display_currency, settings.reference_currency]
    options.extend(FALLBACK_EXCHANGE_RATES)
    return list(dict.fromkeys(options))


def _format_currency(value: Decimal, currency_code: str) -> str:
    """Format currency values for display."""
    symbol = "€" if currency_code == "EUR" else currency_code
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


def _format_break_even(months: int | None) -> str:
    """Format break-even months, None meaning the cost is never recovered."""
    if months is None:
        return "Never"
    if months == 0:
        return "Immediate"
    return f"{months} months"


def _format_payoff(scenario: PayoffScenario | None) -> str:
    """Format a payoff scenario, None meaning the payment is too small."""
    if scenario is None:
        return "Insufficient payment"
    return (
        f"{scenario.months_to_payoff} months "
        f"({scenario.payoff_date.isoformat()})"
    )


def _statement_rows(sheet: BalanceSheetSnapshot) -> list[dict[str, str]]:
    """Return balance sheet lines with their share of the side total."""
    currency = sheet.currency_code
    total_assets = sheet.total_assets
    total_liabilities = sheet.total_liabilities
    current = sheet.current_assets
    non_current = sheet.non_current_assets
    lines = [
        ("Assets", "Cash and bank", current.cash_and_bank, total_assets),
        ("Assets", "Digital assets", current.digital_assets, total_assets),
        (
            "Assets",
            "Short-term receivables",
            current.short_term_receivables,
            total_assets,
        ),
        ("Assets", "Real estate", non_current.real_estate, total_assets),
        ("Assets", "Vehicles", non_current.vehicles, total_assets),
        ("Assets", "Collections", non_current.collections, total_assets),
        ("Assets", "Investments", non_current.investments, total_assets),
        (
            "Assets",
            "Long-term receivables",
            non_current.long_term_receivables,
            total_assets,
        ),
        (
            "Liabilities",
            "Credit cards",
            sheet.current_liabilities.credit_cards,
            total_liabilities,
        ),
        (
            "Liabilities",
            "Short-term loans",
            sheet.current_liabilities.short_term_loans,
            total_liabilities,
        ),
        (
            "Liabilities",
            "Mortgages",
            sheet.non_current_liabilities.mortgages,
            total_liabilities,
        ),
        (
            "Liabilities",
            "Long-term loans",
            sheet.non_current_liabilities.long_term_loans,
            total_liabilities,
        ),
    ]
    return [
        {
            "Section": section,
            "Line": label,
            "Amount": _format_currency(amount, currency),
            "% of total": f"{percentage_of(amount, total):.1f}%",
        }
        for section, label, amount, total in lines
    ]


def _certainty_items(
    summary: CertaintySummary,
) -> list[tuple[str, Decimal]]:
    return [
        (level.title(), amount)
        for level, amount in summary.as_dict().items()
    ]


def _prepare_donut_chart_data(
    items: Sequence[tuple[str, Decimal]],
    currency_code: str,
    max_categories: int = 6,
) -> tuple[list[dict[str, str | float]], Decimal]:
    """Prepare donut chart data with a Top-N + Other grouping.

    Args:
        items: Category label and amount pairs.
        currency_code: Currency used for labels.
        max_categories: Maximum categories to keep before grouping into Other.

    Returns:
        Tuple with Altair-ready chart data and the total amount.
    """
    sorted_items = sorted(
        (item for item in items if item[1] != 0),
        key=lambda item: item[1],
        reverse=True,
    )
    top_items = sorted_items[:max_categories]
    other_amount = sum(
        (amount for _, amount in sorted_items[max_categories:]),
        start=Decimal("0"),
    )
    if other_amount != 0:
        top_items = [*top_items, ("Other", other_amount)]
    total_amount = sum(
        (amount for _, amount in sorted_items),
        start=Decimal("0"),
    )
    data: list[dict[str, str | float]] = []
    for category, amount in top_items:
        share = percentage_of(amount, total_amount)
        data.append(
            {
                "category": category,
                "amount": float(amount),
                "amount_label": _format_currency(amount, currency_code),
                "share_label": f"{share:.1f}%",
            }
        )
    return data, total_amount


def _render_donut_chart(
    items: Sequence[tuple[str, Decimal]],
    title: str,
    currency_code: str,
    max_categories: int = 6,
    chart_size: int = 320,
) -> None:
    """Render a donut chart of amounts by category."""
    data, total_amount = _prepare_donut_chart_data(
        items,
        currency_code,
        max_categories=max_categories,
    )
    st.subheader(title)
    if not data or total_amount == 0:
        st.info("No amounts available for the chart.")
        return

    hover = alt.selection_point(
        name="hover",
        fields=["category"],
        on="view:mouseover",
        clear="view:mouseout",
        empty=False,
    )
    base = alt.Chart(alt.Data(values=data)).mark_arc(
        innerRadius=chart_size * 0.4,
        cornerRadius=8,
        padAngle=0.02,
        stroke="#0f1115",
        strokeWidth=2,
    ).encode(
        theta=alt.Theta("amount:Q"),
        color=alt.Color(
            "category:N",
            scale=alt.Scale(
                range=[
                    "#1b9aaa",
                    "#2e7d32",
                    "#f4a261",
                    "#e76f51",
                    "#457b9d",
                    "#f6c453",
                    "#6c8ead",
                ]
            ),
            legend=alt.Legend(orient="bottom", title=None, columns=2),
        ),
        opacity=alt.condition(hover, alt.value(1.0), alt.value(0.25)),
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
    )
    st.altair_chart(chart, width="stretch")


def _render_balance_sheet_page() -> None:
    settings = build_settings()
    certainty_filter = st.sidebar.selectbox(
        "Certainty",
        list(CERTAINTY_FILTERS),
        format_func=CERTAINTY_FILTER_LABELS.get,
    )
    entity_filter = st.sidebar.text_input("Entity id", value="").strip()
    consolidated = st.sidebar.checkbox(
        "Consolidated view",
        value=settings.viewer_entity_id is None,
    )
    viewer = None if consolidated else settings.viewer_entity_id
    as_of = st.sidebar.date_input("As of", value=date.today())
    display_currency = st.sidebar.selectbox(
        "Currency",
        _display_currency_options(settings),
    )

    sheet = _load_balance_sheet(
        entity_filter or None,
        certainty_filter,
        viewer,
        as_of,
        display_currency,
    )
    currency = sheet.currency_code

    assets_col, liabilities_col, net_worth_col = st.columns(3)
    assets_col.metric(
        "Assets",
        _format_currency(sheet.total_assets, currency),
    )
    liabilities_col.metric(
        "Liabilities",
        _format_currency(sheet.total_liabilities, currency),
    )
    net_worth_col.metric(
        "Net Worth",
        _format_currency(sheet.net_worth, currency),
    )

    st.subheader("Balance Sheet")
    st.dataframe(_statement_rows(sheet), width="stretch", hide_index=True)

    certainty_left, certainty_right = st.columns(2)
    with certainty_left:
        _render_donut_chart(
            _certainty_items(sheet.certainty_summary.assets),
            "Assets by certainty",
            currency,
        )
    with certainty_right:
        _render_donut_chart(
            _certainty_items(sheet.certainty_summary.liabilities),
            "Liabilities by certainty",
            currency,
        )

    monthly_income = st.sidebar.number_input(
        "Monthly income",
        min_value=0.0,
        value=0.0,
        step=100.0,
    )
    metrics = _load_dashboard_metrics(
        Decimal(str(monthly_income)),
        settings.reference_currency,
    )
    _render_donut_chart(
        [
            (share.currency, share.amount)
            for share in metrics.currency_breakdown
        ],
        "Assets by currency",
        currency,
    )
    dti = metrics.debt_to_income
    st.metric(
        "Debt-to-income",
        f"{dti.ratio:.1f}%",
        dti.status.replace("_", " "),
        delta_color="off",
    )
    if metrics.property_equity:
        st.subheader("Property equity")
        st.dataframe(
            [
                {
                    "Property": item.asset_name,
                    "Value": _format_currency(item.asset_value, currency),
                    "Loan": item.liability_name,
                    "Balance": _format_currency(
                        item.liability_balance, currency
                    ),
                    "Equity": _format_currency(item.equity, currency),
                    "Equity %": f"{item.equity_percentage:.1f}%",
                }
                for item in metrics.property_equity
            ],
            width="stretch",
            hide_index=True,
        )


def _render_schedule(schedule: LoanSchedule) -> None:
    st.metric("Monthly payment", f"{schedule.monthly_payment:,.2f}")
    st.caption(
        f"Total paid {schedule.total_paid:,.2f}, "
        f"interest {schedule.total_interest:,.2f}"
    )
    if schedule.outstanding_balance > 0:
        st.warning(
            f"{schedule.outstanding_balance:,.2f} is still owed after the "
            "last scheduled payment."
        )
    st.dataframe(
        [
            {
                "#": entry.payment_number,
                "Date": entry.payment_date.isoformat(),
                "Principal": f"{entry.principal_amount:,.2f}",
                "Interest": f"{entry.interest_amount:,.2f}",
                "Payment": f"{entry.total_amount:,.2f}",
                "Remaining": f"{entry.remaining_principal:,.2f}",
            }
            for entry in schedule.entries
        ],
        width="stretch",
        hide_index=True,
        height=420,
    )


def _comparison_rows(comparison: LoanComparison) -> list[dict[str, str]]:
    """Return one table row per scenario, refinance analysis included."""
    analysis_by_name = {
        analysis.scenario_name: analysis
        for analysis in comparison.break_even
    }
    rows = []
    for result in comparison.results:
        analysis = analysis_by_name.get(result.scenario.name)
        rows.append(
            {
                "Scenario": result.scenario.name,
                "Monthly payment": f"{result.monthly_payment:,.2f}",
                "Total interest": f"{result.total_interest:,.2f}",
                "Total paid": f"{result.total_payment:,.2f}",
                "Break-even": (
                    _format_break_even(analysis.break_even_months)
                    if analysis
                    else "Baseline"
                ),
                "Recommendation": (
                    RECOMMENDATION_LABELS[analysis.recommendation]
                    if analysis
                    else "—"
                ),
            }
        )
    return rows


def _render_loans_page() -> None:
    liabilities = [
        liability
        for liability in _load_liabilities()
        if liability.start_date and liability.end_date
    ]
    st.subheader("Amortization schedule")
    options = ["Custom"] + [liability.id for liability in liabilities]
    names = {liability.id: liability.name for liability in liabilities}
    selected = st.selectbox(
        "Loan",
        options,
        format_func=lambda value: names.get(value, value),
    )
    frequency = st.selectbox("Frequency", list(MONTHS_PER_PAYMENT))
    use_case = GetLoanScheduleUseCase(
        records_repository=build_records_repository()
        if selected != "Custom"
        else None
    )
    try:
        if selected == "Custom":
            principal = st.number_input(
                "Principal", min_value=0.0, value=200000.0
            )
            rate = st.number_input(
                "Annual rate (%)", min_value=0.0, value=4.0
            )
            term = st.number_input("Term (months)", min_value=1, value=240)
            schedule = use_case.execute(
                principal=Decimal(str(principal)),
                annual_rate_pct=Decimal(str(rate)),
                term_months=int(term),
                frequency=frequency,
            )
        else:
            schedule = use_case.execute(selected, frequency=frequency)
    except ValueError as exc:
        st.warning(str(exc))
        return
    _render_schedule(schedule)

    st.subheader("Payoff calculator")
    extra = st.number_input("Extra monthly payment", min_value=0.0, value=0.0)
    payoff = PayoffCalculatorUseCase().execute(
        schedule.principal,
        schedule.annual_rate_pct,
        schedule.monthly_payment,
        Decimal(str(extra)),
    )
    original_col, extra_col, saved_col = st.columns(3)
    original_col.metric("Original payoff", _format_payoff(payoff.original))
    extra_col.metric("With extra", _format_payoff(payoff.with_extra))
    saved_col.metric(
        "Interest saved",
        f"{payoff.interest_saved:,.2f}"
        if payoff.interest_saved is not None
        else "—",
        f"{payoff.months_saved} months"
        if payoff.months_saved is not None
        else None,
    )

    st.subheader("Refinance comparison")
    refi_rate = st.number_input(
        "Refinance rate (%)", min_value=0.0, value=3.0
    )
    refi_term = st.number_input(
        "Refinance term (months)", min_value=1, value=240
    )
    closing = st.number_input("Closing costs", min_value=0.0, value=3000.0)
    comparison = CompareLoansUseCase().execute(
        [
            LoanScenario(
                name="Current",
                principal=schedule.principal,
                annual_rate_pct=schedule.annual_rate_pct,
                term_months=schedule.term_months,
            ),
            LoanScenario(
                name="Refinance",
                principal=schedule.principal,
                annual_rate_pct=Decimal(str(refi_rate)),
                term_months=int(refi_term),
                closing_costs=Decimal(str(closing)),
            ),
        ]
    )
    st.dataframe(
        _comparison_rows(comparison),
        width="stretch",
        hide_index=True,
    )


def _render_history_page() -> None:
    compare_date = st.sidebar.date_input(
        "Compare with",
        value=date.today() - timedelta(days=30),
    )
    comparison = _load_comparison(compare_date)
    if comparison.previous is None:
        st.warning("No snapshot stored on or before this date yet.")
    currency = comparison.current.currency_code
    st.dataframe(
        [
            {
                "Line": line.label,
                "Current": _format_currency(line.current, currency),
                "Previous": _format_currency(line.previous, currency),
                "Change": _format_delta_with_percent(
                    line.change, line.previous
                ),
                "Trend": line.trend,
            }
            for line in comparison.lines
        ],
        width="stretch",
        hide_index=True,
    )


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Wealth Dashboard", layout="wide")
    st.title("Wealth Dashboard")

    ok, message = _check_altair_dependencies()
    if not ok:
        st.error(message)
        return

    page = st.sidebar.selectbox("Page", ["Balance Sheet", "Loans", "History"])
    try:
        if page == "Balance Sheet":
            _render_balance_sheet_page()
        elif page == "Loans":
            _render_loans_page()
        else:
            _render_history_page()
    except RuntimeError as exc:
        st.error(str(exc))


if __name__ == "__main__":  # pragma: no cover
    main()
