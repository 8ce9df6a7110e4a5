"""Tests for the Streamlit app module."""

from datetime import date
from decimal import Decimal
from types import SimpleNamespace

from src.adapters.interface.streamlit import app
from src.application.use_cases.get_loan_schedule import LoanSchedule
from src.domain.models import (
    AmortizationEntry,
    BalanceSheetSnapshot,
    BreakEvenAnalysis,
    CurrentAssets,
    LoanComparison,
    LoanScenario,
    LoanScenarioResult,
    NonCurrentLiabilities,
    PayoffScenario,
)
from src.infrastructure.settings import WealthSettings


def test_fetch_balance_sheet_forwards_view(monkeypatch):
    """_fetch_balance_sheet should pass every option to the use case."""
    calls = []

    class _FakeUseCase:
        def execute(self, **kwargs):
            calls.append(kwargs)
            return "sheet"

    monkeypatch.setattr(
        app, "_build_balance_sheet_use_case", lambda: _FakeUseCase()
    )

    result = app._fetch_balance_sheet(
        "company", "confirmed", "p1", date(2024, 1, 1), "USD"
    )

    assert result == "sheet"
    assert calls == [
        {
            "entity_filter": "company",
            "certainty_filter": "confirmed",
            "viewer_party_id": "p1",
            "as_of": date(2024, 1, 1),
            "display_currency": "USD",
        }
    ]


def test_load_balance_sheet_uses_fetch(monkeypatch):
    monkeypatch.setattr(
        app, "_fetch_balance_sheet", lambda *args: ("cached", args)
    )

    result = app._load_balance_sheet(None, "all", None, date(2024, 2, 2))

    assert result == (
        "cached",
        (None, "all", None, date(2024, 2, 2), None),
    )


def test_display_currency_options_start_with_configured_currency():
    settings = WealthSettings(display_currency="GBP")

    options = app._display_currency_options(settings)

    assert options[:3] == ["GBP", "EUR", "USD"]
    assert len(options) == len(set(options))


def test_format_helpers():
    assert app._format_currency(Decimal("1234.5"), "EUR") == "1,234.50 €"
    assert app._format_currency(Decimal("10"), "USD") == "10.00 USD"
    assert app._format_delta(Decimal("-5")) == "-5.00"
    assert app._format_delta_with_percent(
        Decimal("50"), Decimal("200")
    ) == "+50.00 (+25.00%)"
    assert app._format_delta_with_percent(
        Decimal("50"), Decimal("0")
    ) == "+50.00"


def test_format_break_even_and_payoff():
    assert app._format_break_even(None) == "Never"
    assert app._format_break_even(0) == "Immediate"
    assert app._format_break_even(18) == "18 months"
    assert app._format_payoff(None) == "Insufficient payment"
    scenario = PayoffScenario(
        total_payments=Decimal("1000"),
        total_interest=Decimal("0"),
        months_to_payoff=10,
        payoff_date=date(2024, 11, 1),
    )
    assert app._format_payoff(scenario) == "10 months (2024-11-01)"


def test_statement_rows_include_share_of_side_total():
    sheet = BalanceSheetSnapshot(
        currency_code="EUR",
        as_of=date(2024, 1, 1),
        current_assets=CurrentAssets(
            cash_and_bank=Decimal("750"),
            digital_assets=Decimal("250"),
        ),
        non_current_liabilities=NonCurrentLiabilities(
            mortgages=Decimal("400")
        ),
    )

    rows = {row["Line"]: row for row in app._statement_rows(sheet)}

    assert rows["Cash and bank"]["% of total"] == "75.0%"
    assert rows["Cash and bank"]["Section"] == "Assets"
    assert rows["Mortgages"]["Amount"] == "400.00 €"
    assert rows["Mortgages"]["% of total"] == "100.0%"
    assert rows["Long-term loans"]["% of total"] == "0.0%"


def test_prepare_donut_chart_groups_small_categories():
    """Categories beyond the limit collapse into Other."""
    items = [
        ("A", Decimal("50")),
        ("B", Decimal("30")),
        ("C", Decimal("0")),
        ("D", Decimal("15")),
        ("E", Decimal("5")),
    ]

    data, total = app._prepare_donut_chart_data(
        items, "EUR", max_categories=2
    )

    assert total == Decimal("100")
    assert [row["category"] for row in data] == ["A", "B", "Other"]
    assert data[2]["amount"] == 20.0
    assert data[0]["share_label"] == "50.0%"


def test_comparison_rows_mark_baseline():
    current = LoanScenario("Current", Decimal("1000"), Decimal("5"), 12)
    refinance = LoanScenario("Refi", Decimal("1000"), Decimal("4"), 12)
    comparison = LoanComparison(
        results=[
            LoanScenarioResult(
                current, Decimal("85.61"), Decimal("1027.32"), Decimal("27.32")
            ),
            LoanScenarioResult(
                refinance,
                Decimal("85.15"),
                Decimal("1021.80"),
                Decimal("21.80"),
            ),
        ],
        best_monthly_payment=Decimal("85.15"),
        best_total_interest=Decimal("21.80"),
        best_total_payment=Decimal("1021.80"),
        break_even=[
            BreakEvenAnalysis(
                scenario_name="Refi",
                monthly_savings=Decimal("0.46"),
                closing_costs=Decimal("0"),
                break_even_months=0,
                lifetime_net_savings=Decimal("5.52"),
                recommendation="refinance",
            )
        ],
    )

    rows = app._comparison_rows(comparison)

    assert rows[0]["Break-even"] == "Baseline"
    assert rows[1]["Break-even"] == "Immediate"
    assert rows[1]["Recommendation"] == "Refinance"


class _FakeSidebar:
    def __init__(self, page: str) -> None:
        self.page = page

    def selectbox(self, label, options, **_kwargs):
        return self.page


class _FakeStreamlit:
    def __init__(self, page: str = "Balance Sheet") -> None:
        self.sidebar = _FakeSidebar(page)
        self.errors: list[str] = []
        self.config_kwargs = None
        self.title_text = None

    def set_page_config(self, **kwargs):
        self.config_kwargs = kwargs

    def title(self, text: str):
        self.title_text = text

    def error(self, text: str):
        self.errors.append(text)


def test_main_stops_when_chart_dependencies_broken(monkeypatch):
    fake_st = _FakeStreamlit()
    rendered = []
    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(
        app,
        "_check_altair_dependencies",
        lambda: (False, "Charts unavailable: numpy"),
    )
    monkeypatch.setattr(
        app, "_render_balance_sheet_page", lambda: rendered.append(True)
    )

    app.main()

    assert fake_st.title_text == "Wealth Dashboard"
    assert fake_st.errors == ["Charts unavailable: numpy"]
    assert rendered == []


def test_main_reports_configuration_errors(monkeypatch):
    """RuntimeErrors from the selected page are shown, not raised."""
    fake_st = _FakeStreamlit(page="History")
    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(
        app, "_check_altair_dependencies", lambda: (True, None)
    )

    def _raise():
        raise RuntimeError("Missing environment variable: WEALTH_DB_URL")

    monkeypatch.setattr(app, "_render_history_page", _raise)

    app.main()

    assert fake_st.config_kwargs["layout"] == "wide"
    assert fake_st.errors == ["Missing environment variable: WEALTH_DB_URL"]


def test_main_dispatches_loans_page(monkeypatch):
    fake_st = _FakeStreamlit(page="Loans")
    rendered = SimpleNamespace(loans=False)
    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(
        app, "_check_altair_dependencies", lambda: (True, None)
    )
    monkeypatch.setattr(
        app, "_render_loans_page", lambda: setattr(rendered, "loans", True)
    )

    app.main()

    assert rendered.loans is True
    assert fake_st.errors == []


class _RecordingStreamlit:
    def __init__(self) -> None:
        self.warnings: list[str] = []

    def metric(self, *_args, **_kwargs):
        pass

    def caption(self, *_args, **_kwargs):
        pass

    def dataframe(self, *_args, **_kwargs):
        pass

    def warning(self, text: str):
        self.warnings.append(text)


def _schedule_ending_at(remaining: Decimal) -> LoanSchedule:
    entry = AmortizationEntry(
        payment_number=1,
        payment_date=date(2024, 1, 1),
        principal_amount=Decimal("100.00"),
        interest_amount=Decimal("5.00"),
        total_amount=Decimal("105.00"),
        remaining_principal=remaining,
    )
    return LoanSchedule(
        name="Car",
        principal=Decimal("100") + remaining,
        annual_rate_pct=Decimal("5"),
        term_months=1,
        monthly_payment=Decimal("105.00"),
        frequency="monthly",
        entries=[entry],
    )


def test_render_schedule_warns_about_unpaid_balance(monkeypatch):
    fake_st = _RecordingStreamlit()
    monkeypatch.setattr(app, "st", fake_st)

    app._render_schedule(_schedule_ending_at(Decimal("509.56")))
    app._render_schedule(_schedule_ending_at(Decimal("0")))

    assert fake_st.warnings == [
        "509.56 is still owed after the last scheduled payment."
    ]
