"""Domain constants for wealth aggregation and loan analytics."""

from decimal import Decimal

REFERENCE_CURRENCY = "EUR"
CRYPTO_QUOTE_CURRENCY = "USD"

CERTAINTY_LEVELS = (
    "certain",
    "contractual",
    "probable",
    "optional",
)
CONFIRMED_CERTAINTY_LEVELS = ("certain", "contractual")

DEFAULT_CERTAINTY_BY_KIND = {
    "asset": "certain",
    "collection": "probable",
    "receivable": "contractual",
    "liability": "certain",
}

CERTAINTY_FILTERS = ("all", "confirmed", "exclude_optional")

CASH_ASSET_TYPES = ("bank",)
DIGITAL_ASSET_TYPES = ("crypto",)
REAL_ESTATE_ASSET_TYPES = ("real-estate",)
INVESTMENT_ASSET_TYPES = ("investment", "business")
VEHICLE_COLLECTION_TYPES = ("vehicle",)
CREDIT_CARD_LIABILITY_TYPES = ("credit_card",)
MORTGAGE_LIABILITY_TYPES = ("mortgage",)

MONTHS_PER_PAYMENT = {
    "monthly": 1,
    "quarterly": 3,
    "semi_annual": 6,
    "annual": 12,
}

PAYOFF_MAX_MONTHS = 600
CONVERGENCE_THRESHOLD = Decimal("0.01")

FALLBACK_EXCHANGE_RATES = {
    "EUR": Decimal("1"),
    "USD": Decimal("1.08"),
    "AED": Decimal("3.97"),
    "GBP": Decimal("0.86"),
    "CHF": Decimal("0.94"),
    "RUB": Decimal("98.5"),
}

# USD prices per unit.
FALLBACK_CRYPTO_PRICES = {
    "BTC": Decimal("100000"),
    "ETH": Decimal("3500"),
    "SOL": Decimal("180"),
    "USDT": Decimal("1"),
    "USDC": Decimal("1"),
    "BNB": Decimal("600"),
    "XRP": Decimal("2.2"),
    "ADA": Decimal("0.9"),
    "DOGE": Decimal("0.35"),
    "MATIC": Decimal("0.5"),
}

DTI_THRESHOLDS = (
    (Decimal("28"), "excellent"),
    (Decimal("36"), "good"),
    (Decimal("43"), "fair"),
)


__all__ = [
    "REFERENCE_CURRENCY",
    "CRYPTO_QUOTE_CURRENCY",
    "CERTAINTY_LEVELS",
    "CONFIRMED_CERTAINTY_LEVELS",
    "DEFAULT_CERTAINTY_BY_KIND",
    "CERTAINTY_FILTERS",
    "CASH_ASSET_TYPES",
    "DIGITAL_ASSET_TYPES",
    "REAL_ESTATE_ASSET_TYPES",
    "INVESTMENT_ASSET_TYPES",
    "VEHICLE_COLLECTION_TYPES",
    "CREDIT_CARD_LIABILITY_TYPES",
    "MORTGAGE_LIABILITY_TYPES",
    "MONTHS_PER_PAYMENT",
    "PAYOFF_MAX_MONTHS",
    "CONVERGENCE_THRESHOLD",
    "FALLBACK_EXCHANGE_RATES",
    "FALLBACK_CRYPTO_PRICES",
    "DTI_THRESHOLDS",
]
