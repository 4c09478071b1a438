"""Pricing engine for reach-based campaign budgets.

Re-exports key functions and types for convenient access:
    from campaign_wizard.pricing import price, format_price, RateCard
"""

from campaign_wizard.pricing.engine import (
    UNPRICED,
    calculate_price,
    estimate_rate_sheet,
    format_price,
    price,
)
from campaign_wizard.pricing.rate_table import (
    BASE_RATE,
    DEFAULT_RATE_CARDS,
    RateCard,
    get_rate_card,
    rate_cards_for_platform,
)

__all__ = [
    "BASE_RATE",
    "DEFAULT_RATE_CARDS",
    "UNPRICED",
    "RateCard",
    "calculate_price",
    "estimate_rate_sheet",
    "format_price",
    "get_rate_card",
    "price",
    "rate_cards_for_platform",
]
