"""Reach-based price calculation for campaign content.

All monetary calculations use Decimal arithmetic to avoid floating-point errors.
Prices are quantized to two decimal places with ROUND_HALF_UP rounding.

The engine is pure: the same influencer and content type always produce the
same price. Incomplete input yields ``UNPRICED`` instead of an exception.
"""

from collections.abc import Mapping
from decimal import ROUND_HALF_UP, Decimal
from typing import Final

from campaign_wizard.domain.models import Influencer
from campaign_wizard.domain.types import ContentType, Platform
from campaign_wizard.pricing.rate_table import DEFAULT_RATE_CARDS, RateCard, rate_cards_for_platform

# Precision: all monetary values quantized to 2 decimal places
TWO_PLACES = Decimal("0.01")

# Sentinel for "not enough input to price"
UNPRICED: Final[None] = None


def calculate_price(followers: int, card: RateCard) -> Decimal:
    """Calculate the price of one deliverable for a given reach.

    Formula: followers * base_rate * multiplier, quantized to 2 decimal places.

    Args:
        followers: The influencer's reach metric. Must be positive.
        card: Rate card of the content type being priced.

    Returns:
        The calculated price as a Decimal with exactly 2 decimal places.
    """
    amount = Decimal(followers) * card.base_rate * card.multiplier
    return amount.quantize(TWO_PLACES, rounding=ROUND_HALF_UP)


def price(
    influencer: Influencer | None,
    content_type: ContentType | None,
    rate_cards: Mapping[ContentType, RateCard] = DEFAULT_RATE_CARDS,
) -> Decimal | None:
    """Price a deliverable of *content_type* by *influencer*.

    Args:
        influencer: The selected influencer, or None.
        content_type: The selected content type, or None.
        rate_cards: Rate table to price against. Defaults to the static table.

    Returns:
        The price as a Decimal, or ``UNPRICED`` when the influencer or
        content type is missing, or the influencer has no positive reach.
    """
    if influencer is None or content_type is None:
        return UNPRICED
    followers = influencer.followers
    if followers is None or followers <= 0:
        return UNPRICED
    card = rate_cards.get(content_type)
    if card is None:
        return UNPRICED
    return calculate_price(followers, card)


def estimate_rate_sheet(followers: int, platform: Platform) -> dict[ContentType, Decimal]:
    """Estimate what an influencer could charge for each content type on *platform*.

    Args:
        followers: The influencer's reach metric.
        platform: The platform whose content types are priced.

    Returns:
        A dict of content type to price, cheapest first. Empty when
        *followers* is not positive.
    """
    if followers <= 0:
        return {}
    return {
        card.content_type: calculate_price(followers, card)
        for card in rate_cards_for_platform(platform)
    }


def format_price(amount: Decimal | None) -> str:
    """Render *amount* as Brazilian reais, e.g. ``R$ 1.234,56``.

    ``UNPRICED`` renders as ``---``.
    """
    if amount is None:
        return "---"
    quantized = amount.quantize(TWO_PLACES, rounding=ROUND_HALF_UP)
    sign = "-" if quantized < 0 else ""
    integer_part, _, cents = f"{abs(quantized):,.2f}".partition(".")
    return f"{sign}R$ {integer_part.replace(',', '.')},{cents}"
