"""Static per-content-type pricing coefficients.

Each content type has a RateCard holding the multiplier applied on top of the
per-follower base rate. Feed posts are the 1.0 baseline; stories are worth
70% of a post and reels a post plus 150% of a post.
"""

from decimal import Decimal

from pydantic import BaseModel

from campaign_wizard.domain.types import ContentType, Platform, get_platform_for_content_type

# Price of one follower's reach for a baseline feed post (BRL)
BASE_RATE = Decimal("0.035")


class RateCard(BaseModel, frozen=True):
    """Immutable rate card for a content type.

    Attributes:
        content_type: The content type this card applies to.
        platform: The platform that owns the content type.
        multiplier: Scale applied to the base rate for this content type.
        base_rate: Price per follower for a baseline feed post.
    """

    content_type: ContentType
    platform: Platform
    multiplier: Decimal
    base_rate: Decimal = BASE_RATE


_MULTIPLIERS: dict[ContentType, Decimal] = {
    ContentType.FEED: Decimal("1.0"),
    ContentType.STORY: Decimal("0.7"),
    ContentType.REELS: Decimal("2.5"),
    ContentType.YOUTUBE_VIDEO: Decimal("3.0"),
    ContentType.YOUTUBE_SHORTS: Decimal("1.5"),
    ContentType.TIKTOK_VIDEO: Decimal("2.0"),
    ContentType.TIKTOK_STORY: Decimal("0.7"),
}

DEFAULT_RATE_CARDS: dict[ContentType, RateCard] = {
    ct: RateCard(
        content_type=ct,
        platform=get_platform_for_content_type(ct),
        multiplier=_MULTIPLIERS[ct],
    )
    for ct in ContentType
}


def get_rate_card(content_type: ContentType) -> RateCard:
    """Look up the rate card for a content type.

    Args:
        content_type: The content type to look up.

    Returns:
        The RateCard for the given content type.
    """
    return DEFAULT_RATE_CARDS[content_type]


def rate_cards_for_platform(platform: Platform) -> list[RateCard]:
    """Return the rate cards of every content type on *platform*, cheapest first."""
    cards = [card for card in DEFAULT_RATE_CARDS.values() if card.platform == platform]
    return sorted(cards, key=lambda card: (card.multiplier, card.content_type.value))
