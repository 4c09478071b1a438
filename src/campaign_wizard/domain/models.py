"""Pydantic v2 models for the data accumulated by the campaign wizard."""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from campaign_wizard.domain.types import (
    CampaignKind,
    ContentType,
    Platform,
    validate_platform_content_type,
)


class Influencer(BaseModel):
    """A content creator as shown in listings and carried into the wizard.

    Accepts the camelCase keys used by the marketplace API.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    id: str
    name: str
    followers: int | None = None
    categories: tuple[str, ...] = ()
    location: str | None = None
    avatar: str | None = None
    platform: Platform | None = None
    engagement: float | None = None

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id_to_str(cls, v: object) -> object:
        """Accept numeric identifiers from the API."""
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("id", "name")
    @classmethod
    def must_not_be_empty(cls, v: str) -> str:
        """Ensure identity fields are not empty or whitespace-only."""
        if not v.strip():
            raise ValueError("field must not be empty")
        return v

    @field_validator("platform", mode="before")
    @classmethod
    def normalise_platform(cls, v: object) -> object:
        """Accept display-cased platform names such as ``"Instagram"``."""
        if isinstance(v, str):
            return v.strip().lower() or None
        return v


class PaymentMethod(BaseModel):
    """A previously registered payment instrument."""

    model_config = ConfigDict(frozen=True)

    id: str
    brand: str
    last4: str = Field(pattern=r"^\d{4}$")


class PostContent(BaseModel):
    """Free-text content of the campaign post.

    Hashtags and mentions keep their order; duplicates and blank entries are
    dropped and each tag gets its ``#`` / ``@`` prefix.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    caption: str = ""
    hashtags: tuple[str, ...] = ()
    mentions: tuple[str, ...] = ()
    image_url: str | None = None

    @field_validator("hashtags")
    @classmethod
    def normalise_hashtags(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        """Prefix hashtags with ``#`` and drop duplicates."""
        return _normalise_tags(v, "#")

    @field_validator("mentions")
    @classmethod
    def normalise_mentions(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        """Prefix mentions with ``@`` and drop duplicates."""
        return _normalise_tags(v, "@")


def _normalise_tags(tags: tuple[str, ...], prefix: str) -> tuple[str, ...]:
    seen: list[str] = []
    for raw in tags:
        tag = raw.strip()
        if not tag:
            continue
        if not tag.startswith(prefix):
            tag = f"{prefix}{tag}"
        if tag not in seen:
            seen.append(tag)
    return tuple(seen)


class CampaignDraft(BaseModel):
    """Cumulative, in-progress campaign data for one wizard session.

    Snapshots are immutable; the wizard controller replaces the whole draft
    on every merge. ``budget`` is derived by the pricing engine and is never
    taken from user input.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    campaign_kind: CampaignKind | None = None
    categories: frozenset[str] = frozenset()
    platform: Platform | None = None
    content_type: ContentType | None = None
    budget: Decimal | None = None
    selected_influencer: Influencer | None = None
    payment_method: PaymentMethod | None = None
    content: PostContent = PostContent()

    @field_validator("budget", mode="before")
    @classmethod
    def reject_float_budget(cls, v: object) -> object:
        """Reject float inputs for budget to prevent precision errors."""
        if isinstance(v, float):
            raise ValueError("Use Decimal or string, not float, for budget")
        return v

    @model_validator(mode="after")
    def content_type_must_match_platform(self) -> "CampaignDraft":
        """Ensure the content type is valid for the chosen platform."""
        if self.content_type is not None:
            validate_platform_content_type(self.platform, self.content_type)
        return self

    @model_validator(mode="after")
    def influencer_requires_single_kind(self) -> "CampaignDraft":
        """Ensure only single-influencer campaigns carry a selected influencer."""
        if (
            self.selected_influencer is not None
            and self.campaign_kind is not CampaignKind.SINGLE_INFLUENCER
        ):
            raise ValueError("selected_influencer requires campaign_kind 'single'")
        return self

    @model_validator(mode="after")
    def budget_requires_pricing_inputs(self) -> "CampaignDraft":
        """Ensure a budget only exists once both pricing inputs are set."""
        if self.budget is not None and (
            self.selected_influencer is None or self.content_type is None
        ):
            raise ValueError("budget requires both selected_influencer and content_type")
        return self
