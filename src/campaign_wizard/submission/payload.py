"""Composition of the campaign-creation request from a finished draft.

The request is serialized with the camelCase keys the marketplace API
expects. Validation happens before anything is sent; every failed rule is
reported at once.
"""

from datetime import datetime, timedelta
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, field_serializer
from pydantic.alias_generators import to_camel

from campaign_wizard.domain.errors import PayloadValidationError
from campaign_wizard.domain.models import CampaignDraft, PostContent
from campaign_wizard.domain.types import CampaignKind, ContentType, Platform

DEFAULT_DEADLINE_DAYS = 7
FALLBACK_TITLE = "New campaign"


class CampaignRequest(BaseModel):
    """Body of the campaign-creation request."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    title: str
    description: str
    platform: Platform
    content_type: ContentType
    budget: Decimal
    deadline: datetime
    requirements: list[str]
    type: CampaignKind
    categories: list[str]
    influencer_id: str | None = None
    content: PostContent

    @field_serializer("budget", when_used="json")
    def budget_as_number(self, v: Decimal) -> float:
        """Send the budget as a JSON number."""
        return float(v)

    def to_json_body(self) -> dict[str, object]:
        """Return the JSON-ready request body with camelCase keys."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


def resolve_campaign_kind(draft: CampaignDraft) -> CampaignKind:
    """Return the draft's campaign kind, inferring it when never chosen."""
    if draft.campaign_kind is not None:
        return draft.campaign_kind
    if draft.selected_influencer is not None:
        return CampaignKind.SINGLE_INFLUENCER
    return CampaignKind.OPEN_POOL


def campaign_title(draft: CampaignDraft) -> str:
    """Derive the campaign title from the selected influencer."""
    if draft.selected_influencer is not None:
        return f"Campaign with {draft.selected_influencer.name}"
    return FALLBACK_TITLE


def compose_request(
    draft: CampaignDraft,
    *,
    now: datetime,
    deadline_days: int = DEFAULT_DEADLINE_DAYS,
) -> CampaignRequest:
    """Build the campaign-creation request for *draft*.

    Args:
        draft: The draft to submit.
        now: Submission time; the deadline is *deadline_days* after it.
        deadline_days: Days between submission and the campaign deadline.

    Returns:
        The validated CampaignRequest.

    Raises:
        PayloadValidationError: If the draft is missing required data.
    """
    errors: list[str] = []
    kind = resolve_campaign_kind(draft)
    influencer = draft.selected_influencer
    deadline = now + timedelta(days=deadline_days)

    if draft.platform is None:
        errors.append("Platform is required")
    if draft.content_type is None:
        errors.append("Content type is required")
    if draft.budget is None or draft.budget <= Decimal("0"):
        errors.append("Budget must be greater than zero")
    if deadline <= now:
        errors.append("Deadline must be a future date")
    if kind is CampaignKind.SINGLE_INFLUENCER and influencer is None:
        errors.append("An influencer is required for single-influencer campaigns")
    if kind is CampaignKind.OPEN_POOL and not draft.categories:
        errors.append("At least one category is required for open-pool campaigns")

    if errors:
        raise PayloadValidationError(errors)

    return CampaignRequest(
        title=campaign_title(draft),
        description=draft.content.caption,
        platform=draft.platform,  # type: ignore[arg-type]
        content_type=draft.content_type,  # type: ignore[arg-type]
        budget=draft.budget,  # type: ignore[arg-type]
        deadline=deadline,
        requirements=[],
        type=kind,
        categories=sorted(draft.categories),
        influencer_id=influencer.id if influencer is not None else None,
        content=draft.content,
    )
