"""Per-step props handed to step components.

Each step id maps to exactly one props type; ``StepProps`` is the union the
controller's ``props_for`` returns. The ``step_id`` field discriminates the
variants.
"""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from decimal import Decimal
from typing import Literal

from campaign_wizard.domain.models import CampaignDraft, Influencer, PaymentMethod, PostContent
from campaign_wizard.domain.types import ContentType, Platform, SubmissionState
from campaign_wizard.wizard.steps import StepId


@dataclass(frozen=True, kw_only=True)
class BaseStepProps:
    """Props shared by every step.

    Attributes:
        title: Registry title of the step.
        can_advance: Whether the step's completion predicate currently holds.
        on_next: Advance to the next step (no-op while the gate is closed).
        on_back: Return to the previous step.
    """

    title: str
    can_advance: bool
    on_next: Callable[[], StepId]
    on_back: Callable[[], StepId]


@dataclass(frozen=True, kw_only=True)
class CategoriesStepProps(BaseStepProps):
    step_id: Literal[StepId.CATEGORIES] = StepId.CATEGORIES
    selected_categories: frozenset[str]
    on_categories_select: Callable[[list[str]], None]


@dataclass(frozen=True, kw_only=True)
class PlatformStepProps(BaseStepProps):
    step_id: Literal[StepId.PLATFORM] = StepId.PLATFORM
    selected_platform: Platform | None
    selected_content_type: ContentType | None
    available_content_types: frozenset[ContentType]
    on_platform_select: Callable[[Platform], None]
    on_content_type_select: Callable[[ContentType], None]


@dataclass(frozen=True, kw_only=True)
class InfluencerStepProps(BaseStepProps):
    """Selecting an influencer prices the draft and advances in one action."""

    step_id: Literal[StepId.INFLUENCER] = StepId.INFLUENCER
    platform: Platform | None
    content_type: ContentType | None
    on_influencer_select: Callable[[Influencer], None]


@dataclass(frozen=True, kw_only=True)
class PostStepProps(BaseStepProps):
    step_id: Literal[StepId.POST] = StepId.POST
    platform: Platform | None
    content_type: ContentType | None
    content: PostContent
    on_content_change: Callable[[PostContent], None]


@dataclass(frozen=True, kw_only=True)
class PaymentStepProps(BaseStepProps):
    """Selecting a payment method also advances to the review step."""

    step_id: Literal[StepId.PAYMENT] = StepId.PAYMENT
    budget: Decimal | None
    on_payment_method_select: Callable[[PaymentMethod], None]


@dataclass(frozen=True, kw_only=True)
class ReviewStepProps(BaseStepProps):
    step_id: Literal[StepId.REVIEW] = StepId.REVIEW
    draft: CampaignDraft
    formatted_budget: str
    on_submit: Callable[[], Awaitable[str | None]]
    submission_state: SubmissionState
    last_error: str | None


StepProps = (
    CategoriesStepProps
    | PlatformStepProps
    | InfluencerStepProps
    | PostStepProps
    | PaymentStepProps
    | ReviewStepProps
)
