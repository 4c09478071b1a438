"""Step registry: the fixed, ordered catalog of wizard steps and their gates."""

from collections.abc import Callable
from enum import StrEnum

from pydantic import BaseModel

from campaign_wizard.domain.models import CampaignDraft
from campaign_wizard.domain.types import CampaignKind, valid_content_types


class StepId(StrEnum):
    """Identifiers of the campaign-creation steps."""

    PLATFORM = "platform"
    CATEGORIES = "categories"
    INFLUENCER = "influencer"
    POST = "post"
    PAYMENT = "payment"
    REVIEW = "review"


class StepDescriptor(BaseModel, frozen=True):
    """One entry of the step registry.

    Attributes:
        id: The step identifier.
        title: Label shown in the progress indicator.
    """

    id: StepId
    title: str


# Registry order is the wizard order.
STEP_REGISTRY: tuple[StepDescriptor, ...] = (
    StepDescriptor(id=StepId.PLATFORM, title="Platform"),
    StepDescriptor(id=StepId.CATEGORIES, title="Categories"),
    StepDescriptor(id=StepId.INFLUENCER, title="Influencer"),
    StepDescriptor(id=StepId.POST, title="Content"),
    StepDescriptor(id=StepId.PAYMENT, title="Payment"),
    StepDescriptor(id=StepId.REVIEW, title="Review"),
)

_STEP_ORDER: tuple[StepId, ...] = tuple(step.id for step in STEP_REGISTRY)


def active_steps(campaign_kind: CampaignKind | None = None) -> tuple[StepDescriptor, ...]:
    """Return the steps shown for *campaign_kind*.

    Every campaign kind currently walks the full registry.
    """
    return STEP_REGISTRY


def first_step() -> StepId:
    """Return the id of the initial step."""
    return _STEP_ORDER[0]


def terminal_step() -> StepId:
    """Return the id of the terminal (review) step."""
    return _STEP_ORDER[-1]


def step_index(step_id: StepId) -> int:
    """Return the zero-based position of *step_id* in registry order."""
    return _STEP_ORDER.index(step_id)


def get_step(step_id: StepId) -> StepDescriptor:
    """Return the registry descriptor for *step_id*."""
    return STEP_REGISTRY[step_index(step_id)]


def next_step(step_id: StepId) -> StepId | None:
    """Return the step after *step_id*, or None if it is terminal."""
    index = step_index(step_id)
    if index >= len(_STEP_ORDER) - 1:
        return None
    return _STEP_ORDER[index + 1]


def previous_step(step_id: StepId) -> StepId | None:
    """Return the step before *step_id*, or None if it is the first."""
    index = step_index(step_id)
    if index == 0:
        return None
    return _STEP_ORDER[index - 1]


# ---------------------------------------------------------------------------
# Completion predicates
# ---------------------------------------------------------------------------

def _platform_complete(draft: CampaignDraft) -> bool:
    return (
        draft.platform is not None
        and draft.content_type is not None
        and draft.content_type in valid_content_types(draft.platform)
    )


def _categories_complete(draft: CampaignDraft) -> bool:
    return len(draft.categories) > 0


def _influencer_complete(draft: CampaignDraft) -> bool:
    return draft.selected_influencer is not None


def _post_complete(draft: CampaignDraft) -> bool:
    return True


def _payment_complete(draft: CampaignDraft) -> bool:
    return draft.payment_method is not None


# The review step has no predicate; it is left by submit(), not advance().
COMPLETION_PREDICATES: dict[StepId, Callable[[CampaignDraft], bool]] = {
    StepId.PLATFORM: _platform_complete,
    StepId.CATEGORIES: _categories_complete,
    StepId.INFLUENCER: _influencer_complete,
    StepId.POST: _post_complete,
    StepId.PAYMENT: _payment_complete,
}


def is_step_complete(step_id: StepId, draft: CampaignDraft) -> bool:
    """Return True if *draft* satisfies the completion predicate of *step_id*.

    Steps without a predicate are always complete.
    """
    predicate = COMPLETION_PREDICATES.get(step_id)
    if predicate is None:
        return True
    return predicate(draft)
