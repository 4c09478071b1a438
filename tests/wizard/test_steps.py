"""Tests for the step registry and completion predicates."""

import pytest

from campaign_wizard.domain.models import CampaignDraft, Influencer, PaymentMethod
from campaign_wizard.domain.types import CampaignKind, ContentType, Platform
from campaign_wizard.wizard.steps import (
    COMPLETION_PREDICATES,
    STEP_REGISTRY,
    StepId,
    active_steps,
    first_step,
    get_step,
    is_step_complete,
    next_step,
    previous_step,
    step_index,
    terminal_step,
)

EXPECTED_ORDER = [
    StepId.PLATFORM,
    StepId.CATEGORIES,
    StepId.INFLUENCER,
    StepId.POST,
    StepId.PAYMENT,
    StepId.REVIEW,
]


class TestRegistry:
    def test_registry_order(self):
        assert [step.id for step in STEP_REGISTRY] == EXPECTED_ORDER

    def test_every_step_id_registered_once(self):
        ids = [step.id for step in STEP_REGISTRY]
        assert sorted(ids) == sorted(StepId)

    def test_first_and_terminal(self):
        assert first_step() is StepId.PLATFORM
        assert terminal_step() is StepId.REVIEW

    def test_next_and_previous_are_adjacent(self):
        for index, step_id in enumerate(EXPECTED_ORDER):
            assert step_index(step_id) == index
            expected_next = EXPECTED_ORDER[index + 1] if index + 1 < len(EXPECTED_ORDER) else None
            expected_prev = EXPECTED_ORDER[index - 1] if index > 0 else None
            assert next_step(step_id) == expected_next
            assert previous_step(step_id) == expected_prev

    def test_get_step_title(self):
        assert get_step(StepId.POST).title == "Content"

    @pytest.mark.parametrize("kind", [None, *CampaignKind], ids=["unset", "single", "multiple"])
    def test_active_steps_is_full_registry_for_every_kind(self, kind: CampaignKind | None):
        assert active_steps(kind) == STEP_REGISTRY


class TestCompletionPredicates:
    def test_review_has_no_predicate(self):
        assert StepId.REVIEW not in COMPLETION_PREDICATES
        assert is_step_complete(StepId.REVIEW, CampaignDraft())

    def test_categories_requires_one_category(self):
        assert not is_step_complete(StepId.CATEGORIES, CampaignDraft())
        assert is_step_complete(StepId.CATEGORIES, CampaignDraft(categories={"Technology"}))

    def test_platform_requires_platform_and_content_type(self):
        assert not is_step_complete(StepId.PLATFORM, CampaignDraft())
        assert not is_step_complete(StepId.PLATFORM, CampaignDraft(platform=Platform.TIKTOK))
        draft = CampaignDraft(platform=Platform.TIKTOK, content_type=ContentType.TIKTOK_VIDEO)
        assert is_step_complete(StepId.PLATFORM, draft)

    def test_influencer_requires_selection(self, sample_influencer: Influencer):
        assert not is_step_complete(StepId.INFLUENCER, CampaignDraft())
        draft = CampaignDraft(
            campaign_kind=CampaignKind.SINGLE_INFLUENCER,
            selected_influencer=sample_influencer,
        )
        assert is_step_complete(StepId.INFLUENCER, draft)

    def test_post_is_always_complete(self):
        assert is_step_complete(StepId.POST, CampaignDraft())

    def test_payment_requires_method(self, sample_payment_method: PaymentMethod):
        assert not is_step_complete(StepId.PAYMENT, CampaignDraft())
        assert is_step_complete(StepId.PAYMENT, CampaignDraft(payment_method=sample_payment_method))
