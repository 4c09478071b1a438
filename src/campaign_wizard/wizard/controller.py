"""WizardController: owns the campaign draft, the step pointer, and submission."""

from __future__ import annotations

import uuid
from collections.abc import Callable, Mapping
from datetime import UTC, datetime
from typing import Any, assert_never

import structlog
from pydantic import TypeAdapter

from campaign_wizard.domain.errors import (
    CampaignSubmissionError,
    InvalidContentTypeError,
    PayloadValidationError,
    ReadOnlyFieldError,
    WizardClosedError,
)
from campaign_wizard.domain.models import CampaignDraft, Influencer, PaymentMethod, PostContent
from campaign_wizard.domain.types import (
    CampaignKind,
    ContentType,
    Platform,
    SubmissionState,
    valid_content_types,
)
from campaign_wizard.pricing.engine import format_price, price
from campaign_wizard.pricing.rate_table import DEFAULT_RATE_CARDS, RateCard
from campaign_wizard.submission.client import GENERIC_FAILURE_MESSAGE, CampaignClient
from campaign_wizard.submission.payload import DEFAULT_DEADLINE_DAYS, compose_request
from campaign_wizard.wizard.props import (
    CategoriesStepProps,
    InfluencerStepProps,
    PaymentStepProps,
    PlatformStepProps,
    PostStepProps,
    ReviewStepProps,
    StepProps,
)
from campaign_wizard.wizard.steps import (
    StepDescriptor,
    StepId,
    active_steps,
    first_step,
    get_step,
    is_step_complete,
    next_step,
    previous_step,
    terminal_step,
)

logger = structlog.get_logger()

Navigator = Callable[[str], None]
Notifier = Callable[[str], None]
Clock = Callable[[], datetime]

# Written only by the pricing engine
_DERIVED_FIELDS: frozenset[str] = frozenset({"budget"})

_PLATFORM = TypeAdapter(Platform | None)
_CONTENT_TYPE = TypeAdapter(ContentType | None)
_CAMPAIGN_KIND = TypeAdapter(CampaignKind | None)


def _utcnow() -> datetime:
    return datetime.now(tz=UTC)


def _ignore(_: str) -> None:
    return None


class WizardController:
    """State machine driving one campaign-creation session.

    Holds the cumulative ``CampaignDraft``, walks the step registry one step
    at a time behind each step's completion predicate, keeps the budget in
    sync with the pricing engine, and submits the composed request at most
    once at a time.

    Usage::

        wizard = WizardController(client)
        wizard.select_platform(Platform.INSTAGRAM)
        wizard.select_content_type(ContentType.REELS)
        wizard.advance()                          # -> CATEGORIES
        wizard.select_categories(["Technology"])
        wizard.advance()                          # -> INFLUENCER
        wizard.select_influencer(influencer)      # priced, -> POST
        ...
        campaign_id = await wizard.submit()

    Args:
        client: Campaign-creation collaborator.
        seed_influencer: Influencer carried over from a previous screen. Makes
            the campaign a single-influencer campaign.
        campaign_kind: Campaign kind chosen before entering the wizard.
        navigate: Called with the new campaign id after a successful submit.
        notify: Called with a displayable message when a submit fails.
        clock: Source of the submission time.
        deadline_days: Days between submission and the campaign deadline.
        rate_cards: Rate table used for pricing.

    Raises:
        ValueError: If *seed_influencer* is combined with an open-pool kind.
    """

    def __init__(
        self,
        client: CampaignClient,
        *,
        seed_influencer: Influencer | None = None,
        campaign_kind: CampaignKind | None = None,
        navigate: Navigator | None = None,
        notify: Notifier | None = None,
        clock: Clock | None = None,
        deadline_days: int = DEFAULT_DEADLINE_DAYS,
        rate_cards: Mapping[ContentType, RateCard] = DEFAULT_RATE_CARDS,
    ) -> None:
        if seed_influencer is not None:
            if campaign_kind is CampaignKind.OPEN_POOL:
                raise ValueError("A seeded influencer requires a single-influencer campaign")
            campaign_kind = CampaignKind.SINGLE_INFLUENCER

        self._client = client
        self._navigate = navigate or _ignore
        self._notify = notify or _ignore
        self._clock = clock or _utcnow
        self._deadline_days = deadline_days
        self._rate_cards = rate_cards

        self._draft = CampaignDraft(
            campaign_kind=campaign_kind,
            selected_influencer=seed_influencer,
        )
        self._current_step: StepId = first_step()
        self._submission_state = SubmissionState.IDLE
        self._last_error: str | None = None
        self._closed = False
        self._session_id = uuid.uuid4().hex
        self._log = logger.bind(wizard_session=self._session_id)
        self._log.info(
            "wizard_started",
            campaign_kind=campaign_kind,
            seeded=seed_influencer is not None,
        )

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def current_step(self) -> StepId:
        """Return the id of the step currently shown."""
        return self._current_step

    @property
    def draft(self) -> CampaignDraft:
        """Return the current draft snapshot."""
        return self._draft

    @property
    def submission_state(self) -> SubmissionState:
        return self._submission_state

    @property
    def last_error(self) -> str | None:
        """Return the message of the last failed submission, if any."""
        return self._last_error

    @property
    def is_closed(self) -> bool:
        """Return True once the session was submitted or abandoned."""
        return self._closed

    @property
    def session_id(self) -> str:
        return self._session_id

    @property
    def steps(self) -> tuple[StepDescriptor, ...]:
        """Return the steps of this session in order."""
        return active_steps(self._draft.campaign_kind)

    def _ensure_open(self) -> None:
        if self._closed:
            raise WizardClosedError(f"Wizard session {self._session_id} is closed")

    def _ignored_while_submitting(self, action: str) -> bool:
        """Log and return True if a submission is in flight."""
        if self._submission_state is not SubmissionState.SUBMITTING:
            return False
        self._log.warning("action_during_submission_ignored", action=action)
        return True

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    def _can_leave(self, step_id: StepId) -> bool:
        if self._submission_state is SubmissionState.SUBMITTING:
            return False
        return next_step(step_id) is not None and is_step_complete(step_id, self._draft)

    def can_advance(self) -> bool:
        """Return True if ``advance()`` would move past the current step."""
        return not self._closed and self._can_leave(self._current_step)

    def _move_to(self, step_id: StepId) -> None:
        self._log.debug("step_changed", from_step=self._current_step, to_step=step_id)
        self._current_step = step_id

    def advance(self) -> StepId:
        """Move to the next step if the current step is complete.

        No-op on the terminal step or while the completion predicate fails.
        Ignored while a submission is in flight.

        Returns:
            The current step after the call.
        """
        self._ensure_open()
        if self._ignored_while_submitting("advance"):
            return self._current_step
        target = next_step(self._current_step)
        if target is None:
            return self._current_step
        if not is_step_complete(self._current_step, self._draft):
            self._log.debug("advance_blocked", step=self._current_step)
            return self._current_step
        self._move_to(target)
        return self._current_step

    def retreat(self) -> StepId:
        """Move to the previous step.

        No-op on the first step. Ignored while a submission is in flight.

        Returns:
            The current step after the call.
        """
        self._ensure_open()
        if self._ignored_while_submitting("retreat"):
            return self._current_step
        target = previous_step(self._current_step)
        if target is not None:
            self._move_to(target)
        return self._current_step

    def abandon(self) -> bool:
        """Leave the flow without submitting, discarding the session.

        Returns:
            True if the session was closed, False while a submission is in
            flight (it cannot be cancelled) or if already closed.
        """
        if self._closed:
            return False
        if self._submission_state is SubmissionState.SUBMITTING:
            self._log.warning("abandon_during_submission_ignored")
            return False
        self._closed = True
        self._log.info("wizard_abandoned", step=self._current_step)
        return True

    # ------------------------------------------------------------------
    # Draft updates
    # ------------------------------------------------------------------

    def apply_update(self, partial: Mapping[str, Any]) -> CampaignDraft:
        """Shallow-merge *partial* into the draft.

        Changing the platform clears a content type the new platform does not
        offer. Selecting an influencer makes the campaign single-influencer;
        switching to an open pool drops the influencer. Whenever the content
        type or the influencer ends up different, the budget is recomputed.

        Args:
            partial: Draft field names mapped to their new values.

        Returns:
            The new draft snapshot, unchanged while a submission is in flight.

        Raises:
            ReadOnlyFieldError: If *partial* sets ``budget``.
            InvalidContentTypeError: If the resulting content type does not
                belong to the resulting platform.
            WizardClosedError: If the session is closed.
            pydantic.ValidationError: If *partial* has unknown fields or
                malformed values.
        """
        self._ensure_open()
        for field in partial:
            if field in _DERIVED_FIELDS:
                raise ReadOnlyFieldError(field)
        if not partial or self._ignored_while_submitting("apply_update"):
            return self._draft

        previous = self._draft
        merged: dict[str, Any] = dict(previous)
        merged.update(partial)

        platform = _PLATFORM.validate_python(merged["platform"])
        content_type = _CONTENT_TYPE.validate_python(merged["content_type"])
        if (
            "platform" in partial
            and "content_type" not in partial
            and content_type is not None
            and content_type not in valid_content_types(platform)
        ):
            self._log.info(
                "content_type_invalidated",
                platform=platform,
                content_type=content_type,
            )
            content_type = None
        if content_type is not None and content_type not in valid_content_types(platform):
            raise InvalidContentTypeError(platform, content_type)
        merged["platform"] = platform
        merged["content_type"] = content_type

        if "campaign_kind" in partial:
            kind = _CAMPAIGN_KIND.validate_python(partial["campaign_kind"])
            if kind is CampaignKind.OPEN_POOL and "selected_influencer" not in partial:
                merged["selected_influencer"] = None
        elif "selected_influencer" in partial and partial["selected_influencer"] is not None:
            merged["campaign_kind"] = CampaignKind.SINGLE_INFLUENCER

        # Budget is re-derived below; validate the merge without it.
        merged["budget"] = None
        candidate = CampaignDraft.model_validate(merged)

        pricing_changed = (
            "content_type" in partial
            or "selected_influencer" in partial
            or candidate.content_type != previous.content_type
            or candidate.selected_influencer != previous.selected_influencer
        )
        if pricing_changed:
            budget = price(candidate.selected_influencer, candidate.content_type, self._rate_cards)
            self._log.debug("budget_recomputed", budget=str(budget) if budget is not None else None)
        else:
            budget = previous.budget

        self._draft = candidate.model_copy(update={"budget": budget})
        return self._draft

    def select_categories(self, categories: list[str]) -> None:
        """Replace the selected categories."""
        self.apply_update({"categories": categories})

    def select_platform(self, platform: Platform) -> None:
        self.apply_update({"platform": platform})

    def select_content_type(self, content_type: ContentType) -> None:
        self.apply_update({"content_type": content_type})

    def update_content(self, content: PostContent) -> None:
        self.apply_update({"content": content})

    def select_influencer(self, influencer: Influencer) -> None:
        """Select *influencer*, reprice, and leave the influencer step."""
        self.apply_update({"selected_influencer": influencer})
        if self._current_step is StepId.INFLUENCER:
            self.advance()

    def select_payment_method(self, method: PaymentMethod) -> None:
        """Select *method* and leave the payment step."""
        self.apply_update({"payment_method": method})
        if self._current_step is StepId.PAYMENT:
            self.advance()

    # ------------------------------------------------------------------
    # Props
    # ------------------------------------------------------------------

    def props_for(self, step_id: StepId) -> StepProps:
        """Derive the props of the component rendering *step_id*.

        Args:
            step_id: The step to derive props for.

        Returns:
            The props variant belonging to *step_id*.
        """
        draft = self._draft
        title = get_step(step_id).title
        can_advance = self._can_leave(step_id)

        match step_id:
            case StepId.CATEGORIES:
                return CategoriesStepProps(
                    title=title,
                    can_advance=can_advance,
                    on_next=self.advance,
                    on_back=self.retreat,
                    selected_categories=draft.categories,
                    on_categories_select=self.select_categories,
                )
            case StepId.PLATFORM:
                return PlatformStepProps(
                    title=title,
                    can_advance=can_advance,
                    on_next=self.advance,
                    on_back=self.retreat,
                    selected_platform=draft.platform,
                    selected_content_type=draft.content_type,
                    available_content_types=valid_content_types(draft.platform),
                    on_platform_select=self.select_platform,
                    on_content_type_select=self.select_content_type,
                )
            case StepId.INFLUENCER:
                return InfluencerStepProps(
                    title=title,
                    can_advance=can_advance,
                    on_next=self.advance,
                    on_back=self.retreat,
                    platform=draft.platform,
                    content_type=draft.content_type,
                    on_influencer_select=self.select_influencer,
                )
            case StepId.POST:
                return PostStepProps(
                    title=title,
                    can_advance=can_advance,
                    on_next=self.advance,
                    on_back=self.retreat,
                    platform=draft.platform,
                    content_type=draft.content_type,
                    content=draft.content,
                    on_content_change=self.update_content,
                )
            case StepId.PAYMENT:
                return PaymentStepProps(
                    title=title,
                    can_advance=can_advance,
                    on_next=self.advance,
                    on_back=self.retreat,
                    budget=draft.budget,
                    on_payment_method_select=self.select_payment_method,
                )
            case StepId.REVIEW:
                return ReviewStepProps(
                    title=title,
                    can_advance=can_advance,
                    on_next=self.advance,
                    on_back=self.retreat,
                    draft=draft,
                    formatted_budget=format_price(draft.budget),
                    on_submit=self.submit,
                    submission_state=self._submission_state,
                    last_error=self._last_error,
                )
            case _:
                assert_never(step_id)

    def current_props(self) -> StepProps:
        """Return the props of the current step."""
        return self.props_for(self._current_step)

    # ------------------------------------------------------------------
    # Submission
    # ------------------------------------------------------------------

    def _fail(self, message: str) -> None:
        self._submission_state = SubmissionState.FAILED
        self._last_error = message
        self._log.warning("campaign_submission_failed", error=message)
        self._notify(message)

    async def submit(self) -> str | None:
        """Compose the draft into a request and create the campaign.

        Ignored (returns None without a request) while another submission is
        in flight, outside the review step, or once the session is closed.
        On failure the draft and the step pointer are kept so the call can
        be retried.

        Returns:
            The new campaign id on success, otherwise None.
        """
        if self._closed:
            self._log.warning("submit_on_closed_wizard_ignored")
            return None
        if self._submission_state is SubmissionState.SUBMITTING:
            self._log.warning("submission_already_in_flight")
            return None
        if self._current_step is not terminal_step():
            self._log.warning("submit_outside_review_ignored", step=self._current_step)
            return None

        # Must be set before the first await.
        self._submission_state = SubmissionState.SUBMITTING
        self._last_error = None
        self._log.info("campaign_submission_started")

        try:
            request = compose_request(
                self._draft,
                now=self._clock(),
                deadline_days=self._deadline_days,
            )
            campaign_id = await self._client.create_campaign(request)
        except (PayloadValidationError, CampaignSubmissionError) as exc:
            self._fail(str(exc))
            return None
        except Exception:
            self._log.exception("campaign_submission_crashed")
            self._fail(GENERIC_FAILURE_MESSAGE)
            return None

        self._submission_state = SubmissionState.IDLE
        self._closed = True
        self._log.info("campaign_submission_succeeded", campaign_id=campaign_id)
        self._navigate(campaign_id)
        return campaign_id
