"""Campaign-creation wizard: step registry, per-step props, and controller."""

from campaign_wizard.wizard.controller import WizardController
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
    COMPLETION_PREDICATES,
    STEP_REGISTRY,
    StepDescriptor,
    StepId,
    active_steps,
    is_step_complete,
)

__all__ = [
    "COMPLETION_PREDICATES",
    "STEP_REGISTRY",
    "CategoriesStepProps",
    "InfluencerStepProps",
    "PaymentStepProps",
    "PlatformStepProps",
    "PostStepProps",
    "ReviewStepProps",
    "StepDescriptor",
    "StepId",
    "StepProps",
    "WizardController",
    "active_steps",
    "is_step_complete",
]
