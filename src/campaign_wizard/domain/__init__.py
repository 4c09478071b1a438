"""Domain types, models, and errors for the campaign wizard."""

from campaign_wizard.domain.errors import (
    CampaignSubmissionError,
    InvalidContentTypeError,
    PayloadValidationError,
    ReadOnlyFieldError,
    WizardClosedError,
    WizardError,
)
from campaign_wizard.domain.models import (
    CampaignDraft,
    Influencer,
    PaymentMethod,
    PostContent,
)
from campaign_wizard.domain.types import (
    PLATFORM_CONTENT_TYPES,
    CampaignKind,
    ContentType,
    Platform,
    SubmissionState,
    get_platform_for_content_type,
    valid_content_types,
    validate_platform_content_type,
)

__all__ = [
    "PLATFORM_CONTENT_TYPES",
    "CampaignDraft",
    "CampaignKind",
    "CampaignSubmissionError",
    "ContentType",
    "Influencer",
    "InvalidContentTypeError",
    "PayloadValidationError",
    "PaymentMethod",
    "Platform",
    "PostContent",
    "ReadOnlyFieldError",
    "SubmissionState",
    "WizardClosedError",
    "WizardError",
    "get_platform_for_content_type",
    "valid_content_types",
    "validate_platform_content_type",
]
