"""Campaign-creation request composition and the HTTP campaign client."""

from campaign_wizard.submission.client import (
    CampaignClient,
    HttpCampaignClient,
)
from campaign_wizard.submission.payload import (
    DEFAULT_DEADLINE_DAYS,
    FALLBACK_TITLE,
    CampaignRequest,
    campaign_title,
    compose_request,
    resolve_campaign_kind,
)

__all__ = [
    "DEFAULT_DEADLINE_DAYS",
    "FALLBACK_TITLE",
    "CampaignClient",
    "CampaignRequest",
    "HttpCampaignClient",
    "campaign_title",
    "compose_request",
    "resolve_campaign_kind",
]
