"""HTTP client for the marketplace campaign-creation endpoint.

Wraps ``httpx.AsyncClient``. Every failure is converted into a
``CampaignSubmissionError`` carrying a message fit for display.
"""

from __future__ import annotations

from typing import Any, Protocol

import httpx
import structlog
from pydantic import SecretStr

from campaign_wizard.domain.errors import CampaignSubmissionError
from campaign_wizard.resilience.retry import resilient_api_call
from campaign_wizard.submission.payload import CampaignRequest

logger = structlog.get_logger()

GENERIC_FAILURE_MESSAGE = "Could not create the campaign. Please try again."


class CampaignClient(Protocol):
    """Anything that can create a campaign and return its identifier."""

    async def create_campaign(self, request: CampaignRequest) -> str: ...


def _error_message(response: httpx.Response) -> str:
    """Extract the backend's ``message`` field, falling back to a generic text."""
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict):
        message = body.get("message")
        if isinstance(message, str) and message.strip():
            return message
    return f"Request failed with status {response.status_code}"


class HttpCampaignClient:
    """Create campaigns through the marketplace REST API.

    Args:
        base_url: API root, e.g. ``https://api.example.com/api``.
        api_token: Bearer token of the signed-in advertiser.
        timeout: Request timeout in seconds.
        transport: Optional httpx transport (tests use ``httpx.MockTransport``).
    """

    def __init__(
        self,
        base_url: str,
        api_token: SecretStr,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._api_token = api_token
        self._timeout = timeout
        self._transport = transport

    def _headers(self) -> dict[str, str]:
        token = self._api_token.get_secret_value()
        if not token:
            raise CampaignSubmissionError("Not authorized")
        return {
            "Content-Type": "application/json",
            "Accept": "application/json",
            "Authorization": f"Bearer {token}",
        }

    @resilient_api_call("campaigns", retry_on=(httpx.ConnectError, httpx.ConnectTimeout))
    async def _post(self, path: str, body: dict[str, Any], headers: dict[str, str]) -> httpx.Response:
        async with httpx.AsyncClient(
            base_url=self._base_url,
            timeout=self._timeout,
            transport=self._transport,
        ) as client:
            return await client.post(path, json=body, headers=headers)

    async def create_campaign(self, request: CampaignRequest) -> str:
        """POST *request* to ``/campaigns`` and return the new campaign's id.

        Args:
            request: The composed campaign-creation request.

        Returns:
            The identifier of the created campaign.

        Raises:
            CampaignSubmissionError: If the token is missing, the service is
                unreachable, or it answers with an error or without an id.
        """
        headers = self._headers()
        try:
            response = await self._post("/campaigns", request.to_json_body(), headers)
        except httpx.HTTPError as exc:
            logger.error("campaign_request_failed", error=str(exc))
            raise CampaignSubmissionError(GENERIC_FAILURE_MESSAGE) from exc

        if response.is_error:
            message = _error_message(response)
            logger.warning(
                "campaign_rejected",
                status_code=response.status_code,
                message=message,
            )
            raise CampaignSubmissionError(message, status_code=response.status_code)

        try:
            body = response.json()
        except ValueError as exc:
            raise CampaignSubmissionError(GENERIC_FAILURE_MESSAGE) from exc

        campaign_id = body.get("id") if isinstance(body, dict) else None
        if campaign_id is None or str(campaign_id) == "":
            logger.error("campaign_response_missing_id", status_code=response.status_code)
            raise CampaignSubmissionError(GENERIC_FAILURE_MESSAGE)

        logger.info("campaign_created", campaign_id=str(campaign_id))
        return str(campaign_id)
