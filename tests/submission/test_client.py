"""Tests for HttpCampaignClient using httpx.MockTransport."""

from __future__ import annotations

import json
from datetime import datetime
from decimal import Decimal

import httpx
import pytest
from pydantic import SecretStr
from tenacity import wait_none

from campaign_wizard.domain.errors import CampaignSubmissionError
from campaign_wizard.domain.models import Influencer
from campaign_wizard.domain.types import CampaignKind, ContentType, Platform
from campaign_wizard.submission.client import GENERIC_FAILURE_MESSAGE, HttpCampaignClient
from campaign_wizard.submission.payload import CampaignRequest

# --- Fixtures ---


@pytest.fixture()
def campaign_request(sample_influencer: Influencer, fixed_now: datetime) -> CampaignRequest:
    return CampaignRequest(
        title="Campaign with Ana Souza",
        description="",
        platform=Platform.INSTAGRAM,
        content_type=ContentType.FEED,
        budget=Decimal("3500.00"),
        deadline=fixed_now,
        requirements=[],
        type=CampaignKind.SINGLE_INFLUENCER,
        categories=["Technology"],
        influencer_id=sample_influencer.id,
        content={},
    )


def _client(handler, token: str = "tok_abc") -> HttpCampaignClient:
    return HttpCampaignClient(
        base_url="https://api.example.com/api/",
        api_token=SecretStr(token),
        transport=httpx.MockTransport(handler),
    )


# --- create_campaign ---


@pytest.mark.anyio()
class TestCreateCampaign:
    async def test_posts_json_and_returns_id(self, campaign_request: CampaignRequest) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(201, json={"id": 987, "status": "draft"})

        campaign_id = await _client(handler).create_campaign(campaign_request)

        assert campaign_id == "987"
        assert len(seen) == 1
        sent = seen[0]
        assert sent.method == "POST"
        assert str(sent.url) == "https://api.example.com/api/campaigns"
        assert sent.headers["Authorization"] == "Bearer tok_abc"
        body = json.loads(sent.content)
        assert body["contentType"] == "feed"
        assert body["influencerId"] == "inf_1"
        assert body["budget"] == 3500.0

    async def test_error_status_uses_backend_message(
        self, campaign_request: CampaignRequest
    ) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(422, json={"message": "Budget exceeds wallet balance"})

        with pytest.raises(CampaignSubmissionError) as exc_info:
            await _client(handler).create_campaign(campaign_request)

        assert str(exc_info.value) == "Budget exceeds wallet balance"
        assert exc_info.value.status_code == 422

    async def test_error_status_without_message(self, campaign_request: CampaignRequest) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(500, text="<html>oops</html>")

        with pytest.raises(CampaignSubmissionError, match="Request failed with status 500"):
            await _client(handler).create_campaign(campaign_request)

    async def test_missing_token_sends_nothing(self, campaign_request: CampaignRequest) -> None:
        calls: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            return httpx.Response(201, json={"id": "x"})

        with pytest.raises(CampaignSubmissionError, match="Not authorized"):
            await _client(handler, token="").create_campaign(campaign_request)
        assert calls == []

    async def test_response_without_id(self, campaign_request: CampaignRequest) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(201, json={"status": "draft"})

        with pytest.raises(CampaignSubmissionError) as exc_info:
            await _client(handler).create_campaign(campaign_request)
        assert str(exc_info.value) == GENERIC_FAILURE_MESSAGE

    async def test_non_json_success_body(self, campaign_request: CampaignRequest) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text="created")

        with pytest.raises(CampaignSubmissionError, match="Could not create the campaign"):
            await _client(handler).create_campaign(campaign_request)

    async def test_read_timeout_is_not_retried(self, campaign_request: CampaignRequest) -> None:
        calls: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            raise httpx.ReadTimeout("timed out", request=request)

        with pytest.raises(CampaignSubmissionError) as exc_info:
            await _client(handler).create_campaign(campaign_request)

        assert str(exc_info.value) == GENERIC_FAILURE_MESSAGE
        assert isinstance(exc_info.value.__cause__, httpx.ReadTimeout)
        assert len(calls) == 1

    async def test_connect_error_is_retried(
        self, campaign_request: CampaignRequest, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setattr(
            HttpCampaignClient,
            "_post",
            HttpCampaignClient._post.retry_with(wait=wait_none()),  # type: ignore[attr-defined]
        )
        calls: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            if len(calls) == 1:
                raise httpx.ConnectError("connection refused", request=request)
            return httpx.Response(201, json={"id": "cmp_42"})

        campaign_id = await _client(handler).create_campaign(campaign_request)

        assert campaign_id == "cmp_42"
        assert len(calls) == 2

    async def test_connect_error_exhausts_retries(
        self, campaign_request: CampaignRequest, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setattr(
            HttpCampaignClient,
            "_post",
            HttpCampaignClient._post.retry_with(wait=wait_none()),  # type: ignore[attr-defined]
        )
        calls: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(CampaignSubmissionError) as exc_info:
            await _client(handler).create_campaign(campaign_request)

        assert str(exc_info.value) == GENERIC_FAILURE_MESSAGE
        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)
        assert len(calls) == 3
