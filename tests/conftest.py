"""Shared pytest fixtures for the campaign wizard test suite."""

from __future__ import annotations

import asyncio
from datetime import UTC, datetime

import pytest

from campaign_wizard.domain.models import Influencer, PaymentMethod
from campaign_wizard.domain.types import ContentType, Platform
from campaign_wizard.submission.payload import CampaignRequest
from campaign_wizard.wizard.controller import WizardController

FIXED_NOW = datetime(2026, 3, 2, 12, 0, tzinfo=UTC)


class FakeCampaignClient:
    """In-memory campaign client recording every request it receives.

    Set ``failures`` to make the next calls raise, and ``gate`` to hold a
    call open until the test releases it.
    """

    def __init__(self, campaign_id: str = "cmp_123") -> None:
        self.campaign_id = campaign_id
        self.requests: list[CampaignRequest] = []
        self.failures: list[Exception] = []
        self.gate: asyncio.Event | None = None

    async def create_campaign(self, request: CampaignRequest) -> str:
        self.requests.append(request)
        if self.gate is not None:
            await self.gate.wait()
        if self.failures:
            raise self.failures.pop(0)
        return self.campaign_id


@pytest.fixture
def anyio_backend() -> str:
    """Run anyio-marked tests on asyncio only."""
    return "asyncio"


@pytest.fixture
def fixed_now() -> datetime:
    return FIXED_NOW


@pytest.fixture
def fake_client() -> FakeCampaignClient:
    return FakeCampaignClient()


@pytest.fixture
def sample_influencer() -> Influencer:
    """A representative influencer with 100k followers."""
    return Influencer(
        id="inf_1",
        name="Ana Souza",
        followers=100000,
        categories=("Technology", "Lifestyle"),
        location="São Paulo, SP",
        platform=Platform.INSTAGRAM,
        engagement=4.2,
    )


@pytest.fixture
def other_influencer() -> Influencer:
    """A second influencer with a different reach."""
    return Influencer(id="inf_2", name="Bruno Lima", followers=40000)


@pytest.fixture
def sample_payment_method() -> PaymentMethod:
    return PaymentMethod(id="pm_1", brand="visa", last4="4242")


@pytest.fixture
def wizard(fake_client: FakeCampaignClient) -> WizardController:
    """A fresh wizard with no seed, a fixed clock, and the fake client."""
    return WizardController(fake_client, clock=lambda: FIXED_NOW)


@pytest.fixture
def notifications() -> list[str]:
    return []


@pytest.fixture
def navigations() -> list[str]:
    return []


@pytest.fixture
def review_wizard(
    fake_client: FakeCampaignClient,
    sample_influencer: Influencer,
    sample_payment_method: PaymentMethod,
    notifications: list[str],
    navigations: list[str],
) -> WizardController:
    """A wizard walked through every step up to review."""
    wizard = WizardController(
        fake_client,
        clock=lambda: FIXED_NOW,
        notify=notifications.append,
        navigate=navigations.append,
    )
    wizard.select_platform(Platform.INSTAGRAM)
    wizard.select_content_type(ContentType.REELS)
    wizard.advance()
    wizard.select_categories(["Technology"])
    wizard.advance()
    wizard.select_influencer(sample_influencer)
    wizard.advance()
    wizard.select_payment_method(sample_payment_method)
    return wizard

