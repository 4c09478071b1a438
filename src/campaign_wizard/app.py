"""Composition root for the campaign wizard.

Configures:
- **structlog** with JSON rendering (production) or colored console (development)
- **HttpCampaignClient** pointed at the marketplace API from ``Settings``
- **Carry-over** of a pre-selected influencer, read once from a key-value store
- **WizardController** with navigation and notification hooks
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from datetime import datetime

import structlog

from campaign_wizard.carryover import read_carryover_influencer
from campaign_wizard.config import Settings, get_settings, validate_credentials
from campaign_wizard.domain.types import CampaignKind
from campaign_wizard.submission.client import CampaignClient, HttpCampaignClient
from campaign_wizard.wizard.controller import WizardController

logger = structlog.get_logger()


def configure_logging(production: bool = False, log_level: str = "") -> None:
    """Configure structlog for production (JSON) or development (console).

    Production mode (*production=True*): JSON rendering at INFO level.
    Development mode: colored console rendering at DEBUG level.
    A non-empty *log_level* (e.g. ``"WARNING"``) overrides either default.

    Args:
        production: Enable production mode if ``True``.
        log_level: Optional level name overriding the mode's default.
    """
    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if production:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
        level = logging.INFO
    else:
        renderer = structlog.dev.ConsoleRenderer()
        level = logging.DEBUG

    if log_level:
        level = logging.getLevelNamesMapping().get(log_level.upper(), level)

    structlog.configure(
        processors=[*shared_processors, renderer],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    structlog.contextvars.bind_contextvars(service="campaign-wizard")


def initialize(settings: Settings | None = None) -> Settings:
    """Startup path: configure logging and enforce credentials.

    1. Load settings (``get_settings()`` unless given)
    2. Configure logging from ``production`` and ``log_level``
    3. Validate credentials (exits in production when the API token is missing)

    Args:
        settings: Application settings.  If ``None``, ``get_settings()`` is used.

    Returns:
        The settings the process runs with.
    """
    if settings is None:
        settings = get_settings()
    configure_logging(production=settings.production, log_level=settings.log_level)
    logger.info("campaign_wizard_starting", api_url=settings.api_url)

    validate_credentials(settings)
    return settings


def campaign_detail_path(campaign_id: str, settings: Settings | None = None) -> str:
    """Return the path of the detail view for *campaign_id*."""
    if settings is None:
        settings = get_settings()
    return settings.campaign_detail_path.format(campaign_id=campaign_id)


def create_wizard(
    settings: Settings | None = None,
    *,
    store: Mapping[str, str] | None = None,
    campaign_kind: CampaignKind | None = None,
    client: CampaignClient | None = None,
    navigate: Callable[[str], None] | None = None,
    notify: Callable[[str], None] | None = None,
    clock: Callable[[], datetime] | None = None,
) -> WizardController:
    """Build a WizardController wired to the configured services.

    Args:
        settings: Application settings.  If ``None``, the process is
            initialized through ``initialize()`` first.
        store: Key-value store holding a carried-over influencer, if any.
        campaign_kind: Campaign kind chosen before entering the wizard.
        client: Campaign client override.  Defaults to ``HttpCampaignClient``.
        navigate: Called with the detail path of a newly created campaign.
            Defaults to logging the path.
        notify: Called with a displayable message when submission fails.
        clock: Source of the submission time.

    Returns:
        A fresh WizardController.
    """
    if settings is None:
        settings = initialize()

    if client is None:
        client = HttpCampaignClient(
            base_url=settings.api_url,
            api_token=settings.api_token,
            timeout=settings.request_timeout,
        )

    seed = read_carryover_influencer(store, settings.carryover_key) if store is not None else None
    if seed is not None and campaign_kind is CampaignKind.OPEN_POOL:
        logger.warning("carryover_ignored_for_open_pool", influencer_id=seed.id)
        seed = None

    def _navigate_to_campaign(campaign_id: str) -> None:
        path = campaign_detail_path(campaign_id, settings)
        logger.info("navigate_to_campaign", campaign_id=campaign_id, path=path)
        if navigate is not None:
            navigate(path)

    return WizardController(
        client,
        seed_influencer=seed,
        campaign_kind=campaign_kind,
        navigate=_navigate_to_campaign,
        notify=notify,
        clock=clock,
        deadline_days=settings.campaign_deadline_days,
    )
