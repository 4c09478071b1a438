"""One-shot read of an influencer pre-selected on a previous screen.

The influencer list stores the chosen influencer as JSON under a fixed key of
a process-local key-value store. The wizard reads it once at startup and
never writes it back.
"""

from __future__ import annotations

import json
from collections.abc import Mapping

import structlog
from pydantic import ValidationError

from campaign_wizard.domain.models import Influencer

logger = structlog.get_logger()

SELECTED_INFLUENCER_KEY = "selectedInfluencer"


def read_carryover_influencer(
    store: Mapping[str, str],
    key: str = SELECTED_INFLUENCER_KEY,
) -> Influencer | None:
    """Read the carried-over influencer from *store*.

    A stale or corrupt entry must not block the wizard, so malformed data is
    logged and treated as absent.

    Args:
        store: The key-value store to read from.
        key: The key the influencer is stored under.

    Returns:
        The parsed Influencer, or None if nothing usable is stored.
    """
    raw = store.get(key)
    if not raw:
        return None

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        logger.warning("carryover_influencer_unreadable", key=key, error=str(exc))
        return None

    if not isinstance(data, dict):
        logger.warning("carryover_influencer_unreadable", key=key, error="not an object")
        return None

    try:
        influencer = Influencer.model_validate(data)
    except ValidationError as exc:
        logger.warning("carryover_influencer_invalid", key=key, errors=exc.errors())
        return None

    logger.debug("carryover_influencer_loaded", key=key, influencer_id=influencer.id)
    return influencer
