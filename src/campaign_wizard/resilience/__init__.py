"""Retry infrastructure for calls to the marketplace API."""

from campaign_wizard.resilience.retry import resilient_api_call

__all__ = [
    "resilient_api_call",
]
