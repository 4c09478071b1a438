"""Resilient API call decorator built on tenacity.

Only failures listed in ``retry_on`` are retried. Campaign creation is a
non-idempotent POST, so callers restrict retries to errors raised before the
request reached the server.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

import structlog
from tenacity import (
    RetryCallState,
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential_jitter,
)

logger = structlog.get_logger()

F = TypeVar("F", bound=Callable[..., Any])


def _log_final_failure(retry_state: RetryCallState) -> Any:
    """Log retry exhaustion, then re-raise the last exception.

    Args:
        retry_state: Tenacity retry state with attempt info and exception.
    """
    outcome = retry_state.outcome
    exception = outcome.exception() if outcome else None
    api_name = getattr(retry_state.fn, "_api_name", "unknown") if retry_state.fn else "unknown"

    logger.error(
        "api_call_failed_after_retries",
        api_name=api_name,
        attempts=retry_state.attempt_number,
        exception=str(exception),
    )
    if outcome is None:
        return None
    return outcome.result()


def _before_sleep_log(retry_state: RetryCallState) -> None:
    """Log a warning before each retry attempt.

    Args:
        retry_state: Tenacity retry state with attempt info.
    """
    api_name = getattr(retry_state.fn, "_api_name", "unknown") if retry_state.fn else "unknown"
    logger.warning(
        "retrying_api_call",
        api_name=api_name,
        attempt=retry_state.attempt_number,
        wait=retry_state.next_action.sleep if retry_state.next_action else 0,
    )


def resilient_api_call(
    api_name: str,
    retry_on: tuple[type[BaseException], ...] = (Exception,),
    attempts: int = 3,
) -> Callable[[F], F]:
    """Create a retry decorator for an API call.

    Returns a tenacity retry decorator configured with:
    - *attempts* attempts maximum (3 by default)
    - Exponential backoff with jitter (1s initial, 30s max, 5s jitter)
    - Retries only for exceptions of the *retry_on* types
    - Warning log before each retry, error log on final failure
    - Original exception re-raised after exhaustion

    Works for both plain and ``async`` functions.

    Args:
        api_name: Human-readable name for the API (used in logs).
        retry_on: Exception types that trigger a retry.
        attempts: Maximum number of attempts.

    Returns:
        A decorator that wraps the function with retry logic.
    """

    def decorator(func: F) -> F:
        # Store api_name on function for the log hooks
        func._api_name = api_name  # type: ignore[attr-defined]

        wrapped = retry(
            stop=stop_after_attempt(attempts),
            wait=wait_exponential_jitter(initial=1, max=30, jitter=5),
            retry=retry_if_exception_type(retry_on),
            before_sleep=_before_sleep_log,
            retry_error_callback=_log_final_failure,
            reraise=True,
        )(func)

        return wrapped  # type: ignore[return-value]

    return decorator
