"""Retry policy for page fetches.

Failed fetches are retried with exponential backoff. A page that tripped
bot detection is never fetched again within the same run.
"""

import logging

import logfire
from tenacity import RetryCallState, Retrying, stop_after_attempt, wait_exponential

from selgen.exceptions import BotDetectionError, FetchError

logger = logging.getLogger(__name__)

# Upper bound on a single backoff wait, in seconds
MAX_BACKOFF = 10.0


def is_retryable_fetch(retry_state: RetryCallState) -> bool:
    """Retry predicate: plain fetch failures are retried, bot detection is not."""
    outcome = retry_state.outcome
    if outcome is None or not outcome.failed:
        return False
    exception = outcome.exception()
    return isinstance(exception, FetchError) and not isinstance(exception, BotDetectionError)


def log_fetch_retry(retry_state: RetryCallState) -> None:
    """Log the failed attempt before tenacity sleeps."""
    exception = retry_state.outcome.exception() if retry_state.outcome else None
    url = getattr(exception, 'url', None)
    reason = getattr(exception, 'reason', None) or str(exception)
    wait = retry_state.next_action.sleep if retry_state.next_action else 0.0

    logger.warning(f'Fetch attempt {retry_state.attempt_number} failed for {url}: {reason}; retrying in {wait:.1f}s')
    logfire.warn('Retrying fetch', url=url, attempt=retry_state.attempt_number, error=reason)


def fetch_retryer(max_attempts: int = 1, backoff: float = 1.0) -> Retrying:
    """Build the tenacity Retrying used for page fetches.

    Args:
        max_attempts: Total attempts, including the first. Values below 1 mean one attempt.
        backoff: Base wait in seconds, doubled after each failed attempt

    Returns:
        Retrying that re-raises the last FetchError once attempts run out.

    """
    return Retrying(
        stop=stop_after_attempt(max(max_attempts, 1)),
        wait=wait_exponential(multiplier=backoff, min=backoff, max=MAX_BACKOFF),
        retry=is_retryable_fetch,
        before_sleep=log_fetch_retry,
        reraise=True,
    )
