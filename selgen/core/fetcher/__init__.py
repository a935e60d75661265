"""Fetcher factory and document loading."""

import logging

from selgen.core.document import DocumentHandle
from selgen.core.fetcher.base import ContentAnalyzer, HTMLFetcher
from selgen.core.fetcher.simple import SimpleFetcher
from selgen.exceptions import FetchError
from selgen.models.results import FetchResult
from selgen.retry import fetch_retryer

logger = logging.getLogger(__name__)


def create_fetcher(fetcher_type: str = 'simple', **kwargs) -> HTMLFetcher:
    """Create an HTML fetcher.

    Args:
        fetcher_type: Type of fetcher. Only 'simple' is built in.
        **kwargs: Additional arguments for the fetcher

    Returns:
        HTMLFetcher instance

    Raises:
        ValueError: If the fetcher type is unknown.

    """
    fetchers: dict[str, type[HTMLFetcher]] = {
        'simple': SimpleFetcher,
    }

    if fetcher_type not in fetchers:
        raise ValueError(f'Unknown fetcher type: {fetcher_type}. Choose from: {list(fetchers.keys())}')

    return fetchers[fetcher_type](**kwargs)


def _fetch_once(fetcher: HTMLFetcher, url: str) -> FetchResult:
    result = fetcher.fetch(url)
    if not result.success or result.html is None:
        raise FetchError(url, result.block_reason or 'no HTML content received')
    return result


def fetch_page(fetcher: HTMLFetcher, url: str, max_attempts: int = 1, backoff: float = 1.0) -> FetchResult:
    """Fetch a page, retrying failed attempts with exponential backoff.

    Bot detection is never retried.

    Args:
        fetcher: Fetcher to use
        url: URL to fetch
        max_attempts: Total attempts. Defaults to 1 (no retry).
        backoff: Base wait between attempts in seconds, doubled each retry

    Returns:
        Successful FetchResult with HTML.

    Raises:
        FetchError: If every attempt failed (BotDetectionError for blocks).

    """
    for attempt in fetch_retryer(max_attempts=max_attempts, backoff=backoff):
        with attempt:
            return _fetch_once(fetcher, url)

    raise FetchError(url, 'no attempts made')


def fetch_document(fetcher: HTMLFetcher, url: str, max_attempts: int = 1, backoff: float = 1.0) -> DocumentHandle:
    """Fetch a page and parse it into a DocumentHandle.

    Args:
        fetcher: Fetcher to use
        url: URL to fetch
        max_attempts: Total fetch attempts
        backoff: Base wait between attempts in seconds

    Returns:
        Parsed, read-only document.

    Raises:
        FetchError: If the page could not be fetched or parsed.

    """
    result = fetch_page(fetcher, url, max_attempts=max_attempts, backoff=backoff)
    try:
        return DocumentHandle.from_html(result.html or '', url=url)
    except Exception as e:
        logger.exception(f'Failed to parse HTML from {url}')
        raise FetchError(url, f'failed to parse HTML: {e}') from e


__all__ = [
    'ContentAnalyzer',
    'HTMLFetcher',
    'SimpleFetcher',
    'create_fetcher',
    'fetch_document',
    'fetch_page',
]
